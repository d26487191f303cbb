# main.py

import argparse
import logging
import sys

import config
from errors import AhashError
from hasher import hash_files
from report import printable, write_report
from scanner import find_files

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="ahash", description="Hash files in a directory")
    parser.add_argument("-i", "--input", default="", help="Input directory (default: current directory)")
    parser.add_argument("-o", "--output", default="", help="Output directory (default: current directory)")
    parser.add_argument("-e", "--ext", default="", help="File extension to hash (e.g. jar or .jar, default: all files)")
    parser.add_argument("-c", "--clean", action="store_true", help="Clean output (no file names)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each hash to console")
    parser.add_argument("--on-error", choices=config.ON_ERROR_CHOICES, default="abort",
                        help="abort on the first unreadable file, or skip it and continue (default: abort)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_banner(cfg):
    print("Welcome to Axle Hasher - A simple multi-file CLI tool")
    print(f"INPUT: {printable(cfg.input_dir)}")
    print(f"OUTPUT: {printable(cfg.output_dir)}")
    print(f"Clean Output Logs: {str(cfg.clean).lower()}")
    print(f"Using Verbose Console Logs: {str(cfg.verbose).lower()}")
    print(f"Filtering Extensions: {cfg.ext}")


def run(cfg):
    """Enumerate, hash and report. Returns the path of the written report."""
    # Step 1: Find files
    files = find_files(cfg.input_dir, cfg.ext)
    logger.info("Matched %d file(s)", len(files))

    # Step 2: Hash them
    results = hash_files(files, fail_fast=cfg.fail_fast, progress=cfg.progress)
    failed = [r for r in results if not r.ok]
    if failed:
        logger.warning("Skipped %d unreadable file(s)", len(failed))

    # Step 3: Write the report
    return write_report(results, cfg.output_dir, clean=cfg.clean, verbose=cfg.verbose)


def main(argv=None):
    args = build_parser().parse_args(argv)
    config.setup_logging()
    cfg = config.RunConfig.from_args(args)

    print_banner(cfg)
    try:
        run(cfg)
    except AhashError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
