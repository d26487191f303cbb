# config.py
import logging
import os
import sys
from dataclasses import dataclass

DEFAULT_EXT = "*"  # matches every file with an extension
OUTPUT_PREFIX = "hashes-output-"
DATE_FORMAT = "%y%m%d"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
ON_ERROR_CHOICES = ("abort", "skip")


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def normalize_ext(ext):
    """Return the extension filter without a leading dot ("" and None mean all)."""
    if not ext:
        return DEFAULT_EXT
    ext = ext.lstrip(".")
    return ext or DEFAULT_EXT


@dataclass(frozen=True)
class RunConfig:
    input_dir: str
    output_dir: str
    ext: str = DEFAULT_EXT
    clean: bool = False
    verbose: bool = False
    on_error: str = "abort"
    progress: bool = True

    @property
    def fail_fast(self):
        return self.on_error == "abort"

    @classmethod
    def from_args(cls, args):
        """Build a config from parsed CLI args, filling in defaults."""
        cwd = os.getcwd()
        return cls(
            input_dir=args.input or cwd,
            output_dir=args.output or cwd,
            ext=normalize_ext(args.ext),
            clean=bool(args.clean),
            verbose=bool(args.verbose),
            on_error=args.on_error,
            progress=not args.no_progress,
        )
