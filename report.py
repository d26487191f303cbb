
# report.py
import logging
import os
from datetime import datetime

from config import DATE_FORMAT, OUTPUT_PREFIX
from errors import ReportError

logger = logging.getLogger(__name__)


def date_stamp(now=None):
    """YYMMDD for the given (default: current local) time."""
    return (now or datetime.now()).strftime(DATE_FORMAT)


def output_path(output_dir, now=None):
    return os.path.join(output_dir, f"{OUTPUT_PREFIX}{date_stamp(now)}.txt")


def format_record(name, digest, clean=False):
    if clean:
        return digest
    return f"{name}: {digest}"


def printable(text):
    """Replace undecodable file-name bytes so the console never sees lone surrogates."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def write_report(results, output_dir, clean=False, verbose=False, now=None):
    """
    Write one line per successful HashResult to the dated report file.

    The file is truncated if it already exists, so a second run on the same
    day replaces the first run's report. Returns the report path.
    """
    report_file = output_path(output_dir, now)
    try:
        # surrogateescape writes undecodable file names back as their raw bytes
        f = open(report_file, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise ReportError(f"Cannot create report {report_file}: {e}") from e

    written = 0
    try:
        with f:
            for result in results:
                if not result.ok:
                    continue
                if verbose:
                    print(printable(format_record(result.name, result.digest)))
                f.write(format_record(result.name, result.digest, clean) + "\n")
                written += 1
    except OSError as e:
        raise ReportError(f"Failed writing report {report_file}: {e}") from e

    logger.info("Wrote %d record(s) to %s", written, report_file)
    print(f"\nHashes saved to {printable(report_file)}")
    return report_file
