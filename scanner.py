# scanner.py
import glob
import logging
import os

from config import DEFAULT_EXT
from errors import GlobPatternError

logger = logging.getLogger(__name__)


def _bad(ext, why):
    return GlobPatternError(f"Invalid extension filter {ext!r}: {why}")


def _class_char(ext, i):
    """Index just past one character of a [...] class, or None if there is none."""
    if i >= len(ext) or ext[i] in "-]":
        return None
    if ext[i] == "\\":
        return i + 2 if i + 1 < len(ext) else None
    return i + 1


def _skip_class(ext, i):
    """Index just past the ']' closing the class that opens before i."""
    if i < len(ext) and ext[i] in "^!":
        i += 1
    ranges = 0
    while True:
        if i < len(ext) and ext[i] == "]" and ranges:
            return i + 1
        i = _class_char(ext, i)
        if i is not None and i < len(ext) and ext[i] == "-":
            i = _class_char(ext, i + 1)
        if i is None:
            raise _bad(ext, "malformed character class")
        ranges += 1


def _check_ext(ext):
    seps = {"/", os.sep, os.altsep} - {None}
    if any(sep in ext for sep in seps) or "\x00" in ext:
        raise _bad(ext, "must not contain a path separator")

    # same rules as Go's filepath.Match: classes need a closing ']' and at
    # least one range, range ends can't be '-' or ']', '\' must escape something
    i = 0
    while i < len(ext):
        if ext[i] == "\\":
            if i + 1 == len(ext):
                raise _bad(ext, "trailing '\\'")
            i += 2
        elif ext[i] == "[":
            i = _skip_class(ext, i + 1)
        else:
            i += 1


def build_pattern(input_dir, ext=DEFAULT_EXT):
    """Glob pattern for the files directly inside input_dir with the given extension."""
    _check_ext(ext)
    return os.path.join(input_dir, "*." + ext)


def find_files(input_dir, ext=DEFAULT_EXT):
    """
    Non-recursive match of <input_dir>/*.<ext>.
    Returns absolute paths of everything but directories, sorted by base name.
    Broken symlinks are kept so hashing them fails like any unreadable file.
    """
    pattern = build_pattern(input_dir, ext)
    logger.debug("Globbing %s", pattern)

    # root_dir keeps glob metacharacters in the directory name literal
    names = glob.glob("*." + ext, root_dir=input_dir, include_hidden=True)

    files = []
    for name in sorted(names):
        filepath = os.path.abspath(os.path.join(input_dir, name))
        if not os.path.isdir(filepath):
            files.append(filepath)
    return files
