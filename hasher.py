
# hasher.py
import hashlib
import logging
import os
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm

from errors import HashError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HashResult:
    name: str
    path: str
    digest: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


def hash_bytes(data):
    """Lowercase hex SHA-256 of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def compute_file_hash(filepath):
    """Read the whole file and return its SHA-256 hex digest."""
    try:
        with open(filepath, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise HashError(filepath, e) from e
    return hash_bytes(data)


def hash_files(filepaths, fail_fast=True, progress=False):
    """
    Hash each file in order and return a list of HashResult.

    With fail_fast the first unreadable file raises HashError and nothing is
    returned. Otherwise the failure is recorded on its result and the rest of
    the batch is still hashed.
    """
    results = []
    for filepath in tqdm(filepaths, desc="Hashing", unit="file", disable=not progress):
        name = os.path.basename(filepath)
        try:
            digest = compute_file_hash(filepath)
        except HashError as e:
            if fail_fast:
                raise
            logger.warning("Skipping %s: %s", name, e.cause)
            results.append(HashResult(name, filepath, error=str(e.cause)))
            continue
        results.append(HashResult(name, filepath, digest=digest))
    return results
