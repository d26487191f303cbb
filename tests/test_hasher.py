"""
tests/test_hasher.py – unit tests for hasher.py
"""
import hashlib

import pytest

from conftest import HELLO_SHA256
from errors import HashError
from hasher import HashResult, compute_file_hash, hash_bytes, hash_files


def test_hash_bytes_hello():
    assert hash_bytes(b"hello") == HELLO_SHA256


def test_compute_file_hash_matches_hashlib(sample_dir):
    for path in sample_dir.iterdir():
        assert compute_file_hash(str(path)) == hashlib.sha256(path.read_bytes()).hexdigest()


def test_compute_file_hash_missing(tmp_path):
    missing = tmp_path / "gone.txt"
    with pytest.raises(HashError) as exc:
        compute_file_hash(str(missing))
    assert exc.value.filepath == str(missing)
    assert isinstance(exc.value.cause, FileNotFoundError)


def test_hash_files_keeps_order(sample_dir):
    paths = [str(sample_dir / n) for n in ("c.txt", "a.txt")]
    results = hash_files(paths)
    assert [r.name for r in results] == ["c.txt", "a.txt"]
    assert results[1] == HashResult("a.txt", paths[1], digest=HELLO_SHA256)
    assert all(r.ok for r in results)


def test_hash_files_fail_fast(sample_dir):
    paths = [str(sample_dir / "a.txt"), str(sample_dir / "missing.txt")]
    with pytest.raises(HashError):
        hash_files(paths, fail_fast=True)


def test_hash_files_collects_failures(sample_dir):
    paths = [str(sample_dir / "missing.txt"), str(sample_dir / "a.txt")]
    results = hash_files(paths, fail_fast=False)
    assert [r.ok for r in results] == [False, True]
    assert results[0].digest is None
    assert results[0].error
    assert results[1].digest == HELLO_SHA256


def test_hash_files_empty():
    assert hash_files([]) == []


def test_hash_files_progress_bar(sample_dir, capsys):
    paths = [str(sample_dir / "a.txt"), str(sample_dir / "c.txt")]
    results = hash_files(paths, progress=True)
    assert len(results) == 2
    err = capsys.readouterr().err
    assert "Hashing" in err
    assert "2/2" in err
