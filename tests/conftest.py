import sys
from pathlib import Path

import pytest

_HERE = Path(__file__).resolve().parent.parent
if str(_HERE) not in sys.path:
    sys.path.insert(0, str(_HERE))

HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


@pytest.fixture
def sample_dir(tmp_path):
    """Input directory with a few files of mixed extensions."""
    src = tmp_path / "in"
    src.mkdir()
    (src / "a.txt").write_bytes(b"hello")
    (src / "c.txt").write_bytes(b"")
    (src / "b.bin").write_bytes(b"\x00\x01\x02")
    (src / "noext").write_bytes(b"ignored by *.*")
    return src
