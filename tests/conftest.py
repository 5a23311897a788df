"""pytest configuration to ensure project root is on sys.path.

Allows `import fastb_align` during test discovery without an install.
"""
import gzip
import io
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import pytest

TWO_RECORDS = b">s1 desc\nACGT\n>s2\nAC-N\n"
UNEVEN = b">a\nACGT\n>b\nAC\n"


@pytest.fixture
def two_records():
    return TWO_RECORDS


@pytest.fixture
def write_fasta(tmp_path):
    """Write FASTA bytes to a file (gzip-compressed for .gz names) and return its path."""
    def _write(data: bytes, name: str = "aln.fasta") -> Path:
        path = tmp_path / name
        if name.endswith(".gz"):
            with gzip.open(path, "wb") as fh:
                fh.write(data)
        else:
            path.write_bytes(data)
        return path
    return _write


class FailingRaw(io.RawIOBase):
    """Raw stream that hands out ``data`` once, then fails every read."""

    def __init__(self, data: bytes, message: str = "device not ready"):
        self._data = data
        self._message = message

    def readable(self):
        return True

    def readinto(self, b):
        if not self._data:
            raise OSError(self._message)
        n = min(len(b), len(self._data))
        b[:n] = self._data[:n]
        self._data = self._data[n:]
        return n
