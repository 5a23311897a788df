# -*- coding: utf-8 -*-
"""
Exception hierarchy for fastb_align.

Two families:
  - EncodingStateError: a record was encoded twice or decoded twice. This is a
    caller bug and should never happen in a well-behaved pipeline.
  - FastaDataError: the input itself is bad (malformed header, invalid
    nucleotide, alignment with differing widths). Callers are expected to catch
    these at their boundary and report them.

Underlying I/O failures are not wrapped; OSError propagates as-is.
"""

from __future__ import annotations

from typing import Optional


class FastbAlignError(Exception):
    """Base class for every error raised by fastb_align."""


# -----------------------------------------------------------------------------
# Contract violations
# -----------------------------------------------------------------------------
class EncodingStateError(FastbAlignError, RuntimeError):
    """Codec applied to a record in the wrong state."""


class AlreadyEncodedError(EncodingStateError):
    def __init__(self, record_id: str = ""):
        self.record_id = record_id
        super().__init__(f"Fasta record is already encoded: {record_id!r}")


class AlreadyDecodedError(EncodingStateError):
    def __init__(self, record_id: str = ""):
        self.record_id = record_id
        super().__init__(f"Fasta record is already decoded: {record_id!r}")


# -----------------------------------------------------------------------------
# Data errors
# -----------------------------------------------------------------------------
class FastaDataError(FastbAlignError, ValueError):
    """The FASTA input cannot be turned into a valid alignment."""


class BadlyFormedFastaError(FastaDataError):
    def __init__(self, message: str = "Badly formed Fasta"):
        super().__init__(message)


class TruncatedHeaderError(BadlyFormedFastaError):
    """The stream ended in the middle of a header line."""

    def __init__(self, header: bytes = b""):
        self.header = header
        super().__init__(
            "Badly formed Fasta: stream ended inside header line "
            f"{header[:80].decode('ascii', 'replace')!r}"
        )


class InvalidNucleotideError(FastaDataError):
    def __init__(self, symbol: str, position: int, record_id: Optional[str] = None):
        self.symbol = symbol
        self.position = position
        self.record_id = record_id
        where = f" in record {record_id!r}" if record_id else ""
        super().__init__(
            f"invalid nucleotide in file: {symbol!r} at position {position}{where}"
        )


class DifferentWidthsError(FastaDataError):
    def __init__(self, expected: int, found: int, record_id: str = ""):
        self.expected = expected
        self.found = found
        self.record_id = record_id
        super().__init__(
            "Different width sequences in alignment: "
            f"expected {expected}, record {record_id!r} has {found}"
        )


# -----------------------------------------------------------------------------
# End of stream
# -----------------------------------------------------------------------------
class EndOfStream(EOFError):
    """
    No more records: the stream ended cleanly between records.

    Subclasses EOFError so plain ``except EOFError`` works, while library loops
    catch only this class and let other EOFErrors (e.g. a truncated gzip member)
    through as failures.
    """
