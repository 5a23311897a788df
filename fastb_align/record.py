# -*- coding: utf-8 -*-
"""
FASTA record container and its in-place tetrabin codec.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import AlreadyDecodedError, AlreadyEncodedError, InvalidNucleotideError
from .tetrabin import decode_bytes, encode_bytes

logger = logging.getLogger(__name__)


@dataclass
class FastaRecord:
    """
    One FASTA entry.

    ``seq`` holds raw ASCII symbols until :meth:`encode` is called, after which
    it holds one tetrabin code per position. The ``count_*`` and ``score`` slots
    are left for downstream code to fill in; nothing here writes them.
    ``idx`` is only assigned when records are streamed.
    """

    id: str = ""
    description: str = ""
    seq: bytearray = field(default_factory=bytearray)
    count_a: int = 0
    count_t: int = 0
    count_g: int = 0
    count_c: int = 0
    score: int = 0  # e.g. genome completeness
    idx: int = 0
    _encoded: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.seq, bytearray):
            self.seq = bytearray(self.seq)

    @property
    def encoded(self) -> bool:
        return self._encoded

    @property
    def width(self) -> int:
        return len(self.seq)

    def encode(self) -> "FastaRecord":
        """
        Replace every symbol of ``seq`` with its tetrabin code.

        Raises
        ------
        AlreadyEncodedError
            If the record is already encoded.
        InvalidNucleotideError
            If a symbol has no code. ``seq`` is left untouched.
        """
        if self._encoded:
            raise AlreadyEncodedError(self.id)

        packed = encode_bytes(self.seq)
        bad = packed.find(0)
        if bad != -1:
            symbol = chr(self.seq[bad])
            logger.debug("Invalid nucleotide %r at position %d in record %s", symbol, bad, self.id)
            raise InvalidNucleotideError(symbol, bad, self.id)

        self.seq[:] = packed
        self._encoded = True
        return self

    def decode(self) -> "FastaRecord":
        """Inverse of :meth:`encode`; undefined codes decode to NUL bytes."""
        if not self._encoded:
            raise AlreadyDecodedError(self.id)

        self.seq[:] = decode_bytes(self.seq)
        self._encoded = False
        return self

    def sequence(self) -> str:
        """The sequence as text. Only meaningful when the record is decoded."""
        return self.seq.decode("ascii", "replace")


def encode_record(record: FastaRecord) -> FastaRecord:
    return record.encode()


def decode_record(record: FastaRecord) -> FastaRecord:
    return record.decode()
