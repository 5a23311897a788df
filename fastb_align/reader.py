# -*- coding: utf-8 -*-
"""
Line-oriented FASTA reader.

``Reader.read()`` returns exactly one record per call. After the last record,
the next call raises ``EndOfStream`` (an ``EOFError``); that is the clean end
of the file, not an error. A stream that stops inside a header line raises
``TruncatedHeaderError`` instead: a file may not end while a header is expected.

Record layout
-------------
  >ID free text description\\n      header: first token is the ID
  ACGTACGT\\n                        sequence lines, any number, any length
  acgt-N?\\n                         (blank lines fold in as nothing)

Both ``\\n`` and ``\\r\\n`` terminators are stripped. Sequence bytes are kept as
they appear in the file; validation happens when the record is encoded.
"""

from __future__ import annotations

import gzip
import io
import logging
import os
from typing import BinaryIO, Iterator, Union

from .errors import BadlyFormedFastaError, EndOfStream, TruncatedHeaderError
from .record import FastaRecord

logger = logging.getLogger(__name__)

_MARKER = b">"


def _strip_terminator(line: bytes) -> bytes:
    """Drop a trailing \\n or \\r\\n, leave anything else alone."""
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


def _binary(stream) -> BinaryIO:
    if isinstance(stream, io.TextIOBase):
        try:
            return stream.buffer
        except AttributeError:
            raise TypeError("Reader needs a binary stream, got an in-memory text stream") from None
    return stream


class Reader:
    """
    Parse FASTA records one at a time from a binary stream.

    Streams that expose ``peek()`` (``io.BufferedReader``, ``gzip.GzipFile``)
    are peeked directly; anything else gets a one-byte look-ahead kept here.
    The stream is never closed by the reader.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream  # a text wrapper closes its buffer when collected
        self._handle = _binary(stream)
        self._can_peek = hasattr(self._handle, "peek")
        self._pushback = b""

    # ------------------------
    # low level stream access
    # ------------------------
    def _peek(self) -> bytes:
        if self._can_peek:
            return self._handle.peek(1)[:1]
        if not self._pushback:
            self._pushback = self._handle.read(1)
        return self._pushback

    def _readline(self) -> bytes:
        if not self._pushback:
            return self._handle.readline()
        head, self._pushback = self._pushback, b""
        if head == b"\n":
            return head
        return head + self._handle.readline()

    # ------------------------
    # state machine
    # ------------------------
    def _read_header(self, record: FastaRecord) -> None:
        line = self._readline()
        if not line:
            raise EndOfStream("end of FASTA stream")
        if line[:1] != _MARKER:
            logger.debug("Expected a FASTA header, got %r", line[:40])
            raise BadlyFormedFastaError(f"Badly formed Fasta: expected '>' at start of {line[:40]!r}")
        if not line.endswith(b"\n"):
            logger.debug("Stream ended inside header %r", line[:80])
            raise TruncatedHeaderError(line)

        header = _strip_terminator(line)[1:]
        fields = header.split()
        if not fields:
            logger.debug("Empty FASTA header")
            raise BadlyFormedFastaError("Badly formed Fasta: empty header line")

        record.id = fields[0].decode("utf-8", "replace")
        record.description = header.decode("utf-8", "replace")

    def read(self) -> FastaRecord:
        """
        Read the next record.

        Raises
        ------
        EndOfStream
            No records are left (an EOFError subclass).
        BadlyFormedFastaError
            The next line is not a header.
        OSError
            Propagated from the underlying stream.
        """
        record = FastaRecord()
        self._read_header(record)

        buffer = bytearray()
        while True:
            peek = self._peek()
            if not peek or peek == _MARKER:
                break
            # A last line without a newline is fine; the next peek sees EOF.
            buffer += _strip_terminator(self._readline())

        record.seq = buffer
        logger.debug("Read record %s (%d symbols)", record.id, len(buffer))
        return record

    def __iter__(self) -> Iterator[FastaRecord]:
        while True:
            try:
                yield self.read()
            except EndOfStream:
                return


def open_fasta(path: Union[str, os.PathLike]) -> BinaryIO:
    """Open a plain or gzip-compressed FASTA file for binary reading."""
    path = os.fspath(path)
    if path.endswith(".gz"):
        return gzip.open(path, "rb")
    return open(path, "rb")
