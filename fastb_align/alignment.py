# -*- coding: utf-8 -*-
"""
Alignment loading and streaming.

Every record is tetrabin-encoded as soon as it is parsed, and every record must
have the width of the first one.

  - load_alignment:   whole file into a list (blocking, all or nothing)
  - iter_alignment:   lazy generator, records carry their zero-based ``idx``
  - stream_alignment: producer for a thread; records / errors / done queues
  - AlignmentStream:  runs stream_alignment on a daemon thread and iterates it
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import BinaryIO, Iterator, List, Optional

from .errors import DifferentWidthsError, FastaDataError
from .reader import Reader
from .record import FastaRecord

logger = logging.getLogger(__name__)


def _aligned_records(reader: Reader) -> Iterator[FastaRecord]:
    width: Optional[int] = None
    for record in reader:
        record.encode()
        if width is None:
            width = record.width
        elif record.width != width:
            logger.debug(
                "Record %s has width %d, alignment width is %d", record.id, record.width, width
            )
            raise DifferentWidthsError(width, record.width, record.id)
        yield record


def load_alignment(stream: BinaryIO) -> List[FastaRecord]:
    """
    Read, encode and width-check every record of a FASTA stream.

    Returns the records in file order. Any error aborts the whole load; no
    partial result is returned.
    """
    records = list(_aligned_records(Reader(stream)))
    logger.info(
        "Loaded %d record(s), width %d", len(records), records[0].width if records else 0
    )
    return records


def iter_alignment(stream: BinaryIO) -> Iterator[FastaRecord]:
    """Yield encoded records one at a time, numbering them from 0."""
    for idx, record in enumerate(_aligned_records(Reader(stream))):
        record.idx = idx
        yield record


def stream_alignment(
    stream: BinaryIO,
    records: "queue.Queue[FastaRecord]",
    errors: "queue.Queue[BaseException]",
    done: "queue.Queue[bool]",
) -> None:
    """
    Push encoded records onto ``records`` as they are parsed.

    Exactly one terminal signal is sent: ``True`` on ``done`` after the last
    record, or the exception on ``errors``. Any exception counts, including
    failures of the underlying stream (OSError, a closed file, truncated gzip).
    Nothing is sent after it. With a bounded ``records`` queue the producer
    blocks until the consumer catches up.
    """
    count = 0
    try:
        for record in iter_alignment(stream):
            records.put(record)
            count += 1
    except FastaDataError as e:
        logger.debug("Streaming stopped after %d record(s): %s", count, e)
        errors.put(e)
        return
    except Exception as e:
        # any failure must still reach the consumer as the terminal signal
        logger.debug("Stream failed after %d record(s)", count, exc_info=True)
        errors.put(e)
        return

    logger.info("Streamed %d record(s)", count)
    done.put(True)


class AlignmentStream:
    """
    Iterate over an alignment parsed on a background thread.

    The record queue holds a single record, so the producer stays at most one
    record ahead of the consumer. Errors raised by the producer are re-raised
    from the iterator. Stopping iteration early abandons the daemon thread;
    closing ``stream`` is up to the caller.

    >>> with open_fasta("aln.fasta") as fh:
    ...     for record in AlignmentStream(fh):
    ...         consume(record)
    """

    poll_interval = 0.05

    def __init__(self, stream: BinaryIO, maxsize: int = 1):
        self.records: "queue.Queue[FastaRecord]" = queue.Queue(maxsize=maxsize)
        self.errors: "queue.Queue[BaseException]" = queue.Queue(maxsize=1)
        self.done: "queue.Queue[bool]" = queue.Queue(maxsize=1)
        self._thread = threading.Thread(
            target=stream_alignment,
            args=(stream, self.records, self.errors, self.done),
            name="fastb-align-stream",
            daemon=True,
        )

    def start(self) -> "AlignmentStream":
        if self._thread.ident is None:
            self._thread.start()
        return self

    def join(self, timeout: Optional[float] = None) -> None:
        self._thread.join(timeout)

    def _drain(self) -> Iterator[FastaRecord]:
        while True:
            try:
                yield self.records.get_nowait()
            except queue.Empty:
                return

    def __iter__(self) -> Iterator[FastaRecord]:
        self.start()
        while True:
            try:
                record = self.records.get(timeout=self.poll_interval)
            except queue.Empty:
                pass
            else:
                yield record
                continue

            # Terminal signals are sent after the last record put completes,
            # so whatever is still queued belongs before them.
            if not self.errors.empty():
                yield from self._drain()
                raise self.errors.get()
            if not self.done.empty():
                yield from self._drain()
                self.done.get()
                return
