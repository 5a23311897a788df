# -*- coding: utf-8 -*-
"""
fastb_align: FASTA alignments packed into one tetrabin byte per nucleotide.

    >>> from fastb_align import load_alignment, open_fasta
    >>> with open_fasta("aln.fasta") as fh:
    ...     records = load_alignment(fh)
    >>> records[0].decode().sequence()
    'ACGT'
"""

__version__ = "1.0.0"

from .alignment import AlignmentStream, iter_alignment, load_alignment, stream_alignment
from .errors import (
    AlreadyDecodedError,
    AlreadyEncodedError,
    BadlyFormedFastaError,
    DifferentWidthsError,
    EncodingStateError,
    EndOfStream,
    FastaDataError,
    FastbAlignError,
    InvalidNucleotideError,
    TruncatedHeaderError,
)
from .reader import Reader, open_fasta
from .record import FastaRecord, decode_record, encode_record
from .tetrabin import ALPHABET, DECODING_TABLE, ENCODING_TABLE, decode_symbol, encode_symbol

__all__ = [
    "__version__",
    "ALPHABET",
    "ENCODING_TABLE",
    "DECODING_TABLE",
    "encode_symbol",
    "decode_symbol",
    "FastaRecord",
    "encode_record",
    "decode_record",
    "Reader",
    "open_fasta",
    "load_alignment",
    "iter_alignment",
    "stream_alignment",
    "AlignmentStream",
    "FastbAlignError",
    "EncodingStateError",
    "AlreadyEncodedError",
    "AlreadyDecodedError",
    "FastaDataError",
    "BadlyFormedFastaError",
    "TruncatedHeaderError",
    "InvalidNucleotideError",
    "DifferentWidthsError",
    "EndOfStream",
]
