#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fastb-align command line.

  fastb-align load   ALN.fasta [--tsv OUT]   bulk load + per-record summary
  fastb-align stream ALN.fasta               threaded streaming with progress
  fastb-align verify ALN.fasta               round-trip check against Biopython

Set FASTB_ALIGN_LOGLEVEL=DEBUG (or pass -v) for per-record logging.
"""

from __future__ import annotations

import argparse
import gzip
import hashlib
import io
import logging
from typing import List, Optional

from Bio import SeqIO
from tqdm import tqdm

from . import __version__
from .alignment import AlignmentStream, load_alignment
from .composition import alignment_frame, tally_bases
from .errors import FastaDataError
from .log import setup_logging
from .reader import open_fasta

logger = logging.getLogger("fastb_align.cli")


def _open_text(path: str) -> io.TextIOBase:
    if path.endswith(".gz"):
        return gzip.open(path, "rt", encoding="utf-8")
    return open(path, "r", encoding="utf-8")


def _sha256(seq: str) -> str:
    return hashlib.sha256(seq.encode("utf-8")).hexdigest()


# ------------------------
# Subcommands
# ------------------------
def cmd_load(args: argparse.Namespace) -> int:
    with open_fasta(args.input) as fh:
        records = load_alignment(fh)

    for record in records:
        tally_bases(record)
        logger.debug("%s | width=%d | A=%d T=%d G=%d C=%d", record.id, record.width,
                     record.count_a, record.count_t, record.count_g, record.count_c)

    frame = alignment_frame(records)
    logger.info("Alignment %s: %d record(s) x %d column(s)", args.input, len(frame),
                records[0].width if records else 0)
    if args.tsv:
        frame.to_csv(args.tsv, sep="\t", index=False)
        logger.info("Summary written: %s", args.tsv)
    return 0


def cmd_stream(args: argparse.Namespace) -> int:
    count = 0
    width = 0
    with open_fasta(args.input) as fh:
        for record in tqdm(AlignmentStream(fh), desc="Streaming", unit=" records", disable=args.quiet):
            logger.debug("Record %d | %s | width=%d", record.idx, record.id, record.width)
            count += 1
            width = record.width
    logger.info("Streamed %d record(s) x %d column(s) from %s", count, width, args.input)
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    with open_fasta(args.input) as fh:
        records = load_alignment(fh)
    with _open_text(args.input) as fh:
        originals = list(SeqIO.parse(fh, "fasta"))

    id_mismatch = 0
    desc_mismatch = 0
    hash_mismatch = 0

    if len(originals) != len(records):
        logger.error("Record count differs: %d decoded vs %d parsed by Biopython",
                     len(records), len(originals))

    for i, (record, original) in enumerate(zip(records, originals)):
        record.decode()
        if record.id != original.id:
            id_mismatch += 1
            logger.warning("ID mismatch at record %d: %s vs %s", i, record.id, original.id)
        if record.description.rstrip() != original.description:
            desc_mismatch += 1
            logger.warning("Description mismatch for %s", record.id)
        if _sha256(record.sequence()) != _sha256(str(original.seq).upper()):
            hash_mismatch += 1
            logger.warning("SHA256 mismatch for %s", record.id)

    logger.info("Integrity summary:")
    logger.info("  Records decoded: %d", len(records))
    logger.info("  ID mismatches: %d", id_mismatch)
    logger.info("  Description mismatches: %d", desc_mismatch)
    logger.info("  SHA256 mismatches: %d", hash_mismatch)

    if len(originals) != len(records) or any([id_mismatch, desc_mismatch, hash_mismatch]):
        logger.error("Integrity check: ISSUES DETECTED (see counts above).")
        return 1
    logger.info("Integrity check: all decoded records match the original FASTA.")
    return 0


# ------------------------
# Entry point
# ------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastb-align",
        description="Tetrabin byte encoding of FASTA alignments",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every record (DEBUG level)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_load = sub.add_parser("load", help="Load a whole alignment and summarise it")
    p_load.add_argument("input", help="Path to the input FASTA file (.gz accepted)")
    p_load.add_argument("--tsv", help="Write the per-record summary to this TSV file")
    p_load.set_defaults(func=cmd_load)

    p_stream = sub.add_parser("stream", help="Stream an alignment record by record")
    p_stream.add_argument("input", help="Path to the input FASTA file (.gz accepted)")
    p_stream.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    p_stream.set_defaults(func=cmd_stream)

    p_verify = sub.add_parser("verify", help="Check the encode/decode round trip against Biopython")
    p_verify.add_argument("input", help="Path to the input FASTA file (.gz accepted)")
    p_verify.set_defaults(func=cmd_verify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)
    try:
        return args.func(args)
    except FastaDataError as e:
        logger.error("%s: %s", args.input, e)
        return 1
    except (OSError, EOFError) as e:
        logger.error("Failed to read %s: %s", args.input, e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
