# -*- coding: utf-8 -*-
"""
Per-record summaries for downstream consumers.

The reader and codec never touch the ``count_*`` / ``score`` slots of a
record; these helpers are one way to fill them.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from .record import FastaRecord
from .tetrabin import encode_symbol

_BASES = "ATGC"

FRAME_COLUMNS = ["id", "description", "idx", "width", "count_a", "count_t", "count_g", "count_c", "score"]


def tally_bases(record: FastaRecord) -> FastaRecord:
    """
    Count the definite bases A, T, G and C of a record.

    Works on encoded and decoded records alike; ambiguity codes, gaps and
    unknowns are not counted. Returns the same record.
    """
    counts = np.bincount(np.frombuffer(bytes(record.seq), dtype=np.uint8), minlength=256)
    for base in _BASES:
        if record.encoded:
            n = counts[encode_symbol(ord(base))]
        else:
            n = counts[ord(base)] + counts[ord(base.lower())]
        setattr(record, f"count_{base.lower()}", int(n))
    return record


def alignment_frame(records: Iterable[FastaRecord]) -> pd.DataFrame:
    """One row per record with its identifiers, width and summary slots."""
    rows = [
        {
            "id": r.id,
            "description": r.description,
            "idx": r.idx,
            "width": r.width,
            "count_a": r.count_a,
            "count_t": r.count_t,
            "count_g": r.count_g,
            "count_c": r.count_c,
            "score": r.score,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
