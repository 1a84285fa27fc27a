# -*- coding: utf-8 -*-
# Lagrangix/solver/interface/formats.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/14/2026 (Updated: 5/2/2026)

Purpose
-------
Record formats of the solver input files and rendering of whole tables to text. Every
file has the same shape:

    <record count>
    <record 1>
    ...

Coordinates, stiffnesses, lengths and the porosity code use 16-digit scientific
notation (`%1.16e`); counts and point indices are plain integers.

Main Tasks
----------
    1. Hold one format string and column count per file extension.
    2. Render a sequence of records (tuples) to the full file text.
"""

import io
from typing import Iterable, Sequence
import numpy as np

__all__ = ["RECORD_FORMATS", "COLUMNS", "INDEX_COLUMNS", "EXTENSIONS", "render_table", "render_vertices"]

RECORD_FORMATS = {
    "vertex": "%1.16e %1.16e",
    "spring": "%d %d %1.16e %1.16e",
    "beam": "%d %d %d %1.16e %1.16e",
    "target": "%d %1.16e",
    "porous": "%d %1.16e %1.16e",
}

COLUMNS = {kind: fmt.count("%") for kind, fmt in RECORD_FORMATS.items()}

# Leading columns that hold 1-based point indices
INDEX_COLUMNS = {"vertex": 0, "spring": 2, "beam": 3, "target": 1, "porous": 1}

EXTENSIONS = tuple(RECORD_FORMATS.keys())


def render_table(records: Iterable[Sequence], kind: str) -> str:
    """
    Render records of one table as file text (count header + one line per record).

    Args
    ----
    records : Iterable[Sequence]
        Records as tuples (NamedTuples from `structure` work directly).
    kind : str
        One of EXTENSIONS.

    Returns
    -------
    str
        Complete file text with a trailing newline.
    """
    if kind not in RECORD_FORMATS:
        raise ValueError("Unknown table kind '{}'".format(kind))
    fmt = RECORD_FORMATS[kind]
    rows = list(records)
    buf = io.StringIO()
    buf.write("%d\n" % len(rows))
    for rec in rows:
        buf.write(fmt % tuple(rec))
        buf.write("\n")
    return buf.getvalue()


def render_vertices(points: np.ndarray) -> str:
    """Vertex file text for an (N, 2) array, one point per line in index order."""
    P = np.asarray(points, dtype=np.float64)
    if P.ndim != 2 or P.shape[1] != 2:
        raise ValueError("Expected (N, 2) array for points, got shape {}.".format(P.shape))
    return render_table(((float(x), float(y)) for x, y in P), "vertex")
