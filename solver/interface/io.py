# -*- coding: utf-8 -*-
# Lagrangix/solver/interface/io.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/15/2026 (Updated: 6/20/2026)

Purpose
-------
Write the immersed-boundary input files for one structure and read them back.

    <name>.vertex   point coordinates (line order = 1-based point index)
    <name>.spring   elastic links
    <name>.beam     bending elements
    <name>.target   tethered points
    <name>.porous   porosity markers

Main Tasks
----------
    1. Atomic UTF-8 writes (temp file in the target directory + os.replace).
    2. `write_structure`: emit all five tables for an ImmersedStructure.
    3. `read_vertices` / `read_records`: parse files, verify the count header and
       the column layout, raise RenderError on mismatch.

Notes
-----
- OSError from the filesystem (permissions, full disk) is not caught; a partially
  written run is not cleaned up.
"""

import os
import tempfile
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence
import numpy as np
from structure.errors import RenderError
from .formats import COLUMNS, INDEX_COLUMNS, render_table, render_vertices

logger = logging.getLogger(__name__)

__all__ = [
    "write_text_atomic",
    "write_vertices",
    "write_table",
    "write_structure",
    "table_paths",
    "read_vertices",
    "read_records",
]


def _file_mode() -> int:
    """Permission bits a plain open(path, "w") would give under the current umask."""
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def write_text_atomic(text: str, path: str) -> str:
    """
    Atomic UTF-8 write; creates the parent directory when missing.

    The file gets the umask-derived mode of a regular write (not the 0600 of the
    temp file). On failure the temp file is removed and the target is untouched.
    """
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=str(p.parent), delete=False)
    tmp_name = tf.name
    try:
        try:
            tf.write(text)
        finally:
            tf.close()
        os.chmod(tmp_name, _file_mode())
        os.replace(tmp_name, str(p))
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return str(p)


def write_vertices(points: np.ndarray, path: str) -> str:
    out = write_text_atomic(render_vertices(points), path)
    logger.info("[io] Vertex file written to: %s", out)
    return out


def write_table(records: Iterable[Sequence], kind: str, path: str) -> str:
    out = write_text_atomic(render_table(records, kind), path)
    logger.info("[io] %s file written to: %s", kind.capitalize(), out)
    return out


def table_paths(name: str, out_dir: str = ".") -> Dict[str, str]:
    """Output path per extension for a structure name."""
    return {kind: os.path.join(out_dir, "{}.{}".format(name, kind)) for kind in COLUMNS}


def write_structure(structure, out_dir: str = ".") -> Dict[str, str]:
    """
    Write all five solver input files for an ImmersedStructure.

    Args
    ----
    structure : ImmersedStructure
        Geometry plus topology tables (see `structure.assembly`).
    out_dir : str
        Destination directory (created when missing).

    Returns
    -------
    Dict[str, str]
        Mapping extension -> written path.
    """
    paths = table_paths(structure.name, out_dir)
    write_vertices(structure.points, paths["vertex"])
    write_table(structure.springs, "spring", paths["spring"])
    write_table(structure.beams, "beam", paths["beam"])
    write_table(structure.targets, "target", paths["target"])
    write_table(structure.porous, "porous", paths["porous"])
    return paths


# ---------- read-back ----------
def _parse(path: str, kind: str) -> np.ndarray:
    with open(path, "r", encoding="utf-8") as f:
        lines = [ln.strip() for ln in f if ln.strip()]
    if not lines:
        raise RenderError("Empty {} file.".format(kind), {"path": path})
    try:
        count = int(lines[0])
    except ValueError:
        raise RenderError("First line must be the record count.", {"path": path, "line": lines[0]})

    body = lines[1:]
    if len(body) != count:
        raise RenderError(
            "Record count header disagrees with file body.",
            {"path": path, "header": count, "records": len(body)},
        )

    ncol = COLUMNS[kind]
    rows = np.empty((count, ncol), dtype=np.float64)
    for i, ln in enumerate(body):
        parts = ln.split()
        if len(parts) != ncol:
            raise RenderError(
                "Expected {} columns per record.".format(ncol),
                {"path": path, "record": i + 1, "got": len(parts)},
            )
        try:
            rows[i] = [float(v) for v in parts]
        except ValueError:
            raise RenderError("Non-numeric field.", {"path": path, "record": i + 1, "line": ln})
    return rows


def read_vertices(path: str) -> np.ndarray:
    """
    Read a `.vertex` file into an (N, 2) float64 array (row i-1 = point i).

    Raises
    ------
    RenderError
        On a malformed header, count mismatch or bad record.
    """
    return _parse(path, "vertex")


def read_records(path: str, kind: Optional[str] = None) -> np.ndarray:
    """
    Read a topology file (`spring`, `beam`, `target`, `porous`) into a float array.
    When `kind` is omitted it is taken from the file extension.

    Leading index columns are checked to hold whole numbers >= 1.

    Returns
    -------
    np.ndarray
        (count, columns) array; cast index columns with `.astype(int)` as needed.
    """
    if kind is None:
        kind = Path(path).suffix.lstrip(".")
    if kind not in COLUMNS or kind == "vertex":
        raise ValueError("Unknown topology table kind '{}'".format(kind))
    rows = _parse(path, kind)
    idx = rows[:, :INDEX_COLUMNS[kind]]
    if idx.size and (np.any(idx < 1) or np.any(idx != np.floor(idx))):
        raise RenderError("Point indices must be whole numbers >= 1.", {"path": path})
    return rows
