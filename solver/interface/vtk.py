# -*- coding: utf-8 -*-
# Lagrangix/solver/interface/vtk.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 5/2/2026

Purpose
-------
Export a generated structure as an unstructured VTK file (.vtu) via `meshio`, so the
springs, tethers and porosity codes can be inspected in ParaView next to solver output.

Main Tasks
----------
    1. Pad the (N, 2) Lagrangian points to 3D (z = 0).
    2. Emit springs as "line" cells and target points as "vertex" cells (0-based ids).
    3. Attach point data: chain id, porosity code, target stiffness.

Notes
-----
- The solver never reads this file; it is a QA artifact only.
"""

import logging
import numpy as np
from geometry.topology.chains import CHAIN_ORDER

logger = logging.getLogger(__name__)

__all__ = ["structure_point_data", "export_vtu"]


def structure_point_data(structure):
    """
    Per-point arrays aligned with `structure.points`.

    Returns
    -------
    dict
        {"chain_id": int array (index into CHAIN_ORDER),
         "porosity_code": int array (0 for gut points),
         "target_stiffness": float array (0 for untethered points)}
    """
    n = structure.geometry.point_count
    chain_id = np.zeros(n, dtype=np.int32)
    for chain in structure.info.chains():
        chain_id[chain.start - 1:chain.stop] = CHAIN_ORDER.index(chain.name)

    code = np.zeros(n, dtype=np.int32)
    for rec in structure.porous:
        code[rec.index - 1] = rec.code

    k_target = np.zeros(n, dtype=np.float64)
    for rec in structure.targets:
        k_target[rec.index - 1] = rec.stiffness

    return {"chain_id": chain_id, "porosity_code": code, "target_stiffness": k_target}


def export_vtu(structure, path: str) -> str:
    """
    Write `structure` to `path` as VTU.

    Raises
    ------
    ImportError
        If `meshio` is not installed.
    """
    try:
        import meshio
    except ImportError:
        raise ImportError("meshio is required for VTK export. Install via: pip install meshio")

    P = np.asarray(structure.points, dtype=np.float64)
    points3 = np.column_stack((P, np.zeros(P.shape[0])))

    cells = []
    if structure.springs:
        lines = np.array([(s.a - 1, s.b - 1) for s in structure.springs], dtype=np.int64)
        cells.append(("line", lines))
    if structure.targets:
        verts = np.array([[t.index - 1] for t in structure.targets], dtype=np.int64)
        cells.append(("vertex", verts))

    mesh = meshio.Mesh(points3, cells, point_data=structure_point_data(structure))
    meshio.write(path, mesh)
    logger.info("[vtk] Structure exported to: %s", path)
    return path
