# -*- coding: utf-8 -*-
# Lagrangix/structure/api.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/20/2026 (Updated: 6/20/2026)

Purpose
-------
Thin, import-only façade for Lagrangix workflows. Exposes three high-level helpers to
(1) build the gut/leg point cloud from parameters, (2) derive every topology table on
top of it, and (3) write the solver input files plus optional QA artifacts.

Main Tasks
----------
    1. `build_geometry`    → resolve params, sample the four walls, derive SegmentInfo.
    2. `build_structure`   → geometry + springs/beams/targets/porosity in one bundle.
    3. `write_input_files` → .vertex/.spring/.beam/.target/.porous (+ .vtu, .png).

Notes
-----
- Parameters accept canonical keys or any alias from `structure.schema.ALIASES`
  (e.g. `legD`, `gutD`, `struct_name`).
"""

import os
import logging
from typing import Any, Dict, Mapping, Optional

from geometry.tube.tube_builder import TubeBuilder, TubeGeometry
from solver.interface.io import write_structure
from .assembly import ImmersedStructure, derive_tables
from .config import build_params

logger = logging.getLogger(__name__)

__all__ = [
    "build_geometry",
    "build_structure",
    "write_input_files",
]


# --------
# Helpers
# --------
def build_geometry(params: Optional[Mapping[str, Any]] = None) -> TubeGeometry:
    """
    Build the immersed gut/leg geometry.

    Args
    ----
    params : Mapping[str, Any], optional
        Overrides of `structure.config.DEFAULTS` (NX, LX, DS, LEG_D, GUT_D, ...).

    Returns
    -------
    TubeGeometry
        Points in [gut_top, gut_bottom, leg_top, leg_bottom] order plus SegmentInfo.
    """
    cfg = build_params(params)
    return TubeBuilder(
        ds=cfg["DS"],
        Nx=cfg["NX"],
        Lx=cfg["LX"],
        leg_d=cfg["LEG_D"],
        gut_d=cfg["GUT_D"],
    ).build()


def build_structure(params: Optional[Mapping[str, Any]] = None) -> ImmersedStructure:
    """
    Build the geometry and derive all topology tables.

    Returns
    -------
    ImmersedStructure
        Geometry + springs, beams, targets and porosity markers.
    """
    cfg = build_params(params)
    geometry = build_geometry(cfg)
    return derive_tables(geometry, cfg)


def write_input_files(
    structure: ImmersedStructure,
    out_dir: Optional[str] = None,
    *,
    export_vtk: bool = False,
    plot: bool = False,
) -> Dict[str, str]:
    """
    Write the five solver input files and the requested QA artifacts.

    Args
    ----
    structure : ImmersedStructure
        Output of `build_structure`.
    out_dir : str, optional
        Destination directory; defaults to the current directory.
    export_vtk : bool
        Also write `<name>.vtu` (requires meshio).
    plot : bool
        Also save `<name>.png` (requires matplotlib).

    Returns
    -------
    Dict[str, str]
        Mapping extension -> written path ("vtu"/"png" included when requested).
    """
    out_dir = out_dir or "."
    paths = write_structure(structure, out_dir)

    if export_vtk:
        from solver.interface.vtk import export_vtu
        paths["vtu"] = export_vtu(structure, os.path.join(out_dir, structure.name + ".vtu"))

    if plot:
        from post.plot_structure import plot_structure
        png = os.path.join(out_dir, structure.name + ".png")
        plot_structure(structure, show=False, save_path=png)
        paths["png"] = png

    logger.info("[api] Wrote %d files for '%s' into %s", len(paths), structure.name, out_dir)
    return paths
