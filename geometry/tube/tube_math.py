# -*- coding: utf-8 -*-
# Lagrangix/geometry/tube/tube_math.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/4/2026 (Updated: 4/18/2026)

Purpose:
--------
Pure math/validation helpers for sampling the gut/leg ducts.
This module is *NumPy-only*:
    - No plotting and file I/O.
    - No logging side effects.

Main Tasks:
-----------
    1. Validate the geometric inputs (spacing, grid resolution, domain length, diameters).
    2. Sample the fixed central span of the domain with a stepped range.
    3. Place the walls of a duct symmetrically about the shared centerline.
"""

from typing import Dict, Tuple
import numpy as np

# Fraction of the domain length covered by the ducts (left, right)
SPAN_FRACTION = (0.2, 0.8)
# Centerline height as a fraction of the domain length
CENTERLINE_FRACTION = 0.5 * (1.0 / 8.0)
# Smallest wall that still carries two distinct porosity codes at each end
MIN_WALL_POINTS = 4
# Largest Lagrangian spacing, in grid cells, before fluid can leak through a wall
MAX_SPACING_RATIO = 1.0

__all__ = [
    "SPAN_FRACTION",
    "CENTERLINE_FRACTION",
    "MIN_WALL_POINTS",
    "MAX_SPACING_RATIO",
    "default_spacing",
    "validate_tube_params",
    "stepped_range",
    "horizontal_samples",
    "centerline_height",
    "wall_offsets",
]


def default_spacing(Nx: int, Lx: float) -> float:
    """Lagrangian spacing at twice the Eulerian resolution: ds = 0.5 * Lx / Nx."""
    return 0.5 * float(Lx) / float(Nx)


def validate_tube_params(ds: float, Nx: int, Lx: float, leg_d: float, gut_d: float) -> Dict[str, float]:
    """
    Type- and range-check the geometric inputs.

    Returns
    -------
    dict
        {"ds", "Nx", "Lx", "leg_d", "gut_d"} with float values ("Nx" as int).

    Raises
    ------
    ValueError
        If a value cannot be cast, is not strictly positive, or the gut does not fit
        inside the leg.
    """
    raw = {"ds": ds, "Nx": Nx, "Lx": Lx, "leg_d": leg_d, "gut_d": gut_d}
    out = {}
    for k, v in raw.items():
        try:
            fv = float(v)
        except (TypeError, ValueError):
            raise ValueError("'{}' must be a number (got {!r})".format(k, v))
        if not np.isfinite(fv) or fv <= 0.0:
            raise ValueError("'{}' must be > 0 (got {})".format(k, v))
        out[k] = fv
    if out["Nx"] != int(out["Nx"]):
        raise ValueError("'Nx' must be an integer (got {})".format(Nx))
    out["Nx"] = int(out["Nx"])
    if out["gut_d"] >= out["leg_d"]:
        raise ValueError(
            "gut_d must be smaller than leg_d (got gut_d={}, leg_d={})".format(out["gut_d"], out["leg_d"])
        )
    return out


def stepped_range(lo: float, hi: float, step: float, tol: float = 1e-9) -> np.ndarray:
    """
    Samples lo, lo+step, ..., never exceeding hi (beyond `tol` steps).

    The last sample may fall short of `hi` when `step` does not divide the span;
    `tol` absorbs round-off so that an exactly divisible span keeps its endpoint.
    """
    if step <= 0.0:
        raise ValueError("step must be > 0")
    if hi < lo:
        return np.empty(0, dtype=np.float64)
    n_steps = int(np.floor((hi - lo) / step + tol))
    return lo + step * np.arange(n_steps + 1, dtype=np.float64)


def horizontal_samples(Lx: float, ds: float) -> np.ndarray:
    """x-coordinates shared by every wall: [0.2*Lx, 0.8*Lx] stepped by ds."""
    lo, hi = SPAN_FRACTION
    return stepped_range(lo * Lx, hi * Lx, ds)


def centerline_height(Lx: float) -> float:
    return CENTERLINE_FRACTION * float(Lx)


def wall_offsets(x: np.ndarray, y_center: float, diameter: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Top and bottom walls of a duct as (n, 2) arrays over the same x samples.

    Index i of the top wall and index i of the bottom wall share x[i].
    """
    x = np.asarray(x, dtype=np.float64)
    half = 0.5 * float(diameter)
    top = np.column_stack((x, np.full_like(x, y_center + half)))
    bottom = np.column_stack((x, np.full_like(x, y_center - half)))
    return top, bottom
