# -*- coding: utf-8 -*-
# Lagrangix/geometry/tube/tube_builder.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/5/2026 (Updated: 6/14/2026)

Purpose
-------
    1. Build the immersed "gut inside leg" cross-section: two straight, concentric ducts
       sharing one horizontal centerline, each bounded by two open walls.
    2. Flatten the walls into ONE ordered (N, 2) point array and derive the segment
       metadata (SegmentInfo / Ninfo) purely from the wall lengths.

Pipeline
--------
validate params → x samples on [0.2*Lx, 0.8*Lx] → gut walls (±gut_d/2) → leg walls (±leg_d/2)
→ stack [gut_top, gut_bottom, leg_top, leg_bottom] → SegmentInfo

Notes
-----
- All four walls use the SAME x-sample array, so point i of a top wall and point i of the
  matching bottom wall sit at the same x. Cross-gut springs depend on this pairing.
- `Nx` and `Lx` only scale the domain; they do not set the number of samples.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import numpy as np
from ..topology.chains import Chain, SegmentInfo, segment_info_from_wall_lengths
from ..topology._validation import _assert_xy
from .tube_math import (
    MIN_WALL_POINTS,
    default_spacing,
    validate_tube_params,
    horizontal_samples,
    centerline_height,
    wall_offsets,
)

logger = logging.getLogger(__name__)

__all__ = ["TubeGeometry", "TubeBuilder", "build_tube_geometry"]


@dataclass(frozen=True, eq=False)
class TubeGeometry:
    """
    Immutable result of the tube builder.

    Attributes
    ----------
    points : np.ndarray
        (N, 2) float64 array; row i-1 holds Lagrangian point i.
    info : SegmentInfo
        Partition of `points` into the four wall chains.
    params : dict
        Validated inputs {"ds", "Nx", "Lx", "leg_d", "gut_d"}.
    """
    points: np.ndarray
    info: SegmentInfo
    params: Dict[str, float] = field(default_factory=dict)

    @property
    def x(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.points[:, 1]

    @property
    def point_count(self) -> int:
        return int(self.points.shape[0])

    def chains(self) -> Tuple[Chain, ...]:
        return self.info.chains()

    def wall(self, name: str) -> np.ndarray:
        """Coordinates of one named chain (view into `points`)."""
        chain = self.info.chain_map().get(name)
        if chain is None:
            raise ValueError("Unknown chain '{}'".format(name))
        return self.points[chain.start - 1:chain.stop]


class TubeBuilder:
    """
    Construct the two-duct Lagrangian geometry.

    Parameters
    ----------
    ds : float or None
        Lagrangian point spacing. None selects 0.5 * Lx / Nx.
    Nx : int
        Eulerian grid resolution in x (must match the solver's input file).
    Lx : float
        Eulerian domain length in x.
    leg_d : float
        Outer duct (leg) diameter.
    gut_d : float
        Inner duct (gut) diameter; must be smaller than `leg_d`.
    """

    def __init__(self, ds: Optional[float], Nx: int, Lx: float, leg_d: float, gut_d: float):
        if ds is None:
            ds = default_spacing(Nx, Lx)
        self.params = validate_tube_params(ds, Nx, Lx, leg_d, gut_d)

        self.x_samples = horizontal_samples(self.params["Lx"], self.params["ds"])
        if self.x_samples.shape[0] < MIN_WALL_POINTS:
            raise ValueError(
                "[TubeBuilder] Spacing ds={} leaves only {} samples per wall (need >= {}).".format(
                    self.params["ds"], self.x_samples.shape[0], MIN_WALL_POINTS
                )
            )
        self.y_center = centerline_height(self.params["Lx"])

    # --------------------
    # Public API
    # --------------------
    def build(self) -> TubeGeometry:
        """
        Sample both ducts and return the stacked geometry with its SegmentInfo.
        """
        gut_top, gut_bottom = wall_offsets(self.x_samples, self.y_center, self.params["gut_d"])
        leg_top, leg_bottom = wall_offsets(self.x_samples, self.y_center, self.params["leg_d"])

        points = np.vstack((gut_top, gut_bottom, leg_top, leg_bottom))
        _assert_xy(points, check_finite=True)
        points.setflags(write=False)

        info = segment_info_from_wall_lengths(
            gut_top.shape[0], gut_bottom.shape[0], leg_top.shape[0], leg_bottom.shape[0]
        )
        logger.info(
            "[TubeBuilder] Built %d Lagrangian points (%d per wall, Ninfo=%s).",
            info.point_count, info.half_count, info.as_ninfo(),
        )
        return TubeGeometry(points=points, info=info, params=dict(self.params))


def build_tube_geometry(ds: Optional[float], Nx: int, Lx: float, leg_d: float, gut_d: float) -> TubeGeometry:
    """Convenience wrapper around `TubeBuilder(...).build()`."""
    return TubeBuilder(ds, Nx, Lx, leg_d, gut_d).build()
