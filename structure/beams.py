# -*- coding: utf-8 -*-
# Lagrangix/structure/beams.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/8/2026 (Updated: 6/3/2026)

Purpose
-------
Derive the bending elements (beams, i.e. torsional springs) of the gut walls. A beam is a
triplet of consecutive points (p, q, r) = (i-1, i, i+1) on ONE wall; q is the vertex at
which bending resistance acts.

Each open wall loses its first and last point as a vertex (they lack a neighbour inside
the chain), so a wall of n points carries n - 2 beams and the gut carries
inner_total - 4 in total.

Notes
-----
- `curvature` is either one preferred curvature for every beam or a per-point array
  (length point_count, indexed by the 1-based vertex q minus one), e.g. the output of
  `geometry.ops.analysis.chain_curvatures` to keep the initial shape as rest state.
"""

from typing import List, NamedTuple, Union
import numpy as np
from geometry.topology.chains import SegmentInfo
from .errors import ConnectivityError

__all__ = ["Beam", "gut_beams", "expected_beam_count", "MIN_INNER_POINTS"]

# Fewer gut points than this cannot hold a single beam per wall
MIN_INNER_POINTS = 5


class Beam(NamedTuple):
    p: int
    q: int
    r: int
    stiffness: float
    curvature: float


def expected_beam_count(info: SegmentInfo) -> int:
    return info.inner_total - 4


def gut_beams(info: SegmentInfo,
              stiffness: float,
              curvature: Union[float, np.ndarray] = 0.0) -> List[Beam]:
    """
    Beams along each gut wall in file order (top wall, then bottom wall).

    Args
    ----
    info : SegmentInfo
        Segment metadata of the structure.
    stiffness : float
        Beam stiffness (same for every element).
    curvature : float or np.ndarray
        Preferred curvature; scalar for all beams, or a length-`point_count` array.

    Returns
    -------
    List[Beam]
        Exactly `inner_total - 4` records.

    Raises
    ------
    ConnectivityError
        If the gut has fewer than 5 points or a curvature array has the wrong length.
    """
    if info.inner_total < MIN_INNER_POINTS:
        raise ConnectivityError(
            "Too few gut points to place beams (need >= {}).".format(MIN_INNER_POINTS),
            {"inner_total": info.inner_total},
        )

    per_point = None
    if np.ndim(curvature) > 0:
        per_point = np.asarray(curvature, dtype=np.float64)
        if per_point.shape != (info.point_count,):
            raise ConnectivityError(
                "Curvature array must hold one value per Lagrangian point.",
                {"shape": per_point.shape, "point_count": info.point_count},
            )

    beams = []  # type: List[Beam]
    for chain in info.inner_chains():
        for s in range(chain.start + 1, chain.stop):
            c = float(per_point[s - 1]) if per_point is not None else float(curvature)
            beams.append(Beam(s - 1, s, s + 1, float(stiffness), c))
    return beams
