# -*- coding: utf-8 -*-
# Lagrangix/structure/porosity.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/9/2026 (Updated: 6/3/2026)

Purpose
-------
Porosity markers for the leg (outer duct). Every leg point gets the permeability
coefficient `alpha` plus a small signed code that tells the solver where the duct
mouths are:

    position in a leg wall    code
    ----------------------    ----
    first                      -2
    second                     -1
    second-to-last             +1
    last                       +2
    anything else               0

Both leg walls follow the same table, so a run carries exactly 8 nonzero codes:
(-2, -1) at the entering end and (+1, +2) at the exiting end of each wall.

Notes
-----
- The code is keyed by (chain, position-within-chain); with the standard layout this
  reproduces the classic index rules Ninfo(2)+1, Ninfo(2)+2, Ninfo(3)-1, Ninfo(3),
  Ninfo(3)+1, Ninfo(3)+2, N-1, N.
- Both leg walls must have the same length and at least 4 points, otherwise the end
  codes would overlap or land on the wrong wall.
"""

from typing import Dict, List, NamedTuple
from geometry.topology.chains import Chain, SegmentInfo
from .errors import ConnectivityError

__all__ = [
    "PorousPoint",
    "END_CODES",
    "MIN_OUTER_WALL_POINTS",
    "end_code",
    "leg_porosity",
    "expected_porous_count",
]

# position within chain (negative = from the end) -> direction code
END_CODES = {0: -2, 1: -1, -2: 1, -1: 2}  # type: Dict[int, int]
MIN_OUTER_WALL_POINTS = 4


class PorousPoint(NamedTuple):
    index: int
    alpha: float
    code: int


def expected_porous_count(info: SegmentInfo) -> int:
    return info.point_count - info.inner_total


def end_code(chain: Chain, index: int) -> int:
    """Direction code of a global index inside an outer chain."""
    pos = chain.position(index)
    n = len(chain)
    if pos in END_CODES:
        return END_CODES[pos]
    return END_CODES.get(pos - n, 0)


def _check_outer_walls(info: SegmentInfo) -> None:
    walls = info.outer_chains()
    lengths = {c.name: len(c) for c in walls}
    if len(set(lengths.values())) != 1:
        raise ConnectivityError("Leg walls differ in length; end codes would be misplaced.", lengths)
    if min(lengths.values()) < MIN_OUTER_WALL_POINTS:
        raise ConnectivityError(
            "Leg walls too short for distinct end codes (need >= {} points).".format(MIN_OUTER_WALL_POINTS),
            lengths,
        )


def leg_porosity(info: SegmentInfo, alpha: float) -> List[PorousPoint]:
    """
    Porosity records for every leg point in ascending index order.

    Raises
    ------
    ConnectivityError
        If the leg walls are unequal or shorter than MIN_OUTER_WALL_POINTS.
    """
    _check_outer_walls(info)
    return [
        PorousPoint(s, float(alpha), end_code(chain, s))
        for chain in info.outer_chains()
        for s in chain.indices
    ]
