# -*- coding: utf-8 -*-
# Lagrangix/structure/springs.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/7/2026 (Updated: 5/21/2026)

Purpose
-------
Derive the elastic links (springs) of the gut. Two populations, emitted in this order:

    1. Adjacent links along each gut wall: (i, i+1) inside gut_top, then gut_bottom.
       Chains are OPEN, so no link joins the last point of a wall to anything.
    2. Cross-gut links: (i, i + half_count) for i = 1..half_count, joining each top-wall
       point to the bottom-wall point at the same x.

Total = (half_count - 1) + (half_count - 1) + half_count = inner_total - 2 + half_count.

Notes
-----
- Only SegmentInfo is consulted; coordinates are never read.
- The leg carries no springs; it is held in place by target points instead.
"""

from typing import List, NamedTuple
from geometry.topology.chains import SegmentInfo
from .errors import ConnectivityError

__all__ = ["Spring", "adjacent_springs", "cross_springs", "gut_springs", "expected_spring_count"]


class Spring(NamedTuple):
    a: int
    b: int
    stiffness: float
    rest_length: float


def expected_spring_count(info: SegmentInfo) -> int:
    return info.inner_total - 2 + info.half_count


def adjacent_springs(info: SegmentInfo, stiffness: float, rest_length: float) -> List[Spring]:
    """Links between consecutive points of each gut wall."""
    out = []  # type: List[Spring]
    for chain in info.inner_chains():
        for s in range(chain.start, chain.stop):
            out.append(Spring(s, s + 1, float(stiffness), float(rest_length)))
    return out


def cross_springs(info: SegmentInfo, stiffness: float, rest_length: float) -> List[Spring]:
    """Links across the gut pairing top point i with bottom point i + half_count."""
    chains = info.chain_map()
    top, bottom = chains["gut_top"], chains["gut_bottom"]
    if len(top) != len(bottom):
        raise ConnectivityError(
            "Gut walls differ in length; cross links would pair unrelated points.",
            {"gut_top": len(top), "gut_bottom": len(bottom)},
        )
    return [
        Spring(s, s + info.half_count, float(stiffness), float(rest_length))
        for s in top.indices
    ]


def gut_springs(info: SegmentInfo,
                k_adjacent: float,
                k_across: float,
                rest_adjacent: float,
                rest_across: float) -> List[Spring]:
    """
    All gut springs in file order (adjacent top, adjacent bottom, across).

    Args
    ----
    info : SegmentInfo
        Segment metadata of the structure.
    k_adjacent, rest_adjacent : float
        Stiffness and resting length of links along a wall.
    k_across, rest_across : float
        Stiffness and resting length of links across the gut.

    Returns
    -------
    List[Spring]
        Exactly `expected_spring_count(info)` records.
    """
    springs = adjacent_springs(info, k_adjacent, rest_adjacent)
    springs.extend(cross_springs(info, k_across, rest_across))
    if len(springs) != expected_spring_count(info):
        raise ConnectivityError(
            "Spring count disagrees with segment metadata.",
            {"count": len(springs), "expected": expected_spring_count(info)},
        )
    return springs
