# -*- coding: utf-8 -*-
# Lagrangix/structure/targets.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/8/2026

Purpose
-------
Target (tether) points: every leg point, i.e. every index in (inner_total, point_count],
is pulled toward its reference position with one stiffness. The gut is left free.
"""

from typing import List, NamedTuple
from geometry.topology.chains import SegmentInfo

__all__ = ["Target", "leg_targets", "expected_target_count"]


class Target(NamedTuple):
    index: int
    stiffness: float


def expected_target_count(info: SegmentInfo) -> int:
    return info.point_count - info.inner_total


def leg_targets(info: SegmentInfo, stiffness: float) -> List[Target]:
    """One Target per leg point, in ascending index order."""
    return [
        Target(s, float(stiffness))
        for chain in info.outer_chains()
        for s in chain.indices
    ]
