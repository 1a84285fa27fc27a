# -*- coding: utf-8 -*-
# Lagrangix/geometry/topology/chains.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/3/2026 (Updated: 5/21/2026)

Purpose:
--------
Single source of truth for how the flattened Lagrangian point sequence is partitioned.
The builder lays the four walls out consecutively:

    [gut_top | gut_bottom | leg_top | leg_bottom]

and every writer (springs, beams, targets, porosity) iterates the named chains returned
by `SegmentInfo.chains()` instead of re-deriving boundaries from the Ninfo integers.

Conventions:
------------
   - Indices are 1-based and inclusive, matching the line order of the `.vertex` file.
   - A chain is an OPEN polyline; its first and last points have a single neighbour.
   - `SegmentInfo.as_ninfo()` returns the classic triple
     (points on gut top, points before the leg, index of the last leg-top point).
"""

from dataclasses import dataclass
from typing import Dict, Tuple
from ._validation import _require_equal_lengths

__all__ = [
    "CHAIN_ORDER",
    "INNER_CHAINS",
    "OUTER_CHAINS",
    "Chain",
    "SegmentInfo",
    "segment_info_from_wall_lengths",
    "segment_info_from_point_count",
]

CHAIN_ORDER = ("gut_top", "gut_bottom", "leg_top", "leg_bottom")
INNER_CHAINS = ("gut_top", "gut_bottom")
OUTER_CHAINS = ("leg_top", "leg_bottom")


@dataclass(frozen=True)
class Chain:
    """
    Named, 1-based inclusive index range of one open wall polyline.

    Attributes
    ----------
    name : str
        One of CHAIN_ORDER.
    start : int
        1-based index of the first point.
    stop : int
        1-based index of the last point (inclusive).
    """
    name: str
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start + 1

    def __contains__(self, index: int) -> bool:
        return self.start <= int(index) <= self.stop

    @property
    def indices(self) -> range:
        """1-based indices of the chain, in order."""
        return range(self.start, self.stop + 1)

    @property
    def duct(self) -> str:
        """'gut' or 'leg'."""
        return self.name.split("_", 1)[0]

    def position(self, index: int) -> int:
        """
        0-based position of a global index inside this chain.

        Raises
        ------
        ValueError
            If `index` does not belong to the chain.
        """
        if index not in self:
            raise ValueError(
                "Index {} is outside chain '{}' [{}, {}].".format(index, self.name, self.start, self.stop)
            )
        return int(index) - self.start


@dataclass(frozen=True)
class SegmentInfo:
    """
    Segment metadata of the flattened point sequence (a.k.a. Ninfo).

    Attributes
    ----------
    half_count : int
        Points along one gut wall.
    inner_total : int
        Gut points on both walls (always 2 * half_count).
    inner_plus_half_outer : int
        Gut points plus one leg wall, i.e. the index of the last leg-top point.
    point_count : int
        Total number of Lagrangian points.
    """
    half_count: int
    inner_total: int
    inner_plus_half_outer: int
    point_count: int

    def __post_init__(self):
        if self.half_count <= 0:
            raise ValueError("half_count must be > 0 (got {}).".format(self.half_count))
        if self.inner_total != 2 * self.half_count:
            raise ValueError(
                "inner_total must equal 2*half_count (got {} vs {}).".format(
                    self.inner_total, 2 * self.half_count
                )
            )
        leg_top = self.inner_plus_half_outer - self.inner_total
        leg_bottom = self.point_count - self.inner_plus_half_outer
        if leg_top <= 0:
            raise ValueError("Leg (outer duct) has no points.")
        _require_equal_lengths((leg_top, leg_bottom), OUTER_CHAINS)

    @property
    def outer_half(self) -> int:
        """Points along one leg wall."""
        return self.inner_plus_half_outer - self.inner_total

    @property
    def outer_total(self) -> int:
        return self.point_count - self.inner_total

    def as_ninfo(self) -> Tuple[int, int, int]:
        return self.half_count, self.inner_total, self.inner_plus_half_outer

    def chains(self) -> Tuple[Chain, ...]:
        """The four wall chains in global order."""
        return (
            Chain("gut_top", 1, self.half_count),
            Chain("gut_bottom", self.half_count + 1, self.inner_total),
            Chain("leg_top", self.inner_total + 1, self.inner_plus_half_outer),
            Chain("leg_bottom", self.inner_plus_half_outer + 1, self.point_count),
        )

    def chain_map(self) -> Dict[str, Chain]:
        return {c.name: c for c in self.chains()}

    def inner_chains(self) -> Tuple[Chain, ...]:
        return tuple(c for c in self.chains() if c.name in INNER_CHAINS)

    def outer_chains(self) -> Tuple[Chain, ...]:
        return tuple(c for c in self.chains() if c.name in OUTER_CHAINS)


def segment_info_from_wall_lengths(gut_top: int,
                                   gut_bottom: int,
                                   leg_top: int,
                                   leg_bottom: int) -> SegmentInfo:
    """
    Build SegmentInfo from the number of points on each wall (in global order).

    Raises
    ------
    ValueError
        If the two gut walls (or the two leg walls) differ in length.
    """
    _require_equal_lengths((gut_top, gut_bottom), INNER_CHAINS)
    _require_equal_lengths((leg_top, leg_bottom), OUTER_CHAINS)
    inner_total = int(gut_top) + int(gut_bottom)
    return SegmentInfo(
        half_count=inner_total // 2,
        inner_total=inner_total,
        inner_plus_half_outer=inner_total + int(leg_top),
        point_count=inner_total + int(leg_top) + int(leg_bottom),
    )


def segment_info_from_point_count(point_count: int) -> SegmentInfo:
    """
    Re-derive SegmentInfo from a bare point count (e.g. the header of a `.vertex` file).

    All four walls are sampled on the same horizontal array, so each wall holds exactly
    a quarter of the points.

    Raises
    ------
    ValueError
        If `point_count` is not a positive multiple of 4.
    """
    n = int(point_count)
    if n <= 0 or n % 4 != 0:
        raise ValueError(
            "Point count {} cannot be split into four equal walls.".format(point_count)
        )
    wall = n // 4
    return segment_info_from_wall_lengths(wall, wall, wall, wall)
