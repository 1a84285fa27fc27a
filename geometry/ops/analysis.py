# -*- coding: utf-8 -*-
# Lagrangix/geometry/ops/analysis.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/2/2026 (Updated: 6/3/2026)

Purpose
-------
Discrete "curvature" of a Lagrangian polyline in the sense used by the beam force
calculation: the 2D cross product of the incoming and outgoing segments at each vertex,

    C_q = (Xr - Xq) * (Yq - Yp) - (Yr - Yq) * (Xq - Xp),     p -> q -> r

This is not curvature in the differential-geometry sense; it is the quantity the solver
compares against when a beam's preferred curvature is given.

Main Tasks
----------
    1. `discrete_curvature`: treat the WHOLE input as one closed loop (wrap-around
       neighbours at both ends).
    2. `chain_curvatures`: apply the closed-loop formula chain by chain so values never
       mix points from different walls.

Notes
-----
- For interior points of a chain both functions agree with the open-chain triplet
  (i-1, i, i+1), which is exactly the beam triplet.
- Chain endpoints receive the wrap-around value of their own chain; no beam is centred
  on them, so the value is informational only.
"""

from typing import Iterable
import numpy as np
from ..topology.chains import Chain
from ..topology._validation import _assert_xy

__all__ = ["discrete_curvature", "chain_curvatures"]


def discrete_curvature(points: np.ndarray) -> np.ndarray:
    """
    Signed cross-product curvature at each vertex of a CLOSED loop.

    Args
    ----
    points : np.ndarray
        (N, 2) array, N >= 3. The loop is closed implicitly (do not repeat the
        first point at the end).

    Returns
    -------
    np.ndarray
        Length-N array. The sign gives the turning direction, the magnitude grows
        with the deviation from a straight line.

    Raises
    ------
    ValueError
        If the input is not (N, 2) or has fewer than 3 points.
    """
    P = np.asarray(points, dtype=np.float64)
    _assert_xy(P)
    if P.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute curvature on a loop.")
    prev = np.roll(P, 1, axis=0)   # p: predecessor (wraps last -> first)
    nxt = np.roll(P, -1, axis=0)   # r: successor (wraps first -> last)
    return (nxt[:, 0] - P[:, 0]) * (P[:, 1] - prev[:, 1]) - (nxt[:, 1] - P[:, 1]) * (P[:, 0] - prev[:, 0])


def chain_curvatures(points: np.ndarray, chains: Iterable[Chain]) -> np.ndarray:
    """
    Curvature per point, computed separately on each chain.

    Args
    ----
    points : np.ndarray
        (N, 2) global point array.
    chains : Iterable[Chain]
        1-based inclusive ranges partitioning `points` (e.g. `SegmentInfo.chains()`).

    Returns
    -------
    np.ndarray
        Length-N array aligned with `points`; entries of points outside every chain
        stay 0.

    Raises
    ------
    ValueError
        If a chain falls outside the array or holds fewer than 3 points.
    """
    P = np.asarray(points, dtype=np.float64)
    _assert_xy(P)
    out = np.zeros(P.shape[0], dtype=np.float64)
    for chain in chains:
        if chain.start < 1 or chain.stop > P.shape[0]:
            raise ValueError("Chain '{}' exceeds the point array ({} points).".format(chain.name, P.shape[0]))
        out[chain.start - 1:chain.stop] = discrete_curvature(P[chain.start - 1:chain.stop])
    return out
