# -*- coding: utf-8 -*-
# Lagrangix/geometry/topology/_validation.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/2/2026

Purpose:
--------
Centralized validation utilities shared by the tube builder, the chain bookkeeping and
the curvature helpers, so that every module rejects malformed point arrays the same way.

Main Tasks:
   1. Validate point array structure ((N, 2)) with optional finite-value checking
   2. Require that a set of wall chains share one length (index pairing across walls)
"""

from typing import Optional, Sequence
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default False

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def _require_equal_lengths(lengths: Sequence[int], names: Sequence[str]) -> None:
    """
    Require that all wall chains have the same number of points.

    Raises
    ------
    ValueError
        If any two lengths differ; the message lists every chain with its length.
    """
    if len(set(int(n) for n in lengths)) > 1:
        listing = ", ".join("{}={}".format(nm, int(n)) for nm, n in zip(names, lengths))
        raise ValueError(f"Wall chains must have equal length; got {listing}.")
