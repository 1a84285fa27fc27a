# -*- coding: utf-8 -*-
# Lagrangix/geometry/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/2/2026 (Updated: 6/14/2026)

Modules:
--------
- tube:      Package for building the two-duct ("gut inside leg") Lagrangian geometry.
             Includes TubeBuilder (sampling, stacking, segment metadata) and tube_math
             helpers (parameter validation, stepped ranges, wall offsets).

- topology:  Index-level bookkeeping for the flattened point sequence:
               * Named chains (gut_top, gut_bottom, leg_top, leg_bottom) as 1-based ranges,
               * SegmentInfo (the classic Ninfo triple) derived from chain lengths,
               * Re-derivation of SegmentInfo from a bare point count.

- ops:       Lightweight numerical utilities on point arrays.
               * ops.analysis: discrete closed-loop curvature, chain-aware curvature.

Usage:
    from geometry.tube.tube_builder import TubeBuilder
    from geometry.topology.chains import SegmentInfo
"""

__all__ = ["ops", "topology", "tube"]
