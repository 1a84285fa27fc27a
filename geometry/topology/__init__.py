# -*- coding: utf-8 -*-
# Lagrangix/geometry/topology/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/2/2026

Topology Subfolder:
-------------------
Index bookkeeping for the flattened Lagrangian point sequence. Every downstream table
(springs, beams, targets, porosity) refers to points by their 1-based position, so the
partition of that sequence into wall chains lives here and nowhere else.

Modules:
--------
- chains:      Chain and SegmentInfo types, chain construction from wall lengths and
               re-derivation of the partition from a point count.

- _validation: Shared array checks ((N, 2) shape, finiteness, equal wall lengths).
"""

__all__ = ["chains"]
