# -*- coding: utf-8 -*-
# Lagrangix/geometry/ops/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/2/2026

Ops Subfolder:
--------------
Lightweight numerical utilities on Lagrangian point arrays.

Contents
--------
- analysis: discrete closed-loop curvature (cross product of neighbouring segments)
            and its chain-aware wrapper for structures made of several open walls.
"""

from .analysis import discrete_curvature, chain_curvatures

__all__ = ["discrete_curvature", "chain_curvatures"]
