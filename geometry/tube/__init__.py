# -*- coding: utf-8 -*-
# Lagrangix/geometry/tube/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 3/4/2026

Tube Subpackage:
----------------
Construction of the immersed two-duct cross-section.

Modules:
--------
- tube_math:    Pure NumPy helpers: parameter validation, stepped horizontal sampling,
                centerline height and wall offsets.

- tube_builder: TubeBuilder / TubeGeometry. Stacks the four walls into one ordered point
                array and derives SegmentInfo from the wall lengths.
"""

__all__ = ["tube_builder", "tube_math"]
