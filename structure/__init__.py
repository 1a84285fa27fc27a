# -*- coding: utf-8 -*-
# Lagrangix/structure/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/6/2026 (Updated: 6/20/2026)

Modules:
--------
- springs:   Adjacent links along each gut wall plus cross-gut links (i, i + half_count).
- beams:     Consecutive (p, q, r) triplets along each gut wall; chain endpoints skipped.
- targets:   Tethering stiffness for every leg (outer duct) point.
- porosity:  Permeability + signed end codes (-2, -1, +1, +2) at the open leg ends.

- assembly:  Runs the four generators over one TubeGeometry and bundles the tables.
- schema:    Parameter aliases, enumerations and numeric ranges.
- config:    Sectioned defaults, merge + derived values, cross-key validation.
- errors:    Typed exceptions (SchemaError, ValidationError, ConnectivityError, RenderError).
- checks:    Registry of invariant rules run before any file is written.
- api:       Thin facade used by main scripts.

Usage:
    from structure.api import build_structure, write_input_files
"""

__all__ = [
    "api", "assembly", "beams", "checks", "config", "errors",
    "porosity", "schema", "springs", "targets",
]
