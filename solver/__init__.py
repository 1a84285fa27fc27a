# -*- coding: utf-8 -*-
# Lagrangix/solver/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/14/2026

Solver Package:
---------------
Boundary between Lagrangix and the external immersed-boundary solver. Nothing here runs
the solver; this package only produces (and re-reads) the files it consumes.

Modules:
--------
- interface: record formats, atomic writers and readers for .vertex/.spring/.beam/
             .target/.porous, plus an optional VTK (.vtu) export via meshio.
"""

__all__ = ["interface"]
