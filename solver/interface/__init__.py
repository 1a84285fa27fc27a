# -*- coding: utf-8 -*-
# Lagrangix/solver/interface/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/14/2026

Interface Subfolder:
--------------------
- formats: printf-style record formats and table rendering (count header + records).
- io:      atomic writers per table, `write_structure`, and read-back helpers.
- vtk:     meshio export of points, springs and targets for ParaView inspection.
"""

__all__ = ["formats", "io", "vtk"]
