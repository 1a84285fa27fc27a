# -*- coding: utf-8 -*-
# Lagrangix/post/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/22/2026

Modules:
--------
- plot_structure: Sanity plot of the generated Lagrangian points, one line + markers per
                  wall chain; headless-safe backend, axis framed on the Eulerian domain.
"""

__all__ = ["plot_structure"]
