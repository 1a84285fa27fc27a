# -*- coding: utf-8 -*-
# Lagrangix/structure/errors.py


"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/6/2026

Purpose
-------
Provide typed exceptions for the structure layer with compact, context-aware messages
to standardize error reporting across parameter schema checks, cross-parameter
validation, connectivity derivation and file read-back.

Main Tasks
----------
    1. Define StructureError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: SchemaError, ValidationError, ConnectivityError, RenderError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Filesystem failures are NOT wrapped: OSError propagates and aborts the run.
"""

__all__ = [
    "StructureError",
    "SchemaError",
    "ValidationError",
    "ConnectivityError",
    "RenderError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class StructureError(Exception):
    """
    Base class for all errors raised while assembling the Lagrangian structure.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"inner_total": 4}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class SchemaError(StructureError):
    """
    Per-key issues detected by the parameter schema:
      - unknown/invalid enum values
      - non-numeric where numeric is required
      - out-of-range scalar values
    """


class ValidationError(StructureError):
    """
    Cross-key contradictions detected AFTER merging defaults+params:
      - gut diameter not smaller than leg diameter
      - odd Eulerian grid resolution
    """


class ConnectivityError(StructureError):
    """
    A generator cannot derive a consistent table from the segment metadata:
      - too few gut points for a single beam
      - outer walls of unequal length or too short for the porosity end codes
    """


class RenderError(StructureError):
    """
    Malformed solver input files on read-back:
      - header count disagrees with the number of records
      - wrong number of columns or non-numeric fields
    """
