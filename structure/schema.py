# -*- coding: utf-8 -*-
# Lagrangix/structure/schema.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/10/2026 (Updated: 6/20/2026)

Purpose
-------
Provide a lightweight schema layer for the structure-generation parameters. This module
canonicalizes user-friendly keys (e.g. `legD`, `k_beam`) to canonical names, validates
categorical options against enumerations, and checks numeric scalars against ranges,
raising `SchemaError` with actionable messages on violations.

Main Tasks
----------
    1. Canonicalize params via `normalize_keys` using curated `ALIASES`.
    2. Enforce categorical constraints using `ENUMS` (case-insensitive matching).
    3. Enforce numeric constraints using `RANGES` with inclusive/strict bounds.
    4. Expose a single `validate` entrypoint for post-canonicalization checks.

Notes
-----
- `None` is accepted only for the keys in `DERIVED`: it means "derive from other
  parameters" and is resolved in `config.build_params`. Any other ranged key set to
  `None` is a non-numeric value.
- Unknown keys pass through untouched; only listed keys are validated.
"""

from typing import Any, Dict, Mapping
from .errors import SchemaError

__all__ = ["normalize_keys", "validate", "ALIASES", "ENUMS", "RANGES", "DERIVED"]

# --------------------------
# Canonicalization (aliases)
# --------------------------
ALIASES = {
    # Grid
    "nx": "NX",
    "lx": "LX",

    # Structure
    "ds": "DS",
    "struct_name": "STRUCT_NAME",
    "name": "STRUCT_NAME",
    "legD": "LEG_D",
    "leg_d": "LEG_D",
    "gutD": "GUT_D",
    "gut_d": "GUT_D",

    # Springs
    "k_spring_adj": "K_SPRING_ADJ",
    "k_spring_across": "K_SPRING_ACROSS",
    "ds_adj": "DS_ADJ",
    "ds_across": "DS_ACROSS",

    # Beams
    "k_beam": "K_BEAM",
    "C": "BEAM_CURVATURE",
    "curvature": "BEAM_CURVATURE",
    "curvature_mode": "BEAM_CURVATURE_MODE",

    # Targets / porosity
    "k_target": "K_TARGET",
    "alpha": "ALPHA",

    # Output
    "out_dir": "OUT_DIR",
    "export_vtk": "EXPORT_VTK",
    "plot": "PLOT",
}

# --------------------------
# Enumerations (exact sets)
# --------------------------
ENUMS = {
    "BEAM_CURVATURE_MODE": {"CONSTANT", "INITIAL"},
}

# --------------------------
# Numeric ranges (inclusive flag)
# --------------------------
# key -> (min, max, inclusive_bounds)
RANGES = {
    "NX": (2, 2 ** 20, True),
    "LX": (0.0, 1e6, False),
    "DS": (0.0, 1e6, False),
    "LEG_D": (0.0, 1e6, False),
    "GUT_D": (0.0, 1e6, False),
    "K_SPRING_ADJ": (0.0, 1e15, True),
    "K_SPRING_ACROSS": (0.0, 1e15, True),
    "DS_ADJ": (0.0, 1e6, True),
    "DS_ACROSS": (0.0, 1e6, True),
    "K_BEAM": (0.0, 1e15, True),
    "BEAM_CURVATURE": (-1e6, 1e6, True),
    "K_TARGET": (0.0, 1e15, True),
    "ALPHA": (0.0, 1e6, True),
}

# Ranged keys whose None means "resolve from other parameters"
DERIVED = {"DS", "DS_ADJ", "DS_ACROSS"}


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map user-friendly keys to canonical keys (no value coercion).

    Only keys present in `ALIASES` are rewritten; all others are passed through.
    """
    out = {}  # type: Dict[str, Any]
    for k, v in params.items():
        out[ALIASES.get(k, k)] = v
    return out


def _check_enum(key: str, val: Any) -> None:
    """
    Validate categorical parameters against `ENUMS` (case-insensitive).

    Raises
    ------
    SchemaError
        If `key` is enumerated and `val` is not a permitted option.
    """
    if key in ENUMS:
        sval = str(val).upper()
        if sval not in ENUMS[key]:
            raise SchemaError(
                "Invalid value for {k}: {v!r}. Allowed: {opts}".format(
                    k=key, v=val, opts=sorted(ENUMS[key])
                )
            )


def _check_range(key: str, val: Any) -> None:
    """
    Validate numeric parameters against `RANGES`.

    Raises
    ------
    SchemaError
        - If the value is non-numeric for a ranged key.
        - If the numeric value violates the configured bounds.
    """
    if key not in RANGES:
        return
    if val is None and key in DERIVED:
        return
    lo, hi, inclusive = RANGES[key]
    if val is None or isinstance(val, bool):
        raise SchemaError("Non-numeric value for {k}: {v!r}".format(k=key, v=val))
    try:
        fval = float(val)
    except (TypeError, ValueError):
        raise SchemaError("Non-numeric value for {k}: {v!r}".format(k=key, v=val))
    ok = (lo <= fval <= hi) if inclusive else (lo < fval < hi)
    if not ok:
        raise SchemaError(
            "Out-of-range {k}: {v} (expected {lo} {ineq} {hi})".format(
                k=key, v=fval, lo=lo, ineq="<= ... <=" if inclusive else "< ... <", hi=hi
            ),
            {"key": key, "value": fval},
        )


def validate(params: Mapping[str, Any]) -> None:
    """
    Validate a parameter dict *after* canonicalization via `normalize_keys`.

    Raises
    ------
    SchemaError
        On any violation (bad enum, non-numeric ranged value, or out-of-range).
    """
    for k, v in params.items():
        _check_enum(k, v)
        _check_range(k, v)
