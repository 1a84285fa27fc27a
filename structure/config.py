# -*- coding: utf-8 -*-
# Lagrangix/structure/config.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/10/2026 (Updated: 6/20/2026)

Purpose
-------
Assemble the generation parameters from sectioned defaults and user overrides, resolve
derived values (Lagrangian spacing, spring resting lengths), enforce schema validation
and cross-key consistency, and render a deterministic sectioned text for logs.

Main Tasks
----------
    1. Flatten curated defaults and merge normalized, schema-checked user params.
    2. Resolve DS (0.5 * LX / NX), DS_ADJ (DS) and DS_ACROSS (LEG_D) when left as None.
    3. Run cross-key validation (ValidationError) and resolution warnings (logging).
    4. Render a sectioned text (extras under 'MISC'); load overrides from JSON.

Notes
-----
- NX and LX must match the values in the solver's own input file; that file is not
  read here.
- The defaults reproduce the sea-spider gut/leg example.
"""

import json
import logging
import io
from typing import Any, Dict, Mapping, Optional
from .schema import normalize_keys, validate
from .errors import ValidationError
from geometry.tube.tube_math import MAX_SPACING_RATIO

logger = logging.getLogger(__name__)

__all__ = ["DEFAULTS", "build_params", "cross_validate", "render_params", "load_params_json"]


# -----------------------------
_DEFAULTS_SECTIONS = [
    ("GRID", {
        "NX": 1024,            # Eulerian grid points in x (must be even)
        "LX": 1.0,             # Eulerian domain length in x
    }),
    ("STRUCTURE", {
        "STRUCT_NAME": "sea_spider",
        "DS": None,            # None -> 0.5 * LX / NX
        "LEG_D": 0.1,
        "GUT_D": 0.05,
    }),
    ("SPRINGS", {
        "K_SPRING_ADJ": 2.5e4,
        "K_SPRING_ACROSS": 1e2,
        "DS_ADJ": None,        # None -> DS
        "DS_ACROSS": None,     # None -> LEG_D
    }),
    ("BEAMS", {
        "K_BEAM": 1e3,
        "BEAM_CURVATURE": 0.0,
        "BEAM_CURVATURE_MODE": "CONSTANT",
    }),
    ("TARGETS", {
        "K_TARGET": 2e5,
    }),
    ("POROSITY", {
        "ALPHA": 1e-4,
    }),
    ("OUTPUT", {
        "OUT_DIR": ".",
        "EXPORT_VTK": False,
        "PLOT": False,
    }),
]


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)


# ---------- Public API ----------
def build_params(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge user params over sectioned defaults, resolve derived values, return a flat dict.

    Args
    ----
    params : Mapping[str, Any], optional
        Overrides using canonical keys or any alias from `schema.ALIASES`.

    Returns
    -------
    Dict[str, Any]
        Flat parameter dict with every derived value filled in.

    Raises
    ------
    SchemaError
        On a bad enum value, non-numeric or out-of-range scalar.
    ValidationError
        On cross-key contradictions (see `cross_validate`).
    """
    cfg = dict(DEFAULTS)
    if params:
        params = normalize_keys(params)
        validate(params)
        cfg.update(params)

    cfg["NX"] = int(cfg["NX"]) if float(cfg["NX"]).is_integer() else cfg["NX"]
    cfg["BEAM_CURVATURE_MODE"] = str(cfg["BEAM_CURVATURE_MODE"]).upper()

    if cfg.get("DS") is None:
        cfg["DS"] = 0.5 * float(cfg["LX"]) / float(cfg["NX"])
    if cfg.get("DS_ADJ") is None:
        cfg["DS_ADJ"] = cfg["DS"]
    if cfg.get("DS_ACROSS") is None:
        cfg["DS_ACROSS"] = cfg["LEG_D"]

    cross_validate(cfg)
    return cfg


def cross_validate(cfg: Mapping[str, Any]) -> None:
    """
    Cross-key logical validation (post-merge).

    Raises
    ------
    ValidationError
        If an inconsistent configuration is detected.
    """
    nx = cfg.get("NX")
    if not isinstance(nx, int) or nx % 2 != 0:
        raise ValidationError("NX must be an even integer.", {"NX": nx})

    if float(cfg["GUT_D"]) >= float(cfg["LEG_D"]):
        raise ValidationError(
            "The gut must fit inside the leg (GUT_D < LEG_D).",
            {"GUT_D": cfg["GUT_D"], "LEG_D": cfg["LEG_D"]},
        )

    name = cfg.get("STRUCT_NAME")
    if not isinstance(name, str) or not name.strip() or "/" in name or "\\" in name:
        raise ValidationError(
            "STRUCT_NAME must be a non-empty file stem without path separators.",
            {"STRUCT_NAME": name},
        )

    dx = float(cfg["LX"]) / float(nx)
    if float(cfg["DS"]) > MAX_SPACING_RATIO * dx * (1.0 + 1e-12):
        logger.warning(
            "[config] Lagrangian spacing DS=%g exceeds the grid spacing dx=%g; fluid may leak "
            "through the structure.", float(cfg["DS"]), dx,
        )


def render_params(cfg: Mapping[str, Any]) -> str:
    """
    Deterministic sectioned text (KEY= value), one comment header per section.
    Keys not belonging to known sections are placed under 'MISC'.
    """
    sections = []
    seen = set()
    for title, block in _DEFAULTS_SECTIONS:
        keys = [k for k in block.keys() if k in cfg]
        if not keys:
            continue
        lines = ["% --- {} ---".format(title)]
        lines.extend(["{}= {}".format(k, cfg[k]) for k in keys])
        sections.append(lines)
        seen.update(keys)

    misc_keys = sorted(k for k in cfg.keys() if k not in seen)
    if misc_keys:
        lines = ["% --- MISC ---"]
        lines.extend(["{}= {}".format(k, cfg[k]) for k in misc_keys])
        sections.append(lines)

    buf = io.StringIO()
    for i, block_lines in enumerate(sections):
        if i > 0:
            buf.write("\n")
        buf.write("\n".join(block_lines))
    buf.write("\n")
    return buf.getvalue()


def load_params_json(path: str) -> Dict[str, Any]:
    """
    Read parameter overrides from a JSON object file.

    Raises
    ------
    ValidationError
        If the file does not hold a JSON object.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValidationError("Parameter file must contain a JSON object.", {"path": path})
    return data
