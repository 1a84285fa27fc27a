# -*- coding: utf-8 -*-
# Lagrangix/structure/checks/__init__.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 5/5/2026 (Updated: 6/20/2026)

Purpose:
--------
Public API for running structure checks and returning normalized findings suitable
for CLI/CI consumption.

Returned Schema:
----------------
{
  "ok": bool,                      # False if any enabled ERROR rule failed
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "name": str, "ninfo": [int, int, int], "counts": dict,
    "thresholds": dict, "enabled": dict
  }
}
"""

from typing import Any, Dict, Optional
import copy
from geometry.tube.tube_math import MAX_SPACING_RATIO
from .registry import REGISTRY, get_enabled_ids


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        "equal_wall_lengths": True,
        "index_bounds": True,
        "spring_count": True,
        "cross_link_pairing": True,
        "beam_count": True,
        "target_count": True,
        "porosity_count": True,
        "porosity_codes": True,
        "grid_resolution": True,
    },
    "thresholds": {
        "x_tol": 1e-12,              # |x_top - x_bottom| allowed for a cross-gut link
        "max_spacing_ratio": MAX_SPACING_RATIO,  # advise when ds > ratio * (Lx / Nx)
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), without mutating inputs.
    """
    out = copy.deepcopy(base)
    if not upd:
        return out
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def run_checks(structure, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run every enabled rule over an ImmersedStructure.

    Args
    ----
    structure : ImmersedStructure
        Output of `structure.assembly.derive_tables`.
    config : dict, optional
        Partial overrides of DEFAULTS ({"enabled": {...}, "thresholds": {...}}).

    Returns
    -------
    dict
        See module docstring for the schema.
    """
    cfg = _deep_merge(DEFAULTS, config)
    th = cfg["thresholds"]

    findings = {}
    for rid in get_enabled_ids(cfg["enabled"]):
        findings[rid] = REGISTRY[rid].fn(structure, th)

    ok = all(f["ok"] for f in findings.values() if f["severity"] == "error")
    return {
        "ok": ok,
        "rules": findings,
        "meta": {
            "name": structure.name,
            "ninfo": list(structure.info.as_ninfo()),
            "counts": structure.counts(),
            "thresholds": th,
            "enabled": cfg["enabled"],
        },
    }


__all__ = ["DEFAULTS", "run_checks"]
