# -*- coding: utf-8 -*-
# Lagrangix/structure/checks/registry.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 5/5/2026

Purpose:
--------
Central registry of structure validation rules. Each rule is defined once here with its
metadata (id, function, severity), providing a single source of truth for execution
order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from . import rules as _r


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(structure, thresholds_dict) -> finding_dict
    severity: str  # "error" | "warn"


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (hard failures)
_add(RuleSpec("equal_wall_lengths", _r.equal_wall_lengths, "error"))
_add(RuleSpec("index_bounds",       _r.index_bounds,       "error"))
_add(RuleSpec("spring_count",       _r.spring_count,       "error"))
_add(RuleSpec("cross_link_pairing", _r.cross_link_pairing, "error"))
_add(RuleSpec("beam_count",         _r.beam_count,         "error"))
_add(RuleSpec("target_count",       _r.target_count,       "error"))
_add(RuleSpec("porosity_count",     _r.porosity_count,     "error"))
_add(RuleSpec("porosity_codes",     _r.porosity_codes,     "error"))

# Warnings (advisories)
_add(RuleSpec("grid_resolution",    _r.grid_resolution,    "warn"))


# ---- Deterministic execution order ----
# Partition first; then each table; then resolution advice.
RULES_ORDER: List[str] = [
    "equal_wall_lengths",
    "index_bounds",
    "spring_count",
    "cross_link_pairing",
    "beam_count",
    "target_count",
    "porosity_count",
    "porosity_codes",
    "grid_resolution",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER with an enable/disable map (absent ids default to enabled).
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
