# -*- coding: utf-8 -*-
# Lagrangix/structure/checks/rules.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 5/5/2026 (Updated: 6/20/2026)

Purpose:
--------
Invariant rules for a generated structure. A wrong Ninfo does not crash anything; it
silently produces wrong connectivity and wrong forces in the solver. These rules turn
those invariants into findings that the driver can act on before files are written.

Main Tasks:
-----------
   - Define checks with the uniform signature: `<rule_id>(st, th) -> dict`.
   - Emit findings with a stable schema for machine consumption.

Inputs/Contracts:
-----------------
- `st` : ImmersedStructure (read-only)
- `th` : dict of thresholds (`x_tol`, `max_spacing_ratio`); unknown keys are ignored.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error" | "warn",
      "ok": bool,
      "count": int,          # number of violations (or 0)
      "examples": [...],     # capped sample of offending records/indices
      "details": {...},
    }
"""

from typing import Dict, List
from geometry.tube.tube_math import MAX_SPACING_RATIO
from ..porosity import END_CODES


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, severity: str = "error"):
    return {
        "id": rule_id,
        "severity": severity,
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details,
    }


# ---- topology / bookkeeping ----
def equal_wall_lengths(st, th):
    lengths = {c.name: len(c) for c in st.info.chains()}
    ok = len(set(lengths.values())) == 1
    return _finding("equal_wall_lengths", ok, 0 if ok else 1, [] if ok else [lengths], {"lengths": lengths})


def index_bounds(st, th):
    n = st.geometry.point_count
    bad = []
    for kind, recs, ncols in (("spring", st.springs, 2), ("beam", st.beams, 3),
                              ("target", st.targets, 1), ("porous", st.porous, 1)):
        for rec in recs:
            if any(not (1 <= int(v) <= n) for v in tuple(rec)[:ncols]):
                bad.append((kind, tuple(rec)[:ncols]))
    return _finding("index_bounds", not bad, len(bad), bad, {"point_count": n})


# ---- springs ----
def spring_count(st, th):
    info = st.info
    expected = info.inner_total - 2 + info.half_count
    got = len(st.springs)
    return _finding("spring_count", got == expected, abs(got - expected), [],
                    {"expected": expected, "got": got})


def cross_link_pairing(st, th):
    info = st.info
    chains = info.chain_map()
    top, bottom = chains["gut_top"], chains["gut_bottom"]
    tol = float(th.get("x_tol", 1e-12))
    P = st.points

    cross = [s for s in st.springs if s.a in top and s.b in bottom]
    bad = []
    for s in cross:
        if s.b - s.a != info.half_count or abs(P[s.a - 1, 0] - P[s.b - 1, 0]) > tol:
            bad.append((s.a, s.b))
    covered = sorted(s.a for s in cross)
    if covered != list(top.indices):
        bad.append(("coverage", len(covered), len(top)))
    return _finding("cross_link_pairing", not bad, len(bad), bad,
                    {"cross_links": len(cross), "half_count": info.half_count})


# ---- beams ----
def beam_count(st, th):
    info = st.info
    expected = info.inner_total - 4
    chain_of = {}
    for c in info.inner_chains():
        for s in c.indices:
            chain_of[s] = c.name
    bad = [(b.p, b.q, b.r) for b in st.beams
           if not (b.q - b.p == 1 and b.r - b.q == 1
                   and chain_of.get(b.p) is not None
                   and chain_of.get(b.p) == chain_of.get(b.q) == chain_of.get(b.r))]
    got = len(st.beams)
    ok = got == expected and not bad
    return _finding("beam_count", ok, len(bad) + abs(got - expected), bad,
                    {"expected": expected, "got": got})


# ---- leg tables ----
def _leg_index_finding(rule_id, recs, info):
    expected = list(range(info.inner_total + 1, info.point_count + 1))
    got = [r.index for r in recs]
    missing = sorted(set(expected) - set(got))
    extra = sorted(set(got) - set(expected))
    ok = got == expected
    count = len(missing) + len(extra)
    if not ok and not count:
        count = 1  # duplicates or wrong order
    return _finding(rule_id, ok, count, missing + extra, {"expected": len(expected), "got": len(got)})


def target_count(st, th):
    return _leg_index_finding("target_count", st.targets, st.info)


def porosity_count(st, th):
    return _leg_index_finding("porosity_count", st.porous, st.info)


def porosity_codes(st, th):
    codes = {r.index: r.code for r in st.porous}
    expected = {}
    for c in st.info.outer_chains():
        ids = list(c.indices)
        for pos, code in END_CODES.items():
            expected[ids[pos]] = code
    bad = []
    for idx, code in codes.items():
        want = expected.get(idx, 0)
        if code != want:
            bad.append((idx, code, want))
    nonzero = sum(1 for v in codes.values() if v != 0)
    ok = not bad and nonzero == 2 * len(END_CODES)
    return _finding("porosity_codes", ok, len(bad), bad, {"nonzero": nonzero})


# ---- resolution (advisory) ----
def grid_resolution(st, th):
    params = st.geometry.params
    ratio = float(th.get("max_spacing_ratio", MAX_SPACING_RATIO))
    dx = float(params["Lx"]) / float(params["Nx"])
    ds = float(params["ds"])
    ok = ds <= ratio * dx * (1.0 + 1e-12)
    return _finding("grid_resolution", ok, 0 if ok else 1, [],
                    {"ds": ds, "dx": dx, "ds_over_dx": ds / dx}, severity="warn")
