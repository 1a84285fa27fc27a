# -*- coding: utf-8 -*-
# Lagrangix/main.py

"""
End-to-end driver:
  1) Resolve generation parameters (defaults, or a JSON override file as argv[1])
  2) Build the gut/leg geometry and derive springs, beams, targets, porosity
  3) Run structure checks (hard stop on errors; report written as JSON)
  4) Write .vertex/.spring/.beam/.target/.porous (+ optional .vtu and sanity plot)
"""

import os
import logging
import json
import sys

from pathlib import Path
from structure.config import build_params, load_params_json, render_params
from structure.api import build_structure, write_input_files
from structure.checks import run_checks
from structure.errors import StructureError


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Lagrangix")

    # ------------------------------------------------------------------
    # 1) Parameters
    #    e.g. {"struct_name": "sea_spider", "nx": 1024, "legD": 0.1, "gutD": 0.05}
    # ------------------------------------------------------------------
    # Exit code 2: unusable parameters (exit code 1 is reserved for failed checks)
    try:
        overrides = load_params_json(sys.argv[1]) if len(sys.argv) > 1 else None
        params = build_params(overrides)
        log.info("Resolved parameters:\n%s", render_params(params))

        # --------------------------------------------------------------
        # 2) Geometry + topology tables
        # --------------------------------------------------------------
        structure = build_structure(params)
    except (StructureError, ValueError, OSError) as e:
        log.error("Invalid parameters: %s", e)
        sys.exit(2)

    out_dir = params["OUT_DIR"]
    os.makedirs(out_dir, exist_ok=True)
    log.info("Ninfo = %s, counts = %s", list(structure.info.as_ninfo()), structure.counts())

    # ------------------------------------------------------------------
    # 3) Structure checks (hard stop on errors)
    # ------------------------------------------------------------------
    CHECKS_CONFIG = None  # or e.g. {"thresholds": {"max_spacing_ratio": 1.0}}

    findings = run_checks(structure, CHECKS_CONFIG)

    report_path = Path(out_dir) / "{}.checks.json".format(structure.name)
    report_path.write_text(json.dumps(findings, indent=2, default=str))

    for rid, f in findings["rules"].items():
        if f.get("severity") == "warn" and not f.get("ok", True):
            log.warning("Check '%s' advises: %s", rid, f.get("details"))

    if not findings["ok"]:
        failures = []
        for rid, f in findings["rules"].items():
            if f.get("severity") == "error" and not f.get("ok", True):
                failures.append((rid, int(f.get("count", 0)), f.get("examples", [])[:3]))

        lines = [
            "Structure validation failed. The following error checks did not pass:",
            *(f"  - {rid}: count={cnt}"
              + (f", examples={examples}" if examples else "")
              for rid, cnt, examples in failures),
            f"See full report: {report_path}",
        ]
        print("\n".join(lines), file=sys.stderr)
        sys.exit(1)

    log.info("Structure checks passed. Report: %s", report_path)

    # ------------------------------------------------------------------
    # 4) Solver input files (+ optional QA artifacts)
    # ------------------------------------------------------------------
    paths = write_input_files(
        structure,
        out_dir,
        export_vtk=bool(params["EXPORT_VTK"]),
        plot=bool(params["PLOT"]),
    )
    for ext, path in paths.items():
        log.info("  %-7s -> %s", ext, path)
