import dataclasses
import pytest

from structure.checks import run_checks, DEFAULTS
from structure.api import build_structure
from structure.checks.registry import REGISTRY, RULES_ORDER, get_enabled_ids
from structure.springs import Spring
from structure.porosity import PorousPoint


def _failing(findings):
    return {rid for rid, f in findings["rules"].items() if not f["ok"]}


def test_generated_structure_passes(small_structure):
    """A freshly built structure passes every error rule."""
    findings = run_checks(small_structure)

    assert findings["ok"], f"Unexpected failures: {_failing(findings)}"
    assert list(findings["rules"]) == RULES_ORDER
    assert findings["meta"]["ninfo"] == list(small_structure.info.as_ninfo())
    assert findings["meta"]["counts"]["porous"] == small_structure.counts()["porous"]


def test_registry_matches_order():
    """Every ordered rule is registered with a known severity."""
    assert set(REGISTRY) == set(RULES_ORDER)
    assert REGISTRY["grid_resolution"].severity == "warn"
    assert all(REGISTRY[r].severity == "error" for r in RULES_ORDER if r != "grid_resolution")


def test_disabled_rules_are_skipped(small_structure):
    """An enable map drops rules; absent ids stay enabled."""
    assert "beam_count" not in get_enabled_ids({"beam_count": False})
    findings = run_checks(small_structure, {"enabled": {"beam_count": False}})
    assert "beam_count" not in findings["rules"]
    assert "spring_count" in findings["rules"]
    assert DEFAULTS["enabled"]["beam_count"] is True, "DEFAULTS must not be mutated"


def test_dropped_spring_is_flagged(small_structure):
    """Removing a spring breaks the count rule."""
    broken = dataclasses.replace(small_structure, springs=small_structure.springs[:-1])
    findings = run_checks(broken)

    assert not findings["ok"]
    assert "spring_count" in _failing(findings)
    assert "cross_link_pairing" in _failing(findings), "The dropped spring was a cross link"


def test_shifted_cross_link_is_flagged(small_structure):
    """A cross link off by one index pairs points at different x."""
    springs = list(small_structure.springs)
    s = springs[-1]
    springs[-1] = Spring(s.a - 1, s.b, s.stiffness, s.rest_length)
    findings = run_checks(dataclasses.replace(small_structure, springs=springs))

    assert _failing(findings) == {"cross_link_pairing"}


def test_wrong_porosity_code_is_flagged(small_structure):
    """A misplaced end code fails the porosity code rule only."""
    porous = list(small_structure.porous)
    p = porous[5]
    porous[5] = PorousPoint(p.index, p.alpha, 1)
    findings = run_checks(dataclasses.replace(small_structure, porous=porous))

    assert _failing(findings) == {"porosity_codes"}
    assert findings["rules"]["porosity_codes"]["examples"][0] == (p.index, 1, 0)


def test_out_of_range_index_is_flagged(small_structure):
    """An index past the last point is caught by the bounds rule."""
    n = small_structure.geometry.point_count
    springs = list(small_structure.springs)
    springs[0] = Spring(1, n + 1, 1.0, 1.0)
    findings = run_checks(dataclasses.replace(small_structure, springs=springs))

    assert "index_bounds" in _failing(findings)
    assert findings["rules"]["index_bounds"]["examples"][0] == ("spring", (1, n + 1))


def test_coarse_spacing_is_only_a_warning(small_structure):
    """The default coarse fixture (ds = dx/2) passes; a tighter ratio warns without failing."""
    findings = run_checks(small_structure, {"thresholds": {"max_spacing_ratio": 0.25}})
    rule = findings["rules"]["grid_resolution"]

    assert not rule["ok"] and rule["severity"] == "warn"
    assert findings["ok"], "Warnings must not fail the run"


def test_reference_run_resolution_is_clean():
    """ds=0.0005 on Nx=1024 (ds/dx ~ 0.51) raises no resolution advisory."""
    structure = build_structure({"ds": 0.0005})
    rule = run_checks(structure)["rules"]["grid_resolution"]
    assert rule["ok"], f"Unexpected advisory: {rule['details']}"


@pytest.mark.parametrize("ds, warns", [(0.0125, False), (0.02, True)])
def test_config_and_check_share_spacing_threshold(ds, warns, caplog):
    """The config warning and the grid_resolution rule fire at the same spacing."""
    with caplog.at_level("WARNING"):
        structure = build_structure({"nx": 64, "ds": ds})
    rule = run_checks(structure)["rules"]["grid_resolution"]

    assert ("exceeds the grid spacing" in caplog.text) == warns
    assert rule["ok"] == (not warns)
