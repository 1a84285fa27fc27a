import os
import pytest

from structure.api import build_geometry, build_structure, write_input_files
from structure.errors import ValidationError


def test_build_geometry_accepts_aliases():
    """Alias keys reach the geometry builder."""
    geo = build_geometry({"nx": 64, "legD": 0.2, "gutD": 0.1})
    assert geo.params["leg_d"] == 0.2
    assert geo.params["gut_d"] == 0.1
    assert geo.info.half_count == 77


def test_build_structure_counts():
    """Table sizes follow the segment metadata."""
    structure = build_structure({"nx": 64, "name": "tube"})
    info = structure.info

    assert structure.name == "tube"
    assert structure.counts() == {
        "vertex": info.point_count,
        "spring": info.inner_total - 2 + info.half_count,
        "beam": info.inner_total - 4,
        "target": info.point_count - info.inner_total,
        "porous": info.point_count - info.inner_total,
    }


def test_invalid_params_surface_as_validation_error():
    """A gut wider than the leg is rejected before building."""
    with pytest.raises(ValidationError):
        build_structure({"legD": 0.05, "gutD": 0.1})


def test_write_input_files(small_structure, temp_dir):
    """All five tables are written into the output directory."""
    out_dir = temp_dir / "run"
    paths = write_input_files(small_structure, str(out_dir))

    assert sorted(paths) == ["beam", "porous", "spring", "target", "vertex"]
    for path in paths.values():
        assert os.path.isfile(path), f"{path} should exist"


def test_write_input_files_with_plot(small_structure, temp_dir):
    """The sanity plot is saved next to the tables when requested."""
    paths = write_input_files(small_structure, str(temp_dir), plot=True)

    assert paths["png"].endswith("small_tube.png")
    assert os.path.getsize(paths["png"]) > 0


def test_reference_scenario_file_lengths(temp_dir):
    """ds=0.0005 on a unit domain: L=1201 points per wall and the matching file lengths."""
    structure = build_structure({"ds": 0.0005, "name": "sea_spider"})
    paths = write_input_files(structure, str(temp_dir))
    L = 1201
    N = 4 * L

    def n_lines(kind):
        with open(paths[kind]) as f:
            return len(f.read().splitlines())

    assert n_lines("vertex") == N + 1
    assert n_lines("spring") == 3 * L - 2 + 1
    assert n_lines("beam") == 2 * L - 4 + 1
    assert n_lines("target") == N - 2 * L + 1
    assert n_lines("porous") == N - 2 * L + 1
