import pytest
import numpy as np

from geometry.tube.tube_builder import TubeBuilder, build_tube_geometry
from geometry.tube.tube_math import (
    default_spacing,
    horizontal_samples,
    stepped_range,
    centerline_height,
)


def test_reference_spacing_gives_1201_points_per_wall():
    """ds=0.0005 on a unit domain samples 0.2..0.8 at 1201 points per wall."""
    geo = build_tube_geometry(ds=0.0005, Nx=1024, Lx=1.0, leg_d=0.1, gut_d=0.05)

    assert geo.info.half_count == 1201, f"Expected 1201 points per wall, got {geo.info.half_count}"
    assert geo.info.as_ninfo() == (1201, 2402, 3603), "Ninfo should follow the wall lengths"
    assert geo.point_count == 4 * 1201, "Four equal walls expected"


def test_default_spacing_is_half_grid_spacing():
    """Omitting ds selects 0.5 * Lx / Nx."""
    assert default_spacing(1024, 1.0) == pytest.approx(1.0 / 2048)

    geo = TubeBuilder(ds=None, Nx=64, Lx=1.0, leg_d=0.1, gut_d=0.05).build()
    assert geo.params["ds"] == pytest.approx(1.0 / 128)
    assert geo.info.half_count == 77, "0.6 / (1/128) = 76.8 -> 77 samples"


def test_wall_heights_and_order(small_geometry):
    """Walls are stacked gut_top, gut_bottom, leg_top, leg_bottom around y = Lx/16."""
    yc = centerline_height(1.0)
    assert yc == pytest.approx(1.0 / 16)

    expected = {
        "gut_top": yc + 0.025,
        "gut_bottom": yc - 0.025,
        "leg_top": yc + 0.05,
        "leg_bottom": yc - 0.05,
    }
    for name, y in expected.items():
        wall = small_geometry.wall(name)
        assert np.allclose(wall[:, 1], y), f"{name} should sit at y={y}"


def test_walls_share_x_samples(small_geometry):
    """Point i of every wall sits at the same x, within [0.2, 0.8]."""
    x0 = small_geometry.wall("gut_top")[:, 0]
    for name in ("gut_bottom", "leg_top", "leg_bottom"):
        assert np.array_equal(small_geometry.wall(name)[:, 0], x0), f"{name} x differs from gut_top"

    assert x0[0] == pytest.approx(0.2)
    assert x0[-1] <= 0.8 + 1e-12, "No sample beyond 0.8 * Lx"
    assert np.all(np.diff(x0) > 0), "x must increase along each wall"


def test_points_are_read_only(small_geometry):
    """The built point array cannot be modified in place."""
    with pytest.raises(ValueError):
        small_geometry.points[0, 0] = 42.0


def test_stepped_range_keeps_exact_endpoint():
    """Round-off does not drop the last sample when the step divides the span."""
    xs = stepped_range(0.2, 0.8, 0.1)
    assert len(xs) == 7
    assert xs[-1] == pytest.approx(0.8)

    assert len(horizontal_samples(1.0, 0.25)) == 3, "0.2, 0.45, 0.7"


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(ds=0.01, Nx=64, Lx=1.0, leg_d=0.05, gut_d=0.1),   # gut wider than leg
        dict(ds=0.01, Nx=64, Lx=1.0, leg_d=0.1, gut_d=0.1),    # gut as wide as leg
        dict(ds=-0.01, Nx=64, Lx=1.0, leg_d=0.1, gut_d=0.05),  # negative spacing
        dict(ds=0.01, Nx=64, Lx=0.0, leg_d=0.1, gut_d=0.05),   # empty domain
        dict(ds=0.01, Nx=64.5, Lx=1.0, leg_d=0.1, gut_d=0.05), # fractional grid
        dict(ds=0.3, Nx=64, Lx=1.0, leg_d=0.1, gut_d=0.05),    # too few samples
    ],
)
def test_invalid_inputs_raise(kwargs):
    """Bad geometric inputs are rejected before any point is produced."""
    with pytest.raises(ValueError):
        TubeBuilder(**kwargs)


def test_unknown_wall_name(small_geometry):
    """Asking for a wall that does not exist raises ValueError."""
    with pytest.raises(ValueError):
        small_geometry.wall("foot")
