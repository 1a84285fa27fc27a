import pytest

from geometry.topology.chains import SegmentInfo, segment_info_from_wall_lengths
from structure.targets import leg_targets, expected_target_count
from structure.porosity import leg_porosity, end_code, expected_porous_count
from structure.errors import ConnectivityError


def test_targets_cover_every_leg_point(small_structure):
    """One target per leg point, in order, with stiffness 2e5."""
    info = small_structure.info
    targets = small_structure.targets

    assert len(targets) == info.point_count - info.inner_total == expected_target_count(info)
    assert [t.index for t in targets] == list(range(info.inner_total + 1, info.point_count + 1))
    assert all(t.stiffness == pytest.approx(2e5) for t in targets)


def test_exactly_eight_nonzero_codes(small_structure):
    """Porosity carries (-2, -1) and (+1, +2) at the ends of both leg walls."""
    info = small_structure.info
    n_info = info.as_ninfo()
    N = info.point_count
    codes = {p.index: p.code for p in small_structure.porous}

    expected = {
        n_info[1] + 1: -2,
        n_info[1] + 2: -1,
        n_info[2] - 1: 1,
        n_info[2]: 2,
        n_info[2] + 1: -2,
        n_info[2] + 2: -1,
        N - 1: 1,
        N: 2,
    }
    nonzero = {i: c for i, c in codes.items() if c != 0}
    assert nonzero == expected, "End codes must sit on the first/last two points of each leg wall"
    assert len(small_structure.porous) == expected_porous_count(info)


def test_porosity_alpha(small_structure):
    """Every porous record carries alpha = 1e-4."""
    assert all(p.alpha == pytest.approx(1e-4) for p in small_structure.porous)


def test_end_code_pattern_on_short_wall():
    """With four points per leg wall the codes read -2, -1, 1, 2 on each wall."""
    info = segment_info_from_wall_lengths(3, 3, 4, 4)
    records = leg_porosity(info, 0.5)
    assert [p.code for p in records] == [-2, -1, 1, 2, -2, -1, 1, 2]
    assert [p.index for p in records] == list(range(7, 15))

    leg_top = info.chain_map()["leg_top"]
    assert end_code(leg_top, 8) == -1


def test_leg_walls_too_short():
    """Fewer than four points per leg wall would overlap the end codes."""
    info = SegmentInfo(half_count=3, inner_total=6, inner_plus_half_outer=9, point_count=12)
    with pytest.raises(ConnectivityError):
        leg_porosity(info, 0.5)


def test_targets_follow_ninfo():
    """Target indices come from the metadata, not from a fixed layout."""
    info = segment_info_from_wall_lengths(5, 5, 7, 7)
    assert [t.index for t in leg_targets(info, 1.0)] == list(range(11, 25))
