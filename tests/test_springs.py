import pytest

from geometry.topology.chains import segment_info_from_wall_lengths
from structure.springs import (
    adjacent_springs,
    cross_springs,
    expected_spring_count,
    gut_springs,
)


def test_spring_count_and_order(small_structure):
    """inner_total - 2 + half_count springs: adjacent top, adjacent bottom, then across."""
    info = small_structure.info
    springs = small_structure.springs

    assert len(springs) == info.inner_total - 2 + info.half_count
    h = info.half_count
    assert springs[0][:2] == (1, 2), "First record links the first two gut_top points"
    assert springs[h - 2][:2] == (h - 1, h), "Last top-wall link"
    assert springs[h - 1][:2] == (h + 1, h + 2), "Bottom wall starts after the top wall"
    assert springs[-1][:2] == (h, 2 * h), "Last cross link pairs the ends of both gut walls"


def test_no_link_across_wall_boundary(small_structure):
    """The last gut_top point is never linked to the first gut_bottom point by an adjacent spring."""
    h = small_structure.info.half_count
    pairs = {(s.a, s.b) for s in small_structure.springs}
    assert (h, h + 1) not in pairs, "Adjacent springs must not bridge the two walls"


def test_cross_links_pair_same_x(small_structure):
    """Each cross link joins top point i with bottom point i + half_count at equal x."""
    info = small_structure.info
    P = small_structure.points
    cross = small_structure.springs[info.inner_total - 2:]

    assert len(cross) == info.half_count
    for s in cross:
        assert s.b - s.a == info.half_count
        assert P[s.a - 1, 0] == P[s.b - 1, 0], f"Cross link {s.a}-{s.b} is not vertical"


def test_spring_parameters(small_params, small_structure):
    """Adjacent and across springs carry their own stiffness and resting length."""
    info = small_structure.info
    adjacent = small_structure.springs[0]
    across = small_structure.springs[-1]

    assert adjacent.stiffness == pytest.approx(2.5e4)
    assert adjacent.rest_length == pytest.approx(small_params["DS"])
    assert across.stiffness == pytest.approx(1e2)
    assert across.rest_length == pytest.approx(small_params["LEG_D"])
    assert len(small_structure.springs) == expected_spring_count(info)


def test_minimal_gut():
    """Two points per gut wall give two adjacent springs and two across springs."""
    info = segment_info_from_wall_lengths(2, 2, 4, 4)
    springs = gut_springs(info, 1.0, 2.0, 0.1, 0.2)

    assert [(s.a, s.b) for s in springs] == [(1, 2), (3, 4), (1, 3), (2, 4)]
    assert len(adjacent_springs(info, 1.0, 0.1)) == 2
    assert len(cross_springs(info, 1.0, 0.1)) == 2
