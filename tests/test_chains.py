import pytest

from geometry.topology.chains import (
    CHAIN_ORDER,
    Chain,
    SegmentInfo,
    segment_info_from_point_count,
    segment_info_from_wall_lengths,
)


def test_chain_ranges_partition_points():
    """The four chains cover 1..N once, in global order."""
    info = segment_info_from_wall_lengths(10, 10, 10, 10)
    chains = info.chains()

    assert tuple(c.name for c in chains) == CHAIN_ORDER
    covered = [i for c in chains for i in c.indices]
    assert covered == list(range(1, 41)), "Chains must tile the index space without gaps"
    assert info.chain_map()["leg_top"].stop == info.inner_plus_half_outer


def test_ninfo_triple():
    """Ninfo is (half_count, inner_total, inner_total + leg_top length)."""
    info = segment_info_from_wall_lengths(5, 5, 7, 7)
    assert info.as_ninfo() == (5, 10, 17)
    assert info.point_count == 24
    assert info.outer_half == 7
    assert info.outer_total == 14


def test_round_trip_from_point_count():
    """A vertex count re-derives the same metadata as the wall lengths."""
    info = segment_info_from_wall_lengths(1201, 1201, 1201, 1201)
    again = segment_info_from_point_count(info.point_count)
    assert again == info, "Round trip through the point count should be lossless"


@pytest.mark.parametrize("n", [0, -4, 6, 1202])
def test_point_count_must_split_in_four(n):
    """Counts that are not positive multiples of 4 are rejected."""
    with pytest.raises(ValueError):
        segment_info_from_point_count(n)


def test_unequal_walls_rejected():
    """Gut walls (or leg walls) of different lengths cannot be paired."""
    with pytest.raises(ValueError, match="gut_top"):
        segment_info_from_wall_lengths(5, 6, 7, 7)
    with pytest.raises(ValueError, match="leg_top"):
        segment_info_from_wall_lengths(5, 5, 7, 8)


def test_inconsistent_segment_info_rejected():
    """inner_total must be twice half_count."""
    with pytest.raises(ValueError):
        SegmentInfo(half_count=5, inner_total=9, inner_plus_half_outer=16, point_count=23)


def test_chain_position_and_membership():
    """Positions are 0-based within the chain; foreign indices raise."""
    chain = Chain("leg_bottom", 31, 40)
    assert len(chain) == 10
    assert 31 in chain and 40 in chain and 41 not in chain
    assert chain.position(31) == 0
    assert chain.position(40) == 9
    assert chain.duct == "leg"
    with pytest.raises(ValueError):
        chain.position(30)
