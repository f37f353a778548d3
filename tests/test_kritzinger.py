import pytest

from ldsconverge.kritzinger import KritzingerSequence, kritzinger_points


def test_first_points():
    assert kritzinger_points(2) == [0.5, 0.25]


def test_empty_sequence():
    assert kritzinger_points(0) == []


def test_add_point_returns_appended_value():
    sequence = KritzingerSequence()
    first = sequence.add_point()
    second = sequence.add_point()
    assert sequence.points == [first, second]
    assert len(sequence) == 2


def test_sorted_points_track_points():
    sequence = KritzingerSequence()
    for _ in range(40):
        sequence.add_point()
        assert sequence.sorted_points == sorted(sequence.points)


def test_points_are_in_open_unit_interval_and_distinct():
    points = kritzinger_points(64)
    assert all(0.0 < p < 1.0 for p in points)
    assert len(set(points)) == len(points)


def test_function_matches_incremental_sequence():
    sequence = KritzingerSequence()
    for _ in range(20):
        sequence.add_point()
    assert list(sequence) == kritzinger_points(20)


def test_prefix_is_stable():
    assert kritzinger_points(30)[:10] == kritzinger_points(10)


def test_points_are_well_spread():
    points = sorted(kritzinger_points(50))
    gaps = [b - a for a, b in zip([0.0] + points, points + [1.0])]
    assert max(gaps) < 0.1


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        kritzinger_points(-1)