"""Tests for attempt_match, nearest_unfound and pixel_distance."""
import pytest

from spot_diff import (
    Hit,
    Miss,
    NormalizedClick,
    TargetSet,
    attempt_match,
    nearest_unfound,
    pixel_distance,
)


def _click(x, y):
    return NormalizedClick(x=x, y=y)


class TestPixelDistance:

    def test_scales_each_axis(self):
        """Distance is measured after scaling by width and height."""
        assert pixel_distance(0.0, 0.0, 0.5, 0.5, 60, 80) == pytest.approx(50.0)

    def test_same_point_is_zero(self):
        assert pixel_distance(0.3, 0.7, 0.3, 0.7, 480, 480) == 0.0


class TestAttemptMatch:
    """Hit/miss judgement against unfound targets."""

    def test_hit_within_radius(self):
        """Click 14px from the only target is a hit on it."""
        targets = TargetSet.from_pairs([(0.5, 0.5)])
        result = attempt_match(_click(250 / 480, 250 / 480), targets, (), 480, 480, 35)
        assert isinstance(result, Hit)
        assert result.target_id == 0
        assert result.distance == pytest.approx(14.142, abs=1e-3)

    def test_miss_outside_radius(self):
        """Click far from every target is a miss naming the nearest one."""
        targets = TargetSet.from_pairs([(0.5, 0.5)])
        result = attempt_match(_click(0.75, 0.75), targets, (), 480, 480, 35)
        assert isinstance(result, Miss)
        assert result.nearest_id == 0
        assert result.distance == pytest.approx(169.706, abs=1e-3)

    def test_exact_radius_is_hit(self):
        """A click exactly radius pixels away counts."""
        targets = TargetSet.from_pairs([(0.5, 0.5)])
        result = attempt_match(_click(0.5625, 0.5), targets, (), 512, 512, 32)
        assert result == Hit(target_id=0, distance=32.0)

    def test_just_outside_radius_is_miss(self):
        targets = TargetSet.from_pairs([(0.5, 0.5)])
        result = attempt_match(_click(0.5625, 0.5), targets, (), 512, 512, 31.9)
        assert isinstance(result, Miss)

    def test_nearest_of_several_wins(self):
        """The closest target inside the radius is chosen."""
        targets = TargetSet.from_pairs([(0.1, 0.1), (0.5, 0.5), (0.52, 0.5)])
        result = attempt_match(_click(0.515, 0.5), targets, (), 480, 480, 35)
        assert isinstance(result, Hit)
        assert result.target_id == 2

    def test_tie_goes_to_lowest_id(self):
        """Equidistant targets resolve to the lower id."""
        targets = TargetSet.from_pairs([(0.25, 0.5), (0.75, 0.5)])
        result = attempt_match(_click(0.5, 0.5), targets, (), 100, 100, 50)
        assert result == Hit(target_id=0, distance=25.0)

    def test_tie_lowest_id_among_unfound(self):
        """With the lower id found, the tie goes to the next one."""
        targets = TargetSet.from_pairs([(0.25, 0.5), (0.75, 0.5)])
        result = attempt_match(_click(0.5, 0.5), targets, {0}, 100, 100, 50)
        assert result == Hit(target_id=1, distance=25.0)

    def test_found_targets_are_skipped(self):
        """Clicking a found target again does not hit it twice."""
        targets = TargetSet.from_pairs([(0.25, 0.5), (0.75, 0.5)])
        result = attempt_match(_click(0.25, 0.5), targets, {0}, 480, 480, 35)
        assert isinstance(result, Miss)
        assert result.nearest_id == 1
        assert result.distance == pytest.approx(240.0)

    def test_all_found_is_plain_miss(self):
        """No unfound targets leaves nothing to report."""
        targets = TargetSet.from_pairs([(0.5, 0.5)])
        result = attempt_match(_click(0.5, 0.5), targets, {0}, 480, 480, 35)
        assert result == Miss()
        assert result.nearest_id is None
        assert result.distance is None

    def test_non_square_surface_uses_pixel_space(self):
        """Nearest is judged in pixels, not normalized units."""
        # Normalized, target 1 is closer (0.125 vs 0.25); in pixels target 0 is (50 vs 100).
        targets = TargetSet.from_pairs([(0.5, 0.25), (0.625, 0.5)])
        result = attempt_match(_click(0.5, 0.5), targets, (), 800, 200, 60)
        assert result == Hit(target_id=0, distance=50.0)

    def test_does_not_mutate_found_ids(self):
        """Matching is a pure query."""
        targets = TargetSet.from_pairs([(0.5, 0.5), (0.1, 0.1)])
        found = {1}
        attempt_match(_click(0.5, 0.5), targets, found, 480, 480, 35)
        assert found == {1}


class TestNearestUnfound:

    def test_returns_point_and_distance(self):
        targets = TargetSet.from_pairs([(0.0, 0.0), (1.0, 1.0)])
        point, dist = nearest_unfound(_click(0.875, 1.0), targets, (), 80, 80)
        assert point.id == 1
        assert dist == pytest.approx(10.0)

    def test_none_when_everything_found(self):
        targets = TargetSet.from_pairs([(0.0, 0.0), (1.0, 1.0)])
        assert nearest_unfound(_click(0.5, 0.5), targets, {0, 1}, 80, 80) is None
