"""
Unit tests for current (set and drift) estimation.
"""

import pytest

from src.wind.current import CURRENT_EPSILON, estimate_current


class TestCurrentVector:
    """Tests for ground track minus water track."""

    def test_drifting_east_while_stopped(self):
        """No way on, ground track is all current."""
        current = estimate_current(speed_over_ground=2.0, course_over_ground=90.0,
                                   speed_through_water=0.0, heading=0.0)

        assert current.speed == pytest.approx(2.0)
        assert current.direction == pytest.approx(90.0, abs=1e-9)

    def test_foul_current_on_the_nose(self):
        """Heading south at 5 kt, making 6 kt over ground: 1 kt southerly set."""
        current = estimate_current(speed_over_ground=6.0, course_over_ground=180.0,
                                   speed_through_water=5.0, heading=180.0)

        assert current.speed == pytest.approx(1.0)
        assert current.direction == pytest.approx(180.0, abs=1e-9)

    def test_variation_added(self):
        current = estimate_current(speed_over_ground=6.0, course_over_ground=190.0,
                                   speed_through_water=5.0, heading=180.0, variation=10.0)

        assert current.speed == pytest.approx(1.0)
        assert current.direction == pytest.approx(190.0, abs=1e-9)

    def test_direction_not_rewrapped_after_variation(self):
        current = estimate_current(speed_over_ground=2.0, course_over_ground=370.0,
                                   speed_through_water=0.0, heading=0.0, variation=20.0)

        assert current.direction == pytest.approx(370.0, abs=1e-9)

    def test_leeway_rotates_water_track(self):
        """With leeway the water track is heading + leeway."""
        current = estimate_current(speed_over_ground=5.0, course_over_ground=95.0,
                                   speed_through_water=5.0, heading=90.0, leeway=5.0)

        assert current.speed < CURRENT_EPSILON


class TestCurrentDegenerate:
    """No current: direction falls back to 0 or 180."""

    def test_identical_tracks(self):
        current = estimate_current(speed_over_ground=6.0, course_over_ground=90.0,
                                   speed_through_water=6.0, heading=90.0)

        assert current.speed == 0.0
        assert current.direction == 0.0

    def test_identical_tracks_with_variation(self):
        current = estimate_current(speed_over_ground=6.0, course_over_ground=100.0,
                                   speed_through_water=6.0, heading=90.0, variation=10.0)

        assert current.speed < CURRENT_EPSILON
        assert current.direction == 10.0

    def test_tiny_negative_y_gives_180(self):
        current = estimate_current(speed_over_ground=6.0, course_over_ground=0.0,
                                   speed_through_water=6.0 + 1e-12, heading=0.0)

        assert current.speed < CURRENT_EPSILON
        assert current.direction == 180.0

    def test_tiny_positive_y_gives_0(self):
        current = estimate_current(speed_over_ground=6.0, course_over_ground=180.0,
                                   speed_through_water=6.0 + 1e-12, heading=180.0)

        assert current.speed < CURRENT_EPSILON
        assert current.direction == 0.0
