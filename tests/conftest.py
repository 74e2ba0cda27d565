"""
Shared test fixtures for true wind unit tests.
"""

import math
import pytest
import numpy as np

from src.wind.true_wind import TrueWindInput


@pytest.fixture
def reference_input():
    """Reference example: beam reach, no corrections."""
    return TrueWindInput(
        apparent_wind_angle=45.0,
        apparent_wind_speed=10.0,
        course_over_ground=90.0,
        heading=85.0,
        boat_speed=6.5,
        speed_over_ground=6.0,
    )


@pytest.fixture
def heeled_input():
    """Close hauled on port tack with heel, sensor tilt and leeway."""
    return TrueWindInput(
        apparent_wind_angle=-35.0,
        apparent_wind_speed=18.0,
        course_over_ground=40.0,
        heading=50.0,
        boat_speed=6.8,
        speed_over_ground=6.2,
        variation=-3.0,
        roll=12.0,
        pitch=4.0,
        leeway_coefficient=10.0,
        speed_unit="kt",
    )


def _reference_true_wind(aws, awa, boat_speed, leeway=0.0):
    """
    Independent vector solution of the wind triangle.

    Returns (tws, untruncated cartesian twa in degrees, stw).
    """
    lw = np.radians(leeway)
    stw = boat_speed / np.cos(lw)
    boat = np.array([stw * np.sin(lw), boat_speed])
    theta = np.radians(270.0 - awa)
    apparent = aws * np.array([np.cos(theta), np.sin(theta)])
    true = apparent + boat
    tws = float(np.linalg.norm(true))
    twa = 270.0 - float(np.degrees(np.arctan2(true[1], true[0])))
    return tws, twa, float(stw)


def _apparent_from_true(tws, twa, boat_speed):
    """Build the apparent wind a boat would see for a given true wind."""
    theta = np.radians(270.0 - twa)
    true = tws * np.array([np.cos(theta), np.sin(theta)])
    apparent = true - np.array([0.0, boat_speed])
    aws = float(np.linalg.norm(apparent))
    awa = 270.0 - float(np.degrees(np.arctan2(apparent[1], apparent[0])))
    awa = math.remainder(awa, 360.0)
    return aws, awa


@pytest.fixture
def true_wind_reference():
    """Vector reference for checking the solver."""
    return _reference_true_wind


@pytest.fixture
def apparent_wind_for():
    """Builder for apparent wind from a chosen true wind."""
    return _apparent_from_true
