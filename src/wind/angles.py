"""
Angle Helpers
=============

Unit constants and the angle wrapping rules shared by the wind calculations.
All public angles are degrees; trigonometry is done in radians internally.
"""

MS_TO_KT = 1.94384  # metres/second to knots


def normalize_apparent_angle(angle: float) -> float:
    """
    Bring an apparent wind angle into the -180..180 half circles.

    A single adjustment is applied: readings just past either side
    (e.g. 270 -> -90, -270 -> 90) are folded back, 180 stays 180.
    """
    if angle > 180:
        angle -= 360
    elif angle < -180:
        angle += 360
    return angle


def to_positive(angle: float) -> float:
    """Add a full turn to a negative angle (-180..180 -> 0..360)."""
    if angle < 0:
        angle += 360
    return angle


def wrap_360(angle: float) -> float:
    """Wrap angle to [0, 360) degrees."""
    return angle % 360.0
