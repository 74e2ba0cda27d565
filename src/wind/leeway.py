"""
Leeway Estimation
=================

Estimates the sideways slip of the hull from heel angle and boat speed
using the usual empirical relation

    leeway = K * heel / STW^2      (STW in knots)

where K is a boat specific coefficient found by calibration.
"""

from enum import Enum
from typing import Optional, Union
import logging

from .angles import MS_TO_KT

logger = logging.getLogger(__name__)


MAX_LEEWAY = 45.0  # degrees


class SpeedUnit(str, Enum):
    """Unit of the boat speed fed into the leeway formula."""
    KNOTS = "kt"
    METERS_PER_SECOND = "m/s"


def resolve_speed_unit(unit: Union[SpeedUnit, str, None]) -> Optional[SpeedUnit]:
    """Return the SpeedUnit for a unit or its string value, None if unrecognized."""
    if unit is None:
        return None
    try:
        return SpeedUnit(unit)
    except ValueError:
        return None


def estimate_leeway(
    boat_speed: float,
    roll: float,
    apparent_wind_angle: float,
    leeway_coefficient: float,
    speed_unit: Optional[SpeedUnit] = None,
) -> float:
    """
    Estimate leeway angle.

    Args:
        boat_speed: Paddlewheel speed through water
        roll: Heel angle (degrees, +ve to starboard)
        apparent_wind_angle: AWA (degrees, +ve starboard)
        leeway_coefficient: K (0 disables leeway)
        speed_unit: Unit of boat_speed, required when K is non-zero

    Returns:
        Leeway in degrees, clamped to +-45
    """
    # Not moving, not heeling, or heeling towards the wind
    if (not boat_speed or not roll or not leeway_coefficient
            or (roll > 0 and apparent_wind_angle > 0)
            or (roll < 0 and apparent_wind_angle < 0)):
        return 0.0

    stw_kt = boat_speed if speed_unit == SpeedUnit.KNOTS else boat_speed * MS_TO_KT
    leeway = (leeway_coefficient * roll) / (stw_kt * stw_kt)

    if leeway > MAX_LEEWAY:
        logger.debug(f"Leeway {leeway:.1f} clamped to {MAX_LEEWAY}")
        leeway = MAX_LEEWAY
    elif leeway < -MAX_LEEWAY:
        logger.debug(f"Leeway {leeway:.1f} clamped to {-MAX_LEEWAY}")
        leeway = -MAX_LEEWAY

    return leeway
