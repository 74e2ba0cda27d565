"""
Current Estimation
==================

Set and drift of the current from the difference between the ground track
(COG/SOG from GNSS) and the water track (heading + leeway, STW).
"""

import math
from dataclasses import dataclass
import logging

from .angles import wrap_360

logger = logging.getLogger(__name__)


# Below this both current components are treated as zero
CURRENT_EPSILON = 1e-9


@dataclass(frozen=True)
class CurrentEstimate:
    """Current drift and set."""
    speed: float       # Drift, in the input speed unit
    direction: float   # Set (degrees, direction the current flows towards)


def estimate_current(
    speed_over_ground: float,
    course_over_ground: float,
    speed_through_water: float,
    heading: float,
    leeway: float = 0.0,
    variation: float = 0.0,
) -> CurrentEstimate:
    """
    Estimate current from ground and water tracks.

    Args:
        speed_over_ground: SOG
        course_over_ground: COG (degrees true)
        speed_through_water: Leeway corrected STW
        heading: Heading (degrees magnetic)
        leeway: Leeway angle (degrees)
        variation: Magnetic variation (degrees)

    Returns:
        CurrentEstimate. The direction has variation added and is not
        wrapped again, so it can fall outside 0..360.
    """
    cog_mag = course_over_ground - variation
    alpha = math.radians(90.0 - (heading + leeway))
    gamma = math.radians(90.0 - cog_mag)

    curr_x = speed_over_ground * math.cos(gamma) - speed_through_water * math.cos(alpha)
    curr_y = speed_over_ground * math.sin(gamma) - speed_through_water * math.sin(alpha)
    soc = math.hypot(curr_x, curr_y)

    doc_cartesian = math.atan2(curr_y, curr_x)

    if math.isnan(doc_cartesian) or (
            abs(curr_x) < CURRENT_EPSILON and abs(curr_y) < CURRENT_EPSILON):
        doc = 180.0 if curr_y < 0.0 else 0.0
    else:
        doc = wrap_360(90.0 - math.degrees(doc_cartesian))

    logger.debug(f"Current: {soc:.2f} @ {doc + variation:.1f}")
    return CurrentEstimate(speed=soc, direction=doc + variation)
