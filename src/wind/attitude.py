"""
Attitude Correction
===================

Removes the effect of a tilted masthead anemometer from the apparent wind.

Only the static part of the correction is applied: the measured wind is
split into lateral and axial components and each is stretched by the
cosine of the roll/pitch angle. The velocity of the masthead due to the
boat rolling and pitching is not subtracted.
"""

import math
from dataclasses import dataclass
import logging

from .angles import to_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindReading:
    """Apparent wind as seen by the sensor."""
    speed: float   # Apparent wind speed
    angle: float   # Apparent wind angle (degrees, 0=bow, +ve starboard)


def correct_attitude(reading: WindReading, roll: float, pitch: float) -> WindReading:
    """
    Correct an apparent wind reading for sensor roll and pitch.

    Args:
        reading: Measured apparent wind
        roll: Sensor roll angle (degrees, 0 = not provided)
        pitch: Sensor pitch angle (degrees, 0 = not provided)

    Returns:
        Corrected reading with the angle in 0..360. The input is returned
        untouched when either roll or pitch is zero.
    """
    if not roll or not pitch:
        return reading

    angle = to_positive(reading.angle)
    angle_rad = math.radians(angle)

    lateral = reading.speed * math.sin(angle_rad)
    axial = reading.speed * math.cos(angle_rad)

    # Tilted cups see only the projection of the wind on their plane
    lateral /= math.cos(math.radians(roll))
    axial /= math.cos(math.radians(pitch))

    if lateral == 0.0 and axial == 0.0:
        # No wind, atan2(0, 0) says nothing about direction
        speed = reading.speed
        corrected = angle
    else:
        speed = math.hypot(lateral, axial)
        corrected = math.degrees(math.atan2(lateral, axial))

    corrected = to_positive(corrected)

    logger.debug(
        f"Attitude correction roll={roll:.1f} pitch={pitch:.1f}: "
        f"AWS {reading.speed:.2f} -> {speed:.2f}, AWA {reading.angle:.1f} -> {corrected:.1f}"
    )
    return WindReading(speed=speed, angle=corrected)
