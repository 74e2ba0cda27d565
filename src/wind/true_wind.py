"""
True Wind Module
================

Derives true wind, VMG and current from one snapshot of instrument data.

Pipeline:
    validate -> normalize AWA -> attitude correction -> leeway
             -> true wind -> current

The vector method follows the sailboatinstruments.blogspot.com write-up on
true wind, VMG and current: the boat's velocity (forward STW plus lateral
leeway drift) is added to the apparent wind vector in a frame where the bow
points along +y.

Everything here is a pure function of its inputs. No state is kept between
calls, so the module can be used freely from any thread.
"""

import math
from dataclasses import dataclass, asdict
from typing import Optional, Union
import logging

from .angles import normalize_apparent_angle, wrap_360
from .attitude import WindReading, correct_attitude
from .leeway import SpeedUnit, resolve_speed_unit, estimate_leeway
from .current import estimate_current

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when the inputs cannot be combined into a valid calculation."""


@dataclass
class TrueWindInput:
    """
    One snapshot of instrument readings.

    Angles in degrees, speeds in one consistent unit. For roll, pitch and
    leeway_coefficient a value of 0 means "not provided" and disables the
    matching correction.
    """
    boat_speed: float = 0.0              # Paddlewheel STW, before leeway correction
    speed_over_ground: float = 0.0       # SOG
    course_over_ground: float = 0.0      # COG (degrees)
    apparent_wind_speed: float = 0.0     # AWS
    apparent_wind_angle: float = 0.0     # AWA (degrees, 0=bow, +ve starboard)
    heading: float = 0.0                 # Heading (degrees magnetic)

    # Optional corrections
    variation: float = 0.0               # Magnetic variation (degrees)
    roll: float = 0.0                    # Sensor roll (degrees, +ve starboard)
    pitch: float = 0.0                   # Sensor pitch (degrees)
    leeway_coefficient: float = 0.0      # Leeway K
    speed_unit: Union[SpeedUnit, str, None] = None  # Unit of boat_speed, needed with K


@dataclass(frozen=True)
class TrueWindOutput:
    """Derived navigation data for one snapshot."""
    apparent_wind_angle: float   # AWA after normalization and attitude correction
    apparent_wind_speed: float   # AWS after attitude correction
    leeway: float                # Leeway (degrees)
    speed_through_water: float   # Leeway corrected STW
    vmg: float                   # Velocity made good
    true_wind_speed: float       # TWS
    true_wind_angle: float       # TWA (degrees, relative to bow)
    true_wind_direction: float   # TWD (degrees true)
    current_speed: float         # Drift
    current_direction: float     # Set (degrees true)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TrueWind:
    """Result of the true wind vector solution."""
    speed: float
    angle: float
    direction: float
    speed_through_water: float
    vmg: float


def validate_input(snapshot: TrueWindInput) -> Optional[SpeedUnit]:
    """
    Check that a leeway coefficient comes with a usable speed unit.

    Returns:
        The resolved speed unit (None when not given or not needed)

    Raises:
        InvalidConfiguration: K is non-zero and speed_unit is not "m/s" or "kt"
    """
    unit = resolve_speed_unit(snapshot.speed_unit)
    if snapshot.leeway_coefficient != 0 and unit is None:
        logger.error(
            f"Leeway coefficient {snapshot.leeway_coefficient} given with "
            f"speed_unit={snapshot.speed_unit!r}; speed_unit must be 'm/s' or 'kt'"
        )
        raise InvalidConfiguration(
            "With a leeway coefficient, speed_unit must be 'm/s' or 'kt' "
            f"(got {snapshot.speed_unit!r})"
        )
    return unit


def solve_true_wind(
    apparent_wind_speed: float,
    apparent_wind_angle: float,
    boat_speed: float,
    leeway: float = 0.0,
    heading: float = 0.0,
    variation: float = 0.0,
) -> TrueWind:
    """
    Solve the wind triangle.

    Args:
        apparent_wind_speed: AWS
        apparent_wind_angle: AWA (degrees)
        boat_speed: Paddlewheel STW
        leeway: Leeway angle (degrees)
        heading: Heading (degrees magnetic)
        variation: Magnetic variation (degrees)

    Returns:
        TrueWind with TWS, TWA (-180..180), TWD, leeway corrected STW and VMG
    """
    leeway_rad = math.radians(leeway)
    stw = boat_speed / math.cos(leeway_rad)
    lateral_speed = stw * math.sin(leeway_rad)

    # Wind vector in a frame with the bow along +y
    cartesian_awa = math.radians(270.0 - apparent_wind_angle)
    aws_x = apparent_wind_speed * math.cos(cartesian_awa)
    aws_y = apparent_wind_speed * math.sin(cartesian_awa)

    tws_x = aws_x + lateral_speed
    tws_y = aws_y + boat_speed
    tws = math.hypot(tws_x, tws_y)

    if tws_x == 0.0 and tws_y == 0.0:
        twa = apparent_wind_angle
    else:
        twa = 270.0 - math.degrees(math.atan2(tws_y, tws_x))
        if apparent_wind_angle >= 0.0:
            # Whole degrees on starboard, kept for compatibility with
            # existing instrument outputs
            twa = math.fmod(math.trunc(twa), 360)
        else:
            twa -= 360.0

        if twa > 180.0:
            twa -= 360.0
        elif twa < -180.0:
            twa += 360.0

    vmg = stw * math.cos(math.radians(-twa + leeway))
    twd = wrap_360(heading + twa) + variation

    return TrueWind(
        speed=tws,
        angle=twa,
        direction=twd,
        speed_through_water=stw,
        vmg=vmg,
    )


def compute_true_wind(snapshot: TrueWindInput) -> TrueWindOutput:
    """
    Compute true wind, VMG and current for one instrument snapshot.

    Args:
        snapshot: Instrument readings

    Returns:
        Newly built TrueWindOutput

    Raises:
        InvalidConfiguration: leeway coefficient without a valid speed unit
    """
    unit = validate_input(snapshot)

    awa = normalize_apparent_angle(snapshot.apparent_wind_angle)
    wind = correct_attitude(
        WindReading(speed=snapshot.apparent_wind_speed, angle=awa),
        roll=snapshot.roll,
        pitch=snapshot.pitch,
    )

    leeway = estimate_leeway(
        boat_speed=snapshot.boat_speed,
        roll=snapshot.roll,
        apparent_wind_angle=wind.angle,
        leeway_coefficient=snapshot.leeway_coefficient,
        speed_unit=unit,
    )

    true_wind = solve_true_wind(
        apparent_wind_speed=wind.speed,
        apparent_wind_angle=wind.angle,
        boat_speed=snapshot.boat_speed,
        leeway=leeway,
        heading=snapshot.heading,
        variation=snapshot.variation,
    )

    current = estimate_current(
        speed_over_ground=snapshot.speed_over_ground,
        course_over_ground=snapshot.course_over_ground,
        speed_through_water=true_wind.speed_through_water,
        heading=snapshot.heading,
        leeway=leeway,
        variation=snapshot.variation,
    )

    logger.debug(
        f"TWS={true_wind.speed:.2f} TWA={true_wind.angle:.1f} "
        f"TWD={true_wind.direction:.1f} leeway={leeway:.2f}"
    )

    return TrueWindOutput(
        apparent_wind_angle=wind.angle,
        apparent_wind_speed=wind.speed,
        leeway=leeway,
        speed_through_water=true_wind.speed_through_water,
        vmg=true_wind.vmg,
        true_wind_speed=true_wind.speed,
        true_wind_angle=true_wind.angle,
        true_wind_direction=true_wind.direction,
        current_speed=current.speed,
        current_direction=current.direction,
    )
