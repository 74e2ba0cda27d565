"""
Wind Module
===========

True wind, leeway and current calculations from instrument data.
"""

from .angles import MS_TO_KT, normalize_apparent_angle, wrap_360
from .attitude import WindReading, correct_attitude
from .leeway import SpeedUnit, MAX_LEEWAY, estimate_leeway, resolve_speed_unit
from .current import CurrentEstimate, estimate_current
from .true_wind import (
    InvalidConfiguration,
    TrueWindInput,
    TrueWindOutput,
    TrueWind,
    validate_input,
    solve_true_wind,
    compute_true_wind,
)

__all__ = [
    'MS_TO_KT', 'normalize_apparent_angle', 'wrap_360',
    'WindReading', 'correct_attitude',
    'SpeedUnit', 'MAX_LEEWAY', 'estimate_leeway', 'resolve_speed_unit',
    'CurrentEstimate', 'estimate_current',
    'InvalidConfiguration', 'TrueWindInput', 'TrueWindOutput', 'TrueWind',
    'validate_input', 'solve_true_wind', 'compute_true_wind',
]
