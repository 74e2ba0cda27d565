"""
True Wind Calculator
====================

Command line entry point. Builds one instrument snapshot from the
arguments, runs the true wind calculation and prints the result.

With no arguments it reproduces the reference example
(AWA 45, AWS 10, COG 90, HDG 85, BSPD 6.5, SOG 6).
"""

import sys
import json
import argparse
import logging
from typing import Optional

from .wind.true_wind import (
    InvalidConfiguration,
    TrueWindInput,
    TrueWindOutput,
    compute_true_wind,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="True wind, VMG and current calculator")
    parser.add_argument("--awa", type=float, default=45.0,
                       help="Apparent wind angle (degrees, +ve starboard)")
    parser.add_argument("--aws", type=float, default=10.0,
                       help="Apparent wind speed")
    parser.add_argument("--bspd", type=float, default=6.5,
                       help="Boat speed through water (paddlewheel)")
    parser.add_argument("--sog", type=float, default=6.0,
                       help="Speed over ground")
    parser.add_argument("--cog", type=float, default=90.0,
                       help="Course over ground (degrees)")
    parser.add_argument("--heading", type=float, default=85.0,
                       help="Heading (degrees magnetic)")
    parser.add_argument("--variation", type=float, default=0.0,
                       help="Magnetic variation (degrees)")
    parser.add_argument("--roll", type=float, default=0.0,
                       help="Sensor roll (degrees, 0 = no attitude correction)")
    parser.add_argument("--pitch", type=float, default=0.0,
                       help="Sensor pitch (degrees, 0 = no attitude correction)")
    parser.add_argument("--leeway-k", type=float, default=0.0,
                       help="Leeway coefficient K (0 = no leeway correction)")
    parser.add_argument("--speed-unit", default=None,
                       help="Unit of boat speed for leeway: 'm/s' or 'kt'")
    parser.add_argument("--all", "-a", action="store_true",
                       help="Print every output field")
    parser.add_argument("--json", action="store_true",
                       help="Print output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true",
                       help="Verbose logging")
    return parser


def format_output(output: TrueWindOutput, show_all: bool = False, as_json: bool = False) -> str:
    """Render a result for the terminal."""
    if as_json:
        return json.dumps(output.as_dict(), indent=2)
    if show_all:
        return "\n".join(f"{name} {value:f}" for name, value in output.as_dict().items())
    return f"tws {output.true_wind_speed:f}\ntwa {output.true_wind_angle:f}"


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    snapshot = TrueWindInput(
        boat_speed=args.bspd,
        speed_over_ground=args.sog,
        course_over_ground=args.cog,
        apparent_wind_speed=args.aws,
        apparent_wind_angle=args.awa,
        heading=args.heading,
        variation=args.variation,
        roll=args.roll,
        pitch=args.pitch,
        leeway_coefficient=args.leeway_k,
        speed_unit=args.speed_unit,
    )

    try:
        output = compute_true_wind(snapshot)
    except InvalidConfiguration as e:
        logger.error(f"Calculation failed: {e}")
        return 1

    print(format_output(output, show_all=args.all, as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
