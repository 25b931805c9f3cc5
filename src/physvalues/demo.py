"""
physvalues.demo
===============

A short tour of the library, runnable as ``physvalues-demo`` or
``python -m physvalues.demo``:

- travel time of a 589 km trip at 300 km/h;
- speed and distance of an object in free fall;
- a few temperatures on offset scales;
- adding a duration to a speed, which is refused.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from physvalues.core.exceptions import DimensionMismatchError
from physvalues.log_config import setup_logging
from physvalues.units import celsius, fahrenheit, hour, kelvin, kilometer, meter, second

logger = logging.getLogger(__name__)

STANDARD_GRAVITY = 9.80665


def run(out: TextIO) -> bool:
    """Print the tour to ``out``. Returns True if the mismatch was caught."""
    # Paris to Bordeaux in a train running at 300 km/h
    distance = 589 * kilometer
    speed = 300 * (kilometer / hour)
    travel_time = distance / speed
    print(f"Travel time for {distance:native} at {speed}: {travel_time} "
          f"({travel_time.to(hour):native})", file=out)

    # Free fall with no initial speed
    g = STANDARD_GRAVITY * meter / second ** 2
    elapsed = 15 * second
    final_speed = g * elapsed
    print(f"Speed after {elapsed:native} of free fall: {final_speed}", file=out)

    elapsed = 47 * second
    fallen = 0.5 * g * elapsed ** 2
    print(f"Distance fallen after {elapsed:native}: {fallen}", file=out)

    # Temperatures
    for temperature in (2 * celsius, 100 * celsius, 98.6 * fahrenheit):
        print(f"{temperature:native} = {temperature.to(kelvin)} "
              f"= {temperature.to(fahrenheit):native}", file=out)

    # Adding values with different units makes no sense
    try:
        elapsed + final_speed
    except DimensionMismatchError as exc:
        logger.debug("Refused %s + %s", elapsed, final_speed)
        print(f"Refused: {exc}", file=out)
        return True
    logger.error("Adding %s to %s was not refused", elapsed, final_speed)
    return False


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="physvalues-demo",
        description="Demonstrate dimension-safe arithmetic on physical values.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)
    return 0 if run(sys.stdout) else 1


if __name__ == "__main__":
    sys.exit(main())
