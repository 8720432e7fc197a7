#!/usr/bin/env python3
"""
Sightline demo.

Runs the reference camera scenario and logs expected against actual
visibility for each target.
"""
__version__ = "1.0"

import logging
import sys

from domain.geometry.vector import Vector2
from domain.sight.sight_cone import SightCone
from utils.constants import (
    DEMO_POSITION, DEMO_ORIENTATION, DEMO_FIELD_OF_VIEW, DEMO_VIEW_DISTANCE, DEMO_TARGETS
)
from utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_demo_camera() -> SightCone:
    """Create the reference camera used by the demo."""
    return SightCone(
        position=Vector2(x=DEMO_POSITION[0], y=DEMO_POSITION[1]),
        orientation=Vector2(x=DEMO_ORIENTATION[0], y=DEMO_ORIENTATION[1]),
        field_of_view=DEMO_FIELD_OF_VIEW,
        view_distance=DEMO_VIEW_DISTANCE,
    )


def run_demo(camera: SightCone) -> int:
    """
    Check every demo target against the camera.

    Returns:
        Number of targets whose visibility differs from the expectation
    """
    logger.info(f"Camera: {camera}")
    mismatches = 0
    for description, (x, y), expected in DEMO_TARGETS:
        target = Vector2(x=x, y=y)
        actual = camera.can_see(target)
        if actual == expected:
            logger.info(f"{target} {description}: expected {expected}, got {actual}")
        else:
            mismatches += 1
            logger.error(f"{target} {description}: expected {expected}, got {actual}")
    return mismatches


def main() -> int:
    """Main function to run the demo."""
    configure_logging()
    mismatches = run_demo(build_demo_camera())
    if mismatches:
        logger.error(f"{mismatches} of {len(DEMO_TARGETS)} targets did not match")
        return 1
    logger.info(f"All {len(DEMO_TARGETS)} targets matched")
    return 0


if __name__ == "__main__":
    sys.exit(main())
