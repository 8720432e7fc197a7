"""
Constants for the Sightline demo application.
"""
import logging
import math

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Reference camera: origin, facing up, 90 degree field of view, 100 unit range
DEMO_POSITION = (0.0, 0.0)
DEMO_ORIENTATION = (0.0, 1.0)
DEMO_FIELD_OF_VIEW = math.pi / 2
DEMO_VIEW_DISTANCE = 100.0

# (description, target, expected visibility)
DEMO_TARGETS = [
    ("300 units away, beyond view distance", (0.0, 300.0), False),
    ("50 units away, straight ahead", (0.0, 50.0), True),
    ("in range but behind", (0.0, -50.0), False),
    ("in range but to the right", (50.0, 0.0), False),
    ("in range but to the left", (-50.0, 0.0), False),
    ("on the edge of vision", (50.0, 50.0), False),
    ("just within the edge of vision", (50.0, 50.1), True),
    ("on the edge of vision (opposite side)", (-50.0, 50.0), False),
    ("just within the edge of vision (opposite side)", (-50.0, 50.1), True),
]
