# domain/geometry/constants.py
"""Constants for geometric calculations."""
import sys

# Absolute per-component tolerance for vector comparisons
EPSILON = 1e-4

# Largest finite float, used as "unbounded" range without resorting to infinity
MAX_FINITE_FLOAT = sys.float_info.max
