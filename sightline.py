# sightline.py
"""
Sightline - 2D vector math and sight-cone visibility
"""
from domain.geometry.constants import EPSILON, MAX_FINITE_FLOAT
from domain.geometry.vector import Vector2, dot, magnitude, normalized, add, sub, approx_equals
from domain.sight.sight_cone import SightCone

# Make them available when someone does 'import sightline'
__all__ = [
    'EPSILON',
    'MAX_FINITE_FLOAT',
    'Vector2',
    'SightCone',
    'dot',
    'magnitude',
    'normalized',
    'add',
    'sub',
    'approx_equals',
]
