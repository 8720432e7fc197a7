# domain/geometry/vector.py
from typing import Optional
from pydantic import Field, field_validator
import math
from domain.geometry.constants import EPSILON
from utils.base_model import ImmutableModel


class Vector2(ImmutableModel):
    """
    Represents a 2D vector in Cartesian coordinates.

    Provides the vector algebra needed for sight calculations. Comparisons
    are approximate, using a fixed absolute tolerance per component.
    """
    x: float = Field(default=0.0, description="X component")
    y: float = Field(default=0.0, description="Y component")

    @field_validator("x", "y")
    @classmethod
    def validate_components(cls, value: float) -> float:
        """Validate that components are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Component must be a finite number, got {value}")
        return value

    @classmethod
    def zero(cls) -> "Vector2":
        """The zero vector."""
        return cls(x=0.0, y=0.0)

    def dot(self, other: "Vector2") -> float:
        """Calculate the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Calculate the Euclidean length of the vector without intermediate overflow."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """
        Get the unit vector pointing in the same direction.

        The zero vector has no direction, so normalizing it yields the zero
        vector instead of dividing by zero.
        """
        length = self.magnitude()
        if length == 0:
            return Vector2.zero()
        return Vector2(x=self.x / length, y=self.y / length)

    def add(self, other: "Vector2") -> "Vector2":
        """Component-wise addition."""
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        """Component-wise subtraction."""
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        """Scale both components by a factor."""
        return Vector2(x=self.x * factor, y=self.y * factor)

    def distance_to(self, other: "Vector2") -> float:
        """
        Calculate the Euclidean distance to another vector's tip.

        Infinite when the distance exceeds the largest finite float.
        """
        return math.hypot(self.x - other.x, self.y - other.y)

    def approx_equals(self, other: "Vector2", tolerance: Optional[float] = None) -> bool:
        """
        Check whether two vectors are equal within a per-component tolerance.

        Args:
            other: The vector to compare with
            tolerance: Exclusive bound on each component difference.
                      If None, uses the default EPSILON value.

        Returns:
            True if both component differences are below the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def format_as_tuple(self) -> str:
        """Format the vector as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the vector."""
        return self.format_as_tuple()


def dot(a: Vector2, b: Vector2) -> float:
    return a.dot(b)


def magnitude(v: Vector2) -> float:
    return v.magnitude()


def normalized(v: Vector2) -> Vector2:
    return v.normalized()


def add(a: Vector2, b: Vector2) -> Vector2:
    return a.add(b)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return a.sub(b)


def approx_equals(a: Vector2, b: Vector2) -> bool:
    return a.approx_equals(b)
