# domain/sight/sight_cone.py
"""
Sight cone: a camera that decides whether a point lies within its view.
"""
from typing import Iterable, List, Tuple
from pydantic import BaseModel, Field, field_validator
import logging
import math

from domain.geometry.constants import MAX_FINITE_FLOAT
from domain.geometry.vector import Vector2

logger = logging.getLogger(__name__)


class SightCone(BaseModel):
    """
    A camera with a position, a facing direction and a cone of vision.

    A target is visible when it is no farther than view_distance and the angle
    between the facing direction and the direction to the target is strictly
    less than half of field_of_view.

    The constructor stores the absolute value of field_of_view and
    view_distance; the setters store their arguments as given. The
    orientation is normalized both at construction and by set_orientation().
    """
    position: Vector2 = Field(default_factory=Vector2.zero, description="Camera position")
    orientation: Vector2 = Field(
        default_factory=lambda: Vector2(x=0.0, y=1.0),
        description="Unit facing direction (zero if degenerate)"
    )
    field_of_view: float = Field(default=math.pi, description="Full view angle in radians")
    view_distance: float = Field(default=MAX_FINITE_FLOAT, description="Maximum visible distance")
    clamp_cosine: bool = Field(
        default=True,
        description="Clamp the view cosine to [-1, 1] before taking its arc cosine"
    )

    @field_validator("orientation")
    @classmethod
    def normalize_orientation(cls, v: Vector2) -> Vector2:
        """Store the facing direction as a unit vector."""
        return _normalize_orientation(v)

    @field_validator("field_of_view", "view_distance")
    @classmethod
    def validate_non_negative(cls, value: float) -> float:
        """The sign of an angle or a range carries no meaning."""
        return abs(value)

    def set_position(self, position: Vector2) -> None:
        self.position = position

    def set_orientation(self, orientation: Vector2) -> None:
        """Set the facing direction, normalizing it to unit length."""
        self.orientation = _normalize_orientation(orientation)

    def set_field_of_view(self, angle: float) -> None:
        """Set the full view angle in radians."""
        self.field_of_view = angle

    def set_view_distance(self, distance: float) -> None:
        self.view_distance = distance

    def distance_to(self, target: Vector2) -> float:
        """Calculate the distance from the camera to a target."""
        return self._offset_to(target)[1]

    def angle_to(self, target: Vector2) -> float:
        """
        Calculate the angle between the facing direction and a target.

        Args:
            target: The point to measure towards

        Returns:
            Angle in radians, in range [0, π]

        Raises:
            ValueError: If the target is at the camera position, or if the
                        cosine falls outside [-1, 1] while clamping is off
        """
        if target.approx_equals(self.position):
            raise ValueError(f"Target {target} is at the camera position")
        return self._angle_between(self._offset_to(target)[0])

    def can_see(self, target: Vector2) -> bool:
        """
        Determine whether the target is within sight of the camera.

        Args:
            target: The point to test

        Returns:
            True if the target is in range and strictly inside the view angle
        """
        # A camera cannot see its own location
        if target.approx_equals(self.position):
            logger.debug(f"Target {target} is at the camera position")
            return False

        to_target, distance = self._offset_to(target)
        if distance > self.view_distance:
            logger.debug(f"Target {target} is out of range ({distance} > {self.view_distance})")
            return False

        angle = self._angle_between(to_target)
        half_angle = self.field_of_view / 2.0

        visible = angle < half_angle
        logger.debug(f"Target {target} at angle {angle} against half field of view {half_angle}: "
                     f"{'visible' if visible else 'not visible'}")
        return visible

    def visible_targets(self, targets: Iterable[Vector2]) -> List[Vector2]:
        """Get the targets the camera can see, in their original order."""
        return [target for target in targets if self.can_see(target)]

    def _offset_to(self, target: Vector2) -> Tuple[Vector2, float]:
        """
        Get a vector pointing from the camera to the target and the distance between them.

        The offset is the plain difference unless that overflows, in which case
        it is computed from halved coordinates; only its direction is used.
        The distance is infinite when it exceeds the largest finite float.
        """
        dx = target.x - self.position.x
        dy = target.y - self.position.y
        if math.isfinite(dx) and math.isfinite(dy):
            offset = Vector2(x=dx, y=dy)
            return offset, offset.magnitude()
        offset = target.scale(0.5) - self.position.scale(0.5)
        return offset, 2.0 * offset.magnitude()

    def _angle_between(self, to_target: Vector2) -> float:
        # Orientation is unit length, so its magnitude drops out of the denominator
        cos_angle = self.orientation.dot(to_target) / to_target.magnitude()
        if self.clamp_cosine:
            cos_angle = max(-1.0, min(1.0, cos_angle))
        return math.acos(cos_angle)

    def __str__(self) -> str:
        """String representation of the camera."""
        return (f"SightCone(position={self.position}, orientation={self.orientation}, "
                f"field_of_view={self.field_of_view}, view_distance={self.view_distance})")


def _normalize_orientation(orientation: Vector2) -> Vector2:
    unit = orientation.normalized()
    if unit.magnitude() == 0:
        logger.warning("Zero orientation given; the camera has no facing direction")
    return unit
