import pytest
from typing import Optional
from domain.geometry.vector import Vector2
from utils.base_model import ImmutableModel


class Ray(ImmutableModel):
    """Test model composed of vector values."""
    origin: Vector2
    direction: Vector2
    label: Optional[str] = None


class TestImmutableModel:
    """Test suite for ImmutableModel base class."""

    def test_immutability(self):
        """Test that models are immutable after creation."""
        ray = Ray(origin=Vector2(x=0.0, y=0.0), direction=Vector2(x=1.0, y=0.0))

        with pytest.raises(Exception):
            ray.origin = Vector2(x=1.0, y=1.0)

        with pytest.raises(Exception):
            ray.direction.x = 5.0

    def test_with_changes_basic(self):
        """Test creating modified copies with with_changes() method."""
        original = Ray(origin=Vector2(x=0.0, y=0.0), direction=Vector2(x=1.0, y=0.0))

        modified = original.with_changes(direction=Vector2(x=0.0, y=1.0))

        # Original should be unchanged
        assert original.direction == Vector2(x=1.0, y=0.0)

        assert modified.direction == Vector2(x=0.0, y=1.0)
        assert modified.origin == original.origin
        assert original is not modified

    def test_with_changes_multiple_fields(self):
        """Test changing multiple fields at once."""
        original = Vector2(x=1.0, y=2.0)

        modified = original.with_changes(x=3.0, y=4.0)

        assert modified == Vector2(x=3.0, y=4.0)

    def test_with_changes_invalid_field(self):
        """Test that with_changes() raises error for invalid field names."""
        v = Vector2(x=1.0, y=2.0)

        with pytest.raises(ValueError) as exc_info:
            v.with_changes(z=3.0)

        assert "Invalid field: z" in str(exc_info.value)

    def test_with_changes_revalidates(self):
        """Test that the new values go through field validation."""
        v = Vector2(x=1.0, y=2.0)

        with pytest.raises(ValueError):
            v.with_changes(x=float('nan'))

    def test_with_changes_preserves_optional_none(self):
        """Test that with_changes preserves None for optional fields."""
        original = Ray(origin=Vector2.zero(), direction=Vector2(x=1.0, y=0.0))

        modified = original.with_changes(origin=Vector2(x=2.0, y=2.0))

        assert modified.label is None

    def test_chained_with_changes(self):
        """Test that with_changes can be chained."""
        original = Vector2(x=1.0, y=1.0)

        result = original.with_changes(x=2.0) \
            .with_changes(y=3.0) \
            .with_changes(x=4.0)

        assert result == Vector2(x=4.0, y=3.0)
        assert original == Vector2(x=1.0, y=1.0)
