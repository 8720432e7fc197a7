# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound='ImmutableModel')


class ImmutableModel(BaseModel):
    """
    Base class for value types.

    Instances are frozen after creation, so two holders of the same value can
    never observe each other's changes. Modified copies are produced with
    with_changes(), which re-runs field validation on the new data.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: T, **changes: Any) -> T:
        """
        Create a new instance with the given fields replaced.

        Args:
            **changes: Field names mapped to their new values

        Returns:
            New validated instance of the same class

        Raises:
            ValueError: If a name is not a field of the model
        """
        data = self.model_dump()

        unknown = [key for key in changes if key not in data]
        if unknown:
            raise ValueError(f"Invalid field: {', '.join(unknown)}")

        data.update(changes)
        return cast(T, self.__class__.model_validate(data))
