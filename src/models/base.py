"""Base record class and id generation for all domain models."""

from typing import Any, Self
from uuid import uuid4

from pydantic import BaseModel, ConfigDict


def new_id() -> str:
    """Generate an opaque identifier that is unique within the process.

    Backed by uuid4, so ids created within the same millisecond never
    collide.
    """
    return uuid4().hex


class Record(BaseModel):
    """Base class for all domain records.

    Records are immutable snapshots. A change produces a new record via
    :meth:`evolve`, which re-runs field and model validation so invariants
    hold on every snapshot.

    Provides:
    - Frozen instances
    - Population by field name or by camelCase alias

    Strings are stored as given; fields typed by users strip themselves.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        populate_by_name=True,
        from_attributes=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy of this record with ``changes`` applied.

        Args:
            **changes: Field names (not aliases) mapped to new values

        Returns:
            New record of the same type
        """
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self).model_validate(data)
