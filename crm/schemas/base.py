"""Shared pydantic base for API-facing records."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CRMModel(BaseModel):
    """snake_case attributes, camelCase on the wire; both accepted on input.

    Assignments are validated, so in-place store updates go through the same
    field validators (phone normalization, UTC timestamps) as creation.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


def ensure_aware(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so records always compare cleanly."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
