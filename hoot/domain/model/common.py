"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Records are immutable: stores replace them instead of editing them.
    Backend payload keys (``_id``, ``createdAt``) are declared as aliases,
    so records parse straight from a response body.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        populate_by_name=True,  # Accept field names as well as payload keys
    )


def coerce_author(value: object) -> object:
    """Expand an unpopulated author reference into a partial user record.

    The backend sends either a populated ``{"_id", "username"}`` object or
    just the author's id.
    """
    if isinstance(value, str):
        return {"_id": value}
    return value
