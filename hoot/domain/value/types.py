"""Domain value objects for Hoots.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules for what the client sends.
"""

from enum import Enum

from pydantic import Field, field_validator

from hoot.domain.value.common import ValueObject


class HootCategory(str, Enum):
    """Fixed set of hoot categories accepted by the backend."""

    NEWS = "News"
    SPORTS = "Sports"
    GAMES = "Games"
    MOVIES = "Movies"
    MUSIC = "Music"
    TELEVISION = "Television"

    @classmethod
    def _missing_(cls, value: object) -> "HootCategory | None":
        """Match category names case-insensitively ("news" -> NEWS)."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class HootFields(ValueObject):
    """Editable fields of a hoot, as submitted by the hoot form.

    All fields are required and must be non-empty after trimming.
    """

    title: str = Field(min_length=1)
    text: str = Field(min_length=1)
    category: HootCategory

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v: object) -> object:
        """Accept category names in any case."""
        if isinstance(v, str):
            return HootCategory(v)
        return v


class CommentFields(ValueObject):
    """Editable fields of a comment."""

    text: str = Field(min_length=1)
