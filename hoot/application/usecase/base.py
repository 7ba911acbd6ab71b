"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hoot.domain.error import ValidationError

F = TypeVar("F", bound=BaseModel)


class BaseUseCase(ABC):
    """Base use case: call the backend, patch local stores, pick where to go next."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def build_fields(model: type[F], **values: Any) -> F:
    """Validate form input before anything is sent.

    Args:
        model: Fields value object (HootFields, CommentFields)
        **values: Raw form values

    Returns:
        Validated fields

    Raises:
        ValidationError: If a field is missing, blank or out of range
    """
    try:
        return model(**values)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid {model.__name__}: {problems}")
