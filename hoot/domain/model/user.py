"""User entity.

Users are owned by the identity context; the client never edits them.
"""

from typing import Optional

from pydantic import Field

from hoot.domain.model.common import DomainModel
from hoot.domain.value import UserId


class User(DomainModel):
    """Signed-in user, or the author of a hoot or comment.

    Author references may be partially populated, in which case only the
    id is known.
    """

    id: UserId = Field(alias="_id")
    username: Optional[str] = None
