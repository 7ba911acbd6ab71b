"""Strongly typed identifiers for Hoots entities.

The backend issues opaque string ids, so these wrap ``str`` rather than
``UUID``. NewType keeps hoot and comment ids from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", str)
HootId = NewType("HootId", str)
CommentId = NewType("CommentId", str)
