"""JWT token utilities."""

import jwt
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hoot.util.error import SessionTokenError


class TokenPayload(BaseModel):
    """User claims carried by a Hoots session token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="_id")
    username: str


def read_token(token: str) -> TokenPayload:
    """Decode the user claims of a session token.

    The client never holds the signing secret, so the signature is not
    verified here; the backend verifies it on every request.

    Args:
        token: Encoded JWT issued by the backend

    Returns:
        Token payload

    Raises:
        SessionTokenError: If the token is malformed or carries no user
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        raise SessionTokenError("Invalid token")

    # Backend nests the user under "payload"
    user_claims = claims.get("payload", claims)
    try:
        return TokenPayload.model_validate(user_claims)
    except ValidationError:
        raise SessionTokenError("Token does not carry a user")
