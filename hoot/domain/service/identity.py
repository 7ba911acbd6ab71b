"""Identity context.

Holds the signed-in user and the opaque credential sent with every
backend request. One instance lives for the whole process (see the
APP-scoped provider in ``hoot.util.di.infrastructure.identity``).
"""

from pathlib import Path

import logfire

from hoot.domain.error import AuthError
from hoot.domain.model import User
from hoot.domain.value import UserId
from hoot.util.error import SessionTokenError
from hoot.util.jwt import read_token

from .base import Service


class IdentityContext(Service):
    """Process-wide holder of the current user.

    The persisted session is restored lazily, on first read. Only
    ``sign_in`` and ``sign_out`` change the held identity; every other
    component reads it.
    """

    def __init__(self, token_path: Path | None = None) -> None:
        """Initialize identity context.

        Args:
            token_path: File the session token is persisted to. None keeps
                the session in memory only.
        """
        self.token_path = token_path
        self._restored = False
        self._user: User | None = None
        self._token: str | None = None

    @property
    def current_user(self) -> User | None:
        """Signed-in user, or None for an anonymous session."""
        self._restore()
        return self._user

    @property
    def token(self) -> str | None:
        """Credential for the Authorization header, or None."""
        self._restore()
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def sign_in(self, token: str) -> User:
        """Adopt a token issued by the backend's sign-in or sign-up call.

        Args:
            token: Encoded JWT

        Returns:
            The signed-in user

        Raises:
            AuthError: If the token does not carry a user
        """
        try:
            payload = read_token(token)
        except SessionTokenError as e:
            logfire.warn("Sign-in rejected", error=str(e))
            raise AuthError(f"Invalid session token: {e}")

        self._restored = True
        self._token = token
        self._user = User(id=UserId(payload.user_id), username=payload.username)

        if self.token_path is not None:
            self.token_path.parent.mkdir(parents=True, exist_ok=True)
            self.token_path.write_text(token)

        logfire.info("Signed in", user_id=self._user.id, username=self._user.username)
        return self._user

    def sign_out(self) -> None:
        """Forget the current user and the persisted token."""
        user_id = self._user.id if self._user else None
        self._restored = True
        self._token = None
        self._user = None

        if self.token_path is not None:
            self.token_path.unlink(missing_ok=True)

        logfire.info("Signed out", user_id=user_id)

    def _restore(self) -> None:
        """Load the persisted session once."""
        if self._restored:
            return
        self._restored = True

        if self.token_path is None or not self.token_path.exists():
            return

        try:
            token = self.token_path.read_text().strip()
            payload = read_token(token)
        except (OSError, SessionTokenError) as e:
            # Leave the session anonymous; the user signs in again
            logfire.warn(
                "Ignoring unreadable session token",
                token_path=str(self.token_path),
                error=str(e),
            )
            return

        self._token = token
        self._user = User(id=UserId(payload.user_id), username=payload.username)
        logfire.info("Session restored", user_id=self._user.id)
