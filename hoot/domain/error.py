"""Domain layer errors.

Every failure of a remote operation surfaces as one of these, whatever
the transport underneath.
"""


class HootClientError(Exception):
    """Base client error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class TransportError(HootClientError):
    """Backend unreachable, or it answered with something unusable."""

    pass


class AuthError(HootClientError):
    """Missing or invalid credential."""

    pass


class ForbiddenError(HootClientError):
    """Raised when a user attempts to change a record they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str | None = None):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to change {resource} {resource_id}",
            status_code=403,
        )


class NotFoundError(HootClientError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", status_code=404)


class ValidationError(HootClientError):
    """Payload rejected as malformed, locally or by the backend."""

    pass
