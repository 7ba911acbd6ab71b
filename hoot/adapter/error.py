"""Infrastructure layer errors."""

from hoot.domain.error import TransportError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class PayloadDecodeError(AdapterError, TransportError):
    """Backend response body did not match the expected record shape."""

    def __init__(self, resource: str, detail: str):
        super().__init__(f"Malformed {resource} payload: {detail}")
