"""Hoots backend REST client.

Implements the hoot repository contract over HTTP:

    GET    /hoots
    GET    /hoots/{hoot_id}
    POST   /hoots
    PUT    /hoots/{hoot_id}
    DELETE /hoots/{hoot_id}
    POST   /hoots/{hoot_id}/comments
    PUT    /hoots/{hoot_id}/comments/{comment_id}
    DELETE /hoots/{hoot_id}/comments/{comment_id}
"""

from typing import Any, TypeVar

import httpx
import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hoot.adapter.error import PayloadDecodeError
from hoot.domain.error import (
    AuthError,
    ForbiddenError,
    HootClientError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from hoot.domain.model import Comment, Hoot
from hoot.domain.repository import HootRepository
from hoot.domain.service import IdentityContext
from hoot.domain.value import CommentFields, CommentId, HootFields, HootId

M = TypeVar("M", bound=BaseModel)


class HttpHootRepository(HootRepository):
    """Hoot repository backed by the Hoots REST API."""

    def __init__(
        self,
        base_url: str,
        identity: IdentityContext,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the REST client.

        Args:
            base_url: Backend origin, e.g. http://localhost:3000
            identity: Source of the bearer credential
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.identity = identity
        self.timeout = timeout
        self.transport = transport

    async def list_hoots(self) -> list[Hoot]:
        with logfire.span("hoot_api.list_hoots"):
            data = await self._request("GET", "/hoots", resource="hoot")
            if not isinstance(data, list):
                raise PayloadDecodeError("hoot list", "expected a JSON array")
            hoots = [self._parse(Hoot, item, "hoot") for item in data]
            logfire.info("Hoots listed", count=len(hoots))
            return hoots

    async def get_hoot(self, hoot_id: HootId) -> Hoot:
        with logfire.span("hoot_api.get_hoot", hoot_id=hoot_id):
            data = await self._request(
                "GET", f"/hoots/{hoot_id}", resource="hoot", resource_id=hoot_id
            )
            hoot = self._parse(Hoot, data, "hoot")
            logfire.info("Hoot fetched", hoot_id=hoot.id, comments=len(hoot.comments))
            return hoot

    async def create_hoot(self, fields: HootFields) -> Hoot:
        with logfire.span("hoot_api.create_hoot", category=fields.category.value):
            data = await self._request(
                "POST", "/hoots", resource="hoot", json=fields.model_dump(mode="json")
            )
            hoot = self._parse(Hoot, data, "hoot")
            logfire.info("Hoot created", hoot_id=hoot.id)
            return hoot

    async def update_hoot(self, hoot_id: HootId, fields: HootFields) -> Hoot:
        with logfire.span("hoot_api.update_hoot", hoot_id=hoot_id):
            data = await self._request(
                "PUT",
                f"/hoots/{hoot_id}",
                resource="hoot",
                resource_id=hoot_id,
                json=fields.model_dump(mode="json"),
            )
            hoot = self._parse(Hoot, data, "hoot")
            logfire.info("Hoot updated", hoot_id=hoot.id)
            return hoot

    async def delete_hoot(self, hoot_id: HootId) -> Hoot:
        with logfire.span("hoot_api.delete_hoot", hoot_id=hoot_id):
            data = await self._request(
                "DELETE", f"/hoots/{hoot_id}", resource="hoot", resource_id=hoot_id
            )
            hoot = self._parse(Hoot, data, "hoot")
            logfire.info("Hoot deleted", hoot_id=hoot.id)
            return hoot

    async def create_comment(self, hoot_id: HootId, fields: CommentFields) -> Comment:
        with logfire.span("hoot_api.create_comment", hoot_id=hoot_id):
            data = await self._request(
                "POST",
                f"/hoots/{hoot_id}/comments",
                resource="hoot",
                resource_id=hoot_id,
                json=fields.model_dump(mode="json"),
            )
            comment = self._parse(Comment, data, "comment")
            logfire.info("Comment created", hoot_id=hoot_id, comment_id=comment.id)
            return comment

    async def update_comment(
        self, hoot_id: HootId, comment_id: CommentId, fields: CommentFields
    ) -> Comment:
        with logfire.span(
            "hoot_api.update_comment", hoot_id=hoot_id, comment_id=comment_id
        ):
            data = await self._request(
                "PUT",
                f"/hoots/{hoot_id}/comments/{comment_id}",
                resource="comment",
                resource_id=comment_id,
                json=fields.model_dump(mode="json"),
            )
            comment = self._parse(Comment, data, "comment")
            logfire.info("Comment updated", hoot_id=hoot_id, comment_id=comment.id)
            return comment

    async def delete_comment(self, hoot_id: HootId, comment_id: CommentId) -> Comment:
        with logfire.span(
            "hoot_api.delete_comment", hoot_id=hoot_id, comment_id=comment_id
        ):
            data = await self._request(
                "DELETE",
                f"/hoots/{hoot_id}/comments/{comment_id}",
                resource="comment",
                resource_id=comment_id,
            )
            comment = self._parse(Comment, data, "comment")
            logfire.info("Comment deleted", hoot_id=hoot_id, comment_id=comment.id)
            return comment

    async def _request(
        self,
        method: str,
        path: str,
        resource: str,
        resource_id: str | None = None,
        json: dict | None = None,
    ) -> Any:
        """Send one authenticated request and return the decoded body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            resource: Resource name used in error messages
            resource_id: Identifier used in error messages
            json: Request body

        Returns:
            Decoded JSON body

        Raises:
            AuthError: If no session is established (no request is sent)
            HootClientError: Mapped from the response status
            TransportError: If the backend is unreachable
        """
        token = self.identity.token
        if token is None:
            logfire.warn("Request refused without a session", method=method, path=path)
            raise AuthError("No session established", status_code=401)

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(
                    method,
                    path,
                    json=json,
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Hoots backend HTTP error", method=method, path=path, error=str(e))
            raise TransportError(f"HTTP error calling {method} {path}: {e}")

        if not response.is_success:
            error = self._error_for(response, resource, resource_id)
            logfire.warn(
                "Hoots backend rejected request",
                method=method,
                path=path,
                status_code=response.status_code,
                error=str(error),
            )
            raise error

        try:
            return response.json()
        except ValueError:
            raise PayloadDecodeError(resource, "response body is not JSON")

    def _error_for(
        self, response: httpx.Response, resource: str, resource_id: str | None
    ) -> HootClientError:
        """Map an error response onto the client error taxonomy."""
        status = response.status_code
        message = self._error_message(response)

        if status in (400, 422):
            return ValidationError(message, status_code=status)
        if status == 401:
            return AuthError(message, status_code=status)
        if status == 403:
            user = self.identity.current_user
            return ForbiddenError(resource, resource_id or "", user.id if user else None)
        if status == 404:
            return NotFoundError(resource, resource_id or "")
        return TransportError(f"Unexpected status {status}: {message}", status_code=status)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the backend's error message (``err``, ``error`` or ``detail``)."""
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            for key in ("err", "error", "detail"):
                if body.get(key):
                    return str(body[key])
        return response.reason_phrase

    @staticmethod
    def _parse(model: type[M], data: Any, resource: str) -> M:
        """Validate a response record into a domain model."""
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise PayloadDecodeError(resource, str(e))
