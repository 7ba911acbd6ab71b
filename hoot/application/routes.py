"""Client routes and the authorization gate in front of them.

The gate is a pure function of the signed-in user and the requested
path. It decides reachability only; loading data for the target is the
navigation controller's job.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hoot.domain.model import User


class Route(str, Enum):
    """Client-side navigation targets."""

    LANDING = "/"
    SIGN_UP = "/sign-up"
    SIGN_IN = "/sign-in"
    HOOT_LIST = "/hoots"
    HOOT_NEW = "/hoots/new"
    HOOT_DETAIL = "/hoots/:hootId"
    HOOT_EDIT = "/hoots/:hootId/edit"
    COMMENT_EDIT = "/hoots/:hootId/comments/:commentId/edit"

    def build(self, **params: str) -> str:
        """Fill in the route's ``:name`` segments.

        >>> Route.HOOT_DETAIL.build(hootId="42")
        '/hoots/42'
        """
        return re.sub(r":(\w+)", lambda m: params[m.group(1)], self.value)


def _compile(route: Route) -> re.Pattern:
    pattern = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", route.value)
    return re.compile(f"^{pattern}$")


# Static segments win over parameters: /hoots/new is never a hoot id
_MATCH_ORDER = [
    Route.LANDING,
    Route.SIGN_UP,
    Route.SIGN_IN,
    Route.HOOT_LIST,
    Route.HOOT_NEW,
    Route.HOOT_DETAIL,
    Route.HOOT_EDIT,
    Route.COMMENT_EDIT,
]
_PATTERNS = [(route, _compile(route)) for route in _MATCH_ORDER]

PUBLIC_ROUTES = frozenset({Route.LANDING})
GUEST_ROUTES = frozenset({Route.SIGN_UP, Route.SIGN_IN})
MEMBER_ROUTES = frozenset(set(Route) - PUBLIC_ROUTES - GUEST_ROUTES)

# Where a denied navigation lands
GUEST_REDIRECT = Route.SIGN_IN.value
MEMBER_REDIRECT = Route.HOOT_LIST.value
UNKNOWN_REDIRECT = Route.LANDING.value


class RouteDecision(BaseModel):
    """Outcome of a navigation request."""

    model_config = ConfigDict(frozen=True)

    path: str
    allow: bool
    route: Optional[Route] = None
    params: dict[str, str] = Field(default_factory=dict)
    redirect_target: Optional[str] = None
    error: Optional[str] = None  # Set when the target's data failed to load


def match_route(path: str) -> tuple[Route, dict[str, str]] | None:
    """Resolve a path to a route and its parameters.

    Query strings, fragments and a trailing slash are ignored.

    Args:
        path: Requested path

    Returns:
        (route, params), or None for an unknown path
    """
    path = re.split(r"[?#]", path, maxsplit=1)[0]
    if len(path) > 1:
        path = path.rstrip("/")

    for route, pattern in _PATTERNS:
        match = pattern.match(path)
        if match:
            return route, match.groupdict()
    return None


def authorize(current_user: User | None, path: str) -> RouteDecision:
    """Decide whether the current session may open a path.

    - Landing is open to everyone.
    - Anonymous sessions reach only sign-up and sign-in; other routes
      redirect to sign-in.
    - Signed-in sessions reach the hoot and comment routes; sign-up and
      sign-in redirect to the hoot list.
    - Unknown paths redirect to landing.

    Args:
        current_user: Signed-in user, or None
        path: Requested path

    Returns:
        Routing decision
    """
    matched = match_route(path)
    if matched is None:
        return RouteDecision(path=path, allow=False, redirect_target=UNKNOWN_REDIRECT)

    route, params = matched
    if route in PUBLIC_ROUTES:
        allow, redirect = True, None
    elif current_user is None:
        allow = route in GUEST_ROUTES
        redirect = None if allow else GUEST_REDIRECT
    else:
        allow = route in MEMBER_ROUTES
        redirect = None if allow else MEMBER_REDIRECT

    return RouteDecision(
        path=path, allow=allow, route=route, params=params, redirect_target=redirect
    )


def can_mutate(record: object, current_user: User | None) -> bool:
    """Whether edit/delete controls are shown for a hoot or comment.

    Only the author sees them. A record without an author, or an
    anonymous session, hides them.
    """
    author = getattr(record, "author", None)
    if author is None or current_user is None:
        return False
    return author.id == current_user.id
