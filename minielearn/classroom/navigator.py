"""
Navigator - Fragment routing between the home, course and not-found views.

Provides:
- Location capability (get/set/subscribe) with an in-memory implementation
- parse_location / match_route: pure mapping from location to view
- Router: reads and writes the current location
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Protocol
from urllib.parse import quote, unquote


logger = logging.getLogger(__name__)

COURSE_ROUTE = re.compile(r"^/course/([^/]+)$")


class ViewKind(str, Enum):
    """Views a location can resolve to."""
    HOME = "home"
    COURSE_DETAIL = "course_detail"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RouteMatch:
    """Resolved view plus its decoded route parameters."""
    view: ViewKind
    params: dict[str, str] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# Location capability
# -----------------------------------------------------------------------------

class Location(Protocol):
    """Readable/writable current location with change notification."""

    def get(self) -> Optional[str]:
        ...

    def set(self, value: str) -> None:
        ...

    def subscribe(self, callback: Callable[[], None]) -> None:
        ...


class MemoryLocation:
    """
    In-memory location.

    Subscribers are notified only when the value actually changes, so
    navigating to the current location does not trigger a render.
    """

    def __init__(self, value: Optional[str] = None):
        self._value = value
        self._subscribers: list[Callable[[], None]] = []

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> None:
        if value == self._value:
            return
        self._value = value
        for callback in list(self._subscribers):
            callback()

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.append(callback)


# -----------------------------------------------------------------------------
# Route matching
# -----------------------------------------------------------------------------

def parse_location(raw: Optional[str]) -> str:
    """Strip one leading '#' from a location; empty locations mean '/'."""
    if not raw:
        return "/"
    path = raw[1:] if raw.startswith("#") else raw
    return path or "/"


def match_route(path: str) -> RouteMatch:
    """
    Map a path to a view. First match wins:

    1. "/"                -> home
    2. "/course/<segment>" -> course detail, {"id": percent-decoded segment}
    3. anything else      -> not found
    """
    if path == "/":
        return RouteMatch(ViewKind.HOME)

    match = COURSE_ROUTE.match(path)
    if match:
        try:
            course_id = unquote(match.group(1), errors="strict")
        except UnicodeDecodeError:
            logger.debug(f"Undecodable course segment in {path!r}")
            return RouteMatch(ViewKind.NOT_FOUND)
        return RouteMatch(ViewKind.COURSE_DETAIL, {"id": course_id})

    return RouteMatch(ViewKind.NOT_FOUND)


def course_path(course_id: str) -> str:
    """Build the route path for a course (inverse of match_route)."""
    return f"/course/{quote(course_id, safe='')}"


class Router:
    """Resolve and change the current location."""

    def __init__(self, location: Location):
        self.location = location

    def current_path(self) -> str:
        return parse_location(self.location.get())

    def current_match(self) -> RouteMatch:
        return match_route(self.current_path())

    def navigate_to(self, path: str):
        """
        Point the location at path.

        Does not render; the location's change notification does that, so
        clicks and programmatic navigation share one render path.
        """
        self.location.set(f"#{path}")
