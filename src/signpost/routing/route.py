"""PathSegment, RoutePattern, Route and RouteMatch frozen dataclasses."""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:    ``/users``    (is_param=False)
    Required:  ``/{id}``     (is_param=True, param_name="id")
    Optional:  ``/{tag?}``   (is_param=True, param_name="tag", optional=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    optional: bool = False


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled path template.

    ``regex`` is matched against the normalized path with a leading
    ``/`` prepended, so every segment (literal or placeholder) carries its
    own separator and an optional placeholder can vanish together with it.
    Capture groups appear in placeholder order.
    """

    path: str
    segments: tuple[PathSegment, ...]
    regex: re.Pattern[str]

    @property
    def params(self) -> tuple[tuple[str, bool], ...]:
        """Placeholder names in template order, tagged ``optional``."""
        return tuple(
            (seg.param_name, seg.optional)
            for seg in self.segments
            if seg.is_param and seg.param_name is not None
        )

    @property
    def required_params(self) -> tuple[str, ...]:
        return tuple(name for name, optional in self.params if not optional)

    @property
    def optional_params(self) -> tuple[str, ...]:
        return tuple(name for name, optional in self.params if optional)

    def match(self, path: str) -> tuple[str | None, ...] | None:
        """Match a normalized path (no leading or trailing ``/``).

        Returns ``None`` when the path does not match, otherwise the
        captured substrings aligned to :attr:`params`. Optional
        placeholders that were skipped come back as ``None``.
        """
        candidate = f"/{path}" if path else ""
        m = self.regex.fullmatch(candidate)
        if m is None:
            return None
        return m.groups()


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route: method, compiled pattern, and handler.

    Created by ``Router.add_route()`` and never mutated afterwards.
    """

    method: str
    pattern: RoutePattern
    handler: Callable[..., Any]

    @property
    def path(self) -> str:
        return self.pattern.path


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``params`` only contains placeholders that were bound; skipped
    optional placeholders are absent rather than ``None``.
    """

    route: Route
    params: Mapping[str, str]
