"""Path template compilation.

Turns ``/posts/{category}/{tag?}`` into a :class:`RoutePattern` whose
regex captures one group per placeholder, in template order.
"""

import logging
import re

from signpost.errors import InvalidPattern
from signpost.routing.route import PathSegment, RoutePattern

logger = logging.getLogger("signpost.routing")

# Regex fragments per segment kind. Each carries its own leading separator.
REQUIRED_PARAM = r"/([^/]+)"
OPTIONAL_PARAM = r"(?:/((?>[^/]*)))?"


def normalize_path(path: str) -> str:
    """Trim leading and trailing ``/`` from a template or request path."""
    return path.strip("/")


def _parse_placeholder(path: str, part: str) -> PathSegment:
    if part.count("{") != part.count("}"):
        raise InvalidPattern(path, f"unbalanced delimiters in segment {part!r}")
    if not (part.startswith("{") and part.endswith("}")) or part.count("{") > 1:
        raise InvalidPattern(
            path, f"placeholder must span the whole segment, got {part!r}"
        )

    inner = part[1:-1]
    optional = inner.endswith("?")
    name = inner[:-1] if optional else inner
    if not name:
        raise InvalidPattern(path, f"empty placeholder name in segment {part!r}")
    if "?" in name:
        raise InvalidPattern(path, f"invalid placeholder name {name!r}")
    return PathSegment(value=part, is_param=True, param_name=name, optional=optional)


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path template into segments.

    Examples::

        "/users"              -> [PathSegment("users")]
        "/users/{id}"         -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{name?}"      -> [..., PathSegment("{name?}", is_param=True, optional=True)]

    Raises ``InvalidPattern`` for empty or duplicated placeholder names
    and for unbalanced delimiters.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in normalize_path(path).split("/"):
        if not part:
            continue
        if "{" in part or "}" in part:
            segment = _parse_placeholder(path, part)
            if segment.param_name in seen:
                raise InvalidPattern(
                    path, f"duplicate placeholder name {segment.param_name!r}"
                )
            seen.add(segment.param_name or "")
            segments.append(segment)
        else:
            segments.append(PathSegment(value=part))
    return segments


def build_regex(segments: list[PathSegment]) -> str:
    """Synthesize the regex source for a parsed template.

    Literal segments match exactly, required placeholders match one or
    more non-separator characters, and optional placeholders may be
    absent together with their separator.

    Each capture is atomic, so a segment is never re-split. Choosing which
    optional placeholders are present still backtracks: matching time grows
    combinatorially with long runs of consecutive optional placeholders
    against a path that does not match. Keep such runs short.
    """
    pieces: list[str] = []
    for seg in segments:
        if not seg.is_param:
            pieces.append("/" + re.escape(seg.value))
        elif seg.optional:
            pieces.append(OPTIONAL_PARAM)
        else:
            pieces.append(REQUIRED_PARAM)
    return "".join(pieces)


def compile_pattern(path: str) -> RoutePattern:
    """Compile a path template into a :class:`RoutePattern`.

    Usage::

        pattern = compile_pattern("/archive/{year?}/{month?}")
        pattern.match("archive/2023")  # ("2023", None)
        pattern.match("blog")          # None
    """
    segments = parse_path(path)
    source = build_regex(segments)
    logger.debug("Path: %s", normalize_path(path))
    logger.debug("Regex: %s", source)
    return RoutePattern(path=path, segments=tuple(segments), regex=re.compile(source))
