"""Ordered router with first-match-wins dispatch.

Routes are registered during setup and frozen into an immutable tuple
before (or on) the first dispatch.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from signpost.config import RouterConfig
from signpost.errors import NotFound
from signpost.http.headers import HeaderInput
from signpost.http.request import Request
from signpost.routing.handlers import resolve_handler
from signpost.routing.pattern import compile_pattern, normalize_path
from signpost.routing.route import Route, RouteMatch

logger = logging.getLogger("signpost.routing")

Handler = Callable[[Request], Any]


class Router:
    """Ordered router with first-match-wins dispatch.

    Usage::

        router = Router()
        router.add_route("GET", "/users/{name?}", show_user)
        router.set_not_found_handler(not_found)
        result = router.dispatch("GET", "/users/alice")

    Thread safety:
        Registration is single-threaded. The route list becomes an
        immutable tuple on ``freeze()``; with ``freeze_on_dispatch`` the
        first ``dispatch()`` freezes it under a Lock + double-check, so
        concurrent dispatch only ever reads the frozen tuple.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_not_found_handler", "_routes", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._routes: list[Route] | tuple[Route, ...] = []
        self._not_found_handler: Handler | None = None
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def add_route(self, method: str, path: str, handler: Handler | str) -> "Router":
        """Register *handler* for *method* requests matching *path*.

        Args:
            method: HTTP method, case-insensitive.
            path: Path template. ``{name}`` is a required placeholder,
                ``{name?}`` an optional one.
            handler: Callable taking a ``Request``, or a
                ``"module:Class::method"`` string reference.

        Raises:
            InvalidPattern: If *path* is malformed.
            InvalidHandlerReference: If a string *handler* cannot be resolved.
        """
        self._check_not_frozen()
        # Compile and resolve before touching the route list
        pattern = compile_pattern(path)
        resolved = resolve_handler(handler)
        route = Route(method=method.strip().upper(), pattern=pattern, handler=resolved)
        self._routes.append(route)  # type: ignore[union-attr]
        return self

    def get(self, path: str, handler: Handler | str) -> "Router":
        """Register a GET route."""
        return self.add_route("GET", path, handler)

    def post(self, path: str, handler: Handler | str) -> "Router":
        """Register a POST route."""
        return self.add_route("POST", path, handler)

    def put(self, path: str, handler: Handler | str) -> "Router":
        """Register a PUT route."""
        return self.add_route("PUT", path, handler)

    def patch(self, path: str, handler: Handler | str) -> "Router":
        """Register a PATCH route."""
        return self.add_route("PATCH", path, handler)

    def delete(self, path: str, handler: Handler | str) -> "Router":
        """Register a DELETE route."""
        return self.add_route("DELETE", path, handler)

    def set_not_found_handler(self, handler: Handler | str | None) -> "Router":
        """Set the handler invoked when no route matches. ``None`` clears it.

        Unlike routes, the fallback can be replaced after the router is
        frozen.
        """
        self._not_found_handler = None if handler is None else resolve_handler(handler)
        return self

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    @property
    def not_found_handler(self) -> Handler | None:
        return self._not_found_handler

    # -- Freezing --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Freeze the route table. No more routes can be added.

        Safe to call more than once and from several threads.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._routes = tuple(self._routes)
            self._frozen = True
        logger.debug("Router frozen with %d route(s)", len(self._routes))

    # -- Matching --

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Find the first route matching *method* and *path*.

        Returns ``None`` when nothing matches. Skipped or empty optional
        placeholders are left out of ``RouteMatch.params``.
        """
        if self.config.freeze_on_dispatch:
            self.freeze()

        method = method.strip().upper()
        normalized = normalize_path(path)

        for route in self._routes:
            if route.method != method:
                continue
            groups = route.pattern.match(normalized)
            if groups is None:
                continue

            # Required captures are never empty; optional ones may be None or ""
            params = {
                name: value
                for (name, _optional), value in zip(route.pattern.params, groups, strict=True)
                if value
            }
            return RouteMatch(route=route, params=MappingProxyType(params))

        return None

    # -- Dispatch --

    def dispatch(
        self,
        method: str,
        path: str,
        *,
        query: str | bytes | Mapping[str, str] | None = None,
        headers: HeaderInput | None = None,
        body: bytes | str | None = None,
    ) -> Any:
        """Match a request and invoke its handler.

        The handler receives a ``Request`` carrying the upper-cased method,
        the normalized path as its URI, and the bound parameters. *query*,
        *headers* and *body* are passed through to the Request for callers
        sitting at a transport boundary.

        Returns whatever the handler returns, unchanged. Exceptions raised
        by the handler propagate unmodified.

        Raises:
            NotFound: If no route matches and no not-found handler is set.
        """
        method = method.strip().upper()
        normalized = normalize_path(path)
        match = self.match(method, normalized)

        if match is not None:
            logger.debug(
                "%s %s matched %s %s", method, normalized, match.route.method, match.route.path
            )
            request = Request.create(
                method, normalized, match.params, query=query, headers=headers, body=body
            )
            return match.route.handler(request)

        if self._not_found_handler is not None:
            logger.debug("%s %s matched no route, using not-found handler", method, normalized)
            request = Request.create(method, normalized, query=query, headers=headers, body=body)
            return self._not_found_handler(request)

        logger.debug("%s %s matched no route", method, normalized)
        raise NotFound(f"{self.config.not_found_detail}: {method} {normalized!r}")

    # -- Internal --

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot add routes after the router is frozen. "
                "Register all routes before the first dispatch()."
            )
            raise RuntimeError(msg)
