"""Signpost — a small HTTP request router.

Matches an incoming method and path against registered templates with
required (``{name}``) and optional (``{name?}``) placeholders, binds the
parameters, and calls the handler with a ``Request``.

Basic usage::

    from signpost import Router

    router = Router()

    def show_user(request):
        return f"Hello, {request.get_param('name', 'stranger')}"

    router.add_route("GET", "/users/{name?}", show_user)
    router.dispatch("GET", "/users/alice")  # "Hello, alice"

Serving over ASGI::

    from signpost.server.asgi import RouterApp

    app = RouterApp(router)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "InvalidHandlerReference",
    "InvalidPattern",
    "NotFound",
    "Request",
    "Route",
    "RouteMatch",
    "RoutePattern",
    "Router",
    "RouterApp",
    "RouterConfig",
    "SignpostError",
    "compile_pattern",
]

# Public name -> defining module. Keeps ``import signpost`` cheap.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "signpost.errors",
    "HTTPError": "signpost.errors",
    "InvalidHandlerReference": "signpost.errors",
    "InvalidPattern": "signpost.errors",
    "NotFound": "signpost.errors",
    "Request": "signpost.http.request",
    "Route": "signpost.routing.route",
    "RouteMatch": "signpost.routing.route",
    "RoutePattern": "signpost.routing.route",
    "Router": "signpost.routing.router",
    "RouterApp": "signpost.server.asgi",
    "RouterConfig": "signpost.config",
    "SignpostError": "signpost.errors",
    "compile_pattern": "signpost.routing.pattern",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
