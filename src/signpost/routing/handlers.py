"""Handler reference resolution — turns ``"module:Class::method"`` strings into callables.

Routes normally take a callable. A string reference is resolved once, at
registration time, so a typo fails ``add_route()`` instead of the first
request that happens to hit the route.

Accepted forms::

    "myapp.views:index"              # module-level function
    "myapp.views:UserController::show"  # method on a class
"""

import importlib
import inspect
from collections.abc import Callable
from typing import Any

from signpost.errors import InvalidHandlerReference


def _resolve_method(reference: str, cls: Any, method_name: str) -> Any:
    if not inspect.isclass(cls):
        msg = f"{type(cls).__name__} is not a class"
        raise InvalidHandlerReference(reference, msg)

    try:
        raw = inspect.getattr_static(cls, method_name)
    except AttributeError as exc:
        msg = f"{cls.__name__} has no attribute {method_name!r}"
        raise InvalidHandlerReference(reference, msg) from exc

    # staticmethod / classmethod work straight off the class
    if isinstance(raw, (staticmethod, classmethod)):
        return getattr(cls, method_name)

    try:
        instance = cls()
    except Exception as exc:
        msg = f"cannot instantiate {cls.__name__} without arguments: {exc}"
        raise InvalidHandlerReference(reference, msg) from exc
    return getattr(instance, method_name)


def resolve_handler(handler: Callable[..., Any] | str) -> Callable[..., Any]:
    """Resolve a handler reference to a callable.

    Callables are returned unchanged. Strings use ``"module:attribute"``
    format, where the attribute may be ``Class::method``.

    Raises:
        InvalidHandlerReference: If the module, class, or attribute cannot
            be found, or the referent is not callable.
        TypeError: If *handler* is neither callable nor a string.
    """
    if callable(handler):
        return handler
    if not isinstance(handler, str):
        msg = f"Handler must be a callable or a string reference, got {type(handler).__name__}"
        raise TypeError(msg)

    module_path, sep, attr_path = handler.partition(":")
    if not sep or not module_path or not attr_path:
        raise InvalidHandlerReference(handler, "expected 'module:attribute' format")

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise InvalidHandlerReference(handler, f"cannot import {module_path!r}") from exc

    class_name, sep, method_name = attr_path.partition("::")
    if sep and not (class_name and method_name):
        raise InvalidHandlerReference(handler, "expected 'Class::method' after ':'")

    try:
        obj = getattr(module, class_name)
    except AttributeError as exc:
        msg = f"module {module_path!r} has no attribute {class_name!r}"
        raise InvalidHandlerReference(handler, msg) from exc

    if sep:
        obj = _resolve_method(handler, obj, method_name)

    if not callable(obj):
        raise InvalidHandlerReference(handler, f"{attr_path!r} is not callable")
    return obj
