"""Tests for signpost.routing.handlers — string handler references."""

import os.path

import pytest

from signpost.errors import ConfigurationError, InvalidHandlerReference
from signpost.http.request import Request
from signpost.routing.handlers import resolve_handler
from signpost.routing.router import Router

NOT_CALLABLE = "just a string"


def index(request: Request) -> str:
    return "index"


class UserController:
    def show(self, request: Request) -> str:
        return f"user {request.get_param('id')}"

    @staticmethod
    def listing(request: Request) -> str:
        return "listing"

    @classmethod
    def create(cls, request: Request) -> str:
        return cls.__name__


class NeedsArgs:
    def __init__(self, db: object) -> None:
        self.db = db

    def show(self, request: Request) -> str:
        return "never"


def _ref(attr: str) -> str:
    return f"{__name__}:{attr}"


class TestResolveHandler:
    def test_callable_passthrough(self) -> None:
        assert resolve_handler(index) is index

    def test_module_function(self) -> None:
        assert resolve_handler("os.path:join") is os.path.join

    def test_function_in_module(self) -> None:
        assert resolve_handler(_ref("index")) is index

    def test_instance_method(self) -> None:
        handler = resolve_handler(_ref("UserController::show"))
        assert handler(Request.create("GET", "/users/1", {"id": "1"})) == "user 1"
        assert isinstance(handler.__self__, UserController)  # type: ignore[attr-defined]

    def test_staticmethod(self) -> None:
        handler = resolve_handler(_ref("UserController::listing"))
        assert handler is UserController.listing

    def test_classmethod(self) -> None:
        handler = resolve_handler(_ref("UserController::create"))
        assert handler(Request.create("POST", "/users")) == "UserController"

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            resolve_handler(3.14)  # type: ignore[arg-type]


class TestUnresolvable:
    @pytest.mark.parametrize(
        "reference",
        [
            "index",
            ":index",
            "os.path:",
            "no_such_module_xyz:handler",
            "os.path:no_such_function",
        ],
    )
    def test_bad_references(self, reference: str) -> None:
        with pytest.raises(InvalidHandlerReference) as exc_info:
            resolve_handler(reference)
        assert exc_info.value.reference == reference

    def test_missing_method(self) -> None:
        with pytest.raises(InvalidHandlerReference, match="has no attribute 'destroy'"):
            resolve_handler(_ref("UserController::destroy"))

    def test_malformed_class_reference(self) -> None:
        with pytest.raises(InvalidHandlerReference, match="Class::method"):
            resolve_handler(_ref("UserController::"))

    def test_method_on_non_class(self) -> None:
        with pytest.raises(InvalidHandlerReference, match="is not a class"):
            resolve_handler(_ref("index::show"))

    def test_class_needing_arguments(self) -> None:
        with pytest.raises(InvalidHandlerReference, match="cannot instantiate NeedsArgs") as exc_info:
            resolve_handler(_ref("NeedsArgs::show"))
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_not_callable(self) -> None:
        with pytest.raises(InvalidHandlerReference, match="not callable"):
            resolve_handler(_ref("NOT_CALLABLE"))

    def test_import_error_is_chained(self) -> None:
        with pytest.raises(InvalidHandlerReference) as exc_info:
            resolve_handler("no_such_module_xyz:handler")
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_handler("no_such_module_xyz:handler")


class TestRouterIntegration:
    def test_string_handler_dispatches(self) -> None:
        r = Router().add_route("GET", "/users/{id}", _ref("UserController::show"))
        assert r.dispatch("GET", "/users/9") == "user 9"

    def test_string_not_found_handler(self) -> None:
        r = Router().set_not_found_handler(_ref("index"))
        assert r.dispatch("GET", "/anything") == "index"
