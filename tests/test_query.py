"""Tests for signpost.http.query — immutable QueryParams."""

import pytest

from signpost.http.query import QueryParams


class TestQueryParams:
    def test_getitem(self) -> None:
        q = QueryParams("name=John&age=25")
        assert q["name"] == "John"
        assert q["age"] == "25"

    def test_bytes_input(self) -> None:
        q = QueryParams(b"q=hello&page=2")
        assert q["q"] == "hello"

    def test_missing_key_raises(self) -> None:
        q = QueryParams("q=hello")
        with pytest.raises(KeyError):
            q["missing"]

    def test_contains_and_len(self) -> None:
        q = QueryParams("a=1&b=2&c=3")
        assert "a" in q
        assert "missing" not in q
        assert len(q) == 3

    def test_get_with_default(self) -> None:
        q = QueryParams("q=hello")
        assert q.get("q") == "hello"
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        q = QueryParams("tag=python&tag=rust")
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("missing") == []

    def test_blank_values_kept(self) -> None:
        q = QueryParams("flag=&q=x")
        assert q["flag"] == ""

    def test_percent_decoding(self) -> None:
        q = QueryParams("q=hello%20world&x=a+b")
        assert q["q"] == "hello world"
        assert q["x"] == "a b"

    def test_empty(self) -> None:
        assert len(QueryParams()) == 0


class TestQueryParamsFromMapping:
    def test_mapping(self) -> None:
        q = QueryParams({"custom": "value"})
        assert q == {"custom": "value"}
        assert q.get_list("custom") == ["value"]

    def test_repr(self) -> None:
        assert repr(QueryParams({"a": "1"})) == "QueryParams({'a': '1'})"
