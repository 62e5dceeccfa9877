"""Tests for waypoint.query — three-source query composition."""

from waypoint.query import compose_query, overlay


class TestComposeQuery:
    def test_all_empty(self) -> None:
        assert compose_query(None, None, None) == {}
        assert compose_query({}, {}, {}) == {}

    def test_disjoint_sources_merge(self) -> None:
        query = compose_query({"id": "1"}, {"one": "first"}, {"page": "2"})
        assert query == {"id": "1", "one": "first", "page": "2"}
        assert list(query) == ["id", "one", "page"]

    def test_parser_beats_bindings(self) -> None:
        assert compose_query({"id": "from-pattern"}, {"id": "from-parser"}, None) == {
            "id": "from-parser"
        }

    def test_explicit_beats_parser(self) -> None:
        query = compose_query(None, {"one": "first", "two": "second"}, {"paramOne": "true", "two": "false"})
        assert query == {"one": "first", "two": "false", "paramOne": "true"}

    def test_explicit_beats_everything(self) -> None:
        query = compose_query({"k": "a"}, {"k": "b"}, {"k": "c"})
        assert query == {"k": "c"}

    def test_overlay_keeps_first_seen_position(self) -> None:
        query = compose_query({"a": "1", "b": "2"}, None, {"c": "3", "a": "9"})
        assert list(query) == ["a", "b", "c"]
        assert query["a"] == "9"

    def test_list_values_are_copied(self) -> None:
        slug = ["one", "two"]
        query = compose_query({"slug": slug}, None, None)
        assert query == {"slug": ["one", "two"]}
        assert query["slug"] is not slug


class TestOverlay:
    def test_in_place(self) -> None:
        base = {"a": "1"}
        result = overlay(base, {"b": "2"})
        assert result is base
        assert base == {"a": "1", "b": "2"}

    def test_none_layer(self) -> None:
        assert overlay({"a": "1"}, None) == {"a": "1"}
