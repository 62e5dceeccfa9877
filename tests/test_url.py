"""Tests for waypoint.url — path/query parsing and serialization."""

from waypoint.url import encode_query, parse_query, parse_url, serialize_url, split_url


class TestSplitUrl:
    def test_no_query(self) -> None:
        assert split_url("/one/two") == ("/one/two", "")

    def test_splits_at_first_question_mark(self) -> None:
        assert split_url("/a?b=1?c=2") == ("/a", "b=1?c=2")

    def test_empty(self) -> None:
        assert split_url("") == ("", "")


class TestParseQuery:
    def test_pairs(self) -> None:
        assert parse_query("four=4&five=") == {"four": "4", "five": ""}

    def test_key_without_equals(self) -> None:
        assert parse_query("flag") == {"flag": ""}

    def test_splits_on_first_equals(self) -> None:
        assert parse_query("expr=a=b") == {"expr": "a=b"}

    def test_duplicate_overwrites_in_place(self) -> None:
        query = parse_query("a=1&b=2&a=3")
        assert query == {"a": "3", "b": "2"}
        assert list(query) == ["a", "b"]

    def test_empty_pairs_skipped(self) -> None:
        assert parse_query("a=1&&b=2&") == {"a": "1", "b": "2"}

    def test_decodes(self) -> None:
        assert parse_query("q=hello%20world&name=a+b") == {"q": "hello world", "name": "a b"}

    def test_malformed_escape_passes_through(self) -> None:
        assert parse_query("q=100%") == {"q": "100%"}

    def test_empty(self) -> None:
        assert parse_query("") == {}


class TestParseUrl:
    def test_path_only(self) -> None:
        assert parse_url("/one/two/three") == ("/one/two/three", {})

    def test_path_and_query(self) -> None:
        path, query = parse_url("/one/two/three?four=4&five=")
        assert path == "/one/two/three"
        assert query == {"four": "4", "five": ""}

    def test_path_is_decoded(self) -> None:
        path, _ = parse_url("/caf%C3%A9/a%20b")
        assert path == "/café/a b"

    def test_query_only(self) -> None:
        assert parse_url("?a=1") == ("", {"a": "1"})

    def test_trailing_question_mark(self) -> None:
        assert parse_url("/a?") == ("/a", {})


class TestSerializeUrl:
    def test_empty_query_leaves_path(self) -> None:
        assert serialize_url("/one", {}) == "/one"

    def test_insertion_order(self) -> None:
        assert serialize_url("/one", {"four": "4", "five": ""}) == "/one?four=4&five="
        assert serialize_url("/one", {"five": "", "four": "4"}) == "/one?five=&four=4"

    def test_encodes(self) -> None:
        assert serialize_url("/s", {"q": "a b&c"}) == "/s?q=a+b%26c"

    def test_list_repeats_key(self) -> None:
        assert serialize_url("/s", {"tag": ["x", "y"]}) == "/s?tag=x&tag=y"

    def test_only_empty_lists(self) -> None:
        assert serialize_url("/s", {"tag": []}) == "/s"

    def test_roundtrip_preserves_order(self) -> None:
        query = {"z": "1", "a": "two words", "m": ""}
        raw = serialize_url("/p", query)
        path, parsed = parse_url(raw)
        assert path == "/p"
        assert parsed == query
        assert list(parsed) == list(query)


class TestEncodeQuery:
    def test_non_string_values(self) -> None:
        assert encode_query({"page": 2}) == "page=2"  # type: ignore[dict-item]
