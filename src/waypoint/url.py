"""URL codec — split raw ``path?query`` strings and build them back.

Query order is significant: keys keep the position of their first
occurrence and serialization follows insertion order. Malformed input
never raises; odd pairs degrade to literal keys with empty values.
"""

from collections.abc import Mapping
from urllib.parse import quote_plus, unquote, unquote_plus

from waypoint._internal.types import Query, QueryValue


def split_url(raw: str) -> tuple[str, str]:
    """Split *raw* at the first ``?`` into ``(path, query_string)``.

    Neither half is decoded.
    """
    path, _, query_string = raw.partition("?")
    return path, query_string


def parse_query(query_string: str) -> Query:
    """Decode a query string into an ordered mapping.

    Examples::

        "four=4&five="  -> {"four": "4", "five": ""}
        "flag"          -> {"flag": ""}
        "a=1&b=2&a=3"   -> {"a": "3", "b": "2"}
    """
    query: Query = {}
    for pair in query_string.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        # Re-assigning keeps the first-seen position in the dict
        query[unquote_plus(key)] = unquote_plus(value)
    return query


def parse_url(raw: str) -> tuple[str, Query]:
    """Parse *raw* into a percent-decoded path and its query mapping."""
    path, query_string = split_url(raw)
    return unquote(path), parse_query(query_string)


def encode_query(query: Mapping[str, QueryValue]) -> str:
    """Encode *query* as ``key=value`` pairs joined with ``&``.

    List values repeat the key once per item, in list order.
    """
    pairs: list[str] = []
    for key, value in query.items():
        encoded_key = quote_plus(str(key))
        if isinstance(value, (list, tuple)):
            pairs.extend(f"{encoded_key}={quote_plus(str(item))}" for item in value)
        else:
            pairs.append(f"{encoded_key}={quote_plus(str(value))}")
    return "&".join(pairs)


def serialize_url(path: str, query: Mapping[str, QueryValue]) -> str:
    """Join *path* and *query* into a single string.

    An empty query (or one holding only empty lists) leaves *path*
    unchanged — no trailing ``?``.
    """
    encoded = encode_query(query)
    if not encoded:
        return path
    return f"{path}?{encoded}"
