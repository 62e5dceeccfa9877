"""Query composition — merge the three sources a navigation draws from.

Precedence, lowest to highest::

    pattern bindings  <  path parser output  <  explicit query

Each overlay only replaces values; a key keeps the position where it was
first seen and is never removed.
"""

from collections.abc import Mapping

from waypoint._internal.types import Query, QueryValue


def overlay(base: Query, layer: Mapping[str, QueryValue] | None) -> Query:
    """Write every entry of *layer* into *base* in place and return it."""
    if layer:
        for key, value in layer.items():
            base[str(key)] = list(value) if isinstance(value, (list, tuple)) else value
    return base


def compose_query(
    pattern_bindings: Mapping[str, QueryValue] | None,
    parser_output: Mapping[str, QueryValue] | None,
    explicit_query: Mapping[str, QueryValue] | None,
) -> Query:
    """Build the final query for a navigation.

    Any source may be ``None`` or empty.
    """
    query: Query = {}
    overlay(query, pattern_bindings)
    overlay(query, parser_output)
    overlay(query, explicit_query)
    return query
