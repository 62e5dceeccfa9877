"""Routing — registered path patterns and structural matching.

Patterns are registered as a whole list; every registration replaces the
previous one. Matching walks the list in registration order.
"""
