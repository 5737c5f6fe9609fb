"""
Shared argument parsing and validation for GraphQL resolvers
"""

import re

from .errors import ArgumentValidationError

_DECIMAL_ID = re.compile(r"[0-9]+")

# Ids are 32-bit serial columns; anything larger cannot exist
MAX_ID = 2_147_483_647

# Pagination limits for linkFeed
FEED_TAKE_MIN = 1
FEED_TAKE_MAX = 50
FEED_TAKE_DEFAULT = 30
FEED_SKIP_MIN = 0
FEED_SKIP_MAX = 50
FEED_SKIP_DEFAULT = 0


def parse_int_safe(value: str | int | None) -> int | None:
    """
    Parse an id argument that must be a plain decimal integer.

    Returns None for anything else ("abc", "-1", "1.5", " 7", ""), so callers
    can report a not-found style error instead of crashing on the parse.
    """
    if value is None:
        return None
    text = str(value)
    if _DECIMAL_ID.fullmatch(text) is None:
        return None
    parsed = int(text)
    if parsed > MAX_ID:
        return None
    return parsed


def apply_range_constraint(name: str, value: int, minimum: int, maximum: int) -> int:
    """Return value unchanged when it lies in [minimum, maximum], raise otherwise."""
    if value < minimum or value > maximum:
        raise ArgumentValidationError(
            f"'{name}' argument value '{value}' is outside the valid range "
            f"of {minimum} to {maximum}"
        )
    return value


def apply_take_constraints(value: int | None) -> int:
    return apply_range_constraint(
        "take",
        FEED_TAKE_DEFAULT if value is None else value,
        FEED_TAKE_MIN,
        FEED_TAKE_MAX,
    )


def apply_skip_constraints(value: int | None) -> int:
    return apply_range_constraint(
        "skip",
        FEED_SKIP_DEFAULT if value is None else value,
        FEED_SKIP_MIN,
        FEED_SKIP_MAX,
    )
