"""
Errors surfaced to GraphQL clients.

Each error carries an `extensions.code` so clients can branch on the kind of
failure without parsing messages.
"""

from graphql import GraphQLError
from sqlalchemy.exc import IntegrityError

# SQLSTATE codes as reported by PostgreSQL drivers
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"


class HackerNewsError(GraphQLError):
    """Base class for errors reported in the GraphQL `errors` array."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message, extensions={"code": self.code})


class ArgumentValidationError(HackerNewsError):
    """Bad argument shape, range or missing required value."""

    code = "BAD_USER_INPUT"


class NotFoundError(HackerNewsError):
    """An argument references a row that does not exist."""

    code = "NOT_FOUND"


class ConstraintViolationError(HackerNewsError):
    """The store refused a write because of a relational constraint."""

    code = "CONSTRAINT_VIOLATION"


class AuthenticationFailedError(HackerNewsError):
    """Credentials did not match a user."""

    code = "UNAUTHENTICATED"


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_foreign_key_violation(error: IntegrityError) -> bool:
    if _sqlstate(error) == FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY constraint failed" in str(error.orig)


def is_unique_violation(error: IntegrityError) -> bool:
    if _sqlstate(error) == UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(error.orig)
