"""
JSON schema argument validation.

build_schema_checker() compiles a schema once and hands back a checker that
returns False for valid input or a SchemaValidationError describing the first
violation. validate_against_schema() reports every violation instead.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from argguard.services.engine import JsonSchemaEngine, SchemaIssue
from argguard.services.loader import load_schema

logger = logging.getLogger(__name__)

DEFAULT_ERROR_PREFIX = "[SchemaError] Schema validation failed"
ROOT_PATH = "<root>"

SchemaSource = Mapping[str, Any] | str


class SchemaValidationError(ValueError):
    """Returned (not raised) by a schema checker when a value does not conform."""

    def __init__(self, message: str, path: str = ROOT_PATH, detail: str | None = None):
        super().__init__(message)
        self.path = path
        self.detail = detail


def format_issue(issue: SchemaIssue) -> str:
    return f"{issue.path or ROOT_PATH}: {issue.message}"


def _resolve_schema(schema: Any) -> Mapping[str, Any]:
    if isinstance(schema, Mapping):
        return schema
    if isinstance(schema, str) and schema:
        return load_schema(schema)
    raise TypeError("Invalid schema specified (arg #1)")


def build_schema_checker(
    schema: SchemaSource,
    message: str | None = None,
    *,
    engine_factory: Callable[[], Any] = JsonSchemaEngine,
) -> Callable[[Any], bool | SchemaValidationError]:
    """
    Compile ``schema`` and return a reusable checker function.

    ``schema`` is either a mapping or the path of a JSON schema file.
    ``message`` replaces the default error prefix. A new engine is created
    via ``engine_factory`` for every call, so checkers never share state.

    The checker returns False when the value is valid, otherwise a
    SchemaValidationError for the first reported violation.
    """
    resolved = _resolve_schema(schema)
    compiled = engine_factory().compile(resolved)
    prefix = DEFAULT_ERROR_PREFIX if message is None else message

    def check(value: Any) -> bool | SchemaValidationError:
        issues = compiled.check(value)
        if not issues:
            return False
        first = issues[0]
        error = SchemaValidationError(
            f"{prefix}. Details: [{format_issue(first)}]",
            path=first.path or ROOT_PATH,
            detail=first.message,
        )
        logger.debug("Schema check failed: %s", error)
        return error

    return check


def validate_against_schema(
    data: Any,
    schema: SchemaSource,
    *,
    engine_factory: Callable[[], Any] = JsonSchemaEngine,
) -> list[str]:
    """
    Validate data against a JSON schema.
    Returns every violation as "<path>: <message>" (empty list = valid).
    """
    compiled = engine_factory().compile(_resolve_schema(schema))
    return [format_issue(issue) for issue in compiled.check(data)]
