"""
jsonschema adapter used to compile schemas into reusable validators.

The checker factory only relies on two things from an engine:
- engine.compile(schema) returns a compiled validator
- compiled.check(value) returns the ordered violations for that value,
  an empty list meaning the value is valid

Anything with that shape can stand in for JsonSchemaEngine (tests use fakes).
Compiled validators keep no per-call state, so one can be shared across threads.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

logger = logging.getLogger(__name__)

_PATH_SEPARATORS = (".", "[", "]")


@dataclass(frozen=True)
class SchemaIssue:
    """A single violation reported by the engine."""

    message: str
    path: str | None = None


def format_error_path(parts: Iterable[Any]) -> str:
    """
    Render a jsonschema path deque as ``items[0].name``; root is ''.

    Keys that are empty or contain separators are quoted: ``a[""]``, ``["x.y"]``.
    """
    rendered = ""
    for part in parts:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif not part or any(sep in part for sep in _PATH_SEPARATORS):
            rendered += f"[{json.dumps(part)}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered


def _to_issue(error: ValidationError) -> SchemaIssue:
    return SchemaIssue(message=error.message, path=format_error_path(error.absolute_path))


class CompiledSchema:
    """A schema bound to a jsonschema validator instance."""

    def __init__(self, validator: Any):
        self._validator = validator

    @property
    def schema(self) -> Mapping[str, Any]:
        return self._validator.schema

    def check(self, value: Any) -> list[SchemaIssue]:
        return [_to_issue(e) for e in self._validator.iter_errors(value)]

    def __call__(self, value: Any) -> bool:
        return self._validator.is_valid(value)


class JsonSchemaEngine:
    """Compiles JSON schemas; draft 7 unless the schema declares ``$schema``."""

    def __init__(self, format_checker: bool = True):
        self.format_checker = format_checker

    def compile(self, schema: Mapping[str, Any]) -> CompiledSchema:
        cls = validator_for(schema, default=Draft7Validator)
        cls.check_schema(schema)
        checker = cls.FORMAT_CHECKER if self.format_checker else None
        logger.debug("Compiled schema with %s", cls.__name__)
        return CompiledSchema(cls(schema, format_checker=checker))
