"""Schema file loading."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from argguard.config import settings

logger = logging.getLogger(__name__)


def resolve_schema_path(path: str) -> str:
    """
    Turn a schema reference into the path of an existing file.

    Relative references are taken from SCHEMA_DIR when it is set. A reference
    without an extension falls back to the same name with ".json" appended.
    """
    if not os.path.isabs(path) and settings.SCHEMA_DIR:
        path = os.path.join(settings.SCHEMA_DIR, path)
    path = os.path.abspath(path)

    if not os.path.isfile(path) and os.path.isfile(path + ".json"):
        return path + ".json"
    return path


def load_schema(path: str) -> dict[str, Any]:
    """Read and parse a JSON schema file. I/O and parse errors propagate."""
    resolved = resolve_schema_path(path)
    with open(resolved, encoding="utf-8") as f:
        schema = json.load(f)

    if not isinstance(schema, dict):
        raise TypeError(f"Schema file must contain a JSON object: {resolved}")

    logger.debug("Loaded schema from %s", resolved)
    return schema
