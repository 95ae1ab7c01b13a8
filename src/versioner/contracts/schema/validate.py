from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

import jsonschema

from ...core.errors import VALIDATION_ERROR, ScriptError
from ...core.exit_codes import ERR_VALIDATION
from .catalog import schema_path


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    return json.loads(schema_path(schema_name).read_text(encoding="utf-8"))


def schema_errors(schema_name: str, payload: Any) -> list[str]:
    """All violations of `schema_name`, sorted by location, as `<pointer>: <message>`."""
    schema = load_schema(schema_name)
    validator = jsonschema.validators.validator_for(schema)(schema)
    rows: list[str] = []
    for exc in sorted(validator.iter_errors(payload), key=lambda e: "/".join(str(p) for p in e.absolute_path)):
        pointer = "/".join(str(p) for p in exc.absolute_path)
        rows.append(f"{pointer or '<root>'}: {exc.message}")
    return rows


def validate(schema_name: str, payload: Any) -> None:
    schema = load_schema(schema_name)
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(
            f"schema validation failed for {schema_name} at {loc}: {exc.message}",
            ERR_VALIDATION,
            kind=VALIDATION_ERROR,
        ) from exc
