from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from ...core.errors import VALIDATION_ERROR, ScriptError
from ...core.exit_codes import ERR_VALIDATION
from .schemas import schemas_root

_SCHEMA_FILE_RE = re.compile(r"^(versioner\.[a-z0-9][a-z0-9._-]*\.v([1-9][0-9]*))\.schema\.json$")


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


def catalog_path() -> Path:
    return schemas_root() / "catalog.json"


def load_catalog() -> dict[str, CatalogEntry]:
    raw = json.loads(catalog_path().read_text(encoding="utf-8"))
    entries: dict[str, CatalogEntry] = {}
    for row in raw.get("schemas", []):
        entry = CatalogEntry(name=row["name"], version=int(row["version"]), file=row["file"])
        entries[entry.name] = entry
    return entries


def schema_files_on_disk() -> list[Path]:
    return sorted(path for path in schemas_root().glob("*.schema.json") if path.is_file())


def catalog_drift() -> list[str]:
    """Mismatches between catalog.json and the schema files next to it."""
    errors: list[str] = []
    catalog = load_catalog()
    on_disk: dict[str, str] = {}
    for path in schema_files_on_disk():
        match = _SCHEMA_FILE_RE.match(path.name)
        if not match:
            errors.append(f"schema file name does not follow the catalog convention: {path.name}")
            continue
        on_disk[match.group(1)] = path.name
        entry = catalog.get(match.group(1))
        if entry is not None and entry.version != int(match.group(2)):
            errors.append(f"catalog version mismatch for {entry.name}: {entry.version}")
    for name, entry in sorted(catalog.items()):
        if on_disk.get(name) != entry.file:
            errors.append(f"catalog entry without schema file: {name} -> {entry.file}")
    for name in sorted(set(on_disk) - set(catalog)):
        errors.append(f"schema file missing from catalog: {on_disk[name]}")
    return errors


def schema_path(schema_name: str) -> Path:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION, kind=VALIDATION_ERROR)
    return schemas_root() / entry.file
