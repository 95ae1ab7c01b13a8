from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from ..contracts.validate import schema_errors
from ..core.console import Reporter
from ..core.context import MANIFEST_NAME
from ..core.errors import IO_ERROR, NOT_FOUND
from ..core.fs import read_text, write_text
from ..core.result import Err, Ok, Result
from .model import SemanticVersion, format_version, try_parse_version

MANIFEST_SCHEMA = "versioner.manifest.v1"

INVALID_JSON = "invalid_json"
MISSING_VERSION = "missing_version"
INVALID_VERSION = "invalid_version"


@dataclass(frozen=True)
class ManifestError:
    kind: str
    message: str
    path: Path


def find_manifest(start_dir: str | Path) -> Path | None:
    try:
        candidate = Path(start_dir) / MANIFEST_NAME
        return candidate if candidate.exists() else None
    except (OSError, TypeError, ValueError):
        return None


def _reject_constant(token: str) -> object:
    raise ValueError(f"{token} is not valid JSON")


def _load_document(path: Path) -> object:
    return json.loads(read_text(path), parse_constant=_reject_constant)


def load_manifest_version(path: str | Path) -> Result[SemanticVersion, ManifestError]:
    manifest = Path(path)
    try:
        document = _load_document(manifest)
    except FileNotFoundError as exc:
        return Err(ManifestError(NOT_FOUND, f"Failed to read package version: {exc}", manifest))
    except (OSError, UnicodeDecodeError) as exc:
        return Err(ManifestError(IO_ERROR, f"Failed to read package version: {exc}", manifest))
    except ValueError as exc:
        return Err(ManifestError(INVALID_JSON, f"Failed to read package version: {exc}", manifest))
    if schema_errors(MANIFEST_SCHEMA, document):
        return Err(ManifestError(MISSING_VERSION, f"No valid version found in {path}", manifest))
    raw = document["version"]  # type: ignore[index]
    version = try_parse_version(raw)
    if version is None:
        return Err(ManifestError(INVALID_VERSION, f"Invalid version format in {path}: {raw}", manifest))
    return Ok(version)


def read_manifest_version(path: str | Path, reporter: Reporter) -> SemanticVersion | None:
    """Manifest version, or None after reporting why it could not be read."""
    result = load_manifest_version(path)
    if isinstance(result, Err):
        reporter.error(result.error.message)
        return None
    return result.value


def write_manifest_version(path: str | Path, version: SemanticVersion, reporter: Reporter) -> bool:
    manifest = Path(path)
    try:
        document = _load_document(manifest)
        if not isinstance(document, dict):
            raise ValueError("manifest is not a JSON object")
        document["version"] = format_version(version)
        rendered = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False) + "\n"
        write_text(manifest, rendered)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        reporter.error(f"Failed to update package version: {exc}")
        return False
    return True
