"""Option validation and manifest resolution shared by every command."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from .contracts.validate import schema_errors
from .core.console import Reporter
from .core.context import RunContext
from .core.paths import validate_path
from .version.manifest import find_manifest, read_manifest_version
from .version.model import SemanticVersion

OPTIONS_SCHEMA = "versioner.options.v1"
OPTION_KEYS = ("package", "type", "subject", "up", "down", "single_quotes", "semi")


def options_from_namespace(ns: argparse.Namespace) -> dict[str, Any]:
    """Known options that were actually given; unset flags are left out."""
    values = vars(ns)
    out: dict[str, Any] = {}
    for key in OPTION_KEYS:
        value = values.get(key)
        if value is None or value is False:
            continue
        out[key] = value
    return out


def validate_params(reporter: Reporter, options: Any, target: Any = None, require_target: bool = False) -> bool:
    messages: list[str] = []
    if require_target and (not isinstance(target, str) or not target):
        messages.append("Path must not be empty")
    messages.extend(schema_errors(OPTIONS_SCHEMA, options))
    if messages:
        reporter.error(f"Validation error: {', '.join(messages)}")
        return False
    return True


def resolve_manifest_path(ctx: RunContext, options: dict[str, Any], reporter: Reporter) -> Path | None:
    raw = options.get("package") or ctx.default_package
    manifest = ctx.resolve(raw) if raw else find_manifest(ctx.cwd)
    if manifest is None:
        reporter.error("No package.json found. Please specify with --package option.")
        return None
    if not validate_path(manifest, "file", reporter):
        return None
    return manifest


def resolve_version(ctx: RunContext, options: dict[str, Any], reporter: Reporter) -> tuple[Path, SemanticVersion] | None:
    manifest = resolve_manifest_path(ctx, options, reporter)
    if manifest is None:
        return None
    version = read_manifest_version(manifest, reporter)
    if version is None:
        return None
    return manifest, version
