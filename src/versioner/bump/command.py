from __future__ import annotations

import argparse
from typing import Any

from ..core.console import Reporter
from ..core.context import RunContext
from ..core.logging import log_event
from ..core.serialize import dumps_json
from ..options import options_from_namespace, resolve_version, validate_params
from ..version.manifest import write_manifest_version
from ..version.model import PARTS, Direction, Part, adjust_part, format_version

SCHEMA_NAME = "versioner.bump.v1"


def resolve_direction(options: dict[str, Any]) -> Direction:
    # --down wins when both flags are given.
    return "down" if options.get("down") else "up"


def update_version_part(ctx: RunContext, part: Part, options: dict[str, Any], reporter: Reporter) -> dict[str, object]:
    """Adjust one part of the manifest version; the returned dict feeds the JSON payload."""
    direction = resolve_direction(options) if isinstance(options, dict) else "up"
    outcome: dict[str, object] = {"part": part, "direction": direction, "package": None, "previous": None, "current": None}
    if part not in PARTS:
        reporter.error(f"Validation error: unknown version part: {part}")
        return {**outcome, "status": "error", "message": "invalid command parameters"}
    if not validate_params(reporter, options):
        return {**outcome, "status": "error", "message": "invalid command parameters"}

    resolved = resolve_version(ctx, options, reporter)
    if resolved is None:
        return {**outcome, "status": "error", "message": "manifest version could not be resolved"}
    manifest, current = resolved
    outcome.update(package=str(manifest), previous=format_version(current))

    reporter.info(f"Current version: {format_version(current)}")
    new_version = adjust_part(current, part, direction)

    progress = reporter.progress(f"Updating {part} version {direction}...")
    progress.start()
    if not write_manifest_version(manifest, new_version, reporter):
        progress.fail("Failed to update version")
        return {**outcome, "status": "error", "message": "Failed to update version"}
    message = f"Successfully updated version from {format_version(current)} to {format_version(new_version)}"
    progress.succeed(message)
    log_event(ctx, "info", "bump", "written", part=part, direction=direction, version=format_version(new_version))
    return {**outcome, "current": format_version(new_version), "status": "ok", "message": message}


def run_bump_command(ctx: RunContext, ns: argparse.Namespace, reporter: Reporter | None = None) -> int:
    reporter = reporter or ctx.reporter()
    log_event(ctx, "info", "bump", "start", part=ns.cmd)
    outcome = update_version_part(ctx, ns.cmd, options_from_namespace(ns), reporter)
    if ctx.as_json:
        payload = {"schema_name": SCHEMA_NAME, "schema_version": 1, "tool": "versioner", "run_id": ctx.run_id, **outcome}
        print(dumps_json(payload))
    log_event(ctx, "info", "bump", "finish", status=outcome["status"])
    return 0


def configure_bump_parsers(
    sub: argparse._SubParsersAction[argparse.ArgumentParser],
    parents: list[argparse.ArgumentParser],
) -> None:
    for part in PARTS:
        p = sub.add_parser(part, parents=parents, help=f"update {part} version")
        p.add_argument("--up", action="store_true", help=f"increment {part} version (default)")
        p.add_argument("--down", action="store_true", help=f"decrement {part} version")
