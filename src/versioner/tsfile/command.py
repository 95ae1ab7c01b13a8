from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from ..core.console import Reporter
from ..core.context import RunContext
from ..core.fs import write_text
from ..core.logging import log_event
from ..core.paths import validate_path
from ..core.serialize import dumps_json
from ..options import options_from_namespace, resolve_version, validate_params
from ..version.model import format_version

SCHEMA_NAME = "versioner.create_ts.v1"


def render_version_module(version: str, single_quotes: bool = False, semi: bool = False) -> str:
    quote = "'" if single_quotes else '"'
    return f"export const VERSION = {quote}{version}{quote}{';' if semi else ''}\n"


def create_ts_version(ctx: RunContext, target: Any, options: dict[str, Any], reporter: Reporter) -> dict[str, object]:
    outcome: dict[str, object] = {"target": str(target), "version": None}
    if not validate_params(reporter, options, target, require_target=True):
        return {**outcome, "status": "error", "message": "invalid command parameters"}
    resolved = resolve_version(ctx, options, reporter)
    if resolved is None:
        return {**outcome, "status": "error", "message": "manifest version could not be resolved"}
    _manifest, version = resolved
    version_string = format_version(version)
    outcome["version"] = version_string

    out_path: Path = ctx.resolve(target)
    if not validate_path(out_path.parent, "directory", reporter):
        return {**outcome, "status": "error", "message": f"missing parent directory for {target}"}
    content = render_version_module(
        version_string,
        single_quotes=bool(options.get("single_quotes")),
        semi=bool(options.get("semi")),
    )
    try:
        write_text(out_path, content)
    except OSError as exc:
        reporter.error(f"Failed to create {target}: {exc}")
        return {**outcome, "status": "error", "message": f"Failed to create {target}"}
    message = f"Created {target} with version {version_string}"
    reporter.success(message)
    log_event(ctx, "info", "create-ts", "written", path=out_path, version=version_string)
    return {**outcome, "status": "ok", "message": message}


def run_create_ts_command(ctx: RunContext, ns: argparse.Namespace, reporter: Reporter | None = None) -> int:
    reporter = reporter or ctx.reporter()
    outcome = create_ts_version(ctx, ns.target, options_from_namespace(ns), reporter)
    if ctx.as_json:
        payload = {"schema_name": SCHEMA_NAME, "schema_version": 1, "tool": "versioner", "run_id": ctx.run_id, **outcome}
        print(dumps_json(payload))
    return 0


def configure_create_ts_parser(
    sub: argparse._SubParsersAction[argparse.ArgumentParser],
    parents: list[argparse.ArgumentParser],
) -> None:
    p = sub.add_parser("create-ts", parents=parents, help="create a TypeScript file with the version as a constant")
    p.add_argument("target", help="target TypeScript file to create")
    p.add_argument("--single-quotes", dest="single_quotes", action="store_true", help="use single quotes instead of double quotes")
    p.add_argument("--semi", action="store_true", help="include semicolons")
