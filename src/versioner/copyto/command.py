from __future__ import annotations

import argparse

from ..core.console import Reporter
from ..core.context import RunContext
from ..core.logging import log_event
from ..core.result import Err, Result
from ..core.serialize import dumps_json
from ..options import options_from_namespace
from .engine import CopyFailure, CopyReport, Stage, copy_version_to

SCHEMA_NAME = "versioner.copyto.v1"


def _payload(
    ctx: RunContext, ns: argparse.Namespace, result: Result[CopyReport, CopyFailure]
) -> dict[str, object]:
    base: dict[str, object] = {
        "schema_name": SCHEMA_NAME,
        "schema_version": 1,
        "tool": "versioner",
        "run_id": ctx.run_id,
        "target": str(ns.target),
    }
    if isinstance(result, Err):
        failure = result.error
        return {
            **base,
            "status": "error",
            "stage": failure.stage.value,
            "subject": failure.subject,
            "version": failure.version,
            "message": failure.message,
        }
    report = result.value
    return {
        **base,
        "status": "ok",
        "stage": Stage.REPORTING.value,
        "subject": report.subject,
        "version": report.version,
        "candidates": [str(p) for p in report.candidates],
        "updated": [str(p) for p in report.updated],
        "failed": [str(p) for p in report.failed],
        "candidate_count": len(report.candidates),
        "updated_count": len(report.updated),
        "message": report.message,
    }


def run_copyto_command(ctx: RunContext, ns: argparse.Namespace, reporter: Reporter | None = None) -> int:
    reporter = reporter or ctx.reporter()
    log_event(ctx, "info", "copyto", "start", target=ns.target)
    result = copy_version_to(ctx, ns.target, options_from_namespace(ns), reporter)
    if ctx.as_json:
        print(dumps_json(_payload(ctx, ns, result)))
    log_event(ctx, "info", "copyto", "finish", status="error" if isinstance(result, Err) else "ok")
    return 0


def configure_copyto_parser(
    sub: argparse._SubParsersAction[argparse.ArgumentParser],
    parents: list[argparse.ArgumentParser],
) -> None:
    p = sub.add_parser("copyto", parents=parents, help="copy version to files by replacing placeholders")
    p.add_argument("target", help="target file or directory to update")
    p.add_argument("--subject", metavar="PLACEHOLDER", help="placeholder string to replace (default: __VERSION__)")
