"""Copy the manifest version into files that carry a placeholder token.

One invocation walks through validating, resolving, discovering, filtering,
rewriting and reporting. Only an invalid request, an unresolved manifest
version or a missing target abort the run; a file that cannot be rewritten
is reported and skipped. Files already rewritten stay rewritten.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.console import Reporter
from ..core.context import RunContext
from ..core.fs import iter_tree_files, read_text, write_text
from ..core.logging import log_event
from ..core.result import Err, Ok, Result
from ..options import resolve_version, validate_params
from ..version.model import format_version


class Stage(str, enum.Enum):
    VALIDATING = "validating"
    RESOLVING = "resolving"
    DISCOVERING = "discovering"
    FILTERING = "filtering"
    REWRITING = "rewriting"
    REPORTING = "reporting"


@dataclass(frozen=True)
class CopyReport:
    target: Path
    subject: str
    version: str
    candidates: tuple[Path, ...] = ()
    updated: tuple[Path, ...] = ()
    failed: tuple[Path, ...] = ()

    @property
    def message(self) -> str:
        if not self.candidates:
            return f"No files found containing '{self.subject}'"
        return f"Updated {len(self.updated)} of {len(self.candidates)} files with version {self.version}"


@dataclass(frozen=True)
class CopyFailure:
    stage: Stage
    message: str
    target: str
    subject: str
    version: str | None = None


def discover_files(target: Path) -> list[Path] | None:
    """Candidate files under `target`, or None when it is neither file nor directory."""
    if target.is_dir():
        return iter_tree_files(target)
    if target.is_file():
        return [target]
    return None


def contains_subject(path: Path, subject: str) -> bool:
    try:
        return subject in read_text(path)
    except (OSError, UnicodeDecodeError):
        return False


def substitute_file(path: Path, subject: str, replacement: str) -> bool:
    """Replace every literal `subject` in `path`; True when the file was written."""
    original = read_text(path)
    updated = original.replace(subject, replacement)
    if updated == original:
        return False
    write_text(path, updated)
    return True


def copy_version_to(
    ctx: RunContext,
    target: Any,
    options: dict[str, Any],
    reporter: Reporter,
) -> Result[CopyReport, CopyFailure]:
    subject = (options.get("subject") if isinstance(options, dict) else None) or ctx.default_subject

    def _fail(stage: Stage, message: str, version: str | None = None) -> Err[CopyFailure]:
        log_event(ctx, "error", "copyto", "abort", stage=stage.value, target=target)
        return Err(CopyFailure(stage, message, str(target), subject, version))

    if not validate_params(reporter, options, target, require_target=True):
        return _fail(Stage.VALIDATING, "invalid command parameters")

    resolved = resolve_version(ctx, options, reporter)
    if resolved is None:
        return _fail(Stage.RESOLVING, "manifest version could not be resolved")
    manifest, version = resolved
    version_string = format_version(version)
    log_event(ctx, "info", "copyto", "resolved", stage=Stage.RESOLVING.value, manifest=manifest, version=version_string)

    progress = reporter.progress("Finding files to update...")
    progress.start()

    target_path = ctx.resolve(target)
    files = discover_files(target_path)
    if files is None:
        message = f"Target path does not exist or is not a file/directory: {target}"
        progress.fail(message)
        return _fail(Stage.DISCOVERING, message, version_string)
    log_event(ctx, "info", "copyto", "discovered", stage=Stage.DISCOVERING.value, count=len(files))

    candidates = [path for path in files if contains_subject(path, subject)]
    log_event(ctx, "info", "copyto", "filtered", stage=Stage.FILTERING.value, count=len(candidates))
    progress.update(f"Updating {len(candidates)} files...")
    report = CopyReport(target_path, subject, version_string, candidates=tuple(candidates))
    if not candidates:
        progress.info(report.message)
        return Ok(report)

    updated: list[Path] = []
    failed: list[Path] = []
    for path in candidates:
        try:
            if substitute_file(path, subject, version_string):
                updated.append(path)
                log_event(ctx, "info", "copyto", "updated", stage=Stage.REWRITING.value, path=path)
        except (OSError, UnicodeDecodeError) as exc:
            failed.append(path)
            reporter.warning(f"Failed to update {path}")
            log_event(ctx, "warning", "copyto", "skipped", stage=Stage.REWRITING.value, path=path, error=exc)

    report = CopyReport(
        target_path,
        subject,
        version_string,
        candidates=tuple(candidates),
        updated=tuple(updated),
        failed=tuple(failed),
    )
    progress.succeed(report.message)
    return Ok(report)
