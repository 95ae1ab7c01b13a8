from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .console import ConsoleReporter
from .env import getenv, getenv_flag

OutputFormat = Literal["text", "json"]

DEFAULT_SUBJECT = "__VERSION__"
MANIFEST_NAME = "package.json"


@dataclass(frozen=True)
class RunContext:
    """Per-invocation settings; command options win over these defaults."""

    run_id: str
    cwd: Path
    default_package: str | None
    default_subject: str
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    def resolve(self, raw: str | Path) -> Path:
        path = Path(raw)
        return path if path.is_absolute() else self.cwd / path

    def reporter(self) -> ConsoleReporter:
        # JSON mode keeps stdout for the payload.
        out = sys.stderr if self.as_json else None
        return ConsoleReporter(out=out, quiet=self.quiet)

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        cwd: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        default_run = f"versioner-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or getenv("RUN_ID") or default_run,
            cwd=Path(cwd).resolve() if cwd else Path.cwd(),
            default_package=getenv("VERSIONER_PACKAGE") or None,
            default_subject=getenv("VERSIONER_SUBJECT") or DEFAULT_SUBJECT,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json or getenv_flag("VERSIONER_LOG_JSON"),
        )
