from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from versioner.contracts.validate import validate
from versioner.core.console import RecordingReporter
from versioner.core.context import RunContext
from versioner.tsfile.command import create_ts_version, render_version_module, run_create_ts_command


@pytest.mark.parametrize(
    ("single_quotes", "semi", "expected"),
    [
        (False, False, 'export const VERSION = "1.2.3"\n'),
        (True, False, "export const VERSION = '1.2.3'\n"),
        (False, True, 'export const VERSION = "1.2.3";\n'),
        (True, True, "export const VERSION = '1.2.3';\n"),
    ],
)
def test_render_version_module(single_quotes: bool, semi: bool, expected: str) -> None:
    assert render_version_module("1.2.3", single_quotes=single_quotes, semi=semi) == expected


def test_create_ts_writes_module(ctx: RunContext, project: Path, reporter: RecordingReporter) -> None:
    (project / "src").mkdir()
    outcome = create_ts_version(ctx, "src/version.ts", {"semi": True, "single_quotes": True}, reporter)
    assert outcome["status"] == "ok"
    assert (project / "src" / "version.ts").read_text(encoding="utf-8") == "export const VERSION = '1.2.3';\n"
    assert reporter.messages("success") == ["Created src/version.ts with version 1.2.3"]


def test_create_ts_overwrites_existing_file(ctx: RunContext, project: Path, reporter: RecordingReporter) -> None:
    target = project / "version.ts"
    target.write_text("stale", encoding="utf-8")
    create_ts_version(ctx, str(target), {}, reporter)
    assert target.read_text(encoding="utf-8") == 'export const VERSION = "1.2.3"\n'


def test_create_ts_requires_parent_directory(ctx: RunContext, project: Path, reporter: RecordingReporter) -> None:
    outcome = create_ts_version(ctx, "missing/version.ts", {}, reporter)
    assert outcome["status"] == "error"
    assert reporter.messages("error") == [f"Path does not exist: {project / 'missing'}"]


def test_create_ts_json_payload(project: Path, capsys) -> None:
    ctx = RunContext.from_args("json-run", str(project), "json")
    ns = argparse.Namespace(cmd="create-ts", target="v.ts", package=None, type="node", single_quotes=False, semi=False)
    assert run_create_ts_command(ctx, ns, RecordingReporter()) == 0
    payload = json.loads(capsys.readouterr().out)
    validate("versioner.create_ts.v1", payload)
    assert payload["version"] == "1.2.3"
