from __future__ import annotations

import json
import socket
from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

from versioner.core.console import RecordingReporter
from versioner.core.context import RunContext

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / ".hypothesis/examples"
settings.register_profile("versioner", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB), deadline=None)
settings.load_profile("versioner")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture(autouse=True)
def clean_versioner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VERSIONER_PACKAGE", "VERSIONER_SUBJECT", "VERSIONER_LOG_JSON", "RUN_ID"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory holding `package.json` at version 1.2.3."""
    root = tmp_path / "project"
    root.mkdir()
    manifest = {"name": "demo", "version": "1.2.3", "private": True}
    (root / "package.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return root


@pytest.fixture
def ctx(project: Path) -> RunContext:
    return RunContext.from_args("test-run", str(project))
