from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_versioner(*args: str, cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    merged = os.environ.copy()
    merged["PYTHONPATH"] = str(ROOT / "src")
    merged.setdefault("RUN_ID", "pytest-run")
    merged.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "versioner", *args],
        cwd=(cwd or ROOT),
        env=merged,
        text=True,
        capture_output=True,
        check=False,
    )


def write_manifest(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def read_manifest(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))
