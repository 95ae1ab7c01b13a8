from __future__ import annotations

from pathlib import Path
from typing import Literal

from .console import Reporter

PathKind = Literal["file", "directory"]


def validate_path(path: str | Path, kind: PathKind, reporter: Reporter) -> bool:
    """Report and return False unless `path` exists and is of the expected kind."""
    try:
        target = Path(path)
        exists = target.exists()
    except (OSError, ValueError):
        exists = False
    if not exists:
        reporter.error(f"Path does not exist: {path}")
        return False
    if kind == "file" and not target.is_file():
        reporter.error(f"Path is not a file: {path}")
        return False
    if kind == "directory" and not target.is_dir():
        reporter.error(f"Path is not a directory: {path}")
        return False
    return True
