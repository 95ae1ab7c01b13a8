from __future__ import annotations

import os
from pathlib import Path


def read_text(path: Path, encoding: str = "utf-8") -> str:
    # newline="" keeps CRLF files byte-identical after a rewrite.
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def write_text(path: Path, content: str, encoding: str = "utf-8") -> Path:
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return path


def iter_tree_files(root: Path) -> list[Path]:
    """Every non-directory entry below `root`, dot-entries included.

    Symlinked directories are listed by `os.walk` as directories and never
    descended into; they are not candidates either.
    """
    out: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, followlinks=False):
        base = Path(dirpath)
        out.extend(base / name for name in filenames)
    return sorted(out)
