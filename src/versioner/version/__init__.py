"""Version model and manifest access."""

from __future__ import annotations

from .manifest import (
    ManifestError,
    find_manifest,
    load_manifest_version,
    read_manifest_version,
    write_manifest_version,
)
from .model import (
    DIRECTIONS,
    PARTS,
    Direction,
    Part,
    SemanticVersion,
    adjust_part,
    format_version,
    parse_version,
    try_parse_version,
)

__all__ = [
    "DIRECTIONS",
    "PARTS",
    "Direction",
    "ManifestError",
    "Part",
    "SemanticVersion",
    "adjust_part",
    "find_manifest",
    "format_version",
    "load_manifest_version",
    "parse_version",
    "read_manifest_version",
    "try_parse_version",
    "write_manifest_version",
]
