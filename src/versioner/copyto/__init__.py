"""Placeholder substitution: copy the manifest version into files."""

from __future__ import annotations

from .engine import CopyFailure, CopyReport, Stage, copy_version_to

__all__ = ["CopyFailure", "CopyReport", "Stage", "copy_version_to"]
