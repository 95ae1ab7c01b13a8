"""Semantic version value type: parse, format and part adjustment.

Accepted grammar is ``MAJOR.MINOR.PATCH`` with an optional ``-BUILD`` tag.
Numeric parts are ASCII digits without leading zeros; the build tag is any
non-empty single-line string and is carried through untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Literal

from ..core.errors import FORMAT_ERROR, VALIDATION_ERROR, ScriptError
from ..core.exit_codes import ERR_FORMAT, ERR_VALIDATION

Part = Literal["major", "minor", "patch"]
Direction = Literal["up", "down"]

PARTS: tuple[Part, ...] = ("major", "minor", "patch")
DIRECTIONS: tuple[Direction, ...] = ("up", "down")

_NUMBER = r"(0|[1-9][0-9]*)"
_VERSION_RE = re.compile(rf"{_NUMBER}\.{_NUMBER}\.{_NUMBER}(?:-([^\r\n]+))?")


@dataclass(frozen=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int
    build: str | None = None

    def __post_init__(self) -> None:
        for name in PARTS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ScriptError(f"{name} must be a non-negative integer: {value!r}", ERR_FORMAT, kind=FORMAT_ERROR)
        if self.build is not None and (not isinstance(self.build, str) or not self.build):
            raise ScriptError(f"build must be a non-empty string: {self.build!r}", ERR_FORMAT, kind=FORMAT_ERROR)
        if self.build is not None and ("\r" in self.build or "\n" in self.build):
            raise ScriptError(f"build must be a single line: {self.build!r}", ERR_FORMAT, kind=FORMAT_ERROR)

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        return parse_version(text)

    def __str__(self) -> str:
        return format_version(self)


def parse_version(text: str) -> SemanticVersion:
    if not isinstance(text, str):
        raise ScriptError(f"version must be a string: {text!r}", ERR_FORMAT, kind=FORMAT_ERROR)
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        raise ScriptError(f"invalid version format: {text!r}", ERR_FORMAT, kind=FORMAT_ERROR)
    major, minor, patch, build = match.groups()
    return SemanticVersion(int(major), int(minor), int(patch), build)


def try_parse_version(text: str) -> SemanticVersion | None:
    try:
        return parse_version(text)
    except ScriptError:
        return None


def format_version(version: SemanticVersion) -> str:
    core = f"{version.major}.{version.minor}.{version.patch}"
    return f"{core}-{version.build}" if version.build else core


def adjust_part(version: SemanticVersion, part: Part, direction: Direction) -> SemanticVersion:
    if part not in PARTS:
        raise ScriptError(f"unknown version part: {part!r}", ERR_VALIDATION, kind=VALIDATION_ERROR)
    if direction not in DIRECTIONS:
        raise ScriptError(f"unknown direction: {direction!r}", ERR_VALIDATION, kind=VALIDATION_ERROR)
    current = getattr(version, part)
    if direction == "down":
        # Saturates at zero; nothing below the adjusted part changes.
        return replace(version, **{part: current - 1}) if current > 0 else version
    if part == "major":
        return replace(version, major=current + 1, minor=0, patch=0)
    if part == "minor":
        return replace(version, minor=current + 1, patch=0)
    return replace(version, patch=current + 1)
