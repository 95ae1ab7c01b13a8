"""Outcome values for operations that report failures instead of raising.

`load_manifest_version` and `copy_version_to` hand back `Err` with the cause
of the failure, and the commands turn it into exit status and payload.
Unexpected failures still raise `ScriptError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Ok[T] | Err[E]
