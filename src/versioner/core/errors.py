from __future__ import annotations

from dataclasses import dataclass

FORMAT_ERROR = "format_error"
NOT_FOUND = "not_found"
IO_ERROR = "io_error"
VALIDATION_ERROR = "validation_error"
INTERNAL_ERROR = "internal_error"


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message
