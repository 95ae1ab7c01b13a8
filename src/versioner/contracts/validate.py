from __future__ import annotations

from .schema.validate import schema_errors, validate

__all__ = ["schema_errors", "validate"]
