"""JSON rendering for `--json` command payloads.

Keys are sorted so payloads diff cleanly between runs. Paths and other
non-JSON values are written as strings; NaN and infinities are refused.
"""

from __future__ import annotations

import json
from typing import Any


def dumps_json(payload: Any, pretty: bool = False) -> str:
    indent = 2 if pretty else None
    return json.dumps(payload, indent=indent, sort_keys=True, default=str, allow_nan=False)
