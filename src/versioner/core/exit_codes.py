from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_FORMAT = 10
ERR_VALIDATION = 11
ERR_INTERNAL = 99
