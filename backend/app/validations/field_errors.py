"""
field_errors.py
- Purpose: Flatten pydantic error lists into [{"field", "message"}] pairs.
- Used by the RequestValidationError handler and by services validating merged payloads.
"""

from typing import Any, Iterable

# Location prefixes FastAPI adds in front of the real field path
_LOC_PREFIXES = {"body", "query", "path", "header", "cookie"}


def field_errors_from(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    out: list[dict[str, str]] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in _LOC_PREFIXES:
            loc = loc[1:]
        out.append({"field": ".".join(loc), "message": str(err.get("msg", ""))})
    return out
