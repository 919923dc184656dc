"""
Request context helpers.

We keep a small context (request_id, company_id) in ContextVars.
The HTTP middleware and the services set these values so every log line
emitted while handling a request can be correlated.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_company_id: ContextVar[Optional[str]] = ContextVar("company_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    company_id: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if company_id is not None:
        _company_id.set(company_id)


def clear_context() -> None:
    _request_id.set(None)
    _company_id.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    cid = _company_id.get()

    if rid:
        ctx["request_id"] = rid
    if cid:
        ctx["company_id"] = cid
    return ctx
