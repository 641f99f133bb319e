from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def _serialize(obj: Any) -> Any:
    """Convert *obj* to a JSON-friendly structure.

    * :class:`pydantic.BaseModel` instances are dumped in JSON mode, so enum
      members become their string values.
    * Lists, tuples and dicts are recursed.
    * Everything else is returned as-is (``json.dumps`` handles the rest via
      *default=str*).
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): _serialize(v) for k, v in obj.items()}
    return obj


def _envelope(*, ok: bool, command: str, key: str, payload: Any) -> str:
    envelope: dict[str, Any] = {
        "ok": ok,
        "command": command,
        key: payload,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False, default=str)


def format_json_response(*, data: Any, command: str) -> str:
    """Return a JSON envelope for a successful response.

    The envelope has the shape::

        {
          "ok": true,
          "command": "<command>",
          "data": <serialised payload>,
          "timestamp": "<ISO-8601 UTC>"
        }
    """
    return _envelope(ok=True, command=command, key="data", payload=_serialize(data))


def format_json_error(
    *,
    code: str,
    message: str,
    command: str,
    **extra: Any,
) -> str:
    """Return a JSON envelope for an error response.

    ``"data"`` is replaced by ``"error": {"code": ..., "message": ..., **extra}``
    and ``"ok"`` is ``false``.
    """
    error_body: dict[str, Any] = {"code": code, "message": message, **_serialize(extra)}
    return _envelope(ok=False, command=command, key="error", payload=error_body)
