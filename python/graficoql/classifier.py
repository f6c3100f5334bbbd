from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from .errors import BodyDecodeError, GraphQLFailureError
from .models import QueryRequest


def decode_body(
    status: int,
    ok: bool,
    headers: Mapping[str, str],
    text: str,
    request: QueryRequest,
) -> Any:
    """
    Decode a response body.

    JSON content types are parsed strictly. Other bodies are parsed as JSON
    too unless they are blank, in which case the text itself is returned. A
    body that does not parse raises ``BodyDecodeError`` for success statuses;
    for failed statuses the raw text is returned so the failure keeps it.
    """
    content_type = headers.get("Content-Type") or ""
    if not content_type.startswith("application/json") and not text.strip():
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        if not ok:
            return text
        raise BodyDecodeError(status, text[:500], request.as_dict()) from exc


def _is_success(ok: bool, body: Any) -> bool:
    if not ok or not isinstance(body, Mapping):
        return False
    return body.get("data") is not None or body.get("errors") is not None


def _interpret(body: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    if "data" in body:
        result["data"] = body["data"]
    if body.get("errors") is not None:
        result["errors"] = body["errors"]
    if isinstance(body.get("extensions"), Mapping):
        result["extensions"] = body["extensions"]
    return result


def _failure_body(body: Any) -> Dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    return {"error": body}


def classify_response(
    status: int,
    ok: bool,
    headers: Any,
    body: Any,
    raw: bool,
    request: QueryRequest,
) -> Dict[str, Any]:
    """
    Shape a decoded response into the value returned to the caller.

    Successful calls (``ok`` and a ``data`` or ``errors`` entry) return the
    interpreted ``{data, errors, extensions}`` subset, or in raw mode the whole
    body plus ``status`` and ``headers``. Anything else raises
    ``GraphQLFailureError``.
    """
    if _is_success(ok, body):
        if not raw:
            return _interpret(body)
        result = dict(body)
        result["headers"] = headers
        result["status"] = status
        return result

    response = _failure_body(body)
    response["status"] = status
    if raw:
        response["headers"] = headers
    raise GraphQLFailureError(response, request.as_dict())
