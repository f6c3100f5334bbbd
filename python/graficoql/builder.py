from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from .config import Configuration, normalize_method
from .models import RequestDescriptor

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def dumps_compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def build_request(
    endpoint: str,
    config: Configuration,
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    method = normalize_method(config.method)
    # The implicit Content-Type replaces any configured spelling of it.
    headers: Dict[str, str] = {
        k: v for k, v in config.headers.items() if k.lower() != "content-type"
    }

    if method == "POST":
        headers["Content-Type"] = "application/json"
        payload: Dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        return RequestDescriptor(
            url=endpoint,
            method=method,
            headers=headers,
            body=dumps_compact(payload).encode("utf-8"),
            transport_options=config.transport_kwargs(),
        )

    headers["Content-Type"] = "text/plain"
    separator = "&" if "?" in endpoint else "?"
    url = f"{endpoint}{separator}query={encode_component(query)}"
    if variables is not None:
        url = f"{url}&variables={encode_component(dumps_compact(variables))}"
    return RequestDescriptor(
        url=url,
        method=method,
        headers=headers,
        transport_options=config.transport_kwargs(),
    )
