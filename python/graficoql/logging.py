from __future__ import annotations

import logging
from typing import Dict, Mapping

_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization"})


def get_logger(logger: logging.Logger | None = None) -> logging.Logger:
    return logger if logger is not None else logging.getLogger("graficoql")


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {
        key: "<redacted>" if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def describe_request(method: str, url: str, headers: Mapping[str, str]) -> str:
    pairs = ", ".join(f"{k}={v}" for k, v in sanitize_headers(headers).items())
    return f"{method} {url} headers=[{pairs}]"
