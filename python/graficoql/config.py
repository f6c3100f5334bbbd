from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence

from .errors import UnsupportedMethodError

SUPPORTED_METHODS = ("GET", "POST")
DEFAULT_METHOD = "POST"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_composite(value: Any) -> bool:
    return isinstance(value, Mapping) or _is_sequence(value)


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    if _is_sequence(value):
        return [_copy(v) for v in value]
    return value


def merge_options(
    target: Optional[Mapping[str, Any]],
    source: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Deep-merge ``source`` over ``target`` and return the result as a new dict.

    Scalars from ``source`` win, sequences are concatenated (target first),
    mappings merge recursively. A composite target value facing a source value
    of another shape is kept as is. Neither argument is modified.
    """
    merged: Dict[str, Any] = _copy(target or {})
    for key, value in (source or {}).items():
        current = merged.get(key)
        if key not in merged or not _is_composite(current):
            merged[key] = _copy(value)
        elif _is_sequence(current) and _is_sequence(value):
            merged[key] = current + _copy(value)
        elif isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value)
    return merged


def normalize_method(method: Any) -> str:
    candidate = method.upper() if isinstance(method, str) else None
    if candidate not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method)
    return candidate


@dataclass(frozen=True)
class Configuration:
    method: str = DEFAULT_METHOD
    headers: Mapping[str, str] = field(default_factory=dict)
    transport_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", normalize_method(self.method))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        object.__setattr__(
            self, "transport_options", MappingProxyType(_copy(self.transport_options))
        )

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> Configuration:
        return cls().merged(options)

    def as_options(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "headers": dict(self.headers),
            "transport_options": _copy(self.transport_options),
        }

    def merged(self, options: Optional[Mapping[str, Any]]) -> Configuration:
        """
        Return a new configuration with ``options`` merged over this one.

        ``options`` is the flat mapping callers hand to ``create``: ``method``
        and ``headers`` are configuration keys, ``transport_options`` is merged
        as a block, and every other key is a transport option.
        """
        if not options:
            return self
        overrides: Dict[str, Any] = {"transport_options": {}}
        for key, value in options.items():
            if key in ("method", "headers"):
                overrides[key] = value
            elif key == "transport_options" and isinstance(value, Mapping):
                overrides["transport_options"] = merge_options(
                    overrides["transport_options"], value
                )
            else:
                overrides["transport_options"][key] = value
        merged = merge_options(self.as_options(), overrides)
        return Configuration(
            method=merged["method"],
            headers=merged["headers"],
            transport_options=merged["transport_options"],
        )

    def with_header(self, key: str, value: str) -> Configuration:
        headers = dict(self.headers)
        headers[key] = value
        return Configuration(self.method, headers, self.transport_options)

    def with_headers(self, headers: Mapping[str, str]) -> Configuration:
        return Configuration(self.method, dict(headers), self.transport_options)

    def transport_kwargs(self) -> Dict[str, Any]:
        return _copy(self.transport_options)
