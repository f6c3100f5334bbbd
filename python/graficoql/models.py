from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class QueryRequest:
    query: str
    variables: Optional[Mapping[str, Any]] = None

    def as_dict(self) -> Dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


@dataclass(frozen=True)
class RequestDescriptor:
    url: str
    method: str
    headers: Dict[str, str]
    body: Optional[bytes] = None
    transport_options: Dict[str, Any] = field(default_factory=dict)
