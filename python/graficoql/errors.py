from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

TRANSPORT_FAILURE_STATUS = 900


class UnsupportedMethodError(ValueError):
    def __init__(self, method: Any):
        super().__init__(f"Invalid method ({method}). Use method GET or POST!")
        self.method = method


class RequestFailedError(Exception):
    """
    Base for every failed request. ``response`` holds what came back (always
    with a ``status``), ``request`` holds the query and variables that were sent.
    """

    def __init__(
        self,
        response: Dict[str, Any],
        request: Mapping[str, Any],
        message: Optional[str] = None,
    ):
        status = response.get("status")
        super().__init__(message or f"GraphQL request failed with status {status}")
        self.response = response
        self.request = dict(request)

    @property
    def status(self) -> Optional[int]:
        return self.response.get("status")

    @property
    def envelope(self) -> Dict[str, Any]:
        return {"response": self.response, "request": self.request}


class TransportFailureError(RequestFailedError):
    def __init__(self, error: BaseException, request: Mapping[str, Any]):
        super().__init__(
            {"status": TRANSPORT_FAILURE_STATUS, "error": error},
            request,
            message=f"Transport failure: {error}",
        )
        self.error = error


class GraphQLFailureError(RequestFailedError):
    pass


GraphQLError = GraphQLFailureError


class BodyDecodeError(RequestFailedError):
    def __init__(self, status: int, body_snippet: str, request: Mapping[str, Any]):
        super().__init__(
            {"status": status, "error": body_snippet},
            request,
            message=f"Unable to decode response body (HTTP {status})",
        )
        self.body_snippet = body_snippet


SerializationError = BodyDecodeError
