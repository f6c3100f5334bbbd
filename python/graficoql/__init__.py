from .builder import build_request
from .classifier import classify_response, decode_body
from .client import GraphQLClient, create, raw_request, request
from .config import Configuration, merge_options
from .errors import (
    TRANSPORT_FAILURE_STATUS,
    BodyDecodeError,
    GraphQLError,
    GraphQLFailureError,
    RequestFailedError,
    SerializationError,
    TransportFailureError,
    UnsupportedMethodError,
)
from .models import QueryRequest, RequestDescriptor

__all__ = [
    "GraphQLClient",
    "create",
    "request",
    "raw_request",
    "Configuration",
    "merge_options",
    "build_request",
    "decode_body",
    "classify_response",
    "QueryRequest",
    "RequestDescriptor",
    "TRANSPORT_FAILURE_STATUS",
    "RequestFailedError",
    "TransportFailureError",
    "GraphQLFailureError",
    "GraphQLError",
    "BodyDecodeError",
    "SerializationError",
    "UnsupportedMethodError",
]
