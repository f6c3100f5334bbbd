from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .builder import build_request
from .classifier import classify_response, decode_body
from .config import Configuration
from .errors import TransportFailureError
from .logging import describe_request, get_logger
from .models import QueryRequest

OptionsLike = Union[Configuration, Mapping[str, Any], None]


def _configuration(options: OptionsLike) -> Configuration:
    if isinstance(options, Configuration):
        return options
    return Configuration.from_options(options)


class GraphQLClient:
    """
    Client bound to one GraphQL endpoint.

    Header setters replace the client's configuration; every request works on
    the configuration as it was when the call was made.
    """

    def __init__(
        self,
        url: str,
        options: OptionsLike = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if not url or not isinstance(url, str):
            raise ValueError("url is required")
        self._url = url
        self._config = _configuration(options)
        self._http_client = http_client
        self._owns_client = http_client is None
        self.logger = get_logger(logger)

    @property
    def url(self) -> str:
        return self._url

    @property
    def config(self) -> Configuration:
        return self._config

    def set_header(self, key: str, value: str) -> GraphQLClient:
        self._config = self._config.with_header(key, value)
        return self

    def set_headers(self, headers: Any) -> GraphQLClient:
        # Non-mapping values are ignored.
        if isinstance(headers, Mapping):
            self._config = self._config.with_headers(headers)
        return self

    async def request(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await self._send(False, query, variables, options)

    async def raw_request(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        *,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await self._send(True, query, variables, options)

    async def _send(
        self,
        raw: bool,
        query: str,
        variables: Optional[Mapping[str, Any]],
        options: Optional[Mapping[str, Any]],
    ) -> Dict[str, Any]:
        config = self._config.merged(options)
        query_request = QueryRequest(query=query, variables=variables)
        descriptor = build_request(self._url, config, query, variables)

        self.logger.debug(
            "graphql request %s",
            describe_request(descriptor.method, self._url, descriptor.headers),
        )
        try:
            response = await self._get_http_client().request(
                descriptor.method,
                descriptor.url,
                headers=descriptor.headers,
                content=descriptor.body,
                **descriptor.transport_options,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportFailureError(exc, query_request.as_dict()) from exc

        self.logger.debug("graphql response status=%s", response.status_code)
        body = decode_body(
            response.status_code,
            response.is_success,
            response.headers,
            response.text,
            query_request,
        )
        return classify_response(
            response.status_code,
            response.is_success,
            response.headers,
            body,
            raw,
            query_request,
        )

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(follow_redirects=True)
        return self._http_client

    async def aclose(self) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def create(
    url: str,
    options: OptionsLike = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    logger: Optional[logging.Logger] = None,
) -> GraphQLClient:
    return GraphQLClient(url, options, http_client=http_client, logger=logger)


async def request(
    url: str,
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    async with GraphQLClient(url, http_client=http_client) as client:
        return await client.request(query, variables)


async def raw_request(
    url: str,
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    async with GraphQLClient(url, http_client=http_client) as client:
        return await client.raw_request(query, variables)
