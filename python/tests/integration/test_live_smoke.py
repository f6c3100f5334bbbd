import logging
import os

import pytest

from graficoql import GraphQLClient, RequestFailedError


def _endpoint():
    return os.getenv("GRAFICOQL_LIVE_URL")


def _method():
    return os.getenv("GRAFICOQL_LIVE_METHOD", "POST")


@pytest.mark.asyncio
async def test_live_smoke(caplog):
    endpoint = _endpoint()
    if not endpoint:
        pytest.skip("Live endpoint not provided")

    logger = logging.getLogger("graficoql.integration")
    token = os.getenv("GRAFICOQL_LIVE_TOKEN")

    async with GraphQLClient(
        endpoint, {"method": _method(), "timeout": 30.0}, logger=logger
    ) as client:
        if token:
            client.set_header("Authorization", f"Bearer {token}")
        with caplog.at_level(logging.DEBUG):
            try:
                result = await client.request("query { __typename }")
            except RequestFailedError as exc:
                pytest.fail(f"live request failed: {exc.envelope}")

    assert result.get("data") is not None
    if token:
        assert token not in caplog.text
