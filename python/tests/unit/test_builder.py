import json

import pytest

from graficoql.builder import build_request, encode_component
from graficoql.config import Configuration
from graficoql.errors import UnsupportedMethodError

URL = "https://example.com/graphql"


def test_post_body_with_variables_is_compact_json():
    descriptor = build_request(URL, Configuration(), "{q}", {"v": 1})

    assert descriptor.method == "POST"
    assert descriptor.url == URL
    assert descriptor.body == b'{"query":"{q}","variables":{"v":1}}'
    assert descriptor.headers["Content-Type"] == "application/json"


def test_post_body_omits_variables_when_not_supplied():
    descriptor = build_request(URL, Configuration(), "{q}")

    assert descriptor.body == b'{"query":"{q}"}'
    assert "variables" not in json.loads(descriptor.body)


def test_post_keeps_empty_variables():
    descriptor = build_request(URL, Configuration(), "{q}", {})
    assert json.loads(descriptor.body) == {"query": "{q}", "variables": {}}


def test_post_overrides_configured_content_type():
    config = Configuration(headers={"Content-Type": "text/xml", "X-Trace": "1"})
    descriptor = build_request(URL, config, "{q}")

    assert descriptor.headers == {"Content-Type": "application/json", "X-Trace": "1"}
    assert config.headers["Content-Type"] == "text/xml"


@pytest.mark.parametrize("method", ["POST", "GET"])
def test_configured_content_type_in_any_case_is_replaced(method):
    config = Configuration(method=method, headers={"content-type": "text/xml", "X-Trace": "1"})
    descriptor = build_request(URL, config, "{q}")

    content_types = [k for k in descriptor.headers if k.lower() == "content-type"]
    assert content_types == ["Content-Type"]
    assert descriptor.headers["X-Trace"] == "1"


def test_post_body_keeps_non_ascii_text():
    descriptor = build_request(URL, Configuration(), "{ hello(name: \"Grüße\") }")
    assert "Grüße" in descriptor.body.decode("utf-8")


def test_get_appends_query_with_question_mark():
    descriptor = build_request(URL, Configuration(method="GET"), "{q}")

    assert descriptor.method == "GET"
    assert descriptor.url == URL + "?query=%7Bq%7D"
    assert descriptor.body is None
    assert descriptor.headers["Content-Type"] == "text/plain"


def test_get_uses_ampersand_when_endpoint_has_query_string():
    descriptor = build_request(URL + "?a=b", Configuration(method="get"), "{q}")
    assert descriptor.url == URL + "?a=b&query=%7Bq%7D"


def test_get_appends_variables_as_json():
    descriptor = build_request(URL, Configuration(method="GET"), "{q}", {"v": 1})
    assert descriptor.url == (
        URL + "?query=%7Bq%7D&variables=" + encode_component('{"v":1}')
    )
    assert descriptor.url.endswith("&variables=%7B%22v%22%3A1%7D")


def test_encode_component_matches_uri_component_rules():
    assert encode_component("a b&c=d") == "a%20b%26c%3Dd"
    assert encode_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_component("é") == "%C3%A9"


def test_transport_options_are_forwarded():
    config = Configuration.from_options({"timeout": 2.5})
    descriptor = build_request(URL, config, "{q}")
    assert descriptor.transport_options == {"timeout": 2.5}


def test_unsupported_method_is_rejected():
    config = Configuration()
    object.__setattr__(config, "method", "PUT")
    with pytest.raises(UnsupportedMethodError):
        build_request(URL, config, "{q}")


def test_transport_options_are_copied_per_request():
    config = Configuration.from_options({"params": {"tenant": "acme"}})
    descriptor = build_request(URL, config, "{q}")
    descriptor.transport_options["params"]["tenant"] = "other"

    assert config.transport_options["params"] == {"tenant": "acme"}
