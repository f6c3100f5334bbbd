import logging

from graficoql.logging import describe_request, get_logger, sanitize_headers


def test_get_logger_defaults_to_package_logger():
    assert get_logger().name == "graficoql"
    custom = logging.getLogger("custom")
    assert get_logger(custom) is custom


def test_sanitize_headers_redacts_credentials():
    headers = {
        "Authorization": "Bearer abc",
        "cookie": "session=1",
        "Proxy-Authorization": "Basic x",
        "X-Trace": "t",
    }
    assert sanitize_headers(headers) == {
        "Authorization": "<redacted>",
        "cookie": "<redacted>",
        "Proxy-Authorization": "<redacted>",
        "X-Trace": "t",
    }


def test_describe_request():
    line = describe_request("POST", "https://example.com/graphql", {"Cookie": "c", "A": "b"})
    assert line == "POST https://example.com/graphql headers=[Cookie=<redacted>, A=b]"
