from datetime import datetime, timedelta, timezone

import pytest

from staticweb.http import (
    HttpRequest,
    HttpResponse,
    RequestError,
    construct_head,
    parse_request,
)

SAMPLE = (
    "GET /common/startup_scripts.js HTTP/1.1\r\n"
    "Host: 192.168.137.25\r\n"
    "User-Agent: Mozilla/5.0\r\n"
    "Accept: text/html\r\n"
    "Connection: keep-alive\r\n"
    "Referer: http://192/168.137.25/index.html\r\n\r\n"
)


def test_parse_sample_request():
    assert parse_request(SAMPLE) == HttpRequest(
        "GET", "/common/startup_scripts.js", "HTTP/1.1", "keep-alive"
    )


def test_parse_without_connection_header():
    request = parse_request("GET / HTTP/1.0\r\nHost: example.com\r\n\r\n")
    assert request.connection == ""
    assert request.protocol == "HTTP/1.0"
    assert request.path == "/"


def test_parse_is_case_insensitive():
    request = parse_request("get /a.html http/1.1\r\nCONNECTION: close\r\n\r\n")
    assert request.method == "get"
    assert request.connection == "close"


def test_parse_rejects_other_methods():
    with pytest.raises(RequestError):
        parse_request("POST /form HTTP/1.1\r\n\r\n")


def test_parse_rejects_other_protocols():
    with pytest.raises(RequestError):
        parse_request("GET / HTTP/2.0\r\n\r\n")


def test_parse_rejects_empty_request():
    with pytest.raises(RequestError):
        parse_request("")


def test_request_error_is_value_error():
    with pytest.raises(ValueError):
        parse_request("DELETE / HTTP/1.1\r\n\r\n")


def test_construct_head_lines():
    response = HttpResponse(
        content_type="application/x-javascript",
        length=12311,
        connection="keep-alive",
    )
    moment = datetime(2023, 3, 20, 11, 40, 41, tzinfo=timezone.utc)
    head = construct_head(response, moment)
    assert head.startswith("HTTP/1.1 200 OK\r\n")
    assert "Date: Mon 20 Mar 2023 11:40:41\r\n" in head
    assert "Content-Type: application/x-javascript\r\n" in head
    assert "Content-Length: 12311\r\n" in head
    assert head.endswith("Connection: keep-alive\r\n\r\n")


def test_construct_head_converts_to_utc():
    aware = datetime(2023, 3, 20, 19, 40, 41, tzinfo=timezone(timedelta(hours=8)))
    naive = datetime(2023, 3, 20, 11, 40, 41)
    response = HttpResponse(status=404, desc="NOT FOUND", connection="close")
    assert construct_head(response, aware) == construct_head(response, naive)


def test_construct_head_status_line_and_line_count():
    response = HttpResponse(status=404, desc="NOT FOUND", length=5, connection="close")
    head = construct_head(response)
    lines = head.split("\r\n")
    assert lines[0] == "HTTP/1.1 404 NOT FOUND"
    assert lines[-2:] == ["", ""]
    assert len(lines) == 8