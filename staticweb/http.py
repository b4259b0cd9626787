"""Parsing of HTTP requests and construction of response heads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

SERVER_NAME = "staticweb"

_SUPPORTED_PROTOCOLS = ("http/1.1", "http/1.0")
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class RequestError(ValueError):
    """Raised when a request uses an unsupported method or protocol."""


@dataclass
class HttpRequest:
    """The parts of an HTTP request the server acts on."""

    method: str
    path: str
    protocol: str
    connection: str = ""


@dataclass
class HttpResponse:
    """The values that make up an HTTP response head."""

    protocol: str = "HTTP/1.1"
    status: int = 200
    desc: str = "OK"
    content_type: str = "text/html"
    length: int = 0
    connection: str = ""


def parse_request(text: str) -> HttpRequest:
    """Parse the request line and Connection header of a GET request.

    Raises RequestError unless the method is GET and the protocol is
    HTTP/1.0 or HTTP/1.1 (both compared without regard to case).
    """
    tokens = text.split(maxsplit=3)[:3]
    tokens += [""] * (3 - len(tokens))
    method, path, protocol = tokens

    connection = ""
    found = text.lower().find("connection")
    if found != -1:
        words = text[found:].split(maxsplit=2)
        if len(words) > 1:
            connection = words[1]

    request = HttpRequest(method, path, protocol, connection)
    logger.info("[%s][%s][%s][%s]", method, path, protocol, connection)

    if method.lower() != "get":
        logger.info("invalid method")
        raise RequestError(f"unsupported method {method!r}")
    if protocol.lower() not in _SUPPORTED_PROTOCOLS:
        logger.info("invalid protocol version")
        raise RequestError(f"unsupported protocol {protocol!r}")
    return request


def _format_date(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return (
        f"{_DAYS[moment.weekday()]} {moment.day:02d} "
        f"{_MONTHS[moment.month - 1]} {moment.year:04d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def construct_head(response: HttpResponse, now: datetime | None = None) -> str:
    """Return the response head, ending with the blank line.

    The Date header shows now in UTC; the current time is used when now
    is None, and a naive datetime is taken to be UTC already.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return (
        f"{response.protocol} {response.status} {response.desc}\r\n"
        f"Server: {SERVER_NAME}\r\n"
        f"Date: {_format_date(now)}\r\n"
        f"Content-Type: {response.content_type}\r\n"
        f"Content-Length: {response.length}\r\n"
        f"Connection: {response.connection}\r\n\r\n"
    )