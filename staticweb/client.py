"""Serving the requests that arrive on one client connection."""

from __future__ import annotations

import logging
import os
import socket

from staticweb.http import (
    HttpRequest,
    HttpResponse,
    RequestError,
    construct_head,
    parse_request,
)
from staticweb.resource import UnknownTypeError, identify_type, search_resource
from staticweb.transport import recv_request, send_body, send_head

logger = logging.getLogger(__name__)


def _content_type(path: str) -> str | None:
    if not search_resource(path):
        return None
    try:
        return identify_type(path)
    except UnknownTypeError:
        return None


def prepare_response(
    request: HttpRequest, home: str | os.PathLike[str]
) -> tuple[HttpResponse, str]:
    """Work out the response head values and the file to send for request.

    A request for "/" is served index.html; a missing, unreadable or
    untyped file is answered with 404.html. Raises OSError if the chosen
    file cannot be examined.
    """
    root = os.fspath(home)
    if root.endswith("/"):
        root = root[:-1]
    path = root + request.path
    if request.path == "/":
        path += "index.html"

    response = HttpResponse()
    content_type = _content_type(path)
    if content_type is None:
        response.status = 404
        response.desc = "NOT FOUND"
        path = root + "/404.html"
    else:
        response.content_type = content_type

    response.length = os.stat(path).st_size

    if request.connection:
        response.connection = request.connection
    elif request.protocol.lower() == "http/1.0":
        response.connection = "close"
    else:
        response.connection = "keep-alive"
    return response, path


def serve_client(conn: socket.socket, home: str | os.PathLike[str]) -> int:
    """Answer requests on conn until it should close, then close it.

    Returns the number of responses sent.
    """
    served = 0
    logger.info("client handling started")
    try:
        while True:
            try:
                text = recv_request(conn)
            except OSError as exc:
                logger.info("receive failed: %s", exc)
                break
            if text is None:
                break
            logger.info("request: %s", text)
            try:
                request = parse_request(text)
            except RequestError:
                break
            try:
                response, path = prepare_response(request, home)
                send_head(conn, construct_head(response))
                send_body(conn, path)
            except OSError as exc:
                logger.info("response failed: %s", exc)
                break
            served += 1
            if response.connection.lower() == "close":
                break
    finally:
        conn.close()
        logger.info("client handling finished")
    return served