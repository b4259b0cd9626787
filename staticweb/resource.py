"""Locating served files and working out their content types."""

from __future__ import annotations

import logging
import os

from staticweb.mime import mime_type

logger = logging.getLogger(__name__)


class UnknownTypeError(ValueError):
    """Raised when a path's extension cannot be mapped to a content type."""


def search_resource(path: str | os.PathLike[str]) -> bool:
    """Return True if the file at path exists and is readable."""
    return os.access(path, os.R_OK)


def identify_type(path: str | os.PathLike[str]) -> str:
    """Return the content type for path, judged by the text from its last dot.

    Raises UnknownTypeError if the path has no dot or the suffix is unknown.
    """
    text = os.fspath(path)
    dot = text.rfind(".")
    if dot == -1:
        logger.debug("no file extension in %s", text)
        raise UnknownTypeError(f"no file extension in {text!r}")
    suffix = text[dot:]
    content_type = mime_type(suffix)
    if content_type is None:
        logger.debug("unrecognised extension %s", suffix)
        raise UnknownTypeError(f"unrecognised extension {suffix!r}")
    return content_type