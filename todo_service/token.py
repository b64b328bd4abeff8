"""Checking the token that clients send in the user-token header."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

HEADER_NAME = "user-token"
_ACCEPTED_TOKEN = "token"


class TokenError(Exception):
    """Raised when a request's token is missing, unreadable or not authorized."""


def check_password(password: str) -> str:
    """Return the password if it is the accepted one, else raise TokenError."""
    if password == _ACCEPTED_TOKEN:
        return password
    raise TokenError("token not authorized")


def _is_visible_ascii(text: str) -> bool:
    return all(char == "\t" or " " <= char <= "~" for char in text)


def extract_header_token(headers: Mapping[str, Any]) -> str:
    """Return the user-token header value as text.

    Raises TokenError if the header is absent or is not visible ASCII.
    """
    value = headers.get(HEADER_NAME)
    if value is None:
        raise TokenError("there is no token")
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("ascii")
        except UnicodeDecodeError as error:
            raise TokenError("there was an error processing token") from error
    if not isinstance(value, str) or not _is_visible_ascii(value):
        raise TokenError("there was an error processing token")
    return value


def process_token(headers: Mapping[str, Any]) -> str:
    """Extract the token from the headers and check it; raise TokenError on failure."""
    return check_password(extract_header_token(headers))