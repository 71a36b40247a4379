# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Request construction for the mock client.

Requests and responses are plain ``httpx`` values; this module only knows how
to turn a method and a path into an ``httpx.Request`` aimed at the test origin.

Example:
    >>> req = build_request(HttpMethod.PUT, "/echo", content=b"data")
    >>> str(req.url)
    'http://testserver/echo'
"""

from __future__ import annotations

from enum import Enum

import httpx

from .exceptions import MalformedRequestError

DEFAULT_BASE_URL = "http://testserver"


class HttpMethod(str, Enum):
    """HTTP methods for test requests."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


def _merge_url(base_url: httpx.URL, target: str) -> httpx.URL:
    """Resolve ``target`` against ``base_url``.

    Fragments are rejected since they never reach the app. Absolute URLs
    are returned unchanged. Relative targets must be origin-relative (start
    with a single ``/``) and are appended to the base path.
    """
    try:
        url = httpx.URL(target)
    except (httpx.InvalidURL, TypeError) as exc:
        raise MalformedRequestError(f"invalid request target {target!r}: {exc}", target=target) from exc

    if url.fragment:
        raise MalformedRequestError(f"request target must not carry a fragment: {target!r}", target=target)

    if url.is_absolute_url:
        return url

    if url.host or not url.raw_path.startswith(b"/"):
        raise MalformedRequestError(f"request target must start with '/': {target!r}", target=target)

    # Same merge rule as httpx.AsyncClient: base path keeps a trailing slash
    base_path = base_url.raw_path if base_url.raw_path.endswith(b"/") else base_url.raw_path + b"/"
    return base_url.copy_with(raw_path=base_path + url.raw_path.lstrip(b"/"))


def build_request(
    method: HttpMethod | str,
    path: str,
    *,
    base_url: httpx.URL | str = DEFAULT_BASE_URL,
    content: bytes | str | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Request:
    """Build an ``httpx.Request`` for an in-process call.

    Args:
        method: HTTP method, enum member or string
        path: Origin-relative target such as ``/items?limit=5``, or an absolute URL
        base_url: Origin that relative targets resolve against
        content: Request body; ``None`` sends an empty body
        headers: Extra request headers

    Returns:
        The constructed request

    Raises:
        MalformedRequestError: If ``path`` is not a usable request target
    """
    verb = method.value if isinstance(method, HttpMethod) else str(method).upper()
    url = _merge_url(httpx.URL(base_url), path)
    try:
        return httpx.Request(verb, url, content=content, headers=headers)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise MalformedRequestError(f"cannot build {verb} request for {path!r}: {exc}", target=path) from exc


__all__ = ["DEFAULT_BASE_URL", "HttpMethod", "build_request"]
