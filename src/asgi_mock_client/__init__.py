# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""In-process mock client for ASGI applications.

Exercise a router, middleware stack or full framework app from tests without
binding a socket:

- ``asgi_mock_client.client`` - MockClient, the dispatcher
- ``asgi_mock_client.messages`` - HttpMethod and request construction
- ``asgi_mock_client.config`` - ClientConfig
- ``asgi_mock_client.exceptions`` - failure taxonomy
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import ASGIApp, MockClient
from .config import ClientConfig
from .exceptions import DispatchError, MalformedRequestError, MockClientError, MockClientErrorCode
from .messages import HttpMethod, build_request

try:
    __version__ = version("asgi-mock-client")
except PackageNotFoundError:
    __version__ = "0.0.0+local"


__all__ = [
    "ASGIApp",
    "ClientConfig",
    "DispatchError",
    "HttpMethod",
    "MalformedRequestError",
    "MockClient",
    "MockClientError",
    "MockClientErrorCode",
    "__version__",
    "build_request",
]
