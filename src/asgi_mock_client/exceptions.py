# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised by the mock client.

Both kinds are hard failures: they are never retried or converted into a
response. HTTP error statuses produced by the app (4xx/5xx) are ordinary
responses and never show up here.
"""

from __future__ import annotations

from enum import Enum


class MockClientErrorCode(str, Enum):
    """Error codes for mock client failures.

    MALFORMED_REQUEST: the request could not be built (bad path or URL).
    DISPATCH_FAILED: calling into the app failed; not an HTTP error status.
    """

    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    DISPATCH_FAILED = "DISPATCH_FAILED"


class MockClientError(Exception):
    """Base exception for mock client failures.

    The triggering exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, code: str = MockClientErrorCode.DISPATCH_FAILED) -> None:
        super().__init__(message)
        self.code = code


class MalformedRequestError(MockClientError):
    """The request target could not be turned into a request.

    Attributes:
        target: The path or URL that was rejected
    """

    def __init__(self, message: str, *, target: object) -> None:
        super().__init__(message, code=MockClientErrorCode.MALFORMED_REQUEST)
        self.target = target


class DispatchError(MockClientError):
    """The app could not be called, or failed while handling the request.

    Attributes:
        method: HTTP method of the request being dispatched
        url: Full URL of the request being dispatched
    """

    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message, code=MockClientErrorCode.DISPATCH_FAILED)
        self.method = method
        self.url = url


__all__ = ["DispatchError", "MalformedRequestError", "MockClientError", "MockClientErrorCode"]
