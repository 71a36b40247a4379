# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""In-process client for ASGI applications.

MockClient calls an ASGI app directly through ``httpx.ASGITransport``: no
socket, no server, no connection pool. Each call is a single await on the
app and the resulting ``httpx.Response`` is handed back untouched.

Example:
    >>> from starlette.responses import PlainTextResponse
    >>> from starlette.routing import Route, Router
    >>>
    >>> async def status(request):
    ...     return PlainTextResponse("pong")
    >>>
    >>> client = MockClient(Router(routes=[Route("/status", status)]))
    >>> resp = await client.get("/status")
    >>> resp.status_code, (await resp.aread())
    (200, b'pong')

Failures:
    - MalformedRequestError: the target could not be built into a request.
      The app is never called.
    - DispatchError: the app could not be called or blew up mid-request.
    Both chain the original exception. A 4xx/5xx response is not a failure.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

import httpx

from .config import ClientConfig
from .exceptions import DispatchError, MalformedRequestError
from .messages import HttpMethod, build_request
from .utils import get_logger

_logger = get_logger("asgi_mock_client.client")

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class MockClient:
    """Drive an ASGI app in-process for test assertions.

    The client owns one app for its whole lifetime. Calls are sequential;
    overlapping awaits through the same client are not supported.
    """

    def __init__(self, app: ASGIApp, *, config: ClientConfig | None = None) -> None:
        """Wrap an ASGI app.

        Args:
            app: The application (router, middleware stack, framework app)
            config: Client configuration; defaults to ClientConfig()
        """
        self._app = app
        self._config = config or ClientConfig()
        self._transport = httpx.ASGITransport(
            app=app,
            raise_app_exceptions=self._config.raise_app_exceptions,
            root_path=self._config.root_path,
            client=self._config.client,
        )

    @property
    def app(self) -> ASGIApp:
        """The application requests are dispatched to."""
        return self._app

    @property
    def config(self) -> ClientConfig:
        """Effective client configuration."""
        return self._config

    def build_request(
        self,
        method: HttpMethod | str,
        path: str,
        *,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Build a request aimed at this client's base URL.

        Raises:
            MalformedRequestError: If ``path`` is not a usable request target
        """
        try:
            return build_request(method, path, base_url=self._config.base_url, content=content, headers=headers)
        except MalformedRequestError as exc:
            _logger.warning(
                "malformed request",
                extra={"event": "request.malformed", "target": repr(path), "error": str(exc)},
            )
            raise

    async def get(self, path: str) -> httpx.Response:
        """GET ``path`` with an empty body.

        Args:
            path: Origin-relative target (``/status``, ``/items?limit=5``) or absolute URL

        Returns:
            The app's response

        Raises:
            MalformedRequestError: If ``path`` is invalid; the app is not called
            DispatchError: If calling the app fails
        """
        return await self.request(self.build_request(HttpMethod.GET, path))

    async def request(self, req: httpx.Request) -> httpx.Response:
        """Dispatch a fully built request to the app.

        The response is returned exactly as produced, with ``response.request``
        set to ``req``; its body is read with ``await response.aread()``.

        Raises:
            DispatchError: If calling the app fails
        """
        method = req.method
        url = str(req.url)
        _logger.debug("dispatching request", extra={"event": "dispatch.start", "method": method, "url": url})

        try:
            response = await self._transport.handle_async_request(req)
        except Exception as exc:
            _logger.warning(
                "dispatch failed",
                extra={"event": "dispatch.error", "method": method, "url": url, "error": repr(exc)},
            )
            raise DispatchError(f"dispatch of {method} {url} failed: {exc!r}", method=method, url=url) from exc

        # Link back to the request as httpx.AsyncClient does; status, headers and body are untouched
        response.request = req
        _logger.debug(
            "dispatch complete",
            extra={"event": "dispatch.complete", "method": method, "url": url, "status": response.status_code},
        )
        return response


__all__ = ["ASGIApp", "MockClient"]
