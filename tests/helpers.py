# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Apps shared across the test suite."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route, Router


async def status(request: Request) -> Response:
    return PlainTextResponse("pong")


async def created(request: Request) -> Response:
    return Response(status_code=201)


async def echo(request: Request) -> Response:
    return Response(await request.body())


async def not_acceptable(request: Request) -> Response:
    return Response(status_code=406)


async def items(request: Request) -> Response:
    return JSONResponse({"limit": request.query_params.get("limit")}, headers={"X-Items": "yes"})


async def whoami(request: Request) -> Response:
    client = request.client
    return JSONResponse(
        {
            "url": str(request.url),
            "client": client.host if client else None,
            "root_path": request.scope.get("root_path", ""),
        }
    )


async def boom(request: Request) -> Response:
    raise RuntimeError("handler exploded")


def build_router() -> Router:
    return Router(
        routes=[
            Route("/status", status, methods=["GET"]),
            Route("/ping", created, methods=["POST"]),
            Route("/echo", echo, methods=["PUT"]),
            Route("/x", not_acceptable, methods=["DELETE"]),
            Route("/items", items, methods=["GET"]),
            Route("/whoami", whoami, methods=["GET"]),
            Route("/boom", boom, methods=["GET"]),
        ]
    )


class CountingApp:
    """ASGI wrapper that records every http scope it receives."""

    def __init__(self, app: Any) -> None:
        self.app = app
        self.paths: list[str] = []

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        if scope["type"] == "http":
            self.paths.append(scope["path"])
        await self.app(scope, receive, send)
