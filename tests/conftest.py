# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Pytest fixtures for the mock client tests."""

from __future__ import annotations

import pytest
from starlette.routing import Router

from tests.helpers import CountingApp, build_router


@pytest.fixture(params=["asyncio", "trio"])
def anyio_backend(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture
def router() -> Router:
    return build_router()


@pytest.fixture
def counting_app(router: Router) -> CountingApp:
    return CountingApp(router)
