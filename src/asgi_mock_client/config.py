# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Client configuration."""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ConfigDict, field_validator

from .messages import DEFAULT_BASE_URL


class ClientConfig(BaseModel):
    """Tunable parameters for MockClient.

    All fields have sane defaults. Override only what you need.

    Example:
        >>> from asgi_mock_client import ClientConfig, MockClient
        >>>
        >>> config = ClientConfig(base_url="https://api.example.test", raise_app_exceptions=False)
        >>> client = MockClient(app, config=config)

    Attributes:
        base_url: Origin that relative request targets resolve against
        root_path: ASGI ``root_path`` for apps mounted under a prefix
        client: ASGI ``client`` (host, port) reported to the app
        raise_app_exceptions: Surface exceptions escaping the app as
            DispatchError; when False the app's failure becomes a 500 response
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = DEFAULT_BASE_URL
    root_path: str = ""
    client: tuple[str, int] = ("127.0.0.1", 123)
    raise_app_exceptions: bool = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) origin with no query or fragment."""
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as exc:
            raise ValueError(f"base_url is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("base_url must be an absolute http or https URL")
        if url.query or url.fragment:
            raise ValueError("base_url must not carry a query string or fragment")
        return v

    @field_validator("root_path")
    @classmethod
    def validate_root_path(cls, v: str) -> str:
        """Validate root_path is empty or a '/'-prefixed path without trailing slash."""
        if v and (not v.startswith("/") or v.endswith("/")):
            raise ValueError("root_path must be empty or start with '/' and not end with '/'")
        return v

    @field_validator("client")
    @classmethod
    def validate_client(cls, v: tuple[str, int]) -> tuple[str, int]:
        """Validate the client port is in range."""
        host, port = v
        if not 0 <= port <= 65535:
            raise ValueError(f"client port out of range: {port}")
        return host, port


__all__ = ["ClientConfig"]
