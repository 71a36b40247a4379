# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Tests for the mock client error taxonomy."""

from __future__ import annotations

import pytest

from asgi_mock_client.exceptions import DispatchError, MalformedRequestError, MockClientError, MockClientErrorCode


def test_codes_are_string_enum():
    assert MockClientErrorCode.MALFORMED_REQUEST == "MALFORMED_REQUEST"
    assert MockClientErrorCode.DISPATCH_FAILED == "DISPATCH_FAILED"


def test_malformed_request_error():
    err = MalformedRequestError("bad target", target="nope")
    assert isinstance(err, MockClientError)
    assert str(err) == "bad target"
    assert err.code == MockClientErrorCode.MALFORMED_REQUEST
    assert err.target == "nope"


def test_dispatch_error():
    err = DispatchError("boom", method="GET", url="http://testserver/x")
    assert isinstance(err, MockClientError)
    assert err.code == MockClientErrorCode.DISPATCH_FAILED
    assert err.method == "GET"
    assert err.url == "http://testserver/x"


def test_base_error_catches_both():
    for err in (MalformedRequestError("a", target="x"), DispatchError("b", method="GET", url="/")):
        with pytest.raises(MockClientError):
            raise err
