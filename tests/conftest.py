"""Pytest configuration and shared fixtures.

This module provides fixtures for testing the wishlist client,
including mocked HTTP sessions and sample service payloads.
"""

import json
import os
from typing import Generator
from unittest.mock import MagicMock

import pytest

from wishlist_client.api import WishlistHttpClient
from wishlist_client.config import reset_config


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Isolate each test from WISHLIST_* variables and cached config."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("WISHLIST_")}
    for key in saved:
        del os.environ[key]
    reset_config()

    yield

    for key in [k for k in os.environ if k.startswith("WISHLIST_")]:
        del os.environ[key]
    os.environ.update(saved)
    reset_config()


# ============================================================================
# HTTP Fixtures
# ============================================================================


def _make_response(status_code: int = 200, payload=None) -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if payload is None:
        response.content = b""
        response.json.side_effect = ValueError("No JSON")
    else:
        response.content = json.dumps(payload).encode()
        response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """Factory for mock responses."""
    return _make_response


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests.Session with real header storage."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(mock_session: MagicMock) -> WishlistHttpClient:
    """Create a client pointed at a local fixture server."""
    return WishlistHttpClient(
        key="aqua",
        secret="s3cr3t",
        host="http://localhost",
        port=8080,
        session=mock_session,
    )


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def wishlist_payload() -> dict:
    """Wishlist 1 as the service returns it."""
    return {
        "id_": 1,
        "user_id": 1,
        "lines": [
            {"product_id": 101, "wishlist_id": 1},
            {"product_id": 102, "wishlist_id": 1},
            {"product_id": 103, "wishlist_id": 1},
            {"product_id": 104, "wishlist_id": 1},
        ],
    }
