"""Pytest fixtures for revolt_api tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from revolt_api.client import RevoltClient

FAKE_TOKEN = "test-bot-token"
FAKE_API_URL = "https://api.revolt.test"

ATTACHMENT_JSON: dict[str, Any] = {
    "_id": "A01",
    "tag": "avatars",
    "size": 2048,
    "filename": "me.png",
    "metadata": {"type": "Image", "width": 256, "height": 256},
    "content_type": "image/png",
}

USER_JSON: dict[str, Any] = {
    "_id": "01FUSER",
    "username": "alice",
    "avatar": ATTACHMENT_JSON,
    "relationship": "Friend",
    "online": True,
    "status": {"text": "busy coding", "presence": "Busy"},
}

CHANNEL_JSON: dict[str, Any] = {
    "_id": "01FCHAN",
    "channel_type": "TextChannel",
    "server": "S1",
    "name": "general",
}

MESSAGE_JSON: dict[str, Any] = {
    "_id": "01FMSG",
    "nonce": "01FNONCE",
    "channel": "01FCHAN",
    "author": "01FUSER",
    "content": "hello",
}

SERVER_JSON: dict[str, Any] = {
    "_id": "S1",
    "owner": "01FUSER",
    "name": "Test Server",
    "channels": ["01FCHAN", "01FVOICE"],
    "default_permissions": [1, 0],
}


def make_response(
    json_data: Any = None,
    status_code: int = 200,
    *,
    method: str = "GET",
    content: bytes | None = None,
) -> httpx.Response:
    """Create an httpx.Response bound to a request, as the transport would return."""
    request = httpx.Request(method, f"{FAKE_API_URL}/test")
    if content is not None:
        return httpx.Response(status_code=status_code, content=content, request=request)
    return httpx.Response(status_code=status_code, json=json_data, request=request)


@pytest.fixture
async def client() -> AsyncIterator[RevoltClient]:
    """A client pointed at a fake URL; close it after the test."""
    revolt = RevoltClient(FAKE_TOKEN, api_url=FAKE_API_URL)
    yield revolt
    await revolt.close()


@pytest.fixture
def mock_request(client: RevoltClient) -> Iterator[Callable[..., AsyncMock]]:
    """
    Factory fixture that patches the client's transport.

    Usage:
        request = mock_request(make_response({...}))
        await client.fetch_user("U1")
        request.assert_awaited_once()
    """
    patchers: list[Any] = []

    def _mock_request(response: httpx.Response | None = None, **kwargs: Any) -> AsyncMock:
        patcher = patch.object(client._http, "request", new_callable=AsyncMock, **kwargs)
        mock = patcher.start()
        if response is not None:
            mock.return_value = response
        patchers.append(patcher)
        return mock

    yield _mock_request

    for patcher in patchers:
        patcher.stop()
