"""Revolt REST API client."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError
from ulid import ULID

from revolt_api.constants import (
    API_CHANNEL,
    API_CHANNEL_DEFAULT_PERMISSIONS,
    API_CHANNEL_INVITES,
    API_CHANNEL_MESSAGE,
    API_CHANNEL_MESSAGES,
    API_CHANNEL_PERMISSIONS,
    API_SERVER,
    API_SERVER_MEMBER,
    API_URL,
    API_USER,
    API_USER_BLOCK,
    API_USER_DEFAULT_AVATAR,
    API_USER_DM,
    API_USER_DMS,
    API_USER_FRIEND,
    API_USER_ME,
    API_USER_MUTUAL,
    API_USER_PROFILE,
    API_USER_RELATIONSHIP,
    API_USER_RELATIONSHIPS,
    BOT_TOKEN_HEADER,
    REQUEST_TIMEOUT,
    SESSION_TOKEN_HEADER,
    HttpMethod,
)
from revolt_api.errors import CodecError, CredentialError, TransportError
from revolt_api.models import (
    Channel,
    EditChannel,
    EditMessage,
    EditUser,
    Invite,
    Member,
    Message,
    Messages,
    Profile,
    Relationship,
    RemoveChannelField,
    RemoveUserField,
    Reply,
    SearchSort,
    SendMessage,
    Server,
    SetPermissions,
    Status,
    User,
)

if TYPE_CHECKING:
    from revolt_api.config import Config

logger = logging.getLogger(__name__)

T = TypeVar("T")


@functools.cache
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def _validate_token(token: str) -> None:
    """Reject tokens that cannot be sent as a header value (visible ASCII and tab only)."""
    for char in token:
        if char != "\t" and not " " <= char <= "~":
            raise CredentialError(
                f"Token contains a character not allowed in an HTTP header: {char!r}"
            )
    # HTTP/1.1 forbids leading or trailing whitespace in a field value
    if token[:1] in (" ", "\t") or token[-1:] in (" ", "\t"):
        raise CredentialError("Token has leading or trailing whitespace")


def _segment(value: str) -> str:
    """Percent-encode a path argument so it stays a single URL path segment."""
    if value in (".", ".."):
        return value.replace(".", "%2E")
    return quote(value, safe="")


def _path(template: str, **params: str) -> str:
    """Fill an endpoint path template, encoding each argument as one segment."""
    return template.format(**{name: _segment(value) for name, value in params.items()})


def _provided(**fields: Any) -> dict[str, Any]:
    """Keep only the arguments the caller actually passed."""
    return {name: value for name, value in fields.items() if value is not None}


def _decode(response: httpx.Response, schema: type[T]) -> T:
    """Parse a response body into ``schema``, raising CodecError on mismatch."""
    try:
        return _adapter(schema).validate_json(response.content)
    except ValidationError as e:
        raise CodecError(
            f"Unexpected response body from {response.request.method} {response.request.url}: {e}"
        ) from e


class RevoltClient:
    """Async client for the Revolt REST API.

    Every method performs exactly one HTTP request and holds no state between
    calls, so a single client can serve any number of concurrent calls.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = API_URL,
        bot: bool = True,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Bot token, or user session token when ``bot`` is False
            api_url: Base URL of the API (override for self-hosted instances)
            bot: Send the token as a bot token rather than a session token
            timeout: Transport timeout in seconds

        Raises:
            CredentialError: If the token cannot be encoded as a header value
        """
        _validate_token(token)
        header = BOT_TOKEN_HEADER if bot else SESSION_TOKEN_HEADER
        self.api_url = api_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.api_url,
            timeout=timeout,
            headers={header: token},
        )
        logger.info("Initialized Revolt client: url=%s, auth=%s", self.api_url, header)

    @classmethod
    def from_config(cls, config: Config) -> RevoltClient:
        """Build a client from a loaded Config."""
        return cls(config.token, api_url=config.api_url, bot=config.bot, timeout=config.timeout)

    async def __aenter__(self) -> RevoltClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http.aclose()

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request; any failure or non-2xx status becomes a TransportError."""
        logger.debug("%s %s", method, path)
        try:
            response = await self._http.request(method, path, json=json, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.debug("%s %s returned HTTP %d", method, path, status_code)
            raise TransportError(
                f"{method} {path} returned HTTP {status_code}", status_code=status_code
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e
        return response

    async def _call(self, method: HttpMethod, path: str, schema: type[T], **kwargs: Any) -> T:
        """Send a request and decode the response body into ``schema``."""
        response = await self._request(method, path, **kwargs)
        return _decode(response, schema)

    async def _confirm(self, method: HttpMethod, path: str, **kwargs: Any) -> str:
        """Send a request whose response is only an opaque confirmation."""
        response = await self._request(method, path, **kwargs)
        return response.text

    # Users

    async def fetch_user(self, user_id: str) -> User:
        """Fetch a user by id."""
        return await self._call(HttpMethod.GET, _path(API_USER, user_id=user_id), User)

    async def edit_user(
        self,
        status: Status | None = None,
        profile: Profile | None = None,
        avatar: str | None = None,
        remove: RemoveUserField | None = None,
    ) -> str:
        """
        Edit the authenticated user. Omitted arguments are left unchanged.

        Args:
            status: New status text and presence
            profile: New profile content and background
            avatar: Id of an uploaded avatar file
            remove: Field to clear
        """
        payload = EditUser(
            **_provided(status=status, profile=profile, avatar=avatar, remove=remove)
        )
        return await self._confirm(HttpMethod.PATCH, API_USER_ME, json=payload.to_payload())

    async def fetch_user_profile(self, user_id: str) -> Profile:
        """Fetch the profile content and background of a user."""
        return await self._call(HttpMethod.GET, _path(API_USER_PROFILE, user_id=user_id), Profile)

    async def fetch_default_avatar(self, user_id: str) -> bytes:
        """Fetch the generated avatar image of a user as raw bytes."""
        response = await self._request(
            HttpMethod.GET, _path(API_USER_DEFAULT_AVATAR, user_id=user_id)
        )
        return response.content

    async def fetch_mutual_friends(self, user_id: str) -> list[str]:
        """Ids of friends shared with another user."""
        return await self._call(
            HttpMethod.GET, _path(API_USER_MUTUAL, user_id=user_id), list[str]
        )

    async def fetch_direct_message_channels(self) -> list[Channel]:
        """List the DM and group channels of the authenticated user."""
        return await self._call(HttpMethod.GET, API_USER_DMS, list[Channel])

    async def open_direct_message(self, user_id: str) -> Channel:
        """Open (or fetch the existing) DM channel with a user."""
        return await self._call(HttpMethod.GET, _path(API_USER_DM, user_id=user_id), Channel)

    async def fetch_relationships(self) -> list[Relationship]:
        """List every relationship of the authenticated user."""
        return await self._call(HttpMethod.GET, API_USER_RELATIONSHIPS, list[Relationship])

    async def fetch_relationship(self, user_id: str) -> Relationship:
        """Fetch the relationship with one user."""
        return await self._call(
            HttpMethod.GET, _path(API_USER_RELATIONSHIP, user_id=user_id), Relationship
        )

    async def send_friend_request(self, username: str) -> Relationship:
        """Send a friend request, or accept an incoming one."""
        return await self._call(
            HttpMethod.PUT, _path(API_USER_FRIEND, username=username), Relationship
        )

    async def remove_friend(self, username: str) -> Relationship:
        """Remove a friend, or deny an incoming friend request."""
        return await self._call(
            HttpMethod.DELETE, _path(API_USER_FRIEND, username=username), Relationship
        )

    async def block_user(self, user_id: str) -> Relationship:
        """Block a user."""
        return await self._call(
            HttpMethod.PUT, _path(API_USER_BLOCK, user_id=user_id), Relationship
        )

    async def unblock_user(self, user_id: str) -> Relationship:
        """Unblock a user."""
        return await self._call(
            HttpMethod.DELETE, _path(API_USER_BLOCK, user_id=user_id), Relationship
        )

    # Channels

    async def fetch_channel(self, channel_id: str) -> Channel:
        """Fetch a channel by id."""
        return await self._call(HttpMethod.GET, _path(API_CHANNEL, channel_id=channel_id), Channel)

    async def edit_channel(
        self,
        channel_id: str,
        name: str | None = None,
        description: str | None = None,
        icon: str | None = None,
        remove: RemoveChannelField | None = None,
    ) -> str:
        """Edit a group or server channel. Omitted arguments are left unchanged."""
        payload = EditChannel(
            **_provided(name=name, description=description, icon=icon, remove=remove)
        )
        return await self._confirm(
            HttpMethod.PATCH,
            _path(API_CHANNEL, channel_id=channel_id),
            json=payload.to_payload(),
        )

    async def close_channel(self, channel_id: str) -> str:
        """Close a DM, leave a group, or delete a server channel."""
        return await self._confirm(HttpMethod.DELETE, _path(API_CHANNEL, channel_id=channel_id))

    async def create_invite(self, channel_id: str) -> str:
        """Create an invite to a channel and return its code."""
        invite = await self._call(
            HttpMethod.POST, _path(API_CHANNEL_INVITES, channel_id=channel_id), Invite
        )
        return invite.code

    async def set_role_permission(self, channel_id: str, role_id: str, permissions: int) -> str:
        """Set the permission bitmask a role has in a channel."""
        payload = SetPermissions(permissions=permissions)
        return await self._confirm(
            HttpMethod.POST,
            _path(API_CHANNEL_PERMISSIONS, channel_id=channel_id, role_id=role_id),
            json=payload.to_payload(),
        )

    async def set_default_permission(self, channel_id: str, permissions: int) -> str:
        """Set the permission bitmask for members without a channel-specific role."""
        payload = SetPermissions(permissions=permissions)
        return await self._confirm(
            HttpMethod.POST,
            _path(API_CHANNEL_DEFAULT_PERMISSIONS, channel_id=channel_id),
            json=payload.to_payload(),
        )

    # Messages

    async def send_message(
        self,
        channel_id: str,
        content: str,
        attachments: list[str] | None = None,
        replies: list[Reply] | None = None,
    ) -> Message:
        """
        Send a message to a channel.

        A fresh ULID is sent as the nonce on every call so the service can
        drop duplicates if the caller retries.

        Args:
            channel_id: Target channel
            content: Message text
            attachments: Ids of uploaded attachment files
            replies: Messages this one replies to
        """
        payload = SendMessage(
            content=content,
            nonce=str(ULID()),
            **_provided(attachments=attachments, replies=replies),
        )
        return await self._call(
            HttpMethod.POST,
            _path(API_CHANNEL_MESSAGES, channel_id=channel_id),
            Message,
            json=payload.to_payload(),
        )

    async def fetch_messages(
        self,
        channel_id: str,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        sort: SearchSort = SearchSort.LATEST,
        nearby: str | None = None,
        include_users: bool | None = None,
    ) -> Messages:
        """
        Fetch messages from a channel.

        Args:
            channel_id: Channel to read
            limit: Maximum number of messages
            before: Only messages older than this message id
            after: Only messages newer than this message id
            sort: Result ordering
            nearby: Fetch messages around this message id (ignores before/after)
            include_users: Also return the referenced users and members
        """
        params = {
            "sort": sort,
            **_provided(
                limit=limit,
                before=before,
                after=after,
                nearby=nearby,
                include_users=include_users,
            ),
        }
        return await self._call(
            HttpMethod.GET,
            _path(API_CHANNEL_MESSAGES, channel_id=channel_id),
            Messages,
            params=params,
        )

    async def fetch_message(self, channel_id: str, message_id: str) -> Message:
        """Fetch one message from a channel."""
        return await self._call(
            HttpMethod.GET,
            _path(API_CHANNEL_MESSAGE, channel_id=channel_id, message_id=message_id),
            Message,
        )

    async def edit_message(self, channel_id: str, message_id: str, content: str) -> str:
        """Replace the text of a message."""
        payload = EditMessage(content=content)
        return await self._confirm(
            HttpMethod.PATCH,
            _path(API_CHANNEL_MESSAGE, channel_id=channel_id, message_id=message_id),
            json=payload.to_payload(),
        )

    async def delete_message(self, channel_id: str, message_id: str) -> str:
        """Delete a message."""
        return await self._confirm(
            HttpMethod.DELETE,
            _path(API_CHANNEL_MESSAGE, channel_id=channel_id, message_id=message_id),
        )

    # Servers

    async def fetch_server(self, server_id: str) -> Server:
        """Fetch a server by id."""
        return await self._call(HttpMethod.GET, _path(API_SERVER, server_id=server_id), Server)

    async def fetch_member(self, server_id: str, user_id: str) -> Member:
        """Fetch a user's membership in a server."""
        return await self._call(
            HttpMethod.GET,
            _path(API_SERVER_MEMBER, server_id=server_id, user_id=user_id),
            Member,
        )
