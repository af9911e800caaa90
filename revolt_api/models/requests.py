"""Pydantic models for request bodies and small response wrappers.

Payloads are built only from the arguments the caller actually passed and
serialized with ``to_payload()``, so anything left out is absent from the
JSON body (PATCH: absent means unchanged).
"""

from __future__ import annotations

from enum import StrEnum

from revolt_api.models.base import RevoltModel
from revolt_api.models.message import Reply
from revolt_api.models.user import Profile, Status


class RemoveUserField(StrEnum):
    """Field of the authenticated user to clear."""

    AVATAR = "Avatar"
    PROFILE_BACKGROUND = "ProfileBackground"
    PROFILE_CONTENT = "ProfileContent"
    STATUS_TEXT = "StatusText"


class RemoveChannelField(StrEnum):
    """Field of a channel to clear."""

    DESCRIPTION = "Description"
    ICON = "Icon"


class EditUser(RevoltModel):
    status: Status | None = None
    profile: Profile | None = None
    avatar: str | None = None
    remove: RemoveUserField | None = None


class EditChannel(RevoltModel):
    name: str | None = None
    description: str | None = None
    icon: str | None = None
    remove: RemoveChannelField | None = None


class SetPermissions(RevoltModel):
    permissions: int


class SendMessage(RevoltModel):
    content: str
    nonce: str
    attachments: list[str] | None = None
    replies: list[Reply] | None = None


class EditMessage(RevoltModel):
    content: str


class Invite(RevoltModel):
    code: str
