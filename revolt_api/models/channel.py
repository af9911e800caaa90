"""Pydantic models for Revolt channels."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field

from revolt_api.models.autumn import Attachment
from revolt_api.models.base import RevoltModel


class ChannelType(StrEnum):
    SAVED_MESSAGES = "SavedMessages"
    DIRECT_MESSAGE = "DirectMessage"
    GROUP = "Group"
    TEXT_CHANNEL = "TextChannel"
    VOICE_CHANNEL = "VoiceChannel"


class LastMessage(RevoltModel):
    """Preview of the newest message in a DM or group."""

    id: str = Field(alias="_id")
    author: str
    short: str


# Untagged: the preview object first, then a bare message id
LastMessagePreview = Annotated[LastMessage | str, Field(union_mode="left_to_right")]


class Channel(RevoltModel):
    """Any kind of channel.

    Which fields are populated depends on ``channel_type``: ``server`` only
    for text and voice channels, ``recipients`` for DMs and groups, ``user``
    for saved messages. They are all optional rather than split per variant.
    """

    id: str = Field(alias="_id")
    channel_type: ChannelType
    server: str | None = None
    active: bool | None = None
    recipients: list[str] | None = None
    name: str | None = None
    owner: str | None = None
    description: str | None = None
    last_message: LastMessagePreview | None = None
    user: str | None = None
    icon: Attachment | None = None
    default_permissions: int | None = None
    role_permissions: dict[str, int] | None = None
    permissions: int | None = None
    nonce: str | None = None
