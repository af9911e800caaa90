"""Pydantic models for Revolt messages and embeds."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import Field, model_validator

from revolt_api.models.autumn import Attachment
from revolt_api.models.base import RevoltModel
from revolt_api.models.server import Member
from revolt_api.models.user import User


class SystemMessageType(StrEnum):
    TEXT = "text"
    USER_ADDED = "user_added"
    USER_REMOVE = "user_remove"
    USER_JOINED = "user_joined"
    USER_LEFT = "user_left"
    USER_KICKED = "user_kicked"
    USER_BANNED = "user_banned"
    CHANNEL_RENAMED = "channel_renamed"
    CHANNEL_DESCRIPTION_CHANGED = "channel_description_changed"
    CHANNEL_ICON_CHANGED = "channel_icon_changed"


class SystemMessage(RevoltModel):
    """Content of a message generated by the service rather than a user."""

    type: SystemMessageType
    id: str | None = None
    by: str | None = None
    name: str | None = None
    content: str | None = None


# Untagged: system message object first, then plain text
MessageContent = Annotated[SystemMessage | str, Field(union_mode="left_to_right")]


class MessageEdited(RevoltModel):
    date: str = Field(alias="$date")


class EmbedType(StrEnum):
    NONE = "None"
    WEBSITE = "Website"
    IMAGE = "Image"
    VIDEO = "Video"
    TEXT = "Text"


class SpecialEmbedType(StrEnum):
    NONE = "None"
    GIF = "GIF"
    YOUTUBE = "YouTube"
    LIGHTSPEED = "Lightspeed"
    TWITCH = "Twitch"
    SPOTIFY = "Spotify"
    SOUNDCLOUD = "Soundcloud"
    BANDCAMP = "Bandcamp"


class ImageSize(StrEnum):
    LARGE = "Large"
    PREVIEW = "Preview"


class SpecialEmbed(RevoltModel):
    """Provider-specific data for a website embed (YouTube video, Spotify track...)."""

    type: SpecialEmbedType
    # Open string: providers add kinds (Channel, Clip, Video, Album, Track, ...)
    content_type: str | None = None
    id: str | None = None


class EmbedImage(RevoltModel):
    url: str
    width: int
    height: int
    size: ImageSize


class EmbedVideo(RevoltModel):
    url: str
    width: int
    height: int


class Embed(RevoltModel):
    """Link preview attached to a message.

    Website embeds fill title/description/image/video/special; image embeds
    fill url/width/height/size directly. Everything but ``type`` is optional.
    """

    type: EmbedType
    url: str | None = None
    width: int | None = None
    height: int | None = None
    size: ImageSize | None = None
    special: SpecialEmbed | None = None
    title: str | None = None
    description: str | None = None
    image: EmbedImage | None = None
    video: EmbedVideo | None = None
    site_name: str | None = None
    icon_url: str | None = None
    colour: str | None = None


class Message(RevoltModel):
    """A chat message. Ids sort in send order."""

    id: str = Field(alias="_id")
    nonce: str | None = None
    channel: str
    author: str
    content: MessageContent | None = None
    attachments: list[Attachment] | None = None
    edited: MessageEdited | None = None
    embeds: list[Embed] | None = None
    mentions: list[str] | None = None
    replies: list[str] | None = None


class Messages(RevoltModel):
    """Result of a message fetch.

    The service returns a bare array of messages, or an object that also
    carries the referenced users and members when ``include_users`` is set.
    """

    messages: list[Message]
    users: list[User] | None = None
    members: list[Member] | None = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"messages": data}
        return data


class Reply(RevoltModel):
    """Reference to a message being replied to."""

    id: str
    mention: bool


class SearchSort(StrEnum):
    LATEST = "Latest"
    OLDEST = "Oldest"
    RELEVANCE = "Relevance"
