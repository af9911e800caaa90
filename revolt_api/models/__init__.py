"""Pydantic models mirroring the Revolt API's JSON resources."""

from revolt_api.models.autumn import (
    Attachment,
    AttachmentTag,
    AudioMetadata,
    FileMetadata,
    ImageMetadata,
    Metadata,
    TextMetadata,
    VideoMetadata,
)
from revolt_api.models.base import RevoltModel
from revolt_api.models.channel import Channel, ChannelType, LastMessage
from revolt_api.models.message import (
    Embed,
    EmbedImage,
    EmbedType,
    EmbedVideo,
    ImageSize,
    Message,
    MessageEdited,
    Messages,
    Reply,
    SearchSort,
    SpecialEmbed,
    SpecialEmbedType,
    SystemMessage,
    SystemMessageType,
)
from revolt_api.models.requests import (
    EditChannel,
    EditMessage,
    EditUser,
    Invite,
    RemoveChannelField,
    RemoveUserField,
    SendMessage,
    SetPermissions,
)
from revolt_api.models.server import (
    Category,
    Member,
    MemberId,
    Role,
    Server,
    SystemMessageChannels,
)
from revolt_api.models.user import (
    BotInformation,
    Presence,
    Profile,
    Relationship,
    RelationshipStatus,
    Status,
    User,
)

__all__ = [
    "Attachment",
    "AttachmentTag",
    "AudioMetadata",
    "BotInformation",
    "Category",
    "Channel",
    "ChannelType",
    "EditChannel",
    "EditMessage",
    "EditUser",
    "Embed",
    "EmbedImage",
    "EmbedType",
    "EmbedVideo",
    "FileMetadata",
    "ImageMetadata",
    "ImageSize",
    "Invite",
    "LastMessage",
    "Member",
    "MemberId",
    "Message",
    "MessageEdited",
    "Messages",
    "Metadata",
    "Presence",
    "Profile",
    "Relationship",
    "RelationshipStatus",
    "RemoveChannelField",
    "RemoveUserField",
    "Reply",
    "RevoltModel",
    "Role",
    "SearchSort",
    "SendMessage",
    "Server",
    "SetPermissions",
    "SpecialEmbed",
    "SpecialEmbedType",
    "Status",
    "SystemMessage",
    "SystemMessageChannels",
    "SystemMessageType",
    "TextMetadata",
    "User",
    "VideoMetadata",
]
