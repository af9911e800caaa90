"""Pydantic models for files stored on Autumn, Revolt's file server."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field

from revolt_api.models.base import RevoltModel


class AttachmentTag(StrEnum):
    """Bucket a file was uploaded to."""

    ATTACHMENTS = "attachments"
    AVATARS = "avatars"
    BACKGROUNDS = "backgrounds"
    BANNERS = "banners"
    ICONS = "icons"


class FileMetadata(RevoltModel):
    type: Literal["File"] = "File"


class TextMetadata(RevoltModel):
    type: Literal["Text"] = "Text"


class AudioMetadata(RevoltModel):
    type: Literal["Audio"] = "Audio"


class ImageMetadata(RevoltModel):
    type: Literal["Image"] = "Image"
    width: int
    height: int


class VideoMetadata(RevoltModel):
    type: Literal["Video"] = "Video"
    width: int
    height: int


Metadata = Annotated[
    FileMetadata | TextMetadata | AudioMetadata | ImageMetadata | VideoMetadata,
    Field(discriminator="type"),
]


class Attachment(RevoltModel):
    """An uploaded file.

    The metadata variant usually follows the tag (avatars are images, etc.),
    but the service does not enforce it and neither do we.
    """

    id: str = Field(alias="_id")
    tag: AttachmentTag
    size: int
    filename: str
    metadata: Metadata
    # MIME type; an open string, the service accepts arbitrary uploads
    content_type: str
