"""Pydantic models for Revolt users, relationships and profiles."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import Field

from revolt_api.models.autumn import Attachment
from revolt_api.models.base import RevoltModel


class RelationshipStatus(StrEnum):
    """Relationship between the authenticated user and another user."""

    BLOCKED = "Blocked"
    BLOCKED_OTHER = "BlockedOther"
    FRIEND = "Friend"
    INCOMING = "Incoming"
    NONE = "None"
    OUTGOING = "Outgoing"
    USER = "User"


class Presence(StrEnum):
    """Presence shown next to a user."""

    BUSY = "Busy"
    IDLE = "Idle"
    INVISIBLE = "Invisible"
    ONLINE = "Online"


class Relationship(RevoltModel):
    """Relationship entry; ``id`` is the other user's id when present."""

    status: RelationshipStatus
    id: str | None = Field(default=None, alias="_id")


class Status(RevoltModel):
    text: str | None = None
    presence: Presence | None = None


class BotInformation(RevoltModel):
    """Marks a user as a bot and names its owner."""

    owner: str


class User(RevoltModel):
    """A Revolt account."""

    id: str = Field(alias="_id")
    username: str
    avatar: Attachment | None = None
    relations: list[Relationship] | None = None
    badges: int | None = None
    status: Status | None = None
    relationship: RelationshipStatus | None = None
    online: bool | None = None
    flags: int | None = None
    bot: BotInformation | None = None


# Untagged: a bare file id string (as sent in edits) first, then a full attachment
ProfileBackground = Annotated[str | Attachment, Field(union_mode="left_to_right")]


class Profile(RevoltModel):
    """Profile page of a user."""

    content: str | None = None
    background: ProfileBackground | None = None
