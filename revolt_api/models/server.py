"""Pydantic models for Revolt servers and their members."""

from __future__ import annotations

from pydantic import Field

from revolt_api.models.autumn import Attachment
from revolt_api.models.base import RevoltModel


class Category(RevoltModel):
    id: str
    title: str
    channels: list[str]


class SystemMessageChannels(RevoltModel):
    """Channels that receive join/leave/kick/ban notices."""

    user_joined: str | None = None
    user_left: str | None = None
    user_kicked: str | None = None
    user_banned: str | None = None


class Role(RevoltModel):
    name: str
    # (allow, deny) bitmasks
    permissions: tuple[int, int]
    colour: str | None = None
    hoist: bool | None = None
    rank: int | None = None


class Server(RevoltModel):
    """A Revolt server.

    ``channels`` is in display order. ``default_permissions`` is the
    (allow, deny) bitmask pair applied to members without roles.
    """

    id: str = Field(alias="_id")
    nonce: str | None = None
    owner: str
    name: str
    description: str | None = None
    channels: list[str]
    categories: list[Category] | None = None
    system_messages: SystemMessageChannels | None = None
    roles: dict[str, Role] | None = None
    default_permissions: tuple[int, int]
    icon: Attachment | None = None
    banner: Attachment | None = None


class MemberId(RevoltModel):
    server: str
    user: str


class Member(RevoltModel):
    """One user's membership in one server, keyed by both ids."""

    id: MemberId = Field(alias="_id")
    nickname: str | None = None
    avatar: Attachment | None = None
    roles: list[str] | None = None
