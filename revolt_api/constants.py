"""Constants for the Revolt REST API."""

from enum import StrEnum

API_URL = "https://api.revolt.chat"
REQUEST_TIMEOUT = 30.0

# Authentication headers
BOT_TOKEN_HEADER = "x-bot-token"
SESSION_TOKEN_HEADER = "x-session-token"


class HttpMethod(StrEnum):
    """HTTP methods for API requests."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# API paths: users
API_USER = "/users/{user_id}"
API_USER_ME = "/users/@me"
API_USER_PROFILE = "/users/{user_id}/profile"
API_USER_DEFAULT_AVATAR = "/users/{user_id}/default_avatar"
API_USER_MUTUAL = "/users/{user_id}/mutual"
API_USER_DMS = "/users/dms"
API_USER_DM = "/users/{user_id}/dm"
API_USER_RELATIONSHIPS = "/users/relationships"
API_USER_RELATIONSHIP = "/users/{user_id}/relationship"
API_USER_FRIEND = "/users/{username}/friend"
API_USER_BLOCK = "/users/{user_id}/block"

# API paths: channels
API_CHANNEL = "/channels/{channel_id}"
API_CHANNEL_INVITES = "/channels/{channel_id}/invites"
API_CHANNEL_PERMISSIONS = "/channels/{channel_id}/permissions/{role_id}"
API_CHANNEL_DEFAULT_PERMISSIONS = "/channels/{channel_id}/permissions/default"
API_CHANNEL_MESSAGES = "/channels/{channel_id}/messages"
API_CHANNEL_MESSAGE = "/channels/{channel_id}/messages/{message_id}"

# API paths: servers
API_SERVER = "/servers/{server_id}"
API_SERVER_MEMBER = "/servers/{server_id}/members/{user_id}"
