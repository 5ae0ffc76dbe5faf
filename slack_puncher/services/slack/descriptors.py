"""Endpoint descriptors for every supported Slack Web API method."""

from __future__ import annotations

from slack_puncher.core.enums import HttpVerb
from slack_puncher.services.dispatch.registry import DescriptorRegistry, EndpointDescriptor

GET = HttpVerb.GET
POST = HttpVerb.POST

HISTORY_OPTIONS = ("latest", "oldest", "inclusive", "count", "unreads")
ITEM_OPTIONS = ("file", "file_comment", "timestamp")
SEARCH_OPTIONS = ("sort", "sort_dir", "highlight", "count", "page")


def _family(family: str, *entries: tuple) -> tuple[EndpointDescriptor, ...]:
    return tuple(EndpointDescriptor(family, *entry) for entry in entries)


def _conversation_family(family: str, *extra: tuple) -> tuple[EndpointDescriptor, ...]:
    """channels and groups share the same action set."""
    return _family(
        family,
        ("archive", POST, ("channel",)),
        ("create", POST, ("name",)),
        ("history", GET, ("channel",), HISTORY_OPTIONS),
        ("info", GET, ("channel",)),
        ("invite", POST, ("channel", "user")),
        ("kick", POST, ("channel", "user")),
        ("leave", POST, ("channel",)),
        ("list", GET, (), ("exclude_archived",)),
        ("mark", POST, ("channel", "ts")),
        ("rename", POST, ("channel", "name")),
        ("setPurpose", POST, ("channel", "purpose")),
        ("setTopic", POST, ("channel", "topic")),
        ("unarchive", POST, ("channel",)),
        *extra,
    )


def _direct_message_family(family: str, open_argument: str) -> tuple[EndpointDescriptor, ...]:
    """im and mpim differ only in what ``open`` takes."""
    return _family(
        family,
        ("close", POST, ("channel",)),
        ("history", GET, ("channel",), HISTORY_OPTIONS),
        ("list", GET),
        ("mark", POST, ("channel", "ts")),
        ("open", POST, (open_argument,)),
    )


API = _family(
    "api",
    ("test", GET, (), ("error", "foo"), False),
)

AUTH = _family(
    "auth",
    ("test", GET),
)

CHANNELS = _conversation_family(
    "channels",
    ("join", POST, ("name",)),
)

CHAT = _family(
    "chat",
    (
        "postMessage",
        POST,
        ("channel", "text"),
        (
            "username",
            "as_user",
            "parse",
            "link_names",
            "attachments",
            "unfurl_links",
            "unfurl_media",
            "icon_url",
            "icon_emoji",
        ),
    ),
    ("delete", POST, ("ts", "channel")),
    ("update", POST, ("ts", "channel", "text"), ("attachments", "parse", "link_names")),
)

EMOJI = _family(
    "emoji",
    ("list", GET),
)

FILES = _family(
    "files",
    ("list", GET, (), ("user", "ts_from", "ts_to", "types", "count", "page")),
    ("info", GET, ("file",), ("count", "page")),
    (
        "upload",
        POST,
        (),
        ("file", "content", "filetype", "filename", "title", "initial_comment", "channels"),
    ),
    ("delete", POST, ("file",)),
)

GROUPS = _conversation_family(
    "groups",
    ("close", POST, ("channel",)),
    ("createChild", POST, ("channel",)),
    ("open", POST, ("channel",)),
)

IM = _direct_message_family("im", "user")

MPIM = _direct_message_family("mpim", "users")

OAUTH = _family(
    "oauth",
    ("access", POST, ("client_id", "client_secret", "code"), ("redirect_uri",), False),
)

PINS = _family(
    "pins",
    ("add", POST, ("channel",), ITEM_OPTIONS),
    ("list", GET, ("channel",)),
    ("remove", POST, ("channel",), ITEM_OPTIONS),
)

REACTIONS = _family(
    "reactions",
    ("add", POST, ("name",), ("file", "file_comment", "channel", "timestamp")),
    ("get", GET, (), ("file", "file_comment", "channel", "timestamp", "full")),
    ("list", GET, (), ("user", "full", "count", "page")),
    ("remove", POST, ("name",), ("file", "file_comment", "channel", "timestamp")),
)

RTM = _family(
    "rtm",
    ("start", GET, (), ("simple_latest", "no_unreads", "mpim_aware")),
)

SEARCH = _family(
    "search",
    ("all", GET, ("query",), SEARCH_OPTIONS),
    ("files", GET, ("query",), SEARCH_OPTIONS),
    ("messages", GET, ("query",), SEARCH_OPTIONS),
)

STARS = _family(
    "stars",
    ("add", POST, ("channel",), ITEM_OPTIONS),
    ("list", GET, (), ("user", "count", "page")),
    ("remove", POST, ("channel",), ITEM_OPTIONS),
)

USERGROUPS = _family(
    "usergroups",
    ("create", POST, ("name",), ("handle", "description", "channels", "include_count")),
    ("disable", POST, ("usergroup",), ("include_count",)),
    ("enable", POST, ("usergroup",), ("include_count",)),
    ("list", GET, (), ("include_disabled", "include_count", "include_users")),
    (
        "update",
        POST,
        ("usergroup",),
        ("name", "handle", "description", "channels", "include_count"),
    ),
)

USERGROUPS_USERS = _family(
    "usergroups.users",
    ("list", GET, ("usergroup",), ("include_disabled",)),
    ("update", POST, ("usergroup",), ("users", "include_count")),
)

ALL_DESCRIPTORS: tuple[EndpointDescriptor, ...] = (
    *API,
    *AUTH,
    *CHANNELS,
    *CHAT,
    *EMOJI,
    *FILES,
    *GROUPS,
    *IM,
    *MPIM,
    *OAUTH,
    *PINS,
    *REACTIONS,
    *RTM,
    *SEARCH,
    *STARS,
    *USERGROUPS,
    *USERGROUPS_USERS,
)

default_registry = DescriptorRegistry(ALL_DESCRIPTORS)
