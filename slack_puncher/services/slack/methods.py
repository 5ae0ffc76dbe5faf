"""Per-family facades over :class:`RequestDispatcher`.

Every method takes the Slack method's required arguments positionally and
accepts any further Slack options either as an ``options`` mapping or as
keyword arguments (keywords win). Options that every Slack method accepts,
such as ``pretty=1`` for indented JSON, are not listed in the descriptors and
pass straight through. The raw response body is returned.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from slack_puncher.core.options import (
    RequestOptions,
    encode_json,
    is_absent,
    join_list,
    merge_options,
)
from slack_puncher.services.dispatch.dispatcher import RequestDispatcher


class _Family:
    family: str = ""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    async def _call(
        self,
        action: str,
        options: RequestOptions | None,
        extra: Mapping[str, Any],
        **arguments: Any,
    ) -> Any:
        descriptor = self._dispatcher.registry.get(self.family, action)
        overrides = merge_options({}, options, extra)
        return await self._dispatcher.call(descriptor, overrides, **arguments)


def _with_encoded(
    options: RequestOptions | None,
    extra: Mapping[str, Any],
    *,
    json_keys: Iterable[str] = (),
    list_keys: Iterable[str] = (),
) -> dict[str, Any]:
    merged = merge_options({}, options, extra)
    for key in json_keys:
        if key in merged:
            merged[key] = encode_json(merged[key])
    for key in list_keys:
        if key in merged and not is_absent(merged[key]):
            merged[key] = join_list(merged[key])
    return merged


class ApiMethods(_Family):
    family = "api"

    async def test(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        """Echo the options back; ``error`` forces an error response."""
        return await self._call("test", options, extra)


class AuthMethods(_Family):
    family = "auth"

    async def test(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("test", options, extra)


class _ConversationMethods(_Family):
    async def archive(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("archive", options, extra, channel=channel)

    async def create(self, name: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("create", options, extra, name=name)

    async def history(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("history", options, extra, channel=channel)

    async def info(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("info", options, extra, channel=channel)

    async def invite(
        self, channel: str, user: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("invite", options, extra, channel=channel, user=user)

    async def kick(
        self, channel: str, user: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("kick", options, extra, channel=channel, user=user)

    async def leave(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("leave", options, extra, channel=channel)

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra)

    async def mark(
        self, channel: str, ts: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("mark", options, extra, channel=channel, ts=ts)

    async def rename(
        self, channel: str, name: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("rename", options, extra, channel=channel, name=name)

    async def set_purpose(
        self, channel: str, purpose: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("setPurpose", options, extra, channel=channel, purpose=purpose)

    async def set_topic(
        self, channel: str, topic: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("setTopic", options, extra, channel=channel, topic=topic)

    async def unarchive(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("unarchive", options, extra, channel=channel)


class ChannelsMethods(_ConversationMethods):
    family = "channels"

    async def join(self, name: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        """Join a channel by name, creating it if it does not exist."""
        return await self._call("join", options, extra, name=name)


class GroupsMethods(_ConversationMethods):
    family = "groups"

    async def close(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("close", options, extra, channel=channel)

    async def create_child(
        self, channel: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        """Archive the group and clone it; Slack performs both steps server-side."""
        return await self._call("createChild", options, extra, channel=channel)

    async def open(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("open", options, extra, channel=channel)


class ChatMethods(_Family):
    family = "chat"

    async def post_message(
        self, channel: str, text: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        overrides = _with_encoded(options, extra, json_keys=("attachments",))
        return await self._call("postMessage", overrides, {}, channel=channel, text=text)

    async def delete(
        self, channel: str, ts: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("delete", options, extra, ts=ts, channel=channel)

    async def update(
        self,
        channel: str,
        ts: str,
        text: str,
        options: RequestOptions | None = None,
        **extra: Any,
    ) -> Any:
        overrides = _with_encoded(options, extra, json_keys=("attachments",))
        return await self._call("update", overrides, {}, ts=ts, channel=channel, text=text)


class EmojiMethods(_Family):
    family = "emoji"

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra)


class FilesMethods(_Family):
    family = "files"

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        overrides = _with_encoded(options, extra, list_keys=("types",))
        return await self._call("list", overrides, {})

    async def info(self, file: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("info", options, extra, file=file)

    async def upload(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        """Upload text content; ``channels`` may be a list of channel ids."""
        overrides = _with_encoded(options, extra, list_keys=("channels",))
        return await self._call("upload", overrides, {})

    async def delete(self, file: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("delete", options, extra, file=file)


class _DirectMessageMethods(_Family):
    async def close(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("close", options, extra, channel=channel)

    async def history(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("history", options, extra, channel=channel)

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra)

    async def mark(
        self, channel: str, ts: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("mark", options, extra, channel=channel, ts=ts)


class ImMethods(_DirectMessageMethods):
    family = "im"

    async def open(self, user: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("open", options, extra, user=user)


class MpimMethods(_DirectMessageMethods):
    family = "mpim"

    async def open(
        self, users: str | Iterable[str], options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("open", options, extra, users=join_list(users))


class OAuthMethods(_Family):
    family = "oauth"

    async def access(
        self,
        client_id: str,
        client_secret: str,
        code: str,
        options: RequestOptions | None = None,
        **extra: Any,
    ) -> Any:
        """Exchange a temporary OAuth code for an access token."""
        return await self._call(
            "access",
            options,
            extra,
            client_id=client_id,
            client_secret=client_secret,
            code=code,
        )


class _ItemMethods(_Family):
    """pins and stars: add, list and remove an item attached to a channel."""

    async def add(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("add", options, extra, channel=channel)

    async def remove(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("remove", options, extra, channel=channel)


class PinsMethods(_ItemMethods):
    family = "pins"

    async def list(self, channel: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra, channel=channel)


class StarsMethods(_ItemMethods):
    family = "stars"

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra)


class ReactionsMethods(_Family):
    family = "reactions"

    async def add(self, name: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("add", options, extra, name=name)

    async def get(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("get", options, extra)

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra)

    async def remove(self, name: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("remove", options, extra, name=name)


class RtmMethods(_Family):
    family = "rtm"

    async def start(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        """Fetch the websocket URL and team snapshot. No connection is opened."""
        return await self._call("start", options, extra)


class SearchMethods(_Family):
    family = "search"

    async def all(self, query: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("all", options, extra, query=query)

    async def files(self, query: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("files", options, extra, query=query)

    async def messages(self, query: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("messages", options, extra, query=query)


class UsergroupsUsersMethods(_Family):
    family = "usergroups.users"

    async def list(self, usergroup: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra, usergroup=usergroup)

    async def update(
        self, usergroup: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        overrides = _with_encoded(options, extra, list_keys=("users",))
        return await self._call("update", overrides, {}, usergroup=usergroup)


class UsergroupsMethods(_Family):
    family = "usergroups"

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        super().__init__(dispatcher)
        self.users = UsergroupsUsersMethods(dispatcher)

    async def create(self, name: str, options: RequestOptions | None = None, **extra: Any) -> Any:
        overrides = _with_encoded(options, extra, list_keys=("channels",))
        return await self._call("create", overrides, {}, name=name)

    async def disable(
        self, usergroup: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("disable", options, extra, usergroup=usergroup)

    async def enable(
        self, usergroup: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        return await self._call("enable", options, extra, usergroup=usergroup)

    async def list(self, options: RequestOptions | None = None, **extra: Any) -> Any:
        return await self._call("list", options, extra)

    async def update(
        self, usergroup: str, options: RequestOptions | None = None, **extra: Any
    ) -> Any:
        overrides = _with_encoded(options, extra, list_keys=("channels",))
        return await self._call("update", overrides, {}, usergroup=usergroup)
