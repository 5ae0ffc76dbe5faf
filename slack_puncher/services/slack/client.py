from __future__ import annotations

from typing import Any, Optional

import httpx

from slack_puncher.config import Settings, get_settings
from slack_puncher.core.options import RequestOptions
from slack_puncher.services.dispatch.dispatcher import RequestDispatcher
from slack_puncher.services.dispatch.registry import DescriptorRegistry
from slack_puncher.services.slack.methods import (
    ApiMethods,
    AuthMethods,
    ChannelsMethods,
    ChatMethods,
    EmojiMethods,
    FilesMethods,
    GroupsMethods,
    ImMethods,
    MpimMethods,
    OAuthMethods,
    PinsMethods,
    ReactionsMethods,
    RtmMethods,
    SearchMethods,
    StarsMethods,
    UsergroupsMethods,
)


class SlackClient:
    """Thin wrapper around the Slack Web API, one attribute per method family."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        token: str | None = None,
        client: Optional[httpx.AsyncClient] = None,
        registry: DescriptorRegistry | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.dispatcher = RequestDispatcher.from_settings(
            self.settings,
            token=token,
            client=client,
            registry=registry,
        )

        self.api = ApiMethods(self.dispatcher)
        self.auth = AuthMethods(self.dispatcher)
        self.channels = ChannelsMethods(self.dispatcher)
        self.chat = ChatMethods(self.dispatcher)
        self.emoji = EmojiMethods(self.dispatcher)
        self.files = FilesMethods(self.dispatcher)
        self.groups = GroupsMethods(self.dispatcher)
        self.im = ImMethods(self.dispatcher)
        self.mpim = MpimMethods(self.dispatcher)
        self.oauth = OAuthMethods(self.dispatcher)
        self.pins = PinsMethods(self.dispatcher)
        self.reactions = ReactionsMethods(self.dispatcher)
        self.rtm = RtmMethods(self.dispatcher)
        self.search = SearchMethods(self.dispatcher)
        self.stars = StarsMethods(self.dispatcher)
        self.usergroups = UsergroupsMethods(self.dispatcher)

    async def __aenter__(self) -> "SlackClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        # Injected clients belong to the caller, per-call clients are already closed.
        return None

    async def call(
        self,
        method_name: str,
        options: RequestOptions | None = None,
        **arguments: Any,
    ) -> Any:
        """Call any registered method by its Slack name, e.g. ``"usergroups.users.list"``."""
        family, _, action = method_name.rpartition(".")
        return await self.dispatcher.call_method(family, action, options, **arguments)
