from __future__ import annotations

import logging
import ssl
from typing import Any, Optional

import certifi
import httpx

from slack_puncher.config import Settings
from slack_puncher.core.enums import HttpVerb
from slack_puncher.core.options import (
    RequestOptions,
    merge_options,
    missing_required,
    null_filter,
)
from slack_puncher.services.dispatch.errors import TransportError, UsageError
from slack_puncher.services.dispatch.registry import (
    METHOD_DELIMITER,
    TOKEN_OPTION,
    DescriptorRegistry,
    EndpointDescriptor,
)


LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://slack.com/api"
DEFAULT_USER_AGENT = "APIPuncher-v1.0.0;"
DEFAULT_MAX_REDIRECTS = 3


class RequestDispatcher:
    """Turns a Slack method call into one HTTP request (plus bounded GET redirects).

    The response body is handed back as-is: decoded JSON when Slack answers
    with JSON, raw bytes otherwise. ``ok: false`` payloads are not errors here;
    callers inspect the body themselves.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        client: Optional[httpx.AsyncClient] = None,
        registry: DescriptorRegistry | None = None,
    ) -> None:
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects
        self._client = client
        self._ssl_context = (
            None if client is not None else ssl.create_default_context(cafile=certifi.where())
        )
        if registry is None:
            from slack_puncher.services.slack.descriptors import default_registry

            registry = default_registry
        self.registry = registry

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        token: str | None = None,
        client: Optional[httpx.AsyncClient] = None,
        registry: DescriptorRegistry | None = None,
    ) -> "RequestDispatcher":
        return cls(
            token if token is not None else settings.slack_api_token,
            base_url=settings.base_url,
            user_agent=settings.slack_user_agent,
            timeout=settings.request_timeout_seconds,
            max_redirects=settings.slack_max_redirects,
            client=client,
            registry=registry,
        )

    def endpoint_url(self, family: str, action: str) -> str:
        return f"{self.base_url}/{family}{METHOD_DELIMITER}{action}"

    def build_options(
        self,
        descriptor: EndpointDescriptor,
        arguments: RequestOptions | None = None,
        overrides: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Merge template, positional arguments and overrides, then drop unset values."""
        configured: dict[str, Any] = {}
        if descriptor.requires_token:
            configured[TOKEN_OPTION] = self._token
        merged = merge_options(descriptor.template, configured, arguments, overrides)

        missing = missing_required(merged)
        if missing:
            raise UsageError(
                f"{descriptor.method_name}() missing required option(s): {', '.join(missing)}"
            )
        return null_filter(merged)

    async def call(
        self,
        descriptor: EndpointDescriptor,
        overrides: RequestOptions | None = None,
        **arguments: Any,
    ) -> Any:
        options = self.build_options(descriptor, arguments, overrides)
        return await self._send(descriptor.verb, descriptor.family, descriptor.action, options)

    async def call_method(
        self,
        family: str,
        action: str,
        overrides: RequestOptions | None = None,
        **arguments: Any,
    ) -> Any:
        return await self.call(self.registry.get(family, action), overrides, **arguments)

    async def dispatch(
        self,
        verb: HttpVerb | str,
        family: str,
        action: str,
        options: RequestOptions,
    ) -> Any:
        """Send ``options`` merged over the registered template for ``family.action``.

        Methods missing from the registry are sent with ``options`` as given.
        """
        verb = HttpVerb(verb)
        if not family or not action:
            raise ValueError("family and action must be non-empty")

        if (family, action) in self.registry:
            options = self.build_options(self.registry.get(family, action), overrides=options)
        return await self._send(verb, family, action, options)

    async def _send(
        self,
        verb: HttpVerb,
        family: str,
        action: str,
        options: RequestOptions,
    ) -> Any:
        url = self.endpoint_url(family, action)
        method_name = f"{family}{METHOD_DELIMITER}{action}"
        options = null_filter(options)
        LOGGER.debug("Dispatching %s %s with options %s", verb, method_name, sorted(options))

        request_kwargs: dict[str, Any] = {"headers": {"User-Agent": self.user_agent}}
        if verb.sends_query:
            request_kwargs["params"] = options
        else:
            request_kwargs["data"] = options

        try:
            if self._client is not None:
                response = await self._request(self._client, verb, url, request_kwargs)
            else:
                async with self._new_client() as client:
                    response = await self._request(client, verb, url, request_kwargs)
        except httpx.RequestError as exc:
            LOGGER.warning("Slack request %s failed: %s", method_name, exc)
            raise TransportError(str(exc), method_name=method_name, url=url) from exc

        return self._after_request(response)

    async def _request(
        self,
        client: httpx.AsyncClient,
        verb: HttpVerb,
        url: str,
        request_kwargs: dict[str, Any],
    ) -> httpx.Response:
        # Redirects are followed here so the bound holds for injected clients too.
        response = await client.request(str(verb), url, follow_redirects=False, **request_kwargs)
        if verb is not HttpVerb.GET:
            return response

        followed = 0
        while response.next_request is not None:
            if followed >= self.max_redirects:
                raise httpx.TooManyRedirects(
                    "Exceeded maximum allowed redirects.", request=response.next_request
                )
            followed += 1
            response = await client.send(response.next_request, follow_redirects=False)
        return response

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, verify=self._ssl_context)

    def _after_request(self, response: httpx.Response) -> Any:
        content_type = response.headers.get("Content-Type", "")
        if "json" not in content_type:
            return response.content
        try:
            return response.json()
        except ValueError:
            LOGGER.debug("Response declared JSON but did not decode; returning raw body")
            return response.content
