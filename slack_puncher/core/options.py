"""Option mappings sent to Slack and the sentinels used to build them."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

RequestOptions = Mapping[str, Any]


class _Marker:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Marker":
        return self

    def __deepcopy__(self, memo: dict) -> "_Marker":
        return self


UNSET = _Marker("UNSET")
"""Optional template field the caller did not supply. Never sent."""

REQUIRED = _Marker("REQUIRED")
"""Template field that a positional argument or override must fill."""


def is_absent(value: Any) -> bool:
    return value is UNSET or value is None


def merge_options(
    template: RequestOptions,
    *overrides: RequestOptions | None,
) -> dict[str, Any]:
    """Overlay each override onto ``template``; later values win key-for-key.

    Keys keep the template's order, keys only present in an override are
    appended in the order they were first seen.
    """
    merged = dict(template)
    for override in overrides:
        if override:
            merged.update(override)
    return merged


def null_filter(options: RequestOptions) -> dict[str, Any]:
    """Drop every entry whose value is ``UNSET`` or ``None``."""
    return {key: value for key, value in options.items() if not is_absent(value)}


def missing_required(options: RequestOptions) -> list[str]:
    return [key for key, value in options.items() if value is REQUIRED]


def join_list(value: str | Iterable[str]) -> str:
    """Comma-join a sequence of Slack ids; a plain string passes through."""
    if isinstance(value, str):
        return value
    return ",".join(str(item) for item in value)


def encode_json(value: Any) -> Any:
    """JSON-encode structured values such as message attachments."""
    if is_absent(value) or isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))
