from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from slack_puncher.core.enums import HttpVerb
from slack_puncher.core.options import REQUIRED, UNSET
from slack_puncher.services.dispatch.errors import UnknownEndpointError

TOKEN_OPTION = "token"
METHOD_DELIMITER = "."


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """Static description of one Slack Web API method."""

    family: str
    action: str
    verb: HttpVerb
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    requires_token: bool = True
    template: Mapping[str, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.family or not self.action:
            raise ValueError("family and action must be non-empty")
        object.__setattr__(self, "verb", HttpVerb(self.verb))
        object.__setattr__(self, "required", tuple(self.required))
        object.__setattr__(self, "optional", tuple(self.optional))

        template: dict[str, Any] = {}
        if self.requires_token:
            template[TOKEN_OPTION] = REQUIRED
        template.update((name, REQUIRED) for name in self.required)
        template.update((name, UNSET) for name in self.optional)
        object.__setattr__(self, "template", MappingProxyType(template))

    @property
    def key(self) -> tuple[str, str]:
        return (self.family, self.action)

    @property
    def method_name(self) -> str:
        return f"{self.family}{METHOD_DELIMITER}{self.action}"

    @property
    def option_names(self) -> tuple[str, ...]:
        return tuple(self.template)


class DescriptorRegistry:
    """Lookup table of endpoint descriptors keyed by ``(family, action)``."""

    def __init__(self, descriptors: Iterable[EndpointDescriptor] = ()) -> None:
        self._descriptors: dict[tuple[str, str], EndpointDescriptor] = {}
        self.register_all(descriptors)

    def register(self, descriptor: EndpointDescriptor) -> EndpointDescriptor:
        # Re-registering a method replaces the previous descriptor.
        self._descriptors[descriptor.key] = descriptor
        return descriptor

    def register_all(self, descriptors: Iterable[EndpointDescriptor]) -> None:
        for descriptor in descriptors:
            self.register(descriptor)

    def get(self, family: str, action: str) -> EndpointDescriptor:
        try:
            return self._descriptors[(family, action)]
        except KeyError:
            raise UnknownEndpointError(
                f"No descriptor registered for {family}{METHOD_DELIMITER}{action}"
            ) from None

    def families(self) -> list[str]:
        return sorted({family for family, _ in self._descriptors})

    def actions(self, family: str) -> list[str]:
        return sorted(action for fam, action in self._descriptors if fam == family)

    def __contains__(self, key: object) -> bool:
        return key in self._descriptors

    def __iter__(self) -> Iterator[EndpointDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)
