from enum import Enum


class StrEnum(str, Enum):
    def __str__(self) -> str:
        return str(self.value)


class HttpVerb(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_query(self) -> bool:
        """GET carries options in the query string, every other verb in the body."""
        return self is HttpVerb.GET
