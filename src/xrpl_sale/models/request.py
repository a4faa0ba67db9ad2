"""
Request models for XRPL.Sale client.

Immutable description of a single API call, independent of the transport.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union


class HttpMethod(Enum):
    """HTTP verbs supported by the API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestSpec:
    """A single API request: verb, path, query and JSON body."""
    method: HttpMethod
    path: str
    query: Optional[Mapping[str, Any]] = None
    body: Any = None

    def __post_init__(self):
        method: Union[HttpMethod, str] = self.method
        if not isinstance(method, HttpMethod):
            try:
                method = HttpMethod(str(method).upper())
            except ValueError:
                raise ValueError(f"Unsupported HTTP method: {self.method!r}") from None
            object.__setattr__(self, "method", method)

        if not self.path.startswith("/"):
            object.__setattr__(self, "path", f"/{self.path}")

    @property
    def has_body(self) -> bool:
        return self.body is not None
