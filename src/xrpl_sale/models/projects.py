"""
Project-related models for XRPL.Sale client.

Typed results for endpoints with a known schema; the raw mapping is kept
so fields the SDK does not model are still reachable.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Project:
    """A token sale project."""
    id: str
    name: str
    status: str = ""
    token_symbol: Optional[str] = None
    total_supply: Optional[str] = None
    description: Optional[str] = None
    sale_start_date: Optional[str] = None
    sale_end_date: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Create from API response dict."""
        total_supply = data.get("total_supply")
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            status=data.get("status") or "",
            token_symbol=data.get("token_symbol"),
            total_supply=str(total_supply) if total_supply is not None else None,
            description=data.get("description"),
            sale_start_date=data.get("sale_start_date"),
            sale_end_date=data.get("sale_end_date"),
            raw=dict(data),
        )


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    """Paginated API response."""
    data: List[T]
    page: int = 1
    limit: int = 10
    total: int = 0

    @property
    def has_more(self) -> bool:
        """Check if there are more results."""
        return self.page * self.limit < self.total

    @classmethod
    def from_dict(
        cls,
        response: Any,
        parser: Optional[Callable[[Dict[str, Any]], T]] = None,
    ) -> "PaginatedResponse[T]":
        """
        Build from a ``{"data": [...], "pagination": {...}}`` response.

        A bare list response is treated as a single complete page. Missing or
        malformed pagination fields fall back to describing what was received.
        """
        if isinstance(response, list):
            items, meta = response, {}
        elif isinstance(response, dict):
            items = response.get("data")
            meta = response.get("pagination") or response.get("meta")
        else:
            items, meta = [], {}

        if not isinstance(items, list):
            items = []
        if not isinstance(meta, dict):
            meta = {}

        if parser:
            data = [parser(item) for item in items if isinstance(item, dict)]
        else:
            data = list(items)
        return cls(
            data=data,
            page=_as_int(meta.get("page"), 1),
            limit=_as_int(meta.get("limit"), len(data) or 10),
            total=_as_int(meta.get("total"), len(data)),
        )


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
