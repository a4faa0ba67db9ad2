"""
Webhook event model for XRPL.Sale client.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class WebhookEvent:
    """
    Event delivered by an XRPL.Sale webhook.

    Attributes:
        type: Event kind, e.g. "investment.created"
        data: Event payload section
        raw: Original payload string as received
        id: Event identifier, when the platform sends one
        timestamp: Event timestamp (ISO 8601), when present
    """
    type: str
    data: Any = field(default_factory=dict)
    raw: str = field(default="", compare=False, repr=False)
    id: Optional[str] = None
    timestamp: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form accepted back by the event parser."""
        result: Dict[str, Any] = {"type": self.type, "data": self.data}
        if self.id is not None:
            result["id"] = self.id
        if self.timestamp is not None:
            result["timestamp"] = self.timestamp
        return result
