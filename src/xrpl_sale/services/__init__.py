"""
API service façades.

Each service builds paths and payloads for one area of the API and
delegates the request to the client.
"""

from .analytics import Analytics
from .auth import Auth
from .base import BaseService
from .investments import Investments
from .projects import Projects
from .webhooks import Webhooks

__all__ = [
    "Analytics",
    "Auth",
    "BaseService",
    "Investments",
    "Projects",
    "Webhooks",
]
