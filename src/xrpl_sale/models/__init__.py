"""
Data models for XRPL.Sale client.

This package contains all data structures used throughout the client,
following the state-first principle with immutable data structures.
"""

from .config import ClientConfig, Environment, RetryConfig
from .projects import PaginatedResponse, Project
from .request import HttpMethod, RequestSpec
from .webhook import WebhookEvent

__all__ = [
    # Configuration
    "ClientConfig",
    "Environment",
    "RetryConfig",
    # Requests
    "HttpMethod",
    "RequestSpec",
    # Results
    "PaginatedResponse",
    "Project",
    # Webhooks
    "WebhookEvent",
]
