# spigetloom/resources/__init__.py
"""Exposes the resource client classes."""

from .authors_client import AuthorsClient
from .base_client import BaseResourceClient
from .categories_client import CategoriesClient
from .resources_client import ResourcesClient
from .search_client import SearchClient
from .webhooks_client import WebhooksClient

__all__ = [
    "AuthorsClient",
    "BaseResourceClient",
    "CategoriesClient",
    "ResourcesClient",
    "SearchClient",
    "WebhooksClient",
]
