"""Application operations."""

from servicefabric.domains.applications.client import ApplicationClient
from servicefabric.domains.applications.models import (
    ApplicationItem,
    ApplicationItemsPage,
    AppParameter,
)

__all__ = ["ApplicationClient", "ApplicationItem", "ApplicationItemsPage", "AppParameter"]
