"""Shared pytest fixtures for ews-registry tests."""

import pytest

from ews_registry.objects.context import ExchangeService, ItemAttachment
from ews_registry.registry.registry import ServiceObjectRegistry


@pytest.fixture
def service() -> ExchangeService:
    """Service session used as the service construction context."""
    return ExchangeService(url="https://mail.example.com/EWS/Exchange.asmx")


@pytest.fixture
def attachment(service: ExchangeService) -> ItemAttachment:
    """Item attachment used as the attachment construction context."""
    return ItemAttachment(service=service, name="Forwarded message")


@pytest.fixture
def registry() -> ServiceObjectRegistry:
    """Registry populated with the built-in service object types."""
    return ServiceObjectRegistry()
