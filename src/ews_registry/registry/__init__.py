"""
Registry package: service object registry, constructor protocols, YAML tables and construction helpers.
"""

from .config import RegistryConfigError, load_registry
from .factory import create_item_from_attachment, create_service_object
from .registry import ServiceObjectDefinition, ServiceObjectRegistry

__all__ = [
    "RegistryConfigError",
    "ServiceObjectDefinition",
    "ServiceObjectRegistry",
    "create_item_from_attachment",
    "create_service_object",
    "load_registry",
]
