"""
Element-name to service object type registry for Exchange Web Services object models.
"""

from .registry.registry import (
    AttachmentConstructionNotSupportedError,
    DuplicateRegistrationError,
    ServiceObjectDefinition,
    ServiceObjectRegistry,
    ServiceObjectRegistryError,
    UnknownElementNameError,
    UnknownServiceObjectTypeError,
)
from .objects.enums import ConstructorKind, ServiceObjectType

__all__ = [
    "AttachmentConstructionNotSupportedError",
    "ConstructorKind",
    "DuplicateRegistrationError",
    "ServiceObjectDefinition",
    "ServiceObjectRegistry",
    "ServiceObjectRegistryError",
    "ServiceObjectType",
    "UnknownElementNameError",
    "UnknownServiceObjectTypeError",
]
