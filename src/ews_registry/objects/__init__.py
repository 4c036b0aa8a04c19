"""
Objects package: type handles, element names, construction contexts and the service object variants.
"""

from .enums import ConstructorKind, ServiceObjectType
from .elements import XmlElementNames
from .service_objects import OBJECT_CLASS_REGISTRY

__all__ = ["ConstructorKind", "OBJECT_CLASS_REGISTRY", "ServiceObjectType", "XmlElementNames"]
