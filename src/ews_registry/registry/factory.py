"""
Helpers for readers that create service objects from element names found in a response.

In strict mode lookup failures propagate to the caller. In lenient mode an unknown element name (or an
element that cannot be embedded in an attachment) is logged and skipped by returning None, so readers keep
working when the server sends element names this library does not know yet. An unregistered type found
through a registered element name always propagates: it means the registry itself is inconsistent.
"""

import logging
from typing import Optional

from ..objects.context import ExchangeService, ItemAttachment
from ..objects.service_objects import Item, ServiceObject
from .registry import (
    AttachmentConstructionNotSupportedError,
    ServiceObjectRegistry,
    UnknownElementNameError,
)

logger = logging.getLogger(__name__)


def create_service_object(
    registry: ServiceObjectRegistry,
    service: ExchangeService,
    xml_element_name: str,
    strict: bool = True,
) -> Optional[ServiceObject]:
    """Create a service object bound to a service session from an element name.

    Args:
        registry: Registry to resolve the element name with
        service: Service session the object belongs to
        xml_element_name: Element name read from the response
        strict: Raise on unknown element names instead of returning None

    Returns:
        New service object, or None if the element name is unknown and strict is False.

    Raises:
        UnknownElementNameError: If the element name is unknown and strict is True.
    """
    try:
        object_type = registry.lookup_type(xml_element_name)
    except UnknownElementNameError:
        if strict:
            raise
        logger.warning(f"Skipping unknown element {xml_element_name!r}")
        return None

    constructor = registry.lookup_service_constructor(object_type)
    return constructor(service)


def create_item_from_attachment(
    registry: ServiceObjectRegistry,
    parent_attachment: ItemAttachment,
    xml_element_name: str,
    is_new: bool,
    strict: bool = True,
) -> Optional[Item]:
    """Create an item embedded in an item attachment from an element name.

    Args:
        registry: Registry to resolve the element name with
        parent_attachment: Attachment the item is embedded in
        xml_element_name: Element name read from the attachment content
        is_new: Whether the item is newly created. Passed to the constructor unchanged.
        strict: Raise on unknown or non-embeddable element names instead of returning None

    Returns:
        New item, or None if the element cannot be created and strict is False.

    Raises:
        UnknownElementNameError: If the element name is unknown and strict is True.
        AttachmentConstructionNotSupportedError: If the type cannot be embedded and strict is True.
    """
    try:
        object_type = registry.lookup_type(xml_element_name)
        constructor = registry.lookup_attachment_constructor(object_type)
    except (UnknownElementNameError, AttachmentConstructionNotSupportedError) as e:
        if strict:
            raise
        logger.warning(f"Skipping attachment element {xml_element_name!r}: {e}")
        return None

    item = constructor(parent_attachment, is_new)
    parent_attachment.item = item
    return item
