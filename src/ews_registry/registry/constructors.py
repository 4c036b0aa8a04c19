"""
Call signatures of the two kinds of service object constructors.

Constructors are stored as plain callables. For the built-in variants the
service constructor is the class itself and the attachment constructor is the
class's from_attachment() classmethod, but any callable with a matching
signature can be registered.
"""

from typing import Protocol, TypeVar

from ..objects.context import ExchangeService, ItemAttachment
from ..objects.service_objects import Item, ServiceObject

T_co = TypeVar("T_co", bound=ServiceObject, covariant=True)
I_co = TypeVar("I_co", bound=Item, covariant=True)


class ServiceConstructor(Protocol[T_co]):
    """Builds a service object owned by a service session.

    Args:
        service: Service session the object is bound to

    Returns:
        T_co: New service object
    """

    def __call__(self, service: ExchangeService) -> T_co: ...


class AttachmentConstructor(Protocol[I_co]):
    """Builds an item embedded in an item attachment.

    All attachment constructors must accept is_new (even if they ignore it).

    Args:
        parent_attachment: Attachment the item is embedded in
        is_new: Whether the item is newly created or reconstituted from existing data

    Returns:
        I_co: New item
    """

    def __call__(self, parent_attachment: ItemAttachment, is_new: bool) -> I_co: ...
