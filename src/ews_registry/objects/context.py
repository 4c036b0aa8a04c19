"""
Construction contexts for service objects.

A service object is built either from a live service session (the object is a
root entity fetched from or created on the server) or from an item attachment
(the object is embedded inside another item). Transport and authentication
are not handled here; ExchangeService only carries what objects need to know
about the session that owns them.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ExchangeService:
    """Service session that owns root service objects."""

    url: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Service url must not be empty")


@dataclass
class ItemAttachment:
    """Attachment that embeds an item inside another item.

    Args:
        service: Service owning the item the attachment belongs to
        name: Display name of the attachment
        item: Item embedded in the attachment, set once it has been created
    """

    service: ExchangeService
    name: str = ""
    item: Optional[Any] = field(default=None, repr=False)
