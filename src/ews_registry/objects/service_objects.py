"""
This module contains the service object variants a server can return.

Every variant can be built from a service session by calling the class with
the service. Items can also be built from an item attachment through
from_attachment(); folders and conversations cannot. Property schemas are
not modelled here.
"""

from typing import ClassVar, Optional

from .context import ExchangeService, ItemAttachment
from .elements import XmlElementNames
from .enums import ServiceObjectType


class ServiceObject:
    """Base class of all objects that can be bound to a service session."""

    object_type: ClassVar[ServiceObjectType]
    xml_element_name: ClassVar[str]

    def __init__(self, service: ExchangeService):
        if service is None:
            raise ValueError("service is required to create a service object")
        self.service = service

    def __repr__(self) -> str:
        return f"{type(self).__name__}(service={self.service.url!r})"


class Folder(ServiceObject):
    """Generic folder."""

    object_type = ServiceObjectType.FOLDER
    xml_element_name = XmlElementNames.FOLDER


class CalendarFolder(Folder):
    object_type = ServiceObjectType.CALENDAR_FOLDER
    xml_element_name = XmlElementNames.CALENDAR_FOLDER


class ContactsFolder(Folder):
    object_type = ServiceObjectType.CONTACTS_FOLDER
    xml_element_name = XmlElementNames.CONTACTS_FOLDER


class SearchFolder(Folder):
    object_type = ServiceObjectType.SEARCH_FOLDER
    xml_element_name = XmlElementNames.SEARCH_FOLDER


class TasksFolder(Folder):
    object_type = ServiceObjectType.TASKS_FOLDER
    xml_element_name = XmlElementNames.TASKS_FOLDER


class Conversation(ServiceObject):
    """Conversation thread. Only exists as a root object."""

    object_type = ServiceObjectType.CONVERSATION
    xml_element_name = XmlElementNames.CONVERSATION


class Item(ServiceObject):
    """Generic item.

    An item either belongs to a service directly, or is embedded in an item
    attachment, in which case it takes the attachment's service and keeps a
    reference to the attachment.
    """

    object_type = ServiceObjectType.ITEM
    xml_element_name = XmlElementNames.ITEM

    def __init__(self, service: ExchangeService):
        super().__init__(service)
        self.parent_attachment: Optional[ItemAttachment] = None

    @classmethod
    def from_attachment(cls, parent_attachment: ItemAttachment, is_new: bool) -> "Item":
        """Create an item embedded in an item attachment.

        Args:
            parent_attachment: Attachment the item is embedded in
            is_new: Whether the item is newly created. Ignored by most items.
        """
        if parent_attachment is None:
            raise ValueError("parent_attachment is required to create an attachment item")
        item = cls(parent_attachment.service)
        item.parent_attachment = parent_attachment
        return item

    @property
    def is_attachment(self) -> bool:
        return self.parent_attachment is not None


class Appointment(Item):
    """Calendar item.

    Unlike other items, an appointment built from an attachment remembers
    whether it is new, since a new appointment gets default start and end
    times assigned when it is saved.
    """

    object_type = ServiceObjectType.APPOINTMENT
    xml_element_name = XmlElementNames.CALENDAR_ITEM

    def __init__(self, service: ExchangeService):
        super().__init__(service)
        self.is_new = True

    @classmethod
    def from_attachment(cls, parent_attachment: ItemAttachment, is_new: bool) -> "Appointment":
        appointment = super().from_attachment(parent_attachment, is_new)
        appointment.is_new = is_new
        return appointment


class Contact(Item):
    object_type = ServiceObjectType.CONTACT
    xml_element_name = XmlElementNames.CONTACT


class ContactGroup(Item):
    """Distribution list."""

    object_type = ServiceObjectType.CONTACT_GROUP
    xml_element_name = XmlElementNames.DISTRIBUTION_LIST


class EmailMessage(Item):
    object_type = ServiceObjectType.EMAIL_MESSAGE
    xml_element_name = XmlElementNames.MESSAGE


class MeetingMessage(EmailMessage):
    object_type = ServiceObjectType.MEETING_MESSAGE
    xml_element_name = XmlElementNames.MEETING_MESSAGE


class MeetingRequest(MeetingMessage):
    object_type = ServiceObjectType.MEETING_REQUEST
    xml_element_name = XmlElementNames.MEETING_REQUEST


class MeetingResponse(MeetingMessage):
    object_type = ServiceObjectType.MEETING_RESPONSE
    xml_element_name = XmlElementNames.MEETING_RESPONSE


class MeetingCancellation(MeetingMessage):
    object_type = ServiceObjectType.MEETING_CANCELLATION
    xml_element_name = XmlElementNames.MEETING_CANCELLATION


class PostItem(Item):
    object_type = ServiceObjectType.POST_ITEM
    xml_element_name = XmlElementNames.POST_ITEM


class Task(Item):
    object_type = ServiceObjectType.TASK
    xml_element_name = XmlElementNames.TASK


# Registry for config loader: maps each type handle to the class that implements it.
OBJECT_CLASS_REGISTRY: dict[ServiceObjectType, type[ServiceObject]] = {
    cls.object_type: cls
    for cls in (
        Appointment,
        CalendarFolder,
        Contact,
        ContactsFolder,
        ContactGroup,
        Conversation,
        EmailMessage,
        Folder,
        Item,
        MeetingCancellation,
        MeetingMessage,
        MeetingRequest,
        MeetingResponse,
        PostItem,
        SearchFolder,
        Task,
        TasksFolder,
    )
}
