"""
Registry of service object types. It maps XML element names returned by the server to service object
types, and service object types to the constructors used to build them.

Two construction contexts are supported: building a root object from a service session, and building an
item embedded in an item attachment. Every registered type has a service constructor; only items have an
attachment constructor.

The registry is populated once, at construction, and is only read afterwards. It does no locking: register()
must not be called once the registry is shared between threads.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Literal, Mapping, Optional, Union, overload

from ..objects.context import ExchangeService, ItemAttachment
from ..objects.elements import XmlElementNames
from ..objects.enums import ConstructorKind, ServiceObjectType
from ..objects.service_objects import (
    Appointment,
    CalendarFolder,
    Contact,
    ContactGroup,
    ContactsFolder,
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
    ServiceObject,
    Task,
    TasksFolder,
)
from .constructors import AttachmentConstructor, ServiceConstructor

logger = logging.getLogger(__name__)


def _type_name(object_type: object) -> str:
    """Name of a type handle for error messages. Non-member handles are shown as given."""
    return str(getattr(object_type, "value", repr(object_type)))


class ServiceObjectRegistryError(Exception):
    """Base class for registry errors."""


class UnknownElementNameError(ServiceObjectRegistryError, LookupError):
    """Raised when no service object type is registered for an element name."""

    def __init__(self, xml_element_name: str):
        super().__init__(f"No service object type registered for element {xml_element_name!r}.")
        self.xml_element_name = xml_element_name


class UnknownServiceObjectTypeError(ServiceObjectRegistryError, LookupError):
    """Raised when a service object type is not registered at all."""

    def __init__(self, object_type: ServiceObjectType):
        super().__init__(f"Service object type {_type_name(object_type)} is not registered.")
        self.object_type = object_type


class AttachmentConstructionNotSupportedError(ServiceObjectRegistryError, LookupError):
    """Raised when a registered type cannot be built from an item attachment."""

    def __init__(self, object_type: ServiceObjectType):
        super().__init__(
            f"Service object type {_type_name(object_type)} cannot be created from an item attachment."
        )
        self.object_type = object_type


class DuplicateRegistrationError(ServiceObjectRegistryError):
    """Raised when a registration conflicts with an existing one."""


@dataclass(frozen=True)
class ServiceObjectDefinition:
    """Definition of a service object type and how to construct it."""

    xml_element_name: str
    object_type: ServiceObjectType
    service_constructor: ServiceConstructor
    attachment_constructor: Optional[AttachmentConstructor] = None

    @property
    def supports_attachment(self) -> bool:
        """Derived property: attachment construction is possible if there is an attachment_constructor."""
        return self.attachment_constructor is not None

    def create(self, service: ExchangeService) -> ServiceObject:
        """Build an instance bound to a service session."""
        return self.service_constructor(service)

    def create_from_attachment(self, parent_attachment: ItemAttachment, is_new: bool) -> Item:
        """Build an instance embedded in an item attachment."""
        if self.attachment_constructor is None:
            raise AttachmentConstructionNotSupportedError(self.object_type)
        return self.attachment_constructor(parent_attachment, is_new)


ChangeObserver = Union[ServiceConstructor, AttachmentConstructor]


class ServiceObjectRegistry:
    """Maps element names to service object types and types to constructors.

    Args:
        populate: Register the built-in service object types (default). Pass False to get an empty
            registry and fill it with register().
    """

    def __init__(self, populate: bool = True):
        self._element_name_to_type: Dict[str, ServiceObjectType] = {}
        self._service_constructors: Dict[ServiceObjectType, ServiceConstructor] = {}
        self._attachment_constructors: Dict[ServiceObjectType, AttachmentConstructor] = {}
        self._service_observers: List[ServiceConstructor] = []
        self._attachment_observers: List[AttachmentConstructor] = []

        if populate:
            self.initialize()

    def initialize(self) -> None:
        """Register the built-in service object types.

        If you add a service object class that can be returned by the server, add it here with its
        element name and constructor(s).
        """
        self.register(
            XmlElementNames.CALENDAR_ITEM,
            ServiceObjectType.APPOINTMENT,
            Appointment,
            Appointment.from_attachment,
        )
        self.register(XmlElementNames.CALENDAR_FOLDER, ServiceObjectType.CALENDAR_FOLDER, CalendarFolder)
        self.register(
            XmlElementNames.CONTACT,
            ServiceObjectType.CONTACT,
            Contact,
            Contact.from_attachment,
        )
        self.register(XmlElementNames.CONTACTS_FOLDER, ServiceObjectType.CONTACTS_FOLDER, ContactsFolder)
        self.register(
            XmlElementNames.DISTRIBUTION_LIST,
            ServiceObjectType.CONTACT_GROUP,
            ContactGroup,
            ContactGroup.from_attachment,
        )
        self.register(XmlElementNames.CONVERSATION, ServiceObjectType.CONVERSATION, Conversation)
        self.register(
            XmlElementNames.MESSAGE,
            ServiceObjectType.EMAIL_MESSAGE,
            EmailMessage,
            EmailMessage.from_attachment,
        )
        self.register(XmlElementNames.FOLDER, ServiceObjectType.FOLDER, Folder)
        self.register(XmlElementNames.ITEM, ServiceObjectType.ITEM, Item, Item.from_attachment)
        self.register(
            XmlElementNames.MEETING_CANCELLATION,
            ServiceObjectType.MEETING_CANCELLATION,
            MeetingCancellation,
            MeetingCancellation.from_attachment,
        )
        self.register(
            XmlElementNames.MEETING_MESSAGE,
            ServiceObjectType.MEETING_MESSAGE,
            MeetingMessage,
            MeetingMessage.from_attachment,
        )
        self.register(
            XmlElementNames.MEETING_REQUEST,
            ServiceObjectType.MEETING_REQUEST,
            MeetingRequest,
            MeetingRequest.from_attachment,
        )
        self.register(
            XmlElementNames.MEETING_RESPONSE,
            ServiceObjectType.MEETING_RESPONSE,
            MeetingResponse,
            MeetingResponse.from_attachment,
        )
        self.register(
            XmlElementNames.POST_ITEM,
            ServiceObjectType.POST_ITEM,
            PostItem,
            PostItem.from_attachment,
        )
        self.register(XmlElementNames.SEARCH_FOLDER, ServiceObjectType.SEARCH_FOLDER, SearchFolder)
        self.register(XmlElementNames.TASK, ServiceObjectType.TASK, Task, Task.from_attachment)
        self.register(XmlElementNames.TASKS_FOLDER, ServiceObjectType.TASKS_FOLDER, TasksFolder)

        logger.debug(f"Registered {len(self._service_constructors)} service object types")

    def register(
        self,
        xml_element_name: str,
        object_type: ServiceObjectType,
        service_constructor: ServiceConstructor,
        attachment_constructor: Optional[AttachmentConstructor] = None,
    ) -> None:
        """Register a service object type under an element name.

        Registering the same values again is a no-op. A missing attachment_constructor never removes an
        attachment constructor registered earlier for the same type.

        Args:
            xml_element_name: Element name the server uses for the type
            object_type: Service object type
            service_constructor: Builds the type from a service session (required)
            attachment_constructor: Builds the type from an item attachment, or None if unsupported

        Raises:
            ValueError: If xml_element_name is empty or service_constructor is missing.
            DuplicateRegistrationError: If the registration conflicts with an existing one.
        """
        if not xml_element_name:
            raise ValueError("xml_element_name must not be empty")
        if service_constructor is None:
            raise ValueError(f"service_constructor is required for {_type_name(object_type)}")

        self._check_conflicts(xml_element_name, object_type, service_constructor, attachment_constructor)

        self._element_name_to_type[xml_element_name] = object_type
        self._service_constructors[object_type] = service_constructor
        if attachment_constructor is not None:
            self._attachment_constructors[object_type] = attachment_constructor

    def _check_conflicts(
        self,
        xml_element_name: str,
        object_type: ServiceObjectType,
        service_constructor: ServiceConstructor,
        attachment_constructor: Optional[AttachmentConstructor],
    ) -> None:
        """Raise DuplicateRegistrationError if a registration would overwrite a different value."""
        registered_type = self._element_name_to_type.get(xml_element_name)
        if registered_type is not None and registered_type is not object_type:
            raise DuplicateRegistrationError(
                f"Element {xml_element_name!r} is already registered for {_type_name(registered_type)}, "
                f"cannot register it for {_type_name(object_type)}."
            )

        for name, registered in self._element_name_to_type.items():
            if registered is object_type and name != xml_element_name:
                raise DuplicateRegistrationError(
                    f"{_type_name(object_type)} is already registered under element {name!r}, "
                    f"cannot register it under {xml_element_name!r}."
                )

        registered_service = self._service_constructors.get(object_type)
        if registered_service is not None and registered_service != service_constructor:
            raise DuplicateRegistrationError(
                f"A different service constructor is already registered for {_type_name(object_type)}."
            )

        registered_attachment = self._attachment_constructors.get(object_type)
        if (
            attachment_constructor is not None
            and registered_attachment is not None
            and registered_attachment != attachment_constructor
        ):
            raise DuplicateRegistrationError(
                f"A different attachment constructor is already registered for {_type_name(object_type)}."
            )

    def lookup_type(self, xml_element_name: str) -> ServiceObjectType:
        """Return the service object type registered for an element name.

        Raises:
            UnknownElementNameError: If the element name is not registered.
        """
        try:
            return self._element_name_to_type[xml_element_name]
        except KeyError:
            raise UnknownElementNameError(xml_element_name) from None

    def lookup_service_constructor(self, object_type: ServiceObjectType) -> ServiceConstructor:
        """Return the constructor that builds object_type from a service session.

        Raises:
            UnknownServiceObjectTypeError: If the type is not registered.
        """
        try:
            return self._service_constructors[object_type]
        except KeyError:
            raise UnknownServiceObjectTypeError(object_type) from None

    def lookup_attachment_constructor(self, object_type: ServiceObjectType) -> AttachmentConstructor:
        """Return the constructor that builds object_type from an item attachment.

        Raises:
            UnknownServiceObjectTypeError: If the type is not registered.
            AttachmentConstructionNotSupportedError: If the type is registered without an attachment
                constructor.
        """
        if object_type not in self._service_constructors:
            raise UnknownServiceObjectTypeError(object_type)
        try:
            return self._attachment_constructors[object_type]
        except KeyError:
            raise AttachmentConstructionNotSupportedError(object_type) from None

    def get_definition(self, xml_element_name: str) -> ServiceObjectDefinition:
        """Return everything registered for an element name as a single definition."""
        object_type = self.lookup_type(xml_element_name)
        return ServiceObjectDefinition(
            xml_element_name=xml_element_name,
            object_type=object_type,
            service_constructor=self.lookup_service_constructor(object_type),
            attachment_constructor=self._attachment_constructors.get(object_type),
        )

    def definitions(self) -> Iterator[ServiceObjectDefinition]:
        """Iterate over all registrations, in registration order."""
        for xml_element_name in self._element_name_to_type:
            yield self.get_definition(xml_element_name)

    @property
    def element_name_to_type_map(self) -> Mapping[str, ServiceObjectType]:
        return MappingProxyType(self._element_name_to_type)

    @property
    def service_constructors(self) -> Mapping[ServiceObjectType, ServiceConstructor]:
        return MappingProxyType(self._service_constructors)

    @property
    def attachment_constructors(self) -> Mapping[ServiceObjectType, AttachmentConstructor]:
        return MappingProxyType(self._attachment_constructors)

    def __contains__(self, xml_element_name: object) -> bool:
        return xml_element_name in self._element_name_to_type

    def __len__(self) -> int:
        return len(self._element_name_to_type)

    # --- Change observers ---
    # Kept for owners that want to wire construction events. The registry never calls them.

    def _observers(self, kind: ConstructorKind) -> List[ChangeObserver]:
        if kind is ConstructorKind.SERVICE:
            return self._service_observers  # type: ignore[return-value]
        return self._attachment_observers  # type: ignore[return-value]

    @overload
    def add_change_observer(
        self, kind: Literal[ConstructorKind.SERVICE], observer: ServiceConstructor
    ) -> None: ...

    @overload
    def add_change_observer(
        self, kind: Literal[ConstructorKind.ATTACHMENT], observer: AttachmentConstructor
    ) -> None: ...

    def add_change_observer(self, kind: ConstructorKind, observer: ChangeObserver) -> None:
        """Append an observer to the list for kind. Duplicates are kept."""
        self._observers(kind).append(observer)

    @overload
    def remove_change_observer(
        self, kind: Literal[ConstructorKind.SERVICE], observer: ServiceConstructor
    ) -> None: ...

    @overload
    def remove_change_observer(
        self, kind: Literal[ConstructorKind.ATTACHMENT], observer: AttachmentConstructor
    ) -> None: ...

    def remove_change_observer(self, kind: ConstructorKind, observer: ChangeObserver) -> None:
        """Remove the first observer equal to observer from the list for kind. No-op if not present."""
        observers = self._observers(kind)
        if observer in observers:
            observers.remove(observer)

    @overload
    def change_observers(
        self, kind: Literal[ConstructorKind.SERVICE]
    ) -> tuple[ServiceConstructor, ...]: ...

    @overload
    def change_observers(
        self, kind: Literal[ConstructorKind.ATTACHMENT]
    ) -> tuple[AttachmentConstructor, ...]: ...

    def change_observers(self, kind: ConstructorKind) -> tuple[ChangeObserver, ...]:
        """Return a snapshot of the observers registered for kind, in insertion order."""
        return tuple(self._observers(kind))
