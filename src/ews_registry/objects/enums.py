"""
Type handles of the service object variants, and the construction contexts constructors are registered for.
"""

from enum import Enum


class ServiceObjectType(Enum):
    """Service object variant."""

    APPOINTMENT = "Appointment"
    CALENDAR_FOLDER = "CalendarFolder"
    CONTACT = "Contact"
    CONTACTS_FOLDER = "ContactsFolder"
    CONTACT_GROUP = "ContactGroup"
    CONVERSATION = "Conversation"
    EMAIL_MESSAGE = "EmailMessage"
    FOLDER = "Folder"
    ITEM = "Item"
    MEETING_CANCELLATION = "MeetingCancellation"
    MEETING_MESSAGE = "MeetingMessage"
    MEETING_REQUEST = "MeetingRequest"
    MEETING_RESPONSE = "MeetingResponse"
    POST_ITEM = "PostItem"
    SEARCH_FOLDER = "SearchFolder"
    TASK = "Task"
    TASKS_FOLDER = "TasksFolder"


class ConstructorKind(Enum):
    """Construction context a constructor is used in."""

    SERVICE = "service"  # Root object fetched or created through a service session
    ATTACHMENT = "attachment"  # Item embedded in an item attachment
