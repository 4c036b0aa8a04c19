"""
XML element names of the service objects a server can return.

Element names are not always the object's class name (a CalendarItem is an
Appointment, a DistributionList is a ContactGroup).
"""


class XmlElementNames:
    """Element name constants, as they appear on the wire."""

    CALENDAR_ITEM = "CalendarItem"
    CALENDAR_FOLDER = "CalendarFolder"
    CONTACT = "Contact"
    CONTACTS_FOLDER = "ContactsFolder"
    DISTRIBUTION_LIST = "DistributionList"
    CONVERSATION = "Conversation"
    MESSAGE = "Message"
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
