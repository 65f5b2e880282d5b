"""Calendar, appointment and block slot tools."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_CALENDAR_ID = path("calendarId", "Calendar ID")
_EVENT_ID = path("eventId", "Appointment / event ID")

_CALENDAR_TYPES = ("round_robin", "event", "class_booking", "collective", "service_booking", "personal")
_APPOINTMENT_STATUSES = ("new", "confirmed", "cancelled", "showed", "noshow", "invalid")

_CALENDAR_FIELDS = (
    body("description", "Calendar description"),
    body("groupId", "Calendar group ID"),
    body("slug", "Booking page slug"),
    body("slotDuration", "Slot length in minutes", type="integer"),
    body("slotInterval", "Interval between slots in minutes", type="integer"),
    body("slotBuffer", "Buffer after each slot in minutes", type="integer"),
    body("appoinmentPerSlot", "Appointments allowed per slot", type="integer"),
    body("teamMembers", "Team members", type="array", items={"type": "object"}),
    body("openHours", "Weekly availability", type="array", items={"type": "object"}),
    body("isActive", "Whether bookings are open", type="boolean"),
    body("autoConfirm", "Confirm bookings automatically", type="boolean"),
)

_APPOINTMENT_FIELDS = (
    body("endTime", "End time (ISO 8601)"),
    body("title", "Appointment title"),
    body("appointmentStatus", "Status", enum=_APPOINTMENT_STATUSES),
    body("assignedUserId", "Assigned user ID"),
    body("address", "Meeting location or link"),
    body("meetingLocationType", "Meeting location type"),
    body("ignoreDateRange", "Skip calendar availability checks", type="boolean"),
    body("toNotify", "Run notification automations", type="boolean"),
)


class CalendarTools(RestToolGroup):
    """Tools for the GHL calendars API."""

    group_id = "calendars"
    operations = (
        op(
            "get_calendar_groups",
            "List calendar groups",
            "GET", "/calendars/groups",
            location(),
        ),
        op(
            "get_calendars",
            "List calendars of the location",
            "GET", "/calendars/",
            location(),
            query("groupId", "Filter by calendar group"),
            query("showDrafted", "Include draft calendars", type="boolean"),
        ),
        op(
            "create_calendar",
            "Create a calendar",
            "POST", "/calendars/",
            location("body"),
            body("name", "Calendar name", required=True),
            body("calendarType", "Calendar type", enum=_CALENDAR_TYPES),
            *_CALENDAR_FIELDS,
        ),
        op(
            "get_calendar",
            "Get a calendar by ID",
            "GET", "/calendars/{calendarId}",
            _CALENDAR_ID,
        ),
        op(
            "update_calendar",
            "Update a calendar",
            "PUT", "/calendars/{calendarId}",
            _CALENDAR_ID,
            body("name", "Calendar name"),
            *_CALENDAR_FIELDS,
        ),
        op(
            "delete_calendar",
            "Delete a calendar",
            "DELETE", "/calendars/{calendarId}",
            _CALENDAR_ID,
        ),
        op(
            "get_calendar_events",
            "List appointments and events in a time range",
            "GET", "/calendars/events",
            location(),
            query("startTime", "Range start (epoch ms)", required=True),
            query("endTime", "Range end (epoch ms)", required=True),
            query("calendarId", "Filter by calendar"),
            query("userId", "Filter by user"),
            query("groupId", "Filter by calendar group"),
        ),
        op(
            "get_free_slots",
            "Get available booking slots of a calendar",
            "GET", "/calendars/{calendarId}/free-slots",
            _CALENDAR_ID,
            query("startDate", "Range start (epoch ms)", type="number", required=True),
            query("endDate", "Range end (epoch ms)", type="number", required=True),
            query("timezone", "IANA timezone for the returned slots"),
            query("userId", "Only slots of this user"),
        ),
        op(
            "create_appointment",
            "Book an appointment",
            "POST", "/calendars/events/appointments",
            location("body"),
            body("calendarId", "Calendar ID", required=True),
            body("contactId", "Contact ID", required=True),
            body("startTime", "Start time (ISO 8601)", required=True),
            *_APPOINTMENT_FIELDS,
        ),
        op(
            "get_appointment",
            "Get an appointment by ID",
            "GET", "/calendars/events/appointments/{eventId}",
            _EVENT_ID,
        ),
        op(
            "update_appointment",
            "Update an appointment",
            "PUT", "/calendars/events/appointments/{eventId}",
            _EVENT_ID,
            body("calendarId", "Calendar ID"),
            body("startTime", "Start time (ISO 8601)"),
            *_APPOINTMENT_FIELDS,
        ),
        op(
            "delete_appointment",
            "Delete an appointment",
            "DELETE", "/calendars/events/{eventId}",
            _EVENT_ID,
        ),
        op(
            "create_block_slot",
            "Block time on a calendar",
            "POST", "/calendars/events/block-slots",
            location("body"),
            body("startTime", "Start time (ISO 8601)", required=True),
            body("endTime", "End time (ISO 8601)", required=True),
            body("calendarId", "Calendar ID"),
            body("title", "Block title"),
            body("assignedUserId", "User whose time is blocked"),
        ),
        op(
            "update_block_slot",
            "Update a blocked time slot",
            "PUT", "/calendars/events/block-slots/{eventId}",
            _EVENT_ID,
            body("startTime", "Start time (ISO 8601)"),
            body("endTime", "End time (ISO 8601)"),
            body("calendarId", "Calendar ID"),
            body("title", "Block title"),
            body("assignedUserId", "User whose time is blocked"),
        ),
    )
