"""Contact management tools: contacts, tags, tasks, notes, campaigns, workflows."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_CONTACT_ID = path("contactId", "Contact ID")
_TASK_ID = path("taskId", "Task ID")
_NOTE_ID = path("noteId", "Note ID")
_TAGS = body("tags", "Tags to apply", type="array", required=True)
_FOLLOWERS = body("followers", "User IDs of followers", type="array", required=True)

_CONTACT_FIELDS = (
    body("firstName", "First name"),
    body("lastName", "Last name"),
    body("name", "Full name"),
    body("email", "Email address"),
    body("phone", "Phone number in E.164 format"),
    body("companyName", "Company name"),
    body("address1", "Street address"),
    body("city", "City"),
    body("state", "State or province"),
    body("postalCode", "Postal code"),
    body("country", "Country code"),
    body("website", "Website URL"),
    body("timezone", "IANA timezone"),
    body("source", "Lead source"),
    body("assignedTo", "User ID the contact is assigned to"),
    body("tags", "Tags", type="array"),
    body("customFields", "Custom field values", type="array", items={"type": "object"}),
)


class ContactTools(RestToolGroup):
    """Tools for the GHL contacts API."""

    group_id = "contacts"
    operations = (
        op(
            "create_contact",
            "Create a new contact in GoHighLevel",
            "POST", "/contacts/",
            location("body"),
            *_CONTACT_FIELDS,
        ),
        op(
            "search_contacts",
            "Search contacts by free text and filters",
            "POST", "/contacts/search",
            location("body"),
            body("query", "Free text matched against name, email, phone"),
            body("pageLimit", "Results per page (max 500)", type="integer", default=25),
            body("page", "Page number", type="integer"),
            body("filters", "Structured filter groups", type="array", items={"type": "object"}),
            body("sort", "Sort clauses", type="array", items={"type": "object"}),
        ),
        op(
            "get_contact",
            "Get a contact by ID",
            "GET", "/contacts/{contactId}",
            _CONTACT_ID,
        ),
        op(
            "update_contact",
            "Update an existing contact",
            "PUT", "/contacts/{contactId}",
            _CONTACT_ID,
            *_CONTACT_FIELDS,
        ),
        op(
            "add_contact_tags",
            "Add tags to a contact",
            "POST", "/contacts/{contactId}/tags",
            _CONTACT_ID,
            _TAGS,
        ),
        op(
            "remove_contact_tags",
            "Remove tags from a contact",
            "DELETE", "/contacts/{contactId}/tags",
            _CONTACT_ID,
            _TAGS,
        ),
        op(
            "delete_contact",
            "Delete a contact",
            "DELETE", "/contacts/{contactId}",
            _CONTACT_ID,
        ),
        op(
            "get_contact_tasks",
            "List all tasks for a contact",
            "GET", "/contacts/{contactId}/tasks",
            _CONTACT_ID,
        ),
        op(
            "create_contact_task",
            "Create a task for a contact",
            "POST", "/contacts/{contactId}/tasks",
            _CONTACT_ID,
            body("title", "Task title", required=True),
            body("body", "Task description"),
            body("dueDate", "Due date (ISO 8601)", required=True),
            body("completed", "Whether the task is done", type="boolean", default=False),
            body("assignedTo", "User ID the task is assigned to"),
        ),
        op(
            "get_contact_task",
            "Get a single task of a contact",
            "GET", "/contacts/{contactId}/tasks/{taskId}",
            _CONTACT_ID,
            _TASK_ID,
        ),
        op(
            "update_contact_task",
            "Update a task of a contact",
            "PUT", "/contacts/{contactId}/tasks/{taskId}",
            _CONTACT_ID,
            _TASK_ID,
            body("title", "Task title"),
            body("body", "Task description"),
            body("dueDate", "Due date (ISO 8601)"),
            body("completed", "Whether the task is done", type="boolean"),
            body("assignedTo", "User ID the task is assigned to"),
        ),
        op(
            "delete_contact_task",
            "Delete a task of a contact",
            "DELETE", "/contacts/{contactId}/tasks/{taskId}",
            _CONTACT_ID,
            _TASK_ID,
        ),
        op(
            "update_task_completion",
            "Mark a contact task as completed or not completed",
            "PUT", "/contacts/{contactId}/tasks/{taskId}/completed",
            _CONTACT_ID,
            _TASK_ID,
            body("completed", "Completion status", type="boolean", required=True),
        ),
        op(
            "get_contact_notes",
            "List all notes for a contact",
            "GET", "/contacts/{contactId}/notes",
            _CONTACT_ID,
        ),
        op(
            "create_contact_note",
            "Create a note for a contact",
            "POST", "/contacts/{contactId}/notes",
            _CONTACT_ID,
            body("body", "Note content", required=True),
            body("userId", "Author user ID"),
        ),
        op(
            "get_contact_note",
            "Get a single note of a contact",
            "GET", "/contacts/{contactId}/notes/{noteId}",
            _CONTACT_ID,
            _NOTE_ID,
        ),
        op(
            "update_contact_note",
            "Update a note of a contact",
            "PUT", "/contacts/{contactId}/notes/{noteId}",
            _CONTACT_ID,
            _NOTE_ID,
            body("body", "Note content", required=True),
            body("userId", "Author user ID"),
        ),
        op(
            "delete_contact_note",
            "Delete a note of a contact",
            "DELETE", "/contacts/{contactId}/notes/{noteId}",
            _CONTACT_ID,
            _NOTE_ID,
        ),
        op(
            "upsert_contact",
            "Create a contact or update the one matching email/phone",
            "POST", "/contacts/upsert",
            location("body"),
            *_CONTACT_FIELDS,
        ),
        op(
            "get_duplicate_contact",
            "Find an existing contact with the same email or phone",
            "GET", "/contacts/search/duplicate",
            location(),
            query("email", "Email to match"),
            query("number", "Phone number to match"),
        ),
        op(
            "get_contacts_by_business",
            "List contacts associated with a business",
            "GET", "/contacts/business/{businessId}",
            path("businessId", "Business ID"),
            location(),
            query("limit", "Maximum results", type="integer"),
            query("skip", "Results to skip", type="integer"),
            query("query", "Free text filter"),
        ),
        op(
            "get_contact_appointments",
            "List appointments booked by a contact",
            "GET", "/contacts/{contactId}/appointments",
            _CONTACT_ID,
        ),
        op(
            "bulk_update_contact_tags",
            "Add or remove tags on many contacts at once",
            "POST", "/contacts/tags/bulk/{type}",
            path("type", "Operation", enum=("add", "remove")),
            location("body"),
            body("contacts", "Contact IDs", type="array", required=True),
            body("tags", "Tags", type="array", required=True),
            body("removeAllTags", "Remove every tag (remove only)", type="boolean"),
        ),
        op(
            "bulk_update_contact_business",
            "Assign many contacts to a business, or clear it",
            "POST", "/contacts/bulk/business",
            location("body"),
            body("ids", "Contact IDs", type="array", required=True),
            body("businessId", "Business ID (null clears the association)"),
        ),
        op(
            "add_contact_followers",
            "Add followers to a contact",
            "POST", "/contacts/{contactId}/followers",
            _CONTACT_ID,
            _FOLLOWERS,
        ),
        op(
            "remove_contact_followers",
            "Remove followers from a contact",
            "DELETE", "/contacts/{contactId}/followers",
            _CONTACT_ID,
            _FOLLOWERS,
        ),
        op(
            "add_contact_to_campaign",
            "Add a contact to a campaign",
            "POST", "/contacts/{contactId}/campaigns/{campaignId}",
            _CONTACT_ID,
            path("campaignId", "Campaign ID"),
        ),
        op(
            "remove_contact_from_campaign",
            "Remove a contact from a campaign",
            "DELETE", "/contacts/{contactId}/campaigns/{campaignId}",
            _CONTACT_ID,
            path("campaignId", "Campaign ID"),
        ),
        op(
            "remove_contact_from_all_campaigns",
            "Remove a contact from every campaign",
            "DELETE", "/contacts/{contactId}/campaigns/removeAll",
            _CONTACT_ID,
        ),
        op(
            "add_contact_to_workflow",
            "Enroll a contact in a workflow",
            "POST", "/contacts/{contactId}/workflow/{workflowId}",
            _CONTACT_ID,
            path("workflowId", "Workflow ID"),
            body("eventStartTime", "Start time for the workflow event (ISO 8601)"),
        ),
        op(
            "remove_contact_from_workflow",
            "Remove a contact from a workflow",
            "DELETE", "/contacts/{contactId}/workflow/{workflowId}",
            _CONTACT_ID,
            path("workflowId", "Workflow ID"),
        ),
    )
