"""Location (sub-account) tools: settings, tags, tasks, custom fields and values."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_LOCATION_ID = location("path")
_TAG_ID = path("tagId", "Tag ID")
_CUSTOM_FIELD_ID = path("customFieldId", "Custom field ID")
_CUSTOM_VALUE_ID = path("customValueId", "Custom value ID")

_FIELD_TYPES = (
    "TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX",
    "SINGLE_OPTIONS", "MULTIPLE_OPTIONS", "FLOAT", "TIME", "DATE",
    "TEXTBOX_LIST", "FILE_UPLOAD", "SIGNATURE",
)

_LOCATION_FIELDS = (
    body("phone", "Phone number"),
    body("address", "Street address"),
    body("city", "City"),
    body("state", "State or province"),
    body("country", "Country code"),
    body("postalCode", "Postal code"),
    body("website", "Website URL"),
    body("timezone", "IANA timezone"),
    body("prospectInfo", "Prospect first name, last name and email", type="object"),
    body("settings", "Location settings", type="object"),
    body("social", "Social profile URLs", type="object"),
)

_CUSTOM_FIELD_FIELDS = (
    body("placeholder", "Placeholder text"),
    body("acceptedFormat", "Accepted file formats", type="array"),
    body("isMultipleFile", "Allow multiple files", type="boolean"),
    body("maxNumberOfFiles", "Maximum number of files", type="integer"),
    body("textBoxListOptions", "Options for list fields", type="array", items={"type": "object"}),
    body("position", "Display position", type="integer"),
    body("model", "Object the field belongs to", enum=("contact", "opportunity")),
)


class LocationTools(RestToolGroup):
    """Tools for the GHL locations API."""

    group_id = "locations"
    operations = (
        op(
            "search_locations",
            "Search locations (sub-accounts) of an agency",
            "GET", "/locations/search",
            query("companyId", "Agency company ID"),
            query("email", "Filter by email"),
            query("skip", "Results to skip", type="integer", default=0),
            query("limit", "Maximum results", type="integer", default=10),
            query("order", "Sort order", enum=("asc", "desc")),
        ),
        op(
            "get_location",
            "Get location details",
            "GET", "/locations/{locationId}",
            _LOCATION_ID,
        ),
        op(
            "create_location",
            "Create a location (sub-account)",
            "POST", "/locations/",
            body("name", "Business name", required=True),
            body("companyId", "Agency company ID", required=True),
            body("snapshotId", "Snapshot to load into the location"),
            *_LOCATION_FIELDS,
        ),
        op(
            "update_location",
            "Update a location",
            "PUT", "/locations/{locationId}",
            path("locationId", "Location ID"),
            body("name", "Business name"),
            body("companyId", "Agency company ID", required=True),
            *_LOCATION_FIELDS,
        ),
        op(
            "delete_location",
            "Delete a location",
            "DELETE", "/locations/{locationId}",
            path("locationId", "Location ID"),
            query("deleteTwilioAccount", "Also delete the Twilio account", type="boolean", default=False),
        ),
        op(
            "get_location_tags",
            "List tags of a location",
            "GET", "/locations/{locationId}/tags",
            _LOCATION_ID,
        ),
        op(
            "create_location_tag",
            "Create a tag",
            "POST", "/locations/{locationId}/tags",
            _LOCATION_ID,
            body("name", "Tag name", required=True),
        ),
        op(
            "get_location_tag",
            "Get a tag by ID",
            "GET", "/locations/{locationId}/tags/{tagId}",
            _LOCATION_ID,
            _TAG_ID,
        ),
        op(
            "update_location_tag",
            "Rename a tag",
            "PUT", "/locations/{locationId}/tags/{tagId}",
            _LOCATION_ID,
            _TAG_ID,
            body("name", "Tag name", required=True),
        ),
        op(
            "delete_location_tag",
            "Delete a tag",
            "DELETE", "/locations/{locationId}/tags/{tagId}",
            _LOCATION_ID,
            _TAG_ID,
        ),
        op(
            "search_location_tasks",
            "Search tasks across the location",
            "POST", "/locations/{locationId}/tasks/search",
            _LOCATION_ID,
            body("contactId", "Filter by contact IDs", type="array"),
            body("completed", "Filter by completion", type="boolean"),
            body("assignedTo", "Filter by assigned user IDs", type="array"),
            body("query", "Free text search"),
            body("limit", "Maximum results", type="integer", default=25),
            body("skip", "Results to skip", type="integer", default=0),
            body("businessId", "Filter by business"),
        ),
        op(
            "get_location_custom_fields",
            "List custom fields of a location",
            "GET", "/locations/{locationId}/customFields",
            _LOCATION_ID,
            query("model", "Object type", enum=("contact", "opportunity", "all")),
        ),
        op(
            "create_location_custom_field",
            "Create a custom field",
            "POST", "/locations/{locationId}/customFields",
            _LOCATION_ID,
            body("name", "Field name", required=True),
            body("dataType", "Field type", required=True, enum=_FIELD_TYPES),
            *_CUSTOM_FIELD_FIELDS,
        ),
        op(
            "get_location_custom_field",
            "Get a custom field by ID",
            "GET", "/locations/{locationId}/customFields/{customFieldId}",
            _LOCATION_ID,
            _CUSTOM_FIELD_ID,
        ),
        op(
            "update_location_custom_field",
            "Update a custom field",
            "PUT", "/locations/{locationId}/customFields/{customFieldId}",
            _LOCATION_ID,
            _CUSTOM_FIELD_ID,
            body("name", "Field name", required=True),
            *_CUSTOM_FIELD_FIELDS,
        ),
        op(
            "delete_location_custom_field",
            "Delete a custom field",
            "DELETE", "/locations/{locationId}/customFields/{customFieldId}",
            _LOCATION_ID,
            _CUSTOM_FIELD_ID,
        ),
        op(
            "get_location_custom_values",
            "List custom values of a location",
            "GET", "/locations/{locationId}/customValues",
            _LOCATION_ID,
        ),
        op(
            "create_location_custom_value",
            "Create a custom value",
            "POST", "/locations/{locationId}/customValues",
            _LOCATION_ID,
            body("name", "Custom value name", required=True),
            body("value", "Custom value", required=True),
        ),
        op(
            "get_location_custom_value",
            "Get a custom value by ID",
            "GET", "/locations/{locationId}/customValues/{customValueId}",
            _LOCATION_ID,
            _CUSTOM_VALUE_ID,
        ),
        op(
            "update_location_custom_value",
            "Update a custom value",
            "PUT", "/locations/{locationId}/customValues/{customValueId}",
            _LOCATION_ID,
            _CUSTOM_VALUE_ID,
            body("name", "Custom value name", required=True),
            body("value", "Custom value", required=True),
        ),
        op(
            "delete_location_custom_value",
            "Delete a custom value",
            "DELETE", "/locations/{locationId}/customValues/{customValueId}",
            _LOCATION_ID,
            _CUSTOM_VALUE_ID,
        ),
        op(
            "get_location_templates",
            "List email/SMS templates of a location",
            "GET", "/locations/{locationId}/templates",
            _LOCATION_ID,
            query("originId", "Origin (agency) ID", required=True),
            query("deleted", "Include deleted templates", type="boolean", default=False),
            query("skip", "Results to skip", type="integer", default=0),
            query("limit", "Maximum results", type="integer", default=25),
            query("type", "Template type", enum=("sms", "email", "whatsapp")),
        ),
        op(
            "delete_location_template",
            "Delete a template",
            "DELETE", "/locations/{locationId}/templates/{templateId}",
            _LOCATION_ID,
            path("templateId", "Template ID"),
        ),
        op(
            "get_timezones",
            "List timezones available to the location",
            "GET", "/locations/{locationId}/timezones",
            _LOCATION_ID,
        ),
    )
