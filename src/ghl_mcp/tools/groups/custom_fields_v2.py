"""Custom fields (v2) tools for custom objects."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path

_ID = path("id", "Custom field or folder ID")

_FIELD_FIELDS = (
    body("description", "Field description"),
    body("placeholder", "Placeholder text"),
    body("showInForms", "Show in forms", type="boolean"),
    body("options", "Options for option fields", type="array", items={"type": "object"}),
    body("acceptedFormats", "Accepted file formats"),
    body("maxFileLimit", "Maximum number of files", type="integer"),
    body("allowCustomOption", "Allow values outside the options", type="boolean"),
)


class CustomFieldV2Tools(RestToolGroup):
    """Tools for the GHL custom fields v2 API."""

    group_id = "custom_fields_v2"
    operations = (
        op(
            "ghl_get_custom_field_by_id",
            "Get a custom field or folder by ID",
            "GET", "/custom-fields/{id}",
            _ID,
        ),
        op(
            "ghl_create_custom_field",
            "Create a custom field on an object",
            "POST", "/custom-fields/",
            location("body"),
            body("name", "Field name"),
            body("dataType", "Field type", required=True),
            body("fieldKey", "Field key, e.g. custom_object.pet.name", required=True),
            body("objectKey", "Object key", required=True),
            body("parentId", "Folder ID", required=True),
            *_FIELD_FIELDS,
        ),
        op(
            "ghl_update_custom_field",
            "Update a custom field",
            "PUT", "/custom-fields/{id}",
            _ID,
            location("body"),
            body("name", "Field name"),
            *_FIELD_FIELDS,
        ),
        op(
            "ghl_delete_custom_field",
            "Delete a custom field",
            "DELETE", "/custom-fields/{id}",
            _ID,
        ),
        op(
            "ghl_get_custom_fields_by_object_key",
            "List custom fields and folders of an object",
            "GET", "/custom-fields/object-key/{objectKey}",
            path("objectKey", "Object key"),
            location(),
        ),
        op(
            "ghl_create_custom_field_folder",
            "Create a custom field folder",
            "POST", "/custom-fields/folder",
            location("body"),
            body("objectKey", "Object key", required=True),
            body("name", "Folder name", required=True),
        ),
        op(
            "ghl_update_custom_field_folder",
            "Rename a custom field folder",
            "PUT", "/custom-fields/folder/{id}",
            _ID,
            location("body"),
            body("name", "Folder name", required=True),
        ),
        op(
            "ghl_delete_custom_field_folder",
            "Delete a custom field folder",
            "DELETE", "/custom-fields/folder/{id}",
            _ID,
            location(),
        ),
    )
