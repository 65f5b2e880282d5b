"""Custom object tools: schemas and records."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_KEY = path("key", "Object key, e.g. custom_objects.pets")
_SCHEMA_KEY = path("schemaKey", "Object key, e.g. custom_objects.pets")
_RECORD_ID = path("recordId", "Record ID")


class ObjectTools(RestToolGroup):
    """Tools for the GHL custom objects API."""

    group_id = "objects"
    operations = (
        op(
            "get_all_objects",
            "List all object schemas of the location",
            "GET", "/objects/",
            location(),
        ),
        op(
            "create_object_schema",
            "Create a custom object schema",
            "POST", "/objects/",
            location("body"),
            body("labels", "Singular and plural labels", type="object", required=True),
            body("key", "Object key, e.g. custom_objects.pets", required=True),
            body("primaryDisplayPropertyDetails", "Primary display property", type="object", required=True),
            body("description", "Object description"),
        ),
        op(
            "get_object_schema",
            "Get an object schema and its fields",
            "GET", "/objects/{key}",
            _KEY,
            location(),
            query("fetchProperties", "Include field definitions", type="boolean", default=True),
        ),
        op(
            "update_object_schema",
            "Update a custom object schema",
            "PUT", "/objects/{key}",
            _KEY,
            location("body"),
            body("labels", "Singular and plural labels", type="object"),
            body("description", "Object description"),
            body("searchableProperties", "Searchable field keys", type="array", required=True),
        ),
        op(
            "create_object_record",
            "Create a record of a custom object",
            "POST", "/objects/{schemaKey}/records",
            _SCHEMA_KEY,
            location("body"),
            body("properties", "Field values keyed by field key", type="object", required=True),
            body("owner", "Owner user IDs", type="array"),
            body("followers", "Follower user IDs", type="array"),
        ),
        op(
            "get_object_record",
            "Get a record of a custom object",
            "GET", "/objects/{schemaKey}/records/{recordId}",
            _SCHEMA_KEY,
            _RECORD_ID,
        ),
        op(
            "update_object_record",
            "Update a record of a custom object",
            "PUT", "/objects/{schemaKey}/records/{recordId}",
            _SCHEMA_KEY,
            _RECORD_ID,
            location(),
            body("properties", "Field values keyed by field key", type="object"),
            body("owner", "Owner user IDs", type="array"),
            body("followers", "Follower user IDs", type="array"),
        ),
        op(
            "delete_object_record",
            "Delete a record of a custom object",
            "DELETE", "/objects/{schemaKey}/records/{recordId}",
            _SCHEMA_KEY,
            _RECORD_ID,
        ),
        op(
            "search_object_records",
            "Search records of a custom object",
            "POST", "/objects/{schemaKey}/records/search",
            _SCHEMA_KEY,
            location("body"),
            body("query", "Free text matched against searchable properties", default=""),
            body("page", "Page number", type="integer", default=1),
            body("pageLimit", "Results per page", type="integer", default=10),
            body("searchAfter", "Cursor from the previous page", type="array"),
        ),
    )
