"""Association tools: association definitions and record relations."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_ASSOCIATION_ID = path("associationId", "Association ID")


class AssociationTools(RestToolGroup):
    """Tools for the GHL associations API."""

    group_id = "associations"
    operations = (
        op(
            "ghl_get_all_associations",
            "List associations of the location",
            "GET", "/associations/",
            location(),
            query("skip", "Results to skip", type="integer", default=0),
            query("limit", "Maximum results", type="integer", default=10),
        ),
        op(
            "ghl_create_association",
            "Create an association between two object types",
            "POST", "/associations/",
            location("body"),
            body("key", "Association key", required=True),
            body("firstObjectLabel", "Label on the first object", required=True),
            body("firstObjectKey", "First object key", required=True),
            body("secondObjectLabel", "Label on the second object", required=True),
            body("secondObjectKey", "Second object key", required=True),
        ),
        op(
            "ghl_get_association_by_id",
            "Get an association by ID",
            "GET", "/associations/{associationId}",
            _ASSOCIATION_ID,
        ),
        op(
            "ghl_update_association",
            "Update the labels of an association",
            "PUT", "/associations/{associationId}",
            _ASSOCIATION_ID,
            body("firstObjectLabel", "Label on the first object", required=True),
            body("secondObjectLabel", "Label on the second object", required=True),
        ),
        op(
            "ghl_delete_association",
            "Delete an association and its relations",
            "DELETE", "/associations/{associationId}",
            _ASSOCIATION_ID,
        ),
        op(
            "ghl_get_association_by_key",
            "Get an association by key",
            "GET", "/associations/key/{keyName}",
            path("keyName", "Association key"),
            location(),
        ),
        op(
            "ghl_get_association_by_object_key",
            "List associations involving an object",
            "GET", "/associations/objectKey/{objectKey}",
            path("objectKey", "Object key"),
            location(),
        ),
        op(
            "ghl_create_relation",
            "Relate two records through an association",
            "POST", "/associations/relations",
            location("body"),
            body("associationId", "Association ID", required=True),
            body("firstRecordId", "First record ID", required=True),
            body("secondRecordId", "Second record ID", required=True),
        ),
        op(
            "ghl_get_relations_by_record",
            "List relations of a record",
            "GET", "/associations/relations/{recordId}",
            path("recordId", "Record ID"),
            location(),
            query("skip", "Results to skip", type="integer", default=0),
            query("limit", "Maximum results", type="integer", default=10),
            query("associationIds", "Filter by association IDs", type="array"),
        ),
        op(
            "ghl_delete_relation",
            "Delete a relation between two records",
            "DELETE", "/associations/relations/{relationId}",
            path("relationId", "Relation ID"),
            location(),
        ),
    )
