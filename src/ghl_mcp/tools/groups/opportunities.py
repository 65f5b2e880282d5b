"""Opportunity and pipeline tools."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_OPPORTUNITY_ID = path("opportunityId", "Opportunity ID")
_STATUSES = ("open", "won", "lost", "abandoned")
_FOLLOWERS = body("followers", "User IDs of followers", type="array", required=True)

_OPPORTUNITY_FIELDS = (
    body("pipelineStageId", "Pipeline stage ID"),
    body("monetaryValue", "Deal value", type="number"),
    body("assignedTo", "User ID the opportunity is assigned to"),
    body("source", "Lead source"),
    body("customFields", "Custom field values", type="array", items={"type": "object"}),
)


class OpportunityTools(RestToolGroup):
    """Tools for the GHL opportunities API."""

    group_id = "opportunities"
    operations = (
        op(
            "search_opportunities",
            "Search opportunities across pipelines",
            "GET", "/opportunities/search",
            location(name="location_id"),
            query("q", "Free text search"),
            query("pipeline_id", "Filter by pipeline"),
            query("pipeline_stage_id", "Filter by stage"),
            query("contact_id", "Filter by contact"),
            query("status", "Filter by status", enum=_STATUSES + ("all",)),
            query("assigned_to", "Filter by assigned user"),
            query("limit", "Maximum results", type="integer", default=20),
            query("page", "Page number", type="integer"),
        ),
        op(
            "get_pipelines",
            "List sales pipelines and their stages",
            "GET", "/opportunities/pipelines",
            location(),
        ),
        op(
            "get_opportunity",
            "Get an opportunity by ID",
            "GET", "/opportunities/{opportunityId}",
            _OPPORTUNITY_ID,
        ),
        op(
            "create_opportunity",
            "Create an opportunity in a pipeline",
            "POST", "/opportunities/",
            location("body"),
            body("pipelineId", "Pipeline ID", required=True),
            body("name", "Opportunity name", required=True),
            body("contactId", "Contact ID", required=True),
            body("status", "Status", default="open", enum=_STATUSES),
            *_OPPORTUNITY_FIELDS,
        ),
        op(
            "update_opportunity_status",
            "Change the status of an opportunity",
            "PUT", "/opportunities/{opportunityId}/status",
            _OPPORTUNITY_ID,
            body("status", "New status", required=True, enum=_STATUSES),
            body("lostReasonId", "Lost reason ID (status=lost)"),
        ),
        op(
            "delete_opportunity",
            "Delete an opportunity",
            "DELETE", "/opportunities/{opportunityId}",
            _OPPORTUNITY_ID,
        ),
        op(
            "update_opportunity",
            "Update an opportunity",
            "PUT", "/opportunities/{opportunityId}",
            _OPPORTUNITY_ID,
            body("pipelineId", "Pipeline ID"),
            body("name", "Opportunity name"),
            body("status", "Status", enum=_STATUSES),
            *_OPPORTUNITY_FIELDS,
        ),
        op(
            "upsert_opportunity",
            "Create an opportunity or update the matching one",
            "POST", "/opportunities/upsert",
            location("body"),
            body("pipelineId", "Pipeline ID", required=True),
            body("contactId", "Contact ID", required=True),
            body("name", "Opportunity name"),
            body("status", "Status", enum=_STATUSES),
            *_OPPORTUNITY_FIELDS,
        ),
        op(
            "add_opportunity_followers",
            "Add followers to an opportunity",
            "POST", "/opportunities/{opportunityId}/followers",
            _OPPORTUNITY_ID,
            _FOLLOWERS,
        ),
        op(
            "remove_opportunity_followers",
            "Remove followers from an opportunity",
            "DELETE", "/opportunities/{opportunityId}/followers",
            _OPPORTUNITY_ID,
            _FOLLOWERS,
        ),
    )
