"""Workflow tools."""

from ghl_mcp.tools.rest import RestToolGroup, location, op


class WorkflowTools(RestToolGroup):
    group_id = "workflows"
    operations = (
        op(
            "ghl_get_workflows",
            "List workflows of the location",
            "GET", "/workflows/",
            location(),
        ),
    )
