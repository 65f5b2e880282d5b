"""Email marketing tools: campaigns and builder templates."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query


class EmailTools(RestToolGroup):
    """Tools for the GHL email builder and campaign API."""

    group_id = "email"
    operations = (
        op(
            "get_email_campaigns",
            "List scheduled email campaigns",
            "GET", "/emails/schedule",
            location(),
            query("status", "Campaign status", enum=("active", "pause", "complete", "cancelled", "retry", "draft", "resend-scheduled")),
            query("limit", "Maximum results", type="integer", default=10),
            query("offset", "Results to skip", type="integer", default=0),
        ),
        op(
            "create_email_template",
            "Create an email builder template",
            "POST", "/emails/builder",
            location("body"),
            body("title", "Template title", required=True),
            body("html", "Template HTML", required=True),
            body("type", "Editor type", default="html", enum=("html", "builder", "blank")),
            body("isPlainText", "Plain text template", type="boolean"),
        ),
        op(
            "get_email_templates",
            "List email builder templates",
            "GET", "/emails/builder",
            location(),
            query("limit", "Maximum results", type="integer", default=10),
            query("offset", "Results to skip", type="integer", default=0),
        ),
        op(
            "update_email_template",
            "Update the HTML of an email template",
            "POST", "/emails/builder/data",
            location("body"),
            body("templateId", "Template ID", required=True),
            body("html", "Template HTML", required=True),
            body("editorType", "Editor type", default="html", enum=("html", "builder")),
            body("previewText", "Inbox preview text"),
        ),
        op(
            "delete_email_template",
            "Delete an email template",
            "DELETE", "/emails/builder/{locationId}/{templateId}",
            location("path"),
            path("templateId", "Template ID"),
        ),
    )
