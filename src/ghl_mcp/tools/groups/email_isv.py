"""Email verification tool."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op


class EmailISVTools(RestToolGroup):
    """Tools for the GHL email verification API."""

    group_id = "email_isv"
    operations = (
        op(
            "verify_email",
            "Verify an email address, or the email of a contact",
            "POST", "/email/verify",
            location(),
            body("type", "What 'verify' refers to", required=True, enum=("email", "contact")),
            body("verify", "Email address or contact ID", required=True),
        ),
    )
