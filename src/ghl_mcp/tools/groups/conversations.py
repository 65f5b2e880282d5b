"""Conversation and messaging tools."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_CONVERSATION_ID = path("conversationId", "Conversation ID")
_MESSAGE_ID = path("messageId", "Message ID")

_MESSAGE_STATUSES = ("delivered", "failed", "pending", "read")
_CALL_STATUSES = (
    "pending", "completed", "answered", "busy", "no-answer", "failed", "canceled", "voicemail",
)


class ConversationTools(RestToolGroup):
    """Tools for the GHL conversations API."""

    group_id = "conversations"
    operations = (
        op(
            "send_sms",
            "Send an SMS message to a contact",
            "POST", "/conversations/messages",
            body("type", "Message channel", default="SMS", enum=("SMS",)),
            body("contactId", "Contact ID", required=True),
            body("message", "Message text", required=True),
            body("fromNumber", "Sending phone number"),
            body("toNumber", "Recipient phone number"),
        ),
        op(
            "send_email",
            "Send an email to a contact",
            "POST", "/conversations/messages",
            body("type", "Message channel", default="Email", enum=("Email",)),
            body("contactId", "Contact ID", required=True),
            body("subject", "Email subject", required=True),
            body("html", "HTML body"),
            body("message", "Plain text body"),
            body("emailFrom", "Sender address"),
            body("emailCc", "CC addresses", type="array"),
            body("emailBcc", "BCC addresses", type="array"),
            body("attachments", "Attachment URLs", type="array"),
            body("replyMessageId", "Message ID being replied to"),
        ),
        op(
            "search_conversations",
            "Search conversations with filters",
            "GET", "/conversations/search",
            location(),
            query("contactId", "Filter by contact"),
            query("query", "Free text search"),
            query("status", "Conversation status", enum=("all", "read", "unread", "starred", "recents")),
            query("assignedTo", "Filter by assigned user"),
            query("lastMessageType", "Filter by type of the last message"),
            query("limit", "Maximum results", type="integer", default=20),
            query("startAfterDate", "Pagination cursor (epoch ms)", type="number"),
        ),
        op(
            "get_conversation",
            "Get a conversation by ID",
            "GET", "/conversations/{conversationId}",
            _CONVERSATION_ID,
        ),
        op(
            "create_conversation",
            "Create a conversation for a contact",
            "POST", "/conversations/",
            location("body"),
            body("contactId", "Contact ID", required=True),
        ),
        op(
            "update_conversation",
            "Update conversation flags",
            "PUT", "/conversations/{conversationId}",
            _CONVERSATION_ID,
            location("body"),
            body("unreadCount", "Unread message count", type="integer"),
            body("starred", "Starred flag", type="boolean"),
            body("feedback", "Feedback payload", type="object"),
        ),
        op(
            "delete_conversation",
            "Delete a conversation",
            "DELETE", "/conversations/{conversationId}",
            _CONVERSATION_ID,
        ),
        op(
            "get_recent_messages",
            "List conversations ordered by most recent message",
            "GET", "/conversations/search",
            location(),
            query("limit", "Maximum results", type="integer", default=10),
            query("status", "Conversation status", default="recents", enum=("all", "read", "unread", "starred", "recents")),
            query("sortBy", "Sort field", default="last_message_date"),
            query("sort", "Sort order", default="desc", enum=("asc", "desc")),
        ),
        op(
            "get_email_message",
            "Get an email message by ID",
            "GET", "/conversations/messages/email/{emailMessageId}",
            path("emailMessageId", "Email message ID"),
        ),
        op(
            "get_message",
            "Get a message by ID",
            "GET", "/conversations/messages/{messageId}",
            _MESSAGE_ID,
        ),
        op(
            "upload_message_attachments",
            "Upload attachments to a conversation",
            "POST", "/conversations/messages/upload",
            body("conversationId", "Conversation ID", required=True),
            body("attachmentUrls", "Attachment URLs", type="array", required=True),
            location("body"),
        ),
        op(
            "update_message_status",
            "Update the delivery status of a message",
            "PUT", "/conversations/messages/{messageId}/status",
            _MESSAGE_ID,
            body("status", "New status", required=True, enum=_MESSAGE_STATUSES),
            body("error", "Error details", type="object"),
            body("emailMessageId", "Email message ID"),
            body("recipients", "Recipient addresses", type="array"),
        ),
        op(
            "add_inbound_message",
            "Add an inbound message to a conversation",
            "POST", "/conversations/messages/inbound",
            body("type", "Message channel", required=True,
                 enum=("SMS", "Email", "WhatsApp", "GMB", "IG", "FB", "Custom", "WebChat", "Live_Chat", "Call")),
            body("conversationId", "Conversation ID", required=True),
            body("conversationProviderId", "Conversation provider ID", required=True),
            body("message", "Message text"),
            body("attachments", "Attachment URLs", type="array"),
            body("html", "HTML body (email)"),
            body("subject", "Subject (email)"),
            body("emailFrom", "Sender address"),
            body("emailTo", "Recipient address"),
            body("altId", "External message ID"),
            body("date", "Message date (ISO 8601)"),
        ),
        op(
            "add_outbound_call",
            "Record an outbound call in a conversation",
            "POST", "/conversations/messages/outbound",
            body("type", "Message channel", default="Call", enum=("Call",)),
            body("conversationId", "Conversation ID", required=True),
            body("conversationProviderId", "Conversation provider ID", required=True),
            body("call", "Call details: to, from, status (" + ", ".join(_CALL_STATUSES) + ")",
                 type="object", required=True),
            body("attachments", "Attachment URLs", type="array"),
            body("altId", "External call ID"),
            body("date", "Call date (ISO 8601)"),
        ),
        op(
            "get_message_recording",
            "Get the recording of a call message",
            "GET", "/conversations/messages/{messageId}/locations/{locationId}/recording",
            _MESSAGE_ID,
            location("path"),
        ),
        op(
            "get_message_transcription",
            "Get the transcription of a call message",
            "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription",
            location("path"),
            _MESSAGE_ID,
        ),
        op(
            "download_transcription",
            "Download the transcription of a call message as text",
            "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription/download",
            location("path"),
            _MESSAGE_ID,
        ),
        op(
            "cancel_scheduled_message",
            "Cancel a scheduled message",
            "DELETE", "/conversations/messages/{messageId}/schedule",
            _MESSAGE_ID,
        ),
        op(
            "cancel_scheduled_email",
            "Cancel a scheduled email",
            "DELETE", "/conversations/messages/email/{emailMessageId}/schedule",
            path("emailMessageId", "Email message ID"),
        ),
        op(
            "live_chat_typing",
            "Send a live chat typing indicator",
            "POST", "/conversations/providers/live-chat/typing",
            location("body"),
            body("isTyping", "Whether the agent is typing", type="boolean", required=True),
            body("visitorId", "Chat widget visitor ID", required=True),
            body("conversationId", "Conversation ID", required=True),
        ),
    )
