"""Invoicing tools: templates, schedules, invoices, estimates and estimate templates."""

from dataclasses import replace

from ghl_mcp.tools.rest import Param, RestToolGroup, alt, body, op, path, query

_TEMPLATE_ID = path("templateId", "Template ID")
_SCHEDULE_ID = path("scheduleId", "Invoice schedule ID")
_INVOICE_ID = path("invoiceId", "Invoice ID")
_ESTIMATE_ID = path("estimateId", "Estimate ID")

_SEND_ACTIONS = ("sms_and_email", "send_manually", "email", "sms")
_PAYMENT_MODES = ("cash", "card", "cheque", "bank_transfer", "other")

_PAGING = (
    query("limit", "Maximum results", type="integer", default=20),
    query("offset", "Results to skip", type="integer", default=0),
)

_LIST_FILTERS = (
    query("status", "Filter by status"),
    query("search", "Free text search"),
    query("startAt", "Range start (YYYY-MM-DD)"),
    query("endAt", "Range end (YYYY-MM-DD)"),
    query("contactId", "Filter by contact"),
)

_DOCUMENT_FIELDS = (
    body("title", "Document title"),
    body("businessDetails", "Business name, address, logo", type="object"),
    body("discount", "Discount type and value", type="object"),
    body("termsNotes", "Terms and notes (HTML)"),
    body("liveMode", "Live (true) or test (false) mode", type="boolean"),
)

_ITEMS = body("items", "Line items", type="array", items={"type": "object"})
_CONTACT_DETAILS = body("contactDetails", "Customer details", type="object")


def _required(param: Param) -> Param:
    return replace(param, required=True)


class InvoicesTools(RestToolGroup):
    """Tools for the GHL invoices API."""

    group_id = "invoices"
    operations = (
        # Invoice templates
        op(
            "create_invoice_template",
            "Create an invoice template",
            "POST", "/invoices/template",
            *alt("body"),
            body("name", "Template name", required=True),
            body("currency", "Currency code"),
            _ITEMS,
            *_DOCUMENT_FIELDS,
        ),
        op(
            "list_invoice_templates",
            "List invoice templates",
            "GET", "/invoices/template",
            *alt("query"),
            *_PAGING,
            query("status", "Filter by status"),
            query("search", "Free text search"),
            query("paymentMode", "Filter by payment mode", enum=("default", "live", "test")),
        ),
        op(
            "get_invoice_template",
            "Get an invoice template by ID",
            "GET", "/invoices/template/{templateId}",
            _TEMPLATE_ID,
            *alt("query"),
        ),
        op(
            "update_invoice_template",
            "Update an invoice template",
            "PUT", "/invoices/template/{templateId}",
            _TEMPLATE_ID,
            *alt("body"),
            body("name", "Template name"),
            body("currency", "Currency code"),
            _ITEMS,
            *_DOCUMENT_FIELDS,
        ),
        op(
            "delete_invoice_template",
            "Delete an invoice template",
            "DELETE", "/invoices/template/{templateId}",
            _TEMPLATE_ID,
            *alt("query"),
        ),
        op(
            "update_invoice_template_late_fees",
            "Update the late fee configuration of an invoice template",
            "PATCH", "/invoices/template/{templateId}/late-fees-configuration",
            _TEMPLATE_ID,
            *alt("body"),
            body("lateFeesConfiguration", "Late fee settings", type="object", required=True),
        ),
        op(
            "update_invoice_template_payment_methods",
            "Update the payment methods of an invoice template",
            "PATCH", "/invoices/template/{templateId}/payment-methods-configuration",
            _TEMPLATE_ID,
            *alt("body"),
            body("paymentMethods", "Payment method settings", type="object", required=True),
        ),
        # Invoice schedules
        op(
            "create_invoice_schedule",
            "Create a recurring invoice schedule",
            "POST", "/invoices/schedule",
            *alt("body"),
            body("name", "Schedule name", required=True),
            _required(_CONTACT_DETAILS),
            body("schedule", "Recurrence rule", type="object", required=True),
            body("currency", "Currency code"),
            _ITEMS,
            *_DOCUMENT_FIELDS,
        ),
        op(
            "list_invoice_schedules",
            "List invoice schedules",
            "GET", "/invoices/schedule",
            *alt("query"),
            *_PAGING,
            query("status", "Filter by status"),
            query("search", "Free text search"),
        ),
        op(
            "get_invoice_schedule",
            "Get an invoice schedule by ID",
            "GET", "/invoices/schedule/{scheduleId}",
            _SCHEDULE_ID,
            *alt("query"),
        ),
        op(
            "update_invoice_schedule",
            "Update an invoice schedule",
            "PUT", "/invoices/schedule/{scheduleId}",
            _SCHEDULE_ID,
            *alt("body"),
            body("name", "Schedule name"),
            _CONTACT_DETAILS,
            body("schedule", "Recurrence rule", type="object"),
            body("currency", "Currency code"),
            _ITEMS,
            *_DOCUMENT_FIELDS,
        ),
        op(
            "delete_invoice_schedule",
            "Delete an invoice schedule",
            "DELETE", "/invoices/schedule/{scheduleId}",
            _SCHEDULE_ID,
            *alt("query"),
        ),
        op(
            "schedule_invoice_schedule",
            "Start an invoice schedule",
            "POST", "/invoices/schedule/{scheduleId}/schedule",
            _SCHEDULE_ID,
            *alt("body"),
            body("liveMode", "Live (true) or test (false) mode", type="boolean"),
            body("autoPayment", "Auto payment settings", type="object"),
        ),
        op(
            "auto_payment_invoice_schedule",
            "Configure auto payment for an invoice schedule",
            "POST", "/invoices/schedule/{scheduleId}/auto-payment",
            _SCHEDULE_ID,
            *alt("body"),
            body("id", "Schedule ID", required=True),
            body("autoPayment", "Auto payment settings", type="object", required=True),
        ),
        op(
            "cancel_invoice_schedule",
            "Cancel an invoice schedule",
            "POST", "/invoices/schedule/{scheduleId}/cancel",
            _SCHEDULE_ID,
            *alt("body"),
        ),
        # Invoices
        op(
            "create_invoice",
            "Create an invoice",
            "POST", "/invoices/",
            *alt("body"),
            body("name", "Invoice name", required=True),
            body("currency", "Currency code", required=True),
            _required(_ITEMS),
            _required(_CONTACT_DETAILS),
            body("issueDate", "Issue date (YYYY-MM-DD)", required=True),
            body("dueDate", "Due date (YYYY-MM-DD)"),
            body("invoiceNumber", "Invoice number"),
            body("sentTo", "Recipient emails and phones", type="object"),
            *_DOCUMENT_FIELDS,
        ),
        op(
            "list_invoices",
            "List invoices",
            "GET", "/invoices/",
            *alt("query"),
            *_PAGING,
            *_LIST_FILTERS,
            query("paymentMode", "Filter by payment mode", enum=("default", "live", "test")),
            query("sortField", "Sort field", enum=("issueDate",)),
            query("sortOrder", "Sort order", enum=("ascend", "descend")),
        ),
        op(
            "get_invoice",
            "Get an invoice by ID",
            "GET", "/invoices/{invoiceId}",
            _INVOICE_ID,
            *alt("query"),
        ),
        op(
            "update_invoice",
            "Update a draft invoice",
            "PUT", "/invoices/{invoiceId}",
            _INVOICE_ID,
            *alt("body"),
            body("name", "Invoice name"),
            body("currency", "Currency code"),
            _ITEMS,
            _CONTACT_DETAILS,
            body("issueDate", "Issue date (YYYY-MM-DD)"),
            body("dueDate", "Due date (YYYY-MM-DD)"),
            *_DOCUMENT_FIELDS,
        ),
        op(
            "delete_invoice",
            "Delete an invoice",
            "DELETE", "/invoices/{invoiceId}",
            _INVOICE_ID,
            *alt("query"),
        ),
        op(
            "void_invoice",
            "Void an invoice",
            "POST", "/invoices/{invoiceId}/void",
            _INVOICE_ID,
            *alt("body"),
        ),
        op(
            "send_invoice",
            "Send an invoice to the customer",
            "POST", "/invoices/{invoiceId}/send",
            _INVOICE_ID,
            *alt("body"),
            body("userId", "Sending user ID", required=True),
            body("action", "Delivery channel", required=True, enum=_SEND_ACTIONS),
            body("liveMode", "Live (true) or test (false) mode", type="boolean", required=True),
            body("sentFrom", "Sender email and phone", type="object"),
        ),
        op(
            "record_invoice_payment",
            "Record a manual payment against an invoice",
            "POST", "/invoices/{invoiceId}/record-payment",
            _INVOICE_ID,
            *alt("body"),
            body("mode", "Payment mode", required=True, enum=_PAYMENT_MODES),
            body("notes", "Payment notes", required=True),
            body("amount", "Amount paid (defaults to the balance)", type="number"),
            body("card", "Card brand and last 4", type="object"),
            body("cheque", "Cheque number", type="object"),
            body("meta", "Extra metadata", type="object"),
        ),
        op(
            "generate_invoice_number",
            "Generate the next invoice number",
            "GET", "/invoices/generate-invoice-number",
            *alt("query"),
        ),
        op(
            "text2pay_invoice",
            "Create an invoice and send it as a payment link",
            "POST", "/invoices/text2pay",
            *alt("body"),
            body("name", "Invoice name", required=True),
            body("currency", "Currency code", required=True),
            _required(_ITEMS),
            _required(_CONTACT_DETAILS),
            body("issueDate", "Issue date (YYYY-MM-DD)", required=True),
            body("action", "Delivery channel", required=True, enum=_SEND_ACTIONS),
            body("userId", "Sending user ID", required=True),
            body("id", "Existing draft invoice ID"),
            body("sentTo", "Recipient emails and phones", type="object"),
            *_DOCUMENT_FIELDS,
        ),
        op(
            "update_invoice_last_visited",
            "Record that an invoice was viewed",
            "PATCH", "/invoices/stats/last-visited-at",
            body("invoiceId", "Invoice ID", required=True),
        ),
        # Estimates
        op(
            "create_estimate",
            "Create an estimate",
            "POST", "/invoices/estimate",
            *alt("body"),
            body("name", "Estimate name", required=True),
            body("currency", "Currency code", required=True),
            _required(_ITEMS),
            _required(_CONTACT_DETAILS),
            body("issueDate", "Issue date (YYYY-MM-DD)"),
            body("expiryDate", "Expiry date (YYYY-MM-DD)"),
            body("estimateNumber", "Estimate number", type="integer"),
            body("frequencySettings", "Recurrence settings", type="object"),
            *_DOCUMENT_FIELDS,
        ),
        op(
            "list_estimates",
            "List estimates",
            "GET", "/invoices/estimate/list",
            *alt("query"),
            *_PAGING,
            *_LIST_FILTERS,
        ),
        op(
            "update_estimate",
            "Update an estimate",
            "PUT", "/invoices/estimate/{estimateId}",
            _ESTIMATE_ID,
            *alt("body"),
            body("name", "Estimate name"),
            body("currency", "Currency code"),
            _ITEMS,
            _CONTACT_DETAILS,
            body("issueDate", "Issue date (YYYY-MM-DD)"),
            body("expiryDate", "Expiry date (YYYY-MM-DD)"),
            body("estimateStatus", "Estimate status", enum=("all", "draft", "sent", "accepted", "declined", "invoiced", "viewed")),
            *_DOCUMENT_FIELDS,
        ),
        op(
            "delete_estimate",
            "Delete an estimate",
            "DELETE", "/invoices/estimate/{estimateId}",
            _ESTIMATE_ID,
            *alt("body"),
        ),
        op(
            "send_estimate",
            "Send an estimate to the customer",
            "POST", "/invoices/estimate/{estimateId}/send",
            _ESTIMATE_ID,
            *alt("body"),
            body("action", "Delivery channel", required=True, enum=_SEND_ACTIONS),
            body("liveMode", "Live (true) or test (false) mode", type="boolean", required=True),
            body("userId", "Sending user ID", required=True),
            body("estimateName", "Estimate name"),
            body("sentFrom", "Sender email and phone", type="object"),
        ),
        op(
            "create_invoice_from_estimate",
            "Convert an estimate into an invoice",
            "POST", "/invoices/estimate/{estimateId}/invoice",
            _ESTIMATE_ID,
            *alt("body"),
            body("markAsInvoiced", "Mark the estimate as invoiced", type="boolean", required=True),
            body("version", "Invoice version", enum=("v1", "v2")),
        ),
        op(
            "generate_estimate_number",
            "Generate the next estimate number",
            "GET", "/invoices/estimate/number/generate",
            *alt("query"),
        ),
        op(
            "update_estimate_last_visited",
            "Record that an estimate was viewed",
            "PATCH", "/invoices/estimate/stats/last-visited-at",
            body("estimateId", "Estimate ID", required=True),
        ),
        # Estimate templates
        op(
            "list_estimate_templates",
            "List estimate templates",
            "GET", "/invoices/estimate/template",
            *alt("query"),
            *_PAGING,
            query("search", "Free text search"),
        ),
        op(
            "create_estimate_template",
            "Create an estimate template",
            "POST", "/invoices/estimate/template",
            *alt("body"),
            body("name", "Template name", required=True),
            body("currency", "Currency code"),
            _ITEMS,
            *_DOCUMENT_FIELDS,
        ),
        op(
            "update_estimate_template",
            "Update an estimate template",
            "PUT", "/invoices/estimate/template/{templateId}",
            _TEMPLATE_ID,
            *alt("body"),
            body("name", "Template name"),
            body("currency", "Currency code"),
            _ITEMS,
            *_DOCUMENT_FIELDS,
        ),
        op(
            "delete_estimate_template",
            "Delete an estimate template",
            "DELETE", "/invoices/estimate/template/{templateId}",
            _TEMPLATE_ID,
            *alt("body"),
        ),
        op(
            "preview_estimate_template",
            "Preview an estimate template",
            "GET", "/invoices/estimate/template/preview",
            *alt("query"),
            query("templateId", "Template ID", required=True),
        ),
    )
