"""Payments tools: integrations, orders, fulfillments, transactions, subscriptions, coupons."""

from ghl_mcp.tools.rest import RestToolGroup, alt, body, location, op, path, query

_ORDER_ID = path("orderId", "Order ID")

_PAGING = (
    query("limit", "Maximum results", type="integer", default=20),
    query("offset", "Results to skip", type="integer", default=0),
)

_DATE_RANGE = (
    query("startAt", "Range start (YYYY-MM-DD)"),
    query("endAt", "Range end (YYYY-MM-DD)"),
)

_COUPON_FIELDS = (
    body("endDate", "End date (ISO 8601)"),
    body("usageLimit", "Maximum redemptions", type="integer"),
    body("productIds", "Restrict to these products", type="array"),
    body("applyToFuturePayments", "Apply to recurring payments", type="boolean"),
    body("applyToFuturePaymentsConfig", "Recurring discount settings", type="object"),
    body("limitPerCustomer", "One redemption per customer", type="boolean"),
)


class PaymentsTools(RestToolGroup):
    """Tools for the GHL payments API."""

    group_id = "payments"
    operations = (
        op(
            "create_whitelabel_integration_provider",
            "Create a white-label payment integration provider",
            "POST", "/payments/integrations/provider/whitelabel",
            *alt("body"),
            body("uniqueName", "Unique provider name", required=True),
            body("title", "Display title", required=True),
            body("provider", "Underlying gateway", required=True, enum=("authorize-net", "nmi")),
            body("description", "Provider description", required=True),
            body("imageUrl", "Logo URL", required=True),
        ),
        op(
            "list_whitelabel_integration_providers",
            "List white-label payment integration providers",
            "GET", "/payments/integrations/provider/whitelabel",
            *alt("query"),
            *_PAGING,
        ),
        op(
            "list_orders",
            "List orders",
            "GET", "/payments/orders",
            *alt("query"),
            *_PAGING,
            *_DATE_RANGE,
            query("status", "Filter by order status"),
            query("paymentMode", "Filter by payment mode", enum=("live", "test")),
            query("search", "Free text search"),
            query("contactId", "Filter by contact"),
            query("funnelProductIds", "Comma separated funnel product IDs"),
        ),
        op(
            "get_order_by_id",
            "Get an order by ID",
            "GET", "/payments/orders/{orderId}",
            _ORDER_ID,
            *alt("query"),
        ),
        op(
            "create_order_fulfillment",
            "Create a fulfillment for an order",
            "POST", "/payments/orders/{orderId}/fulfillments",
            _ORDER_ID,
            *alt("body"),
            body("trackings", "Tracking numbers and URLs", type="array", items={"type": "object"}, required=True),
            body("items", "Fulfilled price IDs and quantities", type="array", items={"type": "object"}, required=True),
            body("notifyCustomer", "Email the customer", type="boolean", required=True),
        ),
        op(
            "list_order_fulfillments",
            "List fulfillments of an order",
            "GET", "/payments/orders/{orderId}/fulfillments",
            _ORDER_ID,
            *alt("query"),
        ),
        op(
            "list_transactions",
            "List payment transactions",
            "GET", "/payments/transactions",
            *alt("query"),
            *_PAGING,
            *_DATE_RANGE,
            query("paymentMode", "Filter by payment mode", enum=("live", "test")),
            query("entitySourceType", "Filter by source type"),
            query("entitySourceSubType", "Filter by source sub-type"),
            query("search", "Free text search"),
            query("subscriptionId", "Filter by subscription"),
            query("entityId", "Filter by source entity"),
            query("contactId", "Filter by contact"),
        ),
        op(
            "get_transaction_by_id",
            "Get a transaction by ID",
            "GET", "/payments/transactions/{transactionId}",
            path("transactionId", "Transaction ID"),
            *alt("query"),
        ),
        op(
            "list_subscriptions",
            "List subscriptions",
            "GET", "/payments/subscriptions",
            *alt("query"),
            *_PAGING,
            *_DATE_RANGE,
            query("entityId", "Filter by source entity"),
            query("paymentMode", "Filter by payment mode", enum=("live", "test")),
            query("entitySourceType", "Filter by source type"),
            query("search", "Free text search"),
            query("contactId", "Filter by contact"),
            query("id", "Filter by subscription ID"),
        ),
        op(
            "get_subscription_by_id",
            "Get a subscription by ID",
            "GET", "/payments/subscriptions/{subscriptionId}",
            path("subscriptionId", "Subscription ID"),
            *alt("query"),
        ),
        op(
            "list_coupons",
            "List coupons",
            "GET", "/payments/coupon/list",
            *alt("query"),
            *_PAGING,
            query("status", "Filter by status", enum=("scheduled", "active", "expired")),
            query("search", "Search by name or code"),
        ),
        op(
            "create_coupon",
            "Create a coupon",
            "POST", "/payments/coupon",
            *alt("body"),
            body("name", "Coupon name", required=True),
            body("code", "Redemption code", required=True),
            body("discountType", "Discount type", required=True, enum=("percentage", "amount")),
            body("discountValue", "Discount value", type="number", required=True),
            body("startDate", "Start date (ISO 8601)", required=True),
            *_COUPON_FIELDS,
        ),
        op(
            "update_coupon",
            "Update a coupon",
            "PUT", "/payments/coupon",
            *alt("body"),
            body("id", "Coupon ID", required=True),
            body("name", "Coupon name", required=True),
            body("code", "Redemption code", required=True),
            body("discountType", "Discount type", required=True, enum=("percentage", "amount")),
            body("discountValue", "Discount value", type="number", required=True),
            body("startDate", "Start date (ISO 8601)", required=True),
            *_COUPON_FIELDS,
        ),
        op(
            "delete_coupon",
            "Delete a coupon",
            "DELETE", "/payments/coupon",
            *alt("body"),
            body("id", "Coupon ID", required=True),
        ),
        op(
            "get_coupon",
            "Get a coupon by ID or code",
            "GET", "/payments/coupon",
            *alt("query"),
            query("id", "Coupon ID", required=True),
            query("code", "Redemption code"),
        ),
        op(
            "create_custom_provider_integration",
            "Register a custom payment provider",
            "POST", "/payments/custom-provider/provider",
            location(),
            body("name", "Provider name", required=True),
            body("description", "Provider description", required=True),
            body("paymentsUrl", "Checkout iframe URL", required=True),
            body("queryUrl", "Verification endpoint URL", required=True),
            body("imageUrl", "Logo URL", required=True),
        ),
        op(
            "delete_custom_provider_integration",
            "Remove the custom payment provider",
            "DELETE", "/payments/custom-provider/provider",
            location(),
        ),
        op(
            "get_custom_provider_config",
            "Get the custom payment provider configuration",
            "GET", "/payments/custom-provider/connect",
            location(),
        ),
        op(
            "create_custom_provider_config",
            "Connect live and test keys for the custom payment provider",
            "POST", "/payments/custom-provider/connect",
            location(),
            body("live", "Live mode API key and publishable key", type="object", required=True),
            body("test", "Test mode API key and publishable key", type="object", required=True),
        ),
        op(
            "disconnect_custom_provider_config",
            "Disconnect the custom payment provider in live or test mode",
            "POST", "/payments/custom-provider/disconnect",
            location(),
            body("liveMode", "Disconnect live (true) or test (false) mode", type="boolean", required=True),
        ),
    )
