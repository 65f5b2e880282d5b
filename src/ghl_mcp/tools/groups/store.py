"""Store tools: shipping zones, rates, carriers and store settings."""

from ghl_mcp.tools.rest import RestToolGroup, alt, body, op, path, query

_ZONE_ID = path("shippingZoneId", "Shipping zone ID")
_RATE_ID = path("shippingRateId", "Shipping rate ID")
_CARRIER_ID = path("shippingCarrierId", "Shipping carrier ID")
_CONDITION_TYPES = ("none", "price", "weight")

_PAGING = (
    query("limit", "Maximum results", type="integer", default=20),
    query("offset", "Results to skip", type="integer", default=0),
)

_RATE_FIELDS = (
    body("description", "Rate description"),
    body("minCondition", "Lower bound of the condition", type="number"),
    body("maxCondition", "Upper bound of the condition", type="number"),
    body("isCarrierRate", "Rate is provided by a carrier", type="boolean"),
    body("shippingCarrierId", "Carrier ID for carrier rates"),
    body("percentageOfRateFee", "Extra fee as a percentage of the carrier rate", type="number"),
    body("shippingCarrierServices", "Carrier services offered", type="array", items={"type": "object"}),
)

_CARRIER_FIELDS = (
    body("services", "Carrier services", type="array", items={"type": "object"}),
    body("allowsMultipleServiceSelection", "Allow selecting several services", type="boolean"),
)


class StoreTools(RestToolGroup):
    """Tools for the GHL store API."""

    group_id = "store"
    operations = (
        op(
            "ghl_create_shipping_zone",
            "Create a shipping zone",
            "POST", "/store/shipping-zone",
            *alt("body"),
            body("name", "Zone name", required=True),
            body("countries", "Countries and states in the zone", type="array", items={"type": "object"}, required=True),
        ),
        op(
            "ghl_list_shipping_zones",
            "List shipping zones",
            "GET", "/store/shipping-zone",
            *alt("query"),
            *_PAGING,
            query("withShippingRate", "Include rates", type="boolean"),
        ),
        op(
            "ghl_get_shipping_zone",
            "Get a shipping zone by ID",
            "GET", "/store/shipping-zone/{shippingZoneId}",
            _ZONE_ID,
            *alt("query"),
            query("withShippingRate", "Include rates", type="boolean"),
        ),
        op(
            "ghl_update_shipping_zone",
            "Update a shipping zone",
            "PUT", "/store/shipping-zone/{shippingZoneId}",
            _ZONE_ID,
            *alt("body"),
            body("name", "Zone name"),
            body("countries", "Countries and states in the zone", type="array", items={"type": "object"}),
        ),
        op(
            "ghl_delete_shipping_zone",
            "Delete a shipping zone",
            "DELETE", "/store/shipping-zone/{shippingZoneId}",
            _ZONE_ID,
            *alt("query"),
        ),
        op(
            "ghl_get_available_shipping_rates",
            "Get shipping rates available for an order",
            "POST", "/store/shipping-zone/shipping-rates",
            *alt("body"),
            body("country", "Destination country code", required=True),
            body("address", "Destination address", type="object"),
            body("amountAvailable", "Order amount is known", type="string"),
            body("totalOrderAmount", "Order amount", type="number", required=True),
            body("weightAvailable", "Order weight is known", type="boolean"),
            body("totalOrderWeight", "Order weight", type="number"),
            body("source", "Order source", type="object"),
            body("products", "Order products", type="array", items={"type": "object"}),
            body("couponCode", "Coupon code"),
        ),
        op(
            "ghl_create_shipping_rate",
            "Create a shipping rate in a zone",
            "POST", "/store/shipping-zone/{shippingZoneId}/shipping-rate",
            _ZONE_ID,
            *alt("body"),
            body("name", "Rate name", required=True),
            body("currency", "Currency code", required=True),
            body("amount", "Rate amount", type="number", required=True),
            body("conditionType", "Condition type", required=True, enum=_CONDITION_TYPES),
            *_RATE_FIELDS,
        ),
        op(
            "ghl_list_shipping_rates",
            "List shipping rates of a zone",
            "GET", "/store/shipping-zone/{shippingZoneId}/shipping-rate",
            _ZONE_ID,
            *alt("query"),
            *_PAGING,
        ),
        op(
            "ghl_get_shipping_rate",
            "Get a shipping rate by ID",
            "GET", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}",
            _ZONE_ID,
            _RATE_ID,
            *alt("query"),
        ),
        op(
            "ghl_update_shipping_rate",
            "Update a shipping rate",
            "PUT", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}",
            _ZONE_ID,
            _RATE_ID,
            *alt("body"),
            body("name", "Rate name"),
            body("currency", "Currency code"),
            body("amount", "Rate amount", type="number"),
            body("conditionType", "Condition type", enum=_CONDITION_TYPES),
            *_RATE_FIELDS,
        ),
        op(
            "ghl_delete_shipping_rate",
            "Delete a shipping rate",
            "DELETE", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}",
            _ZONE_ID,
            _RATE_ID,
            *alt("query"),
        ),
        op(
            "ghl_create_shipping_carrier",
            "Register a shipping carrier",
            "POST", "/store/shipping-carrier",
            *alt("body"),
            body("name", "Carrier name", required=True),
            body("callbackUrl", "Rate callback URL", required=True),
            *_CARRIER_FIELDS,
        ),
        op(
            "ghl_list_shipping_carriers",
            "List shipping carriers",
            "GET", "/store/shipping-carrier",
            *alt("query"),
        ),
        op(
            "ghl_get_shipping_carrier",
            "Get a shipping carrier by ID",
            "GET", "/store/shipping-carrier/{shippingCarrierId}",
            _CARRIER_ID,
            *alt("query"),
        ),
        op(
            "ghl_update_shipping_carrier",
            "Update a shipping carrier",
            "PUT", "/store/shipping-carrier/{shippingCarrierId}",
            _CARRIER_ID,
            *alt("body"),
            body("name", "Carrier name"),
            body("callbackUrl", "Rate callback URL"),
            *_CARRIER_FIELDS,
        ),
        op(
            "ghl_delete_shipping_carrier",
            "Delete a shipping carrier",
            "DELETE", "/store/shipping-carrier/{shippingCarrierId}",
            _CARRIER_ID,
            *alt("query"),
        ),
        op(
            "ghl_create_store_setting",
            "Create or update store settings",
            "POST", "/store/store-setting",
            *alt("body"),
            body("shippingOrigin", "Shipping origin address", type="object", required=True),
            body("storeOrderNotification", "Order notification settings", type="object"),
            body("storeOrderFulfillmentNotification", "Fulfillment notification settings", type="object"),
        ),
        op(
            "ghl_get_store_setting",
            "Get store settings",
            "GET", "/store/store-setting",
            *alt("query"),
        ),
    )
