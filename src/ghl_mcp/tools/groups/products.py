"""Product, price, inventory and collection tools."""

from ghl_mcp.tools.rest import RestToolGroup, alt, body, location, op, path, query

_PRODUCT_ID = path("productId", "Product ID")
_PRODUCT_TYPES = ("DIGITAL", "PHYSICAL", "SERVICE", "PHYSICAL/DIGITAL")

_PAGING = (
    query("limit", "Maximum results", type="integer", default=20),
    query("offset", "Results to skip", type="integer", default=0),
)

_PRODUCT_FIELDS = (
    body("description", "Product description"),
    body("image", "Image URL"),
    body("statementDescriptor", "Card statement descriptor"),
    body("availableInStore", "List in the online store", type="boolean"),
    body("medias", "Product media", type="array", items={"type": "object"}),
    body("variants", "Variant options", type="array", items={"type": "object"}),
    body("collectionIds", "Collection IDs", type="array"),
    body("isTaxesEnabled", "Charge taxes", type="boolean"),
    body("taxes", "Tax IDs", type="array"),
    body("slug", "Store URL slug"),
)


class ProductsTools(RestToolGroup):
    """Tools for the GHL products API."""

    group_id = "products"
    operations = (
        op(
            "ghl_create_product",
            "Create a product",
            "POST", "/products/",
            location("body"),
            body("name", "Product name", required=True),
            body("productType", "Product type", required=True, enum=_PRODUCT_TYPES),
            *_PRODUCT_FIELDS,
        ),
        op(
            "ghl_list_products",
            "List products",
            "GET", "/products/",
            location(),
            *_PAGING,
            query("search", "Free text search"),
            query("collectionIds", "Filter by collections"),
            query("collectionSlug", "Filter by collection slug"),
            query("expand", "Related data to include", type="array"),
            query("productIds", "Filter by product IDs", type="array"),
            query("storeId", "Filter by store"),
            query("includedInStore", "Only products in the store", type="boolean"),
            query("availableInStore", "Only products available in the store", type="boolean"),
            query("sortOrder", "Sort order", enum=("asc", "desc")),
        ),
        op(
            "ghl_get_product",
            "Get a product by ID",
            "GET", "/products/{productId}",
            _PRODUCT_ID,
            location(),
        ),
        op(
            "ghl_update_product",
            "Update a product",
            "PUT", "/products/{productId}",
            _PRODUCT_ID,
            location("body"),
            body("name", "Product name"),
            body("productType", "Product type", enum=_PRODUCT_TYPES),
            *_PRODUCT_FIELDS,
        ),
        op(
            "ghl_delete_product",
            "Delete a product",
            "DELETE", "/products/{productId}",
            _PRODUCT_ID,
            location(),
        ),
        op(
            "ghl_create_price",
            "Create a price for a product",
            "POST", "/products/{productId}/price",
            _PRODUCT_ID,
            location("body"),
            body("name", "Price name", required=True),
            body("type", "Price type", required=True, enum=("one_time", "recurring")),
            body("currency", "Currency code", required=True),
            body("amount", "Amount", type="number", required=True),
            body("recurring", "Interval and interval count for recurring prices", type="object"),
            body("description", "Price description"),
            body("compareAtPrice", "Original price shown struck through", type="number"),
            body("trialPeriod", "Trial days", type="integer"),
            body("totalCycles", "Billing cycles", type="integer"),
            body("setupFee", "Setup fee", type="number"),
            body("variantOptionIds", "Variant option IDs", type="array"),
            body("sku", "Stock keeping unit"),
            body("trackInventory", "Track stock", type="boolean"),
            body("availableQuantity", "Units in stock", type="integer"),
            body("allowOutOfStockPurchases", "Sell when out of stock", type="boolean"),
        ),
        op(
            "ghl_list_prices",
            "List prices of a product",
            "GET", "/products/{productId}/price",
            _PRODUCT_ID,
            location(),
            *_PAGING,
            query("ids", "Comma separated price IDs"),
        ),
        op(
            "ghl_list_inventory",
            "List inventory levels",
            "GET", "/products/inventory",
            *alt("query"),
            *_PAGING,
            query("search", "Free text search"),
        ),
        op(
            "ghl_create_product_collection",
            "Create a product collection",
            "POST", "/products/collections",
            *alt("body"),
            body("name", "Collection name", required=True),
            body("slug", "Collection URL slug", required=True),
            body("image", "Image URL"),
            body("seo", "SEO title and description", type="object"),
        ),
        op(
            "ghl_list_product_collections",
            "List product collections",
            "GET", "/products/collections",
            *alt("query"),
            *_PAGING,
            query("collectionIds", "Comma separated collection IDs"),
            query("name", "Filter by name"),
        ),
    )
