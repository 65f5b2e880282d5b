"""Social media planner tools: posts, accounts, CSV imports, categories, tags, OAuth."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_LOCATION_ID = location("path")
_POST_ID = path("postId", "Social post ID")
_PLATFORMS = ("google", "facebook", "instagram", "linkedin", "twitter", "tiktok", "tiktok-business")
_POST_TYPES = ("post", "story", "reel")
_LIST_TYPES = (
    "recent", "all", "scheduled", "draft", "failed", "in_review", "published", "in_progress", "deleted",
)

_POST_FIELDS = (
    body("media", "Media attachments", type="array", items={"type": "object"}),
    body("status", "Post status", enum=("draft", "scheduled", "published", "failed", "in_review", "in_progress")),
    body("scheduleDate", "Scheduled publish time (ISO 8601)"),
    body("followUpComment", "Comment posted after publishing"),
    body("userId", "Author user ID"),
    body("tags", "Tag IDs", type="array"),
    body("categoryId", "Category ID"),
)

_PAGING = (
    query("skip", "Results to skip", type="integer", default=0),
    query("limit", "Maximum results", type="integer", default=10),
)


class SocialMediaTools(RestToolGroup):
    """Tools for the GHL social media posting API."""

    group_id = "social_media"
    operations = (
        op(
            "search_social_posts",
            "Search social posts by status, account and date",
            "POST", "/social-media-posting/{locationId}/posts/list",
            _LOCATION_ID,
            body("type", "Post list to query", default="all", enum=_LIST_TYPES),
            body("accounts", "Comma separated account IDs"),
            body("skip", "Results to skip", type="integer", default=0),
            body("limit", "Maximum results", type="integer", default=10),
            body("fromDate", "Range start (ISO 8601)"),
            body("toDate", "Range end (ISO 8601)"),
            body("includeUsers", "Include user details", type="boolean", default=False),
            body("postType", "Post type", enum=_POST_TYPES),
        ),
        op(
            "create_social_post",
            "Create or schedule a social post",
            "POST", "/social-media-posting/{locationId}/posts",
            _LOCATION_ID,
            body("accountIds", "Target account IDs", type="array", required=True),
            body("summary", "Post text", required=True),
            body("type", "Post type", default="post", enum=_POST_TYPES),
            *_POST_FIELDS,
        ),
        op(
            "get_social_post",
            "Get a social post by ID",
            "GET", "/social-media-posting/{locationId}/posts/{postId}",
            _LOCATION_ID,
            _POST_ID,
        ),
        op(
            "update_social_post",
            "Update a social post",
            "PUT", "/social-media-posting/{locationId}/posts/{postId}",
            _LOCATION_ID,
            _POST_ID,
            body("accountIds", "Target account IDs", type="array"),
            body("summary", "Post text"),
            body("type", "Post type", enum=_POST_TYPES),
            *_POST_FIELDS,
        ),
        op(
            "delete_social_post",
            "Delete a social post",
            "DELETE", "/social-media-posting/{locationId}/posts/{postId}",
            _LOCATION_ID,
            _POST_ID,
        ),
        op(
            "bulk_delete_social_posts",
            "Delete several social posts",
            "POST", "/social-media-posting/{locationId}/posts/bulk-delete",
            _LOCATION_ID,
            body("postIds", "Post IDs", type="array", required=True),
        ),
        op(
            "get_social_accounts",
            "List connected social accounts and groups",
            "GET", "/social-media-posting/{locationId}/accounts",
            _LOCATION_ID,
        ),
        op(
            "delete_social_account",
            "Disconnect a social account",
            "DELETE", "/social-media-posting/{locationId}/accounts/{accountId}",
            _LOCATION_ID,
            path("accountId", "Account ID"),
            query("companyId", "Agency company ID"),
            query("userId", "User ID"),
        ),
        op(
            "upload_social_csv",
            "Upload a CSV of social posts for bulk import",
            "POST", "/social-media-posting/{locationId}/csv",
            _LOCATION_ID,
            body("file", "URL of the CSV file", required=True),
        ),
        op(
            "get_csv_upload_status",
            "Get the status of CSV imports",
            "GET", "/social-media-posting/{locationId}/csv",
            _LOCATION_ID,
            *_PAGING,
            query("includeUsers", "Include user details", type="boolean"),
            query("userId", "Filter by user"),
        ),
        op(
            "set_csv_accounts",
            "Set target accounts for an uploaded CSV",
            "POST", "/social-media-posting/{locationId}/set-accounts",
            _LOCATION_ID,
            body("accountIds", "Target account IDs", type="array", required=True),
            body("filePath", "Uploaded file path", required=True),
            body("rowsCount", "Number of rows in the file", type="integer", required=True),
            body("fileName", "File name", required=True),
            body("approver", "Approver user ID"),
            body("userId", "User ID"),
        ),
        op(
            "get_social_categories",
            "List social post categories",
            "GET", "/social-media-posting/{locationId}/categories",
            _LOCATION_ID,
            query("searchText", "Free text search"),
            *_PAGING,
        ),
        op(
            "get_social_category",
            "Get a social post category by ID",
            "GET", "/social-media-posting/{locationId}/categories/{categoryId}",
            _LOCATION_ID,
            path("categoryId", "Category ID"),
        ),
        op(
            "get_social_tags",
            "List social post tags",
            "GET", "/social-media-posting/{locationId}/tags",
            _LOCATION_ID,
            query("searchText", "Free text search"),
            *_PAGING,
        ),
        op(
            "get_social_tags_by_ids",
            "Get social post tags by ID",
            "POST", "/social-media-posting/{locationId}/tags/details",
            _LOCATION_ID,
            body("tagIds", "Tag IDs", type="array", required=True),
        ),
        op(
            "start_social_oauth",
            "Start the OAuth flow to connect a social platform",
            "GET", "/social-media-posting/oauth/{platform}/start",
            path("platform", "Social platform", enum=_PLATFORMS),
            location(),
            query("userId", "User starting the flow", required=True),
            query("page", "Page to return to"),
            query("reconnect", "Reconnect an existing account", type="boolean"),
        ),
        op(
            "get_platform_accounts",
            "List accounts available after an OAuth connection",
            "GET", "/social-media-posting/oauth/{locationId}/{platform}/accounts/{accountId}",
            _LOCATION_ID,
            path("platform", "Social platform", enum=_PLATFORMS),
            path("accountId", "OAuth account ID"),
        ),
    )
