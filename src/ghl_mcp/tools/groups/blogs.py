"""Blog tools: posts, sites, authors, categories."""

from ghl_mcp.tools.rest import RestToolGroup, body, location, op, path, query

_POST_STATUSES = ("DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED")

_POST_FIELDS = (
    body("blogId", "Blog site ID"),
    body("description", "Short description / excerpt"),
    body("rawHTML", "Post content as HTML"),
    body("imageUrl", "Featured image URL"),
    body("imageAltText", "Featured image alt text"),
    body("categories", "Category IDs", type="array"),
    body("tags", "Tags", type="array"),
    body("author", "Author ID"),
    body("urlSlug", "URL slug"),
    body("canonicalLink", "Canonical URL"),
    body("publishedAt", "Publish date (ISO 8601)"),
)


class BlogTools(RestToolGroup):
    """Tools for the GHL blogs API."""

    group_id = "blogs"
    operations = (
        op(
            "create_blog_post",
            "Create a blog post",
            "POST", "/blogs/posts",
            location("body"),
            body("title", "Post title", required=True),
            body("status", "Publication status", default="DRAFT", enum=_POST_STATUSES),
            *_POST_FIELDS,
        ),
        op(
            "update_blog_post",
            "Update a blog post",
            "PUT", "/blogs/posts/{postId}",
            path("postId", "Blog post ID"),
            location("body"),
            body("title", "Post title"),
            body("status", "Publication status", enum=_POST_STATUSES),
            *_POST_FIELDS,
        ),
        op(
            "get_blog_posts",
            "List posts of a blog",
            "GET", "/blogs/posts/all",
            location(),
            query("blogId", "Blog site ID", required=True),
            query("limit", "Maximum results", type="integer", default=10),
            query("offset", "Results to skip", type="integer", default=0),
            query("searchTerm", "Free text search"),
            query("status", "Publication status", enum=_POST_STATUSES),
        ),
        op(
            "get_blog_sites",
            "List blog sites of the location",
            "GET", "/blogs/site/all",
            location(),
            query("skip", "Results to skip", type="integer", default=0),
            query("limit", "Maximum results", type="integer", default=10),
            query("searchTerm", "Free text search"),
        ),
        op(
            "get_blog_authors",
            "List blog authors",
            "GET", "/blogs/authors",
            location(),
            query("limit", "Maximum results", type="integer", default=10),
            query("offset", "Results to skip", type="integer", default=0),
        ),
        op(
            "get_blog_categories",
            "List blog categories",
            "GET", "/blogs/categories",
            location(),
            query("limit", "Maximum results", type="integer", default=10),
            query("offset", "Results to skip", type="integer", default=0),
        ),
        op(
            "check_url_slug",
            "Check whether a blog post URL slug is already taken",
            "GET", "/blogs/posts/url-slug-exists",
            location(),
            query("urlSlug", "Slug to check", required=True),
            query("postId", "Post ID to exclude from the check"),
        ),
    )
