"""Media library tools."""

from ghl_mcp.tools.rest import RestToolGroup, alt, body, op, path, query


class MediaTools(RestToolGroup):
    """Tools for the GHL media library API."""

    group_id = "media"
    operations = (
        op(
            "get_media_files",
            "List files and folders in the media library",
            "GET", "/medias/files",
            *alt("query"),
            query("sortBy", "Sort field", default="createdAt"),
            query("sortOrder", "Sort order", default="desc", enum=("asc", "desc")),
            query("type", "Entry type", enum=("file", "folder")),
            query("query", "Free text search"),
            query("limit", "Maximum results", type="integer", default=20),
            query("offset", "Results to skip", type="integer", default=0),
            query("parentId", "Folder ID"),
        ),
        op(
            "upload_media_file",
            "Add a hosted file to the media library",
            "POST", "/medias/upload-file",
            *alt("body"),
            body("fileUrl", "URL of the hosted file", required=True),
            body("hosted", "File is hosted elsewhere", type="boolean", default=True),
            body("name", "File name"),
            body("parentId", "Folder ID"),
        ),
        op(
            "delete_media_file",
            "Delete a file or folder from the media library",
            "DELETE", "/medias/{fileId}",
            path("fileId", "File or folder ID"),
            *alt("query"),
        ),
    )
