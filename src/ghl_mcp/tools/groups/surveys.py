"""Survey tools."""

from ghl_mcp.tools.rest import RestToolGroup, location, op, query


class SurveyTools(RestToolGroup):
    group_id = "surveys"
    operations = (
        op(
            "ghl_get_surveys",
            "List surveys of the location",
            "GET", "/surveys/",
            location(),
            query("skip", "Results to skip", type="integer", default=0),
            query("limit", "Maximum results", type="integer", default=10),
            query("type", "Survey type filter"),
        ),
        op(
            "ghl_get_survey_submissions",
            "List survey submissions",
            "GET", "/surveys/submissions",
            location(),
            query("surveyId", "Filter by survey"),
            query("q", "Search by contact name, email or phone"),
            query("startAt", "Range start (YYYY-MM-DD)"),
            query("endAt", "Range end (YYYY-MM-DD)"),
            query("page", "Page number", type="integer", default=1),
            query("limit", "Maximum results", type="integer", default=20),
        ),
    )
