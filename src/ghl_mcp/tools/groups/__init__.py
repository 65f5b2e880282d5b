"""GoHighLevel tool groups, one module per API area."""

from ghl_mcp.tools.groups.associations import AssociationTools
from ghl_mcp.tools.groups.blogs import BlogTools
from ghl_mcp.tools.groups.calendars import CalendarTools
from ghl_mcp.tools.groups.contacts import ContactTools
from ghl_mcp.tools.groups.conversations import ConversationTools
from ghl_mcp.tools.groups.custom_fields_v2 import CustomFieldV2Tools
from ghl_mcp.tools.groups.email import EmailTools
from ghl_mcp.tools.groups.email_isv import EmailISVTools
from ghl_mcp.tools.groups.invoices import InvoicesTools
from ghl_mcp.tools.groups.locations import LocationTools
from ghl_mcp.tools.groups.media import MediaTools
from ghl_mcp.tools.groups.objects import ObjectTools
from ghl_mcp.tools.groups.opportunities import OpportunityTools
from ghl_mcp.tools.groups.payments import PaymentsTools
from ghl_mcp.tools.groups.products import ProductsTools
from ghl_mcp.tools.groups.social_media import SocialMediaTools
from ghl_mcp.tools.groups.store import StoreTools
from ghl_mcp.tools.groups.surveys import SurveyTools
from ghl_mcp.tools.groups.workflows import WorkflowTools

# Registration order; also the order tools are listed to clients.
GROUP_CLASSES = (
    ContactTools,
    ConversationTools,
    BlogTools,
    OpportunityTools,
    CalendarTools,
    EmailTools,
    LocationTools,
    EmailISVTools,
    SocialMediaTools,
    MediaTools,
    ObjectTools,
    AssociationTools,
    CustomFieldV2Tools,
    WorkflowTools,
    SurveyTools,
    StoreTools,
    ProductsTools,
    InvoicesTools,
    PaymentsTools,
)

__all__ = [cls.__name__ for cls in GROUP_CLASSES] + ["GROUP_CLASSES"]
