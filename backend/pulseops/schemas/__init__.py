# Import and re-export schema classes
from pulseops.schemas.dashboard import DashboardBase, DashboardCreate, DashboardUpdate, DashboardResponse
from pulseops.schemas.panel import PanelBase, PanelCreate, PanelUpdate, PanelResponse, PanelType
from pulseops.schemas.data_source import DataSourceCreate, DataSourceResponse
from pulseops.schemas.alert import AlertCreate, AlertStatusUpdate, AlertResponse
from pulseops.schemas.integration import IntegrationConnectRequest, IntegrationUpsert, IntegrationResponse
from pulseops.schemas.saved_query import SavedQueryCreate, SavedQueryResponse
from pulseops.schemas.dashboard_share import (
    ShareCreateRequest,
    ShareCreate,
    ShareResponse,
    SharedDashboardResponse,
)
from pulseops.schemas.alert_template import AlertTemplateCreate, AlertTemplateResponse
from pulseops.schemas.slo import SloCreate, SloUpdate, SloResponse
from pulseops.schemas.trace import TraceCreate, TraceResponse, SpanCreate, SpanResponse, TraceDetailResponse
from pulseops.schemas.signal_correlation import CorrelationCreate, CorrelationUpdate, CorrelationResponse
from pulseops.schemas.incident_timeline import TimelineEventCreate, TimelineEventResponse
from pulseops.schemas.on_call_schedule import (
    OnCallScheduleCreate,
    OnCallScheduleUpdate,
    OnCallScheduleResponse,
)
from pulseops.schemas.escalation_policy import (
    EscalationPolicyCreate,
    EscalationPolicyUpdate,
    EscalationPolicyResponse,
)
from pulseops.schemas.postmortem import PostmortemCreate, PostmortemUpdate, PostmortemResponse
from pulseops.schemas.team import (
    TeamCreate,
    TeamUpdate,
    TeamResponse,
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamMemberResponse,
)
from pulseops.schemas.webhook import WebhookCreate, WebhookUpdate, WebhookResponse, WebhookTestResponse
from pulseops.schemas.notification_channel import (
    NotificationChannelCreate,
    NotificationChannelUpdate,
    NotificationChannelResponse,
)
from pulseops.schemas.report_schedule import (
    ReportScheduleCreate,
    ReportScheduleUpdate,
    ReportScheduleResponse,
)
