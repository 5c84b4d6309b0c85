# Import all models so Alembic and create_all can see them
from pulseops.models.dashboard import Dashboard
from pulseops.models.panel import Panel
from pulseops.models.data_source import DataSource
from pulseops.models.alert import Alert
from pulseops.models.integration import Integration
from pulseops.models.saved_query import SavedQuery
from pulseops.models.dashboard_share import DashboardShare
from pulseops.models.alert_template import AlertTemplate
from pulseops.models.slo import Slo
from pulseops.models.trace import Trace, Span
from pulseops.models.signal_correlation import SignalCorrelation
from pulseops.models.incident_timeline import IncidentTimelineEvent
from pulseops.models.on_call_schedule import OnCallSchedule
from pulseops.models.escalation_policy import EscalationPolicy
from pulseops.models.postmortem import Postmortem
from pulseops.models.team import Team, TeamMember
from pulseops.models.webhook import Webhook
from pulseops.models.notification_channel import NotificationChannel
from pulseops.models.report_schedule import ReportSchedule
