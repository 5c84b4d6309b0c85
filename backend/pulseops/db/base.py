# Import all the models, so that Base has them before being
# imported by Alembic
from pulseops.db.base_class import Base  # noqa
from pulseops.models.dashboard import Dashboard  # noqa
from pulseops.models.panel import Panel  # noqa
from pulseops.models.data_source import DataSource  # noqa
from pulseops.models.alert import Alert  # noqa
from pulseops.models.integration import Integration  # noqa
from pulseops.models.saved_query import SavedQuery  # noqa
from pulseops.models.dashboard_share import DashboardShare  # noqa
from pulseops.models.alert_template import AlertTemplate  # noqa
from pulseops.models.slo import Slo  # noqa
from pulseops.models.trace import Trace, Span  # noqa
from pulseops.models.signal_correlation import SignalCorrelation  # noqa
from pulseops.models.incident_timeline import IncidentTimelineEvent  # noqa
from pulseops.models.on_call_schedule import OnCallSchedule  # noqa
from pulseops.models.escalation_policy import EscalationPolicy  # noqa
from pulseops.models.postmortem import Postmortem  # noqa
from pulseops.models.team import Team, TeamMember  # noqa
from pulseops.models.webhook import Webhook  # noqa
from pulseops.models.notification_channel import NotificationChannel  # noqa
from pulseops.models.report_schedule import ReportSchedule  # noqa
