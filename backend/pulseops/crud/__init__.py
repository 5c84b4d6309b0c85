from .crud_dashboard import dashboard
from .crud_panel import panel
from .crud_data_source import data_source
from .crud_alert import alert
from .crud_integration import integration
from .crud_saved_query import saved_query
from .crud_dashboard_share import dashboard_share
from .crud_alert_template import alert_template
from .crud_slo import slo
from .crud_trace import trace, span
from .crud_signal_correlation import signal_correlation
from .crud_incident_timeline import incident_timeline
from .crud_on_call_schedule import on_call_schedule
from .crud_escalation_policy import escalation_policy
from .crud_postmortem import postmortem
from .crud_team import team, team_member
from .crud_webhook import webhook
from .crud_notification_channel import notification_channel
from .crud_report_schedule import report_schedule
