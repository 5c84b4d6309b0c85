"""Create PulseOps tables

Revision ID: 001_initial_tables
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_tables'
down_revision = None
branch_labels = None
depends_on = None

TABLE_OPTIONS = {
    'mysql_charset': 'utf8mb4',
    'mysql_collate': 'utf8mb4_unicode_ci',
}

NOW = sa.text('CURRENT_TIMESTAMP')


def upgrade():
    # 1. dashboards
    op.create_table(
        'dashboards',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_dashboards_created_at', 'dashboards', ['created_at'])

    # 2. panels, removed with their dashboard
    op.create_table(
        'panels',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('dashboard_id', sa.BigInteger(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('data_config', sa.JSON(), nullable=False),
        sa.Column('layout_config', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['dashboard_id'], ['dashboards.id'], name='fk_panels_dashboard', ondelete='CASCADE'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_panels_dashboard_id', 'panels', ['dashboard_id'])

    # 3. data_sources
    op.create_table(
        'data_sources',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('config', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )

    # 4. alerts
    op.create_table(
        'alerts',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('severity', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='active'),
        sa.Column('threshold_value', sa.Float(), nullable=True),
        sa.Column('current_value', sa.Float(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.Column('resolved_at', sa.TIMESTAMP(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_alerts_status', 'alerts', ['status'])
    op.create_index('ix_alerts_created_at', 'alerts', ['created_at'])

    # 5. integrations, one row per service
    op.create_table(
        'integrations',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('service_id', sa.String(100), nullable=False),
        sa.Column('service_name', sa.String(255), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='disconnected'),
        sa.Column('last_validated_at', sa.TIMESTAMP(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('service_id', name='uq_integrations_service_id'),
        **TABLE_OPTIONS
    )

    # 6. saved_queries
    op.create_table(
        'saved_queries',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('query_type', sa.String(20), nullable=False),
        sa.Column('query', sa.JSON(), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_saved_queries_created_at', 'saved_queries', ['created_at'])

    # 7. dashboard_shares
    op.create_table(
        'dashboard_shares',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('dashboard_id', sa.BigInteger(), nullable=False),
        sa.Column('share_token', sa.String(64), nullable=False),
        sa.Column('expires_at', sa.TIMESTAMP(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['dashboard_id'], ['dashboards.id'], name='fk_shares_dashboard', ondelete='CASCADE'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_dashboard_shares_dashboard_id', 'dashboard_shares', ['dashboard_id'])
    op.create_index('ix_dashboard_shares_share_token', 'dashboard_shares', ['share_token'], unique=True)

    # 8. alert_templates
    op.create_table(
        'alert_templates',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('severity', sa.String(20), nullable=False),
        sa.Column('condition', sa.JSON(), nullable=False),
        sa.Column('is_built_in', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )

    # 9. slos
    op.create_table(
        'slos',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('service_id', sa.String(100), nullable=False),
        sa.Column('sli_type', sa.String(20), nullable=False),
        sa.Column('target_percentage', sa.Integer(), nullable=False),
        sa.Column('window_days', sa.Integer(), nullable=False, server_default='30'),
        sa.Column('current_value', sa.Integer(), nullable=True),
        sa.Column('error_budget_remaining', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='healthy'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_slos_service_id', 'slos', ['service_id'])

    # 10. traces and spans, joined on the string trace_id
    op.create_table(
        'traces',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('trace_id', sa.String(100), nullable=False),
        sa.Column('root_span_id', sa.String(100), nullable=True),
        sa.Column('service_name', sa.String(255), nullable=False),
        sa.Column('operation_name', sa.String(255), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='ok'),
        sa.Column('start_time', sa.TIMESTAMP(), nullable=False),
        sa.Column('end_time', sa.TIMESTAMP(), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_traces_trace_id', 'traces', ['trace_id'], unique=True)
    op.create_index('ix_traces_service_name', 'traces', ['service_name'])
    op.create_index('ix_traces_start_time', 'traces', ['start_time'])

    op.create_table(
        'spans',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('span_id', sa.String(100), nullable=False),
        sa.Column('trace_id', sa.String(100), nullable=False),
        sa.Column('parent_span_id', sa.String(100), nullable=True),
        sa.Column('service_name', sa.String(255), nullable=False),
        sa.Column('operation_name', sa.String(255), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='ok'),
        sa.Column('start_time', sa.TIMESTAMP(), nullable=False),
        sa.Column('end_time', sa.TIMESTAMP(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_spans_span_id', 'spans', ['span_id'], unique=True)
    op.create_index('ix_spans_trace_id', 'spans', ['trace_id'])

    # 11. signal_correlations
    op.create_table(
        'signal_correlations',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('correlation_id', sa.String(100), nullable=False),
        sa.Column('alert_ids', sa.JSON(), nullable=False),
        sa.Column('log_patterns', sa.JSON(), nullable=False),
        sa.Column('metric_anomalies', sa.JSON(), nullable=False),
        sa.Column('trace_ids', sa.JSON(), nullable=False),
        sa.Column('service_ids', sa.JSON(), nullable=False),
        sa.Column('severity', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='active'),
        sa.Column('ai_analysis', sa.Text(), nullable=True),
        sa.Column('suggested_cause', sa.Text(), nullable=True),
        sa.Column('confidence', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_signal_correlations_correlation_id', 'signal_correlations', ['correlation_id'], unique=True)

    # 12. incident_timeline_events
    op.create_table(
        'incident_timeline_events',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('incident_id', sa.String(100), nullable=False),
        sa.Column('event_type', sa.String(50), nullable=False),
        sa.Column('event_data', sa.JSON(), nullable=False),
        sa.Column('user_id', sa.String(100), nullable=True),
        sa.Column('user_name', sa.String(255), nullable=True),
        sa.Column('timestamp', sa.TIMESTAMP(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_incident_timeline_events_incident_id', 'incident_timeline_events', ['incident_id'])

    # 13. on_call_schedules
    op.create_table(
        'on_call_schedules',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('rotation_type', sa.String(20), nullable=False, server_default='weekly'),
        sa.Column('timezone', sa.String(64), nullable=False, server_default='UTC'),
        sa.Column('members', sa.JSON(), nullable=False),
        sa.Column('current_on_call', sa.String(255), nullable=True),
        sa.Column('start_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )

    # 14. escalation_policies
    op.create_table(
        'escalation_policies',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('rules', sa.JSON(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )

    # 15. postmortems
    op.create_table(
        'postmortems',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('incident_id', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('impact', sa.Text(), nullable=True),
        sa.Column('root_cause', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('ai_generated', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('participants', sa.JSON(), nullable=False),
        sa.Column('lessons_learned', sa.JSON(), nullable=False),
        sa.Column('action_items', sa.JSON(), nullable=False),
        sa.Column('timeline', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_postmortems_incident_id', 'postmortems', ['incident_id'])
    op.create_index('ix_postmortems_created_at', 'postmortems', ['created_at'])

    # 16. teams and team_members
    op.create_table(
        'teams',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_teams_slug', 'teams', ['slug'], unique=True)

    op.create_table(
        'team_members',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('team_id', sa.BigInteger(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='viewer'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id'], name='fk_team_members_team', ondelete='CASCADE'),
        sa.UniqueConstraint('team_id', 'email', name='uq_team_members_team_email'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_team_members_team_id', 'team_members', ['team_id'])

    # 17. webhooks
    op.create_table(
        'webhooks',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('url', sa.String(2048), nullable=False),
        sa.Column('type', sa.String(20), nullable=False, server_default='generic'),
        sa.Column('events', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('failure_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_triggered_at', sa.TIMESTAMP(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )

    # 18. notification_channels
    op.create_table(
        'notification_channels',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('config', sa.JSON(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        **TABLE_OPTIONS
    )

    # 19. report_schedules, optionally tied to a dashboard
    op.create_table(
        'report_schedules',
        sa.Column('id', sa.BigInteger(), nullable=False, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('dashboard_id', sa.BigInteger(), nullable=True),
        sa.Column('frequency', sa.String(20), nullable=False, server_default='weekly'),
        sa.Column('format', sa.String(10), nullable=False, server_default='pdf'),
        sa.Column('recipients', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('last_sent_at', sa.TIMESTAMP(), nullable=True),
        sa.Column('next_run_at', sa.TIMESTAMP(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False, server_default=NOW),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['dashboard_id'], ['dashboards.id'], name='fk_report_schedules_dashboard', ondelete='CASCADE'),
        **TABLE_OPTIONS
    )
    op.create_index('ix_report_schedules_dashboard_id', 'report_schedules', ['dashboard_id'])


def downgrade():
    # Reverse dependency order
    op.drop_table('report_schedules')
    op.drop_table('notification_channels')
    op.drop_table('webhooks')
    op.drop_table('team_members')
    op.drop_table('teams')
    op.drop_table('postmortems')
    op.drop_table('escalation_policies')
    op.drop_table('on_call_schedules')
    op.drop_table('incident_timeline_events')
    op.drop_table('signal_correlations')
    op.drop_table('spans')
    op.drop_table('traces')
    op.drop_table('slos')
    op.drop_table('alert_templates')
    op.drop_table('dashboard_shares')
    op.drop_table('saved_queries')
    op.drop_table('integrations')
    op.drop_table('alerts')
    op.drop_table('data_sources')
    op.drop_table('panels')
    op.drop_table('dashboards')
