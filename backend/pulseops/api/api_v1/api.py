from fastapi import APIRouter

from pulseops.api.api_v1.endpoints import (
    dashboards, panels, datasources, alerts, integrations,
    saved_queries, shares, alert_templates, slos, traces, correlations,
    incidents, on_call, escalation_policies, postmortems, teams, webhooks,
    notification_channels, report_schedules, health
)

api_router = APIRouter()

api_router.include_router(dashboards.router, tags=["dashboards"])
api_router.include_router(panels.router, tags=["panels"])
api_router.include_router(datasources.router, tags=["datasources"])
api_router.include_router(alerts.router, tags=["alerts"])
api_router.include_router(integrations.router, tags=["integrations"])
api_router.include_router(saved_queries.router, tags=["saved-queries"])
api_router.include_router(shares.router, tags=["shares"])
api_router.include_router(alert_templates.router, tags=["alert-templates"])
api_router.include_router(slos.router, tags=["slos"])
api_router.include_router(traces.router, tags=["traces"])
api_router.include_router(correlations.router, tags=["correlations"])
api_router.include_router(incidents.router, tags=["incidents"])
api_router.include_router(on_call.router, tags=["on-call"])
api_router.include_router(escalation_policies.router, tags=["escalation-policies"])
api_router.include_router(postmortems.router, tags=["postmortems"])
api_router.include_router(teams.router, tags=["teams"])
api_router.include_router(webhooks.router, tags=["webhooks"])
api_router.include_router(notification_channels.router, tags=["notification-channels"])
api_router.include_router(report_schedules.router, tags=["report-schedules"])
api_router.include_router(health.router, tags=["health"])
