"""Typed route contract

One table maps every resource operation to its HTTP method, wire path
template, input model and per-status response models. The FastAPI routers
register themselves from this table and API clients build URLs and parse
responses from it, so both sides agree on the shapes.

Path templates use ``:param`` placeholders exactly as they appear on the
wire, e.g. ``/api/dashboards/:id``.
"""
import re
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Type, Union

from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel

from pulseops.core.errors import (
    ConflictPayload,
    CredentialErrorPayload,
    NotFoundPayload,
    ValidationErrorPayload,
)
from pulseops.schemas import (
    AlertResponse,
    AlertStatusUpdate,
    AlertTemplateCreate,
    AlertTemplateResponse,
    CorrelationCreate,
    CorrelationResponse,
    CorrelationUpdate,
    DashboardCreate,
    DashboardResponse,
    DashboardUpdate,
    DataSourceCreate,
    DataSourceResponse,
    EscalationPolicyCreate,
    EscalationPolicyResponse,
    EscalationPolicyUpdate,
    IntegrationConnectRequest,
    IntegrationResponse,
    NotificationChannelCreate,
    NotificationChannelResponse,
    NotificationChannelUpdate,
    OnCallScheduleCreate,
    OnCallScheduleResponse,
    OnCallScheduleUpdate,
    PanelCreate,
    PanelResponse,
    PanelUpdate,
    PostmortemCreate,
    PostmortemResponse,
    PostmortemUpdate,
    ReportScheduleCreate,
    ReportScheduleResponse,
    ReportScheduleUpdate,
    SavedQueryCreate,
    SavedQueryResponse,
    ShareCreateRequest,
    ShareResponse,
    SharedDashboardResponse,
    SloCreate,
    SloResponse,
    SloUpdate,
    SpanCreate,
    SpanResponse,
    TeamCreate,
    TeamMemberCreate,
    TeamMemberResponse,
    TeamMemberUpdate,
    TeamResponse,
    TeamUpdate,
    TimelineEventCreate,
    TimelineEventResponse,
    TraceCreate,
    TraceDetailResponse,
    TraceResponse,
    WebhookCreate,
    WebhookResponse,
    WebhookTestResponse,
    WebhookUpdate,
)

API_PREFIX = "/api"

_PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class HealthResponse(BaseModel):
    status: str
    database: str


class Route(NamedTuple):
    method: str
    path: str
    input: Optional[Type[BaseModel]]
    responses: Dict[int, Any]

    @property
    def status_code(self) -> int:
        """The single 2xx status of the operation"""
        return min(code for code in self.responses if 200 <= code < 300)

    @property
    def response_model(self) -> Any:
        return self.responses[self.status_code]

    @property
    def error_responses(self) -> Dict[Union[int, str], Dict[str, Any]]:
        return {
            code: {"model": model}
            for code, model in self.responses.items()
            if code >= 400 and model is not None
        }


api: Dict[str, Dict[str, Route]] = {
    "dashboards": {
        "list": Route("GET", "/api/dashboards", None, {200: List[DashboardResponse]}),
        "get": Route("GET", "/api/dashboards/:id", None, {
            200: DashboardResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/dashboards", DashboardCreate, {
            201: DashboardResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/dashboards/:id", DashboardUpdate, {
            200: DashboardResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/dashboards/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "panels": {
        "list": Route("GET", "/api/dashboards/:dashboardId/panels", None, {200: List[PanelResponse]}),
        "create": Route("POST", "/api/panels", PanelCreate, {
            201: PanelResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "update": Route("PUT", "/api/panels/:id", PanelUpdate, {
            200: PanelResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/panels/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "dataSources": {
        "list": Route("GET", "/api/datasources", None, {200: List[DataSourceResponse]}),
        "create": Route("POST", "/api/datasources", DataSourceCreate, {
            201: DataSourceResponse,
            400: ValidationErrorPayload,
        }),
    },
    "alerts": {
        "list": Route("GET", "/api/alerts", None, {200: List[AlertResponse]}),
        "update": Route("PATCH", "/api/alerts/:id", AlertStatusUpdate, {
            200: AlertResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
            409: ConflictPayload,
        }),
    },
    "integrations": {
        "list": Route("GET", "/api/integrations", None, {200: List[IntegrationResponse]}),
        "connect": Route("POST", "/api/integrations/connect", IntegrationConnectRequest, {
            200: IntegrationResponse,
            400: ValidationErrorPayload,
            401: CredentialErrorPayload,
        }),
        "disconnect": Route("DELETE", "/api/integrations/:serviceId", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "savedQueries": {
        "list": Route("GET", "/api/saved-queries", None, {200: List[SavedQueryResponse]}),
        "create": Route("POST", "/api/saved-queries", SavedQueryCreate, {
            201: SavedQueryResponse,
            400: ValidationErrorPayload,
        }),
        "delete": Route("DELETE", "/api/saved-queries/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "shares": {
        "list": Route("GET", "/api/dashboards/:dashboardId/shares", None, {
            200: List[ShareResponse],
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/dashboards/:dashboardId/shares", ShareCreateRequest, {
            201: ShareResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "resolve": Route("GET", "/api/share/:token", None, {
            200: SharedDashboardResponse,
            404: NotFoundPayload,
            410: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/shares/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "alertTemplates": {
        "list": Route("GET", "/api/alert-templates", None, {200: List[AlertTemplateResponse]}),
        "create": Route("POST", "/api/alert-templates", AlertTemplateCreate, {
            201: AlertTemplateResponse,
            400: ValidationErrorPayload,
        }),
        "delete": Route("DELETE", "/api/alert-templates/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "slos": {
        "list": Route("GET", "/api/slos", None, {200: List[SloResponse]}),
        "get": Route("GET", "/api/slos/:id", None, {
            200: SloResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/slos", SloCreate, {
            201: SloResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/slos/:id", SloUpdate, {
            200: SloResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/slos/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "traces": {
        "list": Route("GET", "/api/traces", None, {200: List[TraceResponse]}),
        "get": Route("GET", "/api/traces/:traceId", None, {
            200: TraceDetailResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/traces", TraceCreate, {
            201: TraceResponse,
            400: ValidationErrorPayload,
            409: ConflictPayload,
        }),
    },
    "spans": {
        "create": Route("POST", "/api/spans", SpanCreate, {
            201: SpanResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
            409: ConflictPayload,
        }),
    },
    "correlations": {
        "list": Route("GET", "/api/correlations", None, {200: List[CorrelationResponse]}),
        "get": Route("GET", "/api/correlations/:correlationId", None, {
            200: CorrelationResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/correlations", CorrelationCreate, {
            201: CorrelationResponse,
            400: ValidationErrorPayload,
            409: ConflictPayload,
        }),
        "update": Route("PUT", "/api/correlations/:correlationId", CorrelationUpdate, {
            200: CorrelationResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
    },
    "incidentTimeline": {
        "list": Route("GET", "/api/incidents/:incidentId/timeline", None, {
            200: List[TimelineEventResponse],
        }),
        "create": Route("POST", "/api/incidents/:incidentId/timeline", TimelineEventCreate, {
            201: TimelineEventResponse,
            400: ValidationErrorPayload,
        }),
    },
    "onCall": {
        "list": Route("GET", "/api/on-call", None, {200: List[OnCallScheduleResponse]}),
        "get": Route("GET", "/api/on-call/:id", None, {
            200: OnCallScheduleResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/on-call", OnCallScheduleCreate, {
            201: OnCallScheduleResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/on-call/:id", OnCallScheduleUpdate, {
            200: OnCallScheduleResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/on-call/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "escalationPolicies": {
        "list": Route("GET", "/api/escalation-policies", None, {200: List[EscalationPolicyResponse]}),
        "create": Route("POST", "/api/escalation-policies", EscalationPolicyCreate, {
            201: EscalationPolicyResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/escalation-policies/:id", EscalationPolicyUpdate, {
            200: EscalationPolicyResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/escalation-policies/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "postmortems": {
        "list": Route("GET", "/api/postmortems", None, {200: List[PostmortemResponse]}),
        "get": Route("GET", "/api/postmortems/:id", None, {
            200: PostmortemResponse,
            404: NotFoundPayload,
        }),
        "getByIncident": Route("GET", "/api/incidents/:incidentId/postmortem", None, {
            200: PostmortemResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/postmortems", PostmortemCreate, {
            201: PostmortemResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/postmortems/:id", PostmortemUpdate, {
            200: PostmortemResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
    },
    "teams": {
        "list": Route("GET", "/api/teams", None, {200: List[TeamResponse]}),
        "get": Route("GET", "/api/teams/:id", None, {
            200: TeamResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/teams", TeamCreate, {
            201: TeamResponse,
            400: ValidationErrorPayload,
            409: ConflictPayload,
        }),
        "update": Route("PUT", "/api/teams/:id", TeamUpdate, {
            200: TeamResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
            409: ConflictPayload,
        }),
        "delete": Route("DELETE", "/api/teams/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "teamMembers": {
        "list": Route("GET", "/api/teams/:teamId/members", None, {200: List[TeamMemberResponse]}),
        "create": Route("POST", "/api/teams/:teamId/members", TeamMemberCreate, {
            201: TeamMemberResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
            409: ConflictPayload,
        }),
        "update": Route("PUT", "/api/team-members/:id", TeamMemberUpdate, {
            200: TeamMemberResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
            409: ConflictPayload,
        }),
        "delete": Route("DELETE", "/api/team-members/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "webhooks": {
        "list": Route("GET", "/api/webhooks", None, {200: List[WebhookResponse]}),
        "get": Route("GET", "/api/webhooks/:id", None, {
            200: WebhookResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/webhooks", WebhookCreate, {
            201: WebhookResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/webhooks/:id", WebhookUpdate, {
            200: WebhookResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/webhooks/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
        "test": Route("POST", "/api/webhooks/:id/test", None, {
            200: WebhookTestResponse,
            404: NotFoundPayload,
        }),
    },
    "notificationChannels": {
        "list": Route("GET", "/api/notification-channels", None, {200: List[NotificationChannelResponse]}),
        "get": Route("GET", "/api/notification-channels/:id", None, {
            200: NotificationChannelResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/notification-channels", NotificationChannelCreate, {
            201: NotificationChannelResponse,
            400: ValidationErrorPayload,
        }),
        "update": Route("PUT", "/api/notification-channels/:id", NotificationChannelUpdate, {
            200: NotificationChannelResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/notification-channels/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "reportSchedules": {
        "list": Route("GET", "/api/report-schedules", None, {200: List[ReportScheduleResponse]}),
        "get": Route("GET", "/api/report-schedules/:id", None, {
            200: ReportScheduleResponse,
            404: NotFoundPayload,
        }),
        "create": Route("POST", "/api/report-schedules", ReportScheduleCreate, {
            201: ReportScheduleResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "update": Route("PUT", "/api/report-schedules/:id", ReportScheduleUpdate, {
            200: ReportScheduleResponse,
            400: ValidationErrorPayload,
            404: NotFoundPayload,
        }),
        "delete": Route("DELETE", "/api/report-schedules/:id", None, {
            204: None,
            404: NotFoundPayload,
        }),
    },
    "health": {
        "get": Route("GET", "/api/health", None, {200: HealthResponse}),
    },
}


def build_url(path: str, params: Optional[Dict[str, Union[str, int]]] = None) -> str:
    """Substitute ``:key`` placeholders of a path template.

    Plain textual replacement, values are not validated. Keys that do not
    appear in the template are ignored.

    >>> build_url("/api/dashboards/:id", {"id": 3})
    '/api/dashboards/3'
    """
    url = path
    for key, value in (params or {}).items():
        placeholder = f":{key}"
        if placeholder in url:
            url = url.replace(placeholder, str(value))
    return url


def route_path(route: Route) -> str:
    """Server-side path for a route, relative to API_PREFIX.

    ``/api/dashboards/:dashboardId/panels`` -> ``/dashboards/{dashboard_id}/panels``
    """
    path = route.path
    if path.startswith(API_PREFIX):
        path = path[len(API_PREFIX):]

    def _param(match: re.Match) -> str:
        return "{" + _CAMEL_BOUNDARY.sub("_", match.group(1)).lower() + "}"

    return _PLACEHOLDER.sub(_param, path)


def contract_route(router: APIRouter, route: Route, **kwargs) -> Callable:
    """Register the decorated endpoint on ``router`` as ``route``.

    Method, path, success status and response models all come from the
    contract entry.
    """
    options: Dict[str, Any] = {
        "methods": [route.method],
        "status_code": route.status_code,
        "response_model": route.response_model,
        "responses": route.error_responses,
    }
    if route.response_model is None:
        options["response_class"] = Response
    options.update(kwargs)
    return router.api_route(route_path(route), **options)
