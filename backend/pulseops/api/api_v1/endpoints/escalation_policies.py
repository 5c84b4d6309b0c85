from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.escalation_policy import EscalationPolicyCreate, EscalationPolicyUpdate

router = APIRouter()

routes = api["escalationPolicies"]


@contract_route(router, routes["list"])
def list_escalation_policies(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.escalation_policy.list(db)


@contract_route(router, routes["create"])
def create_escalation_policy(
    *,
    db: Session = Depends(deps.get_db),
    policy_in: EscalationPolicyCreate,
) -> Any:
    return crud.escalation_policy.create(db, obj_in=policy_in)


@contract_route(router, routes["update"])
def update_escalation_policy(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    policy_in: EscalationPolicyUpdate,
) -> Any:
    policy = crud.escalation_policy.update_by_id(db, id=deps.parse_id(id), obj_in=policy_in)
    if not policy:
        raise not_found("Escalation policy")
    return policy


@contract_route(router, routes["delete"])
def delete_escalation_policy(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.escalation_policy.remove(db, id=deps.parse_id(id)):
        raise not_found("Escalation policy")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
