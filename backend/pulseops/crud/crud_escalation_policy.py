from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.escalation_policy import EscalationPolicy
from pulseops.schemas.escalation_policy import EscalationPolicyCreate, EscalationPolicyUpdate


class CRUDEscalationPolicy(CRUDBase[EscalationPolicy, EscalationPolicyCreate, EscalationPolicyUpdate]):
    def list(self, db: Session) -> List[EscalationPolicy]:
        return db.query(EscalationPolicy).order_by(EscalationPolicy.created_at, EscalationPolicy.id).all()


escalation_policy = CRUDEscalationPolicy(EscalationPolicy)
