from typing import Any, List, Optional
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.team import Team, TeamMember
from pulseops.schemas.team import TeamCreate, TeamMemberCreate, TeamMemberUpdate, TeamUpdate


class CRUDTeam(CRUDBase[Team, TeamCreate, TeamUpdate]):
    def list(self, db: Session) -> List[Team]:
        return db.query(Team).order_by(Team.created_at, Team.id).all()

    def get_by_slug(self, db: Session, *, slug: str) -> Optional[Team]:
        return db.query(Team).filter(Team.slug == slug).first()


class CRUDTeamMember(CRUDBase[TeamMember, TeamMemberCreate, TeamMemberUpdate]):
    def get_by_team(self, db: Session, *, team_id: int) -> List[TeamMember]:
        return (
            db.query(TeamMember)
            .filter(TeamMember.team_id == team_id)
            .order_by(TeamMember.created_at, TeamMember.id)
            .all()
        )

    def get_by_email(self, db: Session, *, team_id: Any, email: str) -> Optional[TeamMember]:
        return (
            db.query(TeamMember)
            .filter(TeamMember.team_id == team_id, TeamMember.email == email)
            .first()
        )

    def add(self, db: Session, *, team_id: int, obj_in: TeamMemberCreate) -> TeamMember:
        db_obj = TeamMember(team_id=team_id, **obj_in.model_dump())
        try:
            db.add(db_obj)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj


team = CRUDTeam(Team)
team_member = CRUDTeamMember(TeamMember)
