"""Team and membership API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import conflict, not_found
from pulseops.schemas.team import TeamCreate, TeamMemberCreate, TeamMemberUpdate, TeamUpdate

router = APIRouter()

routes = api["teams"]
member_routes = api["teamMembers"]


@contract_route(router, routes["list"])
def list_teams(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.team.list(db)


@contract_route(router, routes["get"])
def get_team(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    team = crud.team.get(db, deps.parse_id(id))
    if not team:
        raise not_found("Team")
    return team


@contract_route(router, routes["create"])
def create_team(
    *,
    db: Session = Depends(deps.get_db),
    team_in: TeamCreate,
) -> Any:
    """Create a team, slugs are unique"""
    message = f"Team slug '{team_in.slug}' is already taken"
    if crud.team.get_by_slug(db, slug=team_in.slug):
        raise conflict(message)
    try:
        return crud.team.create(db, obj_in=team_in)
    except IntegrityError:
        raise conflict(message)


@contract_route(router, routes["update"])
def update_team(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    team_in: TeamUpdate,
) -> Any:
    team = crud.team.get(db, deps.parse_id(id))
    if not team:
        raise not_found("Team")

    message = f"Team slug '{team_in.slug}' is already taken"
    if team_in.slug is not None:
        existing = crud.team.get_by_slug(db, slug=team_in.slug)
        if existing and existing.id != team.id:
            raise conflict(message)
    try:
        return crud.team.update(db, db_obj=team, obj_in=team_in)
    except IntegrityError:
        raise conflict(message)


@contract_route(router, routes["delete"])
def delete_team(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    """Delete a team and its memberships"""
    if not crud.team.remove(db, id=deps.parse_id(id)):
        raise not_found("Team")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@contract_route(router, member_routes["list"])
def list_team_members(
    *,
    db: Session = Depends(deps.get_db),
    team_id: str,
) -> Any:
    """Members of a team, empty for unknown teams"""
    team_pk = deps.parse_id(team_id)
    if team_pk is None:
        return []
    return crud.team_member.get_by_team(db, team_id=team_pk)


@contract_route(router, member_routes["create"])
def add_team_member(
    *,
    db: Session = Depends(deps.get_db),
    team_id: str,
    member_in: TeamMemberCreate,
) -> Any:
    team = crud.team.get(db, deps.parse_id(team_id))
    if not team:
        raise not_found("Team")

    message = f"{member_in.email} is already a member of this team"
    if crud.team_member.get_by_email(db, team_id=team.id, email=member_in.email):
        raise conflict(message)
    try:
        return crud.team_member.add(db, team_id=team.id, obj_in=member_in)
    except IntegrityError:
        raise conflict(message)


@contract_route(router, member_routes["update"])
def update_team_member(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    member_in: TeamMemberUpdate,
) -> Any:
    """Change a member's role, name or email"""
    member = crud.team_member.get(db, deps.parse_id(id))
    if not member:
        raise not_found("Team member")

    message = f"{member_in.email} is already a member of this team"
    if member_in.email is not None:
        existing = crud.team_member.get_by_email(db, team_id=member.team_id, email=member_in.email)
        if existing and existing.id != member.id:
            raise conflict(message)
    try:
        return crud.team_member.update(db, db_obj=member, obj_in=member_in)
    except IntegrityError:
        raise conflict(message)


@contract_route(router, member_routes["delete"])
def remove_team_member(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.team_member.remove(db, id=deps.parse_id(id)):
        raise not_found("Team member")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
