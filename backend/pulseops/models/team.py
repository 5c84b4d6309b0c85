"""Team and membership models"""
from sqlalchemy import Column, BigInteger, String, Text, TIMESTAMP, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from pulseops.db.base_class import Base, IdType


class Team(Base):
    __tablename__ = "teams"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    # Deleting a team removes its memberships
    members = relationship(
        "TeamMember", back_populates="team", cascade="all, delete-orphan", passive_deletes=True
    )


class TeamMember(Base):
    __tablename__ = "team_members"
    __table_args__ = (
        UniqueConstraint("team_id", "email", name="uq_team_members_team_email"),
    )

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    team_id = Column(BigInteger, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default="viewer")  # admin/editor/viewer
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    team = relationship("Team", back_populates="members")
