"""Database models for teams and their rosters."""
from __future__ import annotations

from typing import List

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from teamhub.db.base import Base


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[int] = Column(Integer, primary_key=True, index=True)
    name: Mapped[str] = Column(String, index=True, nullable=False)
    location: Mapped[str] = Column(String, nullable=False)
    mascotte: Mapped[str] = Column(String, nullable=True)

    players: Mapped[List["Player"]] = relationship(
        "Player",
        back_populates="team",
        cascade="all, delete-orphan",
    )


class Player(Base):
    __tablename__ = "players"
    __table_args__ = (
        UniqueConstraint("team_id", "name", "location", name="uq_player_team"),
    )

    id: Mapped[int] = Column(Integer, primary_key=True, index=True)
    team_id: Mapped[int] = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = Column(String, nullable=False)
    location: Mapped[str] = Column(String, nullable=False)

    team: Mapped["Team"] = relationship("Team", back_populates="players")
