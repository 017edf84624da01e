"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from domain.entities.profile import SINGLETON_PROFILE_ID


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Portfolio profile model. At most one row, always with the singleton id."""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(f"id = {SINGLETON_PROFILE_ID}", name="ck_profiles_singleton"),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
        default=SINGLETON_PROFILE_ID,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    education: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)
    skills: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)
    work: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)
    links: Mapped[dict[str, Any]] = mapped_column(JSONB, default=dict, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # Relationships
    projects: Mapped[list["ProjectModel"]] = relationship(
        "ProjectModel",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="ProjectModel.position",
        lazy="selectin",
    )


class ProjectModel(Base):
    """Project belonging to the profile, kept in display order by position."""

    __tablename__ = "profile_projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    links: Mapped[list[str]] = mapped_column(JSONB, default=list, nullable=False)

    # Relationships
    profile: Mapped["ProfileModel"] = relationship(
        "ProfileModel",
        back_populates="projects",
    )
