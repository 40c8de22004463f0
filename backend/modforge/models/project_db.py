from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship

from modforge.database import Base


class ProjectDB(Base):
    """Database model for mod projects."""

    __tablename__ = "projects"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    platform = Column(String, nullable=False, default="forge")
    minecraft_version = Column(String, nullable=False)
    mod_id = Column(String, nullable=False)
    status = Column(String, nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    files = relationship(
        "ProjectFileDB",
        back_populates="project",
        cascade="all, delete-orphan",
    )
