from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from modforge.database import Base


class ProjectFileDB(Base):
    """One file or directory row of a project's tree."""

    __tablename__ = "project_files"
    __table_args__ = (
        UniqueConstraint("project_id", "file_path", name="uq_project_files_project_path"),
    )

    id = Column(String, primary_key=True, index=True)
    project_id = Column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    file_path = Column(String(1024), nullable=False)
    file_name = Column(String(255), nullable=False)
    file_content = Column(Text, nullable=False, default="")
    file_type = Column(String(32), nullable=False, default="text")
    is_directory = Column(Boolean, nullable=False, default=False)
    parent_path = Column(String(1024), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    project = relationship("ProjectDB", back_populates="files")
