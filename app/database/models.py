from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.database.config import Base
from app.schemas import BugPriority, BugStatus


class Bug(Base):
    __tablename__ = "bugs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(String(1000), nullable=True)
    screenshot_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(Enum(BugStatus, name="bug_status"), nullable=False, default=BugStatus.OPEN)
    priority = Column(Enum(BugPriority, name="bug_priority"), nullable=False, default=BugPriority.MEDIUM)

    # "metadata" is reserved on declarative classes
    metadata_entries = relationship(
        "BugMetadata",
        back_populates="bug",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class BugMetadata(Base):
    __tablename__ = "bug_metadata"

    bug_id = Column(Integer, ForeignKey("bugs.id", ondelete="CASCADE"), primary_key=True)
    metadata_key = Column(String, primary_key=True)
    metadata_value = Column(String, nullable=False)

    bug = relationship("Bug", back_populates="metadata_entries")
