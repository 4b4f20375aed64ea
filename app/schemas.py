from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional

class BugStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"

class BugPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class CamelModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BugCreate(CamelModel):
    title: str
    description: Optional[str] = Field(None, max_length=1000)
    screenshot_url: Optional[str] = None
    priority: Optional[BugPriority] = None
    metadata: Optional[dict[str, str]] = None

class BugUpdate(CamelModel):
    """Partial update: every field is optional and None means "leave unchanged"."""

    title: Optional[str] = None
    description: Optional[str] = Field(None, max_length=1000)
    screenshot_url: Optional[str] = None
    status: Optional[BugStatus] = None
    priority: Optional[BugPriority] = None
    metadata: Optional[dict[str, str]] = None

class BugStatusUpdate(CamelModel):
    status: BugStatus

class BugPriorityUpdate(CamelModel):
    priority: BugPriority


class BugDraft(CamelModel):
    """A bug that has not been stored yet, so it has no id."""

    title: str
    description: Optional[str] = None
    screenshot_url: Optional[str] = None
    created_at: datetime
    status: BugStatus = BugStatus.OPEN
    priority: BugPriority = BugPriority.MEDIUM
    metadata: dict[str, str] = Field(default_factory=dict)

class BugRecord(BugDraft):
    id: int
