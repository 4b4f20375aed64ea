"""
Shared fixtures. The environment is set before any app module is imported so
the engine is built for SQLite and requests use the in-memory store.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["BUG_STORE_BACKEND"] = "memory"
os.environ.pop("SLACK_WEBHOOK_URL", None)

from datetime import datetime, timezone

import pytest

from app.schemas import BugPriority, BugRecord, BugStatus


@pytest.fixture
def existing_bug():
    return BugRecord(
        id=7,
        title="Login fails",
        description="Submit button does nothing",
        screenshot_url="https://example.com/shot.png",
        created_at=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
        status=BugStatus.OPEN,
        priority=BugPriority.HIGH,
        metadata={"env": "prod", "browser": "firefox"},
    )
