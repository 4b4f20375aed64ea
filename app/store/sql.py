"""SQLAlchemy-backed bug store."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import models
from app.errors import BugNotFoundError
from app.schemas import BugDraft, BugRecord, BugStatus
from app.store.base import BugStore

logger = logging.getLogger(__name__)


def to_record(bug: models.Bug) -> BugRecord:
    """Convert an ORM row (with its metadata rows loaded) into a BugRecord."""
    return BugRecord(
        id=bug.id,
        title=bug.title,
        description=bug.description,
        screenshot_url=bug.screenshot_url,
        created_at=bug.created_at,
        status=bug.status,
        priority=bug.priority,
        metadata={entry.metadata_key: entry.metadata_value for entry in bug.metadata_entries},
    )


class SQLAlchemyBugStore(BugStore):
    """
    BugStore on top of an AsyncSession.

    The session autobegins a transaction on the first statement, and every
    mutating method commits. A fetch followed by ``update`` therefore runs in
    a single transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _newest_first(self, query):
        return query.order_by(models.Bug.created_at.desc(), models.Bug.id.desc())

    async def insert(self, draft: BugDraft) -> BugRecord:
        bug = models.Bug(
            title=draft.title,
            description=draft.description,
            screenshot_url=draft.screenshot_url,
            created_at=draft.created_at,
            status=draft.status,
            priority=draft.priority,
            metadata_entries=[
                models.BugMetadata(metadata_key=key, metadata_value=value)
                for key, value in draft.metadata.items()
            ],
        )
        self.session.add(bug)
        await self.session.commit()
        await self.session.refresh(bug)
        return to_record(bug)

    async def find_by_id(self, bug_id: int) -> Optional[BugRecord]:
        result = await self.session.execute(select(models.Bug).where(models.Bug.id == bug_id))
        bug = result.scalars().first()
        return to_record(bug) if bug else None

    async def find_all(self) -> list[BugRecord]:
        result = await self.session.execute(self._newest_first(select(models.Bug)))
        return [to_record(bug) for bug in result.scalars().all()]

    async def find_by_status(self, status: BugStatus) -> list[BugRecord]:
        query = select(models.Bug).where(models.Bug.status == status)
        result = await self.session.execute(self._newest_first(query))
        return [to_record(bug) for bug in result.scalars().all()]

    async def update(self, record: BugRecord) -> BugRecord:
        bug = await self.session.get(models.Bug, record.id)
        if not bug:
            raise BugNotFoundError(record.id)

        # id and created_at are never written after insert
        bug.title = record.title
        bug.description = record.description
        bug.screenshot_url = record.screenshot_url
        bug.status = record.status
        bug.priority = record.priority

        entries = {entry.metadata_key: entry for entry in bug.metadata_entries}
        for key, value in record.metadata.items():
            if key in entries:
                entries[key].metadata_value = value
            else:
                bug.metadata_entries.append(
                    models.BugMetadata(metadata_key=key, metadata_value=value)
                )
        for key, entry in entries.items():
            if key not in record.metadata:
                bug.metadata_entries.remove(entry)

        await self.session.commit()
        await self.session.refresh(bug)
        return to_record(bug)

    async def exists_by_id(self, bug_id: int) -> bool:
        result = await self.session.execute(select(models.Bug.id).where(models.Bug.id == bug_id))
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, bug_id: int) -> None:
        bug = await self.session.get(models.Bug, bug_id)
        if not bug:
            logger.debug(f"Bug {bug_id} already absent, nothing to delete")
            return
        await self.session.delete(bug)
        await self.session.commit()
