"""Process-local bug store backed by a dict."""

import itertools
from typing import Iterable, Optional

from app.errors import BugNotFoundError
from app.schemas import BugDraft, BugRecord, BugStatus
from app.store.base import BugStore


def newest_first(records: Iterable[BugRecord]) -> list[BugRecord]:
    return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)


class InMemoryBugStore(BugStore):
    """
    BugStore kept in memory. Records are copied on the way in and out so
    callers never share state with the store.
    """

    def __init__(self):
        self._records: dict[int, BugRecord] = {}
        self._ids = itertools.count(1)

    async def insert(self, draft: BugDraft) -> BugRecord:
        record = BugRecord(id=next(self._ids), **draft.model_dump())
        self._records[record.id] = record
        return record.model_copy(deep=True)

    async def find_by_id(self, bug_id: int) -> Optional[BugRecord]:
        record = self._records.get(bug_id)
        return record.model_copy(deep=True) if record else None

    async def find_all(self) -> list[BugRecord]:
        return [r.model_copy(deep=True) for r in newest_first(self._records.values())]

    async def find_by_status(self, status: BugStatus) -> list[BugRecord]:
        matching = (r for r in self._records.values() if r.status == status)
        return [r.model_copy(deep=True) for r in newest_first(matching)]

    async def update(self, record: BugRecord) -> BugRecord:
        if record.id not in self._records:
            raise BugNotFoundError(record.id)
        self._records[record.id] = record.model_copy(deep=True)
        return record.model_copy(deep=True)

    async def exists_by_id(self, bug_id: int) -> bool:
        return bug_id in self._records

    async def delete_by_id(self, bug_id: int) -> None:
        self._records.pop(bug_id, None)
