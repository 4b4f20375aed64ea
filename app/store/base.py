from typing import Optional

from app.schemas import BugDraft, BugRecord, BugStatus


class BugStore:
    """Abstract base for durable bug storage.

    Listing methods return records newest first: ``created_at`` descending,
    then ``id`` descending so bugs created in the same instant keep a stable
    order.
    """

    async def insert(self, draft: BugDraft) -> BugRecord:
        """
        Store a new bug.

        Args:
            draft: The bug to store, without an id

        Returns:
            The stored BugRecord carrying its generated id
        """
        raise NotImplementedError

    async def find_by_id(self, bug_id: int) -> Optional[BugRecord]:
        raise NotImplementedError

    async def find_all(self) -> list[BugRecord]:
        raise NotImplementedError

    async def find_by_status(self, status: BugStatus) -> list[BugRecord]:
        raise NotImplementedError

    async def update(self, record: BugRecord) -> BugRecord:
        """
        Persist the full state of an existing bug, metadata included.

        Raises:
            BugNotFoundError: If no bug with ``record.id`` is stored
        """
        raise NotImplementedError

    async def exists_by_id(self, bug_id: int) -> bool:
        raise NotImplementedError

    async def delete_by_id(self, bug_id: int) -> None:
        """Remove the bug if present. Deleting a missing bug does nothing."""
        raise NotImplementedError
