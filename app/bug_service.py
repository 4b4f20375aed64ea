import logging
from typing import Optional

from app.errors import BugNotFoundError
from app.merge import apply_partial_update
from app.schemas import BugDraft, BugPriority, BugRecord, BugStatus, BugUpdate
from app.store import BugStore
from app.utils.time import utc_now

logger = logging.getLogger(__name__)


class BugService:
    """
    Bug use cases on top of a BugStore.

    Holds no state besides the store, so one instance per request is fine.
    Store exceptions propagate unchanged.
    """

    def __init__(self, store: BugStore):
        self.store = store

    async def list_all(self) -> list[BugRecord]:
        """Every bug, most recently created first."""
        return await self.store.find_all()

    async def list_by_status(self, status: BugStatus) -> list[BugRecord]:
        return await self.store.find_by_status(status)

    async def get_by_id(self, bug_id: int) -> BugRecord:
        """
        Raises:
            BugNotFoundError: If the bug does not exist
        """
        bug = await self.store.find_by_id(bug_id)
        if not bug:
            logger.debug(f"Bug {bug_id} not found")
            raise BugNotFoundError(bug_id)
        return bug

    async def create(
        self,
        title: str,
        description: Optional[str] = None,
        screenshot_url: Optional[str] = None,
        priority: Optional[BugPriority] = None,
        metadata: Optional[dict[str, str]] = None,
    ) -> BugRecord:
        """
        Create a new OPEN bug stamped with the current time.

        Args:
            title: Bug title, may be empty
            description: Optional free text
            screenshot_url: Optional URL or path of a screenshot
            priority: Defaults to MEDIUM when not given
            metadata: Initial metadata, defaults to empty

        Returns:
            The stored BugRecord with its generated id
        """
        draft = BugDraft(
            title=title,
            description=description,
            screenshot_url=screenshot_url,
            created_at=utc_now(),
            status=BugStatus.OPEN,
            priority=priority or BugPriority.MEDIUM,
            metadata=dict(metadata or {}),
        )
        bug = await self.store.insert(draft)
        logger.info("Bug created", extra={"bug_id": bug.id})
        return bug

    async def update_partial(self, bug_id: int, partial: BugUpdate) -> BugRecord:
        """
        Apply a partial update and persist the result.

        Fields the update leaves as None keep their value and metadata is
        merged key by key. Status may move between any two values.

        Raises:
            BugNotFoundError: If the bug does not exist
        """
        existing = await self.store.find_by_id(bug_id)
        if not existing:
            logger.debug(f"Bug {bug_id} not found for update")
            raise BugNotFoundError(bug_id)

        updated = await self.store.update(apply_partial_update(existing, partial))
        logger.info(
            "Bug updated",
            extra={"bug_id": bug_id, "fields": sorted(partial.model_dump(exclude_none=True))},
        )
        return updated

    async def merge_metadata(self, bug_id: int, patch: dict[str, str]) -> BugRecord:
        """Merge ``patch`` into the bug's metadata, leaving everything else alone."""
        return await self.update_partial(bug_id, BugUpdate(metadata=patch))

    async def delete(self, bug_id: int) -> bool:
        """Delete the bug. Returns False when there was nothing to delete."""
        if not await self.store.exists_by_id(bug_id):
            logger.debug(f"Bug {bug_id} not found for delete")
            return False

        await self.store.delete_by_id(bug_id)
        logger.info("Bug deleted", extra={"bug_id": bug_id})
        return True
