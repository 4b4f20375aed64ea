from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Response, status, Depends, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession

from app.bug_service import BugService
from app.database.config import get_db
from app.errors import BugNotFoundError
from app.schemas import (
    BugCreate,
    BugPriorityUpdate,
    BugRecord,
    BugStatus,
    BugStatusUpdate,
    BugUpdate,
)
from app.store import get_bug_store
from app.tasks.notifications import notify_bug_creation

router = APIRouter(prefix="/api/v1/bugs", tags=["bugs"])


def get_bug_service(db: AsyncSession = Depends(get_db)) -> BugService:
    return BugService(get_bug_store(db))


def bug_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bug not found")


@router.get("/", response_model=list[BugRecord])
async def list_bugs(
    status_filter: Optional[BugStatus] = Query(None, alias="status"),
    service: BugService = Depends(get_bug_service),
):
    """List bugs, newest first, optionally filtered by status."""
    if status_filter is not None:
        return await service.list_by_status(status_filter)
    return await service.list_all()


@router.get("/{bug_id}", response_model=BugRecord, status_code=status.HTTP_200_OK)
async def get_bug(bug_id: int, service: BugService = Depends(get_bug_service)):
    """Get bug by ID"""
    try:
        return await service.get_by_id(bug_id)
    except BugNotFoundError:
        raise bug_not_found()


@router.post("/", response_model=BugRecord, status_code=status.HTTP_201_CREATED)
async def create_bug(
    payload: BugCreate,
    background_tasks: BackgroundTasks,
    service: BugService = Depends(get_bug_service),
):
    """Report a new bug"""
    bug = await service.create(
        title=payload.title,
        description=payload.description,
        screenshot_url=payload.screenshot_url,
        priority=payload.priority,
        metadata=payload.metadata,
    )

    # Notify on creation once the response is out
    background_tasks.add_task(notify_bug_creation, bug=bug)

    return bug


async def _update(service: BugService, bug_id: int, partial: BugUpdate) -> BugRecord:
    try:
        return await service.update_partial(bug_id, partial)
    except BugNotFoundError:
        raise bug_not_found()


@router.put("/{bug_id}", response_model=BugRecord, status_code=status.HTTP_200_OK)
async def update_bug(bug_id: int, payload: BugUpdate, service: BugService = Depends(get_bug_service)):
    """Partially update a bug; omitted fields are left unchanged"""
    return await _update(service, bug_id, payload)


@router.put("/{bug_id}/status", response_model=BugRecord, status_code=status.HTTP_200_OK)
async def update_bug_status(
    bug_id: int, payload: BugStatusUpdate, service: BugService = Depends(get_bug_service)
):
    return await _update(service, bug_id, BugUpdate(status=payload.status))


@router.put("/{bug_id}/priority", response_model=BugRecord, status_code=status.HTTP_200_OK)
async def update_bug_priority(
    bug_id: int, payload: BugPriorityUpdate, service: BugService = Depends(get_bug_service)
):
    return await _update(service, bug_id, BugUpdate(priority=payload.priority))


@router.put("/{bug_id}/metadata", response_model=BugRecord, status_code=status.HTTP_200_OK)
async def update_bug_metadata(
    bug_id: int, payload: dict[str, str], service: BugService = Depends(get_bug_service)
):
    """Merge the given keys into the bug's metadata"""
    try:
        return await service.merge_metadata(bug_id, payload)
    except BugNotFoundError:
        raise bug_not_found()


@router.delete("/{bug_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bug(bug_id: int, service: BugService = Depends(get_bug_service)):
    """Delete bug by ID"""
    if not await service.delete(bug_id):
        raise bug_not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
