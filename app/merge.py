"""Pure functions that compute the next state of a bug from a partial update."""

from typing import Mapping, Optional

from app.schemas import BugRecord, BugUpdate

# Fields that are replaced wholesale when the update supplies a value
SCALAR_FIELDS = ("title", "description", "screenshot_url", "status", "priority")


def merge_metadata(
    current: Mapping[str, str], patch: Optional[Mapping[str, str]]
) -> dict[str, str]:
    """
    Upsert every entry of ``patch`` into a copy of ``current``.

    Keys missing from the patch are kept as they are, so a merge never deletes.
    A ``None`` patch returns an unchanged copy.
    """
    merged = dict(current)
    if patch:
        for key, value in patch.items():
            merged[key] = value
    return merged


def apply_partial_update(existing: BugRecord, partial: BugUpdate) -> BugRecord:
    """
    Return the record that results from applying ``partial`` to ``existing``.

    Scalar fields are overwritten only when the update carries a value (an
    empty string counts as a value, None does not). Metadata is merged per key
    via ``merge_metadata``. ``id`` and ``created_at`` always come from
    ``existing``. Neither argument is mutated.

    Args:
        existing: The current stored state of the bug
        partial: Update whose enum values have already been validated

    Returns:
        A new BugRecord
    """
    changes = {}
    for field in SCALAR_FIELDS:
        value = getattr(partial, field)
        if value is not None:
            changes[field] = value

    changes["metadata"] = merge_metadata(existing.metadata, partial.metadata)

    return existing.model_copy(update=changes)
