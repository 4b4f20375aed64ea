"""
Merge engine tests: scalar overwrite rules and per-key metadata merging.
"""
from app.merge import apply_partial_update, merge_metadata
from app.schemas import BugPriority, BugStatus, BugUpdate


def test_status_only_update_changes_only_status(existing_bug):
    updated = apply_partial_update(existing_bug, BugUpdate(status=BugStatus.CLOSED))

    assert updated.status == BugStatus.CLOSED
    assert updated.model_dump(exclude={"status"}) == existing_bug.model_dump(exclude={"status"})


def test_status_change_keeps_priority(existing_bug):
    updated = apply_partial_update(existing_bug, BugUpdate(status=BugStatus.CLOSED))

    assert updated.priority == BugPriority.HIGH


def test_empty_update_is_noop(existing_bug):
    assert apply_partial_update(existing_bug, BugUpdate()) == existing_bug


def test_empty_strings_are_applied(existing_bug):
    updated = apply_partial_update(existing_bug, BugUpdate(title="", description=""))

    assert updated.title == ""
    assert updated.description == ""
    assert updated.screenshot_url == existing_bug.screenshot_url


def test_all_scalars_overwritten(existing_bug):
    partial = BugUpdate(
        title="Crash on save",
        description="NPE in editor",
        screenshot_url="/tmp/crash.png",
        status=BugStatus.IN_PROGRESS,
        priority=BugPriority.CRITICAL,
    )
    updated = apply_partial_update(existing_bug, partial)

    assert updated.title == "Crash on save"
    assert updated.description == "NPE in editor"
    assert updated.screenshot_url == "/tmp/crash.png"
    assert updated.status == BugStatus.IN_PROGRESS
    assert updated.priority == BugPriority.CRITICAL
    assert updated.metadata == existing_bug.metadata


def test_id_and_created_at_never_change(existing_bug):
    updated = existing_bug
    for partial in (
        BugUpdate(title="a"),
        BugUpdate(status=BugStatus.CLOSED, metadata={"k": "v"}),
        BugUpdate(status=BugStatus.OPEN),
    ):
        updated = apply_partial_update(updated, partial)

    assert updated.id == existing_bug.id
    assert updated.created_at == existing_bug.created_at


def test_metadata_is_merged_not_replaced(existing_bug):
    updated = apply_partial_update(
        existing_bug, BugUpdate(metadata={"env": "staging", "build": "42"})
    )

    assert updated.metadata == {"env": "staging", "browser": "firefox", "build": "42"}


def test_absent_metadata_leaves_mapping_untouched(existing_bug):
    updated = apply_partial_update(existing_bug, BugUpdate(title="x"))

    assert updated.metadata == {"env": "prod", "browser": "firefox"}


def test_inputs_are_not_mutated(existing_bug):
    before = existing_bug.model_copy(deep=True)
    patch = {"env": "staging"}
    partial = BugUpdate(title="changed", metadata=patch)

    apply_partial_update(existing_bug, partial)

    assert existing_bug == before
    assert patch == {"env": "staging"}


def test_update_is_idempotent(existing_bug):
    partial = BugUpdate(priority=BugPriority.LOW, metadata={"env": "qa", "os": "linux"})

    once = apply_partial_update(existing_bug, partial)
    twice = apply_partial_update(once, partial)

    assert once == twice


def test_disjoint_patches_commute():
    p = {"a": "1", "b": "2"}
    q = {"c": "3"}
    base = {"z": "0"}

    assert merge_metadata(merge_metadata(base, p), q) == merge_metadata(merge_metadata(base, q), p)


def test_overlapping_keys_take_the_later_value():
    p = {"env": "prod", "build": "1"}
    q = {"env": "staging"}

    assert merge_metadata(merge_metadata({}, p), q) == {"env": "staging", "build": "1"}
    assert merge_metadata(merge_metadata({}, q), p) == {"env": "prod", "build": "1"}


def test_merge_metadata_returns_a_copy():
    current = {"env": "prod"}

    merged = merge_metadata(current, None)
    merged["new"] = "x"

    assert current == {"env": "prod"}
