import copy

import pytest

from safe_claim.claim_engine import AlreadyClaimed, InvalidRequest, NotFound, claim
from tests.utils.test_helpers import task


def test_pending_unowned_task_is_claimed():
    document = {"1": {"description": "Write tests", "status": "pending"}}

    outcome = claim(document, "1", "agent-alpha")

    assert outcome.description == "Write tests"
    assert outcome.message == "Claimed task 1: Write tests"
    assert outcome.document["1"]["status"] == "in_progress"
    assert outcome.document["1"]["owner"] == "agent-alpha"


def test_claim_does_not_mutate_input_document():
    document = {"1": task("Write tests")}
    snapshot = copy.deepcopy(document)

    outcome = claim(document, "1", "agent-alpha")

    assert document == snapshot
    assert outcome.document is not document


@pytest.mark.parametrize("status", [None, "pending", "review"])
def test_unset_pending_or_opaque_status_is_claimable(status):
    record = {"subject": "Refactor"}
    if status is not None:
        record["status"] = status
    outcome = claim({"7": record}, "7", "agent-a")
    assert outcome.document["7"]["status"] == "in_progress"


@pytest.mark.parametrize("empty_owner", [None, ""])
def test_empty_owner_counts_as_unclaimed(empty_owner):
    outcome = claim({"1": task(owner=empty_owner)}, "1", "agent-a")
    assert outcome.document["1"]["owner"] == "agent-a"


def test_subject_preferred_over_description():
    outcome = claim({"1": task("Subject line", description="Long text")}, "1", "agent-a")
    assert outcome.description == "Subject line"


def test_other_fields_are_preserved():
    record = task("Keep me", blocks=["2"], blockedBy=[], metadata={"k": "v"}, activeForm="Keeping")
    outcome = claim({"1": record}, "1", "agent-a")
    claimed = outcome.document["1"]
    assert claimed["blocks"] == ["2"]
    assert claimed["metadata"] == {"k": "v"}
    assert claimed["activeForm"] == "Keeping"


@pytest.mark.parametrize("status", ["claimed", "in_progress", "completed"])
def test_unclaimable_status_rejects_any_owner(status):
    document = {"1": task(status=status, owner="agent-alpha")}
    snapshot = copy.deepcopy(document)

    for requester in ("agent-beta", "agent-alpha"):
        with pytest.raises(AlreadyClaimed) as exc:
            claim(document, "1", requester)
        assert exc.value.owner == "agent-alpha"
        assert "agent-alpha" in exc.value.message

    assert document == snapshot


@pytest.mark.parametrize("status", ["in_progress", "completed", "claimed"])
def test_unclaimable_status_without_owner_reports_status(status):
    with pytest.raises(AlreadyClaimed) as exc:
        claim({"1": task(status=status)}, "1", "agent-a")
    assert exc.value.message == f"task is already {status}"
    assert exc.value.status == status


def test_deleted_task_cannot_be_claimed():
    with pytest.raises(AlreadyClaimed) as exc:
        claim({"1": task(status="deleted")}, "1", "agent-a")
    assert exc.value.message == "task is deleted"


def test_owner_set_on_pending_task_rejects():
    with pytest.raises(AlreadyClaimed) as exc:
        claim({"2": task(owner="agent-b")}, "2", "agent-a")
    assert exc.value.message == "already claimed by agent-b"


def test_same_owner_reclaim_is_not_idempotent():
    first = claim({"1": task()}, "1", "agent-a")
    with pytest.raises(AlreadyClaimed) as exc:
        claim(first.document, "1", "agent-a")
    assert exc.value.message == "already claimed by agent-a"


def test_unknown_task_is_not_found():
    document = {"1": task()}
    with pytest.raises(NotFound) as exc:
        claim(document, "99", "agent-a")
    assert exc.value.message == "task not found: 99"
    assert document == {"1": task()}


@pytest.mark.parametrize("task_id, owner", [("", "agent-a"), ("1", ""), ("1", "   ")])
def test_blank_task_id_or_owner_is_invalid(task_id, owner):
    with pytest.raises(InvalidRequest):
        claim({"1": task()}, task_id, owner)
