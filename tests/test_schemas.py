"""Unit tests for request payload parsing."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from lawdesk.models.enums import Priority, ReferenceType, RequestKind, RequestStatus
from lawdesk.schemas.request import AdjudicationPayload, ApprovalPayload, RequestFilter

# ---------------------------------------------------------------------------
# AdjudicationPayload
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw", ["approved", "Approved", "APPROVED", " approved "])
def test_adjudication_accepts_any_case_approved(raw: str) -> None:
    assert AdjudicationPayload(status=raw).status == RequestStatus.APPROVED


@pytest.mark.parametrize("raw", ["rejected", "Rejected"])
def test_adjudication_accepts_any_case_rejected(raw: str) -> None:
    assert AdjudicationPayload(status=raw).status == RequestStatus.REJECTED


def test_adjudication_rejects_pending_target() -> None:
    with pytest.raises(ValidationError, match="APPROVED or REJECTED"):
        AdjudicationPayload(status="pending")


def test_adjudication_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        AdjudicationPayload(status="maybe")


def test_adjudication_comments_optional() -> None:
    assert AdjudicationPayload(status="approved").comments is None


# ---------------------------------------------------------------------------
# ApprovalPayload
# ---------------------------------------------------------------------------


def test_approval_payload_accepts_type_alias() -> None:
    payload = ApprovalPayload.model_validate({"type": "Expense", "title": "Taxi to court"})
    assert payload.kind == RequestKind.EXPENSE
    assert payload.priority == Priority.MEDIUM


def test_approval_payload_accepts_kind_and_lowercase_enums() -> None:
    payload = ApprovalPayload.model_validate(
        {"kind": "document", "title": "NDA", "priority": "high", "reference_type": "case"}
    )
    assert payload.kind == RequestKind.DOCUMENT
    assert payload.priority == Priority.HIGH
    assert payload.reference_type == ReferenceType.CASE


@pytest.mark.parametrize("raw", ["LeaveRequest", "leave_request", "LEAVE_REQUEST", "leave request"])
def test_approval_payload_reference_type_ignores_separators(raw: str) -> None:
    payload = ApprovalPayload.model_validate({"type": "Other", "title": "Link leave", "reference_type": raw})
    assert payload.reference_type == ReferenceType.LEAVE_REQUEST


def test_approval_payload_unknown_reference_type() -> None:
    with pytest.raises(ValidationError):
        ApprovalPayload.model_validate({"type": "Other", "title": "Link", "reference_type": "Memo"})


def test_approval_payload_unknown_kind() -> None:
    with pytest.raises(ValidationError):
        ApprovalPayload.model_validate({"type": "Holiday", "title": "Trip"})


def test_approval_payload_leave_fields() -> None:
    payload = ApprovalPayload.model_validate(
        {"type": "Leave", "start_date": "2025-06-01", "end_date": "2025-06-03", "reason": "Family event travel"}
    )
    assert payload.start_date == date(2025, 6, 1)
    assert payload.title is None


# ---------------------------------------------------------------------------
# RequestFilter
# ---------------------------------------------------------------------------


def test_request_filter_normalizes_case() -> None:
    f = RequestFilter(status="approved", kind="Leave")
    assert f.status == RequestStatus.APPROVED
    assert f.kind == RequestKind.LEAVE
    assert f.requester_id is None
