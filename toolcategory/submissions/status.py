"""Dashboard status label for a submission."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Submission

SUCCESS_COLOR = "#32b872"
ERROR_COLOR = "#ff6d57"

_PAID_USER_TYPES = {"basic", "pro"}


@dataclass(frozen=True)
class SubmissionStatus:
    label: str
    color: str | None = None


def submission_status(submission: Submission) -> SubmissionStatus:
    """Published wins; paid or badge-verified listings wait in review."""
    if submission.is_published:
        return SubmissionStatus(label="Published", color=SUCCESS_COLOR)

    user_type = (submission.user_type or "").lower()
    if user_type in _PAID_USER_TYPES or submission.is_verified:
        return SubmissionStatus(label="In Review")

    return SubmissionStatus(label="Badge Verification Required", color=ERROR_COLOR)
