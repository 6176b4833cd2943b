"""Submission status label tests."""

from toolcategory.submissions import Submission, submission_status
from toolcategory.submissions.status import ERROR_COLOR, SUCCESS_COLOR


def test_published_wins():
    status = submission_status(Submission(uuid="a", is_published=True, is_verified=False))
    assert status.label == "Published"
    assert status.color == SUCCESS_COLOR


def test_verified_free_listing_in_review():
    status = submission_status(Submission(uuid="a", is_verified=True))
    assert status.label == "In Review"
    assert status.color is None


def test_paid_user_in_review_without_badge():
    for user_type in ("basic", "pro", "PRO"):
        status = submission_status(Submission(uuid="a", user_type=user_type))
        assert status.label == "In Review"


def test_free_unverified_needs_badge():
    for user_type in (None, "", "free"):
        status = submission_status(Submission(uuid="a", user_type=user_type))
        assert status.label == "Badge Verification Required"
        assert status.color == ERROR_COLOR
