"""Maker submissions: the record verification mutates and its status label."""

from .models import Submission
from .status import SubmissionStatus, submission_status

__all__ = ["Submission", "SubmissionStatus", "submission_status"]
