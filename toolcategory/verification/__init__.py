"""Badge and backlink verification of a maker's own website."""

from .checks import has_backlink, has_badge
from .engine import (
    BadgeContract,
    BadgeVerifier,
    VerificationOutcome,
    VerificationState,
    validate_target,
)
from .errors import (
    ContentValidationFailed,
    InvalidPayload,
    InvalidUrl,
    MissingSubmissionId,
    StorageUnavailable,
    SubmissionNotFound,
    UpstreamFetchFailed,
    VerificationError,
)
from .fetch import PageFetcher
from .html import ParsedTag, iter_tags, parse_attributes

__all__ = [
    "BadgeContract",
    "BadgeVerifier",
    "ContentValidationFailed",
    "InvalidPayload",
    "InvalidUrl",
    "MissingSubmissionId",
    "PageFetcher",
    "ParsedTag",
    "StorageUnavailable",
    "SubmissionNotFound",
    "UpstreamFetchFailed",
    "VerificationError",
    "VerificationOutcome",
    "VerificationState",
    "has_backlink",
    "has_badge",
    "iter_tags",
    "parse_attributes",
]
