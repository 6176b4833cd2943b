"""Service layer — turns raw API input into verification and status calls."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from toolcategory.api.schemas import (
    SubmissionStatusResponse,
    VerifyBadgeRequest,
    VerifyBadgeResponse,
)
from toolcategory.storage.redis import RedisSubmissionStore
from toolcategory.submissions import submission_status
from toolcategory.verification import BadgeVerifier, InvalidPayload, SubmissionNotFound

logger = logging.getLogger(__name__)


def parse_verify_request(payload: Any) -> VerifyBadgeRequest:
    """Validate a decoded JSON body; anything but an object is rejected."""
    if not isinstance(payload, dict):
        raise InvalidPayload()
    try:
        return VerifyBadgeRequest.model_validate(payload)
    except ValidationError:
        raise InvalidPayload() from None


async def verify_badge(verifier: BadgeVerifier, payload: Any) -> VerifyBadgeResponse:
    """Run a badge verification for a decoded ``/verify-badge`` body."""
    body = parse_verify_request(payload)
    logger.info(
        "badge verification requested",
        extra={"site_uuid": body.site_uuid, "url": body.url[:200]},
    )
    await verifier.verify(body.url, body.site_uuid)
    return VerifyBadgeResponse(success=True, verified=True)


async def get_submission_status(
    store: RedisSubmissionStore,
    uuid: str,
) -> SubmissionStatusResponse:
    submission = await store.get(uuid)
    if submission is None:
        raise SubmissionNotFound()
    status = submission_status(submission)
    return SubmissionStatusResponse(
        uuid=submission.uuid,
        is_verified=submission.is_verified,
        is_published=submission.is_published,
        label=status.label,
        color=status.color,
    )
