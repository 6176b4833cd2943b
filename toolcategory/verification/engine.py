"""Badge verification orchestrator — validate, fetch, check, persist."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import urlparse

from toolcategory.config import Settings

from .checks import has_backlink, has_badge
from .errors import (
    ContentValidationFailed,
    InvalidUrl,
    MissingSubmissionId,
    SubmissionNotFound,
    UpstreamFetchFailed,
)
from .fetch import PageFetcher

logger = logging.getLogger(__name__)

_VALID_SCHEMES = {"http", "https"}

MISSING_URL_MESSAGE = "Provide a website URL to verify."


class VerificationState(str, enum.Enum):
    RECEIVED = "received"
    VALIDATING = "validating"
    FETCHING = "fetching"
    PARSING = "parsing"
    CHECKING = "checking"
    VERIFIED = "verified"
    REJECTED = "rejected"
    FETCH_FAILED = "fetch_failed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class BadgeContract:
    """What a maker's page must contain to count as verified."""

    canonical_domain: str = "https://toolcategory.com/"
    badge_src: str = "https://toolcategory.com/badge-light.svg"
    badge_alt: str = "Featured on ToolCategory.com"

    @property
    def backlink_message(self) -> str:
        return f"Add a link pointing to {self.canonical_domain}."

    @property
    def badge_message(self) -> str:
        return f'Include the ToolCategory badge image with alt text "{self.badge_alt}".'


@dataclass
class VerificationOutcome:
    success: bool
    failure_reasons: list[str] = field(default_factory=list)


class HtmlFetcher(Protocol):
    async def fetch(self, url: str) -> str: ...


class SubmissionStore(Protocol):
    async def mark_verified(self, uuid: str) -> bool: ...


def validate_target(url: str, site_uuid: str) -> str:
    """Check the raw request fields; return the URL to fetch.

    Raises before any network call is made.
    """
    url = url.strip()
    site_uuid = site_uuid.strip()
    if not url:
        raise InvalidUrl(MISSING_URL_MESSAGE)
    if not site_uuid:
        raise MissingSubmissionId()

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        raise InvalidUrl() from None
    if parsed.scheme.lower() not in _VALID_SCHEMES or not hostname:
        raise InvalidUrl()
    return url


class BadgeVerifier:
    """Runs one verification per call; holds no per-request state."""

    def __init__(
        self,
        contract: BadgeContract,
        fetcher: HtmlFetcher,
        store: SubmissionStore,
    ) -> None:
        self.contract = contract
        self._fetcher = fetcher
        self._store = store

    @classmethod
    def from_settings(cls, settings: Settings, store: SubmissionStore) -> BadgeVerifier:
        contract = BadgeContract(
            canonical_domain=settings.canonical_domain,
            badge_src=settings.badge_src,
            badge_alt=settings.badge_alt,
        )
        fetcher = PageFetcher(
            user_agent=settings.fetch_user_agent,
            timeout=settings.fetch_timeout_seconds,
            max_bytes=settings.max_html_bytes,
            log_upstream_errors=not settings.is_production,
        )
        return cls(contract, fetcher, store)

    def evaluate(self, html: str) -> VerificationOutcome:
        """Run both checks and collect one remediation message per failure."""
        # Both checks always run so every missing piece is reported at once
        backlink_ok = has_backlink(html, self.contract.canonical_domain)
        badge_ok = has_badge(html, self.contract.badge_src, self.contract.badge_alt)

        reasons: list[str] = []
        if not backlink_ok:
            reasons.append(self.contract.backlink_message)
        if not badge_ok:
            reasons.append(self.contract.badge_message)
        return VerificationOutcome(success=not reasons, failure_reasons=reasons)

    async def verify(self, url: str, site_uuid: str) -> VerificationOutcome:
        """Verify *url* on behalf of submission *site_uuid*.

        On success the submission is marked verified. Every other terminal
        state is raised as a :class:`VerificationError` subclass.
        """
        log_extra = {"site_uuid": site_uuid, "url": url}
        self._transition(VerificationState.RECEIVED, log_extra)

        self._transition(VerificationState.VALIDATING, log_extra)
        try:
            target = validate_target(url, site_uuid)
        except (InvalidUrl, MissingSubmissionId):
            self._transition(VerificationState.REJECTED, log_extra)
            raise
        site_uuid = site_uuid.strip()

        self._transition(VerificationState.FETCHING, log_extra)
        try:
            html = await self._fetcher.fetch(target)
        except UpstreamFetchFailed:
            self._transition(VerificationState.FETCH_FAILED, log_extra)
            raise

        self._transition(VerificationState.PARSING, {**log_extra, "html_length": len(html)})
        self._transition(VerificationState.CHECKING, log_extra)
        outcome = self.evaluate(html)
        if not outcome.success:
            logger.info(
                "badge verification rejected",
                extra={
                    **log_extra,
                    "state": VerificationState.REJECTED.value,
                    "failure_count": len(outcome.failure_reasons),
                },
            )
            raise ContentValidationFailed(outcome.failure_reasons)

        if not await self._store.mark_verified(site_uuid):
            logger.warning(
                "verified page for unknown submission",
                extra={**log_extra, "state": VerificationState.NOT_FOUND.value},
            )
            raise SubmissionNotFound()

        logger.info(
            "badge verification succeeded",
            extra={**log_extra, "state": VerificationState.VERIFIED.value},
        )
        return outcome

    @staticmethod
    def _transition(state: VerificationState, extra: dict) -> None:
        logger.debug("verification state", extra={**extra, "state": state.value})
