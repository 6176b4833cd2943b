"""Typed failures raised by the verification pipeline."""

from __future__ import annotations


class VerificationError(Exception):
    """Base for every failure surfaced to the caller as a structured response."""

    status_code: int = 400
    default_message: str = "Verification failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidPayload(VerificationError):
    status_code = 400
    default_message = "Invalid request payload."


class InvalidUrl(VerificationError):
    status_code = 400
    default_message = "Enter a valid URL that starts with http:// or https://."


class MissingSubmissionId(VerificationError):
    status_code = 400
    default_message = "Missing submission identifier."


class UpstreamFetchFailed(VerificationError):
    """The target page could not be fetched. Safe to retry later."""

    status_code = 502
    default_message = "We couldn't reach the provided URL. Please try again later."


class ContentValidationFailed(VerificationError):
    """The page was fetched but is missing the backlink and/or the badge."""

    status_code = 422
    default_message = "The badge or backlink is missing."

    def __init__(self, reasons: list[str]) -> None:
        super().__init__(" ".join(reasons) or None)
        self.reasons = list(reasons)


class SubmissionNotFound(VerificationError):
    """Checks passed but no submission matches the identifier."""

    status_code = 404
    default_message = "This submission could not be found."


class StorageUnavailable(VerificationError):
    status_code = 503
    default_message = "Verification is temporarily unavailable. Please try again later."
