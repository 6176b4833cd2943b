"""POST /verify-badge and GET /submissions/{uuid}/status endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from toolcategory.api.schemas import (
    ContentErrorResponse,
    ErrorResponse,
    SubmissionStatusResponse,
    VerifyBadgeRequest,
    VerifyBadgeResponse,
)
from toolcategory.api.service import get_submission_status, verify_badge
from toolcategory.auth.dependencies import require_api_key
from toolcategory.storage.redis import RedisSubmissionStore
from toolcategory.verification import (
    BadgeVerifier,
    ContentValidationFailed,
    InvalidPayload,
    VerificationError,
)

router = APIRouter(dependencies=[Depends(require_api_key)])


def _get_verifier(request: Request) -> BadgeVerifier:
    return request.app.state.verifier


def _get_store(request: Request) -> RedisSubmissionStore:
    return request.app.state.store


@router.post(
    "/verify-badge",
    response_model=VerifyBadgeResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ContentErrorResponse},
        502: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": VerifyBadgeRequest.model_json_schema()},
            },
        },
    },
)
async def verify_badge_route(
    request: Request,
    verifier: BadgeVerifier = Depends(_get_verifier),
):
    # Body is decoded by hand so malformed JSON maps to a 400, not FastAPI's 422
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidPayload() from None
    return await verify_badge(verifier, payload)


@router.get(
    "/submissions/{uuid}/status",
    response_model=SubmissionStatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def submission_status_route(
    uuid: str,
    store: RedisSubmissionStore = Depends(_get_store),
):
    return await get_submission_status(store, uuid)


async def verification_error_handler(request: Request, exc: VerificationError) -> JSONResponse:
    if isinstance(exc, ContentValidationFailed):
        body = ContentErrorResponse(errors=exc.reasons)
    else:
        body = ErrorResponse(error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VerificationError, verification_error_handler)
