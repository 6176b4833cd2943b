"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from toolcategory.api.routes import install_exception_handlers, router
from toolcategory.config import get_settings
from toolcategory.logging_config import setup_logging
from toolcategory.storage.redis import RedisSubmissionStore, create_redis_client
from toolcategory.verification import BadgeVerifier

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level, settings.environment)
    logger.info("starting badge verification service")

    redis_client = await create_redis_client(settings.redis_url)
    store = RedisSubmissionStore(redis_client)
    verifier = BadgeVerifier.from_settings(settings, store)

    # Attach to app state for dependency injection
    app.state.settings = settings
    app.state.store = store
    app.state.verifier = verifier

    logger.info(
        "badge verification service ready",
        extra={
            "canonical_domain": settings.canonical_domain,
            "badge_src": settings.badge_src,
            "fetch_timeout_seconds": settings.fetch_timeout_seconds,
            "max_html_bytes": settings.max_html_bytes,
            "auth_enabled": bool(settings.api_key),
        },
    )

    yield

    logger.info("shutting down badge verification service")
    await redis_client.aclose()


app = FastAPI(title="ToolCategory Badge Verification", lifespan=lifespan)
app.include_router(router)
install_exception_handlers(app)


@app.get("/health")
async def health():
    return {"status": "ok"}
