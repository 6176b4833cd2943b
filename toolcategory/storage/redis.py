"""Redis-backed submission store."""

from __future__ import annotations

import logging

import redis.asyncio as redis
from redis.backoff import ExponentialBackoff
from redis.retry import Retry

from toolcategory.submissions.models import Submission
from toolcategory.verification.errors import StorageUnavailable

logger = logging.getLogger(__name__)

KEY_PREFIX = "submission:"


class RedisSubmissionStore:
    """Submissions stored as one hash per uuid under ``submission:{uuid}``."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    async def get(self, uuid: str) -> Submission | None:
        """Return the submission, or ``None`` if no hash exists for *uuid*."""
        try:
            fields = await self._client.hgetall(f"{KEY_PREFIX}{uuid}")
        except redis.RedisError as exc:
            logger.exception("submission get failed", extra={"site_uuid": uuid})
            raise StorageUnavailable() from exc
        if not fields:
            return None
        return Submission.from_hash(uuid, fields)

    async def save(self, submission: Submission) -> None:
        try:
            await self._client.hset(
                f"{KEY_PREFIX}{submission.uuid}", mapping=submission.to_hash()
            )
        except redis.RedisError as exc:
            logger.exception("submission save failed", extra={"site_uuid": submission.uuid})
            raise StorageUnavailable() from exc

    async def mark_verified(self, uuid: str) -> bool:
        """Set ``is_verified`` on an existing submission.

        Returns ``False`` when there is no such submission; a missing hash is
        never created. Setting an already verified flag again is a no-op
        write and still returns ``True``.
        """
        key = f"{KEY_PREFIX}{uuid}"

        async def _update(pipe: redis.client.Pipeline) -> bool:
            if not await pipe.exists(key):
                return False
            pipe.multi()
            pipe.hset(key, "is_verified", "1")
            return True

        try:
            updated = await self._client.transaction(
                _update, key, value_from_callable=True
            )
        except redis.RedisError as exc:
            logger.exception("submission verify failed", extra={"site_uuid": uuid})
            raise StorageUnavailable() from exc

        logger.debug("submission verify write", extra={"site_uuid": uuid, "updated": updated})
        return bool(updated)


async def create_redis_client(redis_url: str) -> redis.Redis:
    # Strip credentials for logging (everything before @ if present)
    safe_url = redis_url.split("@")[-1] if "@" in redis_url else redis_url
    logger.info("connecting to redis", extra={"redis_url": safe_url})
    retry = Retry(ExponentialBackoff(), retries=3)
    return redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        health_check_interval=30,
        retry=retry,
        retry_on_error=[redis.ConnectionError, redis.TimeoutError],
    )
