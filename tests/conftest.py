"""Fixtures — fake Redis, submission store, upstream page transport."""

import httpx
import pytest_asyncio
from fakeredis.aioredis import FakeRedis

from toolcategory.storage.redis import RedisSubmissionStore
from toolcategory.submissions import Submission

PASSING_HTML = """
<html><body>
  <p>Our tool</p>
  <a href="https://toolcategory.com/item/acme" target="_blank" rel="noopener noreferrer">
    <img src="https://toolcategory.com/badge-light.svg" alt="Featured on ToolCategory.com" style="height: 54px; width: auto;" />
  </a>
</body></html>
"""

BARE_HTML = "<html><body><a href='https://other.com'>Other</a></body></html>"


def html_transport(pages: dict[str, tuple[int, str]]) -> httpx.MockTransport:
    """MockTransport serving ``(status, body)`` by host; unknown hosts get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        status_code, body = pages.get(request.url.host, (404, "not found"))
        return httpx.Response(status_code, text=body)

    return httpx.MockTransport(handler)


@pytest_asyncio.fixture
async def redis_client():
    """In-memory FakeRedis client."""
    client = FakeRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def submission_store(redis_client):
    """RedisSubmissionStore seeded with one unverified submission ``abc-123``."""
    store = RedisSubmissionStore(redis_client)
    await store.save(Submission(uuid="abc-123", name="Acme", url="https://example.com"))
    return store
