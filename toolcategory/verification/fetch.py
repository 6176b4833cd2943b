"""Single-shot page fetch with a hard cap on the bytes read."""

from __future__ import annotations

import asyncio
import logging

import httpx

from .errors import UpstreamFetchFailed

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "We couldn't fetch the provided website. Please try again later."
UNREACHABLE_MESSAGE = "We couldn't reach the provided URL. Please try again later."


class PageFetcher:
    """Fetches a page's HTML for verification.

    One GET per call, redirects followed, caches bypassed. The body is
    streamed and reading stops once *max_bytes* have arrived, so oversized
    pages never get buffered in full.
    """

    def __init__(
        self,
        *,
        user_agent: str,
        timeout: float = 25.0,
        max_bytes: int = 1_000_000,
        log_upstream_errors: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_bytes = max_bytes
        self._log_upstream_errors = log_upstream_errors
        self._transport = transport

    async def fetch(self, url: str) -> str:
        """Return the (possibly truncated) HTML at *url*.

        Raises :class:`UpstreamFetchFailed` on non-2xx, network error or
        timeout.
        """
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }
        try:
            # httpx timeouts apply per phase; this bounds the whole fetch
            async with asyncio.timeout(self._timeout):
                async with httpx.AsyncClient(
                    follow_redirects=True,
                    headers=headers,
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    async with client.stream("GET", url) as resp:
                        if not resp.is_success:
                            self._log_failure(
                                "upstream returned non-2xx",
                                url,
                                status_code=resp.status_code,
                            )
                            raise UpstreamFetchFailed(FETCH_FAILED_MESSAGE)

                        body = await self._read_capped(resp)
                        encoding = resp.encoding or "utf-8"
        except TimeoutError:
            self._log_failure("upstream fetch timed out", url, timeout=self._timeout)
            raise UpstreamFetchFailed(UNREACHABLE_MESSAGE) from None
        except (httpx.HTTPError, httpx.InvalidURL):
            self._log_failure("upstream fetch failed", url, exc_info=True)
            raise UpstreamFetchFailed(UNREACHABLE_MESSAGE) from None

        logger.debug("page fetched", extra={"url": url, "bytes_read": len(body)})
        return body.decode(encoding, errors="replace")

    async def _read_capped(self, resp: httpx.Response) -> bytes:
        buf = bytearray()
        async for chunk in resp.aiter_bytes():
            buf.extend(chunk)
            if len(buf) >= self._max_bytes:
                logger.debug(
                    "page truncated",
                    extra={"url": str(resp.url), "max_bytes": self._max_bytes},
                )
                break
        return bytes(buf[: self._max_bytes])

    def _log_failure(self, message: str, url: str, **kwargs) -> None:
        # Upstream detail stays out of production logs; the caller only ever
        # sees the generic retry message.
        if not self._log_upstream_errors:
            return
        exc_info = kwargs.pop("exc_info", False)
        logger.warning(message, extra={"url": url, **kwargs}, exc_info=exc_info)

