"""Shared JSON-over-HTTP helper for the REST clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from prompt_crafter.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    json: Any,
    params: dict | None = None,
    headers: dict | None = None,
    max_retries: int = 3,
) -> Any:
    """POST a JSON body and return the decoded JSON response.

    Transport errors are retried with exponential backoff. Anything that
    still fails (transport, non-2xx, undecodable body) is raised as
    UpstreamUnavailable.
    """
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max_retries),
            wait=wait_exponential(min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                response = await client.post(url, json=json, params=params, headers=headers)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        logger.error("HTTP error from %s: %d", url, e.response.status_code)
        raise UpstreamUnavailable(f"Request failed: {e.response.status_code}") from e
    except httpx.RequestError as e:
        logger.error("Request error for %s: %s", url, e)
        raise UpstreamUnavailable(f"Request failed: {e}") from e
    except ValueError as e:
        logger.error("Undecodable response body from %s", url)
        raise UpstreamUnavailable("Response body is not valid JSON") from e
