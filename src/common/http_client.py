"""Shared HTTP helpers used by the repository client.

Encapsulates request error handling and status classification so callers
receive typed errors instead of raw ``requests`` exceptions. One request
per call: no retries, no caching.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import requests

from constants import Constants
from common.errors import RemoteRejectionError, TransportError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _is_rejection(status_code: int) -> bool:
    return 400 <= status_code <= 599


@contextmanager
def open_stream(
    url: str,
    *,
    context: str,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> Iterator[requests.Response]:
    """Issue a streaming GET and yield the response, closing it afterwards.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "metadata", "download").
        headers: Optional request headers.
        **kwargs: Passed through to requests.get (e.g. ``auth``).

    Raises:
        RemoteRejectionError: the server answered with a 4xx/5xx status.
        TransportError: the request could not be completed.
    """
    safe_target = safe_url(url)
    request_headers = {"User-Agent": Constants.USER_AGENT}
    if headers:
        request_headers.update(headers)

    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(
                url,
                headers=request_headers,
                timeout=Constants.REQUEST_TIMEOUT,
                stream=True,
                **kwargs
            )
        except requests.RequestException as exc:  # includes ConnectionError, Timeout
            logger.error(
                "%s request failed: %s",
                context,
                exc,
                extra=extra_context(
                    event="http_exception",
                    component="http_client",
                    action="GET",
                    outcome="request_exception",
                    target=safe_target
                )
            )
            raise TransportError(url, exc) from exc

    if _is_rejection(res.status_code):
        res.close()
        logger.warning(
            "HTTP %s for %s",
            res.status_code,
            safe_target,
            extra=extra_context(
                event="http_response",
                component="http_client",
                outcome="rejected",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
                context=context
            )
        )
        raise RemoteRejectionError(res.status_code, url)

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response ok",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                outcome="success",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
                context=context
            )
        )
    try:
        yield res
    finally:
        res.close()


def read_body(res: requests.Response, url: str) -> bytes:
    """Read the full body of a streamed response."""
    try:
        return res.content
    except requests.RequestException as exc:
        raise TransportError(url, exc) from exc


def iter_body(res: requests.Response, url: str, chunk_size: int) -> Iterator[bytes]:
    """Yield the body of a streamed response in chunks."""
    try:
        for chunk in res.iter_content(chunk_size=chunk_size):
            if chunk:
                yield chunk
    except requests.RequestException as exc:
        raise TransportError(url, exc) from exc
