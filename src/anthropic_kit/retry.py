# src/anthropic_kit/retry.py

"""Opt-in retry policy for callers of the client.

The client sends every request exactly once. Applications that want
retries wrap the call:

    >>> async for attempt in retrying():
    ...     with attempt:
    ...         message = await client.create_message(build_params())

Params are consumed by the first send, so build a fresh value per attempt.
"""

import logging

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from anthropic_kit.errors import APIError, TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 409, 429})


def is_retryable(exc: BaseException) -> bool:
    """Transport failures, timeouts, conflicts, rate limits and 5xx."""
    if isinstance(exc, TransportError):
        return True
    if isinstance(exc, APIError):
        return exc.status_code in RETRYABLE_STATUS_CODES or exc.status_code >= 500
    return False


def retrying(
    max_attempts: int = 3,
    min_wait: float = 0.5,
    max_wait: float = 10.0,
) -> AsyncRetrying:
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=min_wait, min=min_wait, max=max_wait),
        retry=retry_if_exception(is_retryable),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
