# src/anthropic_kit/transport.py

"""HTTP transport for the Anthropic API.

One request per call. No retries: callers that want them wrap the
client call themselves (see anthropic_kit.retry).
"""

import logging
from collections.abc import Mapping
from time import monotonic
from typing import Any

import httpx

from anthropic_kit.config import ClientConfig
from anthropic_kit.errors import TransportError, TransportTimeoutError, make_api_error
from anthropic_kit.observability import names
from anthropic_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

# (filename, content, mime type)
FileTuple = tuple[str, bytes, str]


class Transport:
    """Wraps an httpx.AsyncClient with auth, versioning and error mapping.

    The httpx client is created here unless one is injected; an injected
    client stays owned by the caller and is not closed by aclose().
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout)
        self.metrics_hook = metrics_hook

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        files: Mapping[str, FileTuple] | None = None,
        beta: str | None = None,
    ) -> httpx.Request:
        url = f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return self._client.build_request(
            method,
            url,
            params=query or None,
            json=json,
            files=files,
            headers=self._headers(beta),
        )

    def _headers(self, beta: str | None) -> dict[str, str]:
        headers = {
            "x-api-key": self._config.api_key,
            "anthropic-version": self._config.api_version,
            "user-agent": self._config.user_agent,
            "accept": "application/json",
        }
        if beta:
            headers["anthropic-beta"] = beta
        return headers

    async def send(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        files: Mapping[str, FileTuple] | None = None,
        beta: str | None = None,
    ) -> httpx.Response:
        """Send a request and return the fully read, successful response.

        Raises:
            TransportError: The request did not produce a response.
            APIError: The response status was not 2xx.
        """
        request = self.build_request(
            method, path, params=params, json=json, files=files, beta=beta
        )
        return await self._dispatch(request, operation=operation, stream=False)

    async def open_stream(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        json: Any = None,
        beta: str | None = None,
    ) -> httpx.Response:
        """Send a request and return the response with its body unread.

        The caller owns the returned response and must aclose() it.
        """
        request = self.build_request(method, path, json=json, beta=beta)
        request.headers["accept"] = "text/event-stream"
        return await self._dispatch(request, operation=operation, stream=True)

    async def _dispatch(
        self, request: httpx.Request, *, operation: str, stream: bool
    ) -> httpx.Response:
        logger.debug("Anthropic request: %s %s", request.method, request.url.path)
        start = monotonic()

        try:
            response = await self._client.send(request, stream=stream)
        except httpx.TimeoutException as e:
            self._record_failure(operation, "timeout")
            raise TransportTimeoutError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            self._record_failure(operation, "transport")
            raise TransportError(f"Request failed: {e}") from e

        elapsed_ms = 1000 * (monotonic() - start)
        status = str(response.status_code)
        self.metrics_hook.record_latency(
            names.API_REQUEST_DURATION,
            elapsed_ms,
            labels={"operation": operation, "method": request.method},
        )
        self.metrics_hook.increment(
            names.API_REQUESTS_TOTAL,
            labels={"operation": operation, "status": status},
        )
        logger.debug(
            "Anthropic response: %s %s -> %s in %.0fms",
            request.method,
            request.url.path,
            status,
            elapsed_ms,
        )

        if response.is_success:
            return response

        body = await self._read_error_body(response) if stream else response.content
        self._record_failure(operation, status)
        raise make_api_error(
            response.status_code, body, response.headers.get("request-id")
        )

    async def _read_error_body(self, response: httpx.Response) -> bytes:
        try:
            return await response.aread()
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to read error response: {e}") from e
        finally:
            await response.aclose()

    def _record_failure(self, operation: str, status: str) -> None:
        self.metrics_hook.increment(
            names.API_ERRORS_TOTAL,
            labels={"operation": operation, "status": status},
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
