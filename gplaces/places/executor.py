"""
Query execution layer for Places API.

Takes fully assembled request URL, performs HTTP GET and returns decoded JSON
object. Request building and response modeling live elsewhere, executor knows
nothing about endpoints.
"""

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any, Dict, Optional, TypeVar

import httpx

from .constants import CONTENT_TYPE_JSON, DEFAULT_TIMEOUT, VERSION
from .exceptions import (
    PlacesNetworkError,
    PlacesResponseError,
    QueryCancelledError,
    parseHttpError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_KEY_IN_URL_RE = re.compile(r"([?&]key=)[^&]*")


def maskApiKey(url: str) -> str:
    """Hide API key in URL before logging it."""
    return API_KEY_IN_URL_RE.sub(r"\1***", url)


class QueryExecutorInterface(ABC):
    """
    Executes Places API queries, dood!

    Both methods return decoded JSON object on HTTP 200 and raise
    PlacesTransportError subclasses otherwise. `executeAsync` must observe
    `cancelEvent` and raise QueryCancelledError once it is set before the
    response arrives.
    """

    @abstractmethod
    def execute(self, url: str) -> Dict[str, Any]:
        """Blocking GET of `url`, returns decoded JSON object."""
        pass

    @abstractmethod
    async def executeAsync(self, url: str, cancelEvent: Optional[asyncio.Event] = None) -> Dict[str, Any]:
        """Non-blocking GET of `url`, cancellable via `cancelEvent`."""
        pass

    def close(self) -> None:
        """Release sync resources, no-op by default."""
        pass

    async def aclose(self) -> None:
        """Release async resources, no-op by default."""
        pass


class HttpxQueryExecutor(QueryExecutorInterface):
    """Query executor over httpx, dood!

    HTTP clients are created lazily and reused until closed. Nothing is
    retried here: retry and backoff policy belongs to the caller.

    Example:
        >>> executor = HttpxQueryExecutor(timeout=5)
        >>> data = executor.execute("https://maps.googleapis.com/maps/api/place/autocomplete/json?key=...&input=...")
        >>> executor.close()
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        asyncTransport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize executor.

        Args:
            timeout: Request timeout in seconds (default: 10)
            headers: Extra headers sent with every request
            transport: Custom sync httpx transport (tests use httpx.MockTransport)
            asyncTransport: Custom async httpx transport
        """
        self.timeout = timeout
        self.headers: Dict[str, str] = {
            "Accept": CONTENT_TYPE_JSON,
            "User-Agent": f"gplaces/{VERSION}",
        }
        if headers:
            self.headers.update(headers)
        self._transport = transport
        self._asyncTransport = asyncTransport
        self._httpClient: Optional[httpx.Client] = None
        self._asyncHttpClient: Optional[httpx.AsyncClient] = None

    def _getHttpClient(self) -> httpx.Client:
        if self._httpClient is None or self._httpClient.is_closed:
            self._httpClient = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                headers=self.headers,
                transport=self._transport,
            )
            logger.debug("Created new HTTP client")
        return self._httpClient

    def _getAsyncHttpClient(self) -> httpx.AsyncClient:
        if self._asyncHttpClient is None or self._asyncHttpClient.is_closed:
            self._asyncHttpClient = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=self.headers,
                transport=self._asyncTransport,
            )
            logger.debug("Created new async HTTP client")
        return self._asyncHttpClient

    def close(self) -> None:
        if self._httpClient is not None and not self._httpClient.is_closed:
            self._httpClient.close()
            logger.debug("HTTP client closed")

    async def aclose(self) -> None:
        if self._asyncHttpClient is not None and not self._asyncHttpClient.is_closed:
            await self._asyncHttpClient.aclose()
            logger.debug("Async HTTP client closed")
        self.close()

    def execute(self, url: str) -> Dict[str, Any]:
        """Blocking GET of `url`.

        Raises:
            PlacesNetworkError: On timeout or connection error
            PlacesHttpStatusError: On non-200 HTTP status
            PlacesResponseError: If body is not a JSON object
        """
        logger.debug(f"Making GET request to {maskApiKey(url)}")
        try:
            response = self._getHttpClient().get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {type(e).__name__}#{e}")
            raise PlacesNetworkError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {type(e).__name__}#{e}")
            raise PlacesNetworkError(f"Network error: {e}") from e

        return self._parseResponse(response)

    async def executeAsync(self, url: str, cancelEvent: Optional[asyncio.Event] = None) -> Dict[str, Any]:
        """Non-blocking GET of `url`.

        If `cancelEvent` gets set before the response arrives, in-flight request
        is cancelled and QueryCancelledError raised. Cancelling the awaiting
        task itself propagates asyncio.CancelledError as usual.

        Raises:
            QueryCancelledError: If `cancelEvent` was set before completion
            PlacesNetworkError: On timeout or connection error
            PlacesHttpStatusError: On non-200 HTTP status
            PlacesResponseError: If body is not a JSON object
        """
        if cancelEvent is not None and cancelEvent.is_set():
            logger.debug("Query cancelled before it was sent")
            raise QueryCancelledError()

        logger.debug(f"Making async GET request to {maskApiKey(url)}")
        try:
            response = await self._awaitCancellable(self._getAsyncHttpClient().get(url), cancelEvent)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {type(e).__name__}#{e}")
            raise PlacesNetworkError(f"Request timeout: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {type(e).__name__}#{e}")
            raise PlacesNetworkError(f"Network error: {e}") from e

        return self._parseResponse(response)

    async def _awaitCancellable(self, awaitable: Awaitable[T], cancelEvent: Optional[asyncio.Event]) -> T:
        """Await `awaitable` unless `cancelEvent` is set first."""
        if cancelEvent is None:
            return await awaitable

        requestTask = asyncio.ensure_future(awaitable)
        cancelTask = asyncio.ensure_future(cancelEvent.wait())
        try:
            await asyncio.wait({requestTask, cancelTask}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            pending = [task for task in (requestTask, cancelTask) if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        if requestTask.cancelled():
            logger.debug("In-flight query cancelled")
            raise QueryCancelledError()
        return requestTask.result()

    def _parseResponse(self, response: httpx.Response) -> Dict[str, Any]:
        if response.status_code == 200:
            try:
                data = response.json()
            except ValueError as e:
                logger.error(f"Failed to parse JSON response: {e}")
                raise PlacesResponseError(f"Invalid JSON response: {e}") from e
            if not isinstance(data, dict):
                logger.error(f"Expected JSON object, got {type(data).__name__}")
                raise PlacesResponseError(f"Expected JSON object, got {type(data).__name__}")
            logger.debug(f"API request successful, status: {data.get('status')}")
            return data

        try:
            errorData = response.json()
        except ValueError:
            errorData = None
        if not isinstance(errorData, dict):
            errorData = {"message": response.text or "Unknown error"}

        logger.error(f"API request failed: {response.status_code} {errorData}")
        raise parseHttpError(response.status_code, errorData)
