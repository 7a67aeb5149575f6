"""
Google Places API Client

This module provides PlacesClient: it validates and serializes endpoint
requests, hands the assembled URL to a query executor and parses the JSON body
into typed response models.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from gplaces.config import ConfigManager

from .autocomplete import PlacesAutoCompleteRequest, PlacesAutoCompleteResponse
from .common import PlacesCommonFields
from .constants import API_BASE_URL, DEFAULT_TIMEOUT
from .executor import HttpxQueryExecutor, QueryExecutorInterface

logger = logging.getLogger(__name__)


class PlacesClient:
    """Client for Google Places API with sync and cancellable async calls, dood!

    Validation errors are raised before the executor is touched. API-level
    statuses (`OVER_QUERY_LIMIT`, `REQUEST_DENIED`, ...) come back as regular
    responses, transport failures are raised as PlacesTransportError.

    Example:
        >>> from gplaces.places import PlacesClient, PlacesAutoCompleteRequest, PlacesCommonFields
        >>>
        >>> with PlacesClient() as client:
        ...     response = client.autoComplete(
        ...         PlacesAutoCompleteRequest(
        ...             input="jagtvej 2200 Copenhagen",
        ...             common=PlacesCommonFields(key="your_api_key"),
        ...         )
        ...     )
        ...     for prediction in response.predictions:
        ...         print(prediction.description)
        >>>
        >>> # Async, cancellable
        >>> cancelEvent = asyncio.Event()
        >>> response = await client.autoCompleteAsync(request, cancelEvent)
    """

    def __init__(
        self,
        baseUrl: str = API_BASE_URL,
        executor: Optional[QueryExecutorInterface] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize Places client.

        Args:
            baseUrl: Base URL of Places web service (default: https://maps.googleapis.com/maps/api/place)
            executor: Query executor (default: HttpxQueryExecutor)
            timeout: Request timeout in seconds for default executor (default: 10)
        """
        self.baseUrl = baseUrl.rstrip("/")
        self.executor: QueryExecutorInterface = (
            executor if executor is not None else HttpxQueryExecutor(timeout=timeout)
        )
        logger.debug(f"PlacesClient initialized for {self.baseUrl}")

    @classmethod
    def fromConfig(cls, configManager: ConfigManager) -> "PlacesClient":
        """Create client from `[places]` config section (`base-url`, `timeout`)."""
        placesConfig = configManager.getPlacesConfig()
        return cls(
            baseUrl=placesConfig.get("base-url", API_BASE_URL),
            timeout=float(placesConfig.get("timeout", DEFAULT_TIMEOUT)),
        )

    @staticmethod
    def commonFieldsFromConfig(configManager: ConfigManager) -> PlacesCommonFields:
        """Build request common fields (`api-key`, `language`, `region`) from config.

        Raises:
            ConfigurationError: If API key is not configured
        """
        placesConfig = configManager.getPlacesConfig()
        return PlacesCommonFields(
            key=configManager.getApiKey(),
            language=placesConfig.get("language"),
            region=placesConfig.get("region"),
        )

    def __enter__(self) -> "PlacesClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "PlacesClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def close(self) -> None:
        self.executor.close()

    async def aclose(self) -> None:
        await self.executor.aclose()

    def buildUrl(self, request: PlacesAutoCompleteRequest) -> str:
        """Validate request and build full URL `{baseUrl}/{path}?{params}`.

        Raises:
            PlacesValidationError: If request is invalid
        """
        queryString = request.getQueryStringParameters().toQueryString()
        return f"{self.baseUrl}/{request.PATH}?{queryString}"

    def _parseAutoCompleteResponse(self, data: Dict[str, Any]) -> PlacesAutoCompleteResponse:
        response = PlacesAutoCompleteResponse.from_dict(data)
        if response.status.isError:
            logger.warning(f"Autocomplete returned {response.status}: {response.error_message}")
        else:
            logger.debug(f"Autocomplete returned {response.status} with {len(response.predictions)} predictions")
        return response

    def autoComplete(self, request: PlacesAutoCompleteRequest) -> PlacesAutoCompleteResponse:
        """Query Place Autocomplete, blocking.

        Args:
            request: Autocomplete request

        Returns:
            Parsed response, possibly with non-OK status

        Raises:
            PlacesValidationError: If request is invalid (nothing is sent)
            PlacesTransportError: On HTTP-level failure
        """
        url = self.buildUrl(request)
        return self._parseAutoCompleteResponse(self.executor.execute(url))

    async def autoCompleteAsync(
        self,
        request: PlacesAutoCompleteRequest,
        cancelEvent: Optional[asyncio.Event] = None,
    ) -> PlacesAutoCompleteResponse:
        """Query Place Autocomplete without blocking, dood!

        Args:
            request: Autocomplete request
            cancelEvent: Set it to abort the query before response arrives

        Returns:
            Parsed response, possibly with non-OK status

        Raises:
            PlacesValidationError: If request is invalid (nothing is sent)
            QueryCancelledError: If `cancelEvent` was set before completion
            PlacesTransportError: On HTTP-level failure
        """
        url = self.buildUrl(request)
        data = await self.executor.executeAsync(url, cancelEvent)
        return self._parseAutoCompleteResponse(data)
