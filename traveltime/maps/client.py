"""
Google Maps Platform client for geolocation and travel durations
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict

import httpx
from pydantic import ValidationError

from traveltime.core.errors import ConfigError, NetworkError, RequestTimeoutError, UpstreamError
from traveltime.core.models import Coordinate, RouteDurations

from .models import DistanceMatrixResponse, GeolocationResponse


class GoogleMapsClient:
    """
    Async client for the Google Geolocation and Distance Matrix APIs
    Every failure is raised, nothing is retried
    """

    geolocation_url = "https://www.googleapis.com/geolocation/v1/geolocate"
    distance_matrix_url = "https://maps.googleapis.com/maps/api/distancematrix/json"

    def __init__(self, api_key: str, timeout: float = 5.0):
        if not api_key:
            raise ConfigError("Google Maps API key required. Set GOOGLE_API_KEY")

        self.api_key = api_key
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    async def geolocate(self) -> Coordinate:
        """
        Estimate the current position from the caller's IP address

        Returns:
            Coordinate of the current position

        Raises:
            NetworkError: If the API cannot be reached in time
            UpstreamError: If the API returns no usable position
        """
        data = await self._request(
            "post",
            self.geolocation_url,
            "geolocation",
            params={"key": self.api_key},
            json={"considerIp": True},
        )

        try:
            result = GeolocationResponse.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"Unexpected geolocation response: {e}")

        self.logger.debug(
            f"Current position {result.location.lat},{result.location.lng} "
            f"(accuracy {result.accuracy}m)"
        )
        return Coordinate(lat=result.location.lat, lng=result.location.lng)

    async def distance_matrix(
        self,
        origin: Coordinate,
        destination: Coordinate,
        departure_time: datetime,
        traffic_model: str = "best_guess",
        mode: str = "driving"
    ) -> RouteDurations:
        """
        Fetch travel duration with and without traffic

        Args:
            origin: Start of the route
            destination: End of the route
            departure_time: Planned departure, traffic is forecast for this time
            traffic_model: best_guess, pessimistic or optimistic
            mode: Travel mode, traffic data is only available for driving

        Returns:
            RouteDurations for the route

        Raises:
            NetworkError: If the API cannot be reached in time
            UpstreamError: If no route or no traffic duration is returned
        """
        data = await self._request(
            "get",
            self.distance_matrix_url,
            "distance matrix",
            params={
                "origins": str(origin),
                "destinations": str(destination),
                "mode": mode,
                "departure_time": int(departure_time.timestamp()),
                "traffic_model": traffic_model,
                "key": self.api_key,
            },
        )

        try:
            result = DistanceMatrixResponse.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"Unexpected distance matrix response: {e}")

        if result.status != "OK":
            details = f": {result.error_message}" if result.error_message else ""
            raise UpstreamError(f"Distance matrix request failed with status {result.status}{details}")

        if not result.rows or not result.rows[0].elements:
            raise UpstreamError("Distance matrix response contains no elements")

        element = result.rows[0].elements[0]
        if element.status != "OK":
            raise UpstreamError(f"No route from {origin} to {destination}: {element.status}")

        if element.duration is None or element.duration_in_traffic is None:
            raise UpstreamError(f"No traffic duration for route from {origin} to {destination}")

        self.logger.debug(
            f"Route {origin} -> {destination}: {element.duration_in_traffic.value}s with traffic, "
            f"{element.duration.value}s without"
        )
        return RouteDurations(
            with_traffic=timedelta(seconds=element.duration_in_traffic.value),
            without_traffic=timedelta(seconds=element.duration.value),
        )

    async def _request(self, method: str, url: str, what: str, **kwargs) -> Dict[str, Any]:
        """Send one request and return the decoded JSON body"""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await getattr(client, method)(url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"Timed out fetching {what}: {e}")
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"Failed to fetch {what}: {e}")
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch {what}: {e}")
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON in {what} response: {e}")
