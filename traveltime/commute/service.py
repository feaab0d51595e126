"""
Commute service: from the configured locations to a travel result
"""

import logging
from datetime import datetime
from typing import Optional

from traveltime.core.deviation import build_travel_result
from traveltime.core.geometry import find_direction
from traveltime.core.models import NamedPoint, TravelResult
from traveltime.maps.client import GoogleMapsClient


class CommuteService:
    """
    Resolves the commute direction and its travel durations
    Calls the geolocation and distance APIs one after the other
    """

    def __init__(self, client: GoogleMapsClient):
        self.client = client
        self.logger = logging.getLogger(__name__)

    async def resolve(
        self,
        work: NamedPoint,
        home: NamedPoint,
        departure_time: Optional[datetime] = None
    ) -> TravelResult:
        """
        Calculate the travel result for the current position

        Args:
            work: Work location
            home: Home location
            departure_time: Departure for the traffic forecast, defaults to now

        Returns:
            TravelResult from the nearest location to the other one
        """
        if departure_time is None:
            departure_time = datetime.now()

        location = await self.client.geolocate()
        origin, destination = find_direction(work, home, location)
        self.logger.info(f"Travelling from {origin.name} to {destination.name}")

        durations = await self.client.distance_matrix(
            origin=origin.coordinate,
            destination=destination.coordinate,
            departure_time=departure_time,
        )

        return build_travel_result(origin, destination, durations)
