"""
Google Maps Platform integration
"""

from .client import GoogleMapsClient
from .models import DistanceMatrixResponse, GeolocationResponse

__all__ = ["GoogleMapsClient", "DistanceMatrixResponse", "GeolocationResponse"]
