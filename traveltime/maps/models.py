"""
Google Maps Platform response models
Only the fields traveltime reads are modelled
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    """Position as returned by the Geolocation API"""

    lat: float = Field(description="Latitude")
    lng: float = Field(description="Longitude")


class GeolocationResponse(BaseModel):
    """Response of the Geolocation API"""

    location: LatLng = Field(description="Estimated position")
    accuracy: Optional[float] = Field(None, description="Accuracy radius in meters")


class TextValue(BaseModel):
    """Distance Matrix value with its human readable text"""

    value: int = Field(description="Value in seconds or meters")
    text: Optional[str] = Field(None, description="Human readable value")


class DistanceMatrixElement(BaseModel):
    """One origin/destination pair of a Distance Matrix response"""

    status: str = Field(description="Element status, OK on success")
    duration: Optional[TextValue] = Field(None, description="Free-flow duration")
    duration_in_traffic: Optional[TextValue] = Field(None, description="Duration with traffic")
    distance: Optional[TextValue] = Field(None, description="Route distance")


class DistanceMatrixRow(BaseModel):
    """Elements for one origin"""

    elements: List[DistanceMatrixElement] = Field(default_factory=list)


class DistanceMatrixResponse(BaseModel):
    """Response of the Distance Matrix API"""

    status: str = Field(description="Top level status, OK on success")
    rows: List[DistanceMatrixRow] = Field(default_factory=list)
    error_message: Optional[str] = Field(None, description="Error details if status is not OK")
