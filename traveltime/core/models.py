"""
Core data models for traveltime commute calculation
"""

import math
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ParseError


class Coordinate(BaseModel):
    """Plain latitude/longitude pair in degrees"""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude", allow_inf_nan=False)
    lng: float = Field(..., description="Longitude", allow_inf_nan=False)

    def __str__(self) -> str:
        return f"{self.lat},{self.lng}"

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse a "lat,lng" string"""
        parts = text.split(",")
        if len(parts) != 2:
            raise ParseError(f"Invalid coordinate {text!r}, expected 'lat,lng'")

        values = []
        for part in parts:
            # float() also reads digit separators, "52_5" would become 525.0
            if "_" in part:
                raise ParseError(f"Invalid coordinate {text!r}: {part.strip()!r} is not a number")
            try:
                value = float(part)
            except ValueError:
                raise ParseError(f"Invalid coordinate {text!r}: {part.strip()!r} is not a number")
            if not math.isfinite(value):
                raise ParseError(f"Invalid coordinate {text!r}: {part.strip()!r} is not finite")
            values.append(value)

        return cls(lat=values[0], lng=values[1])


class NamedPoint(BaseModel):
    """
    A coordinate with a human readable name
    Configured as "name,lat,lng", e.g. "home,52.5,13.4"
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., description="Display name of the location", min_length=1)
    coordinate: Coordinate = Field(..., description="Position of the location")

    @field_validator("name")
    def validate_name(cls, v):
        """Names are the first field of name,lat,lng and cannot hold a comma"""
        if "," in v:
            raise ValueError(f"Name must not contain ',': {v!r}")
        return v

    @property
    def latitude(self) -> float:
        return self.coordinate.lat

    @property
    def longitude(self) -> float:
        return self.coordinate.lng

    @classmethod
    def parse(cls, text: str) -> "NamedPoint":
        """
        Parse a "name,lat,lng" string

        Args:
            text: Location string with exactly two commas

        Returns:
            NamedPoint with the parsed name and coordinate

        Raises:
            ParseError: If the string is not of the form name,lat,lng
        """
        count = text.count(",")
        if count != 2:
            raise ParseError(f"Invalid location {text!r}, must contain 2 ',', got {count}")

        name, lat_lng = text.split(",", 1)
        if not name.strip():
            raise ParseError(f"Invalid location {text!r}, missing name")

        return cls(name=name, coordinate=Coordinate.parse(lat_lng))

    def format(self) -> str:
        """Serialize back to "name,lat,lng" """
        return f"{self.name},{self.coordinate}"


class RouteDurations(BaseModel):
    """Travel durations for one origin/destination pair"""

    model_config = ConfigDict(frozen=True)

    with_traffic: timedelta = Field(..., description="Duration considering traffic")
    without_traffic: timedelta = Field(..., description="Free-flow duration")


class Deviation(BaseModel):
    """Traffic induced delay, both values carry an explicit sign"""

    model_config = ConfigDict(frozen=True)

    relative: str = Field(..., description="Relative delay in percent, e.g. +10%")
    absolute: str = Field(..., description="Absolute delay in minutes, e.g. +10")


class TravelResult(BaseModel):
    """Outcome of a single traveltime run"""

    model_config = ConfigDict(frozen=True)

    origin: NamedPoint = Field(..., description="Location nearest to the current position")
    destination: NamedPoint = Field(..., description="Location to travel to")
    with_traffic: int = Field(..., description="Travel time with traffic in minutes")
    no_traffic: int = Field(..., description="Travel time without traffic in minutes")
    deviation: Deviation = Field(..., description="Delay caused by traffic")
