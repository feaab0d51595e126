"""
Core models and computations for traveltime
"""

from .deviation import build_travel_result, calculate_deviation
from .errors import (
    ComputationError,
    ConfigError,
    NetworkError,
    ParseError,
    RequestTimeoutError,
    TemplateError,
    TravelTimeError,
    UpstreamError,
)
from .geometry import calculate_distance, find_direction
from .models import Coordinate, Deviation, NamedPoint, RouteDurations, TravelResult
from .template import DEFAULT_FORMAT, OutputTemplate

__all__ = [
    # Models
    "Coordinate",
    "NamedPoint",
    "RouteDurations",
    "Deviation",
    "TravelResult",
    # Computations
    "calculate_distance",
    "find_direction",
    "calculate_deviation",
    "build_travel_result",
    # Output
    "OutputTemplate",
    "DEFAULT_FORMAT",
    # Errors
    "TravelTimeError",
    "ConfigError",
    "ParseError",
    "NetworkError",
    "RequestTimeoutError",
    "UpstreamError",
    "ComputationError",
    "TemplateError",
]
