"""
traveltime: commute time with traffic delay

A small CLI that figures out whether you are heading to work or home and
prints the current travel time together with the delay caused by traffic.
"""

__version__ = "0.1.0"

from .core.models import Coordinate, Deviation, NamedPoint, TravelResult
from .core.template import OutputTemplate

__all__ = [
    "Coordinate",
    "NamedPoint",
    "Deviation",
    "TravelResult",
    "OutputTemplate",
]
