"""
Direction of travel from the current position
"""

import math
from typing import Tuple

from .models import Coordinate, NamedPoint


def calculate_distance(point1: Coordinate, point2: Coordinate) -> float:
    """Flat-plane distance in degrees, good enough to tell two places apart"""
    return math.sqrt((point2.lat - point1.lat) ** 2 + (point2.lng - point1.lng) ** 2)


def find_direction(
    point_a: NamedPoint,
    point_b: NamedPoint,
    location: Coordinate
) -> Tuple[NamedPoint, NamedPoint]:
    """
    Decide which way to travel based on the current position

    The origin is the point nearest to the current location, the other point
    is the destination. On equal distance point_a is the origin.

    Args:
        point_a: First candidate location
        point_b: Second candidate location
        location: Current position

    Returns:
        (origin, destination) tuple
    """
    distance_a = calculate_distance(point_a.coordinate, location)
    distance_b = calculate_distance(point_b.coordinate, location)
    if distance_a <= distance_b:
        return point_a, point_b
    return point_b, point_a
