"""
Traffic deviation metrics
"""

from datetime import timedelta

from .errors import ComputationError
from .models import Deviation, NamedPoint, RouteDurations, TravelResult


def round_minutes(duration: timedelta) -> int:
    """Whole minutes, rounded half to even"""
    return round(duration.total_seconds() / 60)


def round_seconds(duration: timedelta) -> int:
    """Whole seconds, rounded half to even"""
    return round(duration.total_seconds())


def calculate_deviation(with_traffic: timedelta, without_traffic: timedelta) -> Deviation:
    """
    Calculate the delay caused by traffic

    The absolute delay is the difference of the rounded minutes, the relative
    delay is derived from the rounded seconds. Both are signed strings.

    Raises:
        ComputationError: If the duration without traffic is zero
    """
    without_seconds = round_seconds(without_traffic)
    if without_seconds == 0:
        raise ComputationError("Duration without traffic is zero, cannot calculate deviation")

    relative = round(100 / without_seconds * round_seconds(with_traffic) - 100)
    absolute = round_minutes(with_traffic) - round_minutes(without_traffic)

    return Deviation(relative=f"{relative:+d}%", absolute=f"{absolute:+d}")


def build_travel_result(
    origin: NamedPoint,
    destination: NamedPoint,
    durations: RouteDurations
) -> TravelResult:
    """Assemble the result of a run from the upstream durations"""
    return TravelResult(
        origin=origin,
        destination=destination,
        with_traffic=round_minutes(durations.with_traffic),
        no_traffic=round_minutes(durations.without_traffic),
        deviation=calculate_deviation(durations.with_traffic, durations.without_traffic),
    )
