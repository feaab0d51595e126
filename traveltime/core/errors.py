"""
Exception hierarchy for traveltime
Every error is fatal; the CLI turns them into a message and a non-zero exit
"""


class TravelTimeError(Exception):
    """Base class for all traveltime errors"""
    pass


class ConfigError(TravelTimeError):
    """Missing, empty or invalid configuration value"""
    pass


class ParseError(ConfigError):
    """Malformed name,lat,lng coordinate string"""
    pass


class NetworkError(TravelTimeError):
    """Upstream mapping service could not be reached"""
    pass


class RequestTimeoutError(NetworkError):
    """Upstream mapping service did not answer within the timeout budget"""
    pass


class UpstreamError(TravelTimeError):
    """Upstream answered without a usable route or duration"""
    pass


class ComputationError(TravelTimeError):
    """Deviation could not be computed from the returned durations"""
    pass


class TemplateError(TravelTimeError):
    """Malformed output template or unknown field reference"""
    pass
