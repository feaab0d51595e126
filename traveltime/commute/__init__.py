"""
Commute resolution on top of the Google Maps client
"""

from .service import CommuteService

__all__ = ["CommuteService"]
