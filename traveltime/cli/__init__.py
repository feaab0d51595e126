"""
traveltime CLI module
"""

from .app import app, main
from .config import TravelConfig

__all__ = ["app", "main", "TravelConfig"]
