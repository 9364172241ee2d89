"""Data layer: entities, storage access and the content provider client."""

from .entities import RandomStringData
from .live import LiveQuery, StateFlow, Subscription

__all__ = ["LiveQuery", "RandomStringData", "StateFlow", "Subscription"]
