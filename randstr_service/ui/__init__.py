"""Presentation state for the generator screen."""

from .state import Error, GenerationState, Idle, Loading, Success
from .view_model import RandomStringViewModel

__all__ = ["Error", "GenerationState", "Idle", "Loading", "RandomStringViewModel", "Success"]
