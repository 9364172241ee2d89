"""Shared configuration and constants."""

from .config import ServiceConfig
from .constants import *  # noqa: F401,F403

from . import constants as constants_module

__all__ = ["ServiceConfig"] + list(constants_module.__all__)
