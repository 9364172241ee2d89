"""Random string service: provider client, local history and the HTTP surface."""

from .backend.api import create_app
from .backend.dependencies import AppDependencies, build_app_dependencies
from .common import ServiceConfig
from .data.entities import RandomStringData
from .data.repository import GenerationError, RandomStringRepository
from .ui.view_model import RandomStringViewModel

__all__ = [
    "AppDependencies",
    "GenerationError",
    "RandomStringData",
    "RandomStringRepository",
    "RandomStringViewModel",
    "ServiceConfig",
    "build_app_dependencies",
    "create_app",
]
