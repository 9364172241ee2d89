"""FastAPI backend package."""

from .api import create_app
from .dependencies import AppDependencies, build_app_dependencies
from .schemas import (
    DeleteResponse,
    GenerateRequest,
    GenerationStateResponse,
    MetadataResponse,
    RandomStringListResponse,
    RandomStringResponse,
)

__all__ = [
    "AppDependencies",
    "DeleteResponse",
    "GenerateRequest",
    "GenerationStateResponse",
    "MetadataResponse",
    "RandomStringListResponse",
    "RandomStringResponse",
    "build_app_dependencies",
    "create_app",
]
