"""Runtime dependencies for the FastAPI application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Protocol

from ..common.config import ServiceConfig
from ..common.constants import CONTENT_URI
from ..data.dao import RandomStringDao
from ..data.provider import HttpContentProvider
from ..data.repository import RandomStringRepository
from ..ui.view_model import RandomStringViewModel
from .database import build_engine, build_session_factory


class MetadataFn(Protocol):
    def __call__(self) -> Dict[str, str]:  # pragma: no cover - protocol
        ...


def _no_metadata() -> Dict[str, str]:
    return {}


@dataclass
class AppDependencies:
    view_model: RandomStringViewModel
    metadata: MetadataFn = field(default=_no_metadata)


def build_app_dependencies(config: ServiceConfig) -> AppDependencies:
    """Wire storage, provider, repository and view model from ``config``."""

    engine = build_engine(config.database_url)
    dao = RandomStringDao(build_session_factory(engine))
    provider = HttpContentProvider(config.provider_url, timeout=config.provider_timeout)
    repository = RandomStringRepository(provider, dao)
    view_model = RandomStringViewModel(repository, io_workers=config.io_workers)

    def metadata() -> Dict[str, str]:
        return {
            "commit": config.commit,
            "date": datetime.now().isoformat(),
            "provider_uri": CONTENT_URI,
            "database_url": engine.url.render_as_string(hide_password=True),
        }

    return AppDependencies(view_model=view_model, metadata=metadata)
