"""Factory helpers to create a FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Depends, FastAPI

from ..data.entities import RandomStringData
from ..ui.state import Error, GenerationState, Success
from .dependencies import AppDependencies
from .schemas import (
    DeleteResponse,
    GenerateRequest,
    GenerationStateResponse,
    MetadataResponse,
    RandomStringListResponse,
    RandomStringResponse,
)

__all__ = ["create_app", "state_to_response"]

LOGGER = logging.getLogger(__name__)


def state_to_response(state: GenerationState) -> GenerationStateResponse:
    """Flatten a generation state into its JSON shape."""
    if isinstance(state, Success):
        return GenerationStateResponse(
            status=state.status,
            random_string=RandomStringResponse.from_entity(state.random_string),
        )
    if isinstance(state, Error):
        return GenerationStateResponse(status=state.status, message=state.message)
    return GenerationStateResponse(status=state.status)


def create_app(deps: AppDependencies, *, title: Optional[str] = None) -> FastAPI:
    """Create the FastAPI application with injectable dependencies."""

    dependencies = deps

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        dependencies.view_model.close()

    app = FastAPI(title=title or "Random String Service", version="1.0.0", lifespan=lifespan)

    @app.post("/strings/generate", response_model=GenerationStateResponse)
    def generate(
        request: GenerateRequest,
        deps: AppDependencies = Depends(lambda: dependencies),
    ) -> GenerationStateResponse:
        view_model = deps.view_model
        future = view_model.generate_random_string(request.length)
        if future is not None and request.wait:
            return state_to_response(future.result())
        return state_to_response(view_model.generation_state.value)

    @app.get("/strings/state", response_model=GenerationStateResponse)
    def generation_state(deps: AppDependencies = Depends(lambda: dependencies)) -> GenerationStateResponse:
        return state_to_response(deps.view_model.generation_state.value)

    @app.post("/strings/state/reset", response_model=GenerationStateResponse)
    def reset_generation_state(deps: AppDependencies = Depends(lambda: dependencies)) -> GenerationStateResponse:
        deps.view_model.reset_generation_state()
        return state_to_response(deps.view_model.generation_state.value)

    @app.get("/strings", response_model=RandomStringListResponse)
    def list_strings(deps: AppDependencies = Depends(lambda: dependencies)) -> RandomStringListResponse:
        strings = deps.view_model.random_strings.value
        return RandomStringListResponse(
            strings=[RandomStringResponse.from_entity(item) for item in strings],
            count=len(strings),
        )

    @app.delete("/strings/{string_id}", response_model=DeleteResponse)
    def delete_string(string_id: int, deps: AppDependencies = Depends(lambda: dependencies)) -> DeleteResponse:
        view_model = deps.view_model
        target = next((item for item in view_model.random_strings.value if item.id == string_id), None)
        if target is None:
            # Not in the last snapshot; a delete by id is still a harmless no-op.
            target = RandomStringData(id=string_id, value="", length=0, created="")
        deleted = view_model.delete_random_string(target).result()
        LOGGER.info("Deleted random string id=%s (%d row(s))", string_id, deleted)
        return DeleteResponse(deleted=deleted)

    @app.delete("/strings", response_model=DeleteResponse)
    def delete_all_strings(deps: AppDependencies = Depends(lambda: dependencies)) -> DeleteResponse:
        deleted = deps.view_model.delete_all_random_strings().result()
        LOGGER.info("Deleted all random strings (%d row(s))", deleted)
        return DeleteResponse(deleted=deleted)

    @app.get("/metadata", response_model=MetadataResponse)
    def metadata(deps: AppDependencies = Depends(lambda: dependencies)) -> MetadataResponse:
        data = deps.metadata()
        return MetadataResponse(**data)

    return app
