"""Pydantic models for the provider payload and the FastAPI application."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..data.entities import RandomStringData, parse_created

__all__ = [
    "RandomTextData",
    "RandomTextResponse",
    "GenerateRequest",
    "RandomStringResponse",
    "RandomStringListResponse",
    "GenerationStateResponse",
    "DeleteResponse",
    "MetadataResponse",
]


class RandomTextData(BaseModel):
    value: str
    length: int
    created: str

    @field_validator("created")
    @classmethod
    def check_created(cls, value: str) -> str:
        parse_created(value)
        return value


class RandomTextResponse(BaseModel):
    """JSON document found in the provider's ``data`` column."""

    random_text: RandomTextData = Field(..., alias="randomText")

    def to_entity(self) -> RandomStringData:
        text = self.random_text
        return RandomStringData(value=text.value, length=text.length, created=text.created)


class GenerateRequest(BaseModel):
    length: int = Field(..., description="Maximum length of the string to request")
    wait: bool = Field(False, description="Block until the request has settled")


class RandomStringResponse(BaseModel):
    id: Optional[int] = None
    value: str
    length: int
    created: str
    formatted_created: str

    @classmethod
    def from_entity(cls, entity: RandomStringData) -> "RandomStringResponse":
        return cls(
            id=entity.id,
            value=entity.value,
            length=entity.length,
            created=entity.created,
            formatted_created=entity.formatted_date(),
        )


class RandomStringListResponse(BaseModel):
    strings: List[RandomStringResponse]
    count: int


class GenerationStateResponse(BaseModel):
    status: str
    random_string: Optional[RandomStringResponse] = None
    message: Optional[str] = None


class DeleteResponse(BaseModel):
    deleted: int


class MetadataResponse(BaseModel):
    commit: Optional[str] = None
    date: Optional[str] = None
    provider_uri: Optional[str] = None
    database_url: Optional[str] = None
