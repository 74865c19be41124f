# src/aistudio_exporter/parsers/models.py

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

# json.loads pairs valid surrogate escapes, so any left over are unpaired
_SURROGATE = re.compile("[\ud800-\udfff]")


class Chunk(BaseModel):
    """One unit of the exported session: a thought or a visible text segment."""

    text: str = Field(default="", strict=True)
    is_thought: bool = Field(default=False, alias="isThought", strict=True)

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("text", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return _SURROGATE.sub("\ufffd", value)
        return value

    @field_validator("is_thought", mode="before")
    @classmethod
    def _null_is_thought(cls, value: Any) -> Any:
        return False if value is None else value


class ChunkedPrompt(BaseModel):
    chunks: tuple[Chunk, ...] = ()

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("chunks", mode="before")
    @classmethod
    def _null_chunks(cls, value: Any) -> Any:
        return () if value is None else value


class Root(BaseModel):
    """Top-level shape of an export document."""

    chunked_prompt: ChunkedPrompt = Field(
        default_factory=ChunkedPrompt, alias="chunkedPrompt"
    )

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("chunked_prompt", mode="before")
    @classmethod
    def _null_chunked_prompt(cls, value: Any) -> Any:
        return {} if value is None else value
