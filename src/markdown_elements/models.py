"""Pydantic models for API request/response."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .elements import Element


class ParseRequest(BaseModel):
    text: str
    id_strategy: str | None = None


class ParseResponse(BaseModel):
    elements: list[Element] = Field(default_factory=list)
    total: int = 0


class UploadResponse(BaseModel):
    file_id: str
    preview_markdown: str
    total: int


class DocumentElementsResponse(ParseResponse):
    file_id: str
    filename: str
