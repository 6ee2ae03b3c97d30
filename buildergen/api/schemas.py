"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from buildergen.models import BuilderOptions, ClassMetadata


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    metadata: ClassMetadata
    options: BuilderOptions
    # What already exists at the destination, for the collision check
    existing_inner_types: list[str] = []
    existing_files: list[str] = []


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    class_name: str
    inner: bool
    text: str
    file_name: str | None = None
    file_content: str | None = None
    warnings: list[str] = []
    rule_count: int


class ErrorDetail(BaseModel):
    error: str
    message: str


class RuleInfo(BaseModel):
    id: str
    name: str
