"""Rendering parameters."""

from __future__ import annotations
from pydantic import BaseModel


class RenderConfig(BaseModel):
    """Controls which rules run and how the text is laid out."""
    indent: str = "    "                 # One indentation level
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
