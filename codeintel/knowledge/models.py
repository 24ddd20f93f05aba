# -*- coding: utf-8 -*-
"""Pydantic models for catalog entries and LLM suggestion payloads."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Populated by field name or by the camelCase key used on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


class ComponentInfo(_WireModel):
    """A reusable UI component."""

    name: str
    description: str = ""
    import_: str = Field(default="", alias="import")
    relative_path: str = Field(default="", alias="relativePath")


class UtilityInfo(ComponentInfo):
    """A reusable utility function."""

    params: Optional[str] = None
    returns: Optional[str] = None
    type: Optional[str] = None


class EntrySummary(BaseModel):
    """Name + description only; the view sent to the model."""

    name: str
    description: str


# ---------------------------------------------------------------------------
# LLM results
# ---------------------------------------------------------------------------


class ComponentSuggestion(_WireModel):
    component_name: str = Field(alias="componentName")
    reason: str = ""


class UtilitySuggestion(_WireModel):
    utility_name: str = Field(alias="utilityName")
    reason: str = ""


class AISuggestionResult(_WireModel):
    suggested_components: List[ComponentSuggestion] = Field(
        default_factory=list,
        alias="suggestedComponents",
    )
    optimized_prompt: str = Field(default="", alias="optimizedPrompt")


class AIUtilitySuggestionResult(_WireModel):
    suggested_utilities: List[UtilitySuggestion] = Field(
        default_factory=list,
        alias="suggestedUtilities",
    )
    optimized_prompt: str = Field(default="", alias="optimizedPrompt")


class RedesignedPrompt(_WireModel):
    original_prompt: str = Field(alias="originalPrompt")
    result: AISuggestionResult
    redesigned_prompt: str = Field(alias="redesignedPrompt")


class RedesignedLogicPrompt(_WireModel):
    original_prompt: str = Field(alias="originalPrompt")
    result: AIUtilitySuggestionResult
    redesigned_prompt: str = Field(alias="redesignedPrompt")
