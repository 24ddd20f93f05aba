# -*- coding: utf-8 -*-
"""Component and utility knowledge bases."""

from .base import ComponentKnowledgeBase, KnowledgeBase, UtilityKnowledgeBase
from .models import (
    AISuggestionResult,
    AIUtilitySuggestionResult,
    ComponentInfo,
    ComponentSuggestion,
    EntrySummary,
    RedesignedLogicPrompt,
    RedesignedPrompt,
    UtilityInfo,
    UtilitySuggestion,
)

__all__ = [
    "AISuggestionResult",
    "AIUtilitySuggestionResult",
    "ComponentInfo",
    "ComponentKnowledgeBase",
    "ComponentSuggestion",
    "EntrySummary",
    "KnowledgeBase",
    "RedesignedLogicPrompt",
    "RedesignedPrompt",
    "UtilityInfo",
    "UtilityKnowledgeBase",
    "UtilitySuggestion",
]
