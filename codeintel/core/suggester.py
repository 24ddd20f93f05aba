# -*- coding: utf-8 -*-
"""Ask the model which catalog entries fit a requirement."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ..exceptions import ResponseParseError
from ..knowledge.base import ComponentKnowledgeBase, UtilityKnowledgeBase
from ..knowledge.models import AISuggestionResult, AIUtilitySuggestionResult
from ..providers.caller import AICaller
from ..providers.manager import ModelManager
from ..providers.models import ModelPurpose
from .prompt import (
    COMPONENT_SYSTEM_PROMPT,
    UTILITY_SYSTEM_PROMPT,
    build_component_message,
    build_utility_message,
)

logger = logging.getLogger(__name__)


class ComponentSuggester:
    """Recommends UI components and rewords the user's prompt."""

    def __init__(self, caller: AICaller, kb: ComponentKnowledgeBase) -> None:
        self._caller = caller
        self._kb = kb

    def suggest(self, user_prompt: str) -> AISuggestionResult:
        logger.info("Component suggester started: %s", user_prompt)
        summary = self._kb.get_summary()
        logger.info("Loaded %d components", len(summary))

        payload = self._caller.call_ai_for_json(
            COMPONENT_SYSTEM_PROMPT,
            build_component_message(user_prompt, summary),
        )
        try:
            result = AISuggestionResult.model_validate(payload)
        except ValidationError as exc:
            raise ResponseParseError(str(payload), str(exc)) from exc

        logger.info(
            "AI returned %d component suggestions",
            len(result.suggested_components),
        )
        return result


class UtilitySuggester:
    """Recommends utility functions for a logic requirement."""

    def __init__(
        self,
        caller: AICaller,
        manager: ModelManager,
        kb: UtilityKnowledgeBase,
    ) -> None:
        self._caller = caller
        self._manager = manager
        self._kb = kb

    def suggest(self, user_prompt: str) -> AIUtilitySuggestionResult:
        logger.info("Utility suggester started: %s", user_prompt)
        summary = self._kb.get_summary()
        logger.info("Loaded %d utilities", len(summary))

        model_name = self._manager.get_recommended_model(ModelPurpose.DESIGN)
        payload = self._caller.call_ai_for_json(
            UTILITY_SYSTEM_PROMPT,
            build_utility_message(user_prompt, summary),
            model_name=model_name,
        )
        try:
            result = AIUtilitySuggestionResult.model_validate(payload)
        except ValidationError as exc:
            raise ResponseParseError(str(payload), str(exc)) from exc

        logger.info(
            "AI returned %d utility suggestions",
            len(result.suggested_utilities),
        )
        return result
