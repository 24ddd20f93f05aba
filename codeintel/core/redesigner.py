# -*- coding: utf-8 -*-
"""Render model suggestions into a Markdown "redesigned prompt"."""

from __future__ import annotations

import logging
from typing import List

from ..knowledge.base import ComponentKnowledgeBase, UtilityKnowledgeBase
from ..knowledge.models import (
    AISuggestionResult,
    AIUtilitySuggestionResult,
    RedesignedLogicPrompt,
    RedesignedPrompt,
)
from .suggester import ComponentSuggester, UtilitySuggester

logger = logging.getLogger(__name__)

CONFIRM_LINE = (
    "**Do not output code yet. Ask the user to confirm whether to adopt "
    "the suggestions above.**\n"
)


class PromptRedesigner:
    """Component suggestions joined with full catalog records."""

    def __init__(
        self,
        suggester: ComponentSuggester,
        kb: ComponentKnowledgeBase,
    ) -> None:
        self._suggester = suggester
        self._kb = kb

    def redesign(self, original_prompt: str) -> RedesignedPrompt:
        logger.info("Analyzing prompt: %s", original_prompt)
        result = self._suggester.suggest(original_prompt)
        return RedesignedPrompt(
            original_prompt=original_prompt,
            result=result,
            redesigned_prompt=self.format(original_prompt, result),
        )

    def format(self, original_prompt: str, result: AISuggestionResult) -> str:
        parts: List[str] = [
            "# Component suggestions\n",
            f'Original requirement: "{original_prompt}"\n',
            f'Optimized requirement: "{result.optimized_prompt}"\n',
            "## Recommended components\n",
        ]

        index = 0
        for suggestion in result.suggested_components:
            component = self._kb.get_by_name(suggestion.component_name)
            if component is None:
                logger.warning(
                    "Component not found: %s",
                    suggestion.component_name,
                )
                continue
            index += 1
            parts.append(f"### {index}. {component.name}")
            parts.append(f"- Description: {component.description}")
            parts.append(f"- Reason: {suggestion.reason}")
            parts.append(f"- Import: `{component.import_}`")
            parts.append(f"- File path: {component.relative_path}\n")

        parts.extend(
            [
                "## Implementation notes\n",
                "1. Import the recommended components",
                "2. Configure component props and events for the requirement",
                "3. Write styles in Less following BEM naming",
                "4. Make sure the components support responsive layouts",
                "5. Use the query_component tool for component usage\n",
                "---\n",
                CONFIRM_LINE,
            ],
        )
        return "\n".join(parts)


class LogicPromptRedesigner:
    """Utility suggestions joined with full catalog records."""

    def __init__(
        self,
        suggester: UtilitySuggester,
        kb: UtilityKnowledgeBase,
    ) -> None:
        self._suggester = suggester
        self._kb = kb

    def redesign(self, original_prompt: str) -> RedesignedLogicPrompt:
        logger.info("Analyzing logic requirement: %s", original_prompt)
        result = self._suggester.suggest(original_prompt)
        return RedesignedLogicPrompt(
            original_prompt=original_prompt,
            result=result,
            redesigned_prompt=self.format(original_prompt, result),
        )

    def format(
        self,
        original_prompt: str,
        result: AIUtilitySuggestionResult,
    ) -> str:
        parts: List[str] = [
            "# Utility suggestions\n",
            f'Original requirement: "{original_prompt}"\n',
            f'Optimized requirement: "{result.optimized_prompt}"\n',
            "## Recommended utilities\n",
        ]

        index = 0
        for suggestion in result.suggested_utilities:
            utility = self._kb.get_by_name(suggestion.utility_name)
            if utility is None:
                logger.warning(
                    "Utility not found: %s",
                    suggestion.utility_name,
                )
                continue
            index += 1
            parts.append(f"### {index}. {utility.name}")
            parts.append(f"- Description: {utility.description}")
            parts.append(f"- Reason: {suggestion.reason}")
            parts.append(f"- Import: `{utility.import_}`")
            if utility.params:
                parts.append(f"- Params: {utility.params}")
            if utility.returns:
                parts.append(f"- Returns: {utility.returns}")
            if utility.type:
                parts.append(f"- Type: {utility.type}")
            parts.append(f"- File path: {utility.relative_path}\n")

        parts.extend(
            [
                "## Implementation notes\n",
                "1. Import the recommended utilities",
                "2. Pass arguments as described by the params",
                "3. Handle return values and errors where needed",
                "4. Make sure each call fits the business logic",
                "5. Read the source file for detailed usage\n",
                "---\n",
                CONFIRM_LINE,
            ],
        )
        return "\n".join(parts)
