# -*- coding: utf-8 -*-
"""Long-lived owner of the configuration, catalogs and AI pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from .constant import AI_MAX_RETRIES, AI_RETRY_DELAY, AI_TIMEOUT
from .core import (
    ComponentSuggester,
    LogicPromptRedesigner,
    PromptRedesigner,
    UtilitySuggester,
)
from .knowledge import ComponentKnowledgeBase, UtilityKnowledgeBase
from .providers import (
    AICaller,
    ConfigStore,
    ModelManager,
    ProviderDispatcher,
    ProvidersDocument,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CodeIntelService:
    """Wires every component together; one instance per process or test.

    Paths left as ``None`` are resolved from the environment and the
    default data directories.
    """

    def __init__(
        self,
        *,
        config_path: Optional[PathLike] = None,
        components_path: Optional[PathLike] = None,
        utils_path: Optional[PathLike] = None,
        timeout: float = AI_TIMEOUT,
        max_retries: int = AI_MAX_RETRIES,
        retry_delay: float = AI_RETRY_DELAY,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.store = ConfigStore(config_path)
        self.manager = ModelManager(self.store)
        self.dispatcher = ProviderDispatcher(
            self.store,
            timeout=timeout,
            transport=transport,
        )
        self.caller = AICaller(
            self.manager,
            self.dispatcher,
            max_retries=max_retries,
            retry_delay=retry_delay,
        )

        self.components = ComponentKnowledgeBase(components_path)
        self.utilities = UtilityKnowledgeBase(utils_path)

        self.component_suggester = ComponentSuggester(
            self.caller,
            self.components,
        )
        self.utility_suggester = UtilitySuggester(
            self.caller,
            self.manager,
            self.utilities,
        )
        self.prompt_redesigner = PromptRedesigner(
            self.component_suggester,
            self.components,
        )
        self.logic_redesigner = LogicPromptRedesigner(
            self.utility_suggester,
            self.utilities,
        )

    def reload(self) -> ProvidersDocument:
        """Re-read the model configuration from disk."""
        document = self.store.reload()
        logger.info("Configuration reloaded from %s", self.store.config_path)
        return document
