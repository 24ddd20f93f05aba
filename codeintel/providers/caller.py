# -*- coding: utf-8 -*-
"""One-call helpers: send a system + user prompt, get text or JSON back."""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, Optional

from ..constant import (
    AI_MAX_RETRIES,
    AI_RETRY_DELAY,
    DEFAULT_TEMPERATURE,
)
from ..exceptions import (
    AICallError,
    AITransportError,
    ModelConfigNotFound,
    ResponseParseError,
)
from .dispatcher import ProviderDispatcher
from .manager import ModelManager

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^```(?:json)?[ \t]*\r?\n", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\r?\n```$")


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence wrapping the whole *text*, if any."""
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = _FENCE_OPEN.sub("", stripped, count=1)
        stripped = _FENCE_CLOSE.sub("", stripped, count=1)
    return stripped


def _is_retryable(exc: Exception) -> bool:
    if isinstance(exc, AITransportError):
        return True
    if isinstance(exc, AICallError):
        return exc.status_code == 429 or exc.status_code >= 500
    return False


class AICaller:
    """Issues chat completions against the configured models.

    With ``max_retries=0`` (the default) a failed call is final. Higher
    values retry transport errors, 429 and 5xx with exponential backoff.
    """

    def __init__(
        self,
        manager: ModelManager,
        dispatcher: ProviderDispatcher,
        *,
        max_retries: int = AI_MAX_RETRIES,
        retry_delay: float = AI_RETRY_DELAY,
    ) -> None:
        self._manager = manager
        self._dispatcher = dispatcher
        self._max_retries = max(0, max_retries)
        self._retry_delay = retry_delay

    def call_ai(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = DEFAULT_TEMPERATURE,
        model_name: Optional[str] = None,
    ) -> str:
        """Return the raw text of the first choice."""
        final_model = model_name or self._manager.get_default_model()
        logger.info("Using model: %s", final_model)

        if self._manager.get_model_info(final_model) is None:
            raise ModelConfigNotFound(final_model)

        client = self._dispatcher.get_completions_client(final_model)
        logger.debug(
            "Call params: model=%s system_prompt_len=%d "
            "user_prompt_len=%d temperature=%s",
            final_model,
            len(system_prompt),
            len(user_prompt),
            temperature,
        )

        attempt = 0
        while True:
            try:
                text = client.chat(system_prompt, user_prompt, temperature)
                break
            except (AICallError, AITransportError) as exc:
                if attempt >= self._max_retries or not _is_retryable(exc):
                    logger.error("AI call failed: %s", exc)
                    raise
                delay = self._retry_delay * (2**attempt)
                attempt += 1
                logger.warning(
                    "AI call failed (%s), retry %d/%d in %.1fs",
                    exc,
                    attempt,
                    self._max_retries,
                    delay,
                )
                time.sleep(delay)

        logger.info("AI call succeeded")
        return text

    def call_ai_for_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = DEFAULT_TEMPERATURE,
        model_name: Optional[str] = None,
    ) -> Any:
        """Like :meth:`call_ai`, then parse the unfenced text as JSON."""
        raw = self.call_ai(
            system_prompt,
            user_prompt,
            temperature=temperature,
            model_name=model_name,
        )
        try:
            return json.loads(strip_code_fence(raw))
        except json.JSONDecodeError as exc:
            logger.error("JSON parse failed: %s", exc)
            logger.error("Raw response: %s", raw)
            raise ResponseParseError(raw, str(exc)) from exc
