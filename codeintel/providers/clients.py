# -*- coding: utf-8 -*-
"""HTTP chat clients sharing one ``chat(system, user, temperature)`` shape.

Two wire formats are covered:

- OpenAI Chat Completions (OpenAI, DeepSeek, Ollama and Anthropic proxies)
- Anthropic Messages (the official Anthropic endpoint)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..constant import (
    AI_TIMEOUT,
    ANTHROPIC_API_VERSION,
    ANTHROPIC_MAX_TOKENS,
)
from ..exceptions import AICallError, AITransportError

logger = logging.getLogger(__name__)


class ChatClient:
    """Base for a single-model chat client."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        *,
        timeout: float = AI_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(model={self.model!r}, "
            f"base_url={self.base_url!r})"
        )

    def _post(
        self,
        url: str,
        headers: Dict[str, str],
        payload: Dict[str, Any],
    ) -> Dict[str, Any]:
        try:
            with httpx.Client(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            raise AITransportError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            body = response.text
            logger.error(
                "API call to %s failed: %s %s",
                url,
                response.status_code,
                body,
            )
            raise AICallError(response.status_code, body)
        try:
            return response.json()
        except ValueError as exc:
            raise AICallError(response.status_code, response.text) from exc

    def chat(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str:
        raise NotImplementedError


class OpenAICompatibleClient(ChatClient):
    """POSTs to ``<base_url>/chat/completions`` with a bearer token."""

    def chat(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str:
        data = self._post(
            f"{self.base_url}/chat/completions",
            {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            {
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                "temperature": temperature,
            },
        )
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AICallError(
                200,
                f"Unexpected response shape: {data}",
            ) from exc
        # Refusals and tool calls come back with null content.
        if not isinstance(content, str):
            raise AICallError(200, f"Response has no text content: {data}")
        return content


class AnthropicClient(ChatClient):
    """Native Anthropic Messages API client."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        *,
        max_tokens: int = ANTHROPIC_MAX_TOKENS,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, api_key, model, **kwargs)
        self.max_tokens = max_tokens

    @property
    def messages_url(self) -> str:
        if self.base_url.endswith("/v1"):
            return f"{self.base_url}/messages"
        return f"{self.base_url}/v1/messages"

    def chat(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str:
        data = self._post(
            self.messages_url,
            {
                "Content-Type": "application/json",
                "x-api-key": self.api_key,
                "anthropic-version": ANTHROPIC_API_VERSION,
            },
            {
                "model": self.model,
                "system": system_prompt,
                "messages": [{"role": "user", "content": user_prompt}],
                "max_tokens": self.max_tokens,
                "temperature": temperature,
            },
        )
        blocks = data.get("content") if isinstance(data, dict) else None
        if not isinstance(blocks, list):
            raise AICallError(200, f"Unexpected response shape: {data}")
        return "".join(
            block.get("text", "")
            for block in blocks
            if isinstance(block, dict) and block.get("type") == "text"
        )
