# -*- coding: utf-8 -*-
"""Build a chat client for a configured provider/model pair."""

from __future__ import annotations

import logging
from typing import Optional, Union

import httpx

from ..constant import AI_TIMEOUT, OLLAMA_PLACEHOLDER_API_KEY
from ..exceptions import ModelNotFound, UnsupportedProvider
from .clients import AnthropicClient, ChatClient, OpenAICompatibleClient
from .models import ModelConfig, ProviderId, ProvidersDocument
from .store import ConfigStore

logger = logging.getLogger(__name__)


def as_provider_id(provider: Union[ProviderId, str]) -> ProviderId:
    """Coerce a provider identifier, rejecting unknown values."""
    if isinstance(provider, ProviderId):
        return provider
    try:
        return ProviderId((provider or "").lower().strip())
    except ValueError as exc:
        raise UnsupportedProvider(str(provider)) from exc


def is_anthropic_proxy(base_url: str, document: ProvidersDocument) -> bool:
    """True when *base_url* points at a third-party Anthropic proxy.

    A URL is a proxy when it contains a configured proxy host, or does
    not contain the official Anthropic host at all.
    """
    if not base_url:
        return False
    if any(host in base_url for host in document.anthropic_proxy_hosts):
        return True
    return document.anthropic_official_host not in base_url


class ProviderDispatcher:
    """Turns provider + model into a ready :class:`ChatClient`."""

    def __init__(
        self,
        store: ConfigStore,
        *,
        timeout: float = AI_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._store = store
        self._timeout = timeout
        self._transport = transport

    def _openai(self, config: ModelConfig, api_key: str) -> ChatClient:
        return OpenAICompatibleClient(
            config.base_url,
            api_key,
            config.model,
            timeout=self._timeout,
            transport=self._transport,
        )

    def get_client(
        self,
        provider: Union[ProviderId, str],
        model_name: str,
    ) -> ChatClient:
        provider_id = as_provider_id(provider)
        config = self._store.find_model_config(provider_id, model_name)

        logger.info(
            "Creating %s client for model: %s",
            provider_id.value,
            model_name,
        )
        logger.debug("Using baseURL: %s", config.base_url)

        if provider_id in (ProviderId.OPENAI, ProviderId.DEEPSEEK):
            return self._openai(config, config.api_key)

        if provider_id is ProviderId.OLLAMA:
            return self._openai(
                config,
                config.api_key or OLLAMA_PLACEHOLDER_API_KEY,
            )

        if provider_id is ProviderId.ANTHROPIC:
            if is_anthropic_proxy(config.base_url, self._store.load()):
                # Raw model name: no vendor prefix is added for proxies.
                logger.info("Using OpenAI-compatible mode for proxy service")
                return self._openai(config, config.api_key)
            logger.info("Using native Anthropic API")
            return AnthropicClient(
                config.base_url,
                config.api_key,
                config.model,
                timeout=self._timeout,
                transport=self._transport,
            )

        raise UnsupportedProvider(provider_id.value)

    def get_client_by_model_name(self, model_name: str) -> ChatClient:
        """Build the client for the first provider listing *model_name*."""
        found = self._store.load().find_model(model_name)
        if found is None:
            raise ModelNotFound(model_name)
        provider, _ = found
        logger.info(
            "Found model %s in provider %s",
            model_name,
            provider.provider,
        )
        return self.get_client(provider.provider, model_name)

    def get_completions_client(self, model_name: str) -> ChatClient:
        """Chat Completions client for *model_name*, whatever its provider.

        Plain AI calls always speak ``<baseURL>/chat/completions`` with a
        bearer token; only :meth:`get_client` picks a native wire format.
        """
        found = self._store.load().find_model(model_name)
        if found is None:
            raise ModelNotFound(model_name)
        provider, config = found
        provider_id = as_provider_id(provider.provider)
        api_key = config.api_key
        if provider_id is ProviderId.OLLAMA:
            api_key = api_key or OLLAMA_PLACEHOLDER_API_KEY
        logger.debug("Using baseURL: %s", config.base_url)
        return self._openai(config, api_key)
