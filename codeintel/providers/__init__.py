# -*- coding: utf-8 -*-
"""Provider management: config store, model selection, dispatch, calls."""

from .caller import AICaller, strip_code_fence
from .clients import AnthropicClient, ChatClient, OpenAICompatibleClient
from .dispatcher import ProviderDispatcher, as_provider_id, is_anthropic_proxy
from .manager import ModelManager
from .models import (
    DEFAULT_MODEL_PURPOSE,
    AvailableModel,
    ConfigSummary,
    ConfigValidationResult,
    ModelConfig,
    ModelPurpose,
    ProviderConfig,
    ProviderId,
    ProvidersDocument,
)
from .store import ConfigStore, mask_api_key, parse_providers_json

__all__ = [
    # models
    "AvailableModel",
    "ConfigSummary",
    "ConfigValidationResult",
    "DEFAULT_MODEL_PURPOSE",
    "ModelConfig",
    "ModelPurpose",
    "ProviderConfig",
    "ProviderId",
    "ProvidersDocument",
    # store
    "ConfigStore",
    "mask_api_key",
    "parse_providers_json",
    # selection
    "ModelManager",
    # dispatch
    "AnthropicClient",
    "ChatClient",
    "OpenAICompatibleClient",
    "ProviderDispatcher",
    "as_provider_id",
    "is_anthropic_proxy",
    # invocation
    "AICaller",
    "strip_code_fence",
]
