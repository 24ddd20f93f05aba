# -*- coding: utf-8 -*-
"""Pydantic data models for providers, models and the config document."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constant import ANTHROPIC_OFFICIAL_HOST, ANTHROPIC_PROXY_HOSTS


class ProviderId(str, Enum):
    """Upstream AI vendors with a chat-completion endpoint."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    DEEPSEEK = "deepseek"
    OLLAMA = "ollama"


class ModelPurpose(str, Enum):
    """Semantic task tag used to pick a best-fit model."""

    ANALYSIS = "ANALYSIS"
    DESIGN = "DESIGN"
    QUERY = "QUERY"
    INTEGRATION = "INTEGRATION"


# Purpose assumed for models that have no explicit ``modelPurposes`` entry.
DEFAULT_MODEL_PURPOSE = ModelPurpose.DESIGN


class _AliasedModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        protected_namespaces=(),
    )


class ModelConfig(_AliasedModel):
    """A single model entry with its endpoint and credentials."""

    model: str = Field(..., description="Model identifier used in API calls")
    title: str = Field(default="", description="Human-readable model name")
    base_url: str = Field(
        default="",
        alias="baseURL",
        description="API base URL",
    )
    api_key: str = Field(
        default="",
        alias="apiKey",
        repr=False,
        description="API key",
    )


class ProviderConfig(_AliasedModel):
    """One provider and the ordered list of models it serves."""

    provider: str
    models: List[ModelConfig] = Field(default_factory=list)

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, value: str) -> str:
        return value.strip().lower()

    def find_model(self, model_name: str) -> Optional[ModelConfig]:
        for model in self.models:
            if model.model == model_name:
                return model
        return None


class ProvidersDocument(_AliasedModel):
    """Top-level structure of config.json."""

    providers: List[ProviderConfig] = Field(default_factory=list)
    default_model: Optional[str] = Field(default=None, alias="defaultModel")
    default_models: Dict[str, str] = Field(
        default_factory=dict,
        alias="defaultModels",
        description="Preferred model per purpose",
    )
    model_purposes: Dict[str, List[str]] = Field(
        default_factory=dict,
        alias="modelPurposes",
        description="Purposes served by each model",
    )
    anthropic_proxy_hosts: List[str] = Field(
        default_factory=lambda: list(ANTHROPIC_PROXY_HOSTS),
        alias="anthropicProxyHosts",
        description="Base-URL substrings that mark an Anthropic proxy",
    )
    anthropic_official_host: str = Field(
        default=ANTHROPIC_OFFICIAL_HOST,
        alias="anthropicOfficialHost",
    )

    def get_provider(self, provider: str) -> Optional[ProviderConfig]:
        for entry in self.providers:
            if entry.provider == provider:
                return entry
        return None

    def find_model(
        self,
        model_name: str,
    ) -> Optional[tuple[ProviderConfig, ModelConfig]]:
        """First provider/model pair whose model name matches."""
        for entry in self.providers:
            model = entry.find_model(model_name)
            if model is not None:
                return entry, model
        return None

    def has_model(self, model_name: Optional[str]) -> bool:
        return bool(model_name) and self.find_model(model_name) is not None

    def first_model(self) -> Optional[ModelConfig]:
        for entry in self.providers:
            if entry.models:
                return entry.models[0]
        return None


class AvailableModel(_AliasedModel):
    """Model listing entry returned by the model manager."""

    model: str
    title: str
    provider: str
    purposes: List[str]


class ProviderSummary(_AliasedModel):
    name: str
    model_count: int = Field(alias="modelCount")
    models: List[str]


class ConfigSummary(_AliasedModel):
    """Aggregate counts of the loaded configuration."""

    total_providers: int = Field(alias="totalProviders")
    total_models: int = Field(alias="totalModels")
    providers: List[ProviderSummary]


class ConfigValidationResult(_AliasedModel):
    """Outcome of checking the loaded configuration for problems."""

    is_valid: bool = Field(alias="isValid")
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    available_models: List[str] = Field(
        default_factory=list,
        alias="availableModels",
    )
    providers: List[str] = Field(default_factory=list)
