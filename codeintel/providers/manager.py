# -*- coding: utf-8 -*-
"""Model selection on top of the loaded provider configuration."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from ..exceptions import NoModelsConfigured
from .models import (
    DEFAULT_MODEL_PURPOSE,
    AvailableModel,
    ConfigSummary,
    ConfigValidationResult,
    ModelConfig,
    ModelPurpose,
    ProviderId,
    ProviderSummary,
    ProvidersDocument,
)
from .store import ConfigStore

logger = logging.getLogger(__name__)


def _purpose_key(purpose: Union[ModelPurpose, str]) -> str:
    return purpose.value if isinstance(purpose, ModelPurpose) else purpose


class ModelManager:
    """Picks models by default, by purpose, or by name."""

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def document(self) -> ProvidersDocument:
        return self._store.load()

    def _first_model_name(self, document: ProvidersDocument) -> str:
        first = document.first_model()
        if first is None:
            raise NoModelsConfigured()
        return first.model

    def get_default_model(self) -> str:
        """Configured default model if it exists, else the first model."""
        document = self.document
        if document.has_model(document.default_model):
            return document.default_model
        if document.default_model:
            logger.warning(
                "Default model %s is not configured; using first model",
                document.default_model,
            )
        return self._first_model_name(document)

    def get_recommended_model(
        self,
        purpose: Union[ModelPurpose, str],
    ) -> str:
        """Best model for *purpose*.

        Order: the purpose's entry in ``defaultModels``, then any model
        whose ``modelPurposes`` list contains the purpose, then the first
        configured model. Only models that exist are ever returned.
        """
        document = self.document
        key = _purpose_key(purpose)

        preferred = document.default_models.get(key)
        if document.has_model(preferred):
            logger.debug("Model for %s from defaultModels: %s", key, preferred)
            return preferred

        for model_name, purposes in document.model_purposes.items():
            if key in purposes and document.has_model(model_name):
                logger.debug(
                    "Model for %s from modelPurposes: %s",
                    key,
                    model_name,
                )
                return model_name

        return self._first_model_name(document)

    def validate_model(self, model_name: str) -> bool:
        return self.document.has_model(model_name)

    def get_model_info(self, model_name: str) -> Optional[ModelConfig]:
        found = self.document.find_model(model_name)
        return found[1] if found else None

    def get_provider_by_model(self, model_name: str) -> Optional[str]:
        found = self.document.find_model(model_name)
        return found[0].provider if found else None

    def get_available_models(self) -> List[AvailableModel]:
        """Every configured model with its provider and purposes.

        Models without a ``modelPurposes`` entry are listed as serving
        the default purpose only.
        """
        document = self.document
        available: List[AvailableModel] = []
        for provider in document.providers:
            for model in provider.models:
                purposes = document.model_purposes.get(
                    model.model,
                    [DEFAULT_MODEL_PURPOSE.value],
                )
                available.append(
                    AvailableModel(
                        model=model.model,
                        title=model.title,
                        provider=provider.provider,
                        purposes=list(purposes),
                    ),
                )
        return available

    def get_config_summary(self) -> ConfigSummary:
        document = self.document
        providers = [
            ProviderSummary(
                name=p.provider,
                model_count=len(p.models),
                models=[m.model for m in p.models],
            )
            for p in document.providers
        ]
        return ConfigSummary(
            total_providers=len(providers),
            total_models=sum(p.model_count for p in providers),
            providers=providers,
        )

    def validate_config(self) -> ConfigValidationResult:
        """Report problems in the loaded configuration without raising."""
        document = self.document
        errors: List[str] = []
        warnings: List[str] = []
        known = {p.value for p in ProviderId}
        seen: dict[str, str] = {}

        for provider in document.providers:
            if provider.provider not in known:
                errors.append(f"Unsupported provider: {provider.provider}")
            if not provider.models:
                warnings.append(f"Provider {provider.provider} has no models")
            for model in provider.models:
                if model.model in seen:
                    warnings.append(
                        f"Model {model.model} is listed by both "
                        f"{seen[model.model]} and {provider.provider}; "
                        "the first one wins",
                    )
                else:
                    seen[model.model] = provider.provider
                if not model.base_url:
                    errors.append(f"Model {model.model} has no baseURL")
                if (
                    not model.api_key
                    and provider.provider != ProviderId.OLLAMA.value
                ):
                    warnings.append(f"Model {model.model} has no apiKey")

        if not seen:
            errors.append("No AI models configured")
        if document.default_model and document.default_model not in seen:
            warnings.append(
                f"defaultModel {document.default_model} is not configured",
            )
        for purpose, model_name in document.default_models.items():
            if model_name not in seen:
                warnings.append(
                    f"defaultModels.{purpose} -> {model_name} "
                    "is not configured",
                )

        return ConfigValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            available_models=list(seen),
            providers=[p.provider for p in document.providers],
        )
