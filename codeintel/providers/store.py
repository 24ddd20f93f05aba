# -*- coding: utf-8 -*-
"""Locating, reading and caching the provider configuration (config.json)."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from ..constant import (
    CONFIG_ENV,
    CONFIG_FILE,
    DATA_DIR_ENV,
    GENERIC_CONFIG_ENV,
    LEGACY_CONFIG_ENV,
    LEGACY_DATA_DIR_ENV,
    PACKAGE_DATA_DIR,
)
from ..exceptions import (
    ConfigNotFound,
    ConfigParseError,
    ModelNotFound,
    ProviderNotFound,
)
from ..utils.paths import (
    EnvCandidate,
    EnvSpec,
    default_fallbacks,
    expand_path,
    resolve_config_path,
)
from .models import ModelConfig, ProvidersDocument

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Candidate paths
# ---------------------------------------------------------------------------


def config_env_candidates() -> List[EnvSpec]:
    """Env-var candidates for config.json, highest priority first."""
    return [
        CONFIG_ENV,
        EnvCandidate(DATA_DIR_ENV, CONFIG_FILE),
        LEGACY_CONFIG_ENV,
        EnvCandidate(LEGACY_DATA_DIR_ENV, CONFIG_FILE),
        GENERIC_CONFIG_ENV,
    ]


def config_fallback_paths() -> List[str]:
    """Cwd-relative then install-relative config.json locations."""
    return default_fallbacks(CONFIG_FILE, PACKAGE_DATA_DIR)


def describe_candidates() -> List[str]:
    """Human-readable list of every location that would be tried."""
    described: List[str] = []
    for spec in config_env_candidates():
        if isinstance(spec, EnvCandidate):
            value = os.environ.get(spec.name)
            if value:
                described.append(
                    os.path.join(expand_path(value), spec.filename),
                )
        elif os.environ.get(spec):
            described.append(expand_path(os.environ[spec]))
    described.extend(config_fallback_paths())
    return described


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_providers_json(path: Union[str, Path]) -> ProvidersDocument:
    """Read and validate one config file. Never touches any cache."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(str(path), f"invalid JSON: {exc}") from exc
    except OSError as exc:
        raise ConfigParseError(str(path), str(exc)) from exc

    if not isinstance(raw, dict) or not isinstance(
        raw.get("providers"),
        list,
    ):
        raise ConfigParseError(
            str(path),
            'expected an object with a "providers" list',
        )
    try:
        return ProvidersDocument.model_validate(raw)
    except ValidationError as exc:
        raise ConfigParseError(str(path), str(exc)) from exc


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class ConfigStore:
    """Owns the process-wide provider configuration.

    The first successful :meth:`load` is cached. A forced reload parses
    into a local value and swaps the cached reference only on success,
    so readers never see a half-read document and a failed reload keeps
    the previous one.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._explicit_path = str(path) if path is not None else None
        self._document: Optional[ProvidersDocument] = None
        self._config_path: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def config_path(self) -> Optional[str]:
        """Path of the file backing the cached document, if loaded."""
        return self._config_path

    def resolve_path(self) -> str:
        if self._explicit_path is not None:
            candidate = expand_path(self._explicit_path)
            if os.path.isfile(candidate):
                return candidate
            raise ConfigNotFound([candidate])

        path = resolve_config_path(
            config_env_candidates(),
            config_fallback_paths(),
            logger.debug,
        )
        if path is None:
            raise ConfigNotFound(describe_candidates())
        return path

    def load(self, force_reload: bool = False) -> ProvidersDocument:
        """Return the cached document, reading it on first use."""
        document = self._document
        if document is not None and not force_reload:
            return document

        try:
            path = self.resolve_path()
            document = parse_providers_json(path)
        except (ConfigNotFound, ConfigParseError):
            logger.error("Error loading AI providers config", exc_info=True)
            raise

        with self._lock:
            self._document = document
            self._config_path = path
        logger.info(
            "Loaded %d providers from %s",
            len(document.providers),
            path,
        )
        return document

    def reload(self) -> ProvidersDocument:
        return self.load(force_reload=True)

    def find_model_config(self, provider: str, model_name: str) -> ModelConfig:
        """Return the model entry listed under *provider*."""
        document = self.load()
        provider_config = document.get_provider(provider)
        if provider_config is None:
            raise ProviderNotFound(getattr(provider, "value", provider))
        model = provider_config.find_model(model_name)
        if model is None:
            raise ModelNotFound(
                model_name,
                getattr(provider, "value", provider),
            )
        return model


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
