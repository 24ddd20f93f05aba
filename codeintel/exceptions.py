# -*- coding: utf-8 -*-
"""Error taxonomy shared by configuration, dispatch and AI invocation."""

from __future__ import annotations

from typing import Optional, Sequence


class CodeIntelError(RuntimeError):
    """Base error for every failure raised by codeintel."""


class ConfigNotFound(CodeIntelError):
    """No candidate path for the model configuration exists."""

    def __init__(self, candidates: Sequence[str] = ()) -> None:
        self.candidates = list(candidates)
        tried = ", ".join(self.candidates) or "(none)"
        super().__init__(
            "Could not find config.json in any of the expected "
            f"locations: {tried}",
        )


class DataFileNotFound(CodeIntelError):
    """No candidate path for a knowledge-base data file exists."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Data file not found: {filename}")


class ConfigParseError(CodeIntelError):
    """Configuration file is not valid JSON or has the wrong shape."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse config {path}: {reason}")


class ProviderNotFound(CodeIntelError):
    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f'Provider "{provider}" not found')


class ModelNotFound(CodeIntelError):
    def __init__(self, model: str, provider: Optional[str] = None) -> None:
        self.model = model
        self.provider = provider
        if provider:
            msg = f'Model "{model}" not found for provider "{provider}"'
        else:
            msg = f'Model "{model}" not found in any provider'
        super().__init__(msg)


class ModelConfigNotFound(CodeIntelError):
    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"Model config not found: {model}")


class NoModelsConfigured(CodeIntelError):
    def __init__(self) -> None:
        super().__init__("No AI models configured")


class UnsupportedProvider(CodeIntelError):
    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported AI provider: {provider}")


class AICallError(CodeIntelError):
    """Provider endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"AI call failed: {status_code} - {body}")


class AITransportError(CodeIntelError):
    """Request to the provider endpoint failed before a response arrived."""


class ResponseParseError(CodeIntelError):
    """Model output was not valid JSON after code-fence stripping."""

    def __init__(self, raw_text: str, reason: str) -> None:
        self.raw_text = raw_text
        self.reason = reason
        super().__init__(f"Failed to parse AI response as JSON: {reason}")


class ResourceNotFound(CodeIntelError):
    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")
