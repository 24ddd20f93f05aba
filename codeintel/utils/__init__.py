# -*- coding: utf-8 -*-
"""Path resolution and logging helpers."""

from .logging import setup_logger
from .paths import (
    EnvCandidate,
    expand_path,
    resolve_config_path,
)

__all__ = [
    "EnvCandidate",
    "expand_path",
    "resolve_config_path",
    "setup_logger",
]
