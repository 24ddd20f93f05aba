# -*- coding: utf-8 -*-
"""LLM-backed component and utility suggestions served over MCP."""

from .exceptions import CodeIntelError
from .service import CodeIntelService

__version__ = "1.0.0"

__all__ = ["CodeIntelError", "CodeIntelService", "__version__"]
