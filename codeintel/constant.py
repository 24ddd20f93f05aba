# -*- coding: utf-8 -*-
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# Bundled data directory (install-relative fallback for every data file).
PACKAGE_DATA_DIR = PACKAGE_DIR / "data"

# Data directory relative to the current working directory.
CWD_DATA_DIR = "data"

CONFIG_FILE = "config.json"
COMPONENTS_FILE = "components.json"
UTILS_FILE = "utils.json"

# ---------------------------------------------------------------------------
# Environment variable names, highest priority first within each group.
# Each direct-file variable has a legacy alias; the data-dir variable
# supplies all three files by convention.
# ---------------------------------------------------------------------------
DATA_DIR_ENV = "CODEINTEL_DATA_DIR"
LEGACY_DATA_DIR_ENV = "GAREN_MCP_DATA_DIR"

CONFIG_ENV = "CODEINTEL_CONFIG"
LEGACY_CONFIG_ENV = "GAREN_MCP_CONFIG"
GENERIC_CONFIG_ENV = "CONFIG_PATH"

COMPONENTS_ENV = "CODEINTEL_COMPONENTS"
LEGACY_COMPONENTS_ENV = "GAREN_MCP_COMPONENTS"

UTILS_ENV = "CODEINTEL_UTILS"
LEGACY_UTILS_ENV = "GAREN_MCP_UTILS"

# Env key for app log level (used by CLI and server startup).
LOG_LEVEL_ENV = "CODEINTEL_LOG_LEVEL"

# Outbound AI call hardening. Zero retries keeps a failed call final.
AI_TIMEOUT = float(os.environ.get("CODEINTEL_AI_TIMEOUT", "60"))
AI_MAX_RETRIES = int(os.environ.get("CODEINTEL_AI_MAX_RETRIES", "0"))
AI_RETRY_DELAY = float(os.environ.get("CODEINTEL_AI_RETRY_DELAY", "1.0"))

DEFAULT_TEMPERATURE = 0.7

# Placeholder key sent to Ollama endpoints that need no authentication.
OLLAMA_PLACEHOLDER_API_KEY = "ollama"

ANTHROPIC_OFFICIAL_HOST = "api.anthropic.com"
ANTHROPIC_PROXY_HOSTS = ("302.ai", "openrouter.ai")
ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_MAX_TOKENS = 4096

SERVER_NAME = "code-intelligence-service"
SERVER_VERSION = "1.0.0"
RESOURCE_SCHEME = "code-intelligence"
