from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from codeintel import constant

ENV_VARS = (
    constant.CONFIG_ENV,
    constant.LEGACY_CONFIG_ENV,
    constant.GENERIC_CONFIG_ENV,
    constant.DATA_DIR_ENV,
    constant.LEGACY_DATA_DIR_ENV,
    constant.COMPONENTS_ENV,
    constant.LEGACY_COMPONENTS_ENV,
    constant.UTILS_ENV,
    constant.LEGACY_UTILS_ENV,
)

OPENAI_CONFIG: dict[str, Any] = {
    "providers": [
        {
            "provider": "openai",
            "models": [
                {
                    "model": "gpt-4o",
                    "title": "GPT-4o",
                    "baseURL": "https://api.openai.com/v1",
                    "apiKey": "k",
                },
            ],
        },
    ],
}

COMPONENTS: dict[str, Any] = {
    "Button": {
        "description": "d",
        "import": "import Button",
        "relativePath": "./Button.vue",
    },
    "Table": {
        "description": "Data table with paging",
        "import": "import Table",
        "relativePath": "./Table.vue",
    },
}

UTILITIES: dict[str, Any] = {
    "formatNumber": {
        "description": "Format a number with thousands separators",
        "import": "import { formatNumber } from '@/utils'",
        "relativePath": "./utils/number.ts",
        "params": "value: number",
        "returns": "string",
        "type": "function",
    },
    "isIp": {
        "description": "Validate an IPv4 address",
        "import": "import { isIp } from '@/utils'",
        "relativePath": "./utils/ip.ts",
    },
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear lookup env vars and run each test from an empty directory."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_json) -> Path:
    return write_json("config.json", OPENAI_CONFIG)


@pytest.fixture
def components_file(write_json) -> Path:
    return write_json("components.json", COMPONENTS)


@pytest.fixture
def utils_file(write_json) -> Path:
    return write_json("utils.json", UTILITIES)


def completion(content: str) -> dict[str, Any]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def reply_with() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with a chat completion."""

    def _make(content: str = "", status: int = 200, body: Any = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if status != 200:
                return httpx.Response(status, text=body or "")
            return httpx.Response(200, json=body or completion(content))

        return RecordingTransport(handler)

    return _make
