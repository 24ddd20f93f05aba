from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from codeintel import CodeIntelService
from codeintel.exceptions import ResourceNotFound
from codeintel.server.resources import (
    COMPONENT_LIBRARY_URI,
    USAGE_GUIDE,
    USAGE_GUIDE_URI,
    read_resource,
)
from codeintel.server.tools import (
    TOOL_HANDLERS,
    query_component_tool,
    query_utility_tool,
    suggest_components_tool,
    suggest_utilities_tool,
)


def _text(result: dict) -> str:
    (item,) = result["content"]
    assert item["type"] == "text"
    return item["text"]


@pytest.fixture
def service(
    config_file: Path,
    components_file: Path,
    utils_file: Path,
    reply_with,
) -> CodeIntelService:
    reply = {
        "suggestedComponents": [{"componentName": "Button", "reason": "r"}],
        "suggestedUtilities": [{"utilityName": "isIp", "reason": "r"}],
        "optimizedPrompt": "better",
    }
    return CodeIntelService(
        config_path=config_file,
        components_path=components_file,
        utils_path=utils_file,
        transport=reply_with(json.dumps(reply)),
    )


def test_query_component(service: CodeIntelService) -> None:
    result = query_component_tool(service, {"componentName": "Button"})

    assert "isError" not in result
    assert json.loads(_text(result))["relativePath"] == "./Button.vue"


def test_query_component_not_found_is_not_an_error(
    service: CodeIntelService,
) -> None:
    result = query_component_tool(service, {"componentName": "Missing"})

    assert "isError" not in result
    assert _text(result) == "Component not found: Missing"


def test_query_utility(service: CodeIntelService) -> None:
    found = query_utility_tool(service, {"utilityName": "formatNumber"})
    assert json.loads(_text(found))["returns"] == "string"

    missing = query_utility_tool(service, {"utilityName": "nope"})
    assert _text(missing) == "Utility not found: nope"


@pytest.mark.parametrize("args", [None, {}, {"prompt": ""}, {"prompt": 3}])
def test_invalid_arguments(service: CodeIntelService, args) -> None:
    result = suggest_components_tool(service, args)

    assert result["isError"] is True
    assert _text(result) == "Error: Invalid argument: prompt"


def test_suggest_components(service: CodeIntelService) -> None:
    payload = json.loads(_text(suggest_components_tool(service, {"prompt": "p"})))

    assert payload["originalPrompt"] == "p"
    assert payload["result"]["optimizedPrompt"] == "better"
    assert "### 1. Button" in payload["redesignedPrompt"]


def test_suggest_utilities(service: CodeIntelService) -> None:
    payload = json.loads(_text(suggest_utilities_tool(service, {"prompt": "p"})))

    assert payload["result"]["suggestedUtilities"][0]["utilityName"] == "isIp"
    assert "### 1. isIp" in payload["redesignedPrompt"]


def test_failure_becomes_error_result(
    config_file: Path,
    components_file: Path,
    reply_with,
) -> None:
    service = CodeIntelService(
        config_path=config_file,
        components_path=components_file,
        transport=reply_with(status=500, body="rate limited"),
    )

    result = suggest_components_tool(service, {"prompt": "p"})

    assert result["isError"] is True
    assert _text(result).startswith("Error: AI call failed: 500")
    assert "rate limited" in _text(result)


def test_missing_config_becomes_error_result(components_file: Path) -> None:
    service = CodeIntelService(components_path=components_file)

    result = suggest_components_tool(service, {"prompt": "p"})

    assert result["isError"] is True
    assert "config.json" in _text(result)


def test_tool_registry() -> None:
    assert set(TOOL_HANDLERS) == {
        "suggest_components",
        "query_component",
        "suggest_utilities",
        "query_utility",
    }


def test_component_library_resource(service: CodeIntelService) -> None:
    library = json.loads(read_resource(service, COMPONENT_LIBRARY_URI))

    assert library["totalComponents"] == 2
    assert [c["name"] for c in library["components"]] == ["Button", "Table"]
    assert library["components"][0]["import"] == "import Button"


def test_usage_guide_resource(service: CodeIntelService) -> None:
    assert read_resource(service, USAGE_GUIDE_URI) == USAGE_GUIDE


def test_unknown_resource(service: CodeIntelService) -> None:
    with pytest.raises(ResourceNotFound):
        read_resource(service, "code-intelligence://nothing")


def test_server_registers_tools_and_resources(
    service: CodeIntelService,
) -> None:
    from codeintel.server import create_server

    server = create_server(service)

    tools = asyncio.run(server.list_tools())
    assert {t.name for t in tools} == set(TOOL_HANDLERS)
    query = next(t for t in tools if t.name == "query_component")
    assert "componentName" in query.inputSchema["properties"]

    resources = asyncio.run(server.list_resources())
    assert {str(r.uri).rstrip("/") for r in resources} == {
        COMPONENT_LIBRARY_URI,
        USAGE_GUIDE_URI,
    }
