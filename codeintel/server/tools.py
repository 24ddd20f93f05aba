# -*- coding: utf-8 -*-
"""Tool handlers: validate the argument, run the service, wrap the result.

Every handler returns an MCP-style payload
``{"content": [{"type": "text", "text": ...}], "isError"?: True}`` and
never lets an exception escape.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from ..service import CodeIntelService

logger = logging.getLogger(__name__)

ToolResult = Dict[str, Any]


def text_result(text: str, *, is_error: bool = False) -> ToolResult:
    result: ToolResult = {"content": [{"type": "text", "text": text}]}
    if is_error:
        result["isError"] = True
    return result


def error_result(exc: BaseException) -> ToolResult:
    return text_result(f"Error: {exc}", is_error=True)


def _dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def _require_str(args: Optional[Mapping[str, Any]], key: str) -> str:
    value = (args or {}).get(key)
    if not value or not isinstance(value, str):
        raise ValueError(f"Invalid argument: {key}")
    return value


def suggest_components_tool(
    service: CodeIntelService,
    args: Optional[Mapping[str, Any]],
) -> ToolResult:
    try:
        prompt = _require_str(args, "prompt")
        logger.info("suggest_components: %s", prompt)
        redesigned = service.prompt_redesigner.redesign(prompt)
        logger.info(
            "Analysis done, %d suggested components",
            len(redesigned.result.suggested_components),
        )
        return text_result(_dumps(redesigned.to_wire()))
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Component suggestion failed")
        return error_result(exc)


def query_component_tool(
    service: CodeIntelService,
    args: Optional[Mapping[str, Any]],
) -> ToolResult:
    try:
        name = _require_str(args, "componentName")
        logger.info("query_component: %s", name)
        component = service.components.get_by_name(name)
        if component is None:
            return text_result(f"Component not found: {name}")
        return text_result(_dumps(component.to_wire()))
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Component query failed")
        return error_result(exc)


def suggest_utilities_tool(
    service: CodeIntelService,
    args: Optional[Mapping[str, Any]],
) -> ToolResult:
    try:
        prompt = _require_str(args, "prompt")
        logger.info("suggest_utilities: %s", prompt)
        redesigned = service.logic_redesigner.redesign(prompt)
        logger.info(
            "Analysis done, %d suggested utilities",
            len(redesigned.result.suggested_utilities),
        )
        return text_result(_dumps(redesigned.to_wire()))
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Utility suggestion failed")
        return error_result(exc)


def query_utility_tool(
    service: CodeIntelService,
    args: Optional[Mapping[str, Any]],
) -> ToolResult:
    try:
        name = _require_str(args, "utilityName")
        logger.info("query_utility: %s", name)
        utility = service.utilities.get_by_name(name)
        if utility is None:
            logger.warning("Utility not found: %s", name)
            return text_result(f"Utility not found: {name}")
        return text_result(_dumps(utility.to_wire()))
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Utility query failed")
        return error_result(exc)


TOOL_HANDLERS = {
    "suggest_components": suggest_components_tool,
    "query_component": query_component_tool,
    "suggest_utilities": suggest_utilities_tool,
    "query_utility": query_utility_tool,
}
