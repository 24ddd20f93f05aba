# -*- coding: utf-8 -*-
"""Readable resources: the component catalog and a usage guide."""

from __future__ import annotations

import json
from typing import Callable, Dict

from ..constant import RESOURCE_SCHEME
from ..exceptions import ResourceNotFound
from ..service import CodeIntelService

COMPONENT_LIBRARY_URI = f"{RESOURCE_SCHEME}://component-library"
USAGE_GUIDE_URI = f"{RESOURCE_SCHEME}://usage-guide"

USAGE_GUIDE = """
# Component suggestion tools: usage guide

## Overview

These tools analyze a UI or logic requirement, pick the best-fitting entries
from the private component and utility libraries, and rewrite the prompt so
it names concrete components, imports and implementation notes.

## Tools

### 1. suggest_components
Recommend private UI components for a UI requirement.

**Input:** `prompt` (string), the UI requirement.

**Returns:** the original prompt, the model's suggestions with reasons and
an optimized prompt, and a redesigned prompt with imports and file paths.

### 2. query_component
Look up one component by exact name.

**Input:** `componentName` (string), e.g. `das-button`.

### 3. suggest_utilities
Recommend reusable utility functions for a logic requirement.

**Input:** `prompt` (string), the logic requirement.

**Returns:** the original prompt, suggestions with reasons, and a redesigned
prompt including params, return values and file paths.

### 4. query_utility
Look up one utility by exact name.

**Input:** `utilityName` (string), e.g. `formatNumber`.

## Workflow

1. The user describes a requirement, e.g. "a user list page with search,
   paging and inline editing".
2. The tool sends the requirement and the catalog summary to the model.
3. The model picks matching entries and rewords the requirement.
4. Suggestions are joined with the full catalog records; unknown names are
   dropped.
5. The IDE assistant uses the redesigned prompt to generate code.

## Tips

1. Describe concrete features and interactions.
2. Chinese and English keywords both work.
3. Split large requirements into smaller ones.
"""


def component_library_resource(service: CodeIntelService) -> str:
    components = service.components.get_all()
    library = {
        "description": "Private component library",
        "totalComponents": len(components),
        "components": [c.to_wire() for c in components],
    }
    return json.dumps(library, ensure_ascii=False, indent=2)


def usage_guide_resource(service: CodeIntelService) -> str:
    return USAGE_GUIDE


RESOURCES: Dict[str, Callable[[CodeIntelService], str]] = {
    COMPONENT_LIBRARY_URI: component_library_resource,
    USAGE_GUIDE_URI: usage_guide_resource,
}


def read_resource(service: CodeIntelService, uri: str) -> str:
    """Return the UTF-8 text of the resource at *uri*."""
    reader = RESOURCES.get(uri)
    if reader is None:
        raise ResourceNotFound(uri)
    return reader(service)
