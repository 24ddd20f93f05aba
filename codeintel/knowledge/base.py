# -*- coding: utf-8 -*-
"""Name-keyed, load-once catalogs of components and utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from ..constant import (
    COMPONENTS_ENV,
    COMPONENTS_FILE,
    DATA_DIR_ENV,
    LEGACY_COMPONENTS_ENV,
    LEGACY_DATA_DIR_ENV,
    LEGACY_UTILS_ENV,
    PACKAGE_DATA_DIR,
    UTILS_ENV,
    UTILS_FILE,
)
from ..exceptions import DataFileNotFound
from ..utils.paths import (
    data_file_candidates,
    default_fallbacks,
    resolve_config_path,
)
from .models import ComponentInfo, EntrySummary, UtilityInfo

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound=ComponentInfo)


class KnowledgeBase(Generic[EntryT]):
    """In-memory catalog built once from a JSON object keyed by name.

    A missing or unreadable data file is logged and leaves the catalog
    empty; lookups then simply find nothing.
    """

    entry_model: Type[EntryT]
    label = "entries"
    filename = ""
    file_env = ""
    legacy_file_env = ""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._entries: Dict[str, EntryT] = {}
        self.path: Optional[str] = None
        self._load(path)

    def _resolve(self) -> str:
        path = resolve_config_path(
            data_file_candidates(
                self.file_env,
                self.legacy_file_env,
                self.filename,
                DATA_DIR_ENV,
                LEGACY_DATA_DIR_ENV,
            ),
            default_fallbacks(self.filename, PACKAGE_DATA_DIR),
            logger.debug,
        )
        if path is None:
            raise DataFileNotFound(self.filename)
        return path

    def _load(self, path: Optional[Union[str, Path]]) -> None:
        try:
            resolved = str(path) if path is not None else self._resolve()
            with open(resolved, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object keyed by name")
            entries = {
                name: self.entry_model.model_validate({**info, "name": name})
                for name, info in raw.items()
            }
        except (
            DataFileNotFound,
            OSError,
            ValueError,
            TypeError,
            ValidationError,
        ):
            logger.error("Failed to load %s data", self.label, exc_info=True)
            return

        self._entries = entries
        self.path = resolved
        logger.info(
            "Loaded %d %s into knowledge base",
            len(self._entries),
            self.label,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def get_all(self) -> List[EntryT]:
        return list(self._entries.values())

    def get_by_name(self, name: str) -> Optional[EntryT]:
        return self._entries.get(name)

    def get_summary(self) -> List[EntrySummary]:
        """Name/description pairs; imports and paths stay local."""
        return [
            EntrySummary(name=name, description=entry.description)
            for name, entry in self._entries.items()
        ]


class ComponentKnowledgeBase(KnowledgeBase[ComponentInfo]):
    entry_model = ComponentInfo
    label = "components"
    filename = COMPONENTS_FILE
    file_env = COMPONENTS_ENV
    legacy_file_env = LEGACY_COMPONENTS_ENV


class UtilityKnowledgeBase(KnowledgeBase[UtilityInfo]):
    entry_model = UtilityInfo
    label = "utilities"
    filename = UTILS_FILE
    file_env = UTILS_ENV
    legacy_file_env = LEGACY_UTILS_ENV
