from __future__ import annotations

from pathlib import Path

import pytest

from codeintel import constant
from codeintel.knowledge import (
    ComponentKnowledgeBase,
    EntrySummary,
    UtilityKnowledgeBase,
)


def test_get_by_name_returns_full_record(components_file: Path) -> None:
    kb = ComponentKnowledgeBase(components_file)

    button = kb.get_by_name("Button")
    assert button is not None
    assert button.to_wire() == {
        "name": "Button",
        "description": "d",
        "import": "import Button",
        "relativePath": "./Button.vue",
    }
    assert kb.get_by_name("Missing") is None
    assert "Table" in kb
    assert len(kb) == 2
    assert kb.path == str(components_file)


def test_get_all_keeps_file_order(components_file: Path) -> None:
    names = [c.name for c in ComponentKnowledgeBase(components_file).get_all()]
    assert names == ["Button", "Table"]


def test_summary_has_only_name_and_description(components_file: Path) -> None:
    summary = ComponentKnowledgeBase(components_file).get_summary()
    assert summary == [
        EntrySummary(name="Button", description="d"),
        EntrySummary(name="Table", description="Data table with paging"),
    ]


def test_utility_optional_fields(utils_file: Path) -> None:
    kb = UtilityKnowledgeBase(utils_file)

    fmt = kb.get_by_name("formatNumber")
    assert fmt.params == "value: number"
    assert fmt.returns == "string"
    assert fmt.type == "function"

    is_ip = kb.get_by_name("isIp")
    assert is_ip.params is None
    assert "params" not in is_ip.to_wire()


def test_missing_file_gives_empty_base(tmp_path: Path) -> None:
    kb = ComponentKnowledgeBase(tmp_path / "absent.json")
    assert len(kb) == 0
    assert kb.get_all() == []
    assert kb.get_by_name("Button") is None
    assert kb.path is None


def test_unresolvable_file_gives_empty_base() -> None:
    kb = UtilityKnowledgeBase()
    assert kb.get_summary() == []


@pytest.mark.parametrize(
    "content",
    [
        "{ broken",
        '["Button"]',
        '{"Button": "just a string"}',
    ],
)
def test_unreadable_file_gives_empty_base(tmp_path: Path, content: str) -> None:
    path = tmp_path / "components.json"
    path.write_text(content)
    assert len(ComponentKnowledgeBase(path)) == 0


def test_resolves_from_env(
    monkeypatch: pytest.MonkeyPatch,
    components_file: Path,
    utils_file: Path,
) -> None:
    monkeypatch.setenv(constant.COMPONENTS_ENV, str(components_file))
    monkeypatch.setenv(constant.LEGACY_UTILS_ENV, str(utils_file))

    assert ComponentKnowledgeBase().path == str(components_file)
    assert UtilityKnowledgeBase().path == str(utils_file)


def test_resolves_from_data_dir(
    monkeypatch: pytest.MonkeyPatch,
    write_json,
) -> None:
    path = write_json("shared/components.json", {"Card": {"description": "c"}})
    monkeypatch.setenv(constant.DATA_DIR_ENV, str(path.parent))

    kb = ComponentKnowledgeBase()
    assert kb.get_by_name("Card").description == "c"


def test_resolves_from_cwd_data(isolated_env: Path) -> None:
    data_dir = isolated_env / "data"
    data_dir.mkdir()
    (data_dir / "utils.json").write_text('{"uuid": {"description": "id"}}')

    assert "uuid" in UtilityKnowledgeBase()
