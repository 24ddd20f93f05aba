from __future__ import annotations

import itertools
from pathlib import Path
from typing import Any, Optional

import pytest

from codeintel.exceptions import NoModelsConfigured
from codeintel.providers import ConfigStore, ModelManager, ModelPurpose


def _model(name: str) -> dict[str, str]:
    return {
        "model": name,
        "title": name.upper(),
        "baseURL": f"https://{name}.example/v1",
        "apiKey": f"key-{name}",
    }


def _document(**extra: Any) -> dict[str, Any]:
    return {
        "providers": [
            {"provider": "ollama", "models": []},
            {"provider": "openai", "models": [_model("gpt-4o"), _model("o3")]},
            {"provider": "deepseek", "models": [_model("deepseek-chat")]},
        ],
        **extra,
    }


def _manager(write_json, data: dict[str, Any]) -> ModelManager:
    return ModelManager(ConfigStore(write_json("config.json", data)))


def test_default_model_is_first_model_without_default(
    write_json,
    config_file: Path,
) -> None:
    assert ModelManager(ConfigStore(config_file)).get_default_model() == "gpt-4o"
    # Providers without models are skipped.
    assert _manager(write_json, _document()).get_default_model() == "gpt-4o"


def test_default_model_honors_configured_default(write_json) -> None:
    manager = _manager(write_json, _document(defaultModel="deepseek-chat"))
    assert manager.get_default_model() == "deepseek-chat"


def test_default_model_ignores_unknown_default(write_json) -> None:
    manager = _manager(write_json, _document(defaultModel="claude-x"))
    assert manager.get_default_model() == "gpt-4o"


def test_no_models_configured(write_json) -> None:
    manager = _manager(
        write_json,
        {"providers": [{"provider": "openai", "models": []}]},
    )
    with pytest.raises(NoModelsConfigured):
        manager.get_default_model()
    with pytest.raises(NoModelsConfigured):
        manager.get_recommended_model(ModelPurpose.DESIGN)


def test_recommended_model_prefers_default_models(write_json) -> None:
    manager = _manager(
        write_json,
        _document(
            defaultModels={"DESIGN": "o3"},
            modelPurposes={"deepseek-chat": ["DESIGN"]},
        ),
    )
    assert manager.get_recommended_model(ModelPurpose.DESIGN) == "o3"
    assert manager.get_recommended_model("DESIGN") == "o3"


def test_recommended_model_falls_back_to_purposes(write_json) -> None:
    manager = _manager(
        write_json,
        _document(
            defaultModels={"DESIGN": "missing"},
            modelPurposes={
                "ghost": ["DESIGN"],
                "deepseek-chat": ["QUERY", "DESIGN"],
            },
        ),
    )
    assert manager.get_recommended_model(ModelPurpose.DESIGN) == "deepseek-chat"
    assert manager.get_recommended_model(ModelPurpose.ANALYSIS) == "gpt-4o"


@pytest.mark.parametrize(
    "default_target, purposes_target",
    list(itertools.product([None, "o3", "missing"], repeat=2)),
)
def test_recommended_model_always_configured(
    write_json,
    default_target: Optional[str],
    purposes_target: Optional[str],
) -> None:
    extra: dict[str, Any] = {}
    if default_target is not None:
        extra["defaultModels"] = {"QUERY": default_target}
    if purposes_target is not None:
        extra["modelPurposes"] = {purposes_target: ["QUERY"]}
    manager = _manager(write_json, _document(**extra))

    for purpose in ModelPurpose:
        assert manager.validate_model(manager.get_recommended_model(purpose))


def test_lookups(write_json) -> None:
    manager = _manager(write_json, _document())

    assert manager.validate_model("o3")
    assert not manager.validate_model("nope")
    assert manager.get_model_info("o3").base_url == "https://o3.example/v1"
    assert manager.get_model_info("nope") is None
    assert manager.get_provider_by_model("deepseek-chat") == "deepseek"
    assert manager.get_provider_by_model("nope") is None


def test_duplicate_model_names_first_match_wins(write_json) -> None:
    data = _document()
    data["providers"][2]["models"].append(_model("gpt-4o"))
    manager = _manager(write_json, data)

    assert manager.get_provider_by_model("gpt-4o") == "openai"
    result = manager.validate_config()
    assert any("gpt-4o" in w for w in result.warnings)


def test_available_models(write_json) -> None:
    manager = _manager(
        write_json,
        _document(modelPurposes={"o3": ["ANALYSIS", "QUERY"]}),
    )
    models = {m.model: m for m in manager.get_available_models()}

    assert list(models) == ["gpt-4o", "o3", "deepseek-chat"]
    assert models["o3"].purposes == ["ANALYSIS", "QUERY"]
    assert models["gpt-4o"].purposes == ["DESIGN"]
    assert models["deepseek-chat"].provider == "deepseek"
    assert models["gpt-4o"].title == "GPT-4O"


def test_config_summary(write_json) -> None:
    summary = _manager(write_json, _document()).get_config_summary()

    assert summary.total_providers == 3
    assert summary.total_models == 3
    assert summary.providers[1].models == ["gpt-4o", "o3"]
    assert summary.model_dump(by_alias=True)["totalModels"] == 3


def test_validate_config_reports_problems(write_json) -> None:
    data = _document(defaultModel="ghost")
    data["providers"].append(
        {
            "provider": "gemini",
            "models": [{"model": "gem", "title": "Gem", "baseURL": ""}],
        },
    )
    result = _manager(write_json, data).validate_config()

    assert not result.is_valid
    assert "Unsupported provider: gemini" in result.errors
    assert "Model gem has no baseURL" in result.errors
    assert any("defaultModel ghost" in w for w in result.warnings)
    assert "Provider ollama has no models" in result.warnings


def test_validate_config_ok(config_file: Path) -> None:
    result = ModelManager(ConfigStore(config_file)).validate_config()
    assert result.is_valid
    assert result.available_models == ["gpt-4o"]
    assert result.providers == ["openai"]
