from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner, Result

from codeintel.cli.main import cli


def _invoke(*args: str) -> Result:
    return CliRunner().invoke(cli, ["--log-level", "error", *args])


def test_models_list_masks_keys(write_json) -> None:
    config = write_json(
        "config.json",
        {
            "providers": [
                {
                    "provider": "openai",
                    "models": [
                        {
                            "model": "gpt-4o",
                            "title": "GPT-4o",
                            "baseURL": "https://api.openai.com/v1",
                            "apiKey": "sk-abcdefghijk",
                        },
                    ],
                },
            ],
        },
    )

    result = _invoke("--config", str(config), "models", "list")

    assert result.exit_code == 0, result.output
    assert "gpt-4o" in result.stdout
    assert "sk-*******hijk" in result.stdout
    assert "sk-abcdefghijk" not in result.stdout


def test_models_check_ok(config_file: Path) -> None:
    result = _invoke("--config", str(config_file), "models", "check")

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["isValid"] is True


def test_models_check_invalid_exits_1(write_json) -> None:
    config = write_json(
        "bad.json",
        {"providers": [{"provider": "gemini", "models": []}]},
    )

    result = _invoke("--config", str(config), "models", "check")

    assert result.exit_code == 1
    assert "Unsupported provider: gemini" in result.stdout


def test_models_recommend(config_file: Path) -> None:
    result = _invoke("--config", str(config_file), "models", "recommend", "design")

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "gpt-4o"


def test_missing_config_exits_1(tmp_path: Path) -> None:
    result = _invoke("--config", str(tmp_path / "none.json"), "models", "list")
    assert result.exit_code == 1


def test_query_component(components_file: Path) -> None:
    found = _invoke("query", "component", "Button", "--file", str(components_file))
    assert found.exit_code == 0, found.output
    assert json.loads(found.stdout)["import"] == "import Button"

    missing = _invoke("query", "component", "Nope", "--file", str(components_file))
    assert missing.exit_code == 1
    assert "Component not found: Nope" in missing.stdout


def test_query_utility(utils_file: Path) -> None:
    result = _invoke("query", "utility", "formatNumber", "--file", str(utils_file))

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["params"] == "value: number"


def test_models_list_shows_summary_and_purposes(write_json) -> None:
    config = write_json(
        "purposes.json",
        {
            "providers": [
                {
                    "provider": "openai",
                    "models": [
                        {"model": "gpt-4o", "title": "GPT-4o", "baseURL": "u"},
                        {"model": "o3", "title": "o3", "baseURL": "u"},
                    ],
                },
            ],
            "modelPurposes": {"o3": ["ANALYSIS", "QUERY"]},
        },
    )

    result = _invoke("--config", str(config), "models", "list")

    assert result.exit_code == 0, result.output
    assert "=== Providers (1, 2 models) ===" in result.stdout
    assert "purposes: DESIGN" in result.stdout
    assert "purposes: ANALYSIS, QUERY" in result.stdout
