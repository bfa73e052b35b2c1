from __future__ import annotations

import json
from pathlib import Path

import pytest

from snipd_formatting.cli._dispatcher import main as cli_main
from snipd_formatting.core.config import SettingsStore
from snipd_formatting.core.config.editor import VALIDATION_NOTICE


def _show(capsys: pytest.CaptureFixture[str]) -> dict:
    capsys.readouterr()
    assert cli_main(["config", "show", "--json"]) == 0
    return json.loads(capsys.readouterr().out)


def test_show_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    shown = _show(capsys)
    assert shown["templates"]["file_name"] == "{{episode_title}}"
    assert shown["overridden"] == {"file_name": False, "episode": False, "snip": False}
    assert shown["additional_properties"] == []


def test_property_lifecycle(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "add-property", "category", "{{show_title}}", "--display-name", "Category"]) == 0
    assert cli_main(["config", "add-property", "people", "{{guests}}"]) == 0
    assert cli_main(["config", "update-property", "2", "--template", "{{show_author}}"]) == 0
    assert cli_main(["config", "remove-property", "1"]) == 0

    assert _show(capsys)["additional_properties"] == [{"name": "people", "template": "{{show_author}}"}]


def test_blank_property_is_not_saved(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "add-property", "  ", "{{show_title}}"]) == 1
    assert VALIDATION_NOTICE in capsys.readouterr().err
    assert not SettingsStore().exists()


def test_unknown_position(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "remove-property", "3"]) == 1
    assert "position 3" in capsys.readouterr().err


def test_update_requires_a_field(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "update-property", "1"]) == 1


def test_set_template_and_show(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    template_file = tmp_path / "snip.md"
    template_file.write_text("## {{snip_title}}\n{{snip_note}}[[Note:]]\n", encoding="utf-8")

    assert cli_main(["config", "set-template", "snip", "--file", str(template_file)]) == 0
    capsys.readouterr()
    assert cli_main(["config", "show", "--template", "snip"]) == 0
    assert capsys.readouterr().out == "## {{snip_title}}\n{{snip_note}}[[Note:]]\n\n"


def test_set_template_to_default_clears_override(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "set-template", "file_name", "--value", "{{show_title}}"]) == 0
    assert _show(capsys)["overridden"]["file_name"] is True

    assert cli_main(["config", "set-template", "file_name", "--value", "{{episode_title}}"]) == 0
    assert _show(capsys)["overridden"]["file_name"] is False


def test_set_template_warns_about_unknown_variables(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "set-template", "episode", "--value", "# {{episode_titel}}", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["unknown_variables"] == ["episode_titel"]


def test_reset(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main(["config", "set-template", "episode", "--value", "custom"])
    cli_main(["config", "add-property", "k", "v"])

    assert cli_main(["config", "reset"]) == 0
    assert SettingsStore().load().is_default


def test_validate_reports_unknown_variables(capsys: pytest.CaptureFixture[str]) -> None:
    cli_main(["config", "add-property", "typo", "{{show_titel}}"])
    capsys.readouterr()

    assert cli_main(["config", "validate", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "valid"
    assert payload["warnings"] == {"property:typo": ["show_titel"]}


def test_validate_rejects_broken_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("episode_template: 42\n", encoding="utf-8")

    assert cli_main(["config", "validate", "--settings", str(settings), "--json"]) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "invalid_settings"
