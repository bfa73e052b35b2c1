from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from snipd_formatting.cli._dispatcher import main as cli_main


@pytest.fixture
def episode_file(tmp_path: Path, episode_data: Dict[str, Any]) -> Path:
    path = tmp_path / "episode.yaml"
    path.write_text(yaml.safe_dump(episode_data, sort_keys=False, allow_unicode=True), encoding="utf-8")
    return path


def test_render_to_stdout(episode_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_main(["render", str(episode_file), "--export-date", "2024-05-01", "--stdout"])
    out = capsys.readouterr().out

    assert code == 0
    assert out.startswith("---\nepisode_title: The Future of Energy\n")
    assert "export_date: '2024-05-01'" in out
    assert "## Snips\n### Battery costs" in out


def test_render_writes_note(episode_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_dir = tmp_path / "vault"
    code = cli_main(["render", str(episode_file), "--output-dir", str(out_dir), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert payload["status"] == "success"
    assert payload["snips"] == 2
    assert Path(payload["path"]) == out_dir / "The Future of Energy.md"
    assert (out_dir / "The Future of Energy.md").exists()


def test_render_uses_saved_settings(episode_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["config", "add-property", "category", "{{show_title}}"]) == 0
    capsys.readouterr()

    code = cli_main(["render", str(episode_file), "--stdout", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert payload["frontmatter"]["category"] == "Deep Dive"


def test_render_rejects_bad_episode(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "episode.yaml"
    path.write_text("show:\n  title: Pod\n", encoding="utf-8")

    assert cli_main(["render", str(path), "--stdout"]) == 1
    assert "missing its title" in capsys.readouterr().err


def test_render_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main(["render", str(tmp_path / "nope.yaml"), "--json"]) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "io_error"


def test_render_bad_export_date(episode_file: Path) -> None:
    with pytest.raises(SystemExit):
        cli_main(["render", str(episode_file), "--export-date", "yesterday"])
