from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'snipd_formatting'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from snipd_formatting.core.config import FormattingConfig, load_formatting_config  # noqa: E402
from snipd_formatting.core.models import Episode  # noqa: E402
from snipd_formatting.core.stdlib_logging import reset_stdlib_logging_for_tests  # noqa: E402
from snipd_formatting.core.templating.parser import clear_parse_cache  # noqa: E402
from snipd_formatting.data import clear_caches  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_user_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ~/.snipd at a temp dir and drop SNIPD_* overrides from the developer shell."""
    for key in list(os.environ):
        if key.startswith("SNIPD_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("SNIPD_HOME", str(home / ".snipd"))

    clear_caches()
    clear_parse_cache()
    yield home
    reset_stdlib_logging_for_tests()


@pytest.fixture
def episode_data() -> Dict[str, Any]:
    """Episode export as it would be read from YAML."""
    return {
        "title": "The Future of Energy",
        "show": {"title": "Deep Dive", "author": "Jane Host", "url": "https://pod.example/deep-dive"},
        "image_url": "https://img.example/ep.png",
        "guests": ["Ada", "Grace"],
        "publish_date": "2024-03-05",
        "ai_description": "A talk about batteries.",
        "mentioned_books": [
            {"title": "Sustainable Energy", "author": "David MacKay", "url": "https://books.example/se"},
            "The Grid",
        ],
        "duration_seconds": 3725,
        "url": "https://share.snipd.com/episode/1",
        "snips": [
            {
                "title": "Battery costs",
                "url": "https://share.snipd.com/snip/1",
                "tags": ["energy", "battery storage"],
                "favorite": True,
                "start_seconds": 245,
                "end_seconds": 335,
                "note": "Check the numbers",
                "quote": "Costs fell 90%",
                "transcript": [{"speaker": "Ada", "text": "Costs fell ninety percent."}],
            },
            {
                "title": "Grid scale",
                "start_seconds": 600,
                "end_seconds": 645,
            },
        ],
    }


@pytest.fixture
def episode(episode_data: Dict[str, Any]) -> Episode:
    return Episode.from_mapping(episode_data)


@pytest.fixture
def formatting_config() -> FormattingConfig:
    """Bundled configuration (no user overlay)."""
    return load_formatting_config()
