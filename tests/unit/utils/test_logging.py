from __future__ import annotations

import logging
from pathlib import Path

from snipd_formatting.core.stdlib_logging import configure_stdlib_logging


def test_file_logging(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "snipd.log"
    configure_stdlib_logging(log_path=log_path, level="DEBUG")
    configure_stdlib_logging(log_path=log_path, level="DEBUG")

    logging.getLogger("snipd_formatting.test").info("rendered %s", "note")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert content.count("rendered note") == 1
    assert "INFO snipd_formatting.test" in content
