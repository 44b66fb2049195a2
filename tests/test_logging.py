from __future__ import annotations

import logging
from pathlib import Path

from hr_analytics.logging_config import configure_logging


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_accepts_level_names(tmp_path: Path) -> None:
    configure_logging(tmp_path / "logs" / "hr.log", level="debug")
    assert logging.getLogger("hr_analytics").level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING
    assert (tmp_path / "logs").is_dir()
