from __future__ import annotations

import logging
from pathlib import Path

from crm_analytics.logging_config import configure_logging


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_creates_log_directory(tmp_path: Path) -> None:
    log_path = tmp_path / "nested" / "analytics.log"
    configure_logging(log_path)
    assert log_path.parent.is_dir()
