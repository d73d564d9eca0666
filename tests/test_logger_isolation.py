"""Test logger isolation so concurrent runs do not mix debug.log output."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pointwise.verbose import setup_logger


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    log1 = tmp_path / "run1.log"
    log2 = tmp_path / "run2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="pointwise_run1")
    logger2 = setup_logger(log2, verbose=False, logger_name="pointwise_run2")

    assert logger1 is not logger2

    logger1.debug("Message from run1")
    logger2.debug("Message from run2")

    log1_content = log1.read_text()
    log2_content = log2.read_text()

    assert "Message from run1" in log1_content
    assert "Message from run2" not in log1_content

    assert "Message from run2" in log2_content
    assert "Message from run1" not in log2_content


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "log1.log", verbose=False, logger_name="pointwise_shared")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "log2.log", verbose=False, logger_name="pointwise_shared")

    error_msg = str(exc_info.value)
    assert "pointwise_shared" in error_msg
    assert "already exists" in error_msg


def test_verbose_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(tmp_path / "v.log", verbose=True, logger_name="pointwise_verbose")
    stream_handlers = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    assert len(stream_handlers) == 1


def test_creates_parent_directory(tmp_path: Path):
    log_file = tmp_path / "nested" / "dir" / "debug.log"
    logger = setup_logger(log_file, logger_name="pointwise_nested")
    logger.info("hello")
    assert "hello" in log_file.read_text()
