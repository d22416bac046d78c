"""Tests for :mod:`sciround.logutil`."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest

from sciround.logutil import configure_logging, get_logger


@pytest.fixture
def logger_name(request):
	name = f"sciround.tests.{request.node.name}"
	yield name
	log = logging.getLogger(name)
	for handler in list(log.handlers):
		log.removeHandler(handler)
		handler.close()


def test_get_logger_installs_one_root_handler():
	get_logger("sciround.rounding.digits")
	get_logger("sciround.config.loader")
	root = logging.getLogger("sciround")
	assert len(root.handlers) >= 1
	assert root.propagate is False
	assert get_logger("sciround.x").name == "sciround.x"


def test_configure_logging_console_only(logger_name):
	log = configure_logging(name=logger_name, console_level="debug")
	assert log.level == logging.DEBUG
	streams = [h for h in log.handlers if isinstance(h, logging.StreamHandler)]
	assert len(streams) == 1
	assert streams[0].level == logging.DEBUG

	configure_logging(name=logger_name, console_level=logging.WARNING)
	assert len(log.handlers) == 1
	assert log.handlers[0].level == logging.WARNING


def test_configure_logging_with_file(logger_name, tmp_path):
	path = tmp_path / "logs" / "run.log"
	log = configure_logging(name=logger_name, console_level="WARNING", file_path=path, file_level="DEBUG")
	assert path.parent.is_dir()
	assert log.level == logging.DEBUG

	configure_logging(name=logger_name, console_level="WARNING", file_path=path, file_level="DEBUG")
	file_handlers = [h for h in log.handlers if isinstance(h, logging.FileHandler)]
	assert len(file_handlers) == 1

	log.debug("rounded %s", "0.016")
	file_handlers[0].flush()
	assert "rounded 0.016" in path.read_text(encoding="utf-8")


def test_configure_logging_rotating(logger_name, tmp_path):
	log = configure_logging(name=logger_name, file_path=tmp_path / "rot.log", rotate=True, backup_count=1)
	assert any(isinstance(h, RotatingFileHandler) for h in log.handlers)


def test_unknown_level_name(logger_name):
	with pytest.raises(ValueError):
		configure_logging(name=logger_name, console_level="LOUD")
