# src/sciround/logutil.py

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

__all__ = ["get_logger", "configure_logging"]

PathLike = Union[str, Path]

LevelLike = Union[int, str]

_ROOT = "sciround"
_SHORT_FORMAT = "[%(levelname)s] %(message)s"
_LONG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _to_level(value: LevelLike, *, param_name: str) -> int:
	if isinstance(value, int):
		return value
	resolved = logging.getLevelName(str(value).upper())
	if isinstance(resolved, int):
		return resolved
	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = _ROOT) -> logging.Logger:
	"""
	Return a package logger.

	The package root logger gets a console handler the first time it is requested;
	module loggers (``sciround.rounding.digits`` etc.) propagate to it and are left
	without handlers of their own.

	:param name: Logger name, usually ``__name__``.
	:return: The logger.
	"""
	root = logging.getLogger(_ROOT)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(_SHORT_FORMAT))
		root.addHandler(handler)
		root.setLevel(logging.WARNING)
		root.propagate = False
	return logging.getLogger(name)


def configure_logging(
		*,
		name: str = _ROOT,
		console_level: LevelLike = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "w",
		rotate: bool = False,
		max_bytes: int = 2_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
		propagate: bool = False
) -> logging.Logger:
	"""
	Configure console (and optionally file) output of a sciround logger.

	:param name: Logger name (defaults to the package root).
	:param console_level: Console handler level (int or level name).
	:param file_path: Optional log file; parent directories are created.
	:param file_level: File handler level, defaults to ``console_level``.
	:param mode: ``'w'`` to overwrite or ``'a'`` to append.
	:param rotate: Use a :class:`RotatingFileHandler` when ``True``.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups to keep.
	:param formatter: Custom formatter; the default includes a timestamp.
	:param propagate: Whether records propagate to parent loggers.
	:return: The configured logger.
	:raises ValueError: On an unknown level name.
	"""
	console_value = _to_level(console_level, param_name="console_level")
	file_value = console_value if file_level is None else _to_level(file_level, param_name="file_level")

	log = get_logger(name)
	log.setLevel(min(console_value, file_value) if file_path else console_value)
	log.propagate = propagate
	fmt = formatter or logging.Formatter(_LONG_FORMAT)

	streams = [
		h for h in log.handlers
		if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
	]
	if not streams:
		streams = [logging.StreamHandler()]
		log.addHandler(streams[0])
	for handler in streams:
		handler.setLevel(console_value)
		handler.setFormatter(fmt)

	if file_path:
		path = Path(file_path)
		path.parent.mkdir(parents=True, exist_ok=True)
		already = any(getattr(h, "baseFilename", None) == os.path.abspath(path) for h in log.handlers)
		if not already:
			file_handler: logging.Handler
			if rotate:
				file_handler = RotatingFileHandler(
					path, mode=mode, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
				)
			else:
				file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
			file_handler.setLevel(file_value)
			file_handler.setFormatter(fmt)
			log.addHandler(file_handler)

	return log
