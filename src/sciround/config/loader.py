# src/sciround/config/loader.py

from __future__ import annotations

import ast
import configparser
import json
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import ConfigError
from ..logutil import get_logger

LOG = get_logger(__name__)

PathLike = Union[str, Path]

__all__ = ["PathLike", "parse_value", "load_ini_file", "load_json_file", "load_config_file"]

_NONE_MARKERS = {"none", "null", "na", "n/a"}
_TRUE_MARKERS = {"true", "yes", "on"}
_FALSE_MARKERS = {"false", "no", "off"}


def parse_value(raw: str) -> Any:
	"""
	Parse a raw INI string into a typed Python value.

	The parser attempts, in order:
	  1) ``ast.literal_eval`` for Python literals; quoted strings keep their
	     surrounding whitespace, so ``separator = " +/- "`` works.
	  2) None markers: ``none``, ``null``, ``na``, ``n/a``.
	  3) Booleans: ``true/yes/on`` and ``false/no/off``.
	  4) The original (stripped) string.

	:param raw: Text as read by ConfigParser.
	:return: Best-effort typed value.
	"""
	s = raw.strip()
	try:
		value = ast.literal_eval(s)
	except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
		pass
	else:
		return list(value) if isinstance(value, tuple) else value

	lower = s.lower()
	if lower in _NONE_MARKERS:
		return None
	if lower in _TRUE_MARKERS:
		return True
	if lower in _FALSE_MARKERS:
		return False
	return s


def load_ini_file(path: PathLike) -> Dict[str, Dict[str, Any]]:
	"""
	Read an INI file into ``{section: {key: value}}`` with typed values.

	Section and key names are lowercased; interpolation is disabled so that
	``%`` and ``$`` can appear in format strings.

	:raises ConfigError: On a missing file or a parse error.
	"""
	p = Path(path)
	if not p.exists():
		raise ConfigError(f"Missing config file: {p}")
	cp = configparser.ConfigParser(interpolation=None)
	try:
		with p.open("r", encoding="utf-8") as fh:
			cp.read_file(fh)
	except (OSError, configparser.Error, UnicodeDecodeError) as exc:
		raise ConfigError(f"Failed reading '{p}': {exc}") from exc

	data = {
		section.lower(): {key.lower(): parse_value(raw) for key, raw in cp.items(section)}
		for section in cp.sections()
	}
	LOG.info("Loaded INI file: %s", p)
	return data


def load_json_file(path: PathLike) -> Dict[str, Dict[str, Any]]:
	"""
	Read a JSON file shaped ``{"section": {"key": value}}``.

	:raises ConfigError: On a missing file, invalid JSON or a wrong shape.
	"""
	p = Path(path)
	if not p.exists():
		raise ConfigError(f"Missing JSON config file: {p}")
	try:
		with p.open("r", encoding="utf-8") as fh:
			obj = json.load(fh)
	except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
		raise ConfigError(f"Failed reading JSON '{p}': {exc}") from exc

	if not isinstance(obj, dict):
		raise ConfigError(f"Top-level JSON in '{p}' must be an object.")
	data: Dict[str, Dict[str, Any]] = {}
	for section, mapping in obj.items():
		if not isinstance(mapping, dict):
			raise ConfigError(f"Section '{section}' in '{p}' must be an object.")
		data[str(section).lower()] = {str(k).lower(): v for k, v in mapping.items()}
	LOG.info("Loaded JSON file: %s", p)
	return data


def load_config_file(path: PathLike) -> Dict[str, Dict[str, Any]]:
	"""Dispatch on the suffix: ``.json`` is JSON, anything else is read as INI."""
	if Path(path).suffix.lower() == ".json":
		return load_json_file(path)
	return load_ini_file(path)
