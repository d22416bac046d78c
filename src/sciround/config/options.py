# src/sciround/config/options.py

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Literal, Mapping, Optional

from ..errors import ConfigError
from ..logutil import get_logger
from .loader import PathLike, load_config_file

LOG = get_logger(__name__)

__all__ = ["FormatOptions", "UnitStyle", "load_format_options"]

UnitStyle = Literal["both", "grouped"]
_UNIT_STYLES = ("both", "grouped")


@dataclass(frozen=True)
class FormatOptions:
	"""
	How a rounded value and its uncertainty are joined into text.

	:param separator: Text between the value and the uncertainty.
	:param unit_separator: Text between a number and its unit symbol.
	:param unit_style: ``"both"`` renders ``1.0 s ± 0.1 s``, ``"grouped"``
					   renders ``(1.0 ± 0.1) s``.
	"""
	separator: str = " ± "
	unit_separator: str = " "
	unit_style: UnitStyle = "both"

	def __post_init__(self) -> None:
		for name in ("separator", "unit_separator"):
			if not isinstance(getattr(self, name), str):
				raise ConfigError(f"'{name}' must be a string, got {getattr(self, name)!r}")
		if self.unit_style not in _UNIT_STYLES:
			raise ConfigError(f"'unit_style' must be one of {_UNIT_STYLES}, got {self.unit_style!r}")

	@classmethod
	def from_mapping(cls, mapping: Mapping[str, Any]) -> "FormatOptions":
		"""
		Build options from a ``{key: value}`` mapping; missing keys keep defaults.

		:raises ConfigError: On unknown keys or invalid values.
		"""
		known = {f.name for f in fields(cls)}
		values = {str(k).lower(): v for k, v in mapping.items()}
		unknown = sorted(set(values) - known)
		if unknown:
			raise ConfigError(f"Unknown format option(s): {', '.join(unknown)}")
		return cls(**values)

	def with_overrides(self, **overrides: Any) -> "FormatOptions":
		return replace(self, **overrides)

	def join(self, value: str, uncertainty: str, unit: Optional[str] = None) -> str:
		"""Join already-rounded text according to these options."""
		if not unit:
			return f"{value}{self.separator}{uncertainty}"
		if self.unit_style == "grouped":
			return f"({value}{self.separator}{uncertainty}){self.unit_separator}{unit}"
		suffix = f"{self.unit_separator}{unit}"
		return f"{value}{suffix}{self.separator}{uncertainty}{suffix}"


def load_format_options(path: PathLike, *, section: str = "format") -> FormatOptions:
	"""
	Load :class:`FormatOptions` from the ``[format]`` section of an INI or JSON file.

	A file without the section yields the defaults.

	:param path: ``.ini``/``.cfg`` or ``.json`` file.
	:param section: Section name (case-insensitive).
	:return: The options.
	:raises ConfigError: If the file cannot be read or the section is invalid.
	"""
	data = load_config_file(path)
	key = section.lower()
	if key not in data:
		LOG.info("No [%s] section in %s, using default format options", section, path)
		return FormatOptions()
	options = FormatOptions.from_mapping(data[key])
	LOG.info("Format options loaded from %s: %s", path, options)
	return options
