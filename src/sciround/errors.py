# src/sciround/errors.py
"""
Exception types shared across sciround.

Every error derives from :class:`SciroundError`, and most also derive from the
built-in exception a caller would naturally catch (``ValueError`` for invalid
input, ``IndexError`` for positions that do not exist).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

__all__ = [
	"SciroundError",
	"InvalidDigitError",
	"FloatCategory", "InvalidFloatError",
	"PartsProblem", "InvalidDigitsPartsError",
	"OutOfBoundsPlaceError", "OutOfBoundsIndexError",
	"InvalidPlaceError",
	"ConfigError",
]


class SciroundError(Exception):
	"""Base class for all sciround errors."""


class InvalidDigitError(SciroundError, ValueError):
	"""A character or number that is not a base-ten digit (0-9)."""

	def __init__(self, value: Any) -> None:
		self.value = value
		super().__init__(f"not a valid digit (0-9): {value!r}")


class FloatCategory(Enum):
	"""Classes of floating-point values that cannot be decomposed into digits."""
	NAN = "nan"
	INFINITE = "infinite"


class InvalidFloatError(SciroundError, ValueError):
	"""
	A float that is NaN or infinite where a finite value was expected.

	:param kind: Which non-finite category the value belongs to.
	:param value: The offending value.
	"""

	def __init__(self, kind: FloatCategory, value: float) -> None:
		self.kind = kind
		self.value = value
		super().__init__(f"expected a finite float, got {kind.value} ({value!r})")


class PartsProblem(Enum):
	OUT_OF_BOUNDS_DOT = "dot index is greater than the length of the digits list"
	EMPTY_DIGITS_LIST = "digits list has no digits"


class InvalidDigitsPartsError(SciroundError, ValueError):
	"""Components passed to ``Digits.from_parts`` break the ``Digits`` invariants."""

	def __init__(self, kind: PartsProblem, detail: Optional[str] = None) -> None:
		self.kind = kind
		message = kind.value if detail is None else f"{kind.value} ({detail})"
		super().__init__(message)


class OutOfBoundsPlaceError(SciroundError, IndexError):
	"""A place that has no corresponding digit in the queried ``Digits``."""

	def __init__(self, place: int, length: Optional[int] = None) -> None:
		self.place = place
		self.length = length
		suffix = "" if length is None else f" with {length} digit(s)"
		super().__init__(f"place {place} does not exist in this Digits{suffix}")


class OutOfBoundsIndexError(SciroundError, IndexError):
	"""A digit index that points outside of a digit list."""

	def __init__(self, index: int) -> None:
		self.index = index
		super().__init__(f"digit index out of bounds: {index!r}")


class InvalidPlaceError(SciroundError, ValueError):
	"""A place that is zero or not an integer."""


class ConfigError(SciroundError):
	"""Configuration could not be read, parsed or validated."""
