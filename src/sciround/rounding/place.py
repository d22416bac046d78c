# src/sciround/rounding/place.py

from __future__ import annotations

from typing import NamedTuple, Tuple

from ..errors import InvalidPlaceError
from .digit import Digit, Sign

__all__ = ["Place", "SplitFloat"]


class Place(int):
	"""
	Position of a digit relative to the decimal point.

	Negative places count left from the dot, positive places count right; there is
	no place zero::

	    ...  1245.6789 ...
	         ^  ^ ^  ^
	    ... -4 -1 1  4 ...

	A place is independent of any particular ``Digits`` layout, so it can be taken
	from one number and applied to another.
	"""

	def __new__(cls, value: int) -> "Place":
		if isinstance(value, bool) or not isinstance(value, int):
			raise InvalidPlaceError(f"place must be an integer, got {value!r}")
		if value == 0:
			raise InvalidPlaceError("place zero does not exist (the dot sits between -1 and 1)")
		return super().__new__(cls, value)

	@classmethod
	def from_offset(cls, offset: int) -> "Place":
		"""Place of the digit ``offset`` positions after the dot (``0`` is the tenths)."""
		return cls(offset + 1 if offset >= 0 else offset)

	@property
	def offset(self) -> int:
		"""Digit-index offset from the dot; ``+1`` maps to ``0`` and ``-1`` stays ``-1``."""
		return int(self) - 1 if self > 0 else int(self)

	def __repr__(self) -> str:
		return f"Place({int(self)})"


class SplitFloat(NamedTuple):
	"""A number split at the dot: ``123.456 == (POSITIVE, (1, 2, 3), (4, 5, 6))``."""
	sign: Sign
	integer: Tuple[Digit, ...]
	fraction: Tuple[Digit, ...]
