# src/sciround/rounding/digit.py

from __future__ import annotations

import math
from enum import Enum, IntEnum

from ..errors import InvalidDigitError

__all__ = ["Digit", "Sign"]


class Digit(IntEnum):
	"""
	A single base-ten digit.

	Members compare and hash like their integer value, so ``Digit.FIVE > Digit.TWO``
	and ``int(Digit.SEVEN) == 7``. Use :meth:`new` and :meth:`from_char` to build
	one from untrusted input.
	"""
	ZERO = 0
	ONE = 1
	TWO = 2
	THREE = 3
	FOUR = 4
	FIVE = 5
	SIX = 6
	SEVEN = 7
	EIGHT = 8
	NINE = 9

	@classmethod
	def new(cls, value: int) -> "Digit":
		"""
		Validate ``value`` and return the matching digit.

		:param value: Integer between 0 and 9.
		:return: The digit.
		:raises InvalidDigitError: If ``value`` is not an integer in 0-9.
		"""
		if isinstance(value, bool) or not isinstance(value, int):
			raise InvalidDigitError(value)
		if not cls.ZERO <= value <= cls.NINE:
			raise InvalidDigitError(value)
		return cls(value)

	@classmethod
	def from_char(cls, char: str) -> "Digit":
		"""
		Parse one of the characters ``'0'`` to ``'9'``.

		:param char: Single character.
		:return: The digit.
		:raises InvalidDigitError: For any other character or string.
		"""
		if not isinstance(char, str) or len(char) != 1 or char not in "0123456789":
			raise InvalidDigitError(char)
		return cls(ord(char) - ord("0"))

	def to_char(self) -> str:
		return chr(ord("0") + self.value)

	def is_even(self) -> bool:
		return self.value % 2 == 0

	def __str__(self) -> str:
		return self.to_char()


class Sign(Enum):
	"""Whether a number is positive or negative."""
	POSITIVE = "Positive"
	NEGATIVE = "Negative"

	@classmethod
	def of(cls, value: float) -> "Sign":
		"""Sign of ``value``; ``-0.0`` is negative."""
		return cls.NEGATIVE if math.copysign(1.0, value) < 0 else cls.POSITIVE

	@property
	def prefix(self) -> str:
		"""Textual prefix used when rendering: ``""`` or ``"-"``."""
		return "-" if self is Sign.NEGATIVE else ""

	def __str__(self) -> str:
		return self.prefix
