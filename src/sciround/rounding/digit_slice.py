# src/sciround/rounding/digit_slice.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .digit import Digit

__all__ = ["DigitSlice"]


@dataclass(frozen=True)
class DigitSlice:
	"""
	Read-only view of digits interpreted as a big-endian unsigned integer.

	Mostly an intermediate step of :meth:`Digits.round_to_digit`, which needs to
	"add one and carry".

	Examples
	--------
	>>> ten = DigitSlice((Digit.ONE, Digit.ZERO))
	>>> int(ten)
	10
	>>> ten.add(1)
	(<Digit.ONE: 1>, <Digit.ONE: 1>)
	"""

	digits: Tuple[Digit, ...]

	@classmethod
	def of(cls, digits: Iterable[Digit]) -> "DigitSlice":
		return cls(tuple(digits))

	def get(self) -> Tuple[Digit, ...]:
		return self.digits

	def __int__(self) -> int:
		value = 0
		for digit in self.digits:
			value = value * 10 + int(digit)
		return value

	def __len__(self) -> int:
		return len(self.digits)

	def add(self, amount: int) -> Tuple[Digit, ...]:
		"""
		Add ``amount`` and expand the sum back into digits.

		The result has no superfluous leading zeros, so it can be longer
		(``9 + 1 -> 10``) or shorter (``009 + 1 -> 10``) than the slice.
		Callers that need a fixed width must pad it themselves.

		:param amount: Non-negative integer to add.
		:return: Minimal-length digit tuple of the sum.
		:raises ValueError: If ``amount`` is negative.
		"""
		if amount < 0:
			raise ValueError(f"amount must be non-negative, got {amount}")
		return tuple(Digit(int(ch)) for ch in str(int(self) + amount))
