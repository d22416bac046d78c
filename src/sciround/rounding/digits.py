# src/sciround/rounding/digits.py
"""
Floating-point values as lists of base-ten digits.

:class:`Digits` holds the implementation details of
:func:`sciround.rounding.round_with_uncertainty`: it rounds on the decimal digits
themselves instead of scaling floats by powers of ten, so no binary rounding
error is reintroduced.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple, Union

from ..errors import (
	FloatCategory,
	InvalidDigitsPartsError,
	InvalidFloatError,
	OutOfBoundsIndexError,
	OutOfBoundsPlaceError,
	PartsProblem,
)
from ..imports import numpy as np  # type: ignore
from ..logutil import get_logger
from ..units import FloatLike, as_float
from .digit import Digit, Sign
from .digit_slice import DigitSlice
from .place import Place, SplitFloat

LOG = get_logger(__name__)

__all__ = ["Digits", "float_to_text"]

_DIGIT_NAMES = {d: d.name.capitalize() for d in Digit}
_DIGITS_BY_NAME = {name: d for d, name in _DIGIT_NAMES.items()}


def float_to_text(value: float) -> str:
	"""
	Shortest positional text that round-trips to ``value``.

	Never uses an exponent and drops a fractional ``.0``:
	``1024.0 -> "1024"``, ``1e-7 -> "0.0000001"``, ``-0.0 -> "-0"``.

	:raises InvalidFloatError: If ``value`` is NaN or infinite.
	"""
	if math.isnan(value):
		raise InvalidFloatError(FloatCategory.NAN, value)
	if math.isinf(value):
		raise InvalidFloatError(FloatCategory.INFINITE, value)
	return str(np.format_float_positional(value, unique=True, trim="-"))


@dataclass(frozen=True)
class Digits:
	"""
	A finite decimal number as a sign, a list of digits and a dot position::

	    | sign = Sign.NEGATIVE
	    v
	    -105.2060   <-- digits = (1, 0, 5, 2, 0, 6, 0)
	        ^
	        | dot = 3

	``dot`` is the digit index the decimal point is rendered before: ``0.05`` has
	``dot = 1``, ``100`` has ``dot = 3``. Instances never change; every rounding
	operation returns a new one.

	Direct construction validates the invariants like :meth:`from_parts`.
	"""

	sign: Sign
	dot: int
	digits: Tuple[Digit, ...]

	def __post_init__(self) -> None:
		if not isinstance(self.digits, tuple) or not all(isinstance(d, Digit) for d in self.digits):
			object.__setattr__(
				self, "digits", tuple(d if isinstance(d, Digit) else Digit.new(d) for d in self.digits)
			)
		if len(self.digits) == 0:
			raise InvalidDigitsPartsError(PartsProblem.EMPTY_DIGITS_LIST)
		if isinstance(self.dot, bool) or not isinstance(self.dot, int) or not 0 <= self.dot <= len(self.digits):
			raise InvalidDigitsPartsError(
				PartsProblem.OUT_OF_BOUNDS_DOT, f"dot={self.dot!r}, {len(self.digits)} digit(s)"
			)

	# --- construction ---
	@classmethod
	def from_float(cls, value: FloatLike) -> "Digits":
		"""
		Decompose a finite float into digits.

		>>> str(Digits.from_float(1024.05))
		'1024.05'
		>>> Digits.from_float(0.03).digits
		(<Digit.ZERO: 0>, <Digit.ZERO: 0>, <Digit.THREE: 3>)

		:param value: ``float``, ``int`` or an object exposing ``get() -> float``.
		:return: New instance holding the digits of the float's shortest text.
		:raises InvalidFloatError: If the value is NaN or infinite.
		"""
		number = as_float(value)
		text = float_to_text(number)
		sign = Sign.NEGATIVE if text.startswith("-") else Sign.POSITIVE
		body = text.lstrip("-")
		integer, _, fraction = body.partition(".")
		digits = tuple(Digit.from_char(ch) for ch in integer + fraction)
		return cls.from_parts_unchecked(sign, len(integer), digits)

	@classmethod
	def from_parts(cls, sign: Sign, dot: int, digits: Iterable[Digit]) -> "Digits":
		"""
		Build from components, checking the invariants.

		:raises InvalidDigitsPartsError: ``EMPTY_DIGITS_LIST`` when ``digits`` is empty,
										 ``OUT_OF_BOUNDS_DOT`` when ``dot > len(digits)``.
		"""
		return cls(sign, dot, tuple(digits))

	@classmethod
	def from_parts_unchecked(cls, sign: Sign, dot: int, digits: Tuple[Digit, ...]) -> "Digits":
		"""
		Build from components without any checks.

		The caller guarantees that ``digits`` is a non-empty tuple of :class:`Digit`
		and that ``0 <= dot <= len(digits)``.
		"""
		obj = object.__new__(cls)
		object.__setattr__(obj, "sign", sign)
		object.__setattr__(obj, "dot", dot)
		object.__setattr__(obj, "digits", digits)
		return obj

	@classmethod
	def zero(cls) -> "Digits":
		"""The canonical zero, rendered as ``"0"``."""
		return cls.from_parts_unchecked(Sign.POSITIVE, 0, (Digit.ZERO,))

	# --- inspection ---
	def __len__(self) -> int:
		return len(self.digits)

	def __iter__(self) -> Iterator[Digit]:
		return iter(self.digits)

	def to_split(self) -> SplitFloat:
		"""Split into the digits left and right of the dot."""
		return SplitFloat(self.sign, self.digits[:self.dot], self.digits[self.dot:])

	def is_one(self) -> bool:
		return self.dot == 1 and self.digits == (Digit.ONE,)

	# --- significant figures ---
	def last_significant_digit(self) -> int:
		"""
		Digit index of the last significant digit when rounding to one or two
		significant figures.

		Finds the first non-zero digit. If it is a 1 or 2 the following digit is
		also significant (when there is one), otherwise the first non-zero digit is
		the last significant one. All zeros give index ``0``.

		>>> Digits.from_float(1024.05).last_significant_digit()
		1
		>>> Digits.from_float(42.0).last_significant_digit()
		0
		"""
		for index, digit in enumerate(self.digits):
			if digit == Digit.ZERO:
				continue
			if digit in (Digit.ONE, Digit.TWO):
				return index + 1 if index + 1 < len(self.digits) else index
			return index
		return 0

	def last_significant_place(self) -> Place:
		"""Place of :meth:`last_significant_digit`, usable on another ``Digits``."""
		return self.digit_index_to_place(self.last_significant_digit())

	# --- rounding ---
	def round_to_digit(self, index: int) -> "Digits":
		"""
		Round so that the digit at ``index`` is the last one kept (round-half-to-even).

		The digit after ``index`` decides: 0-4 truncates, 5 truncates when the kept
		digit is even and rounds up when it is odd, 6-9 rounds up. Rounding up
		carries through the kept digits and may add a leading digit, which moves
		the dot one place right. Digits dropped left of the dot are replaced by
		zeros so the magnitude is preserved.

		>>> str(Digits.from_float(0.015555312).round_to_digit(3))
		'0.016'
		>>> str(Digits.from_float(1024.05).round_to_digit(1))
		'1000'
		>>> str(Digits.from_float(999.0).round_to_digit(1))
		'1000'

		:param index: Digit index to round to; past the end returns an equal copy.
		:return: New rounded instance.
		:raises OutOfBoundsIndexError: If ``index`` is negative.
		"""
		if index < 0:
			raise OutOfBoundsIndexError(index)
		if index >= len(self.digits):
			return self.from_parts_unchecked(self.sign, self.dot, self.digits)

		# 102345.0 rounded at index 2 keeps "102" and needs three zeros back
		trailing_zeros = self.dot - 1 - index if index < self.dot else 0

		kept = self.digits[:index + 1]
		next_digit = self.digits[index + 1] if index + 1 < len(self.digits) else Digit.ZERO

		if next_digit < Digit.FIVE or (next_digit == Digit.FIVE and kept[-1].is_even()):
			digits = kept
			dot = self.dot
		else:
			digits = DigitSlice(kept).add(1)
			dot = self.dot
			if len(digits) > len(kept):
				dot += 1
			elif len(digits) < len(kept):
				# 009 -> 10 lost its leading zero; 010 keeps the place of every digit
				digits = (Digit.ZERO,) * (len(kept) - len(digits)) + digits

		digits = digits + (Digit.ZERO,) * trailing_zeros
		LOG.debug("Rounded %s at digit index %d (next digit %s)", self, index, next_digit)
		return self.from_parts_unchecked(self.sign, dot, digits)

	def round_to_place(self, place: Union[Place, int]) -> "Digits":
		"""
		Round to a :class:`Place` instead of a digit index.

		- One position left of the first digit: a first digit above 5 rounds up to
		  a new leading ``1`` (``6024`` at the ten-thousands gives ``10000``),
		  anything else collapses to zero.
		- Further left than that: zero.
		- At or past the last stored digit: unchanged.
		- Otherwise the same as :meth:`round_to_digit` at the place's index.

		>>> str(Digits.from_float(1024.05).round_to_place(Place(-3)))
		'1000'
		>>> str(Digits.from_float(1024.05).round_to_place(Place(1)))
		'1024.0'
		"""
		place = place if isinstance(place, Place) else Place(place)
		index = self.dot + place.offset

		if index == -1:
			if self.digits[0] > Digit.FIVE:
				return self.from_parts_unchecked(
					self.sign, self.dot + 1, (Digit.ONE,) + (Digit.ZERO,) * self.dot
				)
			return self.zero()
		if index < -1:
			return self.zero()
		if index >= len(self.digits):
			return self.from_parts_unchecked(self.sign, self.dot, self.digits)

		return self.round_to_digit(self.place_to_digit_index(place))

	# --- coordinates ---
	def digit_index_to_place(self, index: int) -> Place:
		"""
		Convert an index into this instance's digits to a :class:`Place`.

		>>> Digits.from_float(1024.05).digit_index_to_place(1)
		Place(-3)
		>>> Digits.from_float(1024.05).digit_index_to_place(4)
		Place(1)

		:raises OutOfBoundsIndexError: If ``index`` is negative.
		"""
		if index < 0:
			raise OutOfBoundsIndexError(index)
		return Place.from_offset(index - self.dot)

	def place_to_digit_index(self, place: Union[Place, int]) -> int:
		"""
		Convert a :class:`Place` to an index into this instance's digits.

		:raises OutOfBoundsPlaceError: If no digit of this instance sits at ``place``.
		"""
		place = place if isinstance(place, Place) else Place(place)
		index = self.dot + place.offset
		if not 0 <= index < len(self.digits):
			raise OutOfBoundsPlaceError(int(place), len(self.digits))
		return index

	# --- rendering ---
	def __str__(self) -> str:
		if self.dot == 0 and self.digits == (Digit.ZERO,):
			return f"{self.sign.prefix}0"
		chars = [d.to_char() for d in self.digits]
		if self.dot < len(chars):
			chars.insert(self.dot, ".")
		return self.sign.prefix + "".join(chars)

	def to_string_with_units(self, symbol: str) -> str:
		return f"{self} {symbol}"

	# --- serialization ---
	def to_dict(self) -> Dict[str, Any]:
		"""``{"sign": "Positive", "dot": 2, "digits": ["One", "Five"]}`` for ``15``."""
		return {
			"sign": self.sign.value,
			"dot": self.dot,
			"digits": [_DIGIT_NAMES[d] for d in self.digits],
		}

	@classmethod
	def from_dict(cls, data: Mapping[str, Any]) -> "Digits":
		"""
		Inverse of :meth:`to_dict`; the invariants are checked again.

		:raises ValueError: On missing keys or unknown sign/digit names.
		:raises InvalidDigitsPartsError: If the decoded parts are inconsistent.
		"""
		try:
			sign = Sign(data["sign"])
			names = data["digits"]
			dot = data["dot"]
		except KeyError as exc:
			raise ValueError(f"missing key in serialized Digits: {exc}") from exc
		if isinstance(names, str):
			raise ValueError("serialized digits must be a list of digit names")
		try:
			digits = tuple(_DIGITS_BY_NAME[name] for name in names)
		except (KeyError, TypeError) as exc:
			raise ValueError(f"unknown digit name in {names!r}") from exc
		return cls.from_parts(sign, dot, digits)

	def to_json(self) -> str:
		return json.dumps(self.to_dict(), separators=(",", ":"))

	@classmethod
	def from_json(cls, text: str) -> "Digits":
		data = json.loads(text)
		if not isinstance(data, dict):
			raise ValueError("serialized Digits must be a JSON object")
		return cls.from_dict(data)
