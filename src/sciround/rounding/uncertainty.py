# src/sciround/rounding/uncertainty.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.options import FormatOptions
from ..logutil import get_logger
from ..units import FloatLike, UncertainFloat, unit_symbol
from .digits import Digits
from .place import Place

LOG = get_logger(__name__)

__all__ = ["UncertainDigits", "round_with_uncertainty"]

_DEFAULT_OPTIONS = FormatOptions()


@dataclass(frozen=True)
class UncertainDigits:
	"""A measured value and its absolute uncertainty, both as :class:`Digits`."""

	value: Digits
	uncertainty: Digits

	@classmethod
	def from_floats(cls, value: FloatLike, uncertainty: FloatLike) -> "UncertainDigits":
		"""
		:raises InvalidFloatError: If either number is NaN or infinite.
		"""
		return cls(Digits.from_float(value), Digits.from_float(uncertainty))

	def place(self) -> Place:
		"""Place both parts are rounded to: the uncertainty's last significant place."""
		return self.uncertainty.last_significant_place()

	def rounded(self) -> "UncertainDigits":
		"""
		Round the uncertainty to one or two significant figures and the value to
		the same place, so the value never claims more precision than the
		uncertainty supports.
		"""
		place = self.place()
		LOG.debug("Rounding %s ± %s at place %d", self.value, self.uncertainty, place)
		return UncertainDigits(self.value.round_to_place(place), self.uncertainty.round_to_place(place))

	def format(self, unit: Optional[str] = None, options: Optional[FormatOptions] = None) -> str:
		"""Render as text without any further rounding."""
		return (options or _DEFAULT_OPTIONS).join(str(self.value), str(self.uncertainty), unit)

	def __iter__(self):
		return iter((self.value, self.uncertainty))


def _split_arguments(
		value: object,
		uncertainty: Optional[FloatLike]
) -> Tuple[FloatLike, FloatLike]:
	if uncertainty is not None:
		return value, uncertainty  # type: ignore[return-value]
	if isinstance(value, UncertainFloat):
		return value.value, value.uncertainty
	raise TypeError("uncertainty is required unless value is an UncertainFloat")


def round_with_uncertainty(
		value: object,
		uncertainty: Optional[FloatLike] = None,
		*,
		unit: Optional[str] = None,
		options: Optional[FormatOptions] = None
) -> str:
	"""
	Report a measurement rounded to the precision its uncertainty supports.

	The uncertainty keeps one significant figure, or two when it starts with a 1
	or 2; the value is rounded to the same decimal place.

	>>> round_with_uncertainty(1024.05, 0.015555312)
	'1024.05 ± 0.016'
	>>> round_with_uncertainty(1024.0511231255, 0.015555312)
	'1024.051 ± 0.016'
	>>> from sciround.units import Quantity, Second
	>>> round_with_uncertainty(Quantity(9.81234, Second), Quantity(0.0432, Second))
	'9.81 s ± 0.04 s'

	:param value: Measured value, or an :class:`UncertainFloat` when ``uncertainty``
				  is omitted.
	:param uncertainty: Absolute uncertainty.
	:param unit: Unit symbol to append; defaults to the symbol of ``value`` when it
				 carries a unit.
	:param options: Formatting options; defaults to ``"<value> ± <uncertainty>"``.
	:return: Rendered text.
	:raises InvalidFloatError: If either number is NaN or infinite.
	:raises TypeError: If ``uncertainty`` is missing and ``value`` is not an
					   :class:`UncertainFloat`.
	"""
	measured, error = _split_arguments(value, uncertainty)
	symbol = unit if unit is not None else unit_symbol(measured)
	pair = UncertainDigits.from_floats(measured, error).rounded()
	return pair.format(symbol, options)
