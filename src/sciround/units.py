# src/sciround/units.py
"""
Mark plain floats as physical measurements.

Only the read side is provided: a value, and for unit-tagged values a symbol and
singular/plural names. Conversions and dimensional algebra live elsewhere.

Examples
--------
>>> t = Quantity(2.5, Second)
>>> t.get(), t.symbol()
(2.5, 's')
>>> str(UncertainFloat(5.0, 1.0).min())
'4.0'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Optional, Protocol, Type, TypeVar, Union, runtime_checkable

__all__ = [
	"Float", "FloatDisplay", "Unit",
	"Day", "Hour", "Minute", "Second",
	"Meter", "Centimeter", "Millimeter", "Micrometer",
	"Degree",
	"Quantity", "UncertainFloat", "FloatLike",
	"as_float", "unit_symbol",
]


@runtime_checkable
class Float(Protocol):
	"""Anything holding a floating-point value."""

	def get(self) -> float: ...


@runtime_checkable
class FloatDisplay(Float, Protocol):
	"""A :class:`Float` that also knows how to name its unit."""

	def symbol(self) -> str: ...

	def singular(self) -> str: ...

	def plural(self) -> str: ...


class Unit:
	"""Marker for a physical unit; subclasses carry no state, only names."""
	SYMBOL: ClassVar[str] = ""
	SINGULAR: ClassVar[str] = ""
	PLURAL: ClassVar[str] = ""


class Day(Unit):
	SYMBOL, SINGULAR, PLURAL = "d", "day", "days"


class Hour(Unit):
	SYMBOL, SINGULAR, PLURAL = "hr", "hour", "hours"


class Minute(Unit):
	SYMBOL, SINGULAR, PLURAL = "min", "minute", "minutes"


class Second(Unit):
	SYMBOL, SINGULAR, PLURAL = "s", "second", "seconds"


class Meter(Unit):
	SYMBOL, SINGULAR, PLURAL = "m", "meter", "meters"


class Centimeter(Unit):
	SYMBOL, SINGULAR, PLURAL = "cm", "centimeter", "centimeters"


class Millimeter(Unit):
	SYMBOL, SINGULAR, PLURAL = "mm", "millimeter", "millimeters"


class Micrometer(Unit):
	SYMBOL, SINGULAR, PLURAL = "μm", "micrometer", "micrometers"


class Degree(Unit):
	SYMBOL, SINGULAR, PLURAL = "°", "degree", "degrees"


U = TypeVar("U", bound=Unit)


@dataclass(frozen=True)
class Quantity(Generic[U]):
	"""A float tagged with a :class:`Unit` marker class."""

	value: float
	unit: Type[U]

	def get(self) -> float:
		return self.value

	def symbol(self) -> str:
		return self.unit.SYMBOL

	def singular(self) -> str:
		return self.unit.SINGULAR

	def plural(self) -> str:
		return self.unit.PLURAL

	def with_value(self, value: float) -> "Quantity[U]":
		return Quantity(float(value), self.unit)

	def __float__(self) -> float:
		return float(self.value)

	def __str__(self) -> str:
		return f"{self.value} {self.symbol()}"


FloatLike = Union[float, int, Float]
F = TypeVar("F")


def as_float(value: FloatLike) -> float:
	"""
	The underlying float of a number or :class:`Float`.

	:raises TypeError: For anything else.
	"""
	if isinstance(value, (int, float)) and not isinstance(value, bool):
		return float(value)
	if isinstance(value, Float):
		return float(value.get())
	raise TypeError(f"expected a real number or Float, got {type(value)}")


def unit_symbol(value: Any) -> Optional[str]:
	"""Unit symbol of ``value`` when it carries one, else ``None``."""
	if isinstance(value, FloatDisplay):
		return value.symbol() or None
	return None


@dataclass(frozen=True)
class UncertainFloat(Generic[F]):
	"""
	A measured value with its absolute uncertainty.

	:param value: The measured value (float or :class:`Float`).
	:param uncertainty: Absolute uncertainty in the same unit.
	"""

	value: F
	uncertainty: F

	def _rebuild(self, number: float) -> Any:
		if isinstance(self.value, Quantity):
			return self.value.with_value(number)
		return number

	def min(self) -> F:
		"""Lowest value within the uncertainty."""
		return self._rebuild(as_float(self.value) - abs(as_float(self.uncertainty)))

	def max(self) -> F:
		"""Highest value within the uncertainty."""
		return self._rebuild(as_float(self.value) + abs(as_float(self.uncertainty)))

	def __str__(self) -> str:
		return f"{as_float(self.value)} ± {as_float(self.uncertainty)}"
