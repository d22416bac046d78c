"""Tests for :mod:`sciround.units`."""

from __future__ import annotations

import pytest

from sciround.units import (
	Degree,
	Float,
	FloatDisplay,
	Hour,
	Micrometer,
	Quantity,
	Second,
	UncertainFloat,
	as_float,
	unit_symbol,
)


class Reading:
	"""Plain object satisfying the Float protocol without a unit."""

	def __init__(self, value: float) -> None:
		self.value = value

	def get(self) -> float:
		return self.value


def test_quantity_exposes_value_and_names():
	t = Quantity(2.5, Hour)
	assert t.get() == 2.5
	assert float(t) == 2.5
	assert (t.symbol(), t.singular(), t.plural()) == ("hr", "hour", "hours")
	assert str(t) == "2.5 hr"
	assert str(Quantity(3.0, Micrometer)) == "3.0 μm"
	assert Quantity(90.0, Degree).symbol() == "°"


def test_quantity_satisfies_protocols():
	t = Quantity(1.0, Second)
	assert isinstance(t, Float)
	assert isinstance(t, FloatDisplay)
	assert isinstance(Reading(1.0), Float)
	assert not isinstance(Reading(1.0), FloatDisplay)


def test_with_value_keeps_the_unit():
	t = Quantity(1.0, Second).with_value(4)
	assert t == Quantity(4.0, Second)


def test_as_float():
	assert as_float(3) == 3.0
	assert as_float(2.5) == 2.5
	assert as_float(Quantity(1.5, Second)) == 1.5
	assert as_float(Reading(0.25)) == 0.25


@pytest.mark.parametrize("value", ["1.0", None, True, [1.0]])
def test_as_float_rejects_other_types(value):
	with pytest.raises(TypeError):
		as_float(value)


def test_unit_symbol():
	assert unit_symbol(Quantity(1.0, Second)) == "s"
	assert unit_symbol(Reading(1.0)) is None
	assert unit_symbol(1.0) is None


def test_uncertain_float_bounds():
	plain = UncertainFloat(5.0, 1.0)
	assert plain.min() == 4.0
	assert plain.max() == 6.0
	assert str(plain) == "5.0 ± 1.0"

	negative = UncertainFloat(5.0, -1.0)
	assert negative.min() == 4.0
	assert negative.max() == 6.0


def test_uncertain_float_bounds_keep_units():
	measured = UncertainFloat(Quantity(10.0, Second), Quantity(0.5, Second))
	assert measured.min() == Quantity(9.5, Second)
	assert measured.max() == Quantity(10.5, Second)
	assert str(measured) == "10.0 ± 0.5"
