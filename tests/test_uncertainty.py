"""Tests for :func:`sciround.round_with_uncertainty` and :class:`UncertainDigits`."""

from __future__ import annotations

import math

import pytest

pytest.importorskip("numpy")

from sciround import FormatOptions, Quantity, Second, UncertainFloat, round_with_uncertainty  # noqa: E402
from sciround.errors import InvalidFloatError  # noqa: E402
from sciround.rounding import Digits, Place, UncertainDigits  # noqa: E402
from sciround.units import Meter  # noqa: E402


@pytest.mark.parametrize(
	("value", "uncertainty", "expected"),
	[
		(1024.05, 0.015555312, "1024.05 ± 0.016"),
		(1024.0511231255, 0.015555312, "1024.051 ± 0.016"),
		(9.81234, 0.0432, "9.81 ± 0.04"),
		(12.34, 1.0, "12 ± 1"),
		(3.7, 0.0, "4 ± 0"),
		(6024.0, 3000.0, "6000 ± 3000"),
		(1234.5, 27.0, "1234 ± 27"),
		(1235.5, 27.0, "1236 ± 27"),
		(-0.5, 0.15, "-0.5 ± 0.15"),
		(12.0, 250.0, "10 ± 250"),
		(12.0, 600.0, "0 ± 600"),
		(82.0, 600.0, "100 ± 600"),
	],
)
def test_round_with_uncertainty(value: float, uncertainty: float, expected: str):
	assert round_with_uncertainty(value, uncertainty) == expected


def test_uncertainty_keeps_two_figures_only_for_leading_one_or_two():
	assert round_with_uncertainty(5.4321, 0.123) == "5.43 ± 0.12"
	assert round_with_uncertainty(5.4321, 0.234) == "5.43 ± 0.23"
	assert round_with_uncertainty(5.4321, 0.345) == "5.4 ± 0.3"


def test_value_with_units_reuses_its_symbol():
	measured = Quantity(9.81234, Second)
	assert round_with_uncertainty(measured, 0.0432) == "9.81 s ± 0.04 s"
	assert round_with_uncertainty(measured, Quantity(0.0432, Second)) == "9.81 s ± 0.04 s"


def test_explicit_unit_and_grouped_style():
	grouped = FormatOptions(unit_style="grouped")
	assert round_with_uncertainty(9.81234, 0.0432, unit="s", options=grouped) == "(9.81 ± 0.04) s"
	assert round_with_uncertainty(Quantity(9.81234, Meter), 0.0432, unit="km") == "9.81 km ± 0.04 km"


def test_custom_separator():
	ascii_options = FormatOptions(separator=" +/- ")
	assert round_with_uncertainty(9.81234, 0.0432, options=ascii_options) == "9.81 +/- 0.04"


def test_uncertain_float_as_single_argument():
	assert round_with_uncertainty(UncertainFloat(1024.05, 0.015555312)) == "1024.05 ± 0.016"
	measured = UncertainFloat(Quantity(9.81234, Second), Quantity(0.0432, Second))
	assert round_with_uncertainty(measured) == "9.81 s ± 0.04 s"


def test_missing_uncertainty_is_a_type_error():
	with pytest.raises(TypeError):
		round_with_uncertainty(1.5)


@pytest.mark.parametrize(
	("value", "uncertainty"),
	[(math.nan, 0.1), (1.0, math.inf), (-math.inf, 0.1), (1.0, math.nan)],
)
def test_non_finite_inputs_raise(value: float, uncertainty: float):
	with pytest.raises(InvalidFloatError):
		round_with_uncertainty(value, uncertainty)


def test_negative_uncertainty_keeps_its_sign():
	assert round_with_uncertainty(9.81234, -0.0432) == "9.81 ± -0.04"


def test_uncertain_digits_rounds_both_to_the_same_place():
	pair = UncertainDigits.from_floats(1024.05, 0.015555312)
	assert pair.place() == Place(3)

	value, uncertainty = pair.rounded()
	assert value == Digits.from_float(1024.05)
	assert str(uncertainty) == "0.016"
	assert pair.rounded().format() == "1024.05 ± 0.016"
	assert pair.rounded().format("m") == "1024.05 m ± 0.016 m"


def test_uncertain_digits_format_does_not_round():
	pair = UncertainDigits.from_floats(1024.05, 0.015555312)
	assert pair.format() == "1024.05 ± 0.015555312"
