"""Tests for :mod:`sciround.rounding.digit` and :mod:`sciround.rounding.digit_slice`."""

from __future__ import annotations

import pytest

from sciround.errors import InvalidDigitError
from sciround.rounding.digit import Digit, Sign
from sciround.rounding.digit_slice import DigitSlice


def digits_of(text: str):
	return tuple(Digit.from_char(ch) for ch in text)


@pytest.mark.parametrize("value", range(10))
def test_digit_new_char_and_int_agree(value: int):
	digit = Digit.new(value)
	assert int(digit) == value
	assert digit.to_char() == str(value)
	assert str(digit) == str(value)
	assert Digit.from_char(str(value)) is digit


@pytest.mark.parametrize("value", [10, 11, 255, -1, True, 1.0, "1", None])
def test_digit_new_rejects_non_digits(value):
	with pytest.raises(InvalidDigitError):
		Digit.new(value)


@pytest.mark.parametrize("char", ["a", "b", "\0", "10", "", " ", "٣"])
def test_digit_from_char_rejects_other_characters(char: str):
	with pytest.raises(InvalidDigitError):
		Digit.from_char(char)


def test_invalid_digit_error_is_value_error():
	with pytest.raises(ValueError):
		Digit.new(42)


def test_digits_are_totally_ordered():
	assert Digit.TWO < Digit.NINE
	assert sorted([Digit.SEVEN, Digit.ZERO, Digit.FOUR]) == [Digit.ZERO, Digit.FOUR, Digit.SEVEN]
	assert not Digit.FIVE.is_even()
	assert Digit.EIGHT.is_even()


def test_sign_prefix_and_detection():
	assert Sign.POSITIVE.prefix == ""
	assert Sign.NEGATIVE.prefix == "-"
	assert str(Sign.NEGATIVE) == "-"
	assert Sign.of(3.0) is Sign.POSITIVE
	assert Sign.of(0.0) is Sign.POSITIVE
	assert Sign.of(-0.0) is Sign.NEGATIVE
	assert Sign.of(-2) is Sign.NEGATIVE


SLICE_102405 = DigitSlice(digits_of("102405"))


def test_digit_slice_as_integer():
	assert int(SLICE_102405) == 102_405
	assert len(SLICE_102405) == 6
	assert SLICE_102405.get() == digits_of("102405")


@pytest.mark.parametrize(
	("start", "amount", "expected"),
	[
		("102405", 1, "102406"),
		("102405", 100_000, "202405"),
		# grows when it needs to
		("9", 1, "10"),
		("999", 1, "1000"),
		# does not keep leading zeros
		("09", 1, "10"),
		("009", 1, "10"),
		("00", 0, "0"),
	],
)
def test_digit_slice_add(start: str, amount: int, expected: str):
	assert DigitSlice.of(digits_of(start)).add(amount) == digits_of(expected)


def test_digit_slice_add_rejects_negative_amounts():
	with pytest.raises(ValueError):
		SLICE_102405.add(-1)
