# src/sciround/rounding/__init__.py
"""
Digit-level rounding of floating-point values.

See :class:`~sciround.rounding.digits.Digits` for the rounding engine and
:func:`round_with_uncertainty` for lab-report style output.
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	"Digit", "Sign", "DigitSlice", "Place", "SplitFloat",
	"Digits", "float_to_text",
	"UncertainDigits", "round_with_uncertainty",
]

_MODULE_OF = {
	"Digit": "sciround.rounding.digit",
	"Sign": "sciround.rounding.digit",
	"DigitSlice": "sciround.rounding.digit_slice",
	"Place": "sciround.rounding.place",
	"SplitFloat": "sciround.rounding.place",
	"Digits": "sciround.rounding.digits",
	"float_to_text": "sciround.rounding.digits",
	"UncertainDigits": "sciround.rounding.uncertainty",
	"round_with_uncertainty": "sciround.rounding.uncertainty",
}


def __getattr__(name: str):
	if name in _MODULE_OF:
		return getattr(import_module(_MODULE_OF[name]), name)
	raise AttributeError(f"module 'sciround.rounding' has no attribute {name!r}")


if TYPE_CHECKING:
	from .digit import Digit, Sign
	from .digit_slice import DigitSlice
	from .place import Place, SplitFloat
	from .digits import Digits, float_to_text
	from .uncertainty import UncertainDigits, round_with_uncertainty
