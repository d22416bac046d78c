"""
SciRound: significant-figure rounding for lab reports.

Top-level API keeps imports lazy:

    from sciround import round_with_uncertainty
    round_with_uncertainty(1024.05, 0.015555312)  # '1024.05 ± 0.016'

    from sciround import Digits, Place
    str(Digits.from_float(999.0).round_to_place(Place(-2)))  # '1000'

    from sciround import Quantity, Second
    round_with_uncertainty(Quantity(9.81234, Second), 0.0432)  # '9.81 s ± 0.04 s'

    # tables of measurements (numpy/pandas)
    from sciround import round_frame
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("sciround")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# rounding
	"Digit", "Sign", "DigitSlice", "Place", "SplitFloat", "Digits",
	"UncertainDigits", "round_with_uncertainty",
	# units
	"Quantity", "UncertainFloat", "Second", "Meter",
	# config / logging
	"FormatOptions", "load_format_options", "configure_logging",
	# tables
	"round_many", "round_frame",
	# namespaces
	"rounding", "units", "errors", "config", "stats", "logutil", "imports",
]

_ROUNDING_EXPORTS = {
	"Digit", "Sign", "DigitSlice", "Place", "SplitFloat", "Digits",
	"UncertainDigits", "round_with_uncertainty",
}
_UNITS_EXPORTS = {"Quantity", "UncertainFloat", "Second", "Meter"}
_CONFIG_EXPORTS = {"FormatOptions", "load_format_options"}
_STATS_EXPORTS = {"round_many", "round_frame"}
_NAMESPACES = {"rounding", "units", "errors", "config", "stats", "logutil", "imports"}


def __getattr__(name: str):
	if name in _ROUNDING_EXPORTS:
		return getattr(import_module("sciround.rounding"), name)
	if name in _UNITS_EXPORTS:
		return getattr(import_module("sciround.units"), name)
	if name in _CONFIG_EXPORTS:
		return getattr(import_module("sciround.config"), name)
	if name in _STATS_EXPORTS:
		return getattr(import_module("sciround.stats"), name)
	if name == "configure_logging":
		return import_module("sciround.logutil").configure_logging
	if name in _NAMESPACES:
		return import_module(f"sciround.{name}")

	raise AttributeError(f"module 'sciround' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import rounding, units, errors, config, stats, logutil, imports  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .config import FormatOptions, load_format_options  # noqa: F401
	from .rounding import (  # noqa: F401
		Digit, Sign, DigitSlice, Place, SplitFloat, Digits,
		UncertainDigits, round_with_uncertainty,
	)
	from .units import Quantity, UncertainFloat, Second, Meter  # noqa: F401
	from .stats import round_many, round_frame  # noqa: F401
