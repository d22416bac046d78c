# src/sciround/stats/__init__.py
"""
Batch helpers for tables of measurements (numpy/pandas).
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = ["coerce_vector", "round_many", "round_frame"]


def __getattr__(name: str):
	mod_of = {
		"coerce_vector": "sciround.stats.coerce",
		"round_many": "sciround.stats.table",
		"round_frame": "sciround.stats.table",
	}
	if name in mod_of:
		mod = import_module(mod_of[name])
		return getattr(mod, name)
	raise AttributeError(f"module 'sciround.stats' has no attribute {name!r}")


if TYPE_CHECKING:
	from .coerce import coerce_vector
	from .table import round_many, round_frame
