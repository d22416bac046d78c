# src/sciround/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

np = numpy = lazy_module("numpy", install="pip install numpy", reason="shortest decimal text of floats")
pd = pandas = lazy_module("pandas", install="pip install pandas", reason="rounding measurement tables")

__all__ = [
	"LazyModule", "lazy_module",
	"np", "numpy", "pd", "pandas",
]
