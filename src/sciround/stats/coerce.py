# src/sciround/stats/coerce.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore
from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = ["DataLike", "coerce_vector"]

ArrayLike1D = Union[Sequence[float], "np.ndarray", "pd.Series"]  # type: ignore[name-defined]
DataLike = Union[ArrayLike1D, "pd.DataFrame", Mapping[str, float]]  # type: ignore[name-defined]


def _numeric(a: "np.ndarray") -> "np.ndarray":
	if not np.issubdtype(a.dtype, np.number):
		raise ValueError(f"Expected numeric data, got dtype={a.dtype!r}")
	if a.ndim != 1:
		raise ValueError(f"Expected 1D array-like; got ndim={a.ndim}")
	if a.size == 0:
		raise ValueError("Empty input is not valid.")
	return a


def _column(df: "pd.DataFrame", column: Optional[Union[int, str]]) -> "pd.Series":
	if column is None:
		if df.shape[1] != 1:
			raise ValueError(
				f"DataFrame has {df.shape[1]} columns; please specify `column` (name or 0-based index)."
			)
		return df.iloc[:, 0]
	try:
		return df.iloc[:, column] if isinstance(column, int) else df[column]
	except (KeyError, IndexError) as exc:
		LOG.error("Failed to select column %r: %s", column, exc)
		raise ValueError(f"Invalid column selector: {column!r}") from exc


def coerce_vector(data: DataLike, *, column: Optional[Union[int, str]] = None) -> "np.ndarray":
	"""
	Convert a data container to a 1D float array.

	Accepts a sequence, ndarray, Series, mapping (values in insertion order) or a
	DataFrame (single column, or the one picked by ``column``).

	:param data: Input data.
	:param column: Column name or 0-based index when ``data`` is a DataFrame.
	:return: 1D ``float`` array; NaN/inf are kept for the caller to reject.
	:raises ValueError: On empty, non-numeric or unsupported input.
	"""
	if isinstance(data, pd.DataFrame):
		data = _column(data, column)
	if isinstance(data, pd.Series):
		return _numeric(data.to_numpy(dtype=float))
	if isinstance(data, np.ndarray):
		items: Any = data
	elif isinstance(data, Mapping):
		items = list(data.values())
	elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
		items = list(data)
	else:
		raise ValueError(f"Unsupported data type: {type(data)}")
	try:
		return _numeric(np.asarray(items, dtype=float))
	except (TypeError, ValueError) as exc:
		raise ValueError(f"Expected numeric data: {exc}") from exc
