# src/sciround/stats/table.py

from __future__ import annotations

from typing import List, Optional, Union

from ..config.options import FormatOptions
from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore
from ..logutil import get_logger
from ..rounding.uncertainty import round_with_uncertainty
from .coerce import DataLike, coerce_vector

LOG = get_logger(__name__)

__all__ = ["round_many", "round_frame"]


def round_many(
		values: DataLike,
		uncertainties: Union[DataLike, float],
		*,
		unit: Optional[str] = None,
		options: Optional[FormatOptions] = None
) -> List[str]:
	"""
	Apply :func:`round_with_uncertainty` element-wise.

	:param values: Measured values (anything :func:`coerce_vector` accepts).
	:param uncertainties: Matching uncertainties, or one number shared by all values.
	:param unit: Optional unit symbol for every entry.
	:param options: Formatting options.
	:return: One rendered string per value.
	:raises ValueError: If the lengths differ or the data are not numeric.
	:raises InvalidFloatError: If any value or uncertainty is NaN or infinite.
	"""
	x = coerce_vector(values)
	if isinstance(uncertainties, (int, float)) and not isinstance(uncertainties, bool):
		u = np.full(x.shape, float(uncertainties))
	else:
		u = coerce_vector(uncertainties)
	if u.shape != x.shape:
		raise ValueError(f"Got {x.size} value(s) but {u.size} uncertainty(ies).")

	LOG.debug("Rounding %d measurement(s)", x.size)
	return [
		round_with_uncertainty(float(v), float(e), unit=unit, options=options)
		for v, e in zip(x, u)
	]


def round_frame(
		df: "pd.DataFrame",
		value: Union[int, str],
		uncertainty: Union[int, str],
		*,
		unit: Optional[str] = None,
		options: Optional[FormatOptions] = None
) -> "pd.Series":
	"""
	Render two DataFrame columns as ``"<value> ± <uncertainty>"`` strings.

	:param df: Table holding both columns.
	:param value: Column (name or 0-based index) with the measured values.
	:param uncertainty: Column with the absolute uncertainties.
	:param unit: Optional unit symbol.
	:param options: Formatting options.
	:return: Series of strings with the index of ``df``.
	"""
	if not isinstance(df, pd.DataFrame):
		raise ValueError(f"round_frame requires a pandas DataFrame, got {type(df)}")
	texts = round_many(
		coerce_vector(df, column=value),
		coerce_vector(df, column=uncertainty),
		unit=unit,
		options=options,
	)
	return pd.Series(texts, index=df.index, dtype=object)
