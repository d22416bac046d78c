# src/sciround/imports/lazyproxy.py

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Any, List, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Module stand-in that performs the real import on first attribute access.

	Keeps ``import sciround`` cheap: numpy and pandas are only loaded once a
	float is actually decomposed or a table is rounded. A missing dependency
	surfaces as an ``ImportError`` that names the package to install.
	"""

	__slots__ = ("_name", "_install", "_reason", "_module")

	def __init__(self, name: str, *, install: Optional[str] = None, reason: Optional[str] = None) -> None:
		self._name = name
		self._install = install
		self._reason = reason
		self._module: Optional[ModuleType] = None

	@property
	def is_loaded(self) -> bool:
		return self._module is not None

	def load(self) -> ModuleType:
		"""
		Import the target module (once) and return it.

		:raises ImportError: With an install hint when the module is unavailable.
		"""
		if self._module is None:
			try:
				self._module = importlib.import_module(self._name)
			except ImportError as exc:
				hint = f"sciround needs '{self._name}'"
				if self._reason:
					hint += f" for {self._reason}"
				if self._install:
					hint += f"; install it with '{self._install}'"
				raise ImportError(hint + ".") from exc
		return self._module

	def __getattr__(self, item: str) -> Any:
		return getattr(self.load(), item)

	def __dir__(self) -> List[str]:
		return dir(self.load())

	def __repr__(self) -> str:
		state = "loaded" if self.is_loaded else "not loaded"
		return f"<LazyModule {self._name!r} ({state})>"


def lazy_module(name: str, *, install: Optional[str] = None, reason: Optional[str] = None) -> LazyModule:
	"""
	Create a lazy proxy for ``name``.

	:param name: Fully qualified module name.
	:param install: Installation hint shown when the import fails.
	:param reason: What the dependency is needed for.
	:return: :class:`LazyModule` instance.
	"""
	return LazyModule(name, install=install, reason=reason)
