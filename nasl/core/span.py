# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span used by binding diagnostics.

A Span points at the Python declaration of a built-in function. It carries
best-effort file/line info and keeps the raw object it was derived from.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw object)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_function(cls, fn: Any) -> "Span":
		"""
		Construct a Span pointing at a function's `def` line.

		Builtins and other objects without a code object yield an unknown Span
		that still records the object in `raw`.
		"""
		if fn is None:
			return cls()
		if isinstance(fn, cls):
			return fn
		target = inspect.unwrap(getattr(fn, "__func__", fn))
		code = getattr(target, "__code__", None)
		if code is None:
			return cls(raw=fn)
		return cls(file=code.co_filename, line=code.co_firstlineno, column=1, raw=fn)

	def format(self) -> str:
		"""Render `file:line:column`, using `?` for unknown parts."""
		file = self.file or "<unknown>"
		line = "?" if self.line is None else str(self.line)
		column = "?" if self.column is None else str(self.column)
		return f"{file}:{line}:{column}"


__all__ = ["Span"]
