# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the binding generator.

A message plus a stable code (`binding.<problem>`) and span. Diagnostics are
collected per function; a function with any diagnostic is never registered.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents one problem found while binding a declaration."""

	message: str
	code: str | None = None  # e.g. "binding.variadic"
	# Phase label; "binding" for everything the decorator reports.
	phase: str | None = None
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self) -> str:
		code = f" [{self.code}]" if self.code else ""
		out = f"{self.span.format()}: error{code}: {self.message}"
		for note in self.notes:
			out += f"\n  note: {note}"
		return out

	def to_dict(self) -> dict:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}


__all__ = ["Diagnostic"]
