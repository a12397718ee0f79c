# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error taxonomy for built-in function calls.

Two strata:

- `BindingError` is raised while a built-in is being registered (decorator
  time). It means the Python declaration is malformed; the function is never
  registered and the error never reaches a script.
- `FunctionError` is raised while a built-in is being called. Resolution
  failures come from the generated binding prologue before the body runs;
  `WRONG_ARGUMENT` and `DIRTY` are raised by bodies after binding succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from nasl.core.diagnostics import Diagnostic


class FunctionErrorKind(Enum):
	MISSING_REQUIRED_POSITIONAL = "missing_required_positional"
	WRONG_ARGUMENT_COUNT = "wrong_argument_count"
	MISSING_REQUIRED_NAMED = "missing_required_named"
	WRONG_TYPE = "wrong_type"
	WRONG_ARGUMENT = "wrong_argument"
	DIRTY = "dirty"
	UNKNOWN_FUNCTION = "unknown_function"

	@property
	def is_missing(self) -> bool:
		return self in _MISSING_KINDS

	@property
	def is_wrong_argument_class(self) -> bool:
		"""Structurally invalid argument: wrong type or unrecognized value."""
		return self in (FunctionErrorKind.WRONG_TYPE, FunctionErrorKind.WRONG_ARGUMENT)

	@property
	def is_binding_failure(self) -> bool:
		"""A scripting error (bad call), as opposed to a runtime condition."""
		return self.is_missing or self.is_wrong_argument_class


_MISSING_KINDS = frozenset(
	{
		FunctionErrorKind.MISSING_REQUIRED_POSITIONAL,
		FunctionErrorKind.WRONG_ARGUMENT_COUNT,
		FunctionErrorKind.MISSING_REQUIRED_NAMED,
	}
)


# Not frozen: contextlib assigns __traceback__ when an exception crosses a
# generator-based context manager.
@dataclass(eq=False)
class FunctionError(Exception):
	"""
	A classified failure of one built-in call.

	`function` is filled in by the executor; `parameter` by the resolver when
	the failing parameter is known.
	"""

	kind: FunctionErrorKind
	detail: str
	function: str | None = None
	parameter: str | None = None

	def __str__(self) -> str:
		return self.format_human()

	@classmethod
	def wrong_argument(cls, detail: str, *, parameter: str | None = None) -> "FunctionError":
		return cls(FunctionErrorKind.WRONG_ARGUMENT, detail, parameter=parameter)

	@classmethod
	def dirty(cls, detail: str) -> "FunctionError":
		return cls(FunctionErrorKind.DIRTY, detail)

	def with_function(self, name: str) -> "FunctionError":
		if self.function == name:
			return self
		return replace(self, function=name)

	def to_dict(self) -> dict[str, Any]:
		return {
			"kind": self.kind.value,
			"detail": self.detail,
			"function": self.function,
			"parameter": self.parameter,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.kind.value}]"]
		if self.function:
			parts.append(f"{self.function}:")
		parts.append(self.detail)
		if self.parameter:
			parts.append(f"(parameter '{self.parameter}')")
		return " ".join(parts)


@dataclass(eq=False)
class BindingError(Exception):
	"""A built-in function declaration that cannot be bound."""

	function: str
	diagnostics: list[Diagnostic] = field(default_factory=list)

	def __str__(self) -> str:
		return self.format_human()

	def format_human(self) -> str:
		lines = [f"cannot bind built-in function '{self.function}'"]
		lines.extend(d.format_human() for d in self.diagnostics)
		return "\n".join(lines)


__all__ = ["FunctionErrorKind", "FunctionError", "BindingError"]
