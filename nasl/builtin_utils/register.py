# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Argument register: the actual arguments of one script call.

The interpreter builds one Register per call. Positional arguments are kept in
call-site order; named arguments by name. Values are the engine's dynamic
script values (None, bool, int, str, bytes, lists and dicts of those). The
register is never mutated once built.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional


class Register:
	def __init__(self, positional: Iterable[Any] = (), named: Optional[Mapping[str, Any]] = None) -> None:
		self._positional: tuple[Any, ...] = tuple(positional)
		self._named: Mapping[str, Any] = MappingProxyType(dict(named or {}))

	@classmethod
	def from_args(cls, *args: Any, **kwargs: Any) -> "Register":
		"""`Register.from_args(1, 2, port=22)` mirrors the script call `f(1, 2, port: 22)`."""
		return cls(args, kwargs)

	def positional(self) -> tuple[Any, ...]:
		return self._positional

	def positional_at(self, position: int) -> Any:
		"""Value at `position`, or None when the call supplied fewer arguments."""
		if 0 <= position < len(self._positional):
			return self._positional[position]
		return None

	def named(self, name: str) -> Any:
		return self._named.get(name)

	def named_items(self) -> Mapping[str, Any]:
		return self._named

	def __len__(self) -> int:
		return len(self._positional) + len(self._named)

	def __repr__(self) -> str:
		return f"Register(positional={list(self._positional)!r}, named={dict(self._named)!r})"


__all__ = ["Register"]
