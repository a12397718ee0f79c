# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Dispatch of script calls to built-in functions.

Built-ins are grouped into named `FunctionSet`s (one per built-in module);
an `Executor` merges sets and invokes functions by script name through the
uniform `(register, context)` convention. Only functions produced by
`nasl_function` can be added, so a declaration that failed binding can never
be called.

Every `FunctionError` leaving `execute` is tagged with the script-level
function name. A failing call leaves the executor unchanged.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from nasl.builtin_utils.context import Context
from nasl.builtin_utils.errors import FunctionError, FunctionErrorKind
from nasl.builtin_utils.function.decorator import binding_spec
from nasl.builtin_utils.function.signature import FunctionBindingSpec
from nasl.builtin_utils.register import Register

logger = logging.getLogger(__name__)

BuiltinFn = Callable[[Register, Context], Any]


class FunctionSet:
	"""
	Named collection of built-ins.

	Functions are registered under their Python name unless `alias` is given;
	script names are case-sensitive, so `SHA256` and `sha256` are distinct.
	"""

	def __init__(self, name: str, functions: Iterable[BuiltinFn] = ()) -> None:
		self.name = name
		self._functions: Dict[str, BuiltinFn] = {}
		for fn in functions:
			self.add(fn)

	def add(self, fn: BuiltinFn, *, alias: Optional[str] = None) -> None:
		spec = binding_spec(fn)
		if spec is None:
			raise TypeError(f"{fn!r} is not a bound built-in; decorate it with @nasl_function")
		script_name = alias or spec.name
		if script_name in self._functions:
			raise ValueError(f"duplicate built-in '{script_name}' in function set '{self.name}'")
		self._functions[script_name] = fn

	def get(self, name: str) -> Optional[BuiltinFn]:
		return self._functions.get(name)

	def names(self) -> List[str]:
		return sorted(self._functions)

	def __iter__(self) -> Iterator[Tuple[str, BuiltinFn]]:
		return iter(sorted(self._functions.items()))

	def __len__(self) -> int:
		return len(self._functions)


class Executor:
	def __init__(self, *sets: FunctionSet) -> None:
		self._sets: List[FunctionSet] = []
		self._by_name: Dict[str, Tuple[FunctionSet, BuiltinFn]] = {}
		for fs in sets:
			self.add_set(fs)

	def add_set(self, fs: FunctionSet) -> None:
		clashes = [name for name in fs.names() if name in self._by_name]
		if clashes:
			owners = sorted({self._by_name[n][0].name for n in clashes})
			raise ValueError(
				f"function set '{fs.name}' redefines {', '.join(clashes)} (already provided by {', '.join(owners)})"
			)
		self._sets.append(fs)
		for name, fn in fs:
			self._by_name[name] = (fs, fn)
		logger.debug("added function set '%s' (%d function(s))", fs.name, len(fs))

	def contains(self, name: str) -> bool:
		return name in self._by_name

	def names(self) -> List[str]:
		return sorted(self._by_name)

	def spec(self, name: str) -> FunctionBindingSpec:
		spec = binding_spec(self._lookup(name))
		if spec is None:
			raise AssertionError(f"built-in '{name}' lost its binding spec")
		return spec

	def function(self, name: str) -> BuiltinFn:
		return self._lookup(name)

	def sets(self) -> List[FunctionSet]:
		return list(self._sets)

	def _lookup(self, name: str) -> BuiltinFn:
		entry = self._by_name.get(name)
		if entry is None:
			raise FunctionError(FunctionErrorKind.UNKNOWN_FUNCTION, "undefined function", function=name)
		return entry[1]

	def execute(self, name: str, register: Register, context: Context) -> Any:
		"""
		Call built-in `name`. For coroutine built-ins the awaitable is returned
		unawaited; use `execute_async` from async code.
		"""
		fn = self._lookup(name)
		logger.debug("call %s%r", name, register)
		try:
			return fn(register, context)
		except FunctionError as err:
			self._log_failure(name, err)
			tagged = err.with_function(name)
			if tagged is err:
				raise
			raise tagged from err

	async def execute_async(self, name: str, register: Register, context: Context) -> Any:
		fn = self._lookup(name)
		logger.debug("call %s%r", name, register)
		try:
			result = fn(register, context)
			if inspect.isawaitable(result):
				result = await result
			return result
		except FunctionError as err:
			self._log_failure(name, err)
			tagged = err.with_function(name)
			if tagged is err:
				raise
			raise tagged from err

	@staticmethod
	def _log_failure(name: str, err: FunctionError) -> None:
		if err.kind.is_binding_failure:
			logger.debug("binding of %s failed: %s", name, err.format_human())
		else:
			logger.debug("%s failed: %s", name, err.format_human())


__all__ = ["BuiltinFn", "Executor", "FunctionSet"]
