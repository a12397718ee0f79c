# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Runtime argument resolution.

The generated binding prologue of every built-in calls one of the six
`get_*_arg` functions per parameter. Resolution is synchronous, performs no
I/O and only reads the register.

Lookup rules:
  - A register entry holding None (NASL NULL) counts as absent.
  - Maybe-named parameters are looked up by name first, then by position.
  - Optional parameters never raise a missing-argument error; they resolve to
    None when absent.
  - A present value that does not convert to the declared type raises
    WRONG_TYPE, whether or not the parameter is optional.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, get_args, get_origin

from nasl.builtin_utils.errors import FunctionError, FunctionErrorKind
from nasl.builtin_utils.register import Register

_SCALARS = (bool, int, str, bytes)
_BARE_CONTAINERS = (list, tuple, dict)


def has_value_hook(ty: Any) -> bool:
	"""Classes that convert script values themselves via `from_nasl_value`."""
	return isinstance(ty, type) and callable(getattr(ty, "from_nasl_value", None))


def is_supported_type(ty: Any) -> bool:
	"""Whether `convert_value` knows how to produce `ty`."""
	if ty is Any or ty is object:
		return True
	if ty in _SCALARS or ty in _BARE_CONTAINERS:
		return True
	origin = get_origin(ty)
	args = get_args(ty)
	if origin is list:
		return len(args) == 1 and is_supported_type(args[0])
	if origin is tuple:
		return len(args) == 2 and args[1] is Ellipsis and is_supported_type(args[0])
	if origin is dict:
		return len(args) == 2 and args[0] is str and is_supported_type(args[1])
	if origin is None:
		return has_value_hook(ty)
	return False


def type_name(ty: Any) -> str:
	if ty is Any:
		return "any"
	if get_origin(ty) is not None:
		return repr(ty).replace("typing.", "")
	return getattr(ty, "__name__", repr(ty))


def value_type_name(value: Any) -> str:
	if value is None:
		return "NULL"
	return type(value).__name__


def _wrong_type(ty: Any, value: Any, param: Optional[str]) -> FunctionError:
	return FunctionError(
		FunctionErrorKind.WRONG_TYPE,
		f"expected {type_name(ty)}, got {value_type_name(value)}",
		parameter=param,
	)


def convert_value(value: Any, ty: Any, *, param: Optional[str] = None) -> Any:
	"""
	Convert a script value to `ty` without truncation or reinterpretation.

	str -> bytes (UTF-8) is the only cross-type conversion: script strings are
	byte strings. Everything else must already have the right shape.
	"""
	if ty is Any or ty is object:
		return value
	if ty is bool:
		if isinstance(value, bool):
			return value
		raise _wrong_type(ty, value, param)
	if ty is int:
		if isinstance(value, int) and not isinstance(value, bool):
			return value
		raise _wrong_type(ty, value, param)
	if ty is str:
		if isinstance(value, str):
			return value
		raise _wrong_type(ty, value, param)
	if ty is bytes:
		if isinstance(value, bytes):
			return value
		if isinstance(value, bytearray):
			return bytes(value)
		if isinstance(value, str):
			return value.encode("utf-8")
		raise _wrong_type(ty, value, param)

	if ty is list or ty is tuple:
		if isinstance(value, (list, tuple)):
			return ty(value)
		raise _wrong_type(ty, value, param)
	if ty is dict:
		if isinstance(value, dict):
			return dict(value)
		raise _wrong_type(ty, value, param)

	origin = get_origin(ty)
	args = get_args(ty)
	if origin is list or origin is tuple:
		if not isinstance(value, (list, tuple)):
			raise _wrong_type(ty, value, param)
		items = [convert_value(v, args[0], param=param) for v in value]
		return items if origin is list else tuple(items)
	if origin is dict:
		if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
			raise _wrong_type(ty, value, param)
		return {k: convert_value(v, args[1], param=param) for k, v in value.items()}

	if has_value_hook(ty):
		try:
			return ty.from_nasl_value(value)
		except FunctionError as err:
			if err.parameter is None and param is not None:
				raise replace(err, parameter=param) from None
			raise
		except (TypeError, ValueError) as err:
			raise FunctionError(FunctionErrorKind.WRONG_TYPE, str(err), parameter=param) from err

	raise AssertionError(f"unsupported declared type {ty!r} reached the resolver")


def _lookup_maybe_named(register: Register, name: str, position: int) -> Any:
	value = register.named(name)
	if value is None:
		value = register.positional_at(position)
	return value


def get_positional_arg(register: Register, position: int, required_count: int, ty: Any, *, param: Optional[str] = None) -> Any:
	value = register.positional_at(position)
	if value is None:
		got = len(register.positional())
		if position < required_count and got < required_count:
			raise FunctionError(
				FunctionErrorKind.WRONG_ARGUMENT_COUNT,
				f"expected {required_count} positional argument(s), got {got}",
				parameter=param,
			)
		raise FunctionError(
			FunctionErrorKind.MISSING_REQUIRED_POSITIONAL,
			f"missing positional argument at position {position}",
			parameter=param,
		)
	return convert_value(value, ty, param=param)


def get_optional_positional_arg(register: Register, position: int, ty: Any, *, param: Optional[str] = None) -> Any:
	value = register.positional_at(position)
	if value is None:
		return None
	return convert_value(value, ty, param=param)


def get_named_arg(register: Register, name: str, ty: Any) -> Any:
	value = register.named(name)
	if value is None:
		raise FunctionError(
			FunctionErrorKind.MISSING_REQUIRED_NAMED,
			f"missing named argument '{name}'",
			parameter=name,
		)
	return convert_value(value, ty, param=name)


def get_optional_named_arg(register: Register, name: str, ty: Any) -> Any:
	value = register.named(name)
	if value is None:
		return None
	return convert_value(value, ty, param=name)


def get_maybe_named_arg(register: Register, name: str, position: int, ty: Any) -> Any:
	value = _lookup_maybe_named(register, name, position)
	if value is None:
		raise FunctionError(
			FunctionErrorKind.MISSING_REQUIRED_NAMED,
			f"missing argument '{name}' (by name, or positional at position {position})",
			parameter=name,
		)
	return convert_value(value, ty, param=name)


def get_optional_maybe_named_arg(register: Register, name: str, position: int, ty: Any) -> Any:
	value = _lookup_maybe_named(register, name, position)
	if value is None:
		return None
	return convert_value(value, ty, param=name)


__all__ = [
	"convert_value",
	"get_maybe_named_arg",
	"get_named_arg",
	"get_optional_maybe_named_arg",
	"get_optional_named_arg",
	"get_optional_positional_arg",
	"get_positional_arg",
	"has_value_hook",
	"is_supported_type",
	"type_name",
]
