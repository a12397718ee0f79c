# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Signature analysis for built-in functions.

Turns a Python function declaration plus its binding annotations into a
`FunctionBindingSpec`: one `ParameterSpec` per script-visible parameter, in
declaration order. This runs once, when the built-in is registered.

Positions are declaration indexes among *all* parameters. Named parameters
still occupy a position, so `f(a, port, b)` with `port` named binds `b` to
script position 2, not 1.

Parameters annotated `Register` or `Context` are injected by the dispatcher
rather than resolved. They must come after every script-visible parameter so
they never shift a position.
"""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Tuple, Union, get_args, get_origin

from nasl.builtin_utils.context import Context
from nasl.builtin_utils.errors import BindingError
from nasl.builtin_utils.function.attrs import BindingAttrs, BindingKind, Positional
from nasl.builtin_utils.function.resolve import is_supported_type, type_name
from nasl.builtin_utils.register import Register
from nasl.core.diagnostics import Diagnostic
from nasl.core.span import Span

RESERVED_IDENTS = frozenset({"register", "context"})
RESERVED_PREFIX = "__nasl_"
_RECEIVER_NAMES = ("self", "cls")


@dataclass(frozen=True)
class ParameterSpec:
	ident: str
	ty: Any  # effective type (Optional[...] already unwrapped)
	optional: bool
	kind: BindingKind
	keyword_only: bool = False


@dataclass(frozen=True)
class InjectedParam:
	ident: str
	source: str  # "register" | "context"
	keyword_only: bool = False


@dataclass(frozen=True)
class FunctionBindingSpec:
	name: str
	qualname: str
	params: Tuple[ParameterSpec, ...]
	injected: Tuple[InjectedParam, ...] = ()
	is_async: bool = False
	return_type: Any = field(default=inspect.Signature.empty, compare=False)

	@property
	def required_positional_count(self) -> int:
		# Maybe-named parameters are not counted.
		return sum(1 for p in self.params if isinstance(p.kind, Positional) and not p.optional)

	def describe(self) -> list[dict[str, Any]]:
		"""JSON-friendly view of the parameter table."""
		out: list[dict[str, Any]] = []
		for p in self.params:
			entry: dict[str, Any] = {
				"ident": p.ident,
				"type": type_name(p.ty),
				"optional": p.optional,
				"kind": type(p.kind).__name__,
			}
			position = getattr(p.kind, "position", None)
			if position is not None:
				entry["position"] = position
			name = getattr(p.kind, "name", None)
			if name is not None:
				entry["name"] = name
			out.append(entry)
		return out


def unwrap_optional(ty: Any) -> Tuple[bool, Any]:
	"""`Optional[T]` / `T | None` -> (True, T); anything else -> (False, ty)."""
	origin = get_origin(ty)
	if origin is Union or origin is types.UnionType:
		args = get_args(ty)
		non_none = [a for a in args if a is not type(None)]
		if len(args) == 2 and len(non_none) == 1:
			return True, non_none[0]
	return False, ty


def _diag(code: str, message: str, span: Span, notes: list[str] | None = None) -> Diagnostic:
	return Diagnostic(message=message, code=f"binding.{code}", phase="binding", span=span, notes=notes or [])


def analyze_function(fn: Any, attrs: BindingAttrs, *, diagnostics: list[Diagnostic] | None = None) -> FunctionBindingSpec:
	"""
	Build the binding spec for `fn` or raise `BindingError`.

	All problems in one declaration are collected before raising so the
	author sees them together. `diagnostics` may carry problems found earlier
	(e.g. malformed annotations); they are reported with the rest.
	"""
	diags: list[Diagnostic] = list(diagnostics or [])
	span = Span.from_function(fn)
	name = getattr(fn, "__name__", None) or getattr(getattr(fn, "__func__", None), "__name__", repr(fn))

	if isinstance(fn, (staticmethod, classmethod)) or inspect.ismethod(fn):
		diags.append(_diag("receiver", "built-in functions cannot take a receiver; declare a plain module-level function", span))
		raise BindingError(name, diags)
	if not inspect.isfunction(fn):
		diags.append(_diag("not_a_function", f"cannot bind {type(fn).__name__} object; expected a Python function", span))
		raise BindingError(name, diags)
	if not name.isidentifier():
		diags.append(_diag("anonymous", f"cannot bind anonymous function {name!r}; built-ins need a name", span))
		raise BindingError(name, diags)

	try:
		hints = typing.get_type_hints(fn)
	except (NameError, TypeError) as err:
		diags.append(_diag("unresolved_annotation", f"cannot resolve parameter annotations: {err}", span))
		raise BindingError(name, diags) from err

	idents: list[str] = []
	params: list[ParameterSpec] = []
	injected: list[InjectedParam] = []
	for position, p in enumerate(inspect.signature(fn).parameters.values()):
		idents.append(p.name)
		if position == 0 and p.name in _RECEIVER_NAMES:
			diags.append(_diag("receiver", f"receiver parameter '{p.name}' is not supported", span))
			continue
		if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
			diags.append(_diag("variadic", f"variadic parameter '{p.name}' is not supported; declare each argument", span))
			continue
		keyword_only = p.kind is inspect.Parameter.KEYWORD_ONLY
		if p.name not in hints:
			diags.append(_diag("missing_annotation", f"parameter '{p.name}' has no type annotation", span))
			continue
		ty = hints[p.name]

		if ty is Register or ty is Context:
			source = "register" if ty is Register else "context"
			injected.append(InjectedParam(ident=p.name, source=source, keyword_only=keyword_only))
			continue
		if injected:
			diags.append(
				_diag(
					"injected_order",
					f"parameter '{p.name}' follows injected parameter '{injected[-1].ident}'",
					span,
					notes=["Register/Context parameters must come last"],
				)
			)
			continue
		if p.name in RESERVED_IDENTS or p.name.startswith(RESERVED_PREFIX):
			diags.append(_diag("reserved_name", f"parameter name '{p.name}' is reserved by the binding prologue", span))
			continue
		if p.default is not inspect.Parameter.empty and p.default is not None:
			diags.append(
				_diag(
					"default_value",
					f"parameter '{p.name}' has a default value; absent arguments are expressed with Optional[...]",
					span,
				)
			)
			continue

		optional, inner = unwrap_optional(ty)
		if not is_supported_type(inner):
			diags.append(_diag("unsupported_type", f"parameter '{p.name}' has unsupported type {type_name(ty)}", span))
			continue
		params.append(
			ParameterSpec(
				ident=p.name,
				ty=inner,
				optional=optional,
				kind=attrs.get_binding_kind(p.name, position),
				keyword_only=keyword_only,
			)
		)

	attrs.check_known(idents, span=span, diagnostics=diags)
	if diags:
		raise BindingError(name, diags)

	return FunctionBindingSpec(
		name=name,
		qualname=getattr(fn, "__qualname__", name),
		params=tuple(params),
		injected=tuple(injected),
		is_async=inspect.iscoroutinefunction(fn),
		return_type=hints.get("return", inspect.Signature.empty),
	)


__all__ = [
	"FunctionBindingSpec",
	"InjectedParam",
	"ParameterSpec",
	"analyze_function",
	"unwrap_optional",
]
