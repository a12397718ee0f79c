# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Binding generation.

From a `FunctionBindingSpec` we build a wrapper with the uniform calling
convention `(register, context)`. The spec stays data: each parameter gets
one resolver call (a `functools.partial` over the matching `resolve.get_*_arg`
operation), and the wrapper runs them in declaration order before calling the
original function with the bound values. A resolution failure raises out of
the prologue, so the body never starts.

`render_binding_source` shows the same prologue as Python text, e.g. for
`ssh_connect`:

  def ssh_connect(register, context):
  	port = __nasl_resolve.get_optional_named_arg(register, 'port', __nasl_ty_port)
  	keytype = __nasl_resolve.get_optional_named_arg(register, 'keytype', __nasl_ty_keytype)
  	return __nasl_body(port, keytype, context)

Both are pure functions of the binding spec.
"""

from __future__ import annotations

import inspect
import logging
from functools import partial
from typing import Any, Callable, Dict, List, Tuple

from nasl.builtin_utils.context import Context
from nasl.builtin_utils.function import resolve
from nasl.builtin_utils.function.attrs import MaybeNamed, Named, Positional
from nasl.builtin_utils.function.signature import FunctionBindingSpec, ParameterSpec
from nasl.builtin_utils.register import Register

logger = logging.getLogger(__name__)

_INDENT = "\t"

Resolver = Callable[[Register], Any]


def _resolver(spec: FunctionBindingSpec, p: ParameterSpec) -> Resolver:
	kind = p.kind
	if isinstance(kind, Positional):
		if p.optional:
			return partial(resolve.get_optional_positional_arg, position=kind.position, ty=p.ty, param=p.ident)
		return partial(
			resolve.get_positional_arg,
			position=kind.position,
			required_count=spec.required_positional_count,
			ty=p.ty,
			param=p.ident,
		)
	if isinstance(kind, Named):
		if p.optional:
			return partial(resolve.get_optional_named_arg, name=kind.name, ty=p.ty)
		return partial(resolve.get_named_arg, name=kind.name, ty=p.ty)
	if isinstance(kind, MaybeNamed):
		if p.optional:
			return partial(resolve.get_optional_maybe_named_arg, name=kind.name, position=kind.position, ty=p.ty)
		return partial(resolve.get_maybe_named_arg, name=kind.name, position=kind.position, ty=p.ty)
	raise AssertionError(f"unhandled binding kind {kind!r}")


def _type_ref(p: ParameterSpec) -> str:
	return f"__nasl_ty_{p.ident}"


def _resolve_expr(spec: FunctionBindingSpec, p: ParameterSpec) -> str:
	ty = _type_ref(p)
	kind = p.kind
	if isinstance(kind, Positional):
		if p.optional:
			return f"__nasl_resolve.get_optional_positional_arg(register, {kind.position}, {ty}, param={p.ident!r})"
		return (
			f"__nasl_resolve.get_positional_arg(register, {kind.position}, "
			f"{spec.required_positional_count}, {ty}, param={p.ident!r})"
		)
	if isinstance(kind, Named):
		if p.optional:
			return f"__nasl_resolve.get_optional_named_arg(register, {kind.name!r}, {ty})"
		return f"__nasl_resolve.get_named_arg(register, {kind.name!r}, {ty})"
	if isinstance(kind, MaybeNamed):
		if p.optional:
			return f"__nasl_resolve.get_optional_maybe_named_arg(register, {kind.name!r}, {kind.position}, {ty})"
		return f"__nasl_resolve.get_maybe_named_arg(register, {kind.name!r}, {kind.position}, {ty})"
	raise AssertionError(f"unhandled binding kind {kind!r}")


def _call_args(spec: FunctionBindingSpec) -> str:
	args: list[str] = []
	for p in spec.params:
		args.append(f"{p.ident}={p.ident}" if p.keyword_only else p.ident)
	for inj in spec.injected:
		args.append(f"{inj.ident}={inj.source}" if inj.keyword_only else inj.source)
	return ", ".join(args)


def render_binding_source(spec: FunctionBindingSpec) -> str:
	"""Render the prologue of `spec` as Python text (tab-indented, trailing newline)."""
	def_kw = "async def" if spec.is_async else "def"
	lines = [f"{def_kw} {spec.name}(register, context):"]
	for p in spec.params:
		lines.append(f"{_INDENT}{p.ident} = {_resolve_expr(spec, p)}")
	call = f"__nasl_body({_call_args(spec)})"
	lines.append(f"{_INDENT}return await {call}" if spec.is_async else f"{_INDENT}return {call}")
	return "\n".join(lines) + "\n"


def _binder(spec: FunctionBindingSpec) -> Callable[[Register, Context], Tuple[List[Any], Dict[str, Any]]]:
	resolvers = tuple((p, _resolver(spec, p)) for p in spec.params)
	injected = spec.injected

	def bind_arguments(register: Register, context: Context) -> Tuple[List[Any], Dict[str, Any]]:
		args: List[Any] = []
		kwargs: Dict[str, Any] = {}
		for p, resolver in resolvers:
			value = resolver(register)
			if p.keyword_only:
				kwargs[p.ident] = value
			else:
				args.append(value)
		for inj in injected:
			value = register if inj.source == "register" else context
			if inj.keyword_only:
				kwargs[inj.ident] = value
			else:
				args.append(value)
		return args, kwargs

	return bind_arguments


def generate_binding(fn: Callable[..., Any], spec: FunctionBindingSpec) -> Callable[..., Any]:
	"""
	Build the wrapper for `fn` and copy over its identity.

	The result carries `__nasl_binding__` (the binding spec), `__nasl_source__`
	(the rendered prologue) and `__nasl_original__` (the undecorated function).
	"""
	bind_arguments = _binder(spec)

	if spec.is_async:

		async def wrapper(register: Register, context: Context) -> Any:
			args, kwargs = bind_arguments(register, context)
			return await fn(*args, **kwargs)

	else:

		def wrapper(register: Register, context: Context) -> Any:  # type: ignore[misc]
			args, kwargs = bind_arguments(register, context)
			return fn(*args, **kwargs)

	wrapper.__name__ = spec.name
	wrapper.__qualname__ = spec.qualname
	wrapper.__module__ = getattr(fn, "__module__", None)
	wrapper.__doc__ = getattr(fn, "__doc__", None)
	annotations: dict[str, Any] = {"register": Register, "context": Context}
	if spec.return_type is not inspect.Signature.empty:
		annotations["return"] = spec.return_type
	wrapper.__annotations__ = annotations
	wrapper.__nasl_binding__ = spec
	wrapper.__nasl_source__ = render_binding_source(spec)
	wrapper.__nasl_original__ = fn
	logger.debug("generated binding for %s (%d parameter(s))", spec.qualname, len(spec.params))
	return wrapper


__all__ = ["generate_binding", "render_binding_source"]
