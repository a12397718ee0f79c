# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
`nasl_function`: turn a typed Python function into a script built-in.

  @nasl_function(named=("login", "password"))
  def ssh_userauth(session_id: int, login: Optional[str], password: Optional[str], context: Context) -> int:
  	...

The decorated name is bound to the generated `(register, context)` wrapper.
Analysis happens at decoration time; a malformed declaration raises
`BindingError` there, so the defining module fails to import and the
function can never be added to a function set.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Union

from nasl.builtin_utils.errors import BindingError
from nasl.builtin_utils.function.attrs import BindingAttrs
from nasl.builtin_utils.function.codegen import generate_binding
from nasl.builtin_utils.function.signature import FunctionBindingSpec, analyze_function
from nasl.core.diagnostics import Diagnostic
from nasl.core.span import Span

logger = logging.getLogger(__name__)


def bind_function(
	fn: Callable[..., Any],
	*,
	named: Union[str, Iterable[str]] = (),
	maybe_named: Union[str, Iterable[str]] = (),
) -> Callable[..., Any]:
	"""Non-decorator form of `nasl_function`."""
	span = Span.from_function(fn)
	diagnostics: list[Diagnostic] = []
	attrs = BindingAttrs.parse(named=named, maybe_named=maybe_named, span=span, diagnostics=diagnostics)
	try:
		spec = analyze_function(fn, attrs, diagnostics=diagnostics)
	except BindingError as err:
		logger.warning("%s", err.format_human())
		raise
	return generate_binding(fn, spec)


def nasl_function(
	fn: Optional[Callable[..., Any]] = None,
	*,
	named: Union[str, Iterable[str]] = (),
	maybe_named: Union[str, Iterable[str]] = (),
) -> Any:
	"""Decorator; usable bare (`@nasl_function`) or with annotations."""
	if fn is not None:
		return bind_function(fn, named=named, maybe_named=maybe_named)

	def decorate(inner: Callable[..., Any]) -> Callable[..., Any]:
		return bind_function(inner, named=named, maybe_named=maybe_named)

	return decorate


def binding_spec(fn: Any) -> Optional[FunctionBindingSpec]:
	"""The binding spec of a generated built-in, or None for anything else."""
	spec = getattr(fn, "__nasl_binding__", None)
	return spec if isinstance(spec, FunctionBindingSpec) else None


__all__ = ["bind_function", "binding_spec", "nasl_function"]
