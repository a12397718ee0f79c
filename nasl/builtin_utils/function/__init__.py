# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Argument binding for built-in functions.

  attrs      binding annotations and the Positional/Named/MaybeNamed kinds
  signature  declaration analysis -> FunctionBindingSpec
  codegen    FunctionBindingSpec -> `(register, context)` wrapper
  resolve    runtime lookup/conversion used by generated wrappers
  decorator  `nasl_function`
"""

from .attrs import BindingAttrs, BindingKind, MaybeNamed, Named, Positional
from .signature import FunctionBindingSpec, InjectedParam, ParameterSpec, analyze_function
from .codegen import generate_binding, render_binding_source
from .decorator import bind_function, binding_spec, nasl_function

__all__ = [
	"BindingAttrs",
	"BindingKind",
	"FunctionBindingSpec",
	"InjectedParam",
	"MaybeNamed",
	"Named",
	"ParameterSpec",
	"Positional",
	"analyze_function",
	"bind_function",
	"binding_spec",
	"generate_binding",
	"nasl_function",
	"render_binding_source",
]
