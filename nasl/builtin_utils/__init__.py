# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Utilities shared by every built-in function set.

Built-in modules normally need only:

  from nasl.builtin_utils import Context, FunctionError, FunctionSet, nasl_function
"""

from .errors import BindingError, FunctionError, FunctionErrorKind
from .register import Register
from .context import Context
from .function import FunctionBindingSpec, binding_spec, nasl_function
from .executor import Executor, FunctionSet

__all__ = [
	"BindingError",
	"Context",
	"Executor",
	"FunctionBindingSpec",
	"FunctionError",
	"FunctionErrorKind",
	"FunctionSet",
	"Register",
	"binding_spec",
	"nasl_function",
]
