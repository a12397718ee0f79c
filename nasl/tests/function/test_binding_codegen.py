# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import asyncio
import inspect
from typing import Optional

import pytest

from nasl.builtin_utils import Context, FunctionError, Register
from nasl.builtin_utils.function.attrs import BindingAttrs
from nasl.builtin_utils.function.codegen import generate_binding, render_binding_source
from nasl.builtin_utils.function.signature import analyze_function


def _spec(fn, **kwargs):
	return analyze_function(fn, BindingAttrs.parse(diagnostics=[], **kwargs))


def sample(session_id: int, end: Optional[int], login: str, password: Optional[str], data: bytes, context: Context) -> str:
	"""Sample built-in."""
	return f"{session_id}:{end}:{login}:{password}:{data!r}:{context.target}"


def test_rendered_source_has_one_statement_per_parameter_in_order():
	spec = _spec(sample, named=("login", "password"), maybe_named=("data",))
	assert render_binding_source(spec) == (
		"def sample(register, context):\n"
		"\tsession_id = __nasl_resolve.get_positional_arg(register, 0, 1, __nasl_ty_session_id, param='session_id')\n"
		"\tend = __nasl_resolve.get_optional_positional_arg(register, 1, __nasl_ty_end, param='end')\n"
		"\tlogin = __nasl_resolve.get_named_arg(register, 'login', __nasl_ty_login)\n"
		"\tpassword = __nasl_resolve.get_optional_named_arg(register, 'password', __nasl_ty_password)\n"
		"\tdata = __nasl_resolve.get_maybe_named_arg(register, 'data', 4, __nasl_ty_data)\n"
		"\treturn __nasl_body(session_id, end, login, password, data, context)\n"
	)


def test_rendering_is_deterministic():
	a = render_binding_source(_spec(sample, named=("login", "password"), maybe_named=("data",)))
	b = render_binding_source(_spec(sample, named=("login", "password"), maybe_named=("data",)))
	assert a == b


def test_keyword_only_and_injected_register_are_passed_by_keyword():
	def f(a: int, *, b: Optional[str], reg: Register) -> int:
		return a

	source = render_binding_source(_spec(f))
	assert source.rstrip().endswith("return __nasl_body(a, b=b, reg=register)")


def test_generated_wrapper_keeps_identity_and_uniform_signature():
	spec = _spec(sample, named=("login", "password"), maybe_named=("data",))
	wrapper = generate_binding(sample, spec)
	assert wrapper.__name__ == "sample"
	assert wrapper.__qualname__ == "sample"
	assert wrapper.__module__ == __name__
	assert wrapper.__doc__ == "Sample built-in."
	assert list(inspect.signature(wrapper).parameters) == ["register", "context"]
	assert wrapper.__annotations__ == {"register": Register, "context": Context, "return": str}
	assert wrapper.__nasl_binding__ is spec
	assert wrapper.__nasl_original__ is sample


def test_generated_wrapper_binds_and_calls_body():
	wrapper = generate_binding(sample, _spec(sample, named=("login", "password"), maybe_named=("data",)))
	# data is maybe-named at declaration position 4; positions 2 and 3 belong to named parameters.
	reg = Register([9000, None, "unused", "unused", b"pos"], {"login": "user"})
	assert wrapper(reg, Context(target="h")) == "9000:None:user:None:b'pos':h"


def test_resolution_failure_prevents_body_from_running():
	calls: list = []

	def f(a: int, b: int) -> None:
		calls.append((a, b))

	wrapper = generate_binding(f, _spec(f))
	with pytest.raises(FunctionError):
		wrapper(Register.from_args(1, "two"), Context())
	with pytest.raises(FunctionError):
		wrapper(Register.from_args(1), Context())
	assert calls == []


def test_traceback_points_at_the_resolver_call():
	def f(a: int) -> None:
		pass

	wrapper = generate_binding(f, _spec(f))
	with pytest.raises(FunctionError) as err:
		wrapper(Register(), Context())
	frames = [entry.name for entry in err.traceback]
	assert frames[-1] == "get_positional_arg"
	assert "wrapper" in frames


def test_show_source_matches_bound_wrapper():
	spec = _spec(sample, named=("login", "password"), maybe_named=("data",))
	wrapper = generate_binding(sample, spec)
	assert wrapper.__nasl_source__ == render_binding_source(spec)


def test_async_body_gets_async_wrapper():
	async def f(a: int, context: Context) -> int:
		await asyncio.sleep(0)
		return a * 2

	spec = _spec(f)
	source = render_binding_source(spec)
	assert source.startswith("async def f(register, context):")
	assert "return await __nasl_body(a, context)" in source
	wrapper = generate_binding(f, spec)
	assert inspect.iscoroutinefunction(wrapper)
	assert asyncio.run(wrapper(Register.from_args(21), Context())) == 42


def test_keyword_only_and_injected_values_reach_the_body():
	def f(a: int, *, b: Optional[str], reg: Register, context: Context) -> tuple:
		return (a, b, reg, context)

	wrapper = generate_binding(f, _spec(f))
	reg = Register.from_args(7, b="x")
	ctx = Context()
	assert wrapper(reg, ctx) == (7, None, reg, ctx)
