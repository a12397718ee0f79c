# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import asyncio
from typing import Optional

import pytest

from nasl.builtin_utils import Context, Executor, FunctionError, FunctionErrorKind, FunctionSet, Register, nasl_function
from nasl.test_support import call


@nasl_function(named=("port",))
def probe(host: str, port: Optional[int]) -> str:
	return f"{host}:{port or 22}"


@nasl_function
def refuse(reason: str) -> None:
	raise FunctionError.dirty(reason)


@nasl_function
async def slow_double(a: int) -> int:
	await asyncio.sleep(0)
	return a * 2


def _executor() -> Executor:
	return Executor(FunctionSet("net", [probe, refuse]), FunctionSet("async", [slow_double]))


def test_execute_dispatches_by_script_name() -> None:
	ex = _executor()
	assert call(ex, Context(), "probe", "h") == "h:22"
	assert call(ex, Context(), "probe", "h", port=80) == "h:80"
	assert ex.names() == ["probe", "refuse", "slow_double"]
	assert ex.contains("probe")
	assert not ex.contains("PROBE")


def test_unknown_function() -> None:
	with pytest.raises(FunctionError) as err:
		call(_executor(), Context(), "nope")
	assert err.value.kind is FunctionErrorKind.UNKNOWN_FUNCTION
	assert err.value.function == "nope"


def test_errors_are_tagged_with_function_name() -> None:
	with pytest.raises(FunctionError) as err:
		call(_executor(), Context(), "probe")
	assert err.value.kind is FunctionErrorKind.WRONG_ARGUMENT_COUNT
	assert err.value.function == "probe"
	assert err.value.parameter == "host"
	assert err.value.format_human().startswith("[wrong_argument_count] probe:")

	with pytest.raises(FunctionError) as err:
		call(_executor(), Context(), "refuse", "closed")
	assert err.value.kind is FunctionErrorKind.DIRTY
	assert err.value.function == "refuse"


def test_alias_registers_under_another_name() -> None:
	fs = FunctionSet("net")
	fs.add(probe, alias="probe_port")
	assert fs.names() == ["probe_port"]
	assert call(Executor(fs), Context(), "probe_port", "h") == "h:22"


def test_only_bound_functions_can_be_added() -> None:
	def plain(register: Register, context: Context) -> None:
		pass

	with pytest.raises(TypeError):
		FunctionSet("x", [plain])


def test_duplicate_names_are_rejected() -> None:
	with pytest.raises(ValueError):
		FunctionSet("x", [probe, probe])
	ex = _executor()
	with pytest.raises(ValueError) as err:
		ex.add_set(FunctionSet("other", [probe]))
	assert "already provided by net" in str(err.value)
	# The failed add leaves the executor unchanged.
	assert [fs.name for fs in ex.sets()] == ["net", "async"]


def test_spec_and_function_lookup() -> None:
	ex = _executor()
	assert [p.ident for p in ex.spec("probe").params] == ["host", "port"]
	assert ex.function("probe") is probe


def test_execute_async_awaits_coroutine_builtins() -> None:
	ex = _executor()

	async def run() -> tuple:
		return (
			await ex.execute_async("slow_double", Register.from_args(4), Context()),
			await ex.execute_async("probe", Register.from_args("h"), Context()),
		)

	assert asyncio.run(run()) == (8, "h:22")


def test_execute_async_tags_errors() -> None:
	ex = _executor()
	with pytest.raises(FunctionError) as err:
		asyncio.run(ex.execute_async("slow_double", Register.from_args("x"), Context()))
	assert err.value.kind is FunctionErrorKind.WRONG_TYPE
	assert err.value.function == "slow_double"
