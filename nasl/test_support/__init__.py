# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared helpers for tests.

`call` runs one built-in the way the interpreter would: positional arguments
and named arguments go into a fresh Register, the executor dispatches.
"""

from __future__ import annotations

from typing import Any

from nasl.builtin_utils import Context, Executor, Register


def call(executor: Executor, context: Context, name: str, *args: Any, **kwargs: Any) -> Any:
	"""`call(ex, ctx, "ssh_connect", port=22)` ~ script `ssh_connect(port: 22);`"""
	return executor.execute(name, Register(args, kwargs), context)


__all__ = ["call"]
