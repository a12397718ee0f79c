# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Built-in function sets shipped with the engine.
"""

from __future__ import annotations

from nasl.builtin_utils import Executor

from . import cryptographic, ssh, string


def default_executor() -> Executor:
	"""Executor with every shipped function set."""
	return Executor(
		cryptographic.function_set(),
		ssh.function_set(),
		string.function_set(),
	)


__all__ = ["default_executor"]
