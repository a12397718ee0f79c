# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
String built-ins.
"""

from nasl.builtin_utils import FunctionSet

from .functions import crap, hexstr, strlen, substr


def function_set() -> FunctionSet:
	return FunctionSet("string", [strlen, substr, hexstr, crap])


__all__ = ["function_set"]
