# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Cryptographic built-ins backed by the `cryptography` package.
"""

from nasl.builtin_utils import FunctionSet

from .hash import DIGESTS, HMACS


def function_set() -> FunctionSet:
	return FunctionSet("cryptographic", [*DIGESTS, *HMACS])


__all__ = ["function_set"]
