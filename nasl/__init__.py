# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
nasl package: native built-in functions for the NASL scan engine.

Layout:
  core:           spans, diagnostics, context configuration
  builtin_utils:  argument binding (`nasl_function`), register, context, executor
  builtin:        shipped built-in function sets (ssh, cryptographic, string)
"""

__all__ = ["core", "builtin_utils", "builtin"]
