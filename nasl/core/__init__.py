# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared core types: source spans, diagnostics and context configuration.
"""

__all__ = []
