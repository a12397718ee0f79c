# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Optional

from nasl.builtin_utils import FunctionError, nasl_function


@nasl_function
def strlen(data: bytes) -> int:
	"""Length in bytes; script strings count their UTF-8 bytes."""
	return len(data)


@nasl_function
def substr(s: str, start: int, end: Optional[int]) -> str:
	"""`substr("abcdef", 1, 3)` is "bcd": `end` is inclusive and defaults to the last character."""
	if start < 0:
		raise FunctionError.wrong_argument(f"start must not be negative, got {start}", parameter="start")
	if end is None:
		return s[start:]
	if end < start:
		return ""
	return s[start : end + 1]


@nasl_function
def hexstr(data: bytes) -> str:
	return data.hex()


@nasl_function(maybe_named=("length",), named=("data",))
def crap(length: int, data: Optional[str]) -> str:
	"""
	Filler string of exactly `length` characters.

	`crap(5)` and `crap(length: 5)` both give "XXXXX"; `data:` replaces the
	default "X" pattern and is repeated and cut to size.
	"""
	if length < 0:
		raise FunctionError.wrong_argument(f"length must not be negative, got {length}", parameter="length")
	pattern = "X" if data is None else data
	if not pattern:
		raise FunctionError.dirty("crap: data must not be empty")
	reps = length // len(pattern) + 1
	return (pattern * reps)[:length]
