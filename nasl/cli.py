# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
`nasl-builtins`: inspect and call registered built-in functions.

  nasl-builtins list [--json]
  nasl-builtins show ssh_connect
  nasl-builtins call SHA256 '"abc"'
  nasl-builtins call crap --named length=4 --named data='"ab"'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from nasl.builtin import default_executor
from nasl.builtin_utils import Context, Executor, FunctionError, Register
from nasl.core.config import ContextConfig, load_context_config


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="nasl-builtins", description="Inspect and call NASL built-in functions")
	p.add_argument(
		"--log-level",
		default="WARNING",
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		help="Logging level (default: WARNING)",
	)
	sub = p.add_subparsers(dest="cmd", required=True)

	lst = sub.add_parser("list", help="List built-ins and how each parameter is bound")
	lst.add_argument("--json", action="store_true", help="Emit machine-readable JSON")

	show = sub.add_parser("show", help="Print the generated binding prologue of a built-in")
	show.add_argument("name", help="Script-level function name")

	call = sub.add_parser("call", help="Call a built-in with JSON-literal arguments")
	call.add_argument("name", help="Script-level function name")
	call.add_argument("args", nargs="*", help="Positional arguments (JSON literals; anything else is a string)")
	call.add_argument(
		"--named",
		action="append",
		default=[],
		metavar="KEY=VALUE",
		help="Named argument (repeatable); VALUE is parsed like a positional argument",
	)
	call.add_argument("--config", type=Path, default=None, help="Path to a nasl-context JSON config")
	call.add_argument("--target", type=str, default=None, help="Override the scan target host")
	call.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
	return p


def _parse_value(text: str) -> Any:
	try:
		return json.loads(text)
	except json.JSONDecodeError:
		return text


def _parse_named(items: list[str]) -> dict[str, Any]:
	named: dict[str, Any] = {}
	for item in items:
		key, sep, value = item.partition("=")
		if not sep or not key:
			raise ValueError(f"named argument must look like KEY=VALUE, got '{item}'")
		named[key] = _parse_value(value)
	return named


def _jsonable(value: Any) -> Any:
	if isinstance(value, bytes):
		return {"hex": value.hex()}
	if isinstance(value, (list, tuple)):
		return [_jsonable(v) for v in value]
	if isinstance(value, dict):
		return {k: _jsonable(v) for k, v in value.items()}
	return value


def _render(value: Any) -> str:
	if isinstance(value, str):
		return value
	if isinstance(value, bytes):
		return value.hex()
	return json.dumps(_jsonable(value))


def _cmd_list(executor: Executor, as_json: bool) -> int:
	if as_json:
		payload = {
			fs.name: {name: executor.spec(name).describe() for name in fs.names()} for fs in executor.sets()
		}
		print(json.dumps(payload, indent=2, sort_keys=True))
		return 0
	for fs in executor.sets():
		print(f"[{fs.name}]")
		for name in fs.names():
			params = []
			for entry in executor.spec(name).describe():
				label = entry["ident"]
				if entry["kind"] == "Named":
					label += ":"
				elif entry["kind"] == "MaybeNamed":
					label += "(:)"
				if entry["optional"]:
					label += "?"
				params.append(label)
			print(f"  {name}({', '.join(params)})")
	return 0


def _cmd_show(executor: Executor, name: str) -> int:
	sys.stdout.write(executor.function(name).__nasl_source__)
	return 0


def _cmd_call(executor: Executor, args: argparse.Namespace) -> int:
	try:
		named = _parse_named(args.named)
		config = load_context_config(args.config) if args.config is not None else ContextConfig()
	except (OSError, ValueError) as err:
		print(f"error: {err}", file=sys.stderr)
		return 2
	register = Register([_parse_value(a) for a in args.args], named)
	with Context(config, target=args.target) as context:
		try:
			result = executor.execute(args.name, register, context)
		except FunctionError as err:
			if args.json:
				print(json.dumps({"exit_code": 1, "error": err.to_dict()}))
			else:
				print(f"error: {err.format_human()}", file=sys.stderr)
			return 1
	if args.json:
		print(json.dumps({"exit_code": 0, "result": _jsonable(result)}))
	else:
		print(_render(result))
	return 0


def main(argv: list[str] | None = None) -> int:
	args = _build_parser().parse_args(argv)
	logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
	executor = default_executor()
	try:
		if args.cmd == "list":
			return _cmd_list(executor, args.json)
		if args.cmd == "show":
			return _cmd_show(executor, args.name)
		if args.cmd == "call":
			return _cmd_call(executor, args)
	except FunctionError as err:
		print(f"error: {err.format_human()}", file=sys.stderr)
		return 1
	raise AssertionError(f"unhandled command {args.cmd!r}")


if __name__ == "__main__":
	sys.exit(main())
