# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
from pathlib import Path

from nasl.cli import main


def test_list_shows_binding_kinds(capsys) -> None:
	assert main(["list"]) == 0
	out = capsys.readouterr().out
	assert "[ssh]" in out
	assert "  ssh_connect(port:?, keytype:?, timeout:?)" in out
	assert "  crap(length(:), data:?)" in out
	assert "  substr(s, start, end?)" in out


def test_list_json(capsys) -> None:
	assert main(["list", "--json"]) == 0
	payload = json.loads(capsys.readouterr().out)
	assert set(payload) == {"cryptographic", "ssh", "string"}
	assert payload["cryptographic"]["SHA256"] == [
		{"ident": "data", "type": "bytes", "optional": False, "kind": "MaybeNamed", "position": 0, "name": "data"}
	]


def test_show_prints_generated_prologue(capsys) -> None:
	assert main(["show", "crap"]) == 0
	out = capsys.readouterr().out
	assert out.startswith("def crap(register, context):\n")
	assert "get_maybe_named_arg(register, 'length', 0" in out
	assert "get_optional_named_arg(register, 'data'" in out


def test_show_unknown_function(capsys) -> None:
	assert main(["show", "nope"]) == 1
	assert "[unknown_function] nope: undefined function" in capsys.readouterr().err


def test_call_positional_and_named(capsys) -> None:
	assert main(["call", "crap", "--named", "length=4", "--named", 'data="ab"']) == 0
	assert capsys.readouterr().out == "abab\n"
	assert main(["call", "SHA256", "abc"]) == 0
	assert capsys.readouterr().out.startswith("ba7816bf8f01cfea")


def test_call_json_output(capsys) -> None:
	assert main(["call", "--json", "MD5", '""']) == 0
	assert json.loads(capsys.readouterr().out) == {
		"exit_code": 0,
		"result": {"hex": "d41d8cd98f00b204e9800998ecf8427e"},
	}


def test_call_reports_function_errors(capsys) -> None:
	assert main(["call", "--json", "substr", '"abc"']) == 1
	payload = json.loads(capsys.readouterr().out)
	assert payload["error"]["kind"] == "wrong_argument_count"
	assert payload["error"]["function"] == "substr"
	assert payload["error"]["parameter"] == "start"


def test_call_rejects_bad_named_argument_and_config(tmp_path: Path, capsys) -> None:
	assert main(["call", "crap", "--named", "length"]) == 2
	assert "KEY=VALUE" in capsys.readouterr().err
	cfg = tmp_path / "ctx.json"
	cfg.write_text(json.dumps({"format": "nasl-context", "version": 0, "bogus": 1}), encoding="utf-8")
	assert main(["call", "--config", str(cfg), "strlen", '"x"']) == 2
	assert "unknown top-level fields: bogus" in capsys.readouterr().err
