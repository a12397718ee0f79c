# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Context configuration file (v0).

The file is a JSON object that tells built-in functions which host they scan
and which defaults protocol clients use when a script omits an argument:

  {
    "format": "nasl-context",
    "version": 0,
    "target": "192.0.2.10",
    "ssh": {"port": 22, "timeout": 10}
  }

Every field except `format`/`version` is optional. Unknown fields are errors so
typos never silently fall back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

DEFAULT_TARGET = "127.0.0.1"
DEFAULT_SSH_PORT = 22
DEFAULT_SSH_TIMEOUT = 10


@dataclass(frozen=True)
class ContextConfig:
	target: str = DEFAULT_TARGET
	ssh_port: int = DEFAULT_SSH_PORT
	ssh_timeout: int = DEFAULT_SSH_TIMEOUT  # seconds


def _load_config_json(path: Path) -> dict[str, Any]:
	data = json.loads(path.read_text(encoding="utf-8"))
	if not isinstance(data, dict):
		raise ValueError("context config must be a JSON object")
	if data.get("format") != "nasl-context" or data.get("version") != 0:
		raise ValueError("unsupported context config format/version")
	allowed_top = {"format", "version", "target", "ssh"}
	unknown_top = sorted(set(data.keys()) - allowed_top)
	if unknown_top:
		raise ValueError(f"context config has unknown top-level fields: {', '.join(unknown_top)}")
	return data


def _port(value: object, field: str) -> int:
	if not isinstance(value, int) or isinstance(value, bool) or not 0 < value < 65536:
		raise ValueError(f"context config field '{field}' must be a port number (1-65535)")
	return value


def config_from_mapping(data: Mapping[str, Any]) -> ContextConfig:
	"""Build a ContextConfig from an already-validated top-level mapping."""
	target = data.get("target", DEFAULT_TARGET)
	if not isinstance(target, str) or not target:
		raise ValueError("context config field 'target' must be a non-empty string")

	ssh = data.get("ssh", {})
	if not isinstance(ssh, dict):
		raise ValueError("context config field 'ssh' must be an object")
	unknown_ssh = sorted(set(ssh.keys()) - {"port", "timeout"})
	if unknown_ssh:
		raise ValueError(f"context config 'ssh' has unknown fields: {', '.join(unknown_ssh)}")
	port = _port(ssh.get("port", DEFAULT_SSH_PORT), "ssh.port")
	timeout = ssh.get("timeout", DEFAULT_SSH_TIMEOUT)
	if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout <= 0:
		raise ValueError("context config field 'ssh.timeout' must be a positive integer")

	return ContextConfig(target=target, ssh_port=port, ssh_timeout=timeout)


def load_context_config(path: Path) -> ContextConfig:
	return config_from_mapping(_load_config_json(path))


__all__ = ["ContextConfig", "config_from_mapping", "load_context_config"]
