# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Host key algorithm lists accepted by `ssh_connect(keytype: ...)`.

Scripts pass a comma-separated list in preference order, e.g.
"ssh-rsa,ecdsa-sha2-nistp256". An unknown algorithm name is a bad argument
(WRONG_ARGUMENT); an empty list or empty element is rejected as DIRTY.

Script names are not always what the SSH library negotiates: "ssh-rsa" means
an RSA host key, which current paramiko only accepts with SHA-2 signatures.
`negotiable_key_types` maps the script list onto what the transport offers.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

from nasl.builtin_utils.errors import FunctionError

KNOWN_KEY_TYPES: Tuple[str, ...] = (
	"ssh-ed25519",
	"ecdsa-sha2-nistp256",
	"ecdsa-sha2-nistp384",
	"ecdsa-sha2-nistp521",
	"rsa-sha2-512",
	"rsa-sha2-256",
	"ssh-rsa",
)

# Script name -> transport algorithm names, most preferred first.
_ALIASES: Dict[str, Tuple[str, ...]] = {
	"ssh-rsa": ("rsa-sha2-512", "rsa-sha2-256", "ssh-rsa"),
}


def parse_key_types(value: str) -> Tuple[str, ...]:
	if not value:
		raise FunctionError.dirty("empty host key type list")
	names = [part.strip() for part in value.split(",")]
	if any(not name for name in names):
		raise FunctionError.dirty(f"empty element in host key type list '{value}'")
	for name in names:
		if name not in KNOWN_KEY_TYPES:
			raise FunctionError.wrong_argument(
				f"unsupported host key type '{name}' (expected one of: {', '.join(KNOWN_KEY_TYPES)})",
				parameter="keytype",
			)
	# Preference order is kept; duplicates only count once.
	return tuple(dict.fromkeys(names))


def negotiable_key_types(names: Iterable[str], offered: Iterable[str]) -> Tuple[str, ...]:
	"""
	Expand script names into transport algorithm names the client offers.

	Names the transport cannot negotiate are left out. If nothing is left the
	request cannot be honoured and is a bad argument.
	"""
	names = tuple(names)
	available = set(offered)
	out: Dict[str, None] = {}
	for name in names:
		for algorithm in _ALIASES.get(name, (name,)):
			if algorithm in available:
				out[algorithm] = None
	if not out:
		raise FunctionError.wrong_argument(
			f"none of the host key types {', '.join(names)} is supported by the SSH client",
			parameter="keytype",
		)
	return tuple(out)


__all__ = ["KNOWN_KEY_TYPES", "negotiable_key_types", "parse_key_types"]
