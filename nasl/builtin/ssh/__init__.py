# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
SSH client built-ins backed by paramiko.
"""

from nasl.builtin_utils import FunctionSet

from .functions import ssh_connect, ssh_disconnect, ssh_get_server_banner, ssh_set_login, ssh_userauth
from .sessions import MIN_SESSION_ID, SshSession, SshSessions


def function_set() -> FunctionSet:
	return FunctionSet(
		"ssh",
		[ssh_connect, ssh_set_login, ssh_userauth, ssh_get_server_banner, ssh_disconnect],
	)


__all__ = ["MIN_SESSION_ID", "SshSession", "SshSessions", "function_set"]
