# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
SSH built-ins.

Connections go to the context's scan target. Each successful `ssh_connect`
registers a paramiko transport in the context's `SshSessions` table and hands
the script a session id; every other function takes that id as its first
positional argument.
"""

from __future__ import annotations

import io
import logging
import socket
from typing import Optional

import paramiko

from nasl.builtin.ssh.keytypes import negotiable_key_types, parse_key_types
from nasl.builtin.ssh.sessions import SshSessions
from nasl.builtin_utils import Context, FunctionError, nasl_function

logger = logging.getLogger(__name__)

_KEY_CLASSES = (paramiko.Ed25519Key, paramiko.ECDSAKey, paramiko.RSAKey)


def _sessions(context: Context) -> SshSessions:
	return context.resource(SshSessions)


@nasl_function(named=("port", "keytype", "timeout"))
def ssh_connect(port: Optional[int], keytype: Optional[str], timeout: Optional[int], context: Context) -> Optional[int]:
	"""
	Open an SSH transport to the scan target and run the key exchange.

	Returns the new session id, or NULL when the target cannot be reached or
	the handshake fails.
	"""
	key_types = parse_key_types(keytype) if keytype is not None else None
	if port is None:
		port = context.config.ssh_port
	if not 0 < port < 65536:
		raise FunctionError.wrong_argument(f"port {port} is out of range", parameter="port")
	if timeout is not None and timeout <= 0:
		raise FunctionError.wrong_argument(f"timeout must be positive, got {timeout}", parameter="timeout")
	if timeout is None:
		timeout = context.config.ssh_timeout
	host = context.target

	try:
		sock = socket.create_connection((host, port), timeout=timeout)
	except OSError as err:
		logger.warning("ssh_connect: cannot reach %s:%d: %s", host, port, err)
		return None
	try:
		transport = paramiko.Transport(sock)
	except (paramiko.SSHException, OSError) as err:
		sock.close()
		logger.warning("ssh_connect: cannot set up transport to %s:%d: %s", host, port, err)
		return None
	if key_types is not None:
		options = transport.get_security_options()
		try:
			options.key_types = negotiable_key_types(key_types, options.key_types)
		except FunctionError:
			transport.close()
			raise
		except ValueError as err:
			transport.close()
			raise FunctionError.wrong_argument(f"host key types rejected: {err}", parameter="keytype") from err
	try:
		transport.start_client(timeout=timeout)
	except (paramiko.SSHException, EOFError, OSError) as err:
		transport.close()
		logger.warning("ssh_connect: handshake with %s:%d failed: %s", host, port, err)
		return None
	return _sessions(context).add(host, port, transport).session_id


@nasl_function(named=("login",))
def ssh_set_login(session_id: int, login: Optional[str], context: Context) -> None:
	"""Remember the login name `ssh_userauth` uses when none is passed."""
	session = _sessions(context).get(session_id)
	session.login = login


def _load_private_key(text: str, passphrase: Optional[str]) -> paramiko.PKey:
	for cls in _KEY_CLASSES:
		try:
			return cls.from_private_key(io.StringIO(text), password=passphrase)
		except paramiko.PasswordRequiredException as err:
			raise FunctionError.dirty("private key is encrypted and no passphrase was given") from err
		except (paramiko.SSHException, ValueError):
			continue
	raise FunctionError.wrong_argument("unrecognized private key format", parameter="privatekey")


@nasl_function(named=("login", "password", "privatekey", "passphrase"))
def ssh_userauth(
	session_id: int,
	login: Optional[str],
	password: Optional[str],
	privatekey: Optional[str],
	passphrase: Optional[str],
	context: Context,
) -> int:
	"""Authenticate an open session. Returns 0 on success, -1 when the server rejects the credentials."""
	session = _sessions(context).get(session_id)
	user = login if login is not None else session.login
	if not user:
		raise FunctionError.dirty("no login given and none set with ssh_set_login")
	if password is None and privatekey is None:
		raise FunctionError.dirty("neither password nor privatekey given")

	try:
		if privatekey is not None:
			session.transport.auth_publickey(user, _load_private_key(privatekey, passphrase))
		else:
			session.transport.auth_password(user, password)
	except paramiko.AuthenticationException as err:
		logger.info("ssh session %d: authentication as '%s' rejected: %s", session_id, user, err)
		return -1
	except (paramiko.SSHException, EOFError) as err:
		raise FunctionError.dirty(f"authentication on ssh session {session_id} failed: {err}") from err
	session.login = user
	session.authenticated = True
	return 0


@nasl_function
def ssh_get_server_banner(session_id: int, context: Context) -> Optional[str]:
	return _sessions(context).get(session_id).transport.remote_version


@nasl_function
def ssh_disconnect(session_id: int, context: Context) -> None:
	if _sessions(context).remove(session_id) is None:
		logger.debug("ssh_disconnect: no session %d", session_id)


__all__ = [
	"ssh_connect",
	"ssh_disconnect",
	"ssh_get_server_banner",
	"ssh_set_login",
	"ssh_userauth",
]
