# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
In-process SSH server for SSH built-in tests.

Every server binds its own ephemeral port on 127.0.0.1, so tests never
compete for a fixed port and need no process-wide lock. The server only runs
key exchange and password authentication; it opens no channels.
"""

from __future__ import annotations

import logging
import socket
import threading
from typing import List, Optional

import paramiko

logger = logging.getLogger(__name__)

TEST_LOGIN = "user"
TEST_PASSWORD = "pass"


class _PasswordServer(paramiko.ServerInterface):
	def __init__(self, login: str, password: str) -> None:
		self._login = login
		self._password = password

	def get_allowed_auths(self, username: str) -> str:
		return "password"

	def check_auth_password(self, username: str, password: str) -> int:
		if username == self._login and password == self._password:
			return paramiko.AUTH_SUCCESSFUL
		return paramiko.AUTH_FAILED


class SshTestServer:
	def __init__(
		self,
		*,
		host_key: Optional[paramiko.PKey] = None,
		login: str = TEST_LOGIN,
		password: str = TEST_PASSWORD,
	) -> None:
		self.host_key = host_key if host_key is not None else paramiko.ECDSAKey.generate()
		self._login = login
		self._password = password
		self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
		self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
		self._sock.bind(("127.0.0.1", 0))
		self._sock.listen(8)
		self._sock.settimeout(0.2)
		self._stop = threading.Event()
		self._transports: List[paramiko.Transport] = []
		self._thread = threading.Thread(target=self._serve, name="ssh-test-server", daemon=True)

	@property
	def port(self) -> int:
		return self._sock.getsockname()[1]

	def start(self) -> "SshTestServer":
		self._thread.start()
		return self

	def _serve(self) -> None:
		while not self._stop.is_set():
			try:
				conn, _ = self._sock.accept()
			except socket.timeout:
				continue
			except OSError:
				break
			transport = paramiko.Transport(conn)
			transport.add_server_key(self.host_key)
			self._transports.append(transport)
			try:
				transport.start_server(server=_PasswordServer(self._login, self._password))
			except (paramiko.SSHException, EOFError) as err:
				logger.debug("test server handshake failed: %s", err)

	def close(self) -> None:
		self._stop.set()
		self._thread.join(timeout=2)
		self._sock.close()
		for transport in self._transports:
			transport.close()

	def __enter__(self) -> "SshTestServer":
		return self.start()

	def __exit__(self, *exc: object) -> None:
		self.close()


def unused_port() -> int:
	"""A port nothing listens on (bound, read back, released)."""
	with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
		s.bind(("127.0.0.1", 0))
		return s.getsockname()[1]


__all__ = ["SshTestServer", "TEST_LOGIN", "TEST_PASSWORD", "unused_port"]
