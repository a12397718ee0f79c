# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Per-context SSH session table.

Session ids are what scripts hold on to. They start at 9000 and the lowest
free id is reused once a session is disconnected.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

import paramiko

from nasl.builtin_utils.errors import FunctionError

logger = logging.getLogger(__name__)

MIN_SESSION_ID = 9000


@dataclass
class SshSession:
	session_id: int
	host: str
	port: int
	transport: paramiko.Transport
	login: Optional[str] = None
	authenticated: bool = False

	def close(self) -> None:
		self.transport.close()


class SshSessions:
	def __init__(self) -> None:
		self._sessions: Dict[int, SshSession] = {}
		self._lock = threading.Lock()

	def _next_id_locked(self) -> int:
		session_id = MIN_SESSION_ID
		while session_id in self._sessions:
			session_id += 1
		return session_id

	def add(self, host: str, port: int, transport: paramiko.Transport) -> SshSession:
		with self._lock:
			session = SshSession(session_id=self._next_id_locked(), host=host, port=port, transport=transport)
			self._sessions[session.session_id] = session
		logger.info("ssh session %d opened to %s:%d", session.session_id, host, port)
		return session

	def get(self, session_id: int) -> SshSession:
		with self._lock:
			session = self._sessions.get(session_id)
		if session is None:
			raise FunctionError.wrong_argument(f"unknown ssh session id {session_id}", parameter="session_id")
		return session

	def remove(self, session_id: int) -> Optional[SshSession]:
		with self._lock:
			session = self._sessions.pop(session_id, None)
		if session is not None:
			session.close()
			logger.info("ssh session %d closed", session_id)
		return session

	def ids(self) -> List[int]:
		with self._lock:
			return sorted(self._sessions)

	def close(self) -> None:
		for session_id in self.ids():
			self.remove(session_id)


__all__ = ["MIN_SESSION_ID", "SshSession", "SshSessions"]
