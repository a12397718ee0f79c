# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Execution context handed to every built-in call.

The binding layer treats the Context as opaque: it only forwards it. Built-in
sets keep their own per-scan state in typed resource slots, e.g. the SSH
session table, so the Context does not need to know about any protocol.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional, TypeVar

from nasl.core.config import ContextConfig

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Context:
	def __init__(self, config: Optional[ContextConfig] = None, *, target: Optional[str] = None) -> None:
		self.config = config if config is not None else ContextConfig()
		self.target = target if target is not None else self.config.target
		self._resources: dict[type, Any] = {}
		self._lock = threading.Lock()

	def resource(self, kind: type[R], factory: Optional[Callable[[], R]] = None) -> R:
		"""
		Return this context's instance of `kind`, creating it on first use.

		`factory` defaults to calling `kind()`.
		"""
		with self._lock:
			res = self._resources.get(kind)
			if res is None:
				res = factory() if factory is not None else kind()
				self._resources[kind] = res
			return res

	def close(self) -> None:
		"""Close every resource that supports it; resources are dropped afterwards."""
		with self._lock:
			resources = list(self._resources.values())
			self._resources.clear()
		for res in resources:
			close = getattr(res, "close", None)
			if callable(close):
				logger.debug("closing context resource %s", type(res).__name__)
				close()

	def __enter__(self) -> "Context":
		return self

	def __exit__(self, *exc: object) -> None:
		self.close()

	def __repr__(self) -> str:
		return f"Context(target={self.target!r})"


__all__ = ["Context"]
