# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from nasl.builtin import default_executor
from nasl.builtin_utils import Context
from nasl.test_support.ssh_server import SshTestServer


@pytest.fixture
def executor():
	return default_executor()


@pytest.fixture
def context():
	"""Fresh context per test; closing it tears down any SSH sessions it opened."""
	with Context() as ctx:
		yield ctx


@pytest.fixture
def ssh_server():
	"""SSH server on an ephemeral port, so tests can run in parallel."""
	with SshTestServer() as server:
		yield server
