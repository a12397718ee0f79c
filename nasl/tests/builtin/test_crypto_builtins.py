# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from nasl.builtin_utils import FunctionError, FunctionErrorKind
from nasl.test_support import call


@pytest.mark.parametrize(
	"name, digest",
	[
		("MD5", "900150983cd24fb0d6963f7d28e17f72"),
		("SHA1", "a9993e364706816aba3e25717850c26c9cd0d89d"),
		("SHA256", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
		(
			"SHA512",
			"ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
			"2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
		),
	],
)
def test_digest_of_abc(executor, context, name: str, digest: str) -> None:
	assert call(executor, context, name, "abc").hex() == digest
	assert call(executor, context, name, b"abc").hex() == digest
	assert call(executor, context, name, data="abc").hex() == digest


def test_hmac_rfc4231_case_2(executor, context) -> None:
	mac = call(executor, context, "HMAC_SHA256", key="Jefe", data="what do ya want for nothing?")
	assert mac.hex() == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"


def test_hmac_md5_rfc2104(executor, context) -> None:
	mac = call(executor, context, "HMAC_MD5", key="Jefe", data="what do ya want for nothing?")
	assert mac.hex() == "750c783e6ab0b503eaa86e310a5db738"


def test_hmac_arguments_are_named_only(executor, context) -> None:
	with pytest.raises(FunctionError) as err:
		call(executor, context, "HMAC_SHA1", "Jefe", "data")
	assert err.value.kind is FunctionErrorKind.MISSING_REQUIRED_NAMED
	assert err.value.parameter == "key"


def test_digest_rejects_numbers(executor, context) -> None:
	with pytest.raises(FunctionError) as err:
		call(executor, context, "SHA256", 5)
	assert err.value.kind is FunctionErrorKind.WRONG_TYPE
	assert err.value.detail == "expected bytes, got int"
