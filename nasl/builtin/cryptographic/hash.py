# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Digest and HMAC built-ins.

Script names follow the NASL library (`SHA256`, `HMAC_SHA256`, ...). Digests
take `data` by position or by name; HMACs take `key:` and `data:` by name.
Script strings are hashed as their UTF-8 bytes.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes, hmac

from nasl.builtin_utils import nasl_function


def _digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
	h = hashes.Hash(algorithm)
	h.update(data)
	return h.finalize()


def _hmac(algorithm: hashes.HashAlgorithm, key: bytes, data: bytes) -> bytes:
	h = hmac.HMAC(key, algorithm)
	h.update(data)
	return h.finalize()


@nasl_function(maybe_named=("data",))
def MD5(data: bytes) -> bytes:
	return _digest(hashes.MD5(), data)


@nasl_function(maybe_named=("data",))
def SHA1(data: bytes) -> bytes:
	return _digest(hashes.SHA1(), data)


@nasl_function(maybe_named=("data",))
def SHA256(data: bytes) -> bytes:
	return _digest(hashes.SHA256(), data)


@nasl_function(maybe_named=("data",))
def SHA512(data: bytes) -> bytes:
	return _digest(hashes.SHA512(), data)


@nasl_function(named=("key", "data"))
def HMAC_MD5(key: bytes, data: bytes) -> bytes:
	return _hmac(hashes.MD5(), key, data)


@nasl_function(named=("key", "data"))
def HMAC_SHA1(key: bytes, data: bytes) -> bytes:
	return _hmac(hashes.SHA1(), key, data)


@nasl_function(named=("key", "data"))
def HMAC_SHA256(key: bytes, data: bytes) -> bytes:
	return _hmac(hashes.SHA256(), key, data)


@nasl_function(named=("key", "data"))
def HMAC_SHA512(key: bytes, data: bytes) -> bytes:
	return _hmac(hashes.SHA512(), key, data)


DIGESTS = (MD5, SHA1, SHA256, SHA512)
HMACS = (HMAC_MD5, HMAC_SHA1, HMAC_SHA256, HMAC_SHA512)

__all__ = ["DIGESTS", "HMACS"]
