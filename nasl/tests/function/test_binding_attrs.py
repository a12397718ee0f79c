# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from nasl.builtin_utils.function.attrs import AttrKind, BindingAttr, BindingAttrs, MaybeNamed, Named, Positional
from nasl.core.span import Span


def _parse(**kwargs):
	diags: list = []
	attrs = BindingAttrs.parse(diagnostics=diags, **kwargs)
	return attrs, diags


def test_unannotated_parameter_is_positional_at_declaration_index():
	attrs, diags = _parse(named=("port",))
	assert not diags
	assert attrs.get_binding_kind("session_id", 0) == Positional(position=0)
	assert attrs.get_binding_kind("other", 3) == Positional(position=3)


def test_named_annotation_uses_parameter_identifier():
	attrs, _ = _parse(named=("port",))
	assert attrs.get_binding_kind("port", 1) == Named(name="port")


def test_maybe_named_keeps_position_and_name():
	attrs, _ = _parse(maybe_named=("length",))
	assert attrs.get_binding_kind("length", 2) == MaybeNamed(position=2, name="length")


def test_bare_string_is_one_identifier():
	attrs, diags = _parse(named="login")
	assert not diags
	assert attrs.attrs == (BindingAttr(kind=AttrKind.NAMED, ident="login"),)


def test_malformed_identifiers_are_reported():
	span = Span(file="f.py", line=3, column=1)
	attrs, diags = _parse(named=("ok", "not an ident", 7), span=span)
	assert [a.ident for a in attrs.attrs] == ["ok"]
	assert len(diags) == 2
	assert all(d.phase == "binding" and d.span == span for d in diags)
	assert "malformed named()" in diags[0].message


def test_identifier_annotated_twice_is_reported():
	attrs, diags = _parse(named=("data",), maybe_named=("data",))
	assert len(diags) == 1
	assert "more than once" in diags[0].message
	# The first annotation wins; the duplicate is dropped.
	assert attrs.get_binding_kind("data", 0) == Named(name="data")


def test_check_known_reports_unknown_parameter():
	attrs, _ = _parse(named=("port", "prot"))
	diags: list = []
	attrs.check_known(["port", "keytype"], diagnostics=diags)
	assert len(diags) == 1
	assert "unknown parameter 'prot'" in diags[0].message
	assert "port, keytype" in diags[0].notes[0]


def test_non_sequence_annotation_is_a_diagnostic():
	for bad in (5, None, b"port"):
		attrs, diags = _parse(named=bad)
		assert attrs.attrs == ()
		assert len(diags) == 1
		assert diags[0].code == "binding.malformed_annotation"
		assert "malformed named() annotation" in diags[0].message


def test_diagnostics_carry_codes():
	_, diags = _parse(named=("data", "1x"), maybe_named=("data",))
	assert [d.code for d in diags] == ["binding.malformed_annotation", "binding.duplicate_annotation"]
