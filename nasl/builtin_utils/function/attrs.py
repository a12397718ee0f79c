# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Binding annotations and binding kinds.

A built-in declares which of its parameters are looked up by name:

  @nasl_function(named=("port", "keytype"), maybe_named=("data",))

Every parameter not mentioned is positional. The call-site name of a named
parameter is always the parameter's own identifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Sequence, Tuple, Union

from nasl.core.diagnostics import Diagnostic
from nasl.core.span import Span


class AttrKind(Enum):
	NAMED = auto()
	MAYBE_NAMED = auto()


@dataclass(frozen=True)
class Positional:
	"""Resolved solely by call-site position."""

	position: int


@dataclass(frozen=True)
class Named:
	"""Resolved solely by call-site name."""

	name: str


@dataclass(frozen=True)
class MaybeNamed:
	"""Resolved by name, falling back to position."""

	position: int
	name: str


BindingKind = Union[Positional, Named, MaybeNamed]


@dataclass(frozen=True)
class BindingAttr:
	kind: AttrKind
	ident: str


def _diag(code: str, message: str, span: Span | None, notes: list[str] | None = None) -> Diagnostic:
	return Diagnostic(message=message, code=f"binding.{code}", phase="binding", span=span or Span(), notes=notes or [])


def _as_idents(value: object, label: str, span: Span | None, diagnostics: list[Diagnostic]) -> List[object]:
	if isinstance(value, str):
		return [value]
	if isinstance(value, (bytes, bytearray)) or not isinstance(value, Iterable):
		diagnostics.append(
			_diag(
				"malformed_annotation",
				f"malformed {label}() annotation: expected an identifier or a sequence of identifiers, got {value!r}",
				span,
			)
		)
		return []
	return list(value)


@dataclass(frozen=True)
class BindingAttrs:
	attrs: Tuple[BindingAttr, ...] = ()

	@classmethod
	def parse(
		cls,
		*,
		named: Union[str, Iterable[str]] = (),
		maybe_named: Union[str, Iterable[str]] = (),
		span: Span | None = None,
		diagnostics: list[Diagnostic],
	) -> "BindingAttrs":
		"""
		Validate decorator arguments and build the annotation set.

		Malformed entries are reported into `diagnostics` and dropped.
		"""
		seen: dict[str, AttrKind] = {}
		attrs: list[BindingAttr] = []
		for kind, raw in ((AttrKind.NAMED, named), (AttrKind.MAYBE_NAMED, maybe_named)):
			label = "named" if kind is AttrKind.NAMED else "maybe_named"
			for ident in _as_idents(raw, label, span, diagnostics):
				if not isinstance(ident, str) or not ident.isidentifier():
					diagnostics.append(
						_diag(
							"malformed_annotation",
							f"malformed {label}() annotation: expected a parameter identifier, got {ident!r}",
							span,
						)
					)
					continue
				if ident in seen:
					diagnostics.append(_diag("duplicate_annotation", f"parameter '{ident}' is annotated more than once", span))
					continue
				seen[ident] = kind
				attrs.append(BindingAttr(kind=kind, ident=ident))
		return cls(attrs=tuple(attrs))

	def get_binding_kind(self, ident: str, position: int) -> BindingKind:
		attr_kind = next((a.kind for a in self.attrs if a.ident == ident), None)
		if attr_kind is None:
			return Positional(position=position)
		if attr_kind is AttrKind.NAMED:
			return Named(name=ident)
		if attr_kind is AttrKind.MAYBE_NAMED:
			return MaybeNamed(position=position, name=ident)
		raise AssertionError(f"unhandled annotation kind {attr_kind!r}")

	def check_known(self, idents: Sequence[str], *, span: Span | None = None, diagnostics: list[Diagnostic]) -> None:
		"""Report annotations that reference no declared parameter."""
		known = set(idents)
		for attr in self.attrs:
			if attr.ident not in known:
				diagnostics.append(
					_diag(
						"unknown_parameter",
						f"annotation references unknown parameter '{attr.ident}'",
						span,
						notes=[f"declared parameters: {', '.join(idents) or '(none)'}"],
					)
				)


__all__ = [
	"AttrKind",
	"BindingAttr",
	"BindingAttrs",
	"BindingKind",
	"MaybeNamed",
	"Named",
	"Positional",
]
