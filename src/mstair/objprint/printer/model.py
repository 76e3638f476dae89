# File: src/mstair/objprint/printer/model.py
"""
Rule model for the object printer.

`RenderRules` is the immutable snapshot the print engine consumes: which types
and members to omit, which formatters override default rendering, and which
locales apply to numeric types. It is produced by the fluent API in
`printing_config` and never mutated once handed to a print call.
"""

from __future__ import annotations

import dataclasses
import enum
import pathlib
import uuid
from collections.abc import Callable, Iterator, Mapping
from datetime import date, time, timedelta
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType
from typing import Any, Final

from babel import Locale

from mstair.objprint.base.string_helpers import fqn


__all__ = [
    "FINAL_TYPES",
    "MappingEntry",
    "MemberId",
    "RenderRules",
    "ValueFormatter",
]

type ValueFormatter = Callable[[Any], Any]
"""Turns a value into its printed text. Non-str results are passed through str()."""


FINAL_TYPES: Final[tuple[type, ...]] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    Decimal,
    Fraction,
    date,  # includes datetime
    time,
    timedelta,
    uuid.UUID,
    enum.Enum,
    pathlib.PurePath,
    type,
)
"""Terminal types: printed directly, never expanded into members or elements."""


@dataclasses.dataclass(frozen=True, slots=True)
class MemberId:
    """Identifies a member by name within the type that owns it."""

    owner: type
    """The (root) type the member was selected on. Subclasses share the identity."""

    name: str
    """Public attribute name."""

    def __str__(self) -> str:
        return f"{fqn(self.owner)}.{self.name}"

    @classmethod
    def candidates(cls, owner: type, name: str) -> Iterator[MemberId]:
        """Yield the identities a member of `owner` may be registered under, most specific first."""
        for base in owner.__mro__:
            yield cls(base, name)


@dataclasses.dataclass(frozen=True, slots=True)
class MappingEntry:
    """One key/value pair of an associative collection, printed like an object."""

    key: Any
    value: Any


_MAPPING_FIELDS: Final[tuple[str, ...]] = ("type_formatters", "member_formatters", "culture_formatters")


def _frozen_mapping[K, V](mapping: Mapping[K, V] | None = None) -> Mapping[K, V]:
    return MappingProxyType(dict(mapping or {}))


@dataclasses.dataclass(frozen=True, kw_only=True)
class RenderRules:
    """
    Read-only configuration consumed by PrintEngine.

    Precedence (checked in this order by the engine):
      1. exclusion by declared type or by member identity (omit the line),
      2. member formatter,
      3. type formatter,
      4. culture formatter (numeric final types only),
      5. default rendering.
    """

    excluded_types: frozenset[type] = frozenset()
    """Members whose declared type is one of these (or a subclass) are omitted."""

    excluded_members: frozenset[MemberId] = frozenset()
    """Members omitted by identity."""

    type_formatters: Mapping[type, ValueFormatter] = dataclasses.field(
        default_factory=_frozen_mapping
    )
    """Per-type overrides, applied to every value of the type anywhere in the graph."""

    member_formatters: Mapping[MemberId, ValueFormatter] = dataclasses.field(
        default_factory=_frozen_mapping
    )
    """Per-member overrides. Win over type formatters."""

    culture_formatters: Mapping[type, Locale] = dataclasses.field(default_factory=_frozen_mapping)
    """Locales for numeric primitive types without a type formatter."""

    final_types: tuple[type, ...] = FINAL_TYPES
    """Types printed directly, without member or element expansion."""

    def __post_init__(self) -> None:
        for name in _MAPPING_FIELDS:
            object.__setattr__(self, name, _frozen_mapping(getattr(self, name)))

    def with_changes(self, **changes: Any) -> RenderRules:
        """Return a copy with `changes` applied. Mapping fields are re-frozen."""
        return dataclasses.replace(self, **changes)

    def is_type_excluded(self, typ: type | None) -> bool:
        if typ is None or not self.excluded_types:
            return False
        return any(issubclass(typ, excluded) for excluded in self.excluded_types)

    def is_member_excluded(self, owner: type, name: str) -> bool:
        if not self.excluded_members:
            return False
        return any(mid in self.excluded_members for mid in MemberId.candidates(owner, name))

    def member_formatter(self, owner: type, name: str) -> ValueFormatter | None:
        if not self.member_formatters:
            return None
        for mid in MemberId.candidates(owner, name):
            formatter = self.member_formatters.get(mid)
            if formatter is not None:
                return formatter
        return None

    def type_formatter(self, typ: type | None) -> ValueFormatter | None:
        """Return the formatter registered for `typ` or its nearest base class."""
        return _lookup_by_mro(self.type_formatters, typ)

    def culture_for(self, typ: type | None) -> Locale | None:
        """Return the locale registered for `typ` or its nearest base class."""
        if typ is None or issubclass(typ, bool):
            return None
        return _lookup_by_mro(self.culture_formatters, typ)

    def is_final(self, value: Any) -> bool:
        return isinstance(value, self.final_types)


def _lookup_by_mro[V](mapping: Mapping[type, V], typ: type | None) -> V | None:
    if typ is None or not mapping:
        return None
    for base in typ.__mro__:
        if base in mapping:
            return mapping[base]
    return None


# End of file: src/mstair/objprint/printer/model.py
