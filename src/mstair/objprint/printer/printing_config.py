# File: src/mstair/objprint/printer/printing_config.py
"""
Fluent, immutable builder for object printing rules.

Each call returns a new configuration; the receiver is never modified, so a
partially built configuration can be shared and extended in different ways:

    base = ObjectPrinter.for_type(Person).excluding_type(UUID)
    upper = base.printing(str).using(str.upper)
    short = base.printing_member(lambda p: p.name).trimmed_to_length(1)

Members are selected either by name (`"name"`) or by a one-argument callable
that reads exactly one attribute (`lambda p: p.name`). Callables are evaluated
against a recording probe, never against a real instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn

from babel import Locale, UnknownLocaleError

from mstair.objprint.base.string_helpers import fqn
from mstair.objprint.base.types import is_numeric_type
from mstair.objprint.printer.errors import PrintingConfigError
from mstair.objprint.printer.introspection import declared_type_of
from mstair.objprint.printer.model import MemberId, RenderRules, ValueFormatter
from mstair.objprint.printer.print_engine import PrintEngine
from mstair.objprint.printer.view import truncating_formatter


__all__ = [
    "MemberPrintingConfig",
    "MemberSelector",
    "PrintingConfig",
    "TypePrintingConfig",
    "resolve_member_id",
]

_LOG = logging.getLogger(__name__)

type MemberSelector = str | Callable[[Any], Any]
"""A public attribute name, or a callable that reads exactly one attribute of its argument."""


class _SelectorProbe:
    """Stand-in instance that records every attribute read made through it."""

    __slots__ = ("_reads",)

    def __init__(self, reads: list[str] | None = None) -> None:
        object.__setattr__(self, "_reads", reads if reads is not None else [])

    def __getattr__(self, name: str) -> _SelectorProbe:
        self._reads.append(name)
        return _SelectorProbe(self._reads)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise PrintingConfigError(f"Member selectors must not assign attributes (tried {name!r})")


def resolve_member_id(owner: type, selector: MemberSelector) -> MemberId:
    """
    Resolve a member selector against `owner`.

    :param owner: The type the member belongs to.
    :param selector: Attribute name or single-attribute accessor.
    :return MemberId: Identity of the selected member.
    :raises PrintingConfigError: If the selector does not denote exactly one public attribute.
    """
    if isinstance(selector, str):
        name = selector
    elif callable(selector):
        probe = _SelectorProbe()
        try:
            selector(probe)
        except PrintingConfigError:
            raise
        except Exception as exc:
            raise PrintingConfigError(f"Member selector {selector!r} failed on a probe: {exc}") from exc
        reads: list[str] = object.__getattribute__(probe, "_reads")
        if not reads:
            raise PrintingConfigError(f"Member selector {selector!r} does not read any attribute")
        if len(reads) > 1:
            raise PrintingConfigError(
                f"Member selector {selector!r} reads a nested path ({'.'.join(reads)}); "
                "only direct members can be selected"
            )
        name = reads[0]
    else:
        raise PrintingConfigError(f"Member selector must be a name or a callable, got {type(selector).__name__}")

    if not name.isidentifier():
        raise PrintingConfigError(f"Not a valid member name: {name!r}")
    if name.startswith("_"):
        raise PrintingConfigError(f"Private members cannot be selected: {name!r}")
    return MemberId(owner, name)


def _require_type(typ: Any, what: str) -> type:
    if not isinstance(typ, type):
        raise PrintingConfigError(f"{what} expects a type, got {typ!r}")
    return typ


def _require_callable(fn: Any) -> ValueFormatter:
    if not callable(fn):
        raise PrintingConfigError(f"Formatter must be callable, got {type(fn).__name__}")
    return fn


def _parse_locale(locale: str | Locale) -> Locale:
    if isinstance(locale, Locale):
        return locale
    if not isinstance(locale, str) or not locale:
        raise PrintingConfigError(f"Locale must be a Locale or a non-empty identifier, got {locale!r}")
    try:
        return Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise PrintingConfigError(f"Unknown locale: {locale!r}") from exc


class PrintingConfig[TOwner]:
    """
    Immutable set of printing rules for objects of type `TOwner`.

    Use `ObjectPrinter.for_type()` to obtain an empty configuration.
    """

    __slots__ = ("_owner", "_rules")

    _owner: type[TOwner]
    _rules: RenderRules

    def __init__(self, owner: type[TOwner], rules: RenderRules | None = None) -> None:
        self._owner = _require_type(owner, "PrintingConfig")
        self._rules = rules if rules is not None else RenderRules()

    def __repr__(self) -> str:
        return f"PrintingConfig[{fqn(self._owner)}]"

    @property
    def owner(self) -> type[TOwner]:
        """The root type member selectors are resolved against."""
        return self._owner

    @property
    def rules(self) -> RenderRules:
        """Snapshot of the rules built so far."""
        return self._rules

    def _with_rules(self, **changes: Any) -> PrintingConfig[TOwner]:
        return PrintingConfig(self._owner, self._rules.with_changes(**changes))

    def excluding_type(self, typ: type) -> PrintingConfig[TOwner]:
        """Omit every member whose declared type is `typ` or a subclass of it."""
        typ = _require_type(typ, "excluding_type")
        _LOG.debug("%s: excluding type %s", repr(self), fqn(typ))
        return self._with_rules(excluded_types=self._rules.excluded_types | {typ})

    def excluding(self, selector: MemberSelector) -> PrintingConfig[TOwner]:
        """Omit the selected member wherever an object of the owner type is printed."""
        member_id = resolve_member_id(self._owner, selector)
        _LOG.debug("%s: excluding member %s", repr(self), str(member_id))
        return self._with_rules(excluded_members=self._rules.excluded_members | {member_id})

    def printing[T](self, typ: type[T]) -> TypePrintingConfig[TOwner, T]:
        """Start a rule that applies to every value of type `typ`."""
        return TypePrintingConfig(self, _require_type(typ, "printing"))

    def printing_member(self, selector: MemberSelector) -> MemberPrintingConfig[TOwner]:
        """Start a rule that applies to one member of the owner type."""
        return MemberPrintingConfig(self, resolve_member_id(self._owner, selector))

    def treating_as_final(self, *types: type) -> PrintingConfig[TOwner]:
        """Print values of `types` directly (via str) instead of expanding their members."""
        added = tuple(_require_type(typ, "treating_as_final") for typ in types)
        current = self._rules.final_types
        return self._with_rules(final_types=current + tuple(typ for typ in added if typ not in current))

    def print_to_string(self, obj: TOwner) -> str:
        """Render `obj` with the rules configured so far."""
        return PrintEngine(self._rules).print(obj)


class TypePrintingConfig[TOwner, T]:
    """Pending rule for one value type. Every method returns the parent `PrintingConfig`."""

    __slots__ = ("_parent", "_type")

    def __init__(self, parent: PrintingConfig[TOwner], typ: type[T]) -> None:
        self._parent = parent
        self._type = typ

    def using(self, formatter: Callable[[T], Any]) -> PrintingConfig[TOwner]:
        """Render every value of the type with `formatter`."""
        formatter = _require_callable(formatter)
        rules = self._parent.rules
        return self._parent._with_rules(type_formatters={**rules.type_formatters, self._type: formatter})

    def using_culture(self, locale: str | Locale) -> PrintingConfig[TOwner]:
        """
        Render the numeric type with the decimal conventions of `locale`.

        :param locale: A babel Locale or an identifier such as "de_DE" or "ru-RU".
        :raises PrintingConfigError: If the type is not int, float or Decimal, or the locale is unknown.
        """
        if not is_numeric_type(self._type):
            raise PrintingConfigError(
                f"Culture formatting applies to int, float and Decimal only, not {fqn(self._type)}"
            )
        parsed = _parse_locale(locale)
        rules = self._parent.rules
        return self._parent._with_rules(culture_formatters={**rules.culture_formatters, self._type: parsed})

    def trimmed_to_length(self, max_len: int) -> PrintingConfig[TOwner]:
        """
        Keep only the first `max_len` characters of every string.

        :raises PrintingConfigError: If the type is not str.
        :raises TruncationRangeError: If `max_len` is negative.
        """
        if not issubclass(self._type, str):
            raise PrintingConfigError(f"Truncation applies to str only, not {fqn(self._type)}")
        return self.using(truncating_formatter(max_len))


class MemberPrintingConfig[TOwner]:
    """Pending rule for one member. Every method returns the parent `PrintingConfig`."""

    __slots__ = ("_member_id", "_parent")

    def __init__(self, parent: PrintingConfig[TOwner], member_id: MemberId) -> None:
        self._parent = parent
        self._member_id = member_id

    @property
    def member_id(self) -> MemberId:
        return self._member_id

    def using(self, formatter: Callable[[Any], Any]) -> PrintingConfig[TOwner]:
        """Render the member's value with `formatter`. Wins over any type rule."""
        formatter = _require_callable(formatter)
        rules = self._parent.rules
        return self._parent._with_rules(
            member_formatters={**rules.member_formatters, self._member_id: formatter}
        )

    def trimmed_to_length(self, max_len: int) -> PrintingConfig[TOwner]:
        """
        Keep only the first `max_len` characters of the member's value.

        :raises PrintingConfigError: If the member is declared with a type other than str.
        :raises TruncationRangeError: If `max_len` is negative.
        """
        declared = declared_type_of(self._member_id.owner, self._member_id.name)
        if declared is not None and not issubclass(declared, str):
            raise PrintingConfigError(
                f"Truncation applies to str members only; {self._member_id} is {fqn(declared)}"
            )
        return self.using(truncating_formatter(max_len))


# End of file: src/mstair/objprint/printer/printing_config.py
