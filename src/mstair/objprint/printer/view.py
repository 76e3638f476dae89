# File: src/mstair/objprint/printer/view.py
"""
Text rendering for terminal values and type labels.

This module provides the leaf-level stringification used by the print engine:

- `render_atom()`: Final (terminal) values, honoring locale formatting for numbers.
- `type_label()`: The label printed above a structural or collection value.
- `truncating_formatter()`: The formatter behind `trimmed_to_length()`.
"""

from __future__ import annotations

import enum
import pathlib
from collections.abc import Callable, Collection, Iterable, Mapping
from datetime import date, time, timedelta
from typing import Any, Final

from babel import Locale
from babel.numbers import format_decimal

from mstair.objprint.base.string_helpers import fqn
from mstair.objprint.base.types import is_numeric_type
from mstair.objprint.printer.errors import TruncationRangeError
from mstair.objprint.printer.model import RenderRules


__all__ = [
    "entry_label",
    "format_number",
    "is_collection",
    "is_culture_number",
    "render_atom",
    "stringify_atom",
    "truncate_text",
    "truncating_formatter",
    "type_label",
]

type _AtomRendererFunction = Callable[[Any], str]

_TEXT_LIKE: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)


def _atom_render_timedelta(obj: timedelta) -> str:
    """Render a timedelta as `1d:2h:03m:04s`, dropping leading zero units."""
    sign = "-" if obj < timedelta(0) else ""
    seconds = int(abs(obj.total_seconds()))
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    chunks: list[str] = []
    if days:
        chunks.append(f"{days}d:")
    if hours or chunks:
        chunks.append(f"{hours}h:")
    if minutes or chunks:
        chunks.append(f"{minutes:02}m:")
    chunks.append(f"{seconds:02}s")
    return sign + "".join(chunks)


def _atom_render_enum(obj: enum.Enum) -> str:
    return f"{type(obj).__name__}.{obj.name}"


_ATOMIC_RENDERERS: Final[dict[type, _AtomRendererFunction]] = {
    str: str,
    bool: str,
    int: str,
    float: str,
    complex: str,
    bytes: repr,
    bytearray: repr,
    memoryview: lambda x: repr(x.tobytes()),
    date: lambda x: x.isoformat(),
    time: lambda x: x.isoformat(),
    timedelta: _atom_render_timedelta,
    pathlib.PurePath: lambda x: x.as_posix(),
    type: fqn,
}


def stringify_atom(atom: Any) -> str:
    """
    Render a terminal value with the default renderer for its type.

    Renderers are looked up along the type's MRO, so subclasses of registered
    types (datetime -> date) share their base's renderer. Enum members always
    render as `Type.NAME`, even when they also derive from int or str.
    """
    if isinstance(atom, enum.Enum):
        return _atom_render_enum(atom)
    renderer: _AtomRendererFunction = next(
        (_ATOMIC_RENDERERS[_mro] for _mro in type(atom).__mro__ if _mro in _ATOMIC_RENDERERS),
        str,
    )
    return renderer(atom)


def format_number(value: Any, locale: Locale) -> str:
    """Render a numeric value with the decimal symbols and grouping of `locale`, keeping all digits."""
    return format_decimal(value, locale=locale, decimal_quantization=False)


def is_culture_number(value: Any) -> bool:
    """True for int, float and Decimal values (not bool, not enum members)."""
    return is_numeric_type(type(value)) and not isinstance(value, enum.Enum)


def render_atom(atom: Any, rules: RenderRules) -> str:
    """Render a terminal value, applying the culture configured for its type if any."""
    if is_culture_number(atom):
        locale = rules.culture_for(type(atom))
        if locale is not None:
            return format_number(atom, locale)
    return stringify_atom(atom)


def is_collection(value: Any) -> bool:
    """True for values printed as a bracketed element list (not mappings, text, or named tuples)."""
    if isinstance(value, (Mapping, *_TEXT_LIKE)):
        return False
    if isinstance(value, tuple) and hasattr(type(value), "_fields"):
        return False
    return isinstance(value, Collection)


def _distinct_type_names(values: Iterable[Any]) -> str:
    names: dict[str, None] = {}
    for item in values:
        names.setdefault("None" if item is None else fqn(type(item)), None)
    return " | ".join(names)


def type_label(value: Any) -> str:
    """
    Return the label printed for a structural or collection value.

    Labels are `module.QualName` (builtins unqualified). Collections append the
    element types they actually contain, in first-seen order:

    >>> type_label([1, 2])
    'list[int]'
    >>> type_label({1: "a"})
    'dict[int, str]'
    >>> type_label([1, "a", None])
    'list[int | str | None]'
    >>> type_label([])
    'list'
    """
    label = fqn(type(value))
    if isinstance(value, Mapping):
        if value:
            label += f"[{_distinct_type_names(value.keys())}, {_distinct_type_names(value.values())}]"
    elif is_collection(value):
        element_names = _distinct_type_names(value)
        if element_names:
            label += f"[{element_names}]"
    return label


def entry_label(key: Any, value: Any) -> str:
    """Label for one entry of an associative collection, e.g. `MappingEntry[int, str]`."""
    return f"MappingEntry[{_distinct_type_names([key])}, {_distinct_type_names([value])}]"


def truncate_text(text: str, max_len: int) -> str:
    """
    Return the first `max_len` characters of `text`.

    :raises TruncationRangeError: If `max_len` is negative or longer than `text`.
    """
    if max_len < 0:
        raise TruncationRangeError(max_len)
    if max_len > len(text):
        raise TruncationRangeError(max_len, len(text))
    return text[:max_len]


def truncating_formatter(max_len: int) -> Callable[[Any], str]:
    """
    Create a formatter that keeps the first `max_len` characters of a value's text.

    The length is validated now (negative lengths are rejected immediately) and
    again for every value (a string shorter than `max_len` raises when printed).
    """
    if max_len < 0:
        raise TruncationRangeError(max_len)

    def _truncating_formatter(value: Any) -> str:
        text = value if isinstance(value, str) else stringify_atom(value)
        return truncate_text(text, max_len)

    return _truncating_formatter


# End of file: src/mstair/objprint/printer/view.py
