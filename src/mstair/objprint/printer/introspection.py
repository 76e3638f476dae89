# File: src/mstair/objprint/printer/introspection.py
"""
Public member discovery for arbitrary Python objects.

Given any value, produce its ordered list of public members with names,
declared types and current values. The order is stable for a given class:

1. Declared members: dataclass or named tuple fields, otherwise class
   annotations (base classes first) followed by `__slots__` names.
2. Remaining public entries of the instance `__dict__`, in insertion order.
3. Public properties (including `functools.cached_property`), base classes first.

Names starting with an underscore, `ClassVar` annotations, dataclass fields
declared with `repr=False`, and methods are never members.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import types
import typing
from collections.abc import Iterator
from typing import Any, ClassVar, NewType, Union, get_args, get_origin

from mstair.objprint.base.types import MISSING


__all__ = [
    "MemberInfo",
    "declared_type_of",
    "iter_members",
    "normalize_declared_type",
]

_LOG = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class MemberInfo:
    """One public member of an object."""

    owner: type
    """Runtime type of the object the member was read from."""

    name: str
    """Attribute name."""

    declared_type: type | None
    """Normalized annotation, or None when the member is not (usefully) annotated."""

    value: Any
    """Current value."""

    @property
    def effective_type(self) -> type | None:
        """The declared type, falling back to the runtime type of the value."""
        if self.declared_type is not None:
            return self.declared_type
        if self.value is None:
            return None
        return type(self.value)


@dataclasses.dataclass(frozen=True, slots=True)
class _MemberDecl:
    name: str
    declared_type: type | None


@dataclasses.dataclass(frozen=True, slots=True)
class _ClassMembers:
    declared: tuple[_MemberDecl, ...]
    properties: tuple[_MemberDecl, ...]
    hidden: frozenset[str]
    is_dataclass: bool


def iter_members(obj: Any) -> Iterator[MemberInfo]:
    """
    Yield the public members of `obj` in a stable order.

    Declared members without a value on `obj` (e.g. a dataclass field with
    `init=False` that was never assigned) are skipped. Exceptions other than
    AttributeError raised by property getters propagate to the caller.

    :param obj: Any object.
    :yields MemberInfo: One entry per readable public member.
    """
    cls: type = type(obj)
    layout = _class_members(cls)
    # Properties are reserved up front so a cached_property keeps its position after first access.
    seen: set[str] = set(layout.hidden) | {member.name for member in layout.properties}

    for member in layout.declared:
        seen.add(member.name)
        value = getattr(obj, member.name, MISSING)
        if value is MISSING:
            if layout.is_dataclass:
                _LOG.warning("Skipping uninitialized field: %s.%s", cls.__qualname__, member.name)
            else:
                _LOG.debug("Skipping unset member: %s.%s", cls.__qualname__, member.name)
            continue
        yield MemberInfo(cls, member.name, member.declared_type, value)

    for name, value in _instance_items(obj):
        if name in seen or name.startswith("_"):
            continue
        seen.add(name)
        yield MemberInfo(cls, name, None, value)

    for member in layout.properties:
        value = getattr(obj, member.name, MISSING)
        if value is MISSING:
            _LOG.debug("Skipping unreadable property: %s.%s", cls.__qualname__, member.name)
            continue
        yield MemberInfo(cls, member.name, member.declared_type, value)


def declared_type_of(owner: type, name: str) -> type | None:
    """Return the normalized declared type of member `name` on `owner`, if known."""
    layout = _class_members(owner)
    for member in (*layout.declared, *layout.properties):
        if member.name == name:
            return member.declared_type
    return None


def normalize_declared_type(hint: Any) -> type | None:
    """
    Reduce a type annotation to a single runtime class, or None.

    - `X | None` and `Optional[X]` become `X`.
    - Generic aliases become their origin (`list[int]` -> `list`).
    - `NewType` becomes its supertype.
    - `Any`, string forward references, multi-type unions, TypeVars and
      Literals become None.
    """
    if hint is None or hint is Any or isinstance(hint, str):
        return None
    if isinstance(hint, NewType):
        return normalize_declared_type(hint.__supertype__)
    origin = get_origin(hint)
    if origin is typing.Annotated:
        return normalize_declared_type(get_args(hint)[0])
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(hint) if arg is not types.NoneType]
        return normalize_declared_type(args[0]) if len(args) == 1 else None
    if origin is not None:
        return origin if isinstance(origin, type) else None
    if isinstance(hint, type):
        return hint
    return None


def _is_classvar(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(("ClassVar", "typing.ClassVar"))
    return hint is ClassVar or get_origin(hint) is ClassVar


def _type_hints(target: Any) -> dict[str, Any]:
    """Resolved annotations, falling back to raw ones when forward references fail."""
    try:
        return typing.get_type_hints(target)
    except Exception as exc:  # NameError, TypeError from unresolvable references
        _LOG.debug("get_type_hints(%r) failed: %s", target, exc)
    hints: dict[str, Any] = {}
    if isinstance(target, type):
        for base in reversed(target.__mro__):
            hints.update(inspect.get_annotations(base))
    else:
        hints.update(getattr(target, "__annotations__", None) or {})
    return hints


@functools.cache
def _class_members(cls: type) -> _ClassMembers:
    hints = _type_hints(cls)
    hidden: set[str] = set()
    declared: dict[str, _MemberDecl] = {}

    def _declare(name: str) -> None:
        if name.startswith("_") or name in declared or name in hidden:
            return
        declared[name] = _MemberDecl(name, normalize_declared_type(hints.get(name)))

    is_dc = dataclasses.is_dataclass(cls)
    if is_dc:
        for field in dataclasses.fields(cls):
            if field.repr:
                _declare(field.name)
            else:
                hidden.add(field.name)
    elif issubclass(cls, tuple) and hasattr(cls, "_fields"):
        for name in cls._fields:
            _declare(name)
    else:
        for base in reversed(cls.__mro__):
            if base is object:
                continue
            for name, hint in inspect.get_annotations(base).items():
                if _is_classvar(hint):
                    hidden.add(name)
                    continue
                _declare(name)
        for base in reversed(cls.__mro__):
            slots = base.__dict__.get("__slots__", ())
            for name in (slots,) if isinstance(slots, str) else slots:
                if name not in {"__dict__", "__weakref__"}:
                    _declare(name)

    properties: dict[str, _MemberDecl] = {}
    for base in reversed(cls.__mro__):
        if base is object:
            continue
        for name, attr in vars(base).items():
            if name.startswith("_") or name in declared or name in hidden:
                continue
            fget: Any
            if isinstance(attr, property):
                fget = attr.fget
            elif isinstance(attr, functools.cached_property):
                fget = attr.func
            else:
                continue
            declared_type = normalize_declared_type(_type_hints(fget).get("return")) if fget else None
            properties[name] = _MemberDecl(name, declared_type)

    return _ClassMembers(
        declared=tuple(declared.values()),
        properties=tuple(properties.values()),
        hidden=frozenset(hidden),
        is_dataclass=is_dc,
    )


def _instance_items(obj: Any) -> list[tuple[str, Any]]:
    try:
        instance_dict = vars(obj)
    except TypeError:
        return []
    if not isinstance(instance_dict, dict):
        return []  # mappingproxy of classes and modules
    return list(instance_dict.items())


# End of file: src/mstair/objprint/printer/introspection.py
