# File: src/mstair/objprint/printer/test_introspection.py

from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Annotated, Any, ClassVar, NewType, Optional, Union

import pytest

from mstair.objprint.printer.introspection import (
    MemberInfo,
    declared_type_of,
    iter_members,
    normalize_declared_type,
)


UserId = NewType("UserId", int)


class Plain:
    a: int
    b: str
    LIMIT: ClassVar[int] = 3

    def __init__(self) -> None:
        self.b = "x"
        self.a = 1
        self.extra = 2.5
        self._hidden = 0

    @property
    def total(self) -> float:
        return self.a + self.extra

    def method(self) -> int:
        return 0


class Derived(Plain):
    c: bytes

    def __init__(self) -> None:
        super().__init__()
        self.c = b"c"


class Slotted:
    __slots__ = ("x", "y")

    def __init__(self) -> None:
        self.x = 1


class Lazy:
    def __init__(self) -> None:
        self.value = 1

    @functools.cached_property
    def doubled(self) -> int:
        return self.value * 2


class Fragile:
    @property
    def missing(self) -> int:
        raise AttributeError("not yet")

    @property
    def broken(self) -> int:
        raise RuntimeError("boom")


@dataclasses.dataclass
class Record:
    name: str
    secret: str = dataclasses.field(default="s", repr=False)
    count: int = dataclasses.field(init=False)


def _names(obj: Any) -> list[str]:
    return [member.name for member in iter_members(obj)]


@pytest.mark.unit
def test_plain_class_order() -> None:
    members = list(iter_members(Plain()))
    assert [m.name for m in members] == ["a", "b", "extra", "total"]
    assert [m.declared_type for m in members] == [int, str, None, float]
    assert members[2].effective_type is float
    assert members[3].value == 3.5


@pytest.mark.unit
def test_base_class_annotations_come_first() -> None:
    assert _names(Derived()) == ["a", "b", "c", "extra", "total"]


@pytest.mark.unit
def test_unset_slots_are_skipped() -> None:
    assert _names(Slotted()) == ["x"]


@pytest.mark.unit
def test_cached_property_keeps_its_position() -> None:
    lazy = Lazy()
    assert _names(lazy) == ["value", "doubled"]
    assert _names(lazy) == ["value", "doubled"]
    assert "doubled" in vars(lazy)


@pytest.mark.unit
def test_property_attribute_error_skips_member() -> None:
    class OnlyMissing:
        @property
        def missing(self) -> int:
            raise AttributeError("not yet")

    assert _names(OnlyMissing()) == []


@pytest.mark.unit
def test_property_errors_propagate() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        _names(Fragile())


@pytest.mark.unit
def test_dataclass_fields(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        members = list(iter_members(Record("r")))
    assert members == [MemberInfo(Record, "name", str, "r")]
    assert any("uninitialized field" in record.getMessage() for record in caplog.records)


@pytest.mark.unit
def test_declared_type_of() -> None:
    assert declared_type_of(Plain, "a") is int
    assert declared_type_of(Plain, "total") is float
    assert declared_type_of(Plain, "extra") is None
    assert declared_type_of(Plain, "nope") is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("hint", "expected"),
    [
        (int, int),
        (Optional[int], int),
        (int | None, int),
        (Union[int, str], None),
        (list[int], list),
        (dict[str, Any], dict),
        (Annotated[str, "meta"], str),
        (UserId, int),
        (Any, None),
        ("Forward", None),
        (None, None),
    ],
)
def test_normalize_declared_type(hint: Any, expected: type | None) -> None:
    assert normalize_declared_type(hint) is expected


# End of file: src/mstair/objprint/printer/test_introspection.py
