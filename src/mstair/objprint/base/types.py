# File: src/mstair/objprint/base/types.py

from decimal import Decimal
from fractions import Fraction
from typing import Final, Self


PRIMITIVE_NON_STRING_TYPES: Final[tuple[type, ...]] = (
    int,
    float,
    complex,
    bool,
    Decimal,
    Fraction,
    type(None),
)
PRIMITIVE_TYPES: Final[tuple[type, ...]] = (*PRIMITIVE_NON_STRING_TYPES, str)
NUMERIC_TYPES: Final[tuple[type, ...]] = (int, float, Decimal)
"""Types that accept locale-aware formatting. bool is excluded explicitly by callers."""


def is_numeric_type(typ: type) -> bool:
    """Return True if `typ` is a numeric primitive type eligible for locale formatting."""
    return isinstance(typ, type) and issubclass(typ, NUMERIC_TYPES) and not issubclass(typ, bool)


class Sentinel:
    """
    Singleton base class for sentinel objects such as MISSING.

    Behaves as a falsy, unique marker distinct from None.
    """

    __slots__ = ()

    _repr_name: str = "SENTINEL"

    def __repr__(self) -> str:
        return self._repr_name

    def __str__(self) -> str:
        return self._repr_name

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, _memo: dict[int, object]) -> Self:
        return self

    def __new__(cls) -> Self:
        if hasattr(cls, "_instance"):
            return cls._instance
        cls._instance = super().__new__(cls)
        return cls._instance


class Missing(Sentinel):
    """Singleton indicating a missing or unset value."""

    _repr_name = "MISSING"


MISSING: Final[Missing] = Missing()


# End of file: src/mstair/objprint/base/types.py
