# File: src/mstair/objprint/base/string_helpers.py

import re
from typing import Final


# Match %-style format specifiers:
#   %s, %d, %f, %r, %x, etc.
#   optionally with mapping keys: %(name)s
#   ignore literal %% (handled separately)
_PRINTF_SPECIFIER_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    %                           # Start of specifier
    (?!%)                       # Not a literal '%%'
    (?:\([^)]+\))?              # Optional mapping key e.g. %(name)
    [#0\- +]?                   # Optional flags
    (?:\d+|\*)?                 # Optional width
    (?:\.(?:\d+|\*))?           # Optional precision
    [diouxXeEfFgGcrs]           # Conversion type
    """,
    re.VERBOSE,
)


def fqn(typ: type) -> str:
    """
    Return the dotted `module.QualName` of a type, omitting the `builtins` module.

    >>> fqn(int)
    'int'
    >>> fqn(OrderedDict)
    'collections.OrderedDict'
    """
    module: str = getattr(typ, "__module__", "") or ""
    qualname: str = getattr(typ, "__qualname__", None) or getattr(typ, "__name__", repr(typ))
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def count_printf_specifiers(format_string: str) -> int:
    """Count %-style specifiers in `format_string`, ignoring literal '%%'."""
    return len(_PRINTF_SPECIFIER_RE.findall(format_string.replace("%%", "")))


# End of file: src/mstair/objprint/base/string_helpers.py
