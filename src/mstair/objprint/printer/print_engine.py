# File: src/mstair/objprint/printer/print_engine.py
"""
Recursive renderer that turns an object graph into indented text.

Output shape for an object at depth `d` (every line ends with a newline):

    pkg.Person
    <d+1 tabs>name = Alex
    <d+1 tabs>father = pkg.Person
    <d+2 tabs>name = Bob

and for a collection at depth `d`:

    list[int]
    <d tabs>[
    <d+1 tabs>1
    <d+1 tabs>2
    <d tabs>]

Objects already on the current recursion path print as a cycle marker instead
of being expanded again. Siblings that share a reference are expanded each time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mstair.objprint.base.constants import (
    COLLECTION_CLOSE,
    COLLECTION_OPEN,
    CYCLE_MARKER_FMT,
    INDENT_UNIT,
    MEMBER_SEPARATOR,
    NEWLINE,
    NULL_TEXT,
)
from mstair.objprint.printer.introspection import MemberInfo, iter_members
from mstair.objprint.printer.model import MappingEntry, RenderRules
from mstair.objprint.printer.view import (
    entry_label,
    format_number,
    is_collection,
    is_culture_number,
    render_atom,
    type_label,
)


__all__ = ["PrintEngine"]

_LOG = logging.getLogger(__name__)


class PrintEngine:
    """
    Renders values according to a fixed `RenderRules` snapshot.

    An engine keeps no state between calls; one instance may print any number
    of graphs, from any number of threads.
    """

    rules: RenderRules
    newline: str
    indent_unit: str

    def __init__(
        self,
        rules: RenderRules | None = None,
        *,
        newline: str = NEWLINE,
        indent_unit: str = INDENT_UNIT,
    ) -> None:
        self.rules = rules if rules is not None else RenderRules()
        self.newline = newline
        self.indent_unit = indent_unit

    def print(self, root: Any) -> str:
        """
        Render `root` and everything reachable from it.

        :param root: Any value, including None.
        :return: The rendered text. Each line ends with `self.newline`.
        :raises TruncationRangeError: If a truncation rule exceeds a string's length.
        :raises Exception: Anything raised by a caller-supplied formatter, unchanged.
        """
        visited: set[int] = set()
        return self._render(root, 0, visited)

    # -- dispatch --

    def _render(self, value: Any, depth: int, visited: set[int]) -> str:
        if value is None:
            return NULL_TEXT + self.newline

        formatter = self.rules.type_formatter(type(value))
        if formatter is not None:
            return self._formatted(formatter, value)

        if self.rules.is_final(value):
            return render_atom(value, self.rules) + self.newline

        key = id(value)
        if key in visited:
            label = type_label(value)
            _LOG.debug("Cycle detected at depth %d: %s", depth, label)
            return CYCLE_MARKER_FMT.format(label=label) + self.newline

        visited.add(key)
        try:
            if isinstance(value, Mapping) or is_collection(value):
                return self._render_collection(value, depth, visited)
            return self._render_object(value, depth, visited)
        finally:
            visited.discard(key)

    def _formatted(self, formatter: Any, value: Any) -> str:
        result = formatter(value)
        return (result if isinstance(result, str) else str(result)) + self.newline

    # -- collections --

    def _render_collection(self, value: Any, depth: int, visited: set[int]) -> str:
        outer = self.indent_unit * depth
        inner = self.indent_unit * (depth + 1)
        chunks: list[str] = [type_label(value), self.newline, outer, COLLECTION_OPEN, self.newline]
        if isinstance(value, Mapping):
            for key, item in value.items():
                chunks.append(inner)
                chunks.append(self._render_mapping_entry(MappingEntry(key, item), depth + 1, visited))
        else:
            for item in value:
                chunks.append(inner)
                chunks.append(self._render(item, depth + 1, visited))
        chunks.extend((outer, COLLECTION_CLOSE, self.newline))
        return "".join(chunks)

    def _render_mapping_entry(self, entry: MappingEntry, depth: int, visited: set[int]) -> str:
        prefix = self.indent_unit * (depth + 1)
        return "".join(
            (
                entry_label(entry.key, entry.value),
                self.newline,
                f"{prefix}key{MEMBER_SEPARATOR}",
                self._render(entry.key, depth + 1, visited),
                f"{prefix}value{MEMBER_SEPARATOR}",
                self._render(entry.value, depth + 1, visited),
            )
        )

    # -- objects --

    def _render_object(self, obj: Any, depth: int, visited: set[int]) -> str:
        prefix = self.indent_unit * (depth + 1)
        chunks: list[str] = [type_label(obj), self.newline]
        for member in iter_members(obj):
            rendered = self._render_member(member, depth + 1, visited)
            if rendered is None:
                continue
            chunks.append(f"{prefix}{member.name}{MEMBER_SEPARATOR}{rendered}")
        return "".join(chunks)

    def _render_member(self, member: MemberInfo, depth: int, visited: set[int]) -> str | None:
        """Render one member's value, or return None when the member is excluded."""
        rules = self.rules
        if rules.is_type_excluded(member.effective_type):
            return None
        if rules.is_member_excluded(member.owner, member.name):
            return None
        if member.value is None:
            return NULL_TEXT + self.newline

        formatter = rules.member_formatter(member.owner, member.name)
        if formatter is None and member.declared_type is not None:
            formatter = rules.type_formatter(member.declared_type)
        if formatter is not None:
            return self._formatted(formatter, member.value)
        if is_culture_number(member.value) and rules.type_formatter(type(member.value)) is None:
            locale = rules.culture_for(member.declared_type)
            if locale is not None:
                return format_number(member.value, locale) + self.newline
        return self._render(member.value, depth, visited)


# End of file: src/mstair/objprint/printer/print_engine.py
