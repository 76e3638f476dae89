# File: src/mstair/objprint/printer/printer_api.py
"""
Entry points for printing arbitrary objects as indented, human-readable text.

Output is meant for debugging and test assertions, not for parsing:

    print_to_string(Point(1, 2)) == "demo.Point\n\tx = 1\n\ty = 2\n"

Rules are configured with the fluent `PrintingConfig` builder, either up front:

    printer = ObjectPrinter.for_type(Person).excluding_type(UUID).printing(float).using_culture("de_DE")
    text = printer.print_to_string(person)

or inline, through a configuration callback:

    text = print_to_string(person, lambda cfg: cfg.excluding(lambda p: p.name))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, final

from mstair.objprint.printer.errors import PrintingConfigError
from mstair.objprint.printer.printing_config import PrintingConfig


__all__ = [
    "ConfigureFunction",
    "ObjectPrinter",
    "print_to_string",
]

type ConfigureFunction = Callable[[PrintingConfig[Any]], PrintingConfig[Any]]


@final
class ObjectPrinter:
    """A namespace class for creating printing configurations."""

    def __new__(cls, *_a: object, **_k: object) -> NoReturn:
        raise TypeError(f"{cls.__name__} is a namespace, not instantiable")

    @staticmethod
    def for_type[T](owner: type[T]) -> PrintingConfig[T]:
        """
        Create an empty configuration for objects of type `owner`.

        :param owner: The root type member selectors are resolved against.
        :return PrintingConfig: A configuration with default rules.
        """
        return PrintingConfig(owner)


def print_to_string(obj: Any, configure: ConfigureFunction | None = None) -> str:
    """
    Render `obj` and the object graph reachable from it.

    :param obj: Any value, including None.
    :param configure: Optional callback that receives the default configuration
        for `type(obj)` and returns the configuration to print with.
    :return str: The rendered text; every line ends with a newline.
    :raises PrintingConfigError: If `configure` does not return a PrintingConfig.
    """
    config: PrintingConfig[Any] = ObjectPrinter.for_type(type(obj))
    if configure is not None:
        config = configure(config)
        if not isinstance(config, PrintingConfig):
            raise PrintingConfigError(
                f"configure must return a PrintingConfig, got {type(config).__name__}"
            )
    return config.print_to_string(obj)


# End of file: src/mstair/objprint/printer/printer_api.py
