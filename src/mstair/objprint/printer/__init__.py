"""
package: mstair.objprint.printer
"""

# <AUTOGEN_INIT>
from mstair.objprint.printer import (
    errors,
    introspection,
    model,
    print_engine,
    printer_api,
    printing_config,
    view,
)
from mstair.objprint.printer.errors import (
    ObjectPrintingError,
    PrintingConfigError,
    TruncationRangeError,
)
from mstair.objprint.printer.model import (
    MemberId,
    RenderRules,
)
from mstair.objprint.printer.print_engine import (
    PrintEngine,
)
from mstair.objprint.printer.printer_api import (
    ObjectPrinter,
    print_to_string,
)
from mstair.objprint.printer.printing_config import (
    MemberPrintingConfig,
    PrintingConfig,
    TypePrintingConfig,
)


__all__ = [
    "MemberId",
    "MemberPrintingConfig",
    "ObjectPrinter",
    "ObjectPrintingError",
    "PrintEngine",
    "PrintingConfig",
    "PrintingConfigError",
    "RenderRules",
    "TruncationRangeError",
    "TypePrintingConfig",
    "errors",
    "introspection",
    "model",
    "print_engine",
    "print_to_string",
    "printer_api",
    "printing_config",
    "view",
]
# </AUTOGEN_INIT>
