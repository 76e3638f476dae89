"""
package: mstair.objprint
"""

# <AUTOGEN_INIT>
from mstair.objprint import (
    base,
    log_helpers,
    printer,
    xlogging,
)
from mstair.objprint.log_helpers import (
    log_object,
)
from mstair.objprint.printer.printer_api import (
    ObjectPrinter,
    print_to_string,
)


__all__ = [
    "ObjectPrinter",
    "base",
    "log_helpers",
    "log_object",
    "print_to_string",
    "printer",
    "xlogging",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"
