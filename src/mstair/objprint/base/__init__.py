"""
package: mstair.objprint.base
"""

# <AUTOGEN_INIT>
from mstair.objprint.base import (
    config,
    constants,
    fs_helpers,
    string_helpers,
    types,
)


__all__ = [
    "config",
    "constants",
    "fs_helpers",
    "string_helpers",
    "types",
]
# </AUTOGEN_INIT>
