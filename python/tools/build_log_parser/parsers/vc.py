"""
Visual C++ build log parser.

Reads the BuildLog.htm written by Visual Studio, which is UTF-16 encoded with
a byte order mark. Without a BOM Python's ``utf-16`` codec falls back to the
host byte order (little-endian on x86 and ARM), not to big-endian.
"""

from ..core.enums import CompilerType
from .base import CompilerParser


class VcParser(CompilerParser):
    """Parser for Microsoft Visual C++ warnings such as ``a\\b.cpp(12) : warning C4996:...``."""

    COMPILER_TYPE = CompilerType.VC
    RULES_REPOSITORY_KEY = "compiler-vc"
    DEFAULT_REPORT_PATH = "compiler-reports/BuildLog.htm"
    # groups: 1 = file, 2 = line, 3 = id, 4 = message
    DEFAULT_REGEX = r"^.*[\\,/](.*)\(([0-9]+)\)\x20:\x20warning\x20(C\d\d\d\d):(.*)$"
    DEFAULT_CHARSET = "UTF-16"
