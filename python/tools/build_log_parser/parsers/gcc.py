"""
GCC build log parser.

This module provides parsing for warnings emitted by GCC with
``-fdiagnostics-show-option``, where the option name closes the line.
"""

import re

from ..core.data_structures import CompilerWarning
from ..core.enums import CompilerType, WarningField
from .base import CompilerParser


class GccParser(CompilerParser):
    """Parser for GCC warnings such as ``src/a.c:12:5: warning: unused variable 'x' [-Wunused-variable]``."""

    COMPILER_TYPE = CompilerType.GCC
    RULES_REPOSITORY_KEY = "compiler-gcc"
    DEFAULT_REPORT_PATH = "compiler-reports/build.log"
    # groups: 1 = file, 2 = line, 3 = message, 4 = id
    DEFAULT_REGEX = r"^(.*):([0-9]+):[0-9]+:\x20warning:\x20(.*)\x20\[(.*)\]$"
    DEFAULT_CHARSET = "UTF-8"
    GROUP_ORDER = (
        WarningField.FILE,
        WarningField.LINE,
        WarningField.MESSAGE,
        WarningField.ID,
    )

    def create_warning(self, match: re.Match[str]) -> CompilerWarning:
        """Build the warning, dropping the ``=`` that ends options like ``-Wformat=``."""
        warning = super().create_warning(match)
        if warning.id.endswith("="):
            return CompilerWarning(
                file=warning.file,
                line=warning.line,
                id=warning.id[:-1],
                message=warning.message,
            )
        return warning
