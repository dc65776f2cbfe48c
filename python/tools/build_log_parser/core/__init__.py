"""
Core components for the build log parser.

This package contains the fundamental data structures, enums and exceptions.
"""

from .enums import CompilerType, WarningField
from .data_structures import CompilerWarning, ParseResult
from .exceptions import (
    WarningParserError,
    ReportResourceError,
    ReportEncodingError,
    PatternError,
    MissingGroupError,
    ParserNotFoundError,
    ConfigurationError,
)

__all__ = [
    "CompilerType",
    "WarningField",
    "CompilerWarning",
    "ParseResult",
    "WarningParserError",
    "ReportResourceError",
    "ReportEncodingError",
    "PatternError",
    "MissingGroupError",
    "ParserNotFoundError",
    "ConfigurationError",
]
