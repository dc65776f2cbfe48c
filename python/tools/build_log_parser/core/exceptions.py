#!/usr/bin/env python3
"""
Exception types for the build log parser.

Every concrete error also derives from the builtin exception a caller would
expect for the same failure, so ``except OSError`` keeps working.
"""

from pathlib import Path
from typing import Optional, Union


class WarningParserError(Exception):
    """Base exception for all build log parser errors"""
    pass


class ReportResourceError(WarningParserError, OSError):
    """Exception raised when a report file cannot be opened or read"""

    def __init__(self, message: str, report_path: Optional[Union[str, Path]] = None):
        self.report_path = Path(report_path) if report_path is not None else None
        super().__init__(message)


class ReportEncodingError(WarningParserError, ValueError, LookupError):
    """Exception raised for an unknown charset or undecodable report content"""

    def __init__(self, message: str, charset: Optional[str] = None):
        self.charset = charset
        super().__init__(message)


class PatternError(WarningParserError, ValueError):
    """Exception raised when a warning pattern cannot be compiled"""

    def __init__(self, message: str, pattern: Optional[str] = None):
        self.pattern = pattern
        super().__init__(message)


class MissingGroupError(PatternError, IndexError):
    """Exception raised when a pattern declares fewer capture groups than needed"""

    def __init__(self, pattern: str, found: int, required: int):
        self.found = found
        self.required = required
        super().__init__(
            f"Pattern declares {found} capture group(s), {required} required: '{pattern}'",
            pattern=pattern,
        )


class ParserNotFoundError(WarningParserError, KeyError):
    """Exception raised when no parser is registered for a key"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unsupported compiler parser: {key}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigurationError(WarningParserError):
    """Exception raised when parser settings are invalid or cannot be loaded"""

    def __init__(self, message: str, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path is not None else None
        super().__init__(message)
