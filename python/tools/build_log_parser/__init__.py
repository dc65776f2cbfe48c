"""
Build Log Parser

This package scans compiler build logs for warnings and hands them to a
host as a list of records. Each warning is taken from one match of a regular
expression whose four capture groups give the file, the line, the warning id
and the message.

Features:
- Visual C++ (BuildLog.htm, UTF-16) and GCC build logs
- Caller-supplied patterns and charsets
- Settings loadable from JSON or TOML
"""

from pathlib import Path
from typing import List, Optional, Union

from .core import (
    CompilerType,
    WarningField,
    CompilerWarning,
    ParseResult,
    WarningParserError,
    ReportResourceError,
    ReportEncodingError,
    PatternError,
    MissingGroupError,
    ParserNotFoundError,
    ConfigurationError,
)
from .parsers import CompilerParser, VcParser, GccParser, ParserFactory
from .config import ParserSettings
from .processor import ReportProcessor

__version__ = "0.1.0"


def parse_report(
    report: Union[str, Path],
    charset: Optional[str] = None,
    regex: Optional[str] = None,
    warnings: Optional[List[CompilerWarning]] = None,
    parser: Union[CompilerType, str] = CompilerType.VC,
) -> List[CompilerWarning]:
    """
    Parse a build log and return the warnings found in it.

    Args:
        report: Path to the build log
        charset: Encoding of the log, the parser's default when omitted
        regex: Pattern with four capture groups, the parser's default when omitted
        warnings: Optional caller-owned list to append to
        parser: Parser key (vc, gcc) supplying the defaults

    Returns:
        List of warnings in the order they appear in the log
    """
    return ParserFactory.create_parser(parser).parse_report(
        report, charset=charset, regex=regex, warnings=warnings
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
    "CompilerParser",
    "VcParser",
    "GccParser",
    "ParserFactory",
    "ParserSettings",
    "ReportProcessor",
    "parse_report",
]
