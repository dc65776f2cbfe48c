#!/usr/bin/env python3
"""
Base parser for compiler build logs.

This module defines the behaviour shared by every build log parser: opening the
report under a charset, scanning it with a four-group regular expression and
turning each match into a CompilerWarning.
"""

from __future__ import annotations

import codecs
import re
from pathlib import Path
from typing import ClassVar, List, Optional, Tuple, Union

from loguru import logger

from ..core.data_structures import CompilerWarning
from ..core.enums import CompilerType, WarningField
from ..core.exceptions import (
    MissingGroupError,
    PatternError,
    ReportEncodingError,
    ReportResourceError,
)

REQUIRED_GROUPS = 4


def compile_warning_pattern(regex: str) -> re.Pattern[str]:
    """
    Compile a warning pattern in multi-line mode.

    Args:
        regex: Regular expression with at least four capture groups.

    Returns:
        The compiled pattern.

    Raises:
        PatternError: If the expression does not compile.
        MissingGroupError: If it declares fewer than four capture groups.
    """
    try:
        pattern = re.compile(regex, re.MULTILINE)
    except re.error as e:
        raise PatternError(f"Invalid warning pattern '{regex}': {e}", pattern=regex) from e

    if pattern.groups < REQUIRED_GROUPS:
        raise MissingGroupError(regex, pattern.groups, REQUIRED_GROUPS)
    return pattern


def check_charset(charset: str) -> str:
    """Return the canonical codec name for charset or raise ReportEncodingError."""
    try:
        codec_info = codecs.lookup(charset)
    except LookupError as e:
        raise ReportEncodingError(f"Unsupported charset: {charset}", charset=charset) from e

    # base64, hex, rot13 and friends are registered codecs but cannot decode text
    if not getattr(codec_info, "_is_text_encoding", True):
        raise ReportEncodingError(f"Not a text encoding: {charset}", charset=charset)
    return codec_info.name


class CompilerParser:
    """
    Regex-driven scanner for one flavour of compiler build log.

    Subclasses only provide constants: the parser key, the rule repository the
    host files warnings under, the defaults for report path, regex and charset,
    and the order in which capture groups 1..4 fill the warning fields.
    Instances hold no state between calls.
    """

    COMPILER_TYPE: ClassVar[CompilerType]
    RULES_REPOSITORY_KEY: ClassVar[str]
    DEFAULT_REPORT_PATH: ClassVar[str]
    DEFAULT_REGEX: ClassVar[str]
    DEFAULT_CHARSET: ClassVar[str]
    GROUP_ORDER: ClassVar[Tuple[WarningField, ...]] = (
        WarningField.FILE,
        WarningField.LINE,
        WarningField.ID,
        WarningField.MESSAGE,
    )

    @property
    def key(self) -> str:
        return self.COMPILER_TYPE.value

    @property
    def rules_repository_key(self) -> str:
        return self.RULES_REPOSITORY_KEY

    @property
    def default_report_path(self) -> str:
        return self.DEFAULT_REPORT_PATH

    @property
    def default_regex(self) -> str:
        return self.DEFAULT_REGEX

    @property
    def default_charset(self) -> str:
        return self.DEFAULT_CHARSET

    def create_warning(self, match: re.Match[str]) -> CompilerWarning:
        """Build a warning from groups 1..4 of a match, following GROUP_ORDER."""
        fields = {
            name.value: match.group(position)
            for position, name in enumerate(self.GROUP_ORDER, start=1)
        }
        return CompilerWarning(**fields)

    def parse_report(
        self,
        report: Union[str, Path],
        charset: Optional[str] = None,
        regex: Optional[str] = None,
        warnings: Optional[List[CompilerWarning]] = None,
    ) -> List[CompilerWarning]:
        """
        Scan a build log and collect every warning the pattern matches.

        Matches are searched over the whole decoded content, so a pattern may
        span lines. Warnings are appended in document order.

        Args:
            report: Path to the build log.
            charset: Encoding of the log, DEFAULT_CHARSET when None.
            regex: Pattern with four capture groups, DEFAULT_REGEX when None.
            warnings: Caller-owned list to append to. A new list is used if omitted.

        Returns:
            The list the warnings were appended to.

        Raises:
            ReportResourceError: If the report cannot be opened or read.
            ReportEncodingError: If the charset is unknown or the content does not decode.
            PatternError: If the pattern is invalid or has too few groups.
        """
        report_path = Path(report)
        if charset is None:
            charset = self.default_charset
        if regex is None:
            regex = self.default_regex
        if warnings is None:
            warnings = []

        check_charset(charset)
        pattern = compile_warning_pattern(regex)
        logger.debug(f"Using pattern : '{pattern.pattern}'")

        try:
            with report_path.open("r", encoding=charset) as report_file:
                content = report_file.read()
        except UnicodeDecodeError as e:
            logger.error(f"Cannot decode {report_path} as {charset}: {e}")
            raise ReportEncodingError(
                f"Cannot decode {report_path} as {charset}: {e}", charset=charset
            ) from e
        except OSError as e:
            logger.error(f"Cannot read report {report_path}: {e}")
            raise ReportResourceError(
                f"Cannot read report {report_path}: {e}", report_path
            ) from e

        for match in pattern.finditer(content):
            warning = self.create_warning(match)
            logger.debug(
                f"Scanner-matches file='{warning.file}' line='{warning.line}' "
                f"id='{warning.id}' msg={warning.message}"
            )
            warnings.append(warning)

        return warnings
