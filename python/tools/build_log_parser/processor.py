"""
Report processor.

This module is the seam a host calls: it resolves parser settings against a
base directory, runs the selected parser and summarizes the result.
"""

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from .config import ParserSettings
from .core.data_structures import CompilerWarning, ParseResult
from .parsers.factory import ParserFactory


class ReportProcessor:
    """Runs one configured parser over one build log."""

    def __init__(
        self,
        settings: Optional[ParserSettings] = None,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self.settings = (settings or ParserSettings()).resolve()
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.parser = ParserFactory.create_parser(self.settings.parser)

    @property
    def report_path(self) -> Path:
        """Report location, joined to base_dir when relative."""
        path = self.settings.report_path
        if self.base_dir is not None and not path.is_absolute():
            return self.base_dir / path
        return path

    def process(self, warnings: Optional[List[CompilerWarning]] = None) -> ParseResult:
        """Parse the configured report, appending to warnings if given."""
        report_path = self.report_path
        logger.info(f"Processing {self.parser.key} report: {report_path}")

        collected = self.parser.parse_report(
            report_path,
            charset=self.settings.charset,
            regex=self.settings.regex,
            warnings=warnings,
        )

        result = ParseResult(
            parser=self.parser.key,
            report_path=report_path,
            charset=self.settings.charset,
            warnings=collected,
        )
        logger.info(
            f"Found {result.count} warning(s) in {report_path} "
            f"(rules repository '{self.parser.rules_repository_key}')"
        )
        return result
