"""
Data structures for the build log parser.

This module contains the records produced by a parse run.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass(frozen=True)
class CompilerWarning:
    """One compiler diagnostic found in a build log.

    ``line`` is kept as the raw text captured from the log.
    """

    file: str
    line: str
    id: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert the CompilerWarning to a dictionary."""
        return {
            "file": self.file,
            "line": self.line,
            "id": self.id,
            "message": self.message,
        }


@dataclass
class ParseResult:
    """Summary of parsing one report."""

    parser: str
    report_path: Path
    charset: str
    warnings: List[CompilerWarning] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of warnings collected."""
        return len(self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the ParseResult to a dictionary."""
        return {
            "parser": self.parser,
            "report_path": str(self.report_path),
            "charset": self.charset,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
