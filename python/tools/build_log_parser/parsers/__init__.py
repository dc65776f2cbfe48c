"""
Build log parsers.

This package contains the scanner shared by all parsers and one parser per
supported compiler log flavour.
"""

from .base import CompilerParser, compile_warning_pattern, check_charset
from .vc import VcParser
from .gcc import GccParser
from .factory import ParserFactory

__all__ = [
    "CompilerParser",
    "compile_warning_pattern",
    "check_charset",
    "VcParser",
    "GccParser",
    "ParserFactory",
]
