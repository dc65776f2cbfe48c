"""
Parser factory for creating appropriate parser instances.

This module provides a factory for creating build log parsers based on
the parser key.
"""

from typing import List, Union

from ..core.enums import CompilerType
from ..core.exceptions import ParserNotFoundError
from .base import CompilerParser
from .gcc import GccParser
from .vc import VcParser


class ParserFactory:
    """Factory for creating appropriate build log parser instances."""

    @staticmethod
    def create_parser(compiler_type: Union[CompilerType, str]) -> CompilerParser:
        """Create and return the appropriate parser for the given key."""
        if isinstance(compiler_type, str):
            try:
                compiler_type = CompilerType.from_string(compiler_type)
            except ValueError:
                raise ParserNotFoundError(compiler_type) from None

        match compiler_type:
            case CompilerType.VC:
                return VcParser()
            case CompilerType.GCC:
                return GccParser()
            case _:
                raise ParserNotFoundError(str(compiler_type))

    @staticmethod
    def available_parsers() -> List[str]:
        """Return the keys of every registered parser."""
        return [member.value for member in CompilerType]
