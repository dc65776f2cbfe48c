"""
Enums for the build log parser.

This module contains the enumeration types shared by the parsers and settings.
"""

from enum import Enum


class CompilerType(Enum):
    """Enumeration of supported compiler log flavours."""

    VC = "vc"
    GCC = "gcc"

    @classmethod
    def from_string(cls, compiler_name: str) -> "CompilerType":
        """Convert string parser key to enum value."""
        normalized = compiler_name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported compiler: {compiler_name}")


class WarningField(Enum):
    """Fields of a warning record that a capture group can fill."""

    FILE = "file"
    LINE = "line"
    ID = "id"
    MESSAGE = "message"
