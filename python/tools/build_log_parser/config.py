#!/usr/bin/env python3
"""
Parser settings for the build log parser.

Settings select a parser by key and may override its report path, charset and
warning pattern. Anything left unset is taken from the selected parser's
defaults when the settings are resolved. Settings can be built from a mapping
or loaded from a JSON or TOML file.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.enums import CompilerType
from .core.exceptions import ConfigurationError, WarningParserError
from .parsers.base import check_charset, compile_warning_pattern
from .parsers.factory import ParserFactory


class ParserSettings(BaseModel):
    """Settings for one parse run using Pydantic v2."""

    # regex is kept verbatim, whitespace in a pattern is significant
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    parser: str = Field(default=CompilerType.VC.value, description="Parser key")
    report_path: Optional[Path] = Field(default=None, description="Build log location")
    charset: Optional[str] = Field(default=None, description="Build log encoding")
    regex: Optional[str] = Field(
        default=None, description="Warning pattern with four capture groups"
    )

    @field_validator("parser")
    @classmethod
    def validate_parser(cls, v: str) -> str:
        """Normalize and check the parser key."""
        try:
            return CompilerType.from_string(v).value
        except ValueError:
            supported = ", ".join(ParserFactory.available_parsers())
            raise ValueError(f"Unknown parser '{v.strip()}'. Supported parsers: {supported}")

    @field_validator("charset")
    @classmethod
    def validate_charset(cls, v: Optional[str]) -> Optional[str]:
        v = v.strip() if v is not None else None
        if v:
            check_charset(v)
        return v or None

    @field_validator("regex")
    @classmethod
    def validate_regex(cls, v: Optional[str]) -> Optional[str]:
        """Compile the pattern once so group count problems surface here."""
        if v:
            compile_warning_pattern(v)
        return v or None

    def resolve(self) -> ParserSettings:
        """Return a copy with every unset field taken from the parser defaults."""
        parser = ParserFactory.create_parser(self.parser)
        return self.model_copy(
            update={
                "report_path": self.report_path or Path(parser.default_report_path),
                "charset": self.charset or parser.default_charset,
                "regex": self.regex or parser.default_regex,
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary, skipping unset values."""
        data = self.model_dump(exclude_none=True)
        if "report_path" in data:
            data["report_path"] = str(data["report_path"])
        return data

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], source_file: Optional[Path] = None
    ) -> ParserSettings:
        """
        Build settings from a mapping.

        Raises:
            ConfigurationError: If the mapping holds unknown keys or invalid values.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            # pydantic keeps the original error of a failed validator in ctx
            for detail in e.errors():
                cause = (detail.get("ctx") or {}).get("error")
                if isinstance(cause, WarningParserError):
                    raise cause from e
            raise ConfigurationError(
                f"Invalid parser settings: {e}", config_path=source_file
            ) from e

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> ParserSettings:
        """
        Load settings from a JSON or TOML file.

        A TOML file may keep the settings at top level or under a
        ``[build_log_parser]`` table.

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed.
        """
        config_path = Path(file_path)
        suffix = config_path.suffix.lower()
        if suffix not in (".json", ".toml"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {suffix}. Supported formats: .json, .toml",
                config_path=config_path,
            )

        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}", config_path=config_path
            ) from e

        logger.debug(f"Loading {suffix[1:].upper()} parser settings from {config_path}")
        try:
            if suffix == ".json":
                data = json.loads(content)
            else:
                data = tomllib.loads(content)
                data = data.get("build_log_parser", data)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f"Invalid {suffix[1:].upper()} configuration: {e}", config_path=config_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration must be an object/dictionary", config_path=config_path
            )
        return cls.from_mapping(data, source_file=config_path)
