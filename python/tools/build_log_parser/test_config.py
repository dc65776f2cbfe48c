import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from .config import ParserSettings
from .core.exceptions import (
    ConfigurationError,
    MissingGroupError,
    PatternError,
    ReportEncodingError,
)
from .parsers.gcc import GccParser
from .parsers.vc import VcParser


# Fixtures for temporary settings files


@pytest.fixture
def json_settings_file(tmp_path):
    """Creates a JSON settings file selecting the gcc parser."""
    path = tmp_path / "parser.json"
    path.write_text(
        json.dumps({"parser": "gcc", "report_path": "logs/make.log"}), encoding="utf-8"
    )
    return path


@pytest.fixture
def toml_settings_file(tmp_path):
    """Creates a TOML settings file with a [build_log_parser] table."""
    path = tmp_path / "parser.toml"
    path.write_text(
        '[build_log_parser]\nparser = "vc"\ncharset = "utf-8"\n', encoding="utf-8"
    )
    return path


def test_defaults_resolve_to_vc():
    settings = ParserSettings().resolve()

    assert settings.parser == "vc"
    assert settings.report_path == Path(VcParser.DEFAULT_REPORT_PATH)
    assert settings.charset == VcParser.DEFAULT_CHARSET
    assert settings.regex == VcParser.DEFAULT_REGEX


def test_gcc_defaults():
    settings = ParserSettings(parser="GCC").resolve()

    assert settings.parser == "gcc"
    assert settings.charset == GccParser.DEFAULT_CHARSET
    assert settings.regex == GccParser.DEFAULT_REGEX


def test_overrides_are_kept():
    settings = ParserSettings(
        report_path="out/log.htm", charset="utf-8", regex=r"(a)(b)(c)(d)"
    ).resolve()

    assert settings.report_path == Path("out/log.htm")
    assert settings.charset == "utf-8"
    assert settings.regex == r"(a)(b)(c)(d)"


def test_resolve_does_not_modify_original():
    settings = ParserSettings()
    settings.resolve()

    assert settings.report_path is None
    assert settings.to_dict() == {"parser": "vc"}


def test_blank_values_count_as_unset():
    settings = ParserSettings(charset="  ", regex="").resolve()

    assert settings.charset == VcParser.DEFAULT_CHARSET
    assert settings.regex == VcParser.DEFAULT_REGEX


def test_unknown_parser_rejected():
    with pytest.raises(ConfigurationError, match="Unknown parser 'clang'"):
        ParserSettings.from_mapping({"parser": "clang"})


def test_unknown_key_rejected():
    with pytest.raises(ConfigurationError):
        ParserSettings.from_mapping({"parser": "vc", "reportPath": "x"})


def test_pattern_groups_checked_at_configuration_time():
    with pytest.raises(MissingGroupError):
        ParserSettings.from_mapping({"regex": r"^(.*)\((\d+)\)$"})


def test_invalid_pattern_rejected():
    with pytest.raises(PatternError):
        ParserSettings.from_mapping({"regex": "([0-9]+"})


def test_unknown_charset_rejected():
    with pytest.raises(ReportEncodingError):
        ParserSettings.from_mapping({"charset": "no-such-charset"})


@pytest.mark.parametrize("charset", ["base64", "hex", "rot13"])
def test_non_text_codec_rejected(charset):
    with pytest.raises(ReportEncodingError):
        ParserSettings.from_mapping({"charset": charset})


def test_regex_whitespace_is_kept():
    regex = r"(\w+)\((\d+)\) (\w+):(.*) "

    settings = ParserSettings.from_mapping({"regex": regex}).resolve()

    assert settings.regex == regex


def test_parser_and_charset_are_stripped():
    settings = ParserSettings(parser=" gcc ", charset=" utf-8 ")

    assert settings.parser == "gcc"
    assert settings.charset == "utf-8"


def test_direct_construction_raises_validation_error():
    with pytest.raises(ValidationError):
        ParserSettings(regex="(a)")


def test_load_json(json_settings_file):
    settings = ParserSettings.load_from_file(json_settings_file)

    assert settings.parser == "gcc"
    assert settings.report_path == Path("logs/make.log")


def test_load_toml_table(toml_settings_file):
    settings = ParserSettings.load_from_file(toml_settings_file).resolve()

    assert settings.parser == "vc"
    assert settings.charset == "utf-8"
    assert settings.regex == VcParser.DEFAULT_REGEX


def test_load_toml_top_level(tmp_path):
    path = tmp_path / "parser.toml"
    path.write_text('parser = "gcc"\n', encoding="utf-8")

    assert ParserSettings.load_from_file(path).parser == "gcc"


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        ParserSettings.load_from_file(tmp_path / "missing.json")

    assert exc_info.value.config_path == tmp_path / "missing.json"


def test_load_unsupported_format(tmp_path):
    path = tmp_path / "parser.ini"
    path.write_text("[options]\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Unsupported configuration file format"):
        ParserSettings.load_from_file(path)


def test_load_malformed_json(tmp_path):
    path = tmp_path / "parser.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid JSON configuration"):
        ParserSettings.load_from_file(path)


def test_load_non_object_json(tmp_path):
    path = tmp_path / "parser.json"
    path.write_text('["vc"]', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must be an object"):
        ParserSettings.load_from_file(path)
