"""Tests for services.registry – tag lookup."""

from __future__ import annotations

import pytest

from services.errors import UnsupportedFileTypeError
from services.parsers import CsvFileParser, JsonFileParser, XmlFileParser
from services.registry import FileParserRegistry, build_default_registry


# ===================================================================
# Default registry
# ===================================================================


class TestDefaultRegistry:
    @pytest.mark.parametrize(
        "file_type, parser_cls",
        [("csv", CsvFileParser), ("json", JsonFileParser), ("xml", XmlFileParser)],
    )
    def test_registered_tags_resolve(self, file_type, parser_cls) -> None:
        parser = build_default_registry().get_parser(file_type)
        assert isinstance(parser, parser_cls)
        assert parser.file_type == file_type

    def test_file_types_are_sorted(self) -> None:
        assert build_default_registry().file_types == ("csv", "json", "xml")

    @pytest.mark.parametrize("file_type", ["yaml", "", "CSV", "json "])
    def test_unknown_tag_raises(self, file_type: str) -> None:
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            build_default_registry().get_parser(file_type)
        assert exc_info.value.file_type == file_type
        assert exc_info.value.supported == ("csv", "json", "xml")

    def test_unsupported_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            build_default_registry().get_parser("yaml")


# ===================================================================
# Construction
# ===================================================================


class TestFileParserRegistry:
    def test_returns_the_registered_instance(self, recording_registry, recording_parsers) -> None:
        for tag, parser in recording_parsers.items():
            assert recording_registry.get_parser(tag) is parser

    def test_contains_and_len(self, recording_registry) -> None:
        assert "json" in recording_registry
        assert "yaml" not in recording_registry
        assert len(recording_registry) == 3

    def test_rejects_duplicate_tags(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            FileParserRegistry([CsvFileParser(), CsvFileParser()])

    def test_rejects_empty_parser_list(self) -> None:
        with pytest.raises(ValueError, match="At least one"):
            FileParserRegistry([])

    def test_key_set_is_read_only(self, recording_registry) -> None:
        with pytest.raises(TypeError):
            recording_registry._strategies["yaml"] = CsvFileParser()
