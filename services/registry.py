"""Tag to parser lookup.

The registry is built once at startup from an explicit list of parsers and its
key set is fixed afterwards.
"""
from types import MappingProxyType
from typing import Iterable, Tuple

from services.errors import UnsupportedFileTypeError
from services.parsers import CsvFileParser, FileParser, JsonFileParser, XmlFileParser


class FileParserRegistry:
    def __init__(self, parsers: Iterable[FileParser]):
        strategies = {}
        for parser in parsers:
            if parser.file_type in strategies:
                raise ValueError(f"Duplicate parser for file type {parser.file_type!r}")
            strategies[parser.file_type] = parser
        if not strategies:
            raise ValueError("At least one parser must be registered")
        self._strategies = MappingProxyType(strategies)

    @property
    def file_types(self) -> Tuple[str, ...]:
        return tuple(sorted(self._strategies))

    def get_parser(self, file_type: str) -> FileParser:
        """Return the parser registered under ``file_type``.

        Raises ``UnsupportedFileTypeError`` when no parser matches. The match is
        exact, so ``"CSV"`` does not resolve to the ``csv`` parser.
        """
        parser = self._strategies.get(file_type)
        if parser is None:
            raise UnsupportedFileTypeError(file_type, self.file_types)
        return parser

    def __contains__(self, file_type: object) -> bool:
        return file_type in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)


def build_default_registry() -> FileParserRegistry:
    return FileParserRegistry([CsvFileParser(), JsonFileParser(), XmlFileParser()])
