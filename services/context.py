from typing import Optional

from services.errors import StrategyNotSetError
from services.parsers import FileParser
from services.uploaded_file import UploadedFile


class FileParserContext:
    """Holds the parser chosen for one request and runs it."""

    def __init__(self, parser: Optional[FileParser] = None):
        self._parser = parser

    @property
    def strategy(self) -> Optional[FileParser]:
        return self._parser

    def set_strategy(self, parser: FileParser) -> None:
        self._parser = parser

    def parse_file(self, file: UploadedFile) -> None:
        if self._parser is None:
            raise StrategyNotSetError()
        self._parser.parse(file)
