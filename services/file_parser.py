import logging
from typing import Optional

from services.context import FileParserContext
from services.errors import EmptyFileError
from services.registry import FileParserRegistry
from services.uploaded_file import UploadedFile

logger = logging.getLogger(__name__)


class FileParserService:
    def __init__(self, registry: FileParserRegistry):
        self.registry = registry

    def process_file(self, file: Optional[UploadedFile], file_type: str) -> None:
        """Validate the upload, pick the parser for ``file_type`` and run it.

        A new context is created per call so concurrent requests never share
        the selected parser.
        """
        if file is None or file.is_empty:
            raise EmptyFileError()

        parser = self.registry.get_parser(file_type)

        context = FileParserContext()
        context.set_strategy(parser)
        context.parse_file(file)

        logger.info("Processed %s as %s (%d bytes)", file.filename, file_type, file.size)
