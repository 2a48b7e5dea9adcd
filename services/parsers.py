import logging
from abc import ABC, abstractmethod

from services.uploaded_file import UploadedFile

logger = logging.getLogger(__name__)


class FileParser(ABC):
    """One strategy per file type. ``file_type`` is the tag it is registered under."""

    file_type: str = ""

    @abstractmethod
    def parse(self, file: UploadedFile) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file_type={self.file_type!r})"


class _MetadataLoggingParser(FileParser):
    # Parsers only report what they received; no content is read.
    def parse(self, file: UploadedFile) -> None:
        logger.debug("[%s] field name: %s", self.file_type, file.field_name)
        logger.debug("[%s] original filename: %s", self.file_type, file.filename)
        logger.debug("[%s] content type: %s", self.file_type, file.content_type)


class CsvFileParser(_MetadataLoggingParser):
    file_type = "csv"


class JsonFileParser(_MetadataLoggingParser):
    file_type = "json"


class XmlFileParser(_MetadataLoggingParser):
    file_type = "xml"
