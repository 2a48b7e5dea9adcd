"""Shared fixtures for the file strategy service tests."""

from __future__ import annotations

import pytest

from services.parsers import FileParser
from services.registry import FileParserRegistry
from services.uploaded_file import UploadedFile


class RecordingParser(FileParser):
    """Parser double that remembers every file it was asked to parse."""

    def __init__(self, file_type: str) -> None:
        self.file_type = file_type
        self.calls: list[UploadedFile] = []

    def parse(self, file: UploadedFile) -> None:
        self.calls.append(file)


def make_file(
    content: bytes = b"0123456789",
    filename: str | None = "data.csv",
    content_type: str | None = "text/csv",
) -> UploadedFile:
    return UploadedFile(
        field_name="file",
        filename=filename,
        content_type=content_type,
        content=content,
    )


@pytest.fixture
def recording_parsers() -> dict[str, RecordingParser]:
    return {tag: RecordingParser(tag) for tag in ("csv", "json", "xml")}


@pytest.fixture
def recording_registry(recording_parsers: dict[str, RecordingParser]) -> FileParserRegistry:
    return FileParserRegistry(recording_parsers.values())
