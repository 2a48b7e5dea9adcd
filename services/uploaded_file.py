from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file held in memory for the duration of one request."""

    field_name: str
    filename: Optional[str]
    content_type: Optional[str]
    content: bytes = b""

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return self.size == 0
