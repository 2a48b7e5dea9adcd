class FileParserError(Exception):
    """Base class for errors raised while dispatching an uploaded file."""


class EmptyFileError(FileParserError, ValueError):
    def __init__(self, message: str = "The file is empty or missing"):
        super().__init__(message)


class UnsupportedFileTypeError(FileParserError, ValueError):
    def __init__(self, file_type: str, supported=()):
        self.file_type = file_type
        self.supported = tuple(supported)
        message = f"Unsupported file type: {file_type!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class StrategyNotSetError(FileParserError, RuntimeError):
    def __init__(self, message: str = "No parser strategy has been set"):
        super().__init__(message)
