import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status

from services.errors import EmptyFileError, UnsupportedFileTypeError
from services.file_parser import FileParserService
from services.registry import build_default_registry
from services.uploaded_file import UploadedFile

logger = logging.getLogger(__name__)
router = APIRouter()

# Built once at import; the set of file types is fixed for the process lifetime.
file_parser_service = FileParserService(build_default_registry())


def get_file_parser_service() -> FileParserService:
    return file_parser_service


async def read_upload(upload: UploadFile, field_name: str = "file") -> UploadedFile:
    content = await upload.read()
    return UploadedFile(
        field_name=field_name,
        filename=upload.filename,
        content_type=upload.content_type,
        content=content,
    )


@router.post(
    "/files/{file_type}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def analyze_file(
    file_type: str,
    file: Optional[UploadFile] = File(None),
    service: FileParserService = Depends(get_file_parser_service),
):
    """Hand the uploaded file to the parser registered for ``file_type``.

    An empty or missing file and an unknown ``file_type`` both answer 400.
    """
    uploaded = await read_upload(file) if file is not None else None

    try:
        service.process_file(uploaded, file_type)
    except EmptyFileError as e:
        logger.warning("Rejected upload for %s: %s", file_type, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UnsupportedFileTypeError as e:
        logger.warning("Rejected upload: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
