"""
File Decoder: turns an uploaded file into text or a bare base64 string.
One read per call; a failed read is final for the submission.
"""
import base64

from fastapi import UploadFile

from agents.auditor.models.schemas import FilePayload, ReadMode
from shared.errors import FileReadError
import structlog

logger = structlog.get_logger()

DEFAULT_BINARY_MIME = "application/octet-stream"


def to_data_url(data: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_BINARY_MIME};base64,{encoded}"


def strip_data_url_prefix(data_url: str) -> str:
    """Drop everything up to and including the first comma."""
    _, sep, payload = data_url.partition(",")
    return payload if sep else data_url


async def read_file(upload: UploadFile, mode: ReadMode) -> FilePayload:
    name = upload.filename or "<unnamed>"
    mime_type = upload.content_type or ""

    try:
        data = await upload.read()
    except (OSError, ValueError) as e:
        logger.error("file_read_failed", filename=name, error=str(e))
        raise FileReadError(f"Could not read file {name}: {e}") from e

    if mode == ReadMode.TEXT:
        # utf-8-sig drops a leading BOM, as browsers do for text reads
        text = data.decode("utf-8-sig", errors="replace")
        return FilePayload(data=text, mime_type=mime_type, mode=mode)

    payload = strip_data_url_prefix(to_data_url(data, mime_type))
    return FilePayload(data=payload, mime_type=mime_type, mode=mode)


async def read_text(upload: UploadFile) -> str:
    return (await read_file(upload, ReadMode.TEXT)).data


async def read_base64(upload: UploadFile) -> str:
    return (await read_file(upload, ReadMode.BASE64)).data
