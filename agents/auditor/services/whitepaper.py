"""
Whitepaper Payload Builder: classifies an optional whitepaper upload by
extension, then declared MIME type, and decodes it as text or base64.
"""
from fastapi import UploadFile

from agents.auditor.config import (
    DEFAULT_TEXT_MIME,
    DOCX_EXTENSION,
    DOCX_MIME,
    PDF_EXTENSION,
    PDF_MIME,
    TEXT_EXTENSIONS,
    TEXT_MIME_PREFIX,
)
from agents.auditor.models.schemas import WhitepaperPayload
from agents.auditor.services.decoder import read_base64, read_text
from shared.errors import UnsupportedFileTypeError
import structlog

logger = structlog.get_logger()


async def build_whitepaper_payload(upload: UploadFile | None) -> WhitepaperPayload | None:
    if upload is None or not upload.filename:
        return None

    filename = upload.filename
    name = filename.lower()
    mime_type = upload.content_type or ""

    if name.endswith(TEXT_EXTENSIONS) or mime_type.startswith(TEXT_MIME_PREFIX):
        payload = WhitepaperPayload(
            data=await read_text(upload),
            mime_type=mime_type or DEFAULT_TEXT_MIME,
            is_text=True,
            filename=filename,
        )
    elif name.endswith(PDF_EXTENSION) or mime_type == PDF_MIME:
        payload = WhitepaperPayload(
            data=await read_base64(upload),
            mime_type=PDF_MIME,
            is_text=False,
            filename=filename,
        )
    elif name.endswith(DOCX_EXTENSION) or mime_type == DOCX_MIME:
        payload = WhitepaperPayload(
            data=await read_base64(upload),
            mime_type=DOCX_MIME,
            is_text=False,
            filename=filename,
        )
    else:
        raise UnsupportedFileTypeError(filename)

    logger.info(
        "whitepaper_loaded",
        filename=filename,
        mime_type=payload.mime_type,
        is_text=payload.is_text,
        length=len(payload.data),
    )
    return payload
