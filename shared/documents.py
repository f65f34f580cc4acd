import io
import zipfile

import docx
from docx.opc.exceptions import PackageNotFoundError

from shared.errors import FileReadError


def extract_docx_text(data: bytes, filename: str = "") -> str:
    """Plain text of a .docx document, one line per non-blank paragraph."""
    try:
        document = docx.Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        name = filename or "document"
        raise FileReadError(f"Could not read whitepaper {name}: not a valid DOCX file.") from e
    return "\n".join(p.text for p in document.paragraphs if p.text.strip())
