"""
Auditor Analyzer: assembles the multi-part audit request (instructions,
fenced contract source, whitepaper slot) and sends it to Claude with the
AnalysisResult schema as the forced output format.
"""
import base64
from pathlib import Path

from agents.auditor.config import (
    AUDIT_TEMPERATURE,
    AUDIT_TOOL_NAME,
    DOCX_MIME,
    NO_WHITEPAPER_MARKER,
    PDF_MIME,
)
from agents.auditor.models.schemas import (
    AnalysisResult,
    AttachmentPart,
    AuditPart,
    TextPart,
    WhitepaperPayload,
)
from agents.auditor.services.validator import parse_analysis
from shared.claude_client import ask_claude_structured, get_client
from shared.documents import extract_docx_text
import structlog

logger = structlog.get_logger()

PROMPT_PATH = Path(__file__).parent.parent / "templates" / "audit_prompt.txt"
_audit_prompt: str | None = None


def _get_audit_prompt() -> str:
    global _audit_prompt
    if _audit_prompt is None:
        _audit_prompt = PROMPT_PATH.read_text(encoding="utf-8")
    return _audit_prompt


def audit_response_schema() -> dict:
    """JSON schema of AnalysisResult as the model must produce it."""
    return AnalysisResult.model_json_schema(by_alias=True)


def build_audit_parts(contract_code: str, whitepaper: WhitepaperPayload | None) -> list[AuditPart]:
    """Ordered request parts. Instructions always come first."""
    parts: list[AuditPart] = [
        TextPart(text=_get_audit_prompt()),
        TextPart(text=f"```solidity\n{contract_code}\n```"),
    ]

    if whitepaper is None:
        parts.append(TextPart(text=NO_WHITEPAPER_MARKER))
    elif whitepaper.is_text:
        parts.append(TextPart(text=f"Here is the whitepaper content:\n\n{whitepaper.data}"))
    else:
        parts.append(TextPart(text="Here is the whitepaper file for analysis:"))
        parts.append(AttachmentPart(
            data=whitepaper.data,
            mime_type=whitepaper.mime_type,
            filename=whitepaper.filename,
        ))
    return parts


def to_content_block(part: AuditPart) -> dict:
    """Map a request part onto a Messages API content block."""
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}

    if part.mime_type == PDF_MIME:
        block = {
            "type": "document",
            "source": {"type": "base64", "media_type": PDF_MIME, "data": part.data},
        }
    elif part.mime_type == DOCX_MIME:
        # The Messages API has no DOCX document type; send its text instead
        block = {
            "type": "document",
            "source": {
                "type": "text",
                "media_type": "text/plain",
                "data": extract_docx_text(base64.b64decode(part.data), part.filename),
            },
        }
    else:
        raise ValueError(f"Unsupported attachment type: {part.mime_type}")

    if part.filename:
        block["title"] = part.filename
    return block


async def analyze_contract(contract_code: str, whitepaper: WhitepaperPayload | None) -> AnalysisResult:
    """Run one audit request and return the validated result."""
    # Credential check before anything is built or sent
    get_client()

    parts = build_audit_parts(contract_code, whitepaper)
    content = [to_content_block(p) for p in parts]

    logger.info(
        "audit_request_sent",
        parts=len(parts),
        code_length=len(contract_code),
        whitepaper=whitepaper.mime_type if whitepaper else None,
    )

    raw_text = await ask_claude_structured(
        content=content,
        schema=audit_response_schema(),
        tool_name=AUDIT_TOOL_NAME,
        tool_description="Record the complete smart contract audit.",
        temperature=AUDIT_TEMPERATURE,
    )
    return parse_analysis(raw_text)
