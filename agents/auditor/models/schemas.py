from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InputMode(str, Enum):
    ADDRESS = "address"
    FILE = "file"


class ReadMode(str, Enum):
    TEXT = "text"
    BASE64 = "base64"


Severity = Literal["Critical", "High", "Medium", "Low", "Informational"]


class _AuditModel(BaseModel):
    """AI output models: camelCase on the wire, no type coercion."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)


class Vulnerability(_AuditModel):
    name: str
    severity: Severity
    description: str


class Tokenomics(_AuditModel):
    analysis: str
    passed_audit_standards: bool


class RedFlag(_AuditModel):
    flag: str
    description: str


class AnalysisResult(_AuditModel):
    score: float = Field(..., ge=0, le=100, description="Safety score from 0 to 100.")
    recommendation: str = Field(
        ...,
        description='Short recommendation, e.g., "High Risk", "Proceed with Caution", "Appears Secure".',
    )
    summary: str = Field(..., description="Overall summary of the audit.")
    vulnerabilities: list[Vulnerability] = Field(..., description="List of vulnerabilities found.")
    tokenomics: Tokenomics = Field(..., description="Analysis of the project's tokenomics.")
    exchange_red_flags: list[RedFlag] = Field(..., description="List of red flags for exchanges.")


class FilePayload(BaseModel):
    data: str
    mime_type: str
    mode: ReadMode


class WhitepaperPayload(BaseModel):
    data: str  # Raw text, or base64 without data-URL prefix
    mime_type: str
    is_text: bool
    filename: str = ""


class TextPart(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class AttachmentPart(BaseModel):
    kind: Literal["attachment"] = "attachment"
    data: str  # base64
    mime_type: str
    filename: str = ""


AuditPart = TextPart | AttachmentPart


class AuditState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class AuditStatusResponse(BaseModel):
    job_id: str
    state: AuditState
    phase: str = ""
    error: Optional[str] = None
    result: Optional[AnalysisResult] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    agent: str = "auditor"
    version: str = "1.0.0"
    ai_configured: bool = False
    active_audits: int = 0
