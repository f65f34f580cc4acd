"""
Auditor Agent HTTP routes: the form page plus the audit job API it drives.
"""
from pathlib import Path
from uuid import UUID

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from agents.auditor.models.schemas import AuditStatusResponse, AuditState, HealthResponse, InputMode
from agents.auditor.services.report import render_report
from agents.auditor.services.tracker import tracker
from agents.auditor.services.workflow import AuditSubmission
from shared.config import settings

router = APIRouter(prefix="/api/v1/auditor", tags=["auditor"])
pages = APIRouter(tags=["pages"])

INDEX_PATH = Path(__file__).parent.parent / "templates" / "index.html"
_index_html: str | None = None


def _get_index_html() -> str:
    global _index_html
    if _index_html is None:
        _index_html = INDEX_PATH.read_text(encoding="utf-8")
    return _index_html


@pages.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(_get_index_html())


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        ai_configured=bool(settings.ANTHROPIC_API_KEY),
        active_audits=tracker.active_count,
    )


@router.post("/audits", response_model=AuditStatusResponse)
async def submit_audit(
    input_mode: InputMode = Form(InputMode.ADDRESS),
    contract_address: str | None = Form(None),
    contract_file: UploadFile | None = File(None),
    whitepaper_file: UploadFile | None = File(None),
    job_id: str | None = Form(None),
):
    """Run one audit submission to completion and return its final state."""
    if job_id:
        try:
            job_id = str(UUID(job_id))
        except ValueError:
            raise HTTPException(status_code=400, detail="job_id must be a UUID.") from None

    session = tracker.open(job_id)
    if session.is_busy:
        raise HTTPException(status_code=409, detail="An audit is already in progress.")

    submission = AuditSubmission(
        input_mode=input_mode,
        contract_address=contract_address or None,
        contract_file=contract_file,
        whitepaper_file=whitepaper_file,
    )
    status = await session.submit(submission)
    tracker.touch(session.job_id)
    return status


@router.get("/audits/{job_id}", response_model=AuditStatusResponse)
async def get_audit(job_id: str):
    """Current state and phase label of an audit."""
    session = tracker.get(job_id)
    if not session:
        raise HTTPException(status_code=404, detail="Audit not found")
    return session.snapshot()


@router.get("/audits/{job_id}/report", response_class=HTMLResponse)
async def get_audit_report(job_id: str):
    """Rendered report for a successful audit."""
    session = tracker.get(job_id)
    if not session or session.state != AuditState.SUCCESS or session.result is None:
        raise HTTPException(status_code=404, detail="No report for this audit")
    return HTMLResponse(render_report(session.result))
