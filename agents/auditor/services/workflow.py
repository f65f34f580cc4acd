"""
Audit workflow: runs one submission through source resolution, whitepaper
decoding, the Claude request and response validation, exposing the
Idle → Submitting → Success/Failed state for the form to poll.
"""
from dataclasses import dataclass

from fastapi import UploadFile

from agents.auditor.config import (
    PHASE_ANALYZING,
    PHASE_FETCHING_SOURCE,
    PHASE_READING_CONTRACT,
    PHASE_READING_WHITEPAPER,
    UNKNOWN_ERROR_MESSAGE,
)
from agents.auditor.models.schemas import AnalysisResult, AuditState, AuditStatusResponse, InputMode
from agents.auditor.services.analyzer import analyze_contract
from agents.auditor.services.source_resolver import resolve_source
from agents.auditor.services.whitepaper import build_whitepaper_payload
from shared.errors import AuditError
import structlog

logger = structlog.get_logger()


@dataclass
class AuditSubmission:
    input_mode: InputMode = InputMode.ADDRESS
    contract_address: str | None = None
    contract_file: UploadFile | None = None
    whitepaper_file: UploadFile | None = None


class AuditSession:
    """State of one form's audit. Only the in-flight submission mutates it."""

    def __init__(self, job_id: str):
        self.job_id = job_id
        self.state = AuditState.IDLE
        self.phase = ""
        self.error: str | None = None
        self.result: AnalysisResult | None = None

    @property
    def is_busy(self) -> bool:
        return self.state == AuditState.SUBMITTING

    def _set_phase(self, phase: str):
        self.phase = phase
        logger.info("audit_phase", job_id=self.job_id, phase=phase)

    def _fail(self, message: str):
        self.state = AuditState.FAILED
        self.error = message
        self.phase = ""

    async def submit(self, submission: AuditSubmission) -> AuditStatusResponse:
        self.state = AuditState.SUBMITTING
        self.error = None
        self.result = None

        try:
            if submission.input_mode == InputMode.ADDRESS:
                self._set_phase(PHASE_FETCHING_SOURCE)
            else:
                self._set_phase(PHASE_READING_CONTRACT)
            contract_code = await resolve_source(
                submission.input_mode,
                address=submission.contract_address,
                upload=submission.contract_file,
            )

            whitepaper = None
            if submission.whitepaper_file is not None and submission.whitepaper_file.filename:
                self._set_phase(PHASE_READING_WHITEPAPER)
                whitepaper = await build_whitepaper_payload(submission.whitepaper_file)

            self._set_phase(PHASE_ANALYZING)
            result = await analyze_contract(contract_code, whitepaper)
        except AuditError as e:
            logger.warning("audit_failed", job_id=self.job_id, error=e.message, kind=type(e).__name__)
            self._fail(e.message)
        except Exception:
            logger.exception("audit_crashed", job_id=self.job_id)
            self._fail(UNKNOWN_ERROR_MESSAGE)
        else:
            self.state = AuditState.SUCCESS
            self.result = result
            self.phase = ""
            logger.info(
                "audit_completed",
                job_id=self.job_id,
                score=result.score,
                vulnerabilities=len(result.vulnerabilities),
            )

        return self.snapshot()

    def snapshot(self) -> AuditStatusResponse:
        return AuditStatusResponse(
            job_id=self.job_id,
            state=self.state,
            phase=self.phase,
            error=self.error,
            result=self.result,
        )
