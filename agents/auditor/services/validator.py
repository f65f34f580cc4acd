from pydantic import ValidationError

from agents.auditor.models.schemas import AnalysisResult
from shared.errors import InvalidResponseError
import structlog

logger = structlog.get_logger()

RAW_LOG_LIMIT = 2000


def _strip_fences(text: str) -> str:
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        text = text.rsplit("```", 1)[0]
    return text.strip()


def parse_analysis(raw_text: str | None) -> AnalysisResult:
    """Parse the model's JSON into an AnalysisResult, all or nothing."""
    text = _strip_fences((raw_text or "").strip())
    try:
        return AnalysisResult.model_validate_json(text)
    except ValidationError as e:
        logger.error(
            "audit_response_invalid",
            errors=e.error_count(),
            raw=(raw_text or "")[:RAW_LOG_LIMIT],
        )
        raise InvalidResponseError(raw_text or "") from e
