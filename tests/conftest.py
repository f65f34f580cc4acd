import io

import pytest
from starlette.datastructures import Headers, UploadFile

from shared.config import settings

VALID_ADDRESS = "0x1111111111111111111111111111111111111111"


def make_upload(filename: str, data: bytes, content_type: str | None = None) -> UploadFile:
    headers = Headers({"content-type": content_type}) if content_type else Headers()
    return UploadFile(file=io.BytesIO(data), filename=filename, headers=headers)


@pytest.fixture
def upload():
    return make_upload


@pytest.fixture
def analysis_json():
    """A complete AnalysisResult document as the model returns it."""
    return {
        "score": 72,
        "recommendation": "Proceed with Caution",
        "summary": "Owner can pause transfers; otherwise standard ERC-20.",
        "vulnerabilities": [
            {
                "name": "Centralized pause",
                "severity": "Medium",
                "description": "The owner can pause all transfers at any time.",
            },
        ],
        "tokenomics": {
            "analysis": "Fixed supply of 1B tokens, 20% team allocation without vesting.",
            "passedAuditStandards": False,
        },
        "exchangeRedFlags": [
            {"flag": "Pausable", "description": "Transfers can be frozen by the owner."},
        ],
    }


@pytest.fixture
def ai_key(monkeypatch):
    monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_ai_key(monkeypatch):
    monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "")
