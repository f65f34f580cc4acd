"""
Source Resolver: produces contract source from either an address lookup or
an uploaded contract file.
"""
from fastapi import UploadFile

from agents.auditor.config import ADDRESS_PATTERN
from agents.auditor.models.schemas import InputMode
from agents.auditor.services.decoder import read_text
from shared.errors import InvalidInputError
from shared.explorer import fetch_contract_source
import structlog

logger = structlog.get_logger()


def is_valid_address(address: str | None) -> bool:
    return bool(address) and ADDRESS_PATTERN.fullmatch(address) is not None


async def resolve_source(
    mode: InputMode,
    address: str | None = None,
    upload: UploadFile | None = None,
) -> str:
    """Return contract source text for the selected input mode."""
    if mode == InputMode.ADDRESS:
        if not is_valid_address(address):
            raise InvalidInputError("Please enter a valid Ethereum address.")
        logger.info("resolving_source", mode=mode.value, address=address)
        return await fetch_contract_source(address)

    if upload is None or not upload.filename:
        raise InvalidInputError("Please upload a contract file.")
    logger.info("resolving_source", mode=mode.value, filename=upload.filename)
    return await read_text(upload)
