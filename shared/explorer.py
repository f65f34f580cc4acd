"""
Explorer client: verified contract source lookup through the Etherscan
multichain API.
"""
import httpx
from shared.config import settings
from shared.errors import UpstreamError
import structlog

logger = structlog.get_logger()

UNEXPECTED_FORMAT = "Etherscan API returned an unexpected or empty response format."
UNVERIFIED_SOURCE = "Contract source code is not verified or available on Etherscan."


async def fetch_contract_source(
    address: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Return the verified source text for `address` exactly as the explorer stores it.

    Multi-file contracts come back as a JSON bundle inside `SourceCode`; that
    bundle is returned untouched.
    """
    params = {
        "chainid": settings.CHAIN_ID,
        "module": "contract",
        "action": "getsourcecode",
        "address": address,
        "apikey": settings.ETHERSCAN_API_KEY,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.EXPLORER_TIMEOUT, transport=transport) as client:
            resp = await client.get(settings.ETHERSCAN_API_URL, params=params)
    except httpx.HTTPError as e:
        logger.error("explorer_request_failed", address=address, error=str(e))
        raise UpstreamError(f"Failed to reach Etherscan API: {e}") from e

    if not resp.is_success:
        logger.error("explorer_http_error", address=address, status=resp.status_code)
        raise UpstreamError(f"Failed to fetch from Etherscan API. Status: {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as e:
        raise UpstreamError(UNEXPECTED_FORMAT) from e

    if not isinstance(data, dict):
        raise UpstreamError(UNEXPECTED_FORMAT)

    # status "0" means an API-level error; the message sits in `result`
    if str(data.get("status")) == "0":
        message = data.get("result") or "An unknown error occurred with the Etherscan API."
        logger.warning("explorer_api_error", address=address, message=message)
        raise UpstreamError(f"Etherscan API Error: {message}")

    result = data.get("result")
    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        raise UpstreamError(UNEXPECTED_FORMAT)

    source = result[0].get("SourceCode")
    if not isinstance(source, str) or source == "":
        raise UpstreamError(UNVERIFIED_SOURCE)

    logger.info("explorer_source_fetched", address=address, length=len(source))
    return source
