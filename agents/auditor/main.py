"""
Smart Contract Auditor — FastAPI application (port 8004)

Serves the audit form, resolves contract source from Etherscan or an upload,
and asks Claude for a structured security and tokenomics audit.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from shared.config import settings
from shared.utils.logging import setup_logging
from agents.auditor.routes.api import pages, router
from agents.auditor.config import AGENT_NAME
import structlog

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(AGENT_NAME)
    logger.info("auditor_agent_starting", agent=AGENT_NAME, model=settings.AUDIT_MODEL)
    if not settings.ANTHROPIC_API_KEY:
        logger.error("anthropic_api_key_missing", hint="Set ANTHROPIC_API_KEY; audits will fail until it is configured")
    if not settings.ETHERSCAN_API_KEY:
        logger.warning("etherscan_api_key_missing")

    yield

    logger.info("auditor_agent_stopped")


app = FastAPI(
    title="Smart Contract Auditor",
    description="AI-powered security and tokenomics analysis of smart contracts "
                "from a verified address or an uploaded source file.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(pages)
app.include_router(router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("agents.auditor.main:app", host="0.0.0.0", port=8004, reload=True)
