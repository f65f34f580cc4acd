import logging
import structlog
from shared.config import settings

ADDRESS_LOG_LENGTH = 10


def truncate_addresses(logger, method_name, event_dict):
    """Shorten contract addresses so full addresses never reach the log."""
    address = event_dict.get("address")
    if isinstance(address, str) and len(address) > ADDRESS_LOG_LENGTH:
        event_dict["address"] = address[:ADDRESS_LOG_LENGTH]
    return event_dict


def setup_logging(service: str | None = None):
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            truncate_addresses,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )
    if service:
        structlog.contextvars.bind_contextvars(service=service, environment=settings.ENVIRONMENT)
