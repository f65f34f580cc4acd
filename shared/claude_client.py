import json
import anthropic
from shared.config import settings
from shared.errors import ConfigurationError, UpstreamError
import structlog

logger = structlog.get_logger()

_client: anthropic.AsyncAnthropic | None = None
_client_key: str | None = None


def get_client() -> anthropic.AsyncAnthropic:
    """Return the shared async client, built from the configured API key."""
    global _client, _client_key
    if not settings.ANTHROPIC_API_KEY:
        raise ConfigurationError("ANTHROPIC_API_KEY not configured")
    if _client is None or _client_key != settings.ANTHROPIC_API_KEY:
        _client = anthropic.AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
        _client_key = settings.ANTHROPIC_API_KEY
    return _client


async def ask_claude_structured(
    content: list[dict],
    schema: dict,
    tool_name: str,
    tool_description: str = "Record the structured result.",
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float = 0.2,
) -> str:
    """
    Send an ordered list of content blocks as one user turn and force the
    model to answer through a single tool whose input schema is `schema`.

    Returns the tool input serialized as JSON text. When the model replies
    with plain text instead, that text is returned as-is for the caller to
    validate.
    """
    client = get_client()

    try:
        response = await client.messages.create(
            model=model or settings.AUDIT_MODEL,
            max_tokens=max_tokens or settings.AUDIT_MAX_TOKENS,
            temperature=temperature,
            messages=[{"role": "user", "content": content}],
            tools=[{
                "name": tool_name,
                "description": tool_description,
                "input_schema": schema,
            }],
            tool_choice={"type": "tool", "name": tool_name},
        )
    except anthropic.APIError as e:
        logger.error("claude_request_failed", error=str(e))
        raise UpstreamError(f"AI service request failed: {e.message}") from e

    for block in response.content:
        if block.type == "tool_use" and block.name == tool_name:
            return json.dumps(block.input)

    return "".join(block.text for block in response.content if block.type == "text")
