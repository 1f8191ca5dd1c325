"""Chat configuration.

Centralizes the fixed conversation copy and the runtime settings
read from the environment.
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, HttpUrl

# Seeded assistant turn shown when a session starts
GREETING = (
    "おめでとうございます。\n"
    "昨日あっためでたいことを無理やり1つ教えてください！\n"
    "\n"
    "あと、差支えない範囲で最近のあなたの脳内教えてください。"
)

# Substituted whenever a real reply cannot be obtained or parsed
FALLBACK_REPLY = "あー、ちょっと通信がうまくいかなかったっすね。もう一回言ってもらえます？"

DEFAULT_ENDPOINT_URL = "http://localhost:3000/api/chat"

# Environment variable names
ENV_ENDPOINT_URL = "SOUDAN_ENDPOINT_URL"
ENV_TIMEOUT = "SOUDAN_TIMEOUT"
ENV_LOG_LEVEL = "SOUDAN_LOG_LEVEL"


class ChatSettings(BaseModel):
    """Runtime settings for a chat session."""

    endpoint_url: HttpUrl = Field(
        default=DEFAULT_ENDPOINT_URL,
        validate_default=True,
        description="Chat endpoint receiving the message history"
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Transport timeout in seconds (None disables it)"
    )
    log_level: str | None = Field(
        default=None,
        pattern=r"(?i)^(debug|info|warning|error)$",
        description="Log panel level, None keeps the panel hidden"
    )


def load_settings(
    endpoint_url: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
) -> ChatSettings:
    """Build settings from the environment, letting explicit values win.

    Args:
        endpoint_url: Overrides SOUDAN_ENDPOINT_URL
        timeout: Overrides SOUDAN_TIMEOUT
        log_level: Overrides SOUDAN_LOG_LEVEL

    Returns:
        Validated ChatSettings

    Raises:
        ValueError: If a value fails validation

    Environment variables:
        SOUDAN_ENDPOINT_URL: Chat endpoint (default: http://localhost:3000/api/chat)
        SOUDAN_TIMEOUT: Timeout in seconds (default: none)
        SOUDAN_LOG_LEVEL: debug, info, warning or error (default: hidden)
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: dict = {}
    url = endpoint_url or os.getenv(ENV_ENDPOINT_URL)
    if url:
        values["endpoint_url"] = url

    if timeout is not None:
        values["timeout"] = timeout
    elif os.getenv(ENV_TIMEOUT):
        values["timeout"] = os.getenv(ENV_TIMEOUT)

    level = log_level or os.getenv(ENV_LOG_LEVEL)
    if level:
        values["log_level"] = level

    # pydantic's ValidationError subclasses ValueError
    return ChatSettings(**values)
