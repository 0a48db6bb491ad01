# services/llm_client.py
from openai import AsyncOpenAI

from app.config import settings
from app.errors import ConfigurationError

_client: AsyncOpenAI | None = None


def has_credentials() -> bool:
    return bool(settings.openai_api_key)


def get_openai_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        if not has_credentials():
            raise ConfigurationError("OPENAI_API_KEY is not set")
        # retries off: one request per submission
        _client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
            max_retries=0,
        )
    return _client
