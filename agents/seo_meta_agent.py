# agents/seo_meta_agent.py

from __future__ import annotations

import logging

from openai import OpenAIError
from pydantic import ValidationError

from agents.prompts import (
    SEO_RESULT_SCHEMA,
    build_system_instruction,
    build_user_prompt,
    instruction_class_for,
)
from app.config import settings
from app.errors import GenerationError
from models.seo_models import GenerationRequest, SeoResult
from services.llm_client import get_openai_client

logger = logging.getLogger(__name__)


def parse_seo_result(content: str | None) -> SeoResult:
    """
    Validate the raw JSON text returned by the model.

    - empty content, malformed JSON and missing fields all raise GenerationError
    - never returns a partial result
    """
    if not content:
        raise GenerationError("LLM returned no content")

    try:
        return SeoResult.model_validate_json(content)
    except ValidationError as e:
        logger.error(
            "[seo_meta] invalid structured response error_count=%d content=%r",
            e.error_count(),
            content[:2000],
        )
        missing = [
            ".".join(str(p) for p in err["loc"])
            for err in e.errors()
            if err["type"] == "missing"
        ]
        if missing:
            raise GenerationError(
                f"LLM response is missing required fields: {', '.join(missing)}"
            ) from e
        raise GenerationError("LLM response is not valid SEO JSON") from e


async def generate_seo_meta(request: GenerationRequest) -> SeoResult:
    """
    Generate the four SEO fields for one page.

    Raises:
        ConfigurationError: the API key is missing.
        GenerationError: the call failed or the response did not match the schema.
    """
    model_name = settings.openai_model
    instruction_class = instruction_class_for(request.page_type)

    logger.info(
        "[seo_meta] LLM call start page_type=%s class=%s model=%s",
        request.page_type,
        instruction_class.value,
        model_name,
    )

    client = get_openai_client()

    try:
        response = await client.chat.completions.create(
            model=model_name,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "seo_result",
                    "strict": True,
                    "schema": SEO_RESULT_SCHEMA,
                },
            },
            messages=[
                {"role": "system", "content": build_system_instruction(request.page_type)},
                {"role": "user", "content": build_user_prompt(request.title, request.page_type)},
            ],
            temperature=settings.openai_temperature,
        )
    except OpenAIError as e:
        logger.error("[seo_meta] LLM call failed page_type=%s error=%s", request.page_type, e)
        raise GenerationError(str(e) or e.__class__.__name__) from e

    usage = getattr(response, "usage", None)
    logger.info(
        "[seo_meta] LLM response received page_type=%s total_tokens=%s",
        request.page_type,
        getattr(usage, "total_tokens", None) if usage else None,
    )

    if not response.choices:
        raise GenerationError("LLM returned no choices")

    result = parse_seo_result(response.choices[0].message.content)

    logger.info("[seo_meta] LLM call success page_type=%s slug=%s", request.page_type, result.url)
    return result
