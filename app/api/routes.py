# app/api/routes.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel

from agents.prompts import instruction_class_for
from agents.seo_meta_agent import generate_seo_meta
from app.errors import ConfigurationError
from models.seo_models import GenerationRequest, SeoResultView, build_full_url

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Request / Response models ---------


class HealthResponse(BaseModel):
    status: str
    credentials_present: bool


# --------- Endpoints ---------


@router.get("/health", response_model=HealthResponse)
def api_health(request: Request) -> HealthResponse:
    return HealthResponse(
        status="ok",
        credentials_present=request.app.state.credentials_present,
    )


@router.post("/generate", response_model=SeoResultView)
async def api_generate(payload: GenerationRequest, request: Request) -> SeoResultView:
    """
    title + page_type -> four SEO fields and the full page URL.

    - 422 for a blank title
    - 503 when OPENAI_API_KEY is not configured
    - 502 when generation fails
    """
    if not request.app.state.credentials_present:
        raise ConfigurationError("OPENAI_API_KEY is not set")

    logger.info(
        "[api.generate] page_type=%s class=%s",
        payload.page_type,
        instruction_class_for(payload.page_type).value,
    )
    result = await generate_seo_meta(payload)

    return SeoResultView(
        page_type=payload.page_type,
        full_url=build_full_url(payload.page_type, result.url),
        result=result,
    )
