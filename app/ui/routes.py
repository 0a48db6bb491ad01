# app/ui/routes.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse

from agents.seo_meta_agent import generate_seo_meta
from app.ui.controller import SeoFormController
from app.ui.page import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Form"])


def credentials_present(request: Request) -> bool:
    """Read once at startup in app.main; never rechecked per request."""
    return request.app.state.credentials_present


def _controller(has_key: bool) -> SeoFormController:
    return SeoFormController(generate_seo_meta, credentials_present=has_key)


@router.get("/", response_class=HTMLResponse, summary="SEO form page")
async def form_page(has_key: bool = Depends(credentials_present)) -> HTMLResponse:
    controller = _controller(has_key)
    return HTMLResponse(render_page(controller.state))


@router.post("/", response_class=HTMLResponse, summary="Submit the form without JavaScript")
async def form_submit(
    title: str = Form("", alias="article-title"),
    page_type: str = Form("", alias="article-type"),
    has_key: bool = Depends(credentials_present),
) -> Response:
    controller = _controller(has_key)
    if not await controller.submit(title, page_type):
        # browser keeps the current page on 204
        logger.info("[form] submission ignored title_blank=%s", not title.strip())
        return Response(status_code=204)
    return HTMLResponse(render_page(controller.state))


@router.post(
    "/results",
    response_class=HTMLResponse,
    summary="Results panel fragment for the page script",
)
async def results_fragment(
    title: str = Form("", alias="article-title"),
    page_type: str = Form("", alias="article-type"),
    has_key: bool = Depends(credentials_present),
) -> Response:
    controller = _controller(has_key)
    submitted = await controller.submit(title, page_type)
    if not submitted:
        logger.info("[form] submission ignored title_blank=%s", not title.strip())
        return Response(status_code=204)
    return HTMLResponse(controller.state.results_html)
