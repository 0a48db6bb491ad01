# app/ui/controller.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Awaitable, Callable, Iterator, Optional

from pydantic import BaseModel

from app.errors import GenerationError
from app.ui.renderer import render_error, render_results
from models.seo_models import GenerationRequest, PageType, SeoResult

logger = logging.getLogger(__name__)

SeoGenerator = Callable[[GenerationRequest], Awaitable[SeoResult]]


class FormState(BaseModel):
    """
    What the page shows. One instance per page render.
    """

    # set once at construction, never rechecked
    fieldset_disabled: bool = False
    config_error_visible: bool = False

    submit_disabled: bool = False
    spinner_visible: bool = False
    results_visible: bool = False
    results_html: str = ""

    # echo of the last submitted values
    title: str = ""
    page_type: str = PageType.ARTICLE.value


class SeoFormController:
    """
    Form submit -> prompt -> LLM -> validated result -> rendered panel.

    The generator is injected so routes pass the real agent and tests a fake.
    """

    def __init__(self, generator: SeoGenerator, credentials_present: bool):
        self._generate = generator
        self.state = FormState()
        if not credentials_present:
            logger.warning("[form] credentials missing, form disabled")
            self.state.fieldset_disabled = True
            self.state.config_error_visible = True

    @contextmanager
    def loading(self) -> Iterator[FormState]:
        """Loading UI state; released on every exit path."""
        state = self.state
        state.submit_disabled = True
        state.spinner_visible = True
        state.results_visible = False
        state.results_html = ""
        try:
            yield state
        finally:
            state.submit_disabled = False
            state.spinner_visible = False
            state.results_visible = True

    async def submit(self, title: Optional[str], page_type: str) -> bool:
        """
        Handle one submission.

        Returns False when nothing happened (blank title or disabled form).
        """
        if self.state.fieldset_disabled:
            return False

        title = (title or "").strip()
        if not title:
            return False

        self.state.title = title
        self.state.page_type = page_type
        request = GenerationRequest(title=title, page_type=page_type)

        with self.loading() as state:
            try:
                result = await self._generate(request)
                state.results_html = render_results(result, page_type)
            except GenerationError as e:
                logger.error("[form] generation failed page_type=%s error=%s", page_type, e)
                state.results_html = render_error(e.message)
        return True
