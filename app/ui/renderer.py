# app/ui/renderer.py
from __future__ import annotations

from typing import List

from models.seo_models import RenderedField, SeoResult, build_full_url

COPY_LABEL = "Копировать"
COPIED_LABEL = "Скопировано!"

GENERATION_FAILED_MESSAGE = (
    "Произошла ошибка при генерации данных. Пожалуйста, попробуйте снова."
)

# ampersand must come first
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escape the five reserved characters and nothing else."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def result_fields(result: SeoResult, page_type: str) -> List[RenderedField]:
    return [
        RenderedField(label="URL", value=build_full_url(page_type, result.url)),
        RenderedField(label="Title", value=result.title),
        RenderedField(label="Description", value=result.description),
        RenderedField(label="Keywords", value=result.keywords),
    ]


def create_result_item(label: str, content: str) -> str:
    escaped = escape_html(content)
    return f"""
    <div class="result-item" id="result-item-{label.lower()}">
      <div class="result-item-header">
        <h3>{label}</h3>
        <button type="button" class="copy-button" data-copycontent="{escaped}">{COPY_LABEL}</button>
      </div>
      <textarea readonly class="result-content">{escaped}</textarea>
    </div>
  """


def render_results(result: SeoResult, page_type: str) -> str:
    return "".join(
        create_result_item(field.label, field.value)
        for field in result_fields(result, page_type)
    )


def render_error(message: str) -> str:
    return (
        f"<p>{GENERATION_FAILED_MESSAGE}</p>"
        f"<p><i>{escape_html(message)}</i></p>"
    )
