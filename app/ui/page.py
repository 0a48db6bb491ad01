# app/ui/page.py
from __future__ import annotations

import json

from app.ui.controller import FormState
from app.ui.renderer import (
    COPIED_LABEL,
    COPY_LABEL,
    GENERATION_FAILED_MESSAGE,
    escape_html,
)
from models.seo_models import PageType

CONFIG_ERROR_HTML = (
    "<p><strong>Ошибка конфигурации:</strong> API-ключ не найден.</p>"
    "<p>Пожалуйста, убедитесь, что переменная окружения <code>OPENAI_API_KEY</code> "
    "правильно установлена в настройках вашего проекта.</p>"
)

# ms
COPY_FEEDBACK_DURATION = 2000

_STYLE = """
  * { box-sizing: border-box; }
  body { margin: 0; font: 15px/1.5 system-ui, -apple-system, Segoe UI, Roboto, sans-serif; background: #f4f6f9; color: #1d2430; }
  main { max-width: 760px; margin: 0 auto; padding: 32px 20px 48px; }
  h1 { font-size: 22px; margin: 0 0 20px; }
  fieldset { border: 0; padding: 0; margin: 0; display: flex; flex-direction: column; gap: 12px; }
  fieldset:disabled { opacity: .55; }
  label { font-size: 13px; color: #5b6575; }
  input[type=text], select { width: 100%; padding: 10px 12px; border: 1px solid #cfd6e0; border-radius: 8px; font: inherit; background: #fff; }
  button { padding: 10px 16px; border: 0; border-radius: 8px; background: #2f6fed; color: #fff; font: inherit; cursor: pointer; }
  button:disabled { background: #9db6ea; cursor: default; }
  .hidden { display: none !important; }
  .error-panel { background: #fdecec; border: 1px solid #f2b8b8; color: #8a1f1f; border-radius: 8px; padding: 12px 16px; margin-bottom: 16px; }
  .spinner { margin: 20px auto; width: 32px; height: 32px; border: 4px solid #d7def0; border-top-color: #2f6fed; border-radius: 50%; animation: spin 1s linear infinite; }
  @keyframes spin { to { transform: rotate(360deg); } }
  #results-container { margin-top: 24px; display: flex; flex-direction: column; gap: 16px; }
  .result-item { background: #fff; border: 1px solid #dde3ec; border-radius: 10px; padding: 12px 14px; }
  .result-item-header { display: flex; justify-content: space-between; align-items: center; }
  .result-item-header h3 { margin: 0; font-size: 14px; }
  .copy-button { padding: 6px 12px; font-size: 13px; }
  .result-content { width: 100%; margin-top: 8px; border: 1px solid #e3e8ef; border-radius: 6px; padding: 8px; font: inherit; resize: none; overflow: hidden; }
"""

# Async submit with loading toggles. wireResults runs once per render:
# copy buttons, one-shot resize, select-on-click, title preselect.
_SCRIPT = """
(function () {
  const COPY_LABEL = %(copy_label)s;
  const COPIED_LABEL = %(copied_label)s;
  const FEEDBACK_MS = %(feedback_ms)d;

  const seoForm = document.getElementById('seo-form');
  const formFieldset = document.getElementById('form-fieldset');
  const generateButton = document.getElementById('generate-button');
  const loadingSpinner = document.getElementById('loading-spinner');
  const resultsContainer = document.getElementById('results-container');

  function wireResults() {
    resultsContainer.querySelectorAll('.copy-button').forEach((button) => {
      button.addEventListener('click', () => {
        const content = button.dataset.copycontent;
        if (!content) { return; }
        navigator.clipboard.writeText(content).then(() => {
          button.textContent = COPIED_LABEL;
          setTimeout(() => { button.textContent = COPY_LABEL; }, FEEDBACK_MS);
        }, () => {});
      });
    });
    resultsContainer.querySelectorAll('.result-content').forEach((textarea) => {
      textarea.style.height = 'auto';
      textarea.style.height = textarea.scrollHeight + 'px';
      textarea.addEventListener('click', () => textarea.select());
    });
    const titleTextarea = resultsContainer.querySelector('#result-item-title .result-content');
    if (titleTextarea) { titleTextarea.select(); }
  }

  seoForm.addEventListener('submit', async (event) => {
    event.preventDefault();
    if (formFieldset.disabled) { return; }
    const formData = new FormData(seoForm);
    if (!String(formData.get('article-title') || '').trim()) { return; }

    generateButton.disabled = true;
    loadingSpinner.classList.remove('hidden');
    resultsContainer.classList.add('hidden');
    resultsContainer.innerHTML = '';
    try {
      const response = await fetch(%(fragment_url)s, { method: 'POST', body: formData });
      if (!response.ok) { throw new Error('HTTP ' + response.status); }
      resultsContainer.innerHTML = await response.text();
      wireResults();
    } catch (error) {
      const p = document.createElement('p');
      p.textContent = %(failed_message)s;
      const detail = document.createElement('p');
      detail.innerHTML = '<i></i>';
      detail.firstChild.textContent = error.message;
      resultsContainer.replaceChildren(p, detail);
    } finally {
      generateButton.disabled = false;
      loadingSpinner.classList.add('hidden');
      resultsContainer.classList.remove('hidden');
    }
  });

  wireResults();
})();
"""


def _js_str(value: str) -> str:
    # a JSON string is a valid JS literal; "</" must not close the script tag
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def _hidden(visible: bool) -> str:
    return "" if visible else " hidden"


def _disabled(disabled: bool) -> str:
    return " disabled" if disabled else ""


def _page_type_options(selected: str) -> str:
    options = []
    for member in PageType:
        attr = " selected" if member.value == selected else ""
        options.append(
            f'<option value="{member.value}"{attr}>{member.value.capitalize()}</option>'
        )
    return "\n".join(options)


def render_page(state: FormState, fragment_url: str = "/results") -> str:
    """Full HTML document for the current form state."""
    script = _SCRIPT % {
        "copy_label": _js_str(COPY_LABEL),
        "copied_label": _js_str(COPIED_LABEL),
        "feedback_ms": COPY_FEEDBACK_DURATION,
        "fragment_url": _js_str(fragment_url),
        "failed_message": _js_str(GENERATION_FAILED_MESSAGE),
    }
    config_error = CONFIG_ERROR_HTML if state.config_error_visible else ""
    results_class = "" if state.results_visible else "hidden"

    return f"""<!doctype html>
<html lang="ru">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>Генератор SEO-данных</title>
<style>{_STYLE}</style>
</head>
<body>
<main>
  <h1>Генератор SEO-данных для страниц клиники</h1>
  <div id="api-key-error" class="error-panel{_hidden(state.config_error_visible)}">{config_error}</div>
  <form id="seo-form" method="post" action="/">
    <fieldset id="form-fieldset"{_disabled(state.fieldset_disabled)}>
      <label for="article-title">Заголовок страницы</label>
      <input type="text" id="article-title" name="article-title" value="{escape_html(state.title)}" />
      <label for="article-type">Тип страницы</label>
      <select id="article-type" name="article-type">
{_page_type_options(state.page_type)}
      </select>
      <button type="submit" id="generate-button"{_disabled(state.submit_disabled)}>Сгенерировать</button>
    </fieldset>
  </form>
  <div id="loading-spinner" class="spinner{_hidden(state.spinner_visible)}"></div>
  <div id="results-container" class="{results_class}">{state.results_html}</div>
</main>
<script>{script}</script>
</body>
</html>
"""
