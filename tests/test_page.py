"""Tests for app.ui.page: the HTML shell and its inline browser script."""

import re

from bs4 import BeautifulSoup

from app.main import app
from app.ui.controller import FormState
from app.ui.page import COPY_FEEDBACK_DURATION, _js_str, render_page
from app.ui.renderer import COPIED_LABEL, COPY_LABEL, GENERATION_FAILED_MESSAGE


def _script(html: str) -> str:
    return BeautifulSoup(html, "html.parser").find("script").string


# ---------------------------------------------------------------------------
# Copy feedback, resize, select
# ---------------------------------------------------------------------------

class TestCopyFeedback:
    def test_feedback_lasts_two_seconds(self):
        assert COPY_FEEDBACK_DURATION == 2000
        script = _script(render_page(FormState()))
        assert "const FEEDBACK_MS = 2000;" in script

    def test_labels_swapped_and_restored(self):
        script = _script(render_page(FormState()))
        assert f"const COPY_LABEL = {_js_str(COPY_LABEL)};" in script
        assert f"const COPIED_LABEL = {_js_str(COPIED_LABEL)};" in script
        assert "button.textContent = COPIED_LABEL;" in script
        assert "setTimeout(() => { button.textContent = COPY_LABEL; }, FEEDBACK_MS);" in script

    def test_copies_decoded_attribute(self):
        script = _script(render_page(FormState()))
        assert "navigator.clipboard.writeText(content)" in script
        assert "button.dataset.copycontent" in script


class TestTextareas:
    def test_resized_once_per_render(self):
        script = _script(render_page(FormState()))
        assert script.count("textarea.scrollHeight") == 1
        assert "textarea.style.height = 'auto';" in script

    def test_click_selects_all(self):
        script = _script(render_page(FormState()))
        assert "textarea.addEventListener('click', () => textarea.select());" in script

    def test_title_preselected(self):
        script = _script(render_page(FormState()))
        assert "querySelector('#result-item-title .result-content')" in script
        assert "titleTextarea.select();" in script


# ---------------------------------------------------------------------------
# Submit flow
# ---------------------------------------------------------------------------

class TestSubmitScript:
    def test_fetch_url_is_routed_fragment_endpoint(self):
        script = _script(render_page(FormState()))
        match = re.search(r"fetch\((\"[^\"]+\")", script)
        assert match is not None
        url = match.group(1).strip('"')
        assert url == "/results"
        routed = {(route.path, method) for route in app.routes for method in getattr(route, "methods", ())}
        assert (url, "POST") in routed

    def test_loading_released_in_finally(self):
        script = _script(render_page(FormState()))
        acquire = script.index("generateButton.disabled = true;")
        finally_at = script.index("} finally {")
        release = script.index("generateButton.disabled = false;")
        assert acquire < finally_at < release
        after_finally = script[finally_at:]
        assert "loadingSpinner.classList.add('hidden');" in after_finally
        assert "resultsContainer.classList.remove('hidden');" in after_finally

    def test_failure_message_embedded(self):
        script = _script(render_page(FormState()))
        assert _js_str(GENERATION_FAILED_MESSAGE) in script

    def test_blank_title_skipped_client_side(self):
        script = _script(render_page(FormState()))
        assert "formData.get('article-title')" in script
        blank_check = script.index(".trim()) { return; }")
        assert blank_check < script.index("generateButton.disabled = true;")


class TestJsStr:
    def test_script_close_tag_escaped(self):
        assert _js_str("</script>") == '"<\\/script>"'

    def test_non_ascii_kept(self):
        assert _js_str("Копировать") == '"Копировать"'

    def test_quotes_escaped(self):
        assert _js_str('a"b') == '"a\\"b"'


# ---------------------------------------------------------------------------
# State → markup
# ---------------------------------------------------------------------------

class TestStateMarkup:
    def test_disabled_state(self):
        state = FormState(fieldset_disabled=True, config_error_visible=True, submit_disabled=True)
        soup = BeautifulSoup(render_page(state), "html.parser")
        assert soup.find("fieldset", id="form-fieldset").has_attr("disabled")
        assert soup.find("button", id="generate-button").has_attr("disabled")
        assert "hidden" not in soup.find("div", id="api-key-error")["class"]

    def test_idle_state(self):
        soup = BeautifulSoup(render_page(FormState()), "html.parser")
        assert not soup.find("fieldset", id="form-fieldset").has_attr("disabled")
        assert not soup.find("button", id="generate-button").has_attr("disabled")
        assert "hidden" in soup.find("div", id="loading-spinner")["class"]

    def test_loading_state_shows_spinner(self):
        soup = BeautifulSoup(render_page(FormState(spinner_visible=True)), "html.parser")
        assert "hidden" not in soup.find("div", id="loading-spinner")["class"]

    def test_title_value_escaped(self):
        soup = BeautifulSoup(render_page(FormState(title='"><b>x')), "html.parser")
        assert soup.find("input", id="article-title")["value"] == '"><b>x'
        assert soup.find("b") is None
