from calc import project_form
from models import default_form_state
from services.document import build_proposal_document
from ui.components import render_document_html


def test_preview_html_escapes_user_text():
    form = default_form_state().model_copy(
        update={"client_name": "<script>alert(1)</script>", "package_bullets": ["Fast & <b>bold</b>"]}
    )
    markup = render_document_html(build_proposal_document(form, project_form(form)))

    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup
    assert "<li>Fast &amp; &lt;b&gt;bold&lt;/b&gt;</li>" in markup
    assert "<strong>25.0%</strong>" in markup


def test_preview_hides_broken_logo():
    form = default_form_state().model_copy(update={"client_logo_url": "https://logos.example/a.png?x=1&y='2'"})
    markup = render_document_html(build_proposal_document(form, None))

    assert "src='https://logos.example/a.png?x=1&amp;y=&#x27;2&#x27;'" in markup
    assert "onerror=\"this.style.display='none'\"" in markup


def test_preview_without_logo_has_no_image():
    markup = render_document_html(build_proposal_document(default_form_state(), None))

    assert "<img" not in markup
