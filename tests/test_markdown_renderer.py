import pytest

from kbdwrap.services.kbd_styles import KbdStyleService
from kbdwrap.services.markdown_renderer import MarkdownRenderer


@pytest.fixture
def styles() -> KbdStyleService:
    return KbdStyleService("github")


@pytest.fixture
def renderer(styles) -> MarkdownRenderer:
    return MarkdownRenderer(kbd_css=styles.css)


def test_renderer_basic_html(renderer: MarkdownRenderer):
    html = renderer.to_html("# Title\n\nSome **bold** text.")
    assert "<h1" in html and "Title" in html
    assert "<strong>" in html
    assert html.lower().startswith("<!doctype html")
    assert "<style>" in html


def test_kbd_tags_pass_through(renderer: MarkdownRenderer):
    html = renderer.to_html("Press <kbd>Ctrl</kbd>+<kbd>C</kbd> to copy.")
    assert "<kbd>Ctrl</kbd>" in html
    assert "<kbd>C</kbd>" in html


def test_active_kbd_css_is_injected_on_each_render(renderer, styles):
    assert "#f6f8fa" in renderer.to_html("x")
    styles.set_active("stackoverflow")
    html = renderer.to_html("x")
    assert "#e1e3e5" in html
    assert "#f6f8fa" not in html


def test_renderer_without_style_provider():
    html = MarkdownRenderer().to_html("plain")
    assert "<p>plain</p>" in html


def test_renderer_code_block(renderer: MarkdownRenderer):
    html = renderer.to_html("```python\nprint('x')\n```")
    assert ("<pre" in html or "<code" in html) and "print" in html
