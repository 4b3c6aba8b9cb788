"""Unit tests for the sanitize-then-embed pipeline."""

import pytest
from bs4.builder import ParserRejectedMarkup
from markupsafe import Markup

from folio.contexts.templating import sanitizer
from folio.contexts.templating.sanitizer import (
    SanitizedHtml,
    embed_fragment,
    is_safe_url,
    sanitize_html,
)


# Script-executing constructs


@pytest.mark.unit
def test_script_element_removed_with_content():
    """Test the canonical script example."""
    result = sanitize_html("<p>Hello</p><script>alert(1)</script>")
    assert result.html == "<p>Hello</p>"


@pytest.mark.unit
def test_javascript_href_removed():
    """Test that a javascript: link keeps its text but loses the href."""
    result = sanitize_html('<a href="javascript:alert(1)">click</a>')
    assert result.html == "<a>click</a>"


@pytest.mark.unit
@pytest.mark.parametrize(
    "href",
    [
        "JaVaScRiPt:alert(1)",
        "java\tscript:alert(1)",
        " javascript:alert(1)",
        "vbscript:msgbox(1)",
        "data:text/html;base64,PHNjcmlwdD4=",
    ],
)
def test_obfuscated_schemes_removed(href):
    """Test that scheme tricks browsers still execute are caught."""
    result = sanitize_html(f'<a href="{href}">x</a>')
    assert result.html == "<a>x</a>"


@pytest.mark.unit
def test_event_handler_attributes_removed():
    """Test on* attributes are dropped from allowed elements."""
    result = sanitize_html('<p onclick="steal()">Hi</p><img src="shot.png" onerror="alert(1)">')
    assert result.html == '<p>Hi</p><img src="shot.png"/>'


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw_html,expected",
    [
        ("<div><style>p { color: red }</style>Text</div>", "<div>Text</div>"),
        ('<iframe src="https://example.com"></iframe><p>ok</p>', "<p>ok</p>"),
        ('<form action="/x"><input name="q"><button>Go</button></form>after', "after"),
        ("<svg><script>alert(1)</script></svg>kept", "kept"),
    ],
)
def test_active_content_removed(raw_html, expected):
    """Test active-content elements are removed together with their contents."""
    assert sanitize_html(raw_html).html == expected


@pytest.mark.unit
def test_style_attribute_removed():
    """Test inline style is not allowed in author content."""
    result = sanitize_html('<span style="background:url(javascript:x)">a</span>')
    assert result.html == "<span>a</span>"


# Benign content


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw_html",
    [
        "<p>Intro <strong>bold</strong> and <em>emphasis</em></p>",
        "<ul><li>one</li><li>two</li></ul>",
        '<a href="https://github.com/example/repo" title="Source">repo</a>',
        '<a href="mailto:someone@example.com">mail</a>',
        '<img src="/static/images/portfolio/shot.png" alt="Screenshot"/>',
        '<p class="lead">Tom &amp; Jerry</p>',
        "<pre><code>def main():\n    return 1</code></pre>",
        '<table><tr><td colspan="2">cell</td></tr></table>',
    ],
)
def test_benign_markup_unchanged(raw_html):
    """Test structural markup passes through untouched."""
    assert sanitize_html(raw_html).html == raw_html


@pytest.mark.unit
def test_void_elements_normalized():
    """Test void elements are serialized in self-closing form."""
    assert sanitize_html("line<br>next").html == "line<br/>next"


@pytest.mark.unit
def test_relative_links_kept():
    """Test relative and fragment URLs count as safe."""
    raw_html = '<a href="#details">jump</a><a href="../other/index.html">other</a>'
    assert sanitize_html(raw_html).html == raw_html


@pytest.mark.unit
def test_comments_removed():
    """Test HTML comments are dropped."""
    assert sanitize_html("<p>a<!-- hidden note -->b</p>").html == "<p>ab</p>"


@pytest.mark.unit
def test_unknown_elements_unwrapped():
    """Test unknown elements keep their text content."""
    result = sanitize_html("<p><custom-badge>keep</custom-badge> me</p>")
    assert result.html == "<p>keep me</p>"


@pytest.mark.unit
def test_script_inside_unknown_element_removed():
    """Test removal still applies to children of unwrapped elements."""
    result = sanitize_html("<custom><script>alert(1)</script>text</custom>")
    assert result.html == "text"


@pytest.mark.unit
def test_plain_text_escaped():
    """Test stray angle brackets in text come out escaped."""
    result = sanitize_html("1 &lt; 2")
    assert result.html == "1 &lt; 2"


@pytest.mark.unit
def test_empty_fragment():
    """Test an empty body sanitizes to an empty fragment."""
    assert sanitize_html("").html == ""


# Idempotence


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw_html",
    [
        "<p>Hello</p><script>alert(1)</script>",
        '<a href="javascript:alert(1)" onclick="x()">click</a>',
        "<div><custom>a<br>b</custom><!-- c --></div>",
        "<p>unclosed <b>bold",
        '<img src="shot.png" onerror="alert(1)">',
    ],
)
def test_sanitize_is_idempotent(raw_html):
    """Test sanitizing a sanitized fragment changes nothing."""
    once = sanitize_html(raw_html)
    twice = sanitize_html(once.html)
    assert twice.html == once.html


# Type guards


@pytest.mark.unit
def test_sanitize_rejects_non_string():
    """Test non-string input raises TypeError."""
    with pytest.raises(TypeError):
        sanitize_html(None)


@pytest.mark.unit
def test_sanitized_html_cannot_be_constructed_directly():
    """Test SanitizedHtml only comes from sanitize_html()."""
    with pytest.raises(TypeError):
        SanitizedHtml("<script>alert(1)</script>")


@pytest.mark.unit
def test_embed_fragment_returns_markup():
    """Test embedding yields Markup with the sanitized content."""
    embedded = embed_fragment(sanitize_html("<p>Hi</p><script>x</script>"))
    assert isinstance(embedded, Markup)
    assert str(embedded) == "<p>Hi</p>"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["<p>raw</p>", Markup("<p>raw</p>")])
def test_embed_fragment_rejects_unsanitized(value):
    """Test raw strings and Markup cannot skip the sanitizer."""
    with pytest.raises(TypeError, match="sanitize_html"):
        embed_fragment(value)


# URL checks


@pytest.mark.unit
@pytest.mark.parametrize(
    "url",
    [
        "/static/images/portfolio/shot.png",
        "shot.png",
        "#section",
        "https://example.com",
        "http://example.com",
        "mailto:someone@example.com",
        "tel:+1-555-0100",
    ],
)
def test_is_safe_url_accepts(url):
    assert is_safe_url(url)


@pytest.mark.unit
@pytest.mark.parametrize(
    "url",
    ["javascript:alert(1)", "java\nscript:alert(1)", "\x01javascript:x", "file:///etc/passwd", None],
)
def test_is_safe_url_rejects(url):
    assert not is_safe_url(url)


# Parser fallback and structure


@pytest.mark.unit
def test_rejected_markup_escaped_as_text(monkeypatch):
    """Test markup the parser rejects is kept as escaped text."""

    def reject(markup, features):
        raise ParserRejectedMarkup("markup rejected")

    monkeypatch.setattr(sanitizer, "BeautifulSoup", reject)

    result = sanitize_html("<p>Tom & Jerry</p><script>x()</script>")

    assert result.html == "&lt;p&gt;Tom &amp; Jerry&lt;/p&gt;&lt;script&gt;x()&lt;/script&gt;"
    assert "<" not in str(embed_fragment(result))


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw_html,expected",
    [
        ("<p>a<p>b", "<p>a<p>b</p></p>"),
        ("<ul><li>a<li>b</ul>", "<ul><li>a<li>b</li></li></ul>"),
    ],
)
def test_unclosed_elements_nest_as_written(raw_html, expected):
    """Test omitted end tags are closed where written, without HTML5 reshaping."""
    once = sanitize_html(raw_html)

    assert once.html == expected
    assert sanitize_html(once.html).html == once.html
