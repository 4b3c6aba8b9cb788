"""
HTML Sanitizer

Two-stage pipeline for author-written rich text (portfolio write-ups):

1. sanitize_html() parses the raw HTML with BeautifulSoup and filters it
   against an allowlist, producing a SanitizedHtml value.
2. embed_fragment() turns a SanitizedHtml into markupsafe.Markup, the only
   form Jinja2 inserts without escaping.

SanitizedHtml can only be constructed here, so "safe to embed" travels with
the type instead of depending on call order.

Examples:
    >>> sanitize_html("<p>Hello</p><script>alert(1)</script>").html
    '<p>Hello</p>'
    >>> sanitize_html('<a href="javascript:alert(1)">click</a>').html
    '<a>click</a>'
"""

import re
from dataclasses import dataclass, field
from typing import List

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import EntitySubstitution
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction, Tag
from markupsafe import Markup

from folio.contexts.templating.logger import log_sanitized_fragment, log_sanitizer_fallback

# Active content: removed together with everything inside it
REMOVED_WITH_CONTENT = frozenset(
    {
        "script", "style", "iframe", "frame", "frameset", "object", "embed", "applet",
        "noscript", "template", "svg", "math", "form", "input", "button", "textarea",
        "select", "option", "link", "meta", "base", "head", "title",
    }
)

# Structural and text-formatting markup kept as-is
ALLOWED_TAGS = frozenset(
    {
        "p", "br", "hr", "div", "span",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "ul", "ol", "li", "dl", "dt", "dd",
        "strong", "b", "em", "i", "u", "s", "small", "sub", "sup", "mark",
        "code", "pre", "blockquote",
        "a", "img", "figure", "figcaption",
        "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption",
    }
)

GLOBAL_ATTRIBUTES = frozenset({"class", "title", "lang", "dir"})

TAG_ATTRIBUTES = {
    "a": frozenset({"href", "target", "rel"}),
    "img": frozenset({"src", "alt", "width", "height"}),
    "ol": frozenset({"start"}),
    "td": frozenset({"colspan", "rowspan"}),
    "th": frozenset({"colspan", "rowspan", "scope"}),
}

URL_ATTRIBUTES = frozenset({"href", "src"})
ALLOWED_URL_SCHEMES = frozenset({"http", "https", "mailto", "tel"})

# Browsers ignore ASCII whitespace and control characters inside a scheme
_IGNORED_URL_CHARACTERS = re.compile(r"[\x00-\x20\x7f]+")
_URL_SCHEME = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")

_MARKUP_DECLARATIONS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

_SANITIZER_KEY = object()


@dataclass(frozen=True)
class SanitizedHtml:
    """
    HTML fragment that has passed through sanitize_html().

    Attributes:
        html: Sanitized markup
    """

    html: str
    _key: object = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self._key is not _SANITIZER_KEY:
            raise TypeError("SanitizedHtml can only be produced by sanitize_html()")


def is_safe_url(url: str) -> bool:
    """
    Check whether a URL attribute value is relative or uses an allowed scheme.

    Example:
        >>> is_safe_url("/static/images/portfolio/shot.png")
        True
        >>> is_safe_url("java\\tscript:alert(1)")
        False
    """
    if not isinstance(url, str):
        return False
    match = _URL_SCHEME.match(_IGNORED_URL_CHARACTERS.sub("", url))
    if match is None:
        return True
    return match.group(1).lower() in ALLOWED_URL_SCHEMES


def _filter_attributes(tag: Tag) -> List[str]:
    """Drop attributes outside the allowlist and URL attributes with unsafe schemes."""
    allowed = GLOBAL_ATTRIBUTES | TAG_ATTRIBUTES.get(tag.name, frozenset())
    removed = []
    for attribute in list(tag.attrs):
        value = tag.attrs[attribute]
        if attribute not in allowed or (attribute in URL_ATTRIBUTES and not is_safe_url(value)):
            del tag.attrs[attribute]
            removed.append(f"{tag.name}[{attribute}]")
    return removed


def sanitize_html(raw_html: str) -> SanitizedHtml:
    """
    Filter author HTML down to markup that cannot execute code when rendered.

    Active-content elements are removed with their contents, unknown elements
    are unwrapped (their text is kept), comments and declarations are dropped,
    and attributes are reduced to the allowlist. Anything left passes through
    unchanged, so sanitizing an already sanitized fragment is a no-op.

    Malformed markup never raises: html.parser recovers what it can, and if it
    rejects the input outright the whole string is escaped and kept as text.

    Args:
        raw_html: Author-supplied HTML fragment

    Returns:
        SanitizedHtml ready for embed_fragment()

    Raises:
        TypeError: If raw_html is not a string
    """
    if not isinstance(raw_html, str):
        raise TypeError(f"Expected an HTML string, got {type(raw_html).__name__}")

    try:
        soup = BeautifulSoup(raw_html, "html.parser")
    except ParserRejectedMarkup as e:
        log_sanitizer_fallback(raw_html, e)
        return SanitizedHtml(EntitySubstitution.substitute_xml(raw_html), _key=_SANITIZER_KEY)

    for node in soup.find_all(string=lambda text: isinstance(text, _MARKUP_DECLARATIONS)):
        node.extract()

    removed_elements = []
    removed_attributes = []

    for tag in soup.find_all(True):
        if tag.decomposed:
            continue
        if tag.name in REMOVED_WITH_CONTENT:
            removed_elements.append(tag.name)
            tag.decompose()
        elif tag.name not in ALLOWED_TAGS:
            removed_elements.append(tag.name)
            tag.unwrap()
        else:
            removed_attributes.extend(_filter_attributes(tag))

    log_sanitized_fragment(removed_elements, removed_attributes)
    return SanitizedHtml(soup.decode(), _key=_SANITIZER_KEY)


def embed_fragment(fragment: SanitizedHtml) -> Markup:
    """
    Mark a sanitized fragment as safe for unescaped insertion into a template.

    Args:
        fragment: Output of sanitize_html()

    Returns:
        markupsafe.Markup wrapping the sanitized HTML

    Raises:
        TypeError: If fragment did not come from sanitize_html()
    """
    if not isinstance(fragment, SanitizedHtml):
        raise TypeError(
            f"Only SanitizedHtml can be embedded, got {type(fragment).__name__}; "
            "pass raw HTML through sanitize_html() first"
        )
    return Markup(fragment.html)
