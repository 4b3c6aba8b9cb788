"""
Templating Context

Responsibilities:
- Sanitizes author-written HTML and embeds it as safe markup
- Renders each content record to an HTML block through Jinja2 templates
- Composes blocks into pages and renders complete documents

Owns: HTML templates, sanitization, page composition
Never: Modifies content records or writes files
"""

from folio.contexts.templating.html_generator import HTMLGenerator
from folio.contexts.templating.page_composer import (
    ComposedPage,
    PageComposer,
    PageSection,
    RenderedBlock,
)
from folio.contexts.templating.registries import TemplateRegistry
from folio.contexts.templating.sanitizer import (
    SanitizedHtml,
    embed_fragment,
    is_safe_url,
    sanitize_html,
)

__all__ = [
    # Sanitize-then-embed pipeline
    "sanitize_html",
    "embed_fragment",
    "is_safe_url",
    "SanitizedHtml",
    # Rendering and composition
    "HTMLGenerator",
    "PageComposer",
    "ComposedPage",
    "PageSection",
    "RenderedBlock",
    "TemplateRegistry",
]
