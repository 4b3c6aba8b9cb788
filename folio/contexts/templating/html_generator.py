"""
HTML Generator

Converts content records to HTML blocks.
"""

from typing import Iterable

from jinja2 import TemplateError
from markupsafe import Markup

from folio.contexts.content.entry_data_structures import (
    CareerEntry,
    ContactItem,
    EducationEntry,
    EntryKind,
    PortfolioEntry,
    Profile,
)
from folio.contexts.templating.defaults import (
    CAREER_PROJECT_LABELS,
    ETC_HEADING,
    TAG_SEPARATOR,
)
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.registries import TemplateRegistry
from folio.contexts.templating.sanitizer import embed_fragment, is_safe_url, sanitize_html
from folio.utils.text_processing import format_percentage


class HTMLGenerator:
    """Converts content records to HTML blocks."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def _render(self, component_name: str, **context) -> Markup:
        """
        Render a component template.

        Output of an autoescaped template is itself safe markup, so it is
        wrapped in Markup for embedding into enclosing templates.

        Raises:
            TemplateRenderError: If Jinja2 fails while rendering
        """
        template = self.template_registry.get_template(component_name)
        try:
            rendered = template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render component '{component_name}'",
                template_name=component_name,
                template_path=self.template_registry.get_template_path(component_name),
                original_error=e,
            ) from e
        return Markup(rendered.strip())

    def render_chip(self, text: str) -> Markup:
        """Render a single label chip (durations, skills)."""
        return self._render("chip", text=text)

    def render_contact(self, contact: ContactItem) -> Markup:
        """
        Render one label/value contact row.

        Links with unsafe schemes are dropped and the value is shown as plain text.
        """
        link = contact.link if contact.link and is_safe_url(contact.link) else None
        return self._render("description", label=contact.label, value=contact.value, link=link)

    def render_profile(self, profile: Profile) -> Markup:
        """
        Render the profile header.

        Args:
            profile: Profile record

        Returns:
            Markup for the profile section
        """
        contact_rows = [self.render_contact(contact) for contact in profile.contacts]
        return self._render(
            "profile",
            profile=profile,
            photo_url=profile.photo_url,
            contact_rows=contact_rows,
        )

    def render_introduction(self, lines: Iterable[str]) -> Markup:
        """Render the introduction bullet list."""
        return self._render("introduction", lines=list(lines))

    def render_career(self, entry: CareerEntry) -> Markup:
        """
        Render a career entry.

        Layout: time, duration chip and logo on the side; title, description
        lines, skill chips, project items and the ETC. list in the main column.

        Args:
            entry: CareerEntry record

        Returns:
            Markup for the career block
        """
        return self._render(
            "career_entry",
            entry=entry,
            image_url=entry.image_url,
            duration_chip=self.render_chip(entry.duration),
            skill_chips=[self.render_chip(skill) for skill in entry.skills],
            labels=CAREER_PROJECT_LABELS,
            etc_heading=ETC_HEADING,
        )

    def render_education(self, entry: EducationEntry) -> Markup:
        """Render an education entry."""
        return self._render("education_entry", entry=entry)

    def render_portfolio(self, entry: PortfolioEntry, number: int) -> Markup:
        """
        Render a portfolio entry.

        The body HTML goes through sanitize_html() and embed_fragment(); every
        other field is escaped by the template. Images share the row equally,
        each taking (100 / count - 1) percent of the width.

        Args:
            entry: PortfolioEntry record
            number: 1-based position shown before the title

        Returns:
            Markup for the portfolio block
        """
        image_urls = entry.image_urls
        image_width = format_percentage(100 / len(image_urls) - 1) if image_urls else None

        return self._render(
            "portfolio_entry",
            entry=entry,
            number=number,
            duration_chip=self.render_chip(entry.duration) if entry.duration else None,
            image_urls=image_urls,
            image_width=image_width,
            body=embed_fragment(sanitize_html(entry.body_html)),
            tag_separator=TAG_SEPARATOR,
        )

    def render_entry(self, entry, position: int) -> Markup:
        """
        Render any entry by dispatching on its kind.

        Args:
            entry: CareerEntry, EducationEntry or PortfolioEntry
            position: 0-based position within its collection

        Returns:
            Markup for the entry block
        """
        if entry.kind is EntryKind.CAREER:
            return self.render_career(entry)
        if entry.kind is EntryKind.EDUCATION:
            return self.render_education(entry)
        if entry.kind is EntryKind.PORTFOLIO:
            return self.render_portfolio(entry, number=position + 1)
        raise ValueError(f"Unknown entry kind: {entry.kind}")
