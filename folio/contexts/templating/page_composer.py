"""
Page Composer

Assembles rendered blocks into pages:
- career page: profile, introduction, career entries, education entries
- portfolio page: profile, portfolio entries

Every collection maps to exactly one block per entry, in input order. Empty
collections produce empty sections.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from jinja2 import TemplateError
from markupsafe import Markup

from folio.contexts.content.content_store import ContentStore
from folio.contexts.content.entry_data_structures import EntryKind
from folio.contexts.templating.defaults import PAGE_TITLES, SECTION_HEADINGS, SITE_LANG, SITE_TITLE
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.html_generator import HTMLGenerator
from folio.contexts.templating.logger import log_page_composed

PAGE_STRUCTURE = "page"


@dataclass(frozen=True)
class RenderedBlock:
    """
    Markup for one entry (or the introduction list).

    Attributes:
        kind: Entry kind, None for non-entry blocks
        key: Identifying label (entry title)
        html: Rendered markup
    """

    kind: Optional[EntryKind]
    key: str
    html: Markup


@dataclass(frozen=True)
class PageSection:
    """
    Ordered run of blocks under an optional heading.

    Attributes:
        section_id: HTML id of the section
        heading: Heading text, None for no heading
        blocks: Rendered blocks in display order
    """

    section_id: str
    heading: Optional[str]
    blocks: Tuple[RenderedBlock, ...]


@dataclass(frozen=True)
class ComposedPage:
    """
    A page ready to render into a complete HTML document.

    Attributes:
        name: Page name, also its output directory (e.g., "career")
        title: Page title shown before the site title
        profile: Rendered profile header
        sections: Page sections in display order
    """

    name: str
    title: str
    profile: Markup
    sections: Tuple[PageSection, ...]

    def section(self, section_id: str) -> PageSection:
        """Look up a section by id."""
        for section in self.sections:
            if section.section_id == section_id:
                return section
        raise KeyError(f"Page '{self.name}' has no section '{section_id}'")

    @property
    def block_count(self) -> int:
        return sum(len(section.blocks) for section in self.sections)


class PageComposer:
    """Composes content collections into pages and renders full documents."""

    def __init__(
        self,
        generator: HTMLGenerator = None,
        site_title: str = SITE_TITLE,
        lang: str = SITE_LANG,
    ):
        self.generator = generator or HTMLGenerator()
        self.site_title = site_title
        self.lang = lang

    def render_blocks(self, store: ContentStore, kind: EntryKind) -> Tuple[RenderedBlock, ...]:
        """
        Render every entry of one collection, preserving order.

        Args:
            store: Content store
            kind: Which collection to render

        Returns:
            One RenderedBlock per entry
        """
        return tuple(
            RenderedBlock(kind=kind, key=entry.title, html=self.generator.render_entry(entry, position))
            for position, entry in enumerate(store.collection(kind))
        )

    def compose_career_page(self, store: ContentStore) -> ComposedPage:
        """
        Compose the career page: introduction, career history, then education.

        Args:
            store: Content store

        Returns:
            ComposedPage named "career"
        """
        introduction_blocks = ()
        if store.introduction:
            introduction_blocks = (
                RenderedBlock(
                    kind=None,
                    key="introduction",
                    html=self.generator.render_introduction(store.introduction),
                ),
            )

        page = ComposedPage(
            name="career",
            title=PAGE_TITLES["career"],
            profile=self.generator.render_profile(store.profile),
            sections=(
                PageSection("introduce", SECTION_HEADINGS["introduction"], introduction_blocks),
                PageSection(
                    "career",
                    SECTION_HEADINGS["careers"],
                    self.render_blocks(store, EntryKind.CAREER),
                ),
                PageSection(
                    "education",
                    SECTION_HEADINGS["educations"],
                    self.render_blocks(store, EntryKind.EDUCATION),
                ),
            ),
        )
        log_page_composed(
            page.name, {section.section_id: len(section.blocks) for section in page.sections}
        )
        return page

    def compose_portfolio_page(self, store: ContentStore) -> ComposedPage:
        """
        Compose the portfolio page: one numbered block per project.

        Args:
            store: Content store

        Returns:
            ComposedPage named "portfolio"
        """
        page = ComposedPage(
            name="portfolio",
            title=PAGE_TITLES["portfolio"],
            profile=self.generator.render_profile(store.profile),
            sections=(
                PageSection(
                    "project",
                    SECTION_HEADINGS["portfolios"],
                    self.render_blocks(store, EntryKind.PORTFOLIO),
                ),
            ),
        )
        log_page_composed(page.name, {"project": page.block_count})
        return page

    def compose_site(self, store: ContentStore) -> Dict[str, ComposedPage]:
        """Compose every page, keyed by page name."""
        pages = (self.compose_career_page(store), self.compose_portfolio_page(store))
        return {page.name: page for page in pages}

    def render_page(self, page: ComposedPage) -> str:
        """
        Render a composed page into a complete HTML document.

        Args:
            page: ComposedPage

        Returns:
            HTML document string

        Raises:
            TemplateRenderError: If Jinja2 fails while rendering
        """
        registry = self.generator.template_registry
        template = registry.get_structure_template(PAGE_STRUCTURE)
        try:
            return template.render(
                lang=self.lang,
                title=f"{page.title} | {self.site_title}",
                stylesheet=Markup(registry.load_stylesheet()),
                page_name=page.name,
                profile=page.profile,
                sections=page.sections,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render page '{page.name}'",
                template_name=PAGE_STRUCTURE,
                original_error=e,
            ) from e

    def render_site(self, store: ContentStore) -> Dict[str, str]:
        """Compose and render every page, keyed by page name."""
        return {name: self.render_page(page) for name, page in self.compose_site(store).items()}
