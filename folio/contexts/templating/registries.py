"""
Templating Registries

Centralized registry for loading and caching the Jinja2 HTML templates.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("SITE_TEMPLATES_PATH", Path(__file__).resolve().parent / "template")
)

COMPONENTS_DIR = "components"
STRUCTURE_DIR = "structure"
STYLESHEET_PATH = Path("static") / "site.css"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored under the templates directory as:
    - components/{component_name}.html.jinja: one entry block (career, chip, ...)
    - structure/{structure_name}.html.jinja: page skeletons

    Autoescaping is always on. The only way to emit unescaped markup is a
    markupsafe.Markup value, which the sanitizer's embed step produces.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for templates. Defaults to
                           SITE_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=True,
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, component_name: str) -> Template:
        """
        Get a component template by name, loading and caching it if necessary.

        Args:
            component_name: Name of the component (e.g., 'career_entry')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(f"{COMPONENTS_DIR}/{component_name}.html.jinja", component_name)

    def get_structure_template(self, structure_name: str) -> Template:
        """
        Get a page structure template (e.g., 'page') by name.

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        return self._load(f"{STRUCTURE_DIR}/{structure_name}.html.jinja", structure_name)

    def _load(self, relative_path: str, name: str) -> Template:
        if relative_path in self._cache:
            return self._cache[relative_path]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / relative_path}"
            ) from e

        self._cache[relative_path] = template
        return template

    def get_template_path(self, component_name: str) -> Path:
        """
        Get the file path for a component's template.

        Args:
            component_name: Name of the component (e.g., 'chip')

        Returns:
            Path to template file
        """
        return self.templates_path / COMPONENTS_DIR / f"{component_name}.html.jinja"

    def load_stylesheet(self) -> str:
        """Read the stylesheet inlined into every page."""
        return (self.templates_path / STYLESHEET_PATH).read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, component_name: str) -> bool:
        """
        Check if a component template is in the cache.

        Args:
            component_name: Name of the component

        Returns:
            True if cached, False otherwise
        """
        return f"{COMPONENTS_DIR}/{component_name}.html.jinja" in self._cache
