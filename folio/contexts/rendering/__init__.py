"""
Rendering Context

Responsibilities:
- Writes rendered pages to the site output directory
- Copies static assets alongside the pages
- Reports build success and diagnostics

Owns: Output files and directory structure, build logging
Never: Modifies template content
"""

from folio.contexts.rendering.site_builder import (
    BuildResult,
    build_site,
    copy_static_assets,
    export_store,
    write_site,
)

__all__ = [
    "BuildResult",
    "build_site",
    "copy_static_assets",
    "export_store",
    "write_site",
]
