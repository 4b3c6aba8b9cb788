"""
FOLIO - Static portfolio and career site generator

Renders a personal resume website from immutable content records.

Architecture:
- Content Context: Entry records and the read-only content store
- Templating Context: HTML sanitization, per-entry rendering, page composition
- Rendering Context: Writing composed pages and assets to the output directory
"""

__version__ = "0.1.0"
