"""
Content Context

Responsibilities:
- Defines the immutable entry records (career, education, portfolio, profile)
- Loads the content definition into a read-only ContentStore
- Resolves image references to the static asset convention

Owns: Entry data model, content loading and definition-time validation
Never: Produces markup
"""

from folio.contexts.content.content_store import ContentStore, load_content_store
from folio.contexts.content.entry_data_structures import (
    CareerEntry,
    CareerProject,
    ContactItem,
    EducationEntry,
    EntryKind,
    PortfolioEntry,
    Profile,
    TagGroup,
    image_url,
)
from folio.contexts.content.exceptions import ContentDefinitionError

__all__ = [
    # Store and loading
    "ContentStore",
    "load_content_store",
    "ContentDefinitionError",
    # Entry records
    "EntryKind",
    "CareerEntry",
    "CareerProject",
    "EducationEntry",
    "PortfolioEntry",
    "TagGroup",
    "Profile",
    "ContactItem",
    "image_url",
]
