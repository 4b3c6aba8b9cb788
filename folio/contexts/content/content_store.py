"""
Content Store

Immutable, in-memory collection of every record the site renders. The store is
constructed once (from a YAML content file or a plain dict) and passed
explicitly into the templating context; nothing mutates it afterwards.

YAML shape:

    profile:
      name: Jane Doe
      role: Frontend Engineer
      photo: profile.jpg
      contacts:
        - {label: Contact, value: jane@example.com, link: "mailto:jane@example.com"}
    introduction:
      - One line per bullet.
    careers:
      - title: Acme Corp
        time: 2021.03 - 2023.08
        duration: 2 years 5 months
        image: acme.png
        descriptions: [...]
        skills: [...]
        projects:
          - {project: ..., role: ..., problem: ..., solution: ..., effect: ...}
        etcs: [...]
    educations:
      - {title: ..., time: ..., descriptions: [...]}
    portfolios:
      - title: ...
        time: ...
        duration: ...
        images: [shot1.png, shot2.png]
        body_html: "<p>...</p>"
        stack:
          FE: [React, TypeScript]
          Deployment: [Vercel]
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.content.entry_data_structures import (
    CareerEntry,
    CareerProject,
    ContactItem,
    EducationEntry,
    EntryKind,
    PortfolioEntry,
    Profile,
    TagGroup,
)
from folio.contexts.content.exceptions import ContentDefinitionError
from folio.contexts.content.logger import log_content_loaded
from folio.utils.text_processing import unique_in_order

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[3]))
SITE_CONTENT_PATH = Path(
    os.getenv("SITE_CONTENT_PATH", PROJECT_ROOT / "data" / "content" / "site.yaml")
)

Entry = Union[CareerEntry, EducationEntry, PortfolioEntry]


@dataclass(frozen=True)
class ContentStore:
    """
    Read-only access to the site's content collections.

    Attributes:
        profile: Profile header shown on every page
        introduction: Introduction bullet lines (career page)
        careers: Career entries in display order
        educations: Education entries in display order
        portfolios: Portfolio entries in display order
    """

    profile: Profile
    introduction: Tuple[str, ...] = ()
    careers: Tuple[CareerEntry, ...] = ()
    educations: Tuple[EducationEntry, ...] = ()
    portfolios: Tuple[PortfolioEntry, ...] = ()

    def __post_init__(self):
        # Freeze sequences handed in as lists so no caller keeps a mutable handle
        for name in ("introduction", "careers", "educations", "portfolios"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def collection(self, kind: EntryKind) -> Tuple[Entry, ...]:
        """Return the ordered collection for an entry kind."""
        return {
            EntryKind.CAREER: self.careers,
            EntryKind.EDUCATION: self.educations,
            EntryKind.PORTFOLIO: self.portfolios,
        }[kind]

    @property
    def counts(self) -> Dict[str, int]:
        return {
            "careers": len(self.careers),
            "educations": len(self.educations),
            "portfolios": len(self.portfolios),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContentStore":
        """
        Build a store from the plain-dict form of the content file.

        Collections that are absent load as empty. The profile is required.

        Args:
            data: Mapping with profile, introduction, careers, educations, portfolios

        Returns:
            ContentStore instance

        Raises:
            ContentDefinitionError: If a record is missing a required field or has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise ContentDefinitionError("Content root must be a mapping")

        if data.get("profile") is None:
            raise ContentDefinitionError("Profile is required", collection="profile")

        return cls(
            profile=_parse_profile(data["profile"]),
            introduction=_string_tuple(data.get("introduction"), "introduction"),
            careers=tuple(
                _parse_career(record, index)
                for index, record in enumerate(_records(data, "careers"))
            ),
            educations=tuple(
                _parse_education(record, index)
                for index, record in enumerate(_records(data, "educations"))
            ),
            portfolios=tuple(
                _parse_portfolio(record, index)
                for index, record in enumerate(_records(data, "portfolios"))
            ),
        )


def load_content_store(content_path: Path = None) -> ContentStore:
    """
    Load a content YAML file into a ContentStore.

    Args:
        content_path: Path to the content file (defaults to SITE_CONTENT_PATH)

    Returns:
        ContentStore instance

    Raises:
        FileNotFoundError: If the content file does not exist
        ContentDefinitionError: If the file is not valid YAML, an interpolation cannot be
            resolved, or the content does not match the entry shapes
    """
    if content_path is None:
        content_path = SITE_CONTENT_PATH
    content_path = Path(content_path)

    if not content_path.exists():
        raise FileNotFoundError(f"Content file not found: {content_path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(content_path), resolve=True)
    except (yaml.YAMLError, OmegaConfBaseException, ValueError) as e:
        raise ContentDefinitionError(
            f"Could not read content file: {e}", collection=str(content_path)
        ) from e
    store = ContentStore.from_dict(data)

    log_content_loaded(content_path, store.counts)
    return store


# Record parsing helpers


def _records(data: Mapping[str, Any], collection: str) -> List[Mapping[str, Any]]:
    records = data.get(collection)
    if records is None:
        return []
    if not isinstance(records, list):
        raise ContentDefinitionError("Expected a list of records", collection=collection)
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ContentDefinitionError(
                "Expected a mapping", collection=collection, index=index
            )
    return records


def _string(value: Any, collection: str, index: Optional[int], field: str) -> str:
    """Strings and integers only; floats and booleans must be quoted in YAML."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, (list, dict)):
        raise ContentDefinitionError("Expected a string", collection, index, field)
    raise ContentDefinitionError("Expected a string (quote the value)", collection, index, field)


def _required(
    record: Mapping[str, Any], field: str, collection: str, index: Optional[int] = None
) -> str:
    value = record.get(field)
    if value is None:
        raise ContentDefinitionError("Missing required field", collection, index, field)
    return _string(value, collection, index, field)


def _optional(
    record: Mapping[str, Any], field: str, collection: str, index: Optional[int] = None
) -> Optional[str]:
    value = record.get(field)
    if value is None:
        return None
    return _string(value, collection, index, field)


def _string_tuple(
    value: Any, collection: str, index: Optional[int] = None, field: Optional[str] = None
) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ContentDefinitionError("Expected a list of strings", collection, index, field)
    return tuple(_string(item, collection, index, field) for item in value)


def _parse_profile(record: Any) -> Profile:
    if not isinstance(record, Mapping):
        raise ContentDefinitionError("Expected a mapping", collection="profile")

    contacts = []
    for position, contact in enumerate(record.get("contacts") or []):
        if not isinstance(contact, Mapping):
            raise ContentDefinitionError("Expected a mapping", "profile.contacts", position)
        contacts.append(
            ContactItem(
                label=_required(contact, "label", "profile.contacts", position),
                value=_required(contact, "value", "profile.contacts", position),
                link=_optional(contact, "link", "profile.contacts", position),
            )
        )

    return Profile(
        name=_required(record, "name", "profile"),
        role=_required(record, "role", "profile"),
        photo=_optional(record, "photo", "profile"),
        contacts=tuple(contacts),
    )


def _parse_career(record: Mapping[str, Any], index: int) -> CareerEntry:
    projects = []
    for position, project in enumerate(record.get("projects") or []):
        if not isinstance(project, Mapping):
            raise ContentDefinitionError("Expected a mapping", "careers", index, "projects")
        location = f"careers[{index}].projects"
        projects.append(
            CareerProject(
                project=_required(project, "project", location, position),
                role=_required(project, "role", location, position),
                problem=_required(project, "problem", location, position),
                solution=_required(project, "solution", location, position),
                effect=_required(project, "effect", location, position),
            )
        )

    return CareerEntry(
        title=_required(record, "title", "careers", index),
        time=_required(record, "time", "careers", index),
        duration=_required(record, "duration", "careers", index),
        descriptions=_string_tuple(record.get("descriptions"), "careers", index, "descriptions"),
        skills=unique_in_order(
            _string_tuple(record.get("skills"), "careers", index, "skills")
        ),
        image=_optional(record, "image", "careers", index),
        projects=tuple(projects),
        etcs=_string_tuple(record.get("etcs"), "careers", index, "etcs"),
    )


def _parse_education(record: Mapping[str, Any], index: int) -> EducationEntry:
    return EducationEntry(
        title=_required(record, "title", "educations", index),
        time=_required(record, "time", "educations", index),
        descriptions=_string_tuple(
            record.get("descriptions"), "educations", index, "descriptions"
        ),
    )


def _parse_stack(value: Any, index: int) -> Tuple[TagGroup, ...]:
    """Stack is a mapping of group label to tag list, in display order."""
    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise ContentDefinitionError(
            "Expected a mapping of label to tags", "portfolios", index, "stack"
        )
    return tuple(
        TagGroup(
            label=str(label),
            tags=unique_in_order(_string_tuple(tags, "portfolios", index, f"stack.{label}")),
        )
        for label, tags in value.items()
    )


def _parse_portfolio(record: Mapping[str, Any], index: int) -> PortfolioEntry:
    return PortfolioEntry(
        title=_required(record, "title", "portfolios", index),
        time=_required(record, "time", "portfolios", index),
        duration=_optional(record, "duration", "portfolios", index),
        images=_string_tuple(record.get("images"), "portfolios", index, "images"),
        body_html=_optional(record, "body_html", "portfolios", index) or "",
        stack=_parse_stack(record.get("stack"), index),
    )
