"""
Entry Data Structures

Defines the immutable records rendered by the site: the profile header and one
record type per entry kind (career, education, portfolio).

Each entry kind is its own dataclass with explicit optional fields, tagged with
an EntryKind so renderers can dispatch without inspecting field presence.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()
STATIC_IMAGES_URL = os.getenv("STATIC_IMAGES_URL", "/static/images")


class EntryKind(str, Enum):
    """Tag identifying which collection an entry belongs to."""

    CAREER = "career"
    EDUCATION = "education"
    PORTFOLIO = "portfolio"


def image_url(category: str, file_name: str, base_url: str = None) -> str:
    """
    Resolve an image reference to the /static/images/<category>/<file> convention.

    References that are already absolute (leading "/" or a URL scheme) pass
    through unchanged.

    Args:
        category: Image category directory (e.g., "career", "portfolio", "profile")
        file_name: File name within the category
        base_url: Override for STATIC_IMAGES_URL

    Returns:
        URL path for the image

    Example:
        >>> image_url("portfolio", "dashboard.png")
        '/static/images/portfolio/dashboard.png'
    """
    if file_name.startswith("/") or "://" in file_name:
        return file_name
    base = (base_url if base_url is not None else STATIC_IMAGES_URL).rstrip("/")
    return f"{base}/{category}/{file_name}"


@dataclass(frozen=True)
class ContactItem:
    """
    One contact row in the profile header.

    Attributes:
        label: Row label (e.g., "Contact", "Git")
        value: Displayed value
        link: Optional URL the value links to
    """

    label: str
    value: str
    link: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    """
    Profile header shown at the top of every page.

    Attributes:
        name: Full name
        role: Professional title (e.g., "Frontend Engineer")
        photo: Photo file name under the "profile" image category
        contacts: Contact rows in display order
    """

    name: str
    role: str
    photo: Optional[str] = None
    contacts: Tuple[ContactItem, ...] = ()

    @property
    def photo_url(self) -> Optional[str]:
        return image_url("profile", self.photo) if self.photo else None


@dataclass(frozen=True)
class CareerProject:
    """
    Project carried out during a career entry.

    Attributes:
        project: Project name
        role: Role on the project
        problem: Problem statement
        solution: How it was solved
        effect: Outcome of the solution
    """

    project: str
    role: str
    problem: str
    solution: str
    effect: str


@dataclass(frozen=True)
class CareerEntry:
    """
    Career history entry (one employer or position).

    Attributes:
        title: Company or position title
        time: Time range label (e.g., "2021.03 - 2023.08")
        duration: Duration chip label (e.g., "2 years 5 months")
        descriptions: Description lines in display order
        skills: Skill labels (unique, display order)
        image: Logo file name under the "career" image category
        projects: Projects carried out in this position
        etcs: Miscellaneous achievements listed under "ETC."
    """

    kind: ClassVar[EntryKind] = EntryKind.CAREER

    title: str
    time: str
    duration: str
    descriptions: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    image: Optional[str] = None
    projects: Tuple[CareerProject, ...] = ()
    etcs: Tuple[str, ...] = ()

    @property
    def image_url(self) -> Optional[str]:
        return image_url("career", self.image) if self.image else None


@dataclass(frozen=True)
class EducationEntry:
    """
    Education entry (school, course or bootcamp).

    Attributes:
        title: Institution or program name
        time: Time range label
        descriptions: Description lines in display order
    """

    kind: ClassVar[EntryKind] = EntryKind.EDUCATION

    title: str
    time: str
    descriptions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TagGroup:
    """
    Labelled group of technology tags (e.g., "FE": React, Next.js).

    Attributes:
        label: Group heading
        tags: Tag labels (unique, display order)
    """

    label: str
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PortfolioEntry:
    """
    Portfolio project entry.

    The body is author-written HTML. It is stored raw and only reaches a page
    through the sanitizer.

    Attributes:
        title: Project title
        time: Time range label
        duration: Optional duration chip label
        images: Screenshot file names under the "portfolio" image category
        body_html: Raw HTML write-up
        stack: Technology tag groups shown beside the write-up
    """

    kind: ClassVar[EntryKind] = EntryKind.PORTFOLIO

    title: str
    time: str
    duration: Optional[str] = None
    images: Tuple[str, ...] = ()
    body_html: str = ""
    stack: Tuple[TagGroup, ...] = ()

    @property
    def image_urls(self) -> Tuple[str, ...]:
        return tuple(image_url("portfolio", image) for image in self.images)
