"""Shared fixtures: a small content definition covering every entry kind."""

import copy

import pytest

from folio.contexts.content import ContentStore

SAMPLE_CONTENT = {
    "profile": {
        "name": "Jane Doe",
        "role": "Frontend Engineer",
        "photo": "jane.jpg",
        "contacts": [
            {"label": "Contact", "value": "jane@example.com", "link": "mailto:jane@example.com"},
            {"label": "Git", "value": "github.com/jane", "link": "https://github.com/jane"},
        ],
    },
    "introduction": ["Builds things for the web.", "Cares about performance."],
    "careers": [
        {
            "title": "Acme Corp",
            "time": "2021.03 - 2023.08",
            "duration": "2 years 5 months",
            "image": "acme.png",
            "descriptions": ["Frontend team"],
            "skills": ["React", "TypeScript", "React", "Electron"],
            "projects": [
                {
                    "project": "Desktop rewrite",
                    "role": "Lead",
                    "problem": "Slow startup.",
                    "solution": "Split the bundle.",
                    "effect": "Three times faster.",
                }
            ],
            "etcs": ["Ran the study group"],
        },
        {
            "title": "Beta Studio",
            "time": "2019.01 - 2021.02",
            "duration": "2 years 1 month",
            "skills": ["Vue"],
        },
    ],
    "educations": [
        {"title": "State University", "time": "2014 - 2018", "descriptions": ["B.S. Computer Science"]},
    ],
    "portfolios": [
        {
            "title": "Trip Planner",
            "time": "2023.05 - 2023.09",
            "duration": "4 months",
            "images": ["home.png", "map.png", "share.png"],
            "body_html": "<p>Collaborative <strong>itinerary</strong> editor.</p>",
            "stack": {"FE": ["React", "Zustand", "React"], "Deployment": ["Vercel"]},
        },
        {
            "title": "Playground",
            "time": "2021.10 - 2021.12",
        },
    ],
}


@pytest.fixture
def sample_content():
    """Plain-dict content definition (a fresh copy per test)."""
    return copy.deepcopy(SAMPLE_CONTENT)


@pytest.fixture
def sample_store(sample_content):
    return ContentStore.from_dict(sample_content)
