"""
Default labels and headings for the generated site.

Provides shared defaults used by:
- html_generator.py (chip and row labels inside entry blocks)
- page_composer.py (section headings and page titles)
"""

import os

from dotenv import load_dotenv

load_dotenv()
SITE_TITLE = os.getenv("SITE_TITLE", "Portfolio")
SITE_LANG = os.getenv("SITE_LANG", "en")

# Page name -> title shown before the site title in <title>
PAGE_TITLES = {
    "career": "Career",
    "portfolio": "Portfolio",
}

# Section headings, rendered as-is
SECTION_HEADINGS = {
    "introduction": "INTRODUCE",
    "careers": None,
    "educations": "EDUCATION",
    "portfolios": None,
}

# Row labels inside a career project item
CAREER_PROJECT_LABELS = {
    "project": "Project:",
    "problem": "Problem:",
    "solution": "Solve:",
    "effect": "Effect:",
}

ETC_HEADING = "ETC."

TAG_SEPARATOR = ", "
