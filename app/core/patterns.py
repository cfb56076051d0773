"""
Pattern library for resume parsing.

Static, data-only tables: contact regexes, section headings, entry keywords and
the skill taxonomy. Extractors import from here and never define their own
vocabularies, so a table can be swapped without touching parser logic.
"""

import re
from types import MappingProxyType
from typing import Mapping, Tuple


# ===== CONTACT FIELDS =====

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# NANP: optional +1 country code, area code with optional parens, exchange, line
PHONE_RE = re.compile(r"(?<!\d)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")

# Anchored on "ST 12345" / "ST 12345-6789", optionally preceded by street and city
ADDRESS_RE = re.compile(
    r"\b(?:\d{1,6}[ \t]+[A-Za-z0-9.'# -]+,[ \t]*)?"
    r"(?:[A-Za-z.' -]+,[ \t]*)?"
    r"[A-Z]{2}[ \t]+\d{5}(?:-\d{4})?\b"
)

# Strict forms used by validators
STRICT_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
STRICT_PHONE_RE = re.compile(r"^(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}$")
STRICT_NAME_RE = re.compile(r"^[A-Za-z]+(\s[A-Za-z]+)*$")


# ===== SECTION HEADINGS =====
# A heading is made only of heading vocabulary: a section keyword plus
# qualifiers such as "Work", "Technical" or "& Training", optionally followed
# by ":" and inline content (e.g. "Skills: Python, SQL"). Lines with any other
# word ("Acme Technologies", "Career Coach", "Master of Education") are not
# headings.

SECTION_KEYWORDS: Mapping[str, str] = MappingProxyType({
    "summary": r"summary|objective|profile",
    "skills": r"skills?|competencies|technologies",
    "education": r"education|academic|qualifications",
    "experience": r"experiences?|employment|career",
})

HEADING_QUALIFIERS: Tuple[str, ...] = (
    "work", "professional", "relevant", "technical", "core", "key", "additional",
    "other", "industry", "research", "volunteer", "military", "previous",
    "related", "selected", "personal", "executive", "teaching", "leadership",
    "history", "background", "training", "highlights", "achievements",
    "overview", "expertise", "areas", "of", "and",
)

_HEADING_WORD = r"(?:" + "|".join(list(HEADING_QUALIFIERS) + list(SECTION_KEYWORDS.values())) + r")(?![A-Za-z])"
_HEADING_SEP = r"(?:\s*[&/]\s*|\s+)"


def _heading(keywords: str) -> "re.Pattern[str]":
    return re.compile(
        r"^[^\w]*"
        r"(?=[^:]*?(?<![A-Za-z])(?:" + keywords + r")(?![A-Za-z]))"
        + _HEADING_WORD + r"(?:" + _HEADING_SEP + _HEADING_WORD + r"){0,5}"
        r"\s*(?::\s*(?P<rest>.*))?$",
        re.IGNORECASE,
    )


# Order matters: a line matching several headings takes the first section.
SECTION_HEADINGS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = tuple(
    (section, _heading(keywords)) for section, keywords in SECTION_KEYWORDS.items()
)

HEADING_MAX_LENGTH = 50


# ===== ENTRY KEYWORDS =====

JOB_TITLE_RE = re.compile(
    r"\b(?:engineer|developer|programmer|manager|director|analyst|consultant|designer|"
    r"architect|lead|specialist|coordinator|intern|administrator|officer|president|"
    r"assistant|associate|scientist|technician|executive|supervisor|representative|"
    r"head|vp|cto|ceo|cfo|founder|owner|teacher|instructor|accountant|nurse)s?\b",
    re.IGNORECASE,
)

JOB_TITLE_MAX_LENGTH = 60

DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?:bachelor(?:'s)?|master(?:'s)?|associate(?:'s)?\s+(?:of|degree|in)|"
    r"ph\.?\s?d\.?|doctorate|doctoral|doctor\s+of|diploma|certificate|"
    r"m\.b\.a\.|mba|b\.s\.|b\.a\.|m\.s\.|m\.a\.|b\.sc\.?|m\.sc\.?|b\.eng\.?|m\.eng\.?)(?![A-Za-z])",
    re.IGNORECASE,
)

# Undotted abbreviations collide with US state codes ("Boston, MA"): they count
# only when not preceded by a comma and the line names no institution.
BARE_DEGREE_RE = re.compile(r"(?<![A-Za-z,])(?<!,\s)(?:bs|ba|ms|ma)(?![A-Za-z])", re.IGNORECASE)

INSTITUTION_RE = re.compile(
    r"\b(?:university|college|institute|school|academy|polytechnic)\b",
    re.IGNORECASE,
)


# ===== DATES =====

MONTHS: Mapping[str, int] = MappingProxyType({
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
})

# Priority order: numeric month, month name, bare year
NUMERIC_MONTH_DATE_RE = re.compile(r"(?<!\d)(0?[1-9]|1[0-2])[/-]((?:19|20)\d{2})(?!\d)")
MONTH_NAME_DATE_RE = re.compile(
    r"\b(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?,?\s+"
    r"((?:19|20)\d{2})(?!\d)",
    re.IGNORECASE,
)
BARE_YEAR_RE = re.compile(r"(?<!\d)((?:19|20)\d{2})(?!\d)")


# ===== SKILLS =====

SKILL_DELIMITERS_RE = re.compile(r"[,;|·•]")

# Keywords are regex fragments, matched against lower-cased tokens
SKILL_CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Programming Languages": (
        "javascript", "python", "java", r"c\+\+", "typescript", "ruby", "php",
        "swift", "kotlin", "go",
    ),
    "Web Technologies": (
        "html", "css", "react", "angular", "vue", r"node\.?js", "express",
        "django", "flask", "spring",
    ),
    "Databases": (
        "sql", "mysql", "postgresql", "mongodb", "oracle", "redis",
        "elasticsearch", "dynamodb",
    ),
    "Cloud & DevOps": (
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "terraform",
        "ci/cd",
    ),
    "Tools & Methodologies": (
        "git", "agile", "scrum", "jira", "confluence", "tdd", "rest", "graphql",
    ),
    "Soft Skills": (
        "leadership", "communication", "teamwork", r"problem.?solving",
        r"project.?management",
    ),
})

SKILL_CATEGORY_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = tuple(
    (category, re.compile(r"(?<![a-z0-9])(?:" + "|".join(keywords) + r")(?![a-z0-9])"))
    for category, keywords in SKILL_CATEGORIES.items()
)

SKILL_MIN_LENGTH = 2
SKILL_MAX_LENGTH = 60
MAX_EXPECTED_SKILLS = 50
