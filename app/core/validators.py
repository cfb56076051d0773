"""
Structural plausibility checks for extracted entities.

Validators are pure functions: they never raise and never look at anything but
their argument. Fields that were not extracted are left out of the ratio; only
fields that are present can fail.
"""

import re
from datetime import date
from typing import List, Optional, Sequence

from app.core.confidence_calculator import ConfidenceCalculator
from app.core.patterns import (
    MAX_EXPECTED_SKILLS,
    STRICT_EMAIL_RE,
    STRICT_NAME_RE,
    STRICT_PHONE_RE,
)
from app.core.schemas import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    SkillEntry,
    ValidationResult,
)

NUMERIC_RE = re.compile(r"^[\d\s.,/-]+$")
YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")
MIN_YEAR = 1900
FUTURE_YEAR_HORIZON = 10


def _is_text(value: str, min_length: int) -> bool:
    v = (value or "").strip()
    return len(v) >= min_length and not NUMERIC_RE.match(v)


def validate_personal_info(info: PersonalInfo) -> ValidationResult:
    issues: List[str] = []
    checked = 0
    valid = 0

    if info.email:
        checked += 1
        if STRICT_EMAIL_RE.match(info.email):
            valid += 1
        else:
            issues.append("Invalid email format")

    if info.phone:
        checked += 1
        if STRICT_PHONE_RE.match(info.phone):
            valid += 1
        else:
            issues.append("Invalid phone format")

    if info.name:
        checked += 1
        if STRICT_NAME_RE.match(info.name) and len(info.name) > 3:
            valid += 1
        else:
            issues.append("Name appears incomplete or contains invalid characters")

    return ValidationResult(
        is_valid=valid > 0,
        confidence=valid / checked if checked else 0.0,
        issues=tuple(issues),
    )


def validate_experience(entry: ExperienceEntry) -> ValidationResult:
    """
    Check one experience entry.

    Dates score 1 when ordered, 0 when reversed, 0.5 when only one is present,
    and are skipped when both are missing.
    """
    issues: List[str] = []
    scores: List[float] = []

    if _is_text(entry.company, 2):
        scores.append(1.0)
    else:
        scores.append(0.0)
        issues.append("Company name is missing or too short")

    if _is_text(entry.position, 3):
        scores.append(1.0)
    else:
        scores.append(0.0)
        issues.append("Position title is missing or too short")

    if len((entry.description or "").strip()) >= 10:
        scores.append(1.0)
    else:
        scores.append(0.0)
        issues.append("Job description is too short or missing")

    if entry.start_date and entry.end_date:
        # ISO-8601 strings order chronologically
        if entry.start_date <= entry.end_date:
            scores.append(1.0)
        else:
            scores.append(0.0)
            issues.append("Start date is after end date")
    elif entry.start_date or entry.end_date:
        scores.append(0.5)

    return ValidationResult(
        is_valid=not issues,
        confidence=ConfidenceCalculator.ratio(scores),
        issues=tuple(issues),
    )


def validate_education(entry: EducationEntry, current_year: Optional[int] = None) -> ValidationResult:
    """
    Check one education entry.

    `current_year` bounds plausible graduation years; pass it explicitly for
    reproducible results.
    """
    if current_year is None:
        current_year = date.today().year

    issues: List[str] = []
    scores: List[float] = []

    if _is_text(entry.institution, 2):
        scores.append(1.0)
    else:
        scores.append(0.0)
        issues.append("Institution name is missing or too short")

    if len((entry.degree or "").strip()) >= 3:
        scores.append(1.0)
    else:
        scores.append(0.0)
        issues.append("Degree information is missing or too short")

    if entry.graduation_date:
        m = YEAR_RE.search(entry.graduation_date)
        if m and MIN_YEAR <= int(m.group(1)) <= current_year + FUTURE_YEAR_HORIZON:
            scores.append(1.0)
        else:
            scores.append(0.0)
            issues.append("Graduation date is not a plausible year")

    return ValidationResult(
        is_valid=not issues,
        confidence=ConfidenceCalculator.ratio(scores),
        issues=tuple(issues),
    )


def validate_skills(skills: Sequence[SkillEntry]) -> ValidationResult:
    issues: List[str] = []

    if len(skills) == 0:
        issues.append("No skills detected")
    elif len(skills) > MAX_EXPECTED_SKILLS:
        issues.append("Unusually high number of skills detected")

    categorized = [s for s in skills if s.category]
    if skills and not categorized:
        issues.append("No skills could be categorized")

    avg_confidence = ConfidenceCalculator.mean(s.confidence for s in skills)
    categorization_rate = len(categorized) / len(skills) if skills else 0.0

    return ValidationResult(
        is_valid=not issues,
        confidence=ConfidenceCalculator.mean([avg_confidence, categorization_rate]),
        issues=tuple(issues),
    )
