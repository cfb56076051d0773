"""
Resume parse orchestration.

Runs every extractor independently over the same text, validates each result,
and assembles one immutable ParsedResume with per-category and overall
confidence plus the merged list of validation issues.
"""

import logging
from typing import List, Optional

from app.core.analyzer import extract_resume_sections
from app.core.confidence_calculator import ConfidenceCalculator
from app.core.education_parser import extract_education
from app.core.experience_parser import extract_experience
from app.core.personal_info import extract_personal_info
from app.core.schemas import CategoryConfidence, ParsedResume, ValidationBundle
from app.core.skills_parser import extract_skills
from app.core.text_normalization import collapse_whitespace
from app.core.validators import (
    validate_education,
    validate_experience,
    validate_personal_info,
    validate_skills,
)

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_MAX_CHARS = 500


def extract_summary(text: str, max_chars: int = DEFAULT_SUMMARY_MAX_CHARS) -> Optional[str]:
    """Text of the summary/objective/profile section, or None without one."""
    summary = collapse_whitespace(extract_resume_sections(text)["summary"])
    if not summary:
        return None
    return summary[:max_chars].rstrip()


def parse_resume(
    text: str,
    current_year: Optional[int] = None,
    summary_max_chars: int = DEFAULT_SUMMARY_MAX_CHARS,
) -> ParsedResume:
    """
    Parse plain resume text into a ParsedResume.

    Never raises for any string input; low-signal documents come back with
    zero confidence instead. A non-string input is a caller error (TypeError).
    """
    if not isinstance(text, str):
        raise TypeError(f"resume text must be str, got {type(text).__name__}")

    personal_info = extract_personal_info(text)
    experience = extract_experience(text)
    education = extract_education(text)
    skills = extract_skills(text)

    personal_validation = validate_personal_info(personal_info)
    experience_entries = tuple(
        e.model_copy(update={"validation": validate_experience(e)}) for e in experience.entries
    )
    education_entries = tuple(
        e.model_copy(update={"validation": validate_education(e, current_year=current_year)})
        for e in education.entries
    )
    skills_validation = validate_skills(skills.entries)

    validation = ValidationBundle(
        personal_info=personal_validation,
        experience=tuple(e.validation for e in experience_entries),
        education=tuple(e.validation for e in education_entries),
        skills=skills_validation,
    )

    category_confidence = CategoryConfidence(
        personal_info=personal_info.confidence,
        experience=experience.confidence,
        education=education.confidence,
        skills=skills.confidence,
    )
    confidence = ConfidenceCalculator.overall(
        category_confidence.personal_info,
        category_confidence.experience,
        category_confidence.education,
        category_confidence.skills,
    )

    issues: List[str] = list(personal_validation.issues)
    for result in validation.experience:
        issues.extend(result.issues)
    for result in validation.education:
        issues.extend(result.issues)
    issues.extend(skills_validation.issues)

    if not (experience.section_found or education.section_found or skills.section_found):
        logger.debug("No section headings recognized; low-signal document")
    logger.debug(
        f"Parsed resume: {len(experience_entries)} experience, {len(education_entries)} education, "
        f"{len(skills.entries)} skills, confidence={confidence:.2f}"
    )

    return ParsedResume(
        personal_info=personal_info,
        experience=experience_entries,
        education=education_entries,
        skills=skills.entries,
        summary=extract_summary(text, summary_max_chars),
        raw_text=text,
        validation=validation,
        category_confidence=category_confidence,
        confidence=confidence,
        issues=tuple(issues),
        parse_quality=ConfidenceCalculator.calculate_overall_parse_quality(confidence),
    )
