"""
Keyword analysis over resume text: section splitting, whole-word keyword
matching, relevance scoring and skills-gap comparison against a job's
requirements.
"""

import re
from typing import Dict, List, Sequence

from app.core.schemas import SkillsGap
from app.core.sections import detect_section
from app.core.text_normalization import split_lines

SECTION_NAMES = ("summary", "experience", "education", "skills", "other")
MAX_REPEAT_BONUS = 5


def _keyword_re(keyword: str) -> "re.Pattern[str]":
    return re.compile(r"(?<!\w)" + re.escape(keyword.lower()) + r"(?!\w)")


def extract_resume_sections(text: str) -> Dict[str, str]:
    """
    Group resume lines by section.

    Lines before the first heading (and under unrecognized headings) land in
    'other'. Heading lines themselves are not included.
    """
    collected: Dict[str, List[str]] = {name: [] for name in SECTION_NAMES}
    current = "other"
    for line in split_lines(text or ""):
        section = detect_section(line)
        if section:
            current = section
            continue
        if line:
            collected[current].append(line)
    return {name: "\n".join(lines) for name, lines in collected.items()}


def analyze_resume(text: str, keywords: Sequence[str]) -> List[str]:
    """
    Keywords found in the resume, whole-word and case-insensitive.

    'Java' does not match inside 'JavaScript'. Original keyword casing is kept,
    duplicates are dropped.
    """
    if not text or not keywords:
        return []
    lowered = text.lower()
    found: List[str] = []
    for keyword in keywords:
        if not keyword or keyword in found:
            continue
        if _keyword_re(keyword).search(lowered):
            found.append(keyword)
    return found


def score_resume_relevance(text: str, keywords: Sequence[str]) -> float:
    """
    Relevance score from 0 to 100.

    Percentage of keywords present, plus a bonus of one point per repeat
    occurrence (at most 5 per keyword), capped at 100.
    """
    keywords = [k for k in keywords or [] if k]
    if not text or not keywords:
        return 0.0

    found = analyze_resume(text, keywords)
    match_percentage = len(found) / len(keywords) * 100

    lowered = text.lower()
    bonus = 0
    for keyword in found:
        occurrences = len(_keyword_re(keyword).findall(lowered))
        if occurrences > 1:
            bonus += min(occurrences - 1, MAX_REPEAT_BONUS)

    return min(match_percentage + bonus, 100.0)


def identify_skills_gap(resume_skills: Sequence[str], required_skills: Sequence[str]) -> SkillsGap:
    """Split required skills into matched and missing (case-insensitive)."""
    have = {s.lower() for s in resume_skills}
    matched = [s for s in required_skills if s.lower() in have]
    missing = [s for s in required_skills if s.lower() not in have]
    match_rate = len(matched) / len(required_skills) * 100 if required_skills else 0.0
    return SkillsGap(matched=matched, missing=missing, match_rate=match_rate)
