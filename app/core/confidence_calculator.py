"""
Confidence scoring for resume extraction.

Every extractor reports how much it trusts its output as a scalar in [0, 1].
The weights below are hand-tuned heuristics and are kept frozen: their relative
ordering is part of the parser's contract and the test-suite pins them.

Confidence Scale:
  1.0   = Exact match (email regex)
  0.9   = Very high confidence (3-word name, phone, dated range of 2+ dates)
  0.8   = High confidence (2-word name, address, categorized skill in section)
  0.7   = Medium-high confidence (4-word name, single date)
  0.6   = Medium confidence (categorized skill found outside a section)
  0.4   = Low confidence (uncategorized skill)
  0     = Nothing found
"""

from typing import Iterable, Optional

# Personal info field weights
EMAIL_WEIGHT = 1.0
PHONE_WEIGHT = 0.9
ADDRESS_WEIGHT = 0.8
NAME_WEIGHTS = {2: 0.8, 3: 0.9, 4: 0.7}

# Section/entry tallies
SECTION_BONUS = 0.3
FIELD_BONUS = 0.2
DESCRIPTION_BONUS = 0.1

# Date range resolution
DATE_RANGE_CONFIDENCE = 0.9
SINGLE_DATE_CONFIDENCE = 0.7

# Skills
IN_SECTION_SKILL_CONFIDENCE = 0.8
FALLBACK_SKILL_CONFIDENCE = 0.6
UNCATEGORIZED_SKILL_CONFIDENCE = 0.4


class ConfidenceCalculator:
    """Central place for all extraction confidence logic."""

    @staticmethod
    def clamp(value: float) -> float:
        return max(0.0, min(1.0, value))

    @staticmethod
    def mean(values: Iterable[float]) -> float:
        """Arithmetic mean, 0.0 for an empty sequence."""
        values = list(values)
        if not values:
            return 0.0
        return sum(values) / len(values)

    @staticmethod
    def name(word_count: int) -> float:
        """
        Confidence for a name candidate by word count.

        3-word names ("Jane A Smith") are the most common resume header shape and
        get the highest weight; 4 words are the most likely to be something else.
        """
        return NAME_WEIGHTS.get(word_count, 0.0)

    @staticmethod
    def personal_info(
        name_confidence: float,
        has_email: bool,
        has_phone: bool,
        has_address: bool,
    ) -> float:
        """Mean of per-field confidences over the fields that were found."""
        found = []
        if name_confidence > 0:
            found.append(name_confidence)
        if has_email:
            found.append(EMAIL_WEIGHT)
        if has_phone:
            found.append(PHONE_WEIGHT)
        if has_address:
            found.append(ADDRESS_WEIGHT)
        return ConfidenceCalculator.mean(found)

    @staticmethod
    def date_range(distinct_dates: int) -> float:
        if distinct_dates >= 2:
            return DATE_RANGE_CONFIDENCE
        if distinct_dates == 1:
            return SINGLE_DATE_CONFIDENCE
        return 0.0

    @staticmethod
    def entry(tally: float, date_confidence: float) -> float:
        """Entry confidence: accumulated field tally plus the date contribution, clamped."""
        return ConfidenceCalculator.clamp(tally + date_confidence)

    @staticmethod
    def skill(category: Optional[str], in_section: bool = True) -> float:
        if category is None:
            return UNCATEGORIZED_SKILL_CONFIDENCE
        return IN_SECTION_SKILL_CONFIDENCE if in_section else FALLBACK_SKILL_CONFIDENCE

    @staticmethod
    def ratio(scores: Iterable[float]) -> float:
        """Share of satisfied criteria; each score is 0, 0.5 or 1."""
        return ConfidenceCalculator.clamp(ConfidenceCalculator.mean(scores))

    @staticmethod
    def overall(
        personal_info: float,
        experience: float,
        education: float,
        skills: float,
    ) -> float:
        """
        Overall parse confidence.

        Empty categories contribute their (zero) confidence instead of being
        skipped, so sparse resumes score low.
        """
        return ConfidenceCalculator.clamp(
            ConfidenceCalculator.mean([personal_info, experience, education, skills])
        )

    @staticmethod
    def calculate_overall_parse_quality(confidence: float) -> str:
        """
        Determine overall parse quality tier.

        Quality tiers:
          "high"   : overall confidence >= 0.85
          "medium" : overall confidence >= 0.65
          "low"    : Otherwise
        """
        if confidence >= 0.85:
            return "high"
        elif confidence >= 0.65:
            return "medium"
        else:
            return "low"
