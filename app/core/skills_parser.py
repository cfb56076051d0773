"""
Skills extraction and categorization.

Inside the skills section every line is split on list delimiters; each token is
matched against the skill taxonomy with word-boundary matching. Unrecognized
tokens are still kept (uncategorized, lower confidence) since they were listed
as skills by the candidate.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from app.core.confidence_calculator import SECTION_BONUS, ConfidenceCalculator
from app.core.patterns import (
    SKILL_CATEGORY_PATTERNS,
    SKILL_DELIMITERS_RE,
    SKILL_MAX_LENGTH,
    SKILL_MIN_LENGTH,
)
from app.core.schemas import SkillEntry
from app.core.sections import SectionMachine, detect_section, heading_inline_content
from app.core.text_normalization import split_lines, strip_bullet

logger = logging.getLogger(__name__)

NUMERIC_TOKEN_RE = re.compile(r"^[\d\s.,%+-]+$")
SUBHEADING_LABEL_RE = re.compile(r"^[^:,;|·•]{1,40}:\s*")


class SkillsState(Enum):
    OUTSIDE_SECTION = "outside_section"
    IN_SECTION = "in_section"


class SkillsLine(Enum):
    HEADING = "heading"
    OTHER_HEADING = "other_heading"
    TEXT = "text"
    BLANK = "blank"


def tokenize_skills_line(line: str) -> List[str]:
    """
    Split a skills line into candidate tokens.

    Examples:
        'javascript, python; SQL' -> ['javascript', 'python', 'SQL']
        '• Docker | Kubernetes' -> ['Docker', 'Kubernetes']
        'Python, 5, x' -> ['Python']
        'Languages: Go, Rust' -> ['Go', 'Rust']
    """
    tokens = []
    line = SUBHEADING_LABEL_RE.sub("", line)
    for raw in SKILL_DELIMITERS_RE.split(line):
        token = strip_bullet(raw)
        if len(token) < SKILL_MIN_LENGTH or len(token) > SKILL_MAX_LENGTH:
            continue
        if NUMERIC_TOKEN_RE.match(token):
            continue
        tokens.append(token)
    return tokens


def categorize_skill(token: str, in_section: bool = True) -> Tuple[Optional[str], float]:
    """
    Best taxonomy category for a token.

    All categories of one extraction context score the same, so the first
    matching category in taxonomy order wins.
    """
    lowered = token.lower()
    best: Optional[str] = None
    best_conf = 0.0
    for category, pattern in SKILL_CATEGORY_PATTERNS:
        if pattern.search(lowered):
            conf = ConfidenceCalculator.skill(category, in_section=in_section)
            if conf > best_conf:
                best, best_conf = category, conf
    if best is None:
        return None, ConfidenceCalculator.skill(None)
    return best, best_conf


@dataclass(frozen=True)
class SkillsExtraction:
    entries: Tuple[SkillEntry, ...] = ()
    confidence: float = 0.0
    section_found: bool = False
    section_confidence: float = 0.0


S = SkillsState
L = SkillsLine


class SkillsMachine(SectionMachine):
    State = SkillsState
    Kind = SkillsLine
    initial_state = S.OUTSIDE_SECTION
    transitions = {
        (S.OUTSIDE_SECTION, L.HEADING): (S.IN_SECTION, "enter_section"),
        (S.OUTSIDE_SECTION, L.OTHER_HEADING): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.TEXT): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.BLANK): (S.OUTSIDE_SECTION, None),

        (S.IN_SECTION, L.HEADING): (S.IN_SECTION, "enter_section"),
        (S.IN_SECTION, L.OTHER_HEADING): (S.OUTSIDE_SECTION, None),
        (S.IN_SECTION, L.TEXT): (S.IN_SECTION, "collect"),
        (S.IN_SECTION, L.BLANK): (S.IN_SECTION, None),
    }

    def __init__(self) -> None:
        super().__init__()
        self.section_found = False
        self.skills: Dict[str, SkillEntry] = {}  # keyed by lower-cased name, insertion ordered

    def classify(self, line: str) -> SkillsLine:
        if not line:
            return L.BLANK
        section = detect_section(line)
        if section == "skills":
            return L.HEADING
        if section is not None:
            return L.OTHER_HEADING
        return L.TEXT

    # --- actions ---

    def enter_section(self, line: str) -> None:
        self.section_found = True
        # "Skills: Python, SQL" and sub-headings like "Web Technologies: React"
        inline = heading_inline_content(line)
        if inline:
            self.collect(inline)

    def collect(self, line: str) -> None:
        for token in tokenize_skills_line(line):
            key = token.lower()
            if key in self.skills:
                continue
            category, confidence = categorize_skill(token)
            self.skills[key] = SkillEntry(name=token, category=category, confidence=confidence)


def extract_skills(text: str) -> SkillsExtraction:
    """
    Extract skills listed under a skills heading.

    Confidence is the mean skill confidence (0 when none were kept).
    """
    machine = SkillsMachine()
    machine.run(split_lines(text))

    entries = tuple(machine.skills.values())
    confidence = ConfidenceCalculator.mean(s.confidence for s in entries)
    logger.debug(f"Skills: {len(entries)} kept, section_found={machine.section_found}")
    return SkillsExtraction(
        entries=entries,
        confidence=confidence,
        section_found=machine.section_found,
        section_confidence=SECTION_BONUS if machine.section_found else 0.0,
    )
