"""
Education parsing module for detecting and extracting education entries from resumes.

Same shape as the experience parser: a deterministic state machine keyed on
degree lines (which open entries) and institution lines (which fill the
institution). Any other line in the section is kept only as text for
graduation date resolution.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from app.core.confidence_calculator import FIELD_BONUS, SECTION_BONUS, ConfidenceCalculator
from app.core.date_resolver import resolve_date_range
from app.core.patterns import BARE_DEGREE_RE, DEGREE_RE, INSTITUTION_RE
from app.core.schemas import EducationEntry
from app.core.sections import SectionMachine, detect_section
from app.core.text_normalization import split_lines, strip_bullet

logger = logging.getLogger(__name__)


class EducationState(Enum):
    OUTSIDE_SECTION = "outside_section"
    IN_SECTION = "in_section"
    BUILDING_ENTRY = "building_entry"


class EducationLine(Enum):
    HEADING = "heading"
    OTHER_HEADING = "other_heading"
    DEGREE = "degree"
    INSTITUTION = "institution"
    TEXT = "text"
    BLANK = "blank"


def has_degree_keyword(text: str) -> bool:
    """
    Check if text contains degree keywords.

    Examples:
        'Bachelor of Science in Computer Science' -> True
        'BS in Engineering' -> True
        'Boston University, Boston, MA' -> False
        'Dean's List' -> False
    """
    if DEGREE_RE.search(text):
        return True
    return bool(BARE_DEGREE_RE.search(text)) and not is_institution_keyword(text)


def is_institution_keyword(text: str) -> bool:
    """True for lines naming a university, college, institute or school."""
    return bool(INSTITUTION_RE.search(text))


@dataclass
class _Draft:
    institution: str = ""
    degree: str = ""
    buffer: List[str] = field(default_factory=list)
    tally: float = SECTION_BONUS

    def is_started(self) -> bool:
        return bool(self.institution or self.degree)


@dataclass(frozen=True)
class EducationExtraction:
    entries: Tuple[EducationEntry, ...] = ()
    confidence: float = 0.0
    section_found: bool = False


S = EducationState
L = EducationLine


class EducationMachine(SectionMachine):
    State = EducationState
    Kind = EducationLine
    initial_state = S.OUTSIDE_SECTION
    transitions = {
        (S.OUTSIDE_SECTION, L.HEADING): (S.IN_SECTION, "enter_section"),
        (S.OUTSIDE_SECTION, L.OTHER_HEADING): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.DEGREE): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.INSTITUTION): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.TEXT): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.BLANK): (S.OUTSIDE_SECTION, None),

        (S.IN_SECTION, L.HEADING): (S.IN_SECTION, None),
        (S.IN_SECTION, L.OTHER_HEADING): (S.OUTSIDE_SECTION, "drop_pending"),
        (S.IN_SECTION, L.DEGREE): (S.BUILDING_ENTRY, "add_degree"),
        (S.IN_SECTION, L.INSTITUTION): (S.BUILDING_ENTRY, "add_institution"),
        (S.IN_SECTION, L.TEXT): (S.IN_SECTION, "buffer"),
        (S.IN_SECTION, L.BLANK): (S.IN_SECTION, None),

        (S.BUILDING_ENTRY, L.HEADING): (S.IN_SECTION, "flush"),
        (S.BUILDING_ENTRY, L.OTHER_HEADING): (S.OUTSIDE_SECTION, "flush"),
        (S.BUILDING_ENTRY, L.DEGREE): (S.BUILDING_ENTRY, "add_degree"),
        (S.BUILDING_ENTRY, L.INSTITUTION): (S.BUILDING_ENTRY, "add_institution"),
        (S.BUILDING_ENTRY, L.TEXT): (S.BUILDING_ENTRY, "buffer"),
        (S.BUILDING_ENTRY, L.BLANK): (S.BUILDING_ENTRY, None),
    }

    def __init__(self) -> None:
        super().__init__()
        self.section_found = False
        self.entries: List[EducationEntry] = []
        self.draft = _Draft()

    def classify(self, line: str) -> EducationLine:
        if not line:
            return L.BLANK
        section = detect_section(line)
        if section == "education":
            return L.HEADING
        if section is not None:
            return L.OTHER_HEADING
        if has_degree_keyword(line):
            return L.DEGREE
        if is_institution_keyword(line):
            return L.INSTITUTION
        return L.TEXT

    # --- actions ---

    def enter_section(self, line: str) -> None:
        self.section_found = True

    def add_degree(self, line: str) -> None:
        """
        Start an entry with this degree.

        An open entry that has an institution but no degree yet takes the
        degree instead, so "University / Degree" layouts stay one entry.
        """
        if self.draft.degree:
            self.flush()
        self.draft.degree = strip_bullet(line)
        self.draft.tally += FIELD_BONUS
        self.draft.buffer.append(line)

    def add_institution(self, line: str) -> None:
        if self.draft.institution and self.draft.degree:
            self.flush()
        if not self.draft.institution:
            self.draft.institution = strip_bullet(line)
            self.draft.tally += FIELD_BONUS
        self.draft.buffer.append(line)

    def buffer(self, line: str) -> None:
        self.draft.buffer.append(line)

    def drop_pending(self, line: str) -> None:
        self.draft = _Draft()

    def flush(self, line: str = "") -> None:
        draft = self.draft
        self.draft = _Draft()
        if not draft.is_started():
            return

        # Graduation date semantics: keep only the resolved start date
        dates = resolve_date_range("\n".join(draft.buffer))
        entry = EducationEntry(
            institution=draft.institution,
            degree=draft.degree,
            graduation_date=dates.start_date,
            confidence=ConfidenceCalculator.entry(draft.tally, dates.confidence),
        )
        logger.debug(f"  -> Found education entry: institution='{entry.institution}', degree='{entry.degree}'")
        self.entries.append(entry)

    def finish(self) -> None:
        if self.state is S.BUILDING_ENTRY:
            self.flush()


def extract_education(text: str) -> EducationExtraction:
    """
    Segment the education section into entries.

    Confidence is the mean entry confidence, 0 when nothing was found.
    """
    machine = EducationMachine()
    machine.run(split_lines(text))

    entries = tuple(machine.entries)
    confidence = ConfidenceCalculator.mean(e.confidence for e in entries)
    return EducationExtraction(entries=entries, confidence=confidence, section_found=machine.section_found)
