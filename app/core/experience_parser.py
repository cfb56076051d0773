"""
Work experience extraction.

A state machine walks the document line by line. It enters the experience
section at its heading, opens a new entry on every job-title line, fills the
company from the first non-title line and collects longer lines as the
description. Every consumed line also goes into the entry's text buffer, which
is handed to the date range resolver when the entry is flushed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from app.core.confidence_calculator import (
    DESCRIPTION_BONUS,
    FIELD_BONUS,
    SECTION_BONUS,
    ConfidenceCalculator,
)
from app.core.date_resolver import resolve_date_range
from app.core.patterns import JOB_TITLE_MAX_LENGTH, JOB_TITLE_RE
from app.core.schemas import ExperienceEntry
from app.core.sections import SectionMachine, detect_section
from app.core.text_normalization import split_lines, strip_bullet

logger = logging.getLogger(__name__)

DESCRIPTION_MIN_LENGTH = 10


class ExperienceState(Enum):
    OUTSIDE_SECTION = "outside_section"
    IN_SECTION = "in_section"
    BUILDING_ENTRY = "building_entry"


class ExperienceLine(Enum):
    HEADING = "heading"
    OTHER_HEADING = "other_heading"
    TITLE = "title"
    TEXT = "text"
    BLANK = "blank"


def is_job_title_line(text: str) -> bool:
    """
    Short line containing a job-title keyword.

    Sentences ending in '.' are descriptions even when they mention a title
    ("Worked closely with the lead engineer.").
    """
    t = text.strip()
    if not t or len(t) > JOB_TITLE_MAX_LENGTH or t.endswith("."):
        return False
    return bool(JOB_TITLE_RE.search(t))


@dataclass
class _Draft:
    company: str = ""
    position: str = ""
    description: List[str] = field(default_factory=list)
    buffer: List[str] = field(default_factory=list)
    tally: float = SECTION_BONUS

    def is_started(self) -> bool:
        return bool(self.company or self.position)


@dataclass(frozen=True)
class ExperienceExtraction:
    entries: Tuple[ExperienceEntry, ...] = ()
    confidence: float = 0.0
    section_found: bool = False


S = ExperienceState
L = ExperienceLine


class ExperienceMachine(SectionMachine):
    State = ExperienceState
    Kind = ExperienceLine
    initial_state = S.OUTSIDE_SECTION
    transitions = {
        (S.OUTSIDE_SECTION, L.HEADING): (S.IN_SECTION, "enter_section"),
        (S.OUTSIDE_SECTION, L.OTHER_HEADING): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.TITLE): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.TEXT): (S.OUTSIDE_SECTION, None),
        (S.OUTSIDE_SECTION, L.BLANK): (S.OUTSIDE_SECTION, None),

        (S.IN_SECTION, L.HEADING): (S.IN_SECTION, None),
        (S.IN_SECTION, L.OTHER_HEADING): (S.OUTSIDE_SECTION, None),
        (S.IN_SECTION, L.TITLE): (S.BUILDING_ENTRY, "start_entry"),
        (S.IN_SECTION, L.TEXT): (S.BUILDING_ENTRY, "add_text"),
        (S.IN_SECTION, L.BLANK): (S.IN_SECTION, None),

        (S.BUILDING_ENTRY, L.HEADING): (S.IN_SECTION, "flush"),
        (S.BUILDING_ENTRY, L.OTHER_HEADING): (S.OUTSIDE_SECTION, "flush"),
        (S.BUILDING_ENTRY, L.TITLE): (S.BUILDING_ENTRY, "start_entry"),
        (S.BUILDING_ENTRY, L.TEXT): (S.BUILDING_ENTRY, "add_text"),
        (S.BUILDING_ENTRY, L.BLANK): (S.BUILDING_ENTRY, None),
    }

    def __init__(self) -> None:
        super().__init__()
        self.section_found = False
        self.entries: List[ExperienceEntry] = []
        self.draft = _Draft()

    def classify(self, line: str) -> ExperienceLine:
        if not line:
            return L.BLANK
        section = detect_section(line)
        if section == "experience":
            return L.HEADING
        if section is not None:
            return L.OTHER_HEADING
        if is_job_title_line(line):
            return L.TITLE
        return L.TEXT

    # --- actions ---

    def enter_section(self, line: str) -> None:
        self.section_found = True

    def start_entry(self, line: str) -> None:
        self.flush(line)
        self.draft.position = strip_bullet(line)
        self.draft.tally += FIELD_BONUS
        self.draft.buffer.append(line)

    def add_text(self, line: str) -> None:
        text = strip_bullet(line)
        if not self.draft.company:
            self.draft.company = text
            self.draft.tally += FIELD_BONUS
        elif len(text) > DESCRIPTION_MIN_LENGTH:
            self.draft.description.append(text)
            self.draft.tally += DESCRIPTION_BONUS
        self.draft.buffer.append(line)

    def flush(self, line: str = "") -> None:
        draft = self.draft
        self.draft = _Draft()
        if not draft.is_started():
            return

        dates = resolve_date_range("\n".join(draft.buffer))
        entry = ExperienceEntry(
            company=draft.company,
            position=draft.position,
            description=" ".join(draft.description),
            start_date=dates.start_date,
            end_date=dates.end_date,
            confidence=ConfidenceCalculator.entry(draft.tally, dates.confidence),
        )
        logger.debug(f"  -> Found experience entry: company='{entry.company}', position='{entry.position}'")
        self.entries.append(entry)

    def finish(self) -> None:
        if self.state is S.BUILDING_ENTRY:
            self.flush()


def extract_experience(text: str) -> ExperienceExtraction:
    """
    Segment the experience section into entries.

    Confidence is the mean entry confidence; a document without an experience
    heading (or with a heading but no entries) scores 0.
    """
    machine = ExperienceMachine()
    machine.run(split_lines(text))

    entries = tuple(machine.entries)
    confidence = ConfidenceCalculator.mean(e.confidence for e in entries)
    return ExperienceExtraction(entries=entries, confidence=confidence, section_found=machine.section_found)
