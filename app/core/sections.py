"""
Section heading detection and the finite-state machine shared by the
section-scoped extractors (experience, education, skills).

Each extractor declares an Enum of states, an Enum of line kinds, a classifier
mapping a line to a kind, and a transition table covering every
(state, kind) pair. The machine looks the pair up, runs the named action (if
any) with the line, then moves to the next state.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from app.core.patterns import HEADING_MAX_LENGTH, SECTION_HEADINGS

logger = logging.getLogger(__name__)

Transition = Tuple[Enum, Optional[str]]


def detect_section(line: str) -> Optional[str]:
    """
    Return the section a heading line introduces, or None.

    Examples:
        'Work Experience' -> 'experience'
        'TECHNICAL SKILLS:' -> 'skills'
        'Senior Engineer' -> None
    """
    t = line.strip()
    if not t or len(t) >= HEADING_MAX_LENGTH:
        return None
    for section, pattern in SECTION_HEADINGS:
        if pattern.match(t):
            return section
    return None


def heading_inline_content(line: str) -> str:
    """Text following 'Heading:' on the same line ('' when there is none)."""
    t = line.strip()
    if len(t) >= HEADING_MAX_LENGTH:
        return ""
    for _, pattern in SECTION_HEADINGS:
        m = pattern.match(t)
        if m:
            return (m.group("rest") or "").strip()
    return ""


class SectionMachine:
    """Table-driven state machine over document lines."""

    State: type = Enum
    Kind: type = Enum
    initial_state: Enum
    transitions: Dict[Tuple[Enum, Enum], Transition] = {}

    def __init__(self) -> None:
        self.state = self.initial_state

    def classify(self, line: str) -> Enum:
        raise NotImplementedError

    def feed(self, line: str) -> None:
        kind = self.classify(line)
        next_state, action = self.transitions[(self.state, kind)]
        if action is not None:
            getattr(self, action)(line)
        if next_state is not self.state:
            logger.debug(f"{type(self).__name__}: {self.state.name} -> {next_state.name} on {kind.name}: '{line[:60]}'")
        self.state = next_state

    def finish(self) -> None:
        """Called once after the last line."""

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)
        self.finish()

    @classmethod
    def missing_transitions(cls):
        """(state, kind) pairs without a transition; empty for a well-formed machine."""
        return [
            (state, kind)
            for state in cls.State
            for kind in cls.Kind
            if (state, kind) not in cls.transitions
        ]
