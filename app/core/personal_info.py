"""
Personal information extraction: name, email, phone, address.
"""

import logging
from typing import List, Optional, Tuple

from app.core.confidence_calculator import ConfidenceCalculator
from app.core.patterns import ADDRESS_RE, EMAIL_RE, PHONE_RE
from app.core.schemas import PersonalInfo
from app.core.sections import detect_section
from app.core.text_normalization import non_blank_lines, scrub_text

logger = logging.getLogger(__name__)

NAME_WINDOW = 3
ADDRESS_MAX_LINE_LENGTH = 200


def _name_confidence(line: str) -> float:
    """0 unless the line looks like a name: 2-4 capitalized words, no digits."""
    words = line.split()
    if not 2 <= len(words) <= 4:
        return 0.0
    if not all(w[0].isupper() for w in words):
        return 0.0
    if any(c.isdigit() for c in line):
        return 0.0
    return ConfidenceCalculator.name(len(words))


def extract_name(lines: List[str]) -> Tuple[Optional[str], float]:
    """
    Best name candidate among the first three non-blank lines.

    Section headings ("Work Experience") are skipped even though they are
    capitalized. Ties keep the earliest line.
    """
    best: Optional[str] = None
    best_conf = 0.0
    for line in lines[:NAME_WINDOW]:
        if detect_section(line):
            continue
        conf = _name_confidence(line)
        if conf > best_conf:
            best, best_conf = line, conf
    return best, best_conf


def _first_match(pattern, text: str) -> Optional[str]:
    m = pattern.search(text)
    return m.group(0).strip() if m else None


def extract_address(lines: List[str]) -> Optional[str]:
    for line in lines:
        if len(line) > ADDRESS_MAX_LINE_LENGTH:
            continue
        m = ADDRESS_RE.search(line)
        if m:
            return m.group(0).strip()
    return None


def extract_personal_info(text: str) -> PersonalInfo:
    """
    Extract contact details from resume text.

    Name comes from the document head; email and phone are the first matches
    anywhere in the document.
    """
    scrubbed = scrub_text(text)
    lines = non_blank_lines(scrubbed)

    name, name_conf = extract_name(lines)
    email = _first_match(EMAIL_RE, scrubbed)
    phone = _first_match(PHONE_RE, scrubbed)
    address = extract_address(lines)

    confidence = ConfidenceCalculator.personal_info(
        name_conf,
        has_email=email is not None,
        has_phone=phone is not None,
        has_address=address is not None,
    )
    logger.debug(f"Personal info: name={name!r} ({name_conf}), email={email!r}, phone={phone!r}, address={address!r}")

    return PersonalInfo(
        name=name,
        email=email,
        phone=phone,
        address=address,
        confidence=confidence,
    )
