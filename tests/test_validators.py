"""Tests for entity validators."""

import pytest

from app.core.schemas import EducationEntry, ExperienceEntry, PersonalInfo, SkillEntry
from app.core.validators import (
    validate_education,
    validate_experience,
    validate_personal_info,
    validate_skills,
)


# ===== PERSONAL INFO =====

def test_personal_info_all_valid():
    result = validate_personal_info(
        PersonalInfo(name="Jane A Smith", email="jane@x.com", phone="555-123-4567")
    )
    assert result.is_valid is True
    assert result.confidence == 1.0
    assert result.issues == ()


def test_personal_info_malformed_email():
    result = validate_personal_info(PersonalInfo(email="jane@@x", phone="(555) 123-4567"))
    assert result.is_valid is True
    assert result.confidence == pytest.approx(0.5)
    assert result.issues == ("Invalid email format",)


def test_personal_info_bad_phone_and_name():
    result = validate_personal_info(PersonalInfo(name="J0hn Smith", phone="12-34"))
    assert result.is_valid is False
    assert result.confidence == 0.0
    assert len(result.issues) == 2
    assert "Invalid phone format" in result.issues


def test_personal_info_short_name():
    result = validate_personal_info(PersonalInfo(name="Al"))
    assert result.is_valid is False
    assert len(result.issues) == 1


def test_personal_info_valid_when_any_field_passes():
    result = validate_personal_info(
        PersonalInfo(name="Mary O'Neil Smith", email="mary@x.com", phone="555-123-4567")
    )
    assert result.is_valid is True
    assert result.confidence == pytest.approx(2 / 3)
    assert result.issues == ("Name appears incomplete or contains invalid characters",)


def test_personal_info_absent_fields_not_failures():
    result = validate_personal_info(PersonalInfo(email="jane@x.com"))
    assert result.is_valid is True
    assert result.confidence == 1.0


def test_personal_info_empty():
    result = validate_personal_info(PersonalInfo())
    assert result.is_valid is False
    assert result.confidence == 0.0
    assert result.issues == ()


# ===== EXPERIENCE =====

def _experience(**kwargs):
    base = dict(
        company="Acme Corp",
        position="Senior Engineer",
        description="Built scalable systems for five years.",
    )
    base.update(kwargs)
    return ExperienceEntry(**base)


def test_experience_valid_with_ordered_dates():
    result = validate_experience(_experience(start_date="2018-01-01", end_date="2023-01-01"))
    assert result.is_valid is True
    assert result.confidence == 1.0


def test_experience_without_dates_excludes_date_criterion():
    result = validate_experience(_experience())
    assert result.is_valid is True
    assert result.confidence == 1.0


def test_experience_reversed_dates():
    result = validate_experience(_experience(start_date="2023-01-01", end_date="2018-01-01"))
    assert result.is_valid is False
    assert result.issues == ("Start date is after end date",)
    assert result.confidence == pytest.approx(0.75)


def test_experience_single_date_counts_half():
    result = validate_experience(_experience(start_date="2020-03-01"))
    assert result.is_valid is True
    assert result.confidence == pytest.approx(3.5 / 4)


def test_experience_missing_fields():
    result = validate_experience(ExperienceEntry(position="Senior Engineer"))
    assert result.is_valid is False
    assert "Company name is missing or too short" in result.issues
    assert "Job description is too short or missing" in result.issues
    assert result.confidence == pytest.approx(1 / 3)


def test_experience_numeric_company_rejected():
    result = validate_experience(_experience(company="12345", position="99"))
    assert result.issues[:2] == (
        "Company name is missing or too short",
        "Position title is missing or too short",
    )


# ===== EDUCATION =====

def test_education_valid():
    entry = EducationEntry(institution="State University", degree="Bachelor of Science", graduation_date="2017-01-01")
    result = validate_education(entry, current_year=2024)
    assert result.is_valid is True
    assert result.confidence == 1.0


def test_education_graduation_year_bounds():
    def check(year):
        entry = EducationEntry(institution="State University", degree="BSc", graduation_date=f"{year}-01-01")
        return validate_education(entry, current_year=2024)

    assert check(2034).is_valid is True
    assert check(2035).is_valid is False
    assert check(2035).issues == ("Graduation date is not a plausible year",)
    assert check(1900).is_valid is True


def test_education_missing_institution():
    result = validate_education(EducationEntry(degree="MBA"), current_year=2024)
    assert result.issues == ("Institution name is missing or too short",)
    assert result.confidence == pytest.approx(0.5)


def test_education_without_date_excludes_date_criterion():
    result = validate_education(EducationEntry(institution="Yale University", degree="B.A."), current_year=2024)
    assert result.confidence == 1.0


# ===== SKILLS =====

def test_no_skills_detected():
    result = validate_skills([])
    assert result.issues == ("No skills detected",)
    assert result.is_valid is False
    assert result.confidence == 0.0


def test_skills_present_never_report_none_detected():
    result = validate_skills([SkillEntry(name="Python", category="Programming Languages", confidence=0.8)])
    assert "No skills detected" not in result.issues
    assert result.is_valid is True
    assert result.confidence == pytest.approx(0.9)


def test_too_many_skills():
    skills = [SkillEntry(name=f"skill{i}", category="Soft Skills", confidence=0.8) for i in range(51)]
    result = validate_skills(skills)
    assert result.issues == ("Unusually high number of skills detected",)


def test_uncategorized_skills():
    result = validate_skills([SkillEntry(name="Photoshop", confidence=0.4)])
    assert result.issues == ("No skills could be categorized",)
    assert result.confidence == pytest.approx(0.2)
