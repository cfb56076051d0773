"""Tests for experience extraction from resumes."""

import pytest

from app.core.experience_parser import (
    ExperienceMachine,
    ExperienceState,
    extract_experience,
    is_job_title_line,
)


def test_title_then_company_yields_one_entry():
    result = extract_experience("Work Experience\nSenior Engineer\nAcme Corp\n")
    assert len(result.entries) == 1
    entry = result.entries[0]
    assert entry.position == "Senior Engineer"
    assert entry.company == "Acme Corp"
    assert entry.description == ""
    # section bonus + title + company, no dates
    assert entry.confidence == pytest.approx(0.7)
    assert result.section_found is True


def test_multiple_entries_in_document_order():
    text = """Professional Experience
Software Engineer
Globex Inc
Jan 2019 - Mar 2021
Developed internal tools in Python
Product Manager
Initech
2021 - 2023
Led roadmap planning for billing platform

Education
BS Computer Science
"""
    result = extract_experience(text)
    assert [e.position for e in result.entries] == ["Software Engineer", "Product Manager"]
    assert [e.company for e in result.entries] == ["Globex Inc", "Initech"]

    first, second = result.entries
    assert first.start_date == "2019-01-01"
    assert first.end_date == "2021-03-01"
    assert "Developed internal tools in Python" in first.description
    assert second.start_date == "2021-01-01"
    assert second.end_date == "2023-01-01"
    assert "Led roadmap planning" in second.description


def test_dated_entry_confidence_clamped():
    text = "Experience\nSenior Engineer\nAcme Corp\nBuilt scalable systems for five years.\n2018\n2023\n"
    entry = extract_experience(text).entries[0]
    assert entry.start_date == "2018-01-01"
    assert entry.end_date == "2023-01-01"
    assert entry.confidence == 1.0


def test_description_lines_add_confidence():
    text = "Experience\nData Analyst\nUmbrella Co\nBuilt weekly revenue dashboards\nAutomated the quarterly reporting\n"
    entry = extract_experience(text).entries[0]
    assert entry.description == "Built weekly revenue dashboards Automated the quarterly reporting"
    assert entry.confidence == pytest.approx(0.9)


def test_short_lines_after_company_are_not_description():
    entry = extract_experience("Experience\nDeveloper\nHooli\nRemote\n").entries[0]
    assert entry.description == ""


def test_sentence_mentioning_title_is_description():
    text = "Experience\nDeveloper\nHooli\nPaired daily with the lead engineer on releases.\n"
    result = extract_experience(text)
    assert len(result.entries) == 1
    assert "lead engineer" in result.entries[0].description


def test_bullets_stripped_from_description():
    entry = extract_experience("Experience\nDeveloper\nHooli\n• Built the billing pipeline\n").entries[0]
    assert entry.description == "Built the billing pipeline"


def test_entry_flushed_at_end_of_document():
    result = extract_experience("Experience\nDeveloper\nHooli")
    assert len(result.entries) == 1


def test_section_ends_at_next_heading():
    text = "Experience\nDeveloper\nHooli\nSkills\nPython, SQL and other tooling\n"
    entry = extract_experience(text).entries[0]
    assert entry.description == ""


def test_no_heading_means_no_entries():
    result = extract_experience("Senior Engineer\nAcme Corp\n2018 - 2023\n")
    assert result.entries == ()
    assert result.confidence == 0.0
    assert result.section_found is False


def test_heading_without_entries_scores_zero():
    result = extract_experience("Experience\n\nSkills\nPython\n")
    assert result.entries == ()
    assert result.confidence == 0.0
    assert result.section_found is True


def test_category_confidence_is_mean_of_entries():
    text = "Experience\nDeveloper\nHooli\nDesigner\nPied Piper\nShipped the compression demo app\n"
    result = extract_experience(text)
    assert [e.confidence for e in result.entries] == pytest.approx([0.7, 0.8])
    assert result.confidence == pytest.approx(0.75)


def test_job_title_line_detection():
    assert is_job_title_line("Senior Software Engineer")
    assert is_job_title_line("Marketing Manager")
    assert not is_job_title_line("Acme Corp")
    assert not is_job_title_line("Worked with the engineering managers to plan.")
    assert not is_job_title_line("")


def test_transition_table_is_complete():
    assert ExperienceMachine.missing_transitions() == []
    assert ExperienceMachine().state is ExperienceState.OUTSIDE_SECTION


def test_never_raises_on_garbage():
    result = extract_experience("Experience\n\x00\x01�\n" + "x" * 100000)
    assert len(result.entries) == 1


# ===== ENTRY LINES THAT CONTAIN HEADING KEYWORDS =====

def test_company_named_technologies_stays_in_entry():
    text = "Work Experience\nSoftware Engineer\nAcme Technologies\nBuilt distributed systems at scale\n2019\n2021\n"
    result = extract_experience(text)
    assert len(result.entries) == 1
    entry = result.entries[0]
    assert entry.position == "Software Engineer"
    assert entry.company == "Acme Technologies"
    assert entry.description == "Built distributed systems at scale"
    assert entry.start_date == "2019-01-01"
    assert entry.end_date == "2021-01-01"


def test_title_with_career_keyword():
    entry = extract_experience("Experience\nLead Career Coach\nAcme Corp\n").entries[0]
    assert entry.position == "Lead Career Coach"
    assert entry.company == "Acme Corp"


def test_title_with_education_keyword():
    text = "Experience\nDirector of Education\nLincoln School District\nRan the mentoring program for new staff\n"
    result = extract_experience(text)
    assert [(e.position, e.company) for e in result.entries] == [
        ("Director of Education", "Lincoln School District"),
    ]
