from fastapi import APIRouter

from app.core.analyzer import (
    analyze_resume,
    extract_resume_sections,
    identify_skills_gap,
    score_resume_relevance,
)
from app.core.schemas import AnalyzeRequest, AnalyzeResponse
from app.core.skills_parser import extract_skills

router = APIRouter(tags=["analyze"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze Resume Keywords",
    description="Match job keywords against resume text, score relevance (0-100) and compare the resume's skills against required skills.",
)
def analyze(payload: AnalyzeRequest):
    """
    **Returns:**
    - **matchedKeywords**: keywords present in the resume (whole-word, case-insensitive)
    - **relevanceScore**: keyword coverage plus repeat bonus, capped at 100
    - **skillsGap**: required skills split into matched and missing
    - **sections**: resume text grouped by section
    """
    resume_skills = [s.name for s in extract_skills(payload.text).entries]
    return AnalyzeResponse(
        matched_keywords=analyze_resume(payload.text, payload.keywords),
        relevance_score=score_resume_relevance(payload.text, payload.keywords),
        skills_gap=identify_skills_gap(resume_skills, payload.required_skills),
        sections=extract_resume_sections(payload.text),
    )
