from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, List, Literal, Optional, Tuple


ParseQuality = Literal["high", "medium", "low"]


class _Frozen(BaseModel):
    """Immutable, serialized with camelCase keys (personalInfo, startDate, ...)."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ValidationResult(_Frozen):
    is_valid: bool
    confidence: float = Field(..., ge=0.0, le=1.0)
    issues: Tuple[str, ...] = Field(default_factory=tuple, description="Human-readable problems, empty when none")


class PersonalInfo(_Frozen):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class ExperienceEntry(_Frozen):
    """Work experience entry, in document order."""
    company: str = ""
    position: str = ""
    description: str = ""
    start_date: Optional[str] = None  # ISO-8601 YYYY-MM-DD
    end_date: Optional[str] = None  # ISO-8601 YYYY-MM-DD
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    validation: Optional[ValidationResult] = None


class EducationEntry(_Frozen):
    """Education entry in candidate profile."""
    institution: str = ""  # University, College, Institute name
    degree: str = ""  # Bachelor of Science, M.S., etc.
    graduation_date: Optional[str] = None  # ISO-8601 YYYY-MM-DD
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    validation: Optional[ValidationResult] = None


class SkillEntry(_Frozen):
    name: str
    category: Optional[str] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class ValidationBundle(_Frozen):
    personal_info: ValidationResult
    experience: Tuple[ValidationResult, ...] = ()
    education: Tuple[ValidationResult, ...] = ()
    skills: ValidationResult


class CategoryConfidence(_Frozen):
    """Extractor-level confidence per category."""
    personal_info: float = Field(default=0.0, ge=0.0, le=1.0)
    experience: float = Field(default=0.0, ge=0.0, le=1.0)
    education: float = Field(default=0.0, ge=0.0, le=1.0)
    skills: float = Field(default=0.0, ge=0.0, le=1.0)


class ParsedResume(_Frozen):
    personal_info: PersonalInfo
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillEntry, ...] = ()
    summary: Optional[str] = None
    raw_text: str
    validation: ValidationBundle
    category_confidence: CategoryConfidence
    confidence: float = Field(..., ge=0.0, le=1.0, description="Mean of the four category confidences")
    issues: Tuple[str, ...] = Field(default_factory=tuple, description="All validation issues in category order")
    parse_quality: ParseQuality


# ===== HTTP payloads =====

class ParseTextRequest(BaseModel):
    text: str = Field(..., description="Resume text, already decoded from PDF/DOCX")


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    keywords: List[str] = Field(default_factory=list)
    required_skills: List[str] = Field(default_factory=list)


class SkillsGap(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    match_rate: float = 0.0  # 0 to 100


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matched_keywords: List[str] = Field(default_factory=list)
    relevance_score: float = Field(default=0.0, ge=0.0, le=100.0)
    skills_gap: SkillsGap
    sections: Dict[str, str] = Field(default_factory=dict)
