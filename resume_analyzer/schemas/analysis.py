from __future__ import annotations

from typing import Any, Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SubScoreKind = Literal["ats", "content", "format", "keyword"]
SectionQuality = Literal["excellent", "good", "basic", "needs_improvement", "missing"]
SuggestionType = Literal[
    "keyword",
    "format",
    "content",
    "structure",
    "achievement",
    "grammar",
    "ats_compatibility",
]
SuggestionPriority = Literal["critical", "high", "medium", "low"]
SuggestionStatus = Literal["pending", "applied", "dismissed", "expired"]
EducationLevel = Literal["none", "high_school", "associate", "bachelor", "master", "phd"]

SUB_SCORE_KINDS: tuple[SubScoreKind, ...] = ("ats", "content", "format", "keyword")
PRIORITY_RANK: dict[str, int] = {"critical": 0, "high": 1, "medium": 2, "low": 3}


def unique_sorted(values: Iterable[str]) -> list[str]:
    """Set semantics with a stable, serializable order."""
    return sorted({str(value).strip() for value in values if str(value).strip()})


def unique_ordered(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for value in values:
        text = str(value).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        output.append(text)
    return output


class ResumeEntities(BaseModel):
    model_config = ConfigDict(frozen=True)

    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)

    @field_validator("emails", "phones", "urls")
    @classmethod
    def _as_set(cls, value: list[str]) -> list[str]:
        return unique_sorted(value)

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, value: list[str]) -> list[str]:
        return unique_ordered(value)


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    sections: dict[str, str] = Field(default_factory=dict)
    entities: ResumeEntities = Field(default_factory=ResumeEntities)

    def section(self, name: str) -> str:
        return self.sections.get(name, "")

    def has_section(self, name: str) -> bool:
        return bool(self.section(name).strip())


class SubScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SubScoreKind
    value: int = Field(ge=0, le=100)


class SectionAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    present: bool
    quality: SectionQuality
    ats_score: int = Field(default=0, ge=0, le=100)
    recommendations: list[str] = Field(default_factory=list)


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SuggestionType
    priority: SuggestionPriority
    title: str
    text: str
    ats_impact: int = Field(default=0, ge=0)
    section: str | None = None
    original_text: str | None = None
    suggested_text: str | None = None
    status: SuggestionStatus = "pending"

    @property
    def priority_rank(self) -> int:
        return PRIORITY_RANK[self.priority]


class ExperienceMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume_years: int = Field(ge=0)
    required_years: int = Field(ge=0)
    score: int = Field(ge=0, le=100)
    meets_requirement: bool


class EducationMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume_level: EducationLevel
    required_level: EducationLevel
    score: int = Field(ge=0, le=100)
    meets_requirement: bool


class JobMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_score: int = Field(ge=0, le=100)
    missing_skills: list[str] = Field(default_factory=list)
    keyword_gaps: list[str] = Field(default_factory=list)
    matched_keywords: list[str] = Field(default_factory=list)
    experience: ExperienceMatch | None = None
    education: EducationMatch | None = None
    recommendations: list[str] = Field(default_factory=list)

    @field_validator("missing_skills", "keyword_gaps", "matched_keywords")
    @classmethod
    def _as_set(cls, value: list[str]) -> list[str]:
        return unique_sorted(value)


class DraftAnalysis(BaseModel):
    """Optional scores and text returned by an external model; any field may be absent."""

    overall_score: int | None = None
    ats_score: int | None = None
    content_score: int | None = None
    format_score: int | None = None
    keyword_score: int | None = None
    recommendations: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    extracted_skills: list[str] = Field(default_factory=list)

    def score_for(self, kind: SubScoreKind) -> int | None:
        return getattr(self, f"{kind}_score")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100)
    sub_scores: list[SubScore]
    grade: str
    recommendations: list[str] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    extracted_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    sections_analysis: dict[str, SectionAnalysis] = Field(default_factory=dict)
    job_match: JobMatch | None = None
    degraded: bool = False

    @field_validator("sub_scores")
    @classmethod
    def _validate_sub_scores(cls, value: list[SubScore]) -> list[SubScore]:
        kinds = sorted(score.kind for score in value)
        if kinds != sorted(SUB_SCORE_KINDS):
            raise ValueError("sub_scores must contain exactly one ats, content, format and keyword score")
        return value

    @field_validator("recommendations")
    @classmethod
    def _dedupe_recommendations(cls, value: list[str]) -> list[str]:
        return unique_ordered(value)

    @field_validator("extracted_skills", "missing_skills", "keywords")
    @classmethod
    def _as_set(cls, value: list[str]) -> list[str]:
        return unique_sorted(value)

    def score(self, kind: SubScoreKind) -> int:
        for sub_score in self.sub_scores:
            if sub_score.kind == kind:
                return sub_score.value
        raise KeyError(kind)

    @property
    def ats(self) -> int:
        return self.score("ats")

    @property
    def content(self) -> int:
        return self.score("content")

    @property
    def format(self) -> int:
        return self.score("format")

    @property
    def keyword(self) -> int:
        return self.score("keyword")

    def all_scores(self) -> dict[str, int]:
        return {
            "overall": self.overall,
            "ats": self.ats,
            "content": self.content,
            "format": self.format,
            "keyword": self.keyword,
        }

    def top_recommendations(self, limit: int = 5) -> list[str]:
        return self.recommendations[: max(0, limit)]

    def to_flat_dict(self, *, include_details: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {
            **self.all_scores(),
            "grade": self.grade,
            "recommendations": list(self.recommendations),
            "extracted_skills": list(self.extracted_skills),
            "missing_skills": list(self.missing_skills),
            "keywords": list(self.keywords),
            "sections_analysis": {
                name: analysis.model_dump(mode="json")
                for name, analysis in self.sections_analysis.items()
            },
        }
        if include_details:
            payload["suggestions"] = [suggestion.model_dump(mode="json") for suggestion in self.suggestions]
            payload["job_match"] = self.job_match.model_dump(mode="json") if self.job_match else None
            payload["degraded"] = self.degraded
        return payload
