from __future__ import annotations

import re

from resume_analyzer.core.config.scoring import get_scoring_int
from resume_analyzer.normalize.text import STOPWORDS, distinct_tokens
from resume_analyzer.schemas.analysis import (
    EducationLevel,
    EducationMatch,
    ExperienceMatch,
    JobMatch,
    ParsedResume,
)
from resume_analyzer.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .grading import round_half_up
from .subscores import clamp_score

_YEARS_OF_EXPERIENCE_RE = re.compile(r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:\w+\s+)?experience", re.IGNORECASE)
_YEAR_RE = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")

EDUCATION_RANK: dict[EducationLevel, int] = {
    "none": 0,
    "high_school": 1,
    "associate": 2,
    "bachelor": 3,
    "master": 4,
    "phd": 5,
}
_EDUCATION_MARKERS: tuple[tuple[EducationLevel, tuple[str, ...]], ...] = (
    ("phd", ("phd", "ph.d", "doctorate", "doctoral")),
    ("master", ("master", "mba", "m.sc", "msc", "m.s.")),
    ("bachelor", ("bachelor", "b.sc", "bsc", "b.s.", "b.a.", " bs ", " ba ", "b.tech", "btech")),
    ("associate", ("associate degree", "associate's", "associates degree")),
    ("high_school", ("high school", "secondary school", " ged ")),
)


def job_tokens(text: str) -> set[str]:
    min_length = get_scoring_int("job_match.min_token_length", 4)
    return distinct_tokens(text, min_length=min_length)


def years_of_experience(text: str) -> int:
    match = _YEARS_OF_EXPERIENCE_RE.search(text or "")
    if match:
        return int(match.group(1))
    years = [int(year) for year in _YEAR_RE.findall(text or "")]
    if len(years) >= 2:
        return max(years) - min(years)
    return 0


def required_years_of_experience(job_description: str) -> int:
    match = _YEARS_OF_EXPERIENCE_RE.search(job_description or "")
    return int(match.group(1)) if match else 0


def education_level(text: str) -> EducationLevel:
    lowered = f" {(text or '').lower()} "
    for level, markers in _EDUCATION_MARKERS:
        if any(marker in lowered for marker in markers):
            return level
    return "none"


def _experience_match(resume_text: str, job_description: str) -> ExperienceMatch:
    resume_years = years_of_experience(resume_text)
    required = required_years_of_experience(job_description)
    score = 100 if required == 0 else clamp_score(resume_years / required * 100)
    return ExperienceMatch(
        resume_years=resume_years,
        required_years=required,
        score=score,
        meets_requirement=resume_years >= required,
    )


def _education_match(resume_text: str, job_description: str) -> EducationMatch:
    resume_level = education_level(resume_text)
    required = education_level(job_description)
    resume_rank = EDUCATION_RANK[resume_level]
    required_rank = EDUCATION_RANK[required]
    score = 100 if required_rank == 0 else clamp_score(resume_rank / required_rank * 100)
    return EducationMatch(
        resume_level=resume_level,
        required_level=required,
        score=score,
        meets_requirement=resume_rank >= required_rank,
    )


def _match_recommendations(
    match_score: int,
    missing_skills: list[str],
    experience: ExperienceMatch,
    education: EducationMatch,
) -> list[str]:
    recommendations: list[str] = []
    if match_score < get_scoring_int("job_match.low_match_threshold", 70):
        recommendations.append(
            "Your resume has a low compatibility score with this job. Consider significant revisions."
        )
    if missing_skills:
        preview = ", ".join(missing_skills[:5])
        recommendations.append(
            f"You're missing {len(missing_skills)} important skills for this role: {preview}."
        )
    if match_score < get_scoring_int("job_match.low_keyword_threshold", 50):
        recommendations.append(
            "Incorporate more relevant keywords from the job description naturally throughout your resume."
        )
    if not experience.meets_requirement:
        recommendations.append(
            f"The role asks for {experience.required_years}+ years of experience; "
            "make your relevant experience timeline explicit."
        )
    if not education.meets_requirement:
        label = education.required_level.replace("_", " ")
        recommendations.append(f"The role expects a {label} level education; list your degree clearly.")
    return recommendations


def match_job(
    parsed: ParsedResume,
    job_description: str | None,
    taxonomy: TaxonomyProvider | None = None,
) -> JobMatch:
    """Compare resume tokens against a job description; total over its inputs."""
    wanted = job_tokens(job_description or "")
    if not wanted:
        return JobMatch(match_score=0)

    provider = taxonomy or get_default_taxonomy_provider()
    have = job_tokens(parsed.raw_text)
    shared = wanted & have
    match_score = clamp_score(round_half_up(100 * len(shared) / len(wanted)))

    gaps = sorted(token for token in wanted - have if token not in STOPWORDS and not token.isdigit())
    missing_skills = [token for token in gaps if provider.is_skill(token)]

    experience = _experience_match(parsed.raw_text, job_description or "")
    education = _education_match(parsed.raw_text, job_description or "")

    return JobMatch(
        match_score=match_score,
        missing_skills=missing_skills,
        keyword_gaps=gaps,
        matched_keywords=sorted(shared),
        experience=experience,
        education=education,
        recommendations=_match_recommendations(match_score, missing_skills, experience, education),
    )
