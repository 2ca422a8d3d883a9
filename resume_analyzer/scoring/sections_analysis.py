from __future__ import annotations

import re

from resume_analyzer.normalize.entities import split_skill_items
from resume_analyzer.normalize.sections import HEADER_SECTION
from resume_analyzer.normalize.text import contains_word, distinct_tokens, word_count
from resume_analyzer.schemas.analysis import SectionAnalysis, SectionQuality

from .subscores import clamp_score

CANONICAL_SECTIONS = ("summary", "experience", "education", "skills")

_SECTION_TIPS: dict[str, tuple[str, ...]] = {
    "experience": (
        "Use action verbs to start bullet points",
        "Quantify achievements with numbers and percentages",
        "Focus on results and impact rather than just responsibilities",
    ),
    "skills": (
        "Include both technical and soft skills",
        "Organize skills by category (e.g., Programming Languages, Tools)",
        "Match skills to job requirements",
    ),
    "summary": (
        "Keep it concise (2-3 sentences)",
        "Highlight your unique value proposition",
        "Include years of experience and key specializations",
    ),
}
GENERIC_SECTION_TIP = "Ensure this section is clear and relevant to your target role"


def missing_section_text(name: str) -> str:
    article = "an" if name[:1] in "aeiou" else "a"
    return f"Add {article} {name} section to improve your resume."


def assess_section_quality(name: str, content: str) -> SectionQuality:
    text = (content or "").strip()
    if not text:
        return "missing"

    length = len(text)
    if name == "experience":
        if length > 300:
            return "excellent"
        return "good" if length > 150 else "needs_improvement"
    if name == "education":
        return "good" if length > 100 else "basic"
    if name == "skills":
        return "excellent" if len(split_skill_items(text)) > 10 else "good"
    if name == "summary":
        return "good" if 100 < length < 300 else "needs_improvement"
    return "good" if length > 50 else "basic"


def section_recommendations(name: str, content: str) -> list[str]:
    if not (content or "").strip():
        return [missing_section_text(name)]
    return list(_SECTION_TIPS.get(name, (GENERIC_SECTION_TIP,)))


_CONTACT_PHONE_RE = re.compile(r"\d{3}[-.]?\d{3}[-.]?\d{4}")
_CONTACT_LOCATION_RE = re.compile(r"\b[A-Z][a-z]+,?\s+[A-Z]{2}\b")
_SUMMARY_QUANTIFIER_RE = re.compile(r"\d+%|\d+\+|\$\d+")
_EXPERIENCE_QUANTIFIER_RE = re.compile(r"\d+%|\d+\+|\$\d+|\d+x")
_DEGREE_RE = re.compile(r"bachelor|master|phd|doctorate|associate", re.IGNORECASE)
_GPA_RE = re.compile(r"gpa\s*[:\-]?\s*[3-4]\.?\d*", re.IGNORECASE)

SUMMARY_VERBS = ("achieved", "improved", "increased", "developed", "managed", "led", "created")
EXPERIENCE_VERBS = (*SUMMARY_VERBS, "implemented", "optimized")
SKILLS_SECTION_TERMS = ("python", "java", "javascript", "sql", "aws", "azure", "docker", "kubernetes")


def _content_keywords(text: str) -> set[str]:
    return {token for token in distinct_tokens(text, min_length=4) if token.isalpha()}


def _contact_score(text: str) -> int:
    lowered = text.lower()
    score = 0
    if "@" in text:
        score += 25
    if _CONTACT_PHONE_RE.search(text):
        score += 25
    if "linkedin" in lowered:
        score += 20
    if _CONTACT_LOCATION_RE.search(text):
        score += 20
    if "github" in lowered or "portfolio" in lowered:
        score += 10
    return score


def _summary_score(text: str) -> int:
    words = word_count(text)
    if 50 <= words <= 150:
        score = 40
    elif 30 <= words <= 200:
        score = 25
    else:
        score = 10
    score += min(30, len(_content_keywords(text)) * 5)
    if _SUMMARY_QUANTIFIER_RE.search(text):
        score += 20
    score += 2 * sum(1 for verb in SUMMARY_VERBS if contains_word(text, verb))
    return score


def _experience_score(text: str) -> int:
    score = min(40, len(_EXPERIENCE_QUANTIFIER_RE.findall(text)) * 10)
    score += min(30, sum(1 for verb in EXPERIENCE_VERBS if contains_word(text, verb)) * 5)
    score += min(30, len(_content_keywords(text)) * 3)
    return score


def _education_score(text: str) -> int:
    lowered = text.lower()
    score = 50
    if _DEGREE_RE.search(text):
        score += 25
    if _GPA_RE.search(text):
        score += 15
    if "honor" in lowered or "dean" in lowered:
        score += 10
    return score


def _skills_score(text: str) -> int:
    count = sum(1 for item in split_skill_items(text) if len(item) > 2)
    if 8 <= count <= 15:
        score = 50
    elif 5 <= count <= 20:
        score = 35
    else:
        score = 20
    score += 5 * sum(1 for term in SKILLS_SECTION_TERMS if contains_word(text, term))
    return score


def _generic_score(text: str) -> int:
    words = word_count(text)
    score = 50
    if words > 20:
        score += 25
    if words > 50:
        score += 15
    score += min(10, len(_content_keywords(text)) * 2)
    return score


_SECTION_SCORERS = {
    "contact": _contact_score,
    "summary": _summary_score,
    "experience": _experience_score,
    "education": _education_score,
    "skills": _skills_score,
}


def section_ats_score(name: str, content: str) -> int:
    """ATS readiness of one section in [0, 100]; an empty section scores 0."""
    text = (content or "").strip()
    if not text:
        return 0
    scorer = _SECTION_SCORERS.get(name, _generic_score)
    return clamp_score(scorer(text))


def build_sections_analysis(sections: dict[str, str]) -> dict[str, SectionAnalysis]:
    """Per-section verdicts for the canonical sections and every other detected section."""
    names = list(CANONICAL_SECTIONS)
    names.extend(name for name in sections if name != HEADER_SECTION and name not in names)

    analysis: dict[str, SectionAnalysis] = {}
    for name in names:
        content = sections.get(name, "")
        analysis[name] = SectionAnalysis(
            present=bool(content.strip()),
            quality=assess_section_quality(name, content),
            ats_score=section_ats_score(name, content),
            recommendations=section_recommendations(name, content),
        )
    return analysis
