from __future__ import annotations

from typing import Iterable

from resume_analyzer.core.config.scoring import get_scoring_int, get_scoring_value
from resume_analyzer.normalize.text import contains_word, word_count
from resume_analyzer.schemas.analysis import (
    PRIORITY_RANK,
    JobMatch,
    ParsedResume,
    Suggestion,
    SuggestionPriority,
    SuggestionType,
)
from resume_analyzer.taxonomy import TaxonomyProvider

from .sections_analysis import CANONICAL_SECTIONS, GENERIC_SECTION_TIP, missing_section_text
from .subscores import collect_skills, count_quantifiers, find_action_verbs, find_tech_keywords

ACTION_VERB_TIP = "Use action verbs to start bullet points"

_MISSING_SECTION_WEIGHTS: dict[str, tuple[SuggestionPriority, int]] = {
    "experience": ("critical", 25),
    "skills": ("high", 20),
    "education": ("high", 15),
    "summary": ("medium", 10),
}

# (type, priority, ats_impact, text) per present section
_SECTION_SUGGESTIONS: dict[str, tuple[tuple[SuggestionType, SuggestionPriority, int, str], ...]] = {
    "experience": (
        ("content", "medium", 8, ACTION_VERB_TIP),
        ("achievement", "high", 12, "Quantify achievements with numbers and percentages"),
        ("content", "medium", 6, "Focus on results and impact rather than just responsibilities"),
    ),
    "skills": (
        ("keyword", "medium", 8, "Include both technical and soft skills"),
        ("format", "low", 5, "Organize skills by category (e.g., Programming Languages, Tools)"),
        ("keyword", "medium", 10, "Match skills to job requirements"),
    ),
    "summary": (
        ("content", "low", 3, "Keep it concise (2-3 sentences)"),
        ("content", "medium", 5, "Highlight your unique value proposition"),
        ("keyword", "medium", 6, "Include years of experience and key specializations"),
    ),
}


def _section_suggestions(parsed: ParsedResume) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    for name in CANONICAL_SECTIONS:
        if parsed.has_section(name):
            continue
        priority, impact = _MISSING_SECTION_WEIGHTS[name]
        suggestions.append(
            Suggestion(
                type="structure",
                priority=priority,
                title=f"Missing {name} section",
                text=missing_section_text(name),
                ats_impact=impact,
                section=name,
            )
        )

    for name, content in parsed.sections.items():
        if name == "header" or not content.strip():
            continue
        templates = _SECTION_SUGGESTIONS.get(name, (("content", "low", 2, GENERIC_SECTION_TIP),))
        for suggestion_type, priority, impact, text in templates:
            suggestions.append(
                Suggestion(
                    type=suggestion_type,
                    priority=priority,
                    title=f"Improve {name} section",
                    text=text,
                    ats_impact=impact,
                    section=name,
                )
            )
    return suggestions


def keyword_density(parsed: ParsedResume, taxonomy: TaxonomyProvider | None = None) -> float:
    words = word_count(parsed.raw_text)
    if words == 0:
        return 0.0
    hits = len(collect_skills(parsed, taxonomy)) + len(find_tech_keywords(parsed.raw_text))
    return hits / words * 100


def _document_suggestions(parsed: ParsedResume, taxonomy: TaxonomyProvider | None) -> list[Suggestion]:
    suggestions: list[Suggestion] = []

    missing_contact = []
    if not parsed.entities.emails:
        missing_contact.append("email address")
    if not parsed.entities.phones:
        missing_contact.append("phone number")
    if missing_contact:
        suggestions.append(
            Suggestion(
                type="ats_compatibility",
                priority="critical",
                title="Missing contact information",
                text=f"Add your {' and '.join(missing_contact)} so recruiters and ATS parsers can reach you.",
                ats_impact=25,
                section="contact",
            )
        )

    if len(parsed.raw_text.strip()) < get_scoring_int("aggregate.short_resume_chars", 500):
        suggestions.append(
            Suggestion(
                type="format",
                priority="medium",
                title="Resume too short",
                text="Your resume should typically be 1-2 pages long with substantial content.",
                ats_impact=15,
            )
        )

    min_density = float(get_scoring_value("aggregate.min_keyword_density", 2.0))
    if keyword_density(parsed, taxonomy) < min_density:
        suggestions.append(
            Suggestion(
                type="keyword",
                priority="high",
                title="Low keyword density",
                text="Add more industry-relevant keywords to improve ATS matching.",
                ats_impact=20,
            )
        )

    if count_quantifiers(parsed.raw_text) == 0:
        suggestions.append(
            Suggestion(
                type="achievement",
                priority="high",
                title="No quantified achievements",
                text="Add numbers and metrics to your accomplishments (e.g., 'Improved performance by 25%').",
                ats_impact=15,
            )
        )

    if not find_action_verbs(parsed.raw_text):
        suggestions.append(
            Suggestion(
                type="content",
                priority="medium",
                title="Weak bullet points",
                text=ACTION_VERB_TIP,
                ats_impact=10,
            )
        )
    return suggestions


def _job_suggestions(job_match: JobMatch) -> list[Suggestion]:
    limit = get_scoring_int("job_match.max_keyword_suggestions", 5)
    ordered = list(job_match.missing_skills)
    ordered.extend(keyword for keyword in job_match.keyword_gaps if keyword not in job_match.missing_skills)

    suggestions: list[Suggestion] = []
    for keyword in ordered[:limit]:
        suggestions.append(
            Suggestion(
                type="keyword",
                priority="high",
                title=f"Add keyword: {keyword}",
                text=f"Add '{keyword}' from the job description where it reflects your experience.",
                ats_impact=10,
                suggested_text=f"Hands-on experience with {keyword}.",
            )
        )
    return suggestions


def role_keywords(target_role: str | None) -> list[str]:
    """Configured keywords for the role, followed by the keywords every role shares."""
    table = get_scoring_value("role_keywords.roles", {}) or {}
    role = (target_role or "").strip().lower()
    if not role:
        return []
    keywords = [*table.get(role, []), *table.get("general", [])]
    return list(dict.fromkeys(str(keyword).lower() for keyword in keywords))


def _role_suggestions(parsed: ParsedResume, target_role: str) -> list[Suggestion]:
    limit = get_scoring_int("role_keywords.max_suggestions", 10)
    important = {str(keyword).lower() for keyword in get_scoring_value("role_keywords.important", []) or []}
    missing = [keyword for keyword in role_keywords(target_role) if not contains_word(parsed.raw_text, keyword)]

    suggestions: list[Suggestion] = []
    for keyword in missing[:limit]:
        importance = 90 if keyword in important else 70
        suggestions.append(
            Suggestion(
                type="keyword",
                priority="medium",
                title=f"Add role keyword: {keyword}",
                text=f"Consider incorporating '{keyword}' in your {target_role.strip()} experience or skills section.",
                ats_impact=importance // 10,
            )
        )
    return suggestions


def rank_suggestions(suggestions: Iterable[Suggestion]) -> list[Suggestion]:
    """Order by priority, then by descending ATS impact; repeated text keeps its first occurrence."""
    ordered = sorted(suggestions, key=lambda item: (PRIORITY_RANK[item.priority], -item.ats_impact))
    ranked: list[Suggestion] = []
    seen: set[str] = set()
    for suggestion in ordered:
        key = suggestion.text.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        ranked.append(suggestion)
    return ranked


def build_suggestions(
    parsed: ParsedResume,
    *,
    job_match: JobMatch | None = None,
    taxonomy: TaxonomyProvider | None = None,
    target_role: str | None = None,
) -> list[Suggestion]:
    suggestions = _section_suggestions(parsed)
    suggestions.extend(_document_suggestions(parsed, taxonomy))
    if job_match is not None:
        suggestions.extend(_job_suggestions(job_match))
    if target_role and target_role.strip():
        suggestions.extend(_role_suggestions(parsed, target_role))
    return rank_suggestions(suggestions)


def recommendations_from(suggestions: Iterable[Suggestion]) -> list[str]:
    return [suggestion.text for suggestion in rank_suggestions(suggestions)]
