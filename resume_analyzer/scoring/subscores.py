from __future__ import annotations

import re

from resume_analyzer.core.config.scoring import get_scoring_int
from resume_analyzer.normalize.entities import split_skill_items
from resume_analyzer.normalize.sections import detected_section_names
from resume_analyzer.normalize.text import contains_word, word_count
from resume_analyzer.schemas.analysis import ParsedResume, SubScore, SubScoreKind
from resume_analyzer.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

ATS_SECTIONS = ("experience", "education", "skills")
ACTION_VERBS = ("managed", "led", "developed", "created", "implemented", "improved", "increased", "achieved")
TECH_KEYWORDS = ("api", "database", "framework", "agile", "scrum", "cloud", "devops")

_YEAR_RE = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")
_QUANTIFIER_RE = re.compile(
    r"\b\d+(?:\.\d+)?%|\$\s?\d[\d,]*(?:\.\d+)?|\b\d+(?:\.\d+)?\s*(?:million|billion)\b|\b\d+(?:\.\d+)?x\b",
    re.IGNORECASE,
)


def clamp_score(value: float | int) -> int:
    return max(0, min(100, int(value)))


def count_year_tokens(text: str) -> int:
    return len(set(_YEAR_RE.findall(text or "")))


def count_quantifiers(text: str) -> int:
    return len(_QUANTIFIER_RE.findall(text or ""))


def find_action_verbs(text: str) -> list[str]:
    return [verb for verb in ACTION_VERBS if contains_word(text, verb)]


def find_tech_keywords(text: str) -> list[str]:
    lowered = (text or "").lower()
    return [keyword for keyword in TECH_KEYWORDS if keyword in lowered]


def collect_skills(parsed: ParsedResume, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Distinct skills from entity extraction plus the items listed in the skills section."""
    provider = taxonomy or get_default_taxonomy_provider()
    skills: list[str] = []
    seen: set[str] = set()
    for raw in [*parsed.entities.skills, *split_skill_items(parsed.section("skills"), provider)]:
        normalized, canonical = provider.normalize_skill(raw)
        key = canonical or normalized
        if key and key not in seen:
            seen.add(key)
            skills.append(key)
    return skills


def score_ats(parsed: ParsedResume) -> int:
    score = get_scoring_int("ats.base", 60)
    section_bonus = get_scoring_int("ats.section_bonus", 8)
    for name in ATS_SECTIONS:
        if parsed.has_section(name):
            score += section_bonus

    if parsed.entities.emails:
        score += get_scoring_int("ats.email_bonus", 5)
    if parsed.entities.phones:
        score += get_scoring_int("ats.phone_bonus", 5)

    if count_year_tokens(parsed.raw_text) >= get_scoring_int("ats.timeline_min_years", 2):
        score += get_scoring_int("ats.timeline_bonus", 5)

    return clamp_score(score)


def score_content(parsed: ParsedResume) -> int:
    score = get_scoring_int("content.base", 50)
    words = word_count(parsed.raw_text)

    optimal_min = get_scoring_int("content.optimal_words_min", 300)
    optimal_max = get_scoring_int("content.optimal_words_max", 800)
    if optimal_min <= words <= optimal_max:
        score += get_scoring_int("content.optimal_words_bonus", 20)
    elif words >= get_scoring_int("content.minimum_words", 200):
        score += get_scoring_int("content.minimum_words_bonus", 10)

    quantified = count_quantifiers(parsed.raw_text) * get_scoring_int("content.quantifier_bonus", 3)
    score += min(get_scoring_int("content.quantifier_cap", 15), quantified)

    score += len(find_action_verbs(parsed.raw_text)) * get_scoring_int("content.action_verb_bonus", 2)

    return clamp_score(score)


def score_format(parsed: ParsedResume) -> int:
    score = get_scoring_int("format.base", 70)
    section_count = len(detected_section_names(parsed.sections))

    if section_count >= get_scoring_int("format.sections_tier_one", 4):
        score += get_scoring_int("format.sections_tier_one_bonus", 10)
    if section_count >= get_scoring_int("format.sections_tier_two", 6):
        score += get_scoring_int("format.sections_tier_two_bonus", 5)

    if parsed.entities.emails and parsed.entities.phones:
        score += get_scoring_int("format.contact_bonus", 10)

    if parsed.has_section("experience") and parsed.has_section("education"):
        score += get_scoring_int("format.structure_bonus", 5)

    return clamp_score(score)


def score_keyword(parsed: ParsedResume, taxonomy: TaxonomyProvider | None = None) -> int:
    score = get_scoring_int("keyword.base", 60)

    skill_points = len(collect_skills(parsed, taxonomy)) * get_scoring_int("keyword.skill_bonus", 2)
    score += min(get_scoring_int("keyword.skill_cap", 30), skill_points)

    score += len(find_tech_keywords(parsed.raw_text)) * get_scoring_int("keyword.tech_keyword_bonus", 2)

    return clamp_score(score)


def compute_sub_scores(parsed: ParsedResume, taxonomy: TaxonomyProvider | None = None) -> list[SubScore]:
    values: dict[SubScoreKind, int] = {
        "ats": score_ats(parsed),
        "content": score_content(parsed),
        "format": score_format(parsed),
        "keyword": score_keyword(parsed, taxonomy),
    }
    return [SubScore(kind=kind, value=value) for kind, value in values.items()]
