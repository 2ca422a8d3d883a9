from __future__ import annotations

import re

from resume_analyzer.core.errors import InvalidInput
from resume_analyzer.schemas.analysis import ParsedResume, ResumeEntities
from resume_analyzer.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

from .sections import detect_sections
from .text import normalize_line

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"(?<![\d+])(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")
_URL_RE = re.compile(r"https?://[^\s,;]+", re.IGNORECASE)
_SKILL_SPLIT_RE = re.compile(r"[,;|•·▪\n]+")
_SKILL_LABEL_RE = re.compile(r"^[A-Za-z &]{2,30}:\s*")
_MAX_SKILL_ITEM_WORDS = 4


def extract_emails(text: str) -> list[str]:
    return sorted({match.lower() for match in _EMAIL_RE.findall(text or "")})


def extract_phones(text: str) -> list[str]:
    return sorted({normalize_line(match) for match in _PHONE_RE.findall(text or "")})


def extract_urls(text: str) -> list[str]:
    return sorted({match.rstrip(".)") for match in _URL_RE.findall(text or "")})


def _skill_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![A-Za-z0-9+#]){re.escape(term)}(?![A-Za-z0-9+#])", re.IGNORECASE)


def extract_skills(text: str, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Canonical skills mentioned in the text, ordered by first appearance."""
    provider = taxonomy or get_default_taxonomy_provider()
    first_seen: dict[str, int] = {}
    for term in provider.skill_terms():
        match = _skill_pattern(term).search(text or "")
        if match is None:
            continue
        _, canonical = provider.normalize_skill(term)
        if canonical is None:
            continue
        position = match.start()
        if canonical not in first_seen or position < first_seen[canonical]:
            first_seen[canonical] = position
    return [name for name, _ in sorted(first_seen.items(), key=lambda item: (item[1], item[0]))]


def _split_slashes(chunk: str, provider: TaxonomyProvider) -> list[str]:
    if "/" not in chunk or provider.is_skill(chunk):
        return [chunk]
    return chunk.split("/")


def split_skill_items(section_text: str, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    """Split a skills section into individual items ("Languages: Python/SQL" -> python, sql).

    Slash-joined items are split unless the whole item is a known skill such as ``ci/cd``.
    """
    provider = taxonomy or get_default_taxonomy_provider()
    items: list[str] = []
    seen: set[str] = set()
    for line in (section_text or "").splitlines():
        line = _SKILL_LABEL_RE.sub("", normalize_line(line))
        for chunk in _SKILL_SPLIT_RE.split(line):
            for part in _split_slashes(normalize_line(chunk).lower(), provider):
                item = normalize_line(part.strip(" -*.:"))
                if not item or len(item.split()) > _MAX_SKILL_ITEM_WORDS:
                    continue
                if item in seen:
                    continue
                seen.add(item)
                items.append(item)
    return items


def extract_entities(raw_text: str, taxonomy: TaxonomyProvider | None = None) -> ResumeEntities:
    return ResumeEntities(
        emails=extract_emails(raw_text),
        phones=extract_phones(raw_text),
        urls=extract_urls(raw_text),
        skills=extract_skills(raw_text, taxonomy),
    )


def build_parsed_resume(raw_text: str | None, taxonomy: TaxonomyProvider | None = None) -> ParsedResume:
    if raw_text is None or not raw_text.strip():
        raise InvalidInput("Resume text is empty; nothing to analyze.")

    return ParsedResume(
        raw_text=raw_text,
        sections=detect_sections(raw_text),
        entities=extract_entities(raw_text, taxonomy),
    )
