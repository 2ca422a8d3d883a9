from __future__ import annotations

import re

from resume_analyzer.core.config.scoring import get_scoring_int

from .text import non_empty_lines

HEADER_SECTION = "header"

HEADER_VOCABULARY = (
    "experience",
    "education",
    "skills",
    "summary",
    "objective",
    "contact",
    "certifications",
    "projects",
    "achievements",
)

# objective and summary describe the same block on a resume
_SECTION_ALIASES = {"objective": "summary"}
# words allowed next to a vocabulary word, e.g. "Work Experience", "Technical Skills"
_HEADER_QUALIFIERS = frozenset(
    {
        "and",
        "academic",
        "additional",
        "career",
        "core",
        "details",
        "info",
        "information",
        "key",
        "licenses",
        "notable",
        "personal",
        "professional",
        "relevant",
        "selected",
        "technical",
        "work",
    }
)
_HEADER_DECORATION_RE = re.compile(r"^[\s#*•=_\-–—|]+|[\s#*•=_\-–—|]+$")
_HEADER_WORD_RE = re.compile(r"[a-z]+")


def section_key(word: str) -> str:
    return _SECTION_ALIASES.get(word, word)


def match_section_header(line: str) -> tuple[str | None, str]:
    """Return (section name, trailing content) when the line reads as a section header."""
    head, separator, rest = line.partition(":")
    candidate = _HEADER_DECORATION_RE.sub("", head).strip()
    if not candidate:
        return None, ""

    max_length = get_scoring_int("sections.max_header_length", 32)
    max_words = get_scoring_int("sections.max_header_words", 3)
    if len(candidate) > max_length or len(candidate.split()) > max_words:
        return None, ""

    words = _HEADER_WORD_RE.findall(candidate.lower())
    matched = [word for word in words if word in HEADER_VOCABULARY]
    if not matched:
        return None, ""
    if any(word not in HEADER_VOCABULARY and word not in _HEADER_QUALIFIERS for word in words):
        return None, ""
    return section_key(matched[0]), rest.strip() if separator else ""


def is_section_header(line: str) -> bool:
    name, _ = match_section_header(line)
    return name is not None


def detect_sections(raw_text: str) -> dict[str, str]:
    """Split resume text into named sections, keyed in order of first appearance.

    Lines before the first recognized header are collected under the ``header``
    pseudo-section. A header repeated later in the text appends to the section it
    opened first. Empty lines are ignored and never close a section. Lines are
    trimmed at both ends but keep their inner spacing.
    """
    collected: dict[str, list[str]] = {}
    current: str | None = None

    for line in non_empty_lines(raw_text):
        name, trailing = match_section_header(line)
        if name is not None:
            current = name
            collected.setdefault(current, [])
            if trailing:
                collected[current].append(trailing)
            continue

        if current is None:
            current = HEADER_SECTION
            collected.setdefault(current, [])
        collected[current].append(line)

    return {name: "\n".join(lines) for name, lines in collected.items()}


def detected_section_names(sections: dict[str, str]) -> list[str]:
    """Non-empty recognized sections, without the pseudo header block."""
    return [name for name, content in sections.items() if name != HEADER_SECTION and content.strip()]
