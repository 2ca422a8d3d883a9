from __future__ import annotations

import re
from collections import Counter

_WORD_RE = re.compile(r"[A-Za-z][A-Za-z0-9+#.-]*")
_ALPHA_WORD_RE = re.compile(r"[A-Za-z][A-Za-z'-]*")
_TRAILING_PUNCT = ".,;:()[]{}/-'\""

STOPWORDS = frozenset(
    {
        "a",
        "about",
        "above",
        "after",
        "also",
        "an",
        "and",
        "are",
        "been",
        "being",
        "both",
        "but",
        "can",
        "could",
        "does",
        "each",
        "from",
        "have",
        "having",
        "into",
        "just",
        "like",
        "must",
        "only",
        "other",
        "over",
        "should",
        "some",
        "such",
        "than",
        "that",
        "their",
        "them",
        "then",
        "there",
        "these",
        "they",
        "this",
        "those",
        "through",
        "very",
        "were",
        "what",
        "when",
        "where",
        "which",
        "while",
        "will",
        "with",
        "within",
        "would",
        "your",
        "years",
        "year",
        "work",
        "team",
        "role",
        "strong",
        "experience",
        "required",
        "requirements",
        "responsibilities",
        "ability",
        "including",
        "looking",
        "plus",
        "join",
        "preferred",
    }
)


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line or "").strip()


def normalize_text(text: str) -> str:
    return normalize_line(text).lower()


def non_empty_lines(text: str) -> list[str]:
    """Non-blank lines, trimmed at both ends; inner spacing is kept as written."""
    lines: list[str] = []
    for raw_line in (text or "").splitlines():
        stripped = raw_line.strip()
        if stripped:
            lines.append(stripped)
    return lines


def tokenize(text: str) -> list[str]:
    output: list[str] = []
    for token in _WORD_RE.findall(text or ""):
        cleaned = token.lower().strip(_TRAILING_PUNCT)
        if cleaned:
            output.append(cleaned)
    return output


def distinct_tokens(text: str, *, min_length: int = 1) -> set[str]:
    return {token for token in tokenize(text) if len(token) >= min_length}


def word_count(text: str) -> int:
    return len(_ALPHA_WORD_RE.findall(text or ""))


def contains_word(text: str, word: str) -> bool:
    pattern = rf"(?<![A-Za-z0-9]){re.escape(word)}(?![A-Za-z0-9])"
    return re.search(pattern, text or "", re.IGNORECASE) is not None


def top_keywords(text: str, *, limit: int = 20, min_length: int = 4) -> list[str]:
    """Most frequent meaningful tokens; ties are broken alphabetically."""
    counts = Counter(
        token
        for token in tokenize(text)
        if len(token) >= min_length and token not in STOPWORDS and not token.isdigit()
    )
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [token for token, _ in ranked[: max(0, limit)]]
