from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        """Return normalized text and optional canonical skill name."""

    def is_skill(self, raw: str) -> bool:
        """True when the term is a known skill or one of its aliases."""

    def skill_terms(self) -> tuple[str, ...]:
        """All known aliases, longest first."""
