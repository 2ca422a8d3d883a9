from __future__ import annotations

import json
from pathlib import Path

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, skills_path: str | Path | None = None) -> None:
        path = Path(skills_path) if skills_path else Path(__file__).with_name("skills.json")
        self._aliases = self._load_aliases(path)
        self._terms = tuple(sorted(self._aliases, key=lambda term: (-len(term), term)))

    @staticmethod
    def _load_aliases(path: Path) -> dict[str, str]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        aliases: dict[str, str] = {}
        for canonical, synonyms in raw.items():
            name = str(canonical).strip().lower()
            aliases[name] = name
            for synonym in synonyms or []:
                aliases[str(synonym).strip().lower()] = name
        return aliases

    def normalize_skill(self, raw: str) -> tuple[str, str | None]:
        normalized = " ".join(raw.strip().lower().split())
        return normalized, self._aliases.get(normalized)

    def is_skill(self, raw: str) -> bool:
        _, canonical = self.normalize_skill(raw)
        return canonical is not None

    def skill_terms(self) -> tuple[str, ...]:
        return self._terms
