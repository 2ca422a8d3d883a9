from dataclasses import dataclass
from typing import Protocol

from resume_analyzer.schemas.analysis import DraftAnalysis


@dataclass(frozen=True)
class DraftRequest:
    resume_text: str
    job_description: str | None = None
    target_role: str | None = None
    target_industry: str | None = None


class DraftAnalysisProvider(Protocol):
    def draft(self, request: DraftRequest) -> DraftAnalysis | None: ...
