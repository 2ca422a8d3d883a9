from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when the resume text cannot be analyzed at all (empty or blank)."""

    def __init__(self, message: str, *, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class DraftAnalysisError(RuntimeError):
    def __init__(self, message: str, *, code: str = "draft_unavailable"):
        super().__init__(message)
        self.code = code
