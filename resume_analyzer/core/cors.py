from __future__ import annotations

from typing import Any

from resume_analyzer.core.config import settings


def cors_options() -> dict[str, Any]:
    """Keyword arguments for ``CORSMiddleware`` built from settings."""
    origins = [origin.rstrip("/") for origin in settings.cors_allowed_origins]
    regex = (settings.cors_allow_origin_regex or "").strip() or None
    # browsers reject a wildcard origin on credentialed requests
    allow_credentials = settings.cors_allow_credentials and "*" not in origins
    return {
        "allow_origins": origins,
        "allow_origin_regex": regex,
        "allow_credentials": allow_credentials,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
    }
