import os
from typing import Literal

from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Competency heatmap settings
    # "inverse": score *= 2 - factor (factors above 1.0 lower domain scores)
    # "direct":  score *= factor  (factors above 1.0 raise domain scores)
    company_adjustment_polarity: Literal["inverse", "direct"] = "inverse"
    resolve_company_difficulty: bool = True  # resolve context from company name when not supplied
    heatmap_rate_limit: str = "30/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
