"""Structured job-description fields produced by the upstream extractor."""

from pydantic import BaseModel


class ExtractedJD(BaseModel):
    """Structured fields extracted from a job description.

    ``seniority_signals`` are free-text phrases such as "5+ years" or
    "Senior level"; together with ``job_title`` they drive seniority
    inference.
    """
    must_have: list[str] = []
    nice_to_have: list[str] = []
    keywords: list[str] = []
    seniority_signals: list[str] = []
    company_name: str | None = None
    job_title: str | None = None
    company_context_keywords: list[str] = []
