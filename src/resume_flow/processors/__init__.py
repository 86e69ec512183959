"""Document processors."""

from resume_flow.processors.normalizer import load_resume, normalize_dates

__all__ = ["load_resume", "normalize_dates"]
