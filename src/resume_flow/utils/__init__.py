"""Utility functions for resume-flow."""

from resume_flow.utils.date_utils import (
    PRESENT_MARKER,
    is_date_line,
    looks_like_date,
    parse_date_span,
)

__all__ = ["PRESENT_MARKER", "is_date_line", "looks_like_date", "parse_date_span"]
