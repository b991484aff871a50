"""
services/grading/errors.py

- Error kinds raised by the grading core.
- Every core function is pure, so these are deterministic validation
  failures surfaced to the caller immediately.
"""


class GradingError(ValueError):
    """Base class for grading core errors."""

    code = "GRADING_ERROR"


class InvalidArgument(GradingError):
    """An input lies outside the documented domain (e.g. a term with zero days)."""

    code = "INVALID_ARGUMENT"
