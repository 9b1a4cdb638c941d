"""Errors raised by the scoring engine."""


class ScoringValidationError(ValueError):
    """A job or application is missing an identity field required for ranking."""
    pass
