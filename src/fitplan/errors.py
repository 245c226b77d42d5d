"""Error taxonomy for plan and diet computation."""


class FitPlanError(Exception):
    """Base class for all FitPlan errors."""


class ValidationError(FitPlanError, ValueError):
    """A profile value is outside its defined domain."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ConfigurationError(FitPlanError, LookupError):
    """A rule table has no entry for an otherwise valid combination."""
