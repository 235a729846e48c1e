"""Project-wide custom exception types."""


class InvalidCompanyNameError(ValueError):
    """Raised when a report is requested without a usable company name."""

    def __init__(self, message: str = "Company name is required and must be a non-empty string") -> None:  # noqa: D401,E501
        super().__init__(message)


class FeedbackStoreError(RuntimeError):
    """Raised when the feedback store cannot be read."""


class ReportGenerationError(RuntimeError):
    """Generic failure surfaced to callers; never carries the root cause text."""

    DEFAULT_MESSAGE = (
        "An error occurred while generating the report. "
        "Please contact the Placement Cell administrator."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)
