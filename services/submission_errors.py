"""
Submission Error Kinds

Every failure of a validate/submit attempt is raised as a SubmissionError
subclass. str(error) is the message shown to the user.
"""

from parsers.form_data import humanize_field_name
from services.submission_config import VAT_REGISTRATION_THRESHOLD


class SubmissionError(Exception):
    """Base class of all submission failures."""

    category = "SubmissionError"
    default_message = "Submission failed. Please try again."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class FormValidationError(SubmissionError, ValueError):
    """Raised when the form breaks one of the validation rules."""

    field = None


class MissingFieldError(FormValidationError):
    """A required field was left empty."""

    category = "MissingField"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field {humanize_field_name(field)} is required.")


class NotNumericError(FormValidationError):
    """A required field does not parse as a number."""

    category = "NotNumeric"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field {humanize_field_name(field)} must be numeric.")


class VatThresholdError(FormValidationError):
    """Sales exceed the registration threshold for a non VAT-registered user."""

    category = "VatThreshold"
    field = "sales"
    default_message = f"Sales exceed £{VAT_REGISTRATION_THRESHOLD:,}. VAT registration required."


class BalanceSheetMismatchError(FormValidationError):
    """Assets are less than liabilities plus equity."""

    category = "BalanceSheetMismatch"
    field = "assets"
    default_message = "Balance Sheet does not balance: Assets must equal Liabilities + Equity."


class NotAuthenticatedError(SubmissionError):
    """Submit attempted before logging in."""

    category = "NotAuthenticated"
    default_message = "Please log in with Government Gateway."


class SubmissionFailedError(SubmissionError):
    """Unexpected error while building or storing the submission."""

    category = "SubmissionFailed"


class SubmissionInProgressError(SubmissionError):
    """A second submit arrived while one is still in flight."""

    category = "SubmissionInProgress"
    default_message = "A submission is already in progress. Please wait."
