"""
Form & Submission Controller

Owns all state of one browser session: the logged-in user, the raw form
values, the submission history and the outcome of the last attempt.

Session states:
    LoggedOut -> LoggedIn                  (login only, no logout)
    Idle -> Validating -> Submitting -> Succeeded | Failed

A submission either fully commits (validation, payloads, persistence) or
leaves history untouched.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import threading
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from calculators.payload_builder import build_payloads
from calculators.submission_store import SubmissionStore
from calculators.tax_returns import SubmissionRecord, format_timestamp
from parsers.form_data import FormData
from services.form_validator import FormValidator
from services.identity_provider import GatewayUser, simulated_gateway_login
from services.submission_config import PortalSettings
from services.submission_errors import (
    NotAuthenticatedError,
    SubmissionError,
    SubmissionFailedError,
    SubmissionInProgressError,
)
from utils.logging_config import log_duration, setup_logger, taxpayer_context

logger = setup_logger(__name__)

STATUS_SUBMITTING = "Submitting..."
STATUS_SUCCEEDED = "Submission successful! Records saved."
STATUS_FAILED = "Submission failed. Please try again."


class SubmissionState(str, Enum):
    """Outcome of the current or last submission attempt."""

    IDLE = "Idle"
    VALIDATING = "Validating"
    SUBMITTING = "Submitting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


def update_chart(history: List[SubmissionRecord]) -> List[int]:
    """
    Count submissions per report type.

    Returns:
        [vat_count, self_assessment_count, profit_and_loss_count, balance_sheet_count]
    """
    return [
        sum(1 for record in history if record.vat is not None),
        sum(1 for record in history if record.self_assessment is not None),
        sum(1 for record in history if record.profit_and_loss is not None),
        sum(1 for record in history if record.balance_sheet is not None),
    ]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubmissionController:
    """
    Session controller for the HMRC report form.

    Collaborators are injected so that tests can run without waiting:
    `sleep` simulates API latency, `now` stamps records.
    """

    def __init__(
        self,
        store: SubmissionStore,
        settings: Optional[PortalSettings] = None,
        validator: Optional[FormValidator] = None,
        identity_provider: Callable[[], GatewayUser] = simulated_gateway_login,
        sleep: Callable[[float], None] = time.sleep,
        now: Callable[[], datetime] = _utc_now,
    ):
        self.store = store
        self.settings = settings or PortalSettings()
        self.validator = validator or FormValidator()
        self.identity_provider = identity_provider
        self._sleep = sleep
        self._now = now
        self._in_flight = threading.Lock()

        self.user: Optional[GatewayUser] = None
        self.form = FormData()
        self.state = SubmissionState.IDLE
        self.status: Optional[str] = None
        self.last_error: Optional[SubmissionError] = None

        self.history: List[SubmissionRecord] = []
        if self.settings.rehydrate_history:
            self.history = self.store.load_history()

    # ==================== Session ====================

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self) -> GatewayUser:
        """Sign in through the simulated gateway. Logging in again is a no-op."""
        if self.user is None:
            self.user = self.identity_provider()
        return self.user

    # ==================== Form ====================

    def update_field(self, key: str, value: str):
        """
        Store the raw text of one form field.

        Raises:
            KeyError: If key is not a form field.
        """
        self.form.set_value(key, value)

    def update_fields(self, values: dict):
        for key, value in values.items():
            self.update_field(key, value)

    def validate(self) -> bool:
        """Validate the current form. The first violation is kept in last_error."""
        self.state = SubmissionState.VALIDATING
        if not self.validator.validate(self.form, self.user):
            self._fail(self.validator.error)
            return False
        self.last_error = None
        self.state = SubmissionState.IDLE
        return True

    # ==================== Submission ====================

    def submit(self) -> SubmissionRecord:
        """
        Validate, build and persist a submission.

        Raises:
            SubmissionInProgressError: Another submit has not finished yet.
            NotAuthenticatedError: No user is logged in.
            FormValidationError: The form breaks a rule (see FormValidator.check).
            SubmissionFailedError: Building or storing the submission failed.
        """
        if not self._in_flight.acquire(blocking=False):
            logger.warning("Submit rejected: a submission is already in flight", extra=self._log_context())
            raise SubmissionInProgressError()
        try:
            return self._submit()
        finally:
            self._in_flight.release()

    def _submit(self) -> SubmissionRecord:
        self.last_error = None

        if self.user is None:
            error = NotAuthenticatedError()
            self._fail(error)
            logger.info("Submit rejected: not logged in")
            raise error

        if not self.validate():
            raise self.last_error

        self.state = SubmissionState.SUBMITTING
        self.status = STATUS_SUBMITTING

        slow_ms = self.settings.submit_delay * 1000 + 500
        with log_duration(logger, "MTD submission", slow_ms, utr=self.user.utr):
            try:
                payloads = build_payloads(self.form)
                self._sleep(self.settings.submit_delay)
                record = SubmissionRecord(
                    **payloads,
                    timestamp=format_timestamp(self._now()),
                    utr=self.user.utr,
                )
                updated_history = [*self.history, record]
                self.store.save_history(updated_history)
            except Exception as e:
                logger.error(f"Submission failed: {e}", exc_info=True, extra=self._log_context())
                error = SubmissionFailedError()
                self._fail(error)
                self.status = STATUS_FAILED
                raise error from e

        self.history = updated_history
        self.state = SubmissionState.SUCCEEDED
        self.status = STATUS_SUCCEEDED
        logger.info(f"Submission stored ({len(self.history)} total)", extra=self._log_context())
        return record

    # ==================== Chart ====================

    def chart_counts(self) -> List[int]:
        """Counts for the submission chart, in chart label order."""
        return update_chart(self.history)

    # ==================== Internals ====================

    def _fail(self, error: SubmissionError):
        self.last_error = error
        self.state = SubmissionState.FAILED

    def _log_context(self) -> dict:
        return taxpayer_context(self.user.utr if self.user else None)
