"""
Form Validation Service

Checks the report form against the HMRC submission rules before anything is
built or stored. Rules run in a fixed order and the first failure wins.
"""

from typing import Optional

from parsers.form_data import REQUIRED_FIELDS, FormData, is_blank, is_numeric, parse_amount
from services.identity_provider import GatewayUser
from services.submission_config import VAT_REGISTRATION_THRESHOLD
from services.submission_errors import (
    BalanceSheetMismatchError,
    FormValidationError,
    MissingFieldError,
    NotNumericError,
    VatThresholdError,
)
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class FormValidator:
    """Validates the report form and remembers the first violation found."""

    def __init__(self, vat_threshold: float = VAT_REGISTRATION_THRESHOLD):
        self.vat_threshold = vat_threshold
        self.error: Optional[FormValidationError] = None

    def check(self, form: FormData, user: Optional[GatewayUser]):
        """
        Run all rules, raising on the first failure.

        Raises:
            MissingFieldError: A required field is empty.
            NotNumericError: A required field is not a number.
            VatThresholdError: Sales exceed the threshold and user is not VAT registered.
            BalanceSheetMismatchError: Assets are less than liabilities + equity.
        """
        self.check_required_fields(form)
        self.check_vat_registration(form, user)
        self.check_balance_sheet(form)

    def validate(self, form: FormData, user: Optional[GatewayUser]) -> bool:
        """
        Run all rules and return whether the form passed.

        The violation, if any, is kept in self.error.
        """
        self.error = None
        try:
            self.check(form, user)
        except FormValidationError as e:
            self.error = e
            logger.info(f"Validation failed [{e.category}]: {e}")
            return False
        return True

    def check_required_fields(self, form: FormData):
        """Each required field must be filled in and numeric, checked in order."""
        for key in REQUIRED_FIELDS:
            value = form.value_of(key)
            if is_blank(value):
                raise MissingFieldError(key)
            if not is_numeric(value):
                raise NotNumericError(key)

    def check_vat_registration(self, form: FormData, user: Optional[GatewayUser]):
        """Sales above the threshold require VAT registration."""
        registered = user is not None and user.vat_registered
        if parse_amount(form.sales) > self.vat_threshold and not registered:
            raise VatThresholdError()

    def check_balance_sheet(self, form: FormData):
        """
        Assets must not fall short of liabilities + equity.

        Only a shortfall is rejected; assets above liabilities + equity pass.
        """
        assets = parse_amount(form.assets)
        claims = parse_amount(form.liabilities) + parse_amount(form.equity)
        if assets < claims:
            raise BalanceSheetMismatchError()
