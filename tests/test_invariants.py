"""
Property-Based Tests - Submission Invariants

Uses hypothesis to check the rules that must hold for any input:
1. netVatDue = |vatCharged - vatPaid| and totalVatDue = vatCharged
2. Balance sheet passes exactly when assets >= liabilities + equity
3. After N successful submissions every chart count equals N
4. Without login nothing is ever recorded

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal

import pytest
from hypothesis import given, settings, strategies as st

from calculators.payload_builder import build_vat_payload
from parsers.form_data import REQUIRED_FIELDS, FormData
from services.form_validator import FormValidator
from services.identity_provider import GatewayUser
from services.submission_config import PortalSettings
from services.submission_controller import SubmissionController
from services.submission_errors import (
    BalanceSheetMismatchError,
    MissingFieldError,
    NotAuthenticatedError,
)

USER = GatewayUser(id="12345", name="Business User", utr="1234567890", vat_registered=True)

BASE_FORM = {
    "revenue": "100000", "cogs": "40000", "expenses": "20000", "netProfit": "40000",
    "assets": "120", "liabilities": "60", "equity": "50",
    "sales": "80000", "purchases": "30000", "vatCharged": "500", "vatPaid": "200",
    "income": "50000", "selfAssessmentExpenses": "10000", "allowances": "",
}

amount_strategy = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("1000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False
)


class InMemoryStore:
    """Keeps the history in memory instead of SQLite."""

    def __init__(self):
        self.saved = []

    def load_history(self):
        return list(self.saved)

    def save_history(self, history):
        self.saved = list(history)


def _controller(store):
    return SubmissionController(
        store=store,
        settings=PortalSettings(submit_delay=0),
        sleep=lambda seconds: None,
    )


@given(vat_charged=amount_strategy, vat_paid=amount_strategy)
@settings(max_examples=100)
def test_invariant_net_vat_due(vat_charged, vat_paid):
    form = FormData(**{**BASE_FORM, "vatCharged": str(vat_charged), "vatPaid": str(vat_paid)})

    vat = build_vat_payload(form)

    assert vat.net_vat_due == abs(float(vat_charged) - float(vat_paid))
    assert vat.net_vat_due >= 0
    assert vat.total_vat_due == float(vat_charged)


@given(
    assets=st.integers(min_value=0, max_value=10**9),
    liabilities=st.integers(min_value=0, max_value=10**9),
    equity=st.integers(min_value=-10**6, max_value=10**9),
)
@settings(max_examples=100)
def test_invariant_balance_sheet_rule(assets, liabilities, equity):
    form = FormData(**{
        **BASE_FORM,
        "assets": str(assets),
        "liabilities": str(liabilities),
        "equity": str(equity),
    })
    validator = FormValidator()

    passed = validator.validate(form, USER)

    assert passed == (assets >= liabilities + equity)
    if not passed:
        assert isinstance(validator.error, BalanceSheetMismatchError)


@given(missing=st.sampled_from(REQUIRED_FIELDS), blank=st.sampled_from(["", " ", "\t"]))
def test_invariant_blank_required_field_is_missing(missing, blank):
    form = FormData(**{**BASE_FORM, missing: blank})
    validator = FormValidator()

    assert validator.validate(form, USER) is False
    assert isinstance(validator.error, MissingFieldError)
    assert validator.error.field == missing


@given(n=st.integers(min_value=0, max_value=8))
@settings(max_examples=20)
def test_invariant_chart_counts_equal_submissions(n):
    controller = _controller(InMemoryStore())
    controller.login()
    controller.update_fields(BASE_FORM)

    for _ in range(n):
        controller.submit()

    assert controller.chart_counts() == [n, n, n, n]
    assert len(controller.store.saved) == n


@given(attempts=st.integers(min_value=1, max_value=5))
@settings(max_examples=10)
def test_invariant_no_history_without_login(attempts):
    store = InMemoryStore()
    controller = _controller(store)
    controller.update_fields(BASE_FORM)

    for _ in range(attempts):
        with pytest.raises(NotAuthenticatedError):
            controller.submit()

    assert controller.history == []
    assert store.saved == []
