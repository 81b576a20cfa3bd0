"""
Shared fixtures for the submission portal tests.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest

from calculators.submission_store import SubmissionStore
from parsers.form_data import FormData
from services.identity_provider import GatewayUser


def valid_form_values() -> dict:
    """A form that passes every rule (balance sheet balanced, sales under threshold)."""
    return {
        "revenue": "100000",
        "cogs": "40000",
        "expenses": "20000",
        "netProfit": "40000",
        "assets": "120",
        "liabilities": "60",
        "equity": "50",
        "sales": "80000",
        "purchases": "30000",
        "vatCharged": "500",
        "vatPaid": "200",
        "income": "50000",
        "selfAssessmentExpenses": "10000",
        "allowances": "",
    }


@pytest.fixture
def form_values():
    return valid_form_values()


@pytest.fixture
def valid_form(form_values):
    return FormData(**form_values)


@pytest.fixture
def registered_user():
    return GatewayUser(id="12345", name="Business User", utr="1234567890", vat_registered=True)


@pytest.fixture
def unregistered_user():
    return GatewayUser(id="67890", name="Sole Trader", utr="9876543210", vat_registered=False)


@pytest.fixture
def store(tmp_path):
    """Store backed by a temporary SQLite file."""
    return SubmissionStore(db_path=tmp_path / "submissions.db")
