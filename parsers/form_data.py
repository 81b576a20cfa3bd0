"""
Financial Report Form Model

Defines the 14 numeric-as-text fields of the HMRC report form:
- FormField: catalogue entry (label, section, placeholder) used to render the form
- FormData: raw text values exactly as typed by the user
- parse_amount / is_numeric: the numeric rules shared by validation and payloads

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormSection(str, Enum):
    """Form sections, in display order."""

    PROFIT_AND_LOSS = "Profit and Loss (P&L)"
    BALANCE_SHEET = "Balance Sheet"
    VAT_RETURN = "VAT Return"
    SELF_ASSESSMENT = "Self Assessment"


@dataclass(frozen=True)
class FormField:
    """One input of the report form."""

    key: str
    label: str
    section: FormSection
    placeholder: str
    required: bool = True


FORM_FIELDS: List[FormField] = [
    FormField("revenue", "Revenue (£)", FormSection.PROFIT_AND_LOSS, "Enter total revenue"),
    FormField("cogs", "Cost of Goods Sold (£)", FormSection.PROFIT_AND_LOSS, "Enter COGS"),
    FormField("expenses", "Expenses (£)", FormSection.PROFIT_AND_LOSS, "Enter total expenses"),
    FormField("netProfit", "Net Profit (£)", FormSection.PROFIT_AND_LOSS, "Enter net profit"),
    FormField("assets", "Total Assets (£)", FormSection.BALANCE_SHEET, "Enter total assets"),
    FormField("liabilities", "Total Liabilities (£)", FormSection.BALANCE_SHEET, "Enter total liabilities"),
    FormField("equity", "Equity (£)", FormSection.BALANCE_SHEET, "Enter total equity"),
    FormField("sales", "Total Sales (£)", FormSection.VAT_RETURN, "Enter total sales"),
    FormField("purchases", "Total Purchases (£)", FormSection.VAT_RETURN, "Enter total purchases"),
    FormField("vatCharged", "VAT Charged (Output Tax, £)", FormSection.VAT_RETURN, "Enter VAT charged"),
    FormField("vatPaid", "VAT Paid (Input Tax, £)", FormSection.VAT_RETURN, "Enter VAT paid"),
    FormField("income", "Total Income (£)", FormSection.SELF_ASSESSMENT, "Enter total income"),
    FormField("selfAssessmentExpenses", "Expenses (£)", FormSection.SELF_ASSESSMENT, "Enter total expenses"),
    FormField("allowances", "Allowances (£)", FormSection.SELF_ASSESSMENT,
              "Enter allowances (optional)", required=False),
]

# Checked by the validator, in this order. netProfit and allowances are not.
REQUIRED_FIELDS = (
    "revenue", "cogs", "expenses", "assets", "liabilities", "equity",
    "sales", "purchases", "vatCharged", "vatPaid", "income", "selfAssessmentExpenses",
)


def humanize_field_name(key: str) -> str:
    """
    Turn a camelCase field key into the words shown in error messages.

    Example:
        >>> humanize_field_name("selfAssessmentExpenses")
        'self assessment expenses'
    """
    return re.sub(r'([A-Z])', r' \1', key).lower()


def parse_amount(value: Any) -> float:
    """
    Parse a form value into a float.

    Accepts surrounding whitespace, decimals and exponents. Rejects empty
    text, digit-group underscores and anything that is not finite (nan, inf,
    or an exponent too large for a float).

    Raises:
        ValueError: If the value is not a number.
    """
    text = str(value).strip()
    if not text or '_' in text:
        raise ValueError(f"Not a number: '{value}'")
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Not a number: '{value}'")
    return number


def is_numeric(value: Any) -> bool:
    """Check whether a form value parses as a number."""
    try:
        parse_amount(value)
    except (TypeError, ValueError):
        return False
    return True


def is_blank(value: Any) -> bool:
    """Check whether a form value counts as not filled in."""
    return value is None or not str(value).strip()


class FormData(BaseModel):
    """
    Raw form state: one text value per field.

    Attributes use snake_case; the camelCase keys of FORM_FIELDS are the
    aliases and the names used everywhere outside Python code.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    revenue: str = ""
    cogs: str = ""
    expenses: str = ""
    net_profit: str = Field("", alias="netProfit")
    assets: str = ""
    liabilities: str = ""
    equity: str = ""
    sales: str = ""
    purchases: str = ""
    vat_charged: str = Field("", alias="vatCharged")
    vat_paid: str = Field("", alias="vatPaid")
    income: str = ""
    self_assessment_expenses: str = Field("", alias="selfAssessmentExpenses")
    allowances: str = ""

    @field_validator('*', mode='before')
    @classmethod
    def coerce_text(cls, v):
        """Store numbers typed programmatically as text; None means empty."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def attribute_for(cls, key: str) -> str:
        """
        Map a field key (camelCase) to the model attribute.

        Raises:
            KeyError: If the key is not one of the 14 form fields.
        """
        return _KEY_TO_ATTRIBUTE[key]

    def value_of(self, key: str) -> str:
        """Raw text of the field named by its camelCase key."""
        return getattr(self, self.attribute_for(key))

    def set_value(self, key: str, value: Any) -> None:
        """Replace the raw text of one field."""
        setattr(self, self.attribute_for(key), value)

    def as_dict(self) -> Dict[str, str]:
        """All values keyed by camelCase field key."""
        return self.model_dump(by_alias=True)


_KEY_TO_ATTRIBUTE: Dict[str, str] = {
    (info.alias or name): name for name, info in FormData.model_fields.items()
}
