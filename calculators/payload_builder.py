"""
Payload Builder

Turns validated form text into the four MTD payloads. Every amount is
parsed to float here; a value that does not parse raises ValueError, which
the controller reports as a failed submission.
"""

from datetime import datetime
from typing import Dict

from parsers.form_data import FormData, is_blank, parse_amount
from calculators.tax_returns import (
    BalanceSheetPayload,
    ProfitAndLossPayload,
    SelfAssessmentPayload,
    SubmissionRecord,
    VatPayload,
    format_timestamp,
)


def build_vat_payload(form: FormData) -> VatPayload:
    """
    Build the VAT return.

    netVatDue is the absolute difference of output and input tax;
    totalVatDue equals VAT charged since acquisitions are always 0.
    """
    vat_charged = parse_amount(form.vat_charged)
    vat_paid = parse_amount(form.vat_paid)

    return VatPayload(
        vat_due_sales=vat_charged,
        total_vat_due=vat_charged,
        vat_reclaimed_curr_period=vat_paid,
        net_vat_due=abs(vat_charged - vat_paid),
        total_value_sales_ex_vat=parse_amount(form.sales),
        total_value_purchases_ex_vat=parse_amount(form.purchases),
    )


def build_self_assessment_payload(form: FormData) -> SelfAssessmentPayload:
    allowances = 0.0 if is_blank(form.allowances) else parse_amount(form.allowances)
    return SelfAssessmentPayload(
        income=parse_amount(form.income),
        expenses=parse_amount(form.self_assessment_expenses),
        allowances=allowances,
    )


def build_profit_and_loss_payload(form: FormData) -> ProfitAndLossPayload:
    net_profit = None if is_blank(form.net_profit) else parse_amount(form.net_profit)
    return ProfitAndLossPayload(
        revenue=parse_amount(form.revenue),
        cogs=parse_amount(form.cogs),
        expenses=parse_amount(form.expenses),
        net_profit=net_profit,
    )


def build_balance_sheet_payload(form: FormData) -> BalanceSheetPayload:
    return BalanceSheetPayload(
        assets=parse_amount(form.assets),
        liabilities=parse_amount(form.liabilities),
        equity=parse_amount(form.equity),
    )


def build_payloads(form: FormData) -> Dict[str, object]:
    """
    Build all four payloads, keyed by SubmissionRecord attribute name.

    Raises:
        ValueError: If any amount used by a payload does not parse.
    """
    return {
        "vat": build_vat_payload(form),
        "self_assessment": build_self_assessment_payload(form),
        "profit_and_loss": build_profit_and_loss_payload(form),
        "balance_sheet": build_balance_sheet_payload(form),
    }


def build_submission(form: FormData, utr: str, submitted_at: datetime) -> SubmissionRecord:
    """Build a complete submission record stamped with submitted_at."""
    return SubmissionRecord(
        **build_payloads(form),
        timestamp=format_timestamp(submitted_at),
        utr=utr,
    )
