"""
Tax Return Payload Models

Defines the records produced by a successful submission:
- VatPayload: MTD VAT return (nine-box style)
- SelfAssessmentPayload: income, expenses, allowances
- ProfitAndLossPayload / BalanceSheetPayload: statements kept for records
- SubmissionRecord: the four payloads plus timestamp, UTR and status

Field names serialize to the camelCase names used by the MTD API and by
the persisted history. All records are immutable once created.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from services.submission_config import PERIOD_KEY, SUBMITTED_STATUS


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_storage(self) -> Dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class VatPayload(_Payload):
    """
    Simulated MTD VAT return.

    Acquisition and goods-supplied boxes are always 0: EU acquisition
    reporting is not supported by the form.
    """

    period_key: str = Field(PERIOD_KEY, alias="periodKey")
    vat_due_sales: float = Field(alias="vatDueSales")
    vat_due_acquisitions: float = Field(0.0, alias="vatDueAcquisitions")
    total_vat_due: float = Field(alias="totalVatDue")
    vat_reclaimed_curr_period: float = Field(alias="vatReclaimedCurrPeriod")
    net_vat_due: float = Field(alias="netVatDue")
    total_value_sales_ex_vat: float = Field(alias="totalValueSalesExVAT")
    total_value_purchases_ex_vat: float = Field(alias="totalValuePurchasesExVAT")
    total_value_goods_supplied_ex_vat: float = Field(0.0, alias="totalValueGoodsSuppliedExVAT")
    total_acquisitions_ex_vat: float = Field(0.0, alias="totalAcquisitionsExVAT")
    finalised: bool = True


class SelfAssessmentPayload(_Payload):
    """Simulated Self Assessment figures."""

    income: float
    expenses: float
    allowances: float = 0.0


class ProfitAndLossPayload(_Payload):
    """Profit and Loss statement. net_profit is None when left blank."""

    revenue: float
    cogs: float
    expenses: float
    net_profit: Optional[float] = Field(None, alias="netProfit")


class BalanceSheetPayload(_Payload):
    """Balance Sheet totals."""

    assets: float
    liabilities: float
    equity: float


class SubmissionRecord(_Payload):
    """
    One entry of the submission history.

    Every submission made through the form carries all four parts; the parts
    are optional so that records loaded from storage may be partial.
    """

    vat: Optional[VatPayload] = None
    self_assessment: Optional[SelfAssessmentPayload] = Field(None, alias="selfAssessment")
    profit_and_loss: Optional[ProfitAndLossPayload] = Field(None, alias="profitAndLoss")
    balance_sheet: Optional[BalanceSheetPayload] = Field(None, alias="balanceSheet")
    timestamp: str
    utr: str
    status: str = SUBMITTED_STATUS

    def to_storage(self) -> Dict[str, Any]:
        # Parts absent from a partial record are left out, not written as null
        data = self.model_dump(mode="json", by_alias=True)
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_storage(cls, data: Dict[str, Any]) -> 'SubmissionRecord':
        """
        Rebuild a record from its stored dict.

        Raises:
            pydantic.ValidationError: If the dict is not a valid record.
        """
        return cls.model_validate(data)


def format_timestamp(moment: datetime) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision.

    Example:
        >>> format_timestamp(datetime(2025, 4, 7, 9, 30, tzinfo=timezone.utc))
        '2025-04-07T09:30:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
