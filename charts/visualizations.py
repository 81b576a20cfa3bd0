"""Visualization components using Plotly: submission chart and history table."""

from typing import List, Optional
import plotly.graph_objects as go
import pandas as pd

from calculators.tax_returns import SubmissionRecord
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

CHART_LABELS = ['VAT Returns', 'Self Assessment', 'P&L', 'Balance Sheet']

# Fill / border pairs per report type, same order as CHART_LABELS
BAR_COLORS = ['#4CAF50', '#2196F3', '#FFC107', '#F44336']
BORDER_COLORS = ['#388E3C', '#1976D2', '#FFA000', '#D32F2F']

HISTORY_COLUMNS = [
    'Submitted At', 'UTR', 'Status', 'Period',
    'Net VAT Due (£)', 'SA Income (£)', 'Net Profit (£)',
]


def create_submission_chart(
    counts: List[int],
    title: Optional[str] = "Submission History",
    compact_mode: bool = False
) -> go.Figure:
    """
    Create the bar chart of submissions per report type.

    Args:
        counts: [vat, self_assessment, profit_and_loss, balance_sheet] counts
        title: Chart title (None or "" hides it)
        compact_mode: Smaller height and margins for narrow layouts

    Raises:
        ValueError: If counts does not hold one value per report type.
    """
    if len(counts) != len(CHART_LABELS):
        raise ValueError(f"Expected {len(CHART_LABELS)} counts, got {len(counts)}")

    logger.debug(f"Submission chart counts: {counts}")

    fig = go.Figure(data=[go.Bar(
        x=CHART_LABELS,
        y=list(counts),
        name='Submissions',
        marker=dict(
            color=BAR_COLORS,
            line=dict(color=BORDER_COLORS, width=1)
        ),
        hovertemplate='<b>%{x}</b><br>%{y} submissions<extra></extra>'
    )])

    title_dict = dict(text="") if not title else dict(text=title, x=0, font=dict(size=16, color="#1F2937"))

    fig.update_layout(
        title=title_dict,
        xaxis=dict(
            title=dict(text='Report Type'),
            showgrid=False,
        ),
        yaxis=dict(
            title=dict(text='Number of Submissions'),
            rangemode='tozero',
            tickformat=',d',
            gridcolor='rgba(0,0,0,0.08)',
        ),
        showlegend=False,
        height=300 if compact_mode else 400,
        margin=dict(t=50 if title else 20, b=40, l=50, r=20),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter")
    )

    return fig


def create_history_table(history: List[SubmissionRecord]) -> pd.DataFrame:
    """
    Flatten the submission history into one row per submission, newest first.

    Parts missing from a record show as empty cells.
    """
    if not history:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    rows = []
    for record in history:
        rows.append({
            'Submitted At': record.timestamp,
            'UTR': record.utr,
            'Status': record.status,
            'Period': record.vat.period_key if record.vat else None,
            'Net VAT Due (£)': record.vat.net_vat_due if record.vat else None,
            'SA Income (£)': record.self_assessment.income if record.self_assessment else None,
            'Net Profit (£)': record.profit_and_loss.net_profit if record.profit_and_loss else None,
        })

    df = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    return df.sort_values('Submitted At', ascending=False, kind='stable').reset_index(drop=True)
