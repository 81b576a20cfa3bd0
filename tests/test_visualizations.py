"""
Unit Tests for the Submission Chart and History Table

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import datetime, timezone

import pytest

from calculators.payload_builder import build_submission
from charts.visualizations import (
    BAR_COLORS,
    BORDER_COLORS,
    CHART_LABELS,
    HISTORY_COLUMNS,
    create_history_table,
    create_submission_chart,
)


class TestSubmissionChart:

    def test_bars_follow_label_order(self):
        fig = create_submission_chart([4, 3, 2, 1])

        bar = fig.data[0]
        assert list(bar.x) == ['VAT Returns', 'Self Assessment', 'P&L', 'Balance Sheet']
        assert list(bar.y) == [4, 3, 2, 1]
        assert bar.name == 'Submissions'

    def test_colors_per_report_type(self):
        bar = create_submission_chart([0, 0, 0, 0]).data[0]

        assert list(bar.marker.color) == BAR_COLORS
        assert list(bar.marker.line.color) == BORDER_COLORS

    def test_axes_and_title(self):
        fig = create_submission_chart([1, 1, 1, 1])

        assert fig.layout.title.text == 'Submission History'
        assert fig.layout.xaxis.title.text == 'Report Type'
        assert fig.layout.yaxis.title.text == 'Number of Submissions'
        assert fig.layout.yaxis.rangemode == 'tozero'

    def test_title_can_be_hidden(self):
        fig = create_submission_chart([1, 1, 1, 1], title=None)

        assert fig.layout.title.text == ""

    def test_wrong_number_of_counts_raises(self):
        with pytest.raises(ValueError, match="Expected 4 counts"):
            create_submission_chart([1, 2, 3])

    def test_labels_match_colors(self):
        assert len(CHART_LABELS) == len(BAR_COLORS) == len(BORDER_COLORS)


class TestHistoryTable:

    def test_empty_history(self):
        df = create_history_table([])

        assert df.empty
        assert list(df.columns) == HISTORY_COLUMNS

    def test_rows_newest_first(self, valid_form):
        older = build_submission(valid_form, "1234567890", datetime(2025, 1, 1, tzinfo=timezone.utc))
        newer = build_submission(valid_form, "1234567890", datetime(2025, 6, 1, tzinfo=timezone.utc))

        df = create_history_table([older, newer])

        assert len(df) == 2
        assert df.loc[0, 'Submitted At'] == newer.timestamp
        assert df.loc[0, 'Net VAT Due (£)'] == 300
        assert df.loc[0, 'Period'] == '25A1'
        assert df.loc[0, 'Status'] == 'Submitted'
