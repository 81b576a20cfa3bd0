# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the MTD Submission Portal project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Dashboard, report form and history components
"""

from itertools import groupby
from typing import Dict

import streamlit as st

from charts.visualizations import create_history_table, create_submission_chart
from parsers.form_data import FORM_FIELDS
from services.submission_config import SELF_ASSESSMENT_DEADLINE, VAT_DEADLINE
from services.submission_controller import STATUS_SUBMITTING, SubmissionController
from services.submission_errors import SubmissionError


def render_dashboard(controller: SubmissionController):
    """Welcome card with taxpayer reference, deadlines and the submission chart."""
    user = controller.user
    with st.container(border=True):
        st.markdown(f'<div class="card-title">Dashboard - Welcome, {user.name}</div>', unsafe_allow_html=True)
        st.markdown(f'<p class="card-line">Unique Taxpayer Reference (UTR): {user.utr}</p>', unsafe_allow_html=True)
        st.markdown(f'<p class="card-line">Self Assessment Deadline: {SELF_ASSESSMENT_DEADLINE}</p>', unsafe_allow_html=True)
        st.markdown(f'<p class="card-line">VAT Deadline: {VAT_DEADLINE}</p>', unsafe_allow_html=True)

        fig = create_submission_chart(controller.chart_counts())
        st.plotly_chart(fig, width='stretch')


def _render_inputs() -> Dict[str, str]:
    """Render the 14 inputs grouped by section. Returns raw text per field key."""
    values: Dict[str, str] = {}
    for section, fields in groupby(FORM_FIELDS, key=lambda f: f.section):
        st.markdown(f"**{section.value}**")
        fields = list(fields)
        for start in range(0, len(fields), 2):
            columns = st.columns(2)
            for column, field in zip(columns, fields[start:start + 2]):
                values[field.key] = column.text_input(
                    field.label,
                    key=f"field_{field.key}",
                    placeholder=field.placeholder,
                    help=None if field.required else "Optional. Left blank, it is submitted as 0.",
                )
    return values


def render_submission_form(controller: SubmissionController):
    """
    The report form. On submit, copies the inputs into the controller and
    submits; rule violations are shown as blocking errors.
    """
    with st.container(border=True):
        st.markdown('<div class="card-title">Submit Financial Report</div>', unsafe_allow_html=True)

        with st.form("financial_report", clear_on_submit=False):
            values = _render_inputs()
            submitted = st.form_submit_button("Submit to HMRC")

        if submitted:
            controller.update_fields(values)
            try:
                with st.spinner(STATUS_SUBMITTING):
                    controller.submit()
            except SubmissionError as e:
                st.error(str(e))
            else:
                st.rerun()

        if controller.status:
            st.markdown(f'<p class="status-line">{controller.status}</p>', unsafe_allow_html=True)


def render_history(controller: SubmissionController):
    """Table of past submissions, newest first."""
    with st.container(border=True):
        st.markdown('<div class="card-title">Submission History</div>', unsafe_allow_html=True)

        if not controller.history:
            st.info("No submissions yet")
            return

        history_df = create_history_table(controller.history)
        st.dataframe(history_df, hide_index=True, width='stretch')
        st.caption(f"Showing {len(history_df)} submissions")
