# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the MTD Submission Portal project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

import streamlit as st

from services.submission_config import SELF_ASSESSMENT_DEADLINE, VAT_DEADLINE, PortalSettings
from services.submission_controller import SubmissionController


def render_sidebar(controller: SubmissionController, settings: PortalSettings):
    """
    Renders the sidebar: taxpayer details, filing deadlines and session status.
    """
    with st.sidebar:
        st.markdown("### TAXPAYER")

        user = controller.user
        st.caption(user.name)
        st.caption(f"UTR: {user.utr}")
        st.caption("VAT registered" if user.vat_registered else "Not VAT registered")

        st.markdown("---")
        st.markdown("### DEADLINES")
        st.caption(f"Self Assessment: {SELF_ASSESSMENT_DEADLINE}")
        st.caption(f"VAT: {VAT_DEADLINE}")

        st.markdown("---")
        st.markdown("### Session Status")

        row1_1, row1_2 = st.columns(2)
        row1_1.metric("Submissions", len(controller.history))
        row1_2.metric("Last Attempt", controller.state.value)

        if not settings.rehydrate_history:
            st.info("History resets each session")
        st.caption(f"Storage: {settings.db_path}")
