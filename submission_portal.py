# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the MTD Submission Portal project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
MTD Submission Portal - Streamlit Application

Simulated HMRC Making Tax Digital submission of:
- VAT return
- Self Assessment
- Profit and Loss statement and Balance Sheet (kept for records)

Run with: streamlit run submission_portal.py
"""

import sys
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st

from calculators.submission_store import get_submission_store
from services.submission_config import PortalSettings
from services.submission_controller import SubmissionController
from ui.components import render_dashboard, render_history, render_submission_form
from ui.sidebar import render_sidebar
from ui.styles import APP_STYLE
from utils.auth import check_authentication
from utils.logging_config import configure_logging, setup_logger

logger = setup_logger(__name__)

# Page configuration
st.set_page_config(
    page_title="HMRC Financial Report Submission",
    page_icon="🏛️",
    layout="centered",
    initial_sidebar_state="expanded"
)

st.markdown(APP_STYLE, unsafe_allow_html=True)


def get_controller(settings: PortalSettings) -> SubmissionController:
    """
    Get the controller of this browser session, creating it on first run.

    A browser reload starts a new session and therefore a logged-out controller.
    """
    if 'controller' not in st.session_state:
        store = get_submission_store(settings.db_path)
        st.session_state.controller = SubmissionController(store=store, settings=settings)
        logger.info(
            f"New session: {len(st.session_state.controller.history)} submissions in history"
        )
    return st.session_state.controller


def main():
    """Main application entry point."""
    settings = PortalSettings.from_env()
    configure_logging(settings.log_level, settings.log_file)
    controller = get_controller(settings)

    st.markdown('<div class="portal-title">HMRC Financial Report Submission</div>', unsafe_allow_html=True)

    if not check_authentication(controller):
        st.stop()

    render_sidebar(controller, settings)
    render_dashboard(controller)
    render_submission_form(controller)
    render_history(controller)


if __name__ == "__main__":
    main()
