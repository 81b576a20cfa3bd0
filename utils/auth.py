"""Simulated Government Gateway login for the Streamlit session."""

import streamlit as st

from services.submission_config import GATEWAY_REGISTER_URL
from services.submission_controller import SubmissionController


def check_authentication(controller: SubmissionController) -> bool:
    """
    Check if the session has a logged-in taxpayer, rendering the login card if not.

    There is no password: the button signs in with the fixed simulated
    identity. No logout exists; a browser reload starts a new session.

    Returns:
        True if authenticated, False otherwise
    """
    if controller.is_authenticated:
        if st.session_state.pop("show_login_toast", False):
            st.toast("Logged in with Government Gateway (simulated).")
        return True

    col1, col2, col3 = st.columns([1, 2, 1])

    with col2:
        with st.container(border=True):
            st.subheader("Login with Government Gateway")
            st.write("Sign in to submit financial reports to HMRC.")

            login_button = st.button(
                "Login with Government Gateway",
                type="primary",
                width='stretch'
            )

            st.caption(
                f"Requires HMRC Government Gateway credentials. [Register here]({GATEWAY_REGISTER_URL})."
            )

    if login_button:
        controller.login()
        # Toast is shown by the rerun
        st.session_state.show_login_toast = True
        st.rerun()

    return False
