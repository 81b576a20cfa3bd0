# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the MTD Submission Portal project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens
"""

APP_STYLE = """
<style>
    :root {
        --bg-color: #f3f4f6;
        --card-bg: #ffffff;
        --text-primary: #111827;
        --text-secondary: #4b5563;
        --accent-primary: #2563eb;
        --accent-success: #22c55e;
        --radius: 8px;
    }

    .stApp {
        background-color: var(--bg-color);
        color: var(--text-primary);
    }

    .block-container {
        max-width: 64rem;
        padding-top: 2rem !important;
    }

    .portal-title {
        color: var(--accent-primary);
        font-size: 1.9rem;
        font-weight: 700;
        text-align: center;
        margin-bottom: 1.5rem;
    }

    .card-title {
        font-size: 1.25rem;
        font-weight: 600;
        margin-bottom: 0.75rem;
    }

    .card-line {
        color: var(--text-secondary);
        margin: 0.15rem 0;
    }

    /* Submit button */
    div[data-testid="stFormSubmitButton"] button {
        width: 100%;
        background-color: var(--accent-success);
        color: #ffffff;
        border-radius: var(--radius);
    }

    .status-line {
        text-align: center;
        color: var(--text-secondary);
        margin-top: 1rem;
    }
</style>
"""
