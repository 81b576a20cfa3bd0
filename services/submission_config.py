"""
Submission Portal Configuration

Fixed HMRC rule constants plus runtime settings that can be overridden from
the environment:

    MTD_DATA_DIR            directory holding submissions.db (default: data)
    MTD_SUBMIT_DELAY        simulated API latency in seconds (default: 1.0)
    MTD_REHYDRATE_HISTORY   reload saved history on start (default: true)
    LOG_LEVEL               DEBUG, INFO, WARNING, ERROR (default: INFO)
    MTD_LOG_FILE            optional log file path

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

# Turnover above which a business must be VAT registered (GBP)
VAT_REGISTRATION_THRESHOLD = 85000

# Simulated MTD VAT obligation period
PERIOD_KEY = "25A1"

# Storage key of the persisted submission history
STORAGE_KEY = "financialRecords"

SUBMITTED_STATUS = "Submitted"

SELF_ASSESSMENT_DEADLINE = "31 January 2026"
VAT_DEADLINE = "7th of next month (quarterly)"

GATEWAY_REGISTER_URL = "https://www.gov.uk/log-in-register-hmrc-online-services"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_MAP = {
    "MTD_DATA_DIR": "data_dir",
    "MTD_SUBMIT_DELAY": "submit_delay",
    "MTD_REHYDRATE_HISTORY": "rehydrate_history",
    "LOG_LEVEL": "log_level",
    "MTD_LOG_FILE": "log_file",
}


class PortalSettings(BaseModel):
    """Runtime settings of the submission portal."""

    data_dir: str = "data"
    submit_delay: float = Field(1.0, ge=0)
    rehydrate_history: bool = True
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def db_path(self) -> Path:
        """SQLite file holding the key-value storage."""
        return Path(self.data_dir) / "submissions.db"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'PortalSettings':
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (tests)

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        values = {
            field: environ[var]
            for var, field in _ENV_MAP.items()
            if environ.get(var) not in (None, "")
        }
        return cls(**values)
