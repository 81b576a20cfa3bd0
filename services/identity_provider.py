"""
Simulated HMRC Government Gateway

There is no real sign-in protocol: logging in always yields the same
business identity. The identity lives only in the browser session.
"""

from pydantic import BaseModel, ConfigDict, Field

from utils.logging_config import setup_logger, taxpayer_context

logger = setup_logger(__name__)


class GatewayUser(BaseModel):
    """Taxpayer identity of the current session."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    utr: str  # Unique Taxpayer Reference
    vat_registered: bool = Field(False, alias="vatRegistered")


def simulated_gateway_login() -> GatewayUser:
    """Return the fixed identity handed out by the simulated gateway."""
    user = GatewayUser(id="12345", name="Business User", utr="1234567890", vat_registered=True)
    logger.info("Logged in with Government Gateway (simulated)", extra=taxpayer_context(user.utr))
    return user
