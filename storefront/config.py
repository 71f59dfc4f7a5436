"""Client configuration read from the environment."""
import os
from dataclasses import dataclass

from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 10.0

# Currency labels shown next to amounts. They are display labels only:
# nothing is ever converted between them.
DEFAULT_ITEM_CURRENCY = "USD"
DEFAULT_SUMMARY_CURRENCY = "BDT"


def get_api_base_url() -> str:
    """Get backend base URL (STOREFRONT_API_URL), normalized without trailing slash."""
    url = os.environ.get("STOREFRONT_API_URL", "") or DEFAULT_API_URL
    if not url.startswith("http"):
        url = f"https://{url}"
    return url.rstrip("/")


def _get_timeout() -> float:
    raw = os.environ.get("STOREFRONT_TIMEOUT", "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid STOREFRONT_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


@dataclass(frozen=True)
class Settings:
    """Resolved storefront settings."""
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    item_currency: str = DEFAULT_ITEM_CURRENCY
    summary_currency: str = DEFAULT_SUMMARY_CURRENCY

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_url=get_api_base_url(),
            timeout=_get_timeout(),
            item_currency=os.environ.get("STOREFRONT_ITEM_CURRENCY", DEFAULT_ITEM_CURRENCY).upper(),
            summary_currency=os.environ.get(
                "STOREFRONT_SUMMARY_CURRENCY", DEFAULT_SUMMARY_CURRENCY
            ).upper(),
        )
