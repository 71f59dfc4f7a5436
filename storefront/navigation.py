"""Browsing context used for external redirects (payment handoff)."""
from typing import Callable, Optional

from storefront.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)


class Navigator:
    """
    Records where the browsing context was sent.

    Args:
        opener: Optional callable that actually opens the URL
                (e.g. webbrowser.open). Without one, navigation is only recorded.
    """

    def __init__(self, opener: Optional[Callable[[str], object]] = None):
        self.opener = opener
        self.history: list[str] = []

    @property
    def location(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def navigate(self, url: str) -> None:
        logger.info("Navigating to %s", sanitize_string_for_logging(url, max_length=80))
        self.history.append(url)
        if self.opener is not None:
            self.opener(url)
