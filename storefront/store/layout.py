"""Store layout: header, navigation, footer and the cart badge."""
from datetime import datetime, timezone
from typing import NamedTuple, Optional

from storefront.cart.badge import CartBadgeStore, get_cart_badge_store
from storefront.client import StorefrontClient
from storefront.errors import StorefrontError
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.models import Store

logger = get_logger(__name__)


class NavLink(NamedTuple):
    label: str
    href: str


async def load_store(client: StorefrontClient, domain: str) -> Optional[Store]:
    """Fetch store metadata. Returns None (store not found) on any failure."""
    try:
        return await client.get_store(domain)
    except StorefrontError as e:
        logger.error(f"Failed to fetch store {sanitize_string_for_logging(domain)}: {e}")
        return None


class StoreLayoutViewModel:
    """Frame shared by all pages of one tenant store."""

    def __init__(
        self,
        client: StorefrontClient,
        domain: str,
        badge_store: Optional[CartBadgeStore] = None,
    ):
        self.client = client
        self.domain = domain
        self.badge_store = badge_store or get_cart_badge_store()
        self.store: Optional[Store] = None
        self.loading = False
        self.menu_open = False

    async def load(self) -> Optional[Store]:
        self.loading = True
        try:
            self.store = await load_store(self.client, self.domain)
        finally:
            self.loading = False
        return self.store

    @property
    def not_found(self) -> bool:
        return not self.loading and self.store is None

    @property
    def base_path(self) -> str:
        return f"/store/{self.domain}"

    @property
    def nav_links(self) -> list[NavLink]:
        return [
            NavLink("Home", self.base_path),
            NavLink("Products", f"{self.base_path}/products"),
            NavLink("Contact", f"{self.base_path}/contact"),
        ]

    @property
    def footer_links(self) -> list[NavLink]:
        return [
            NavLink("Products", f"{self.base_path}/products"),
            NavLink("Contact Us", f"{self.base_path}/contact"),
            NavLink("Terms & Conditions", f"{self.base_path}/terms"),
        ]

    @property
    def cart_href(self) -> str:
        return f"{self.base_path}/cart"

    @property
    def cart_badge(self) -> Optional[str]:
        """Badge text, hidden (None) when the cart is empty."""
        count = self.badge_store.item_count
        return str(count) if count > 0 else None

    @property
    def contact_lines(self) -> list[str]:
        info = self.store.business_info if self.store else None
        if info is None:
            return []
        lines = []
        if info.phone:
            lines.append(f"Phone: {info.phone}")
        if info.email:
            lines.append(f"Email: {info.email}")
        if info.address:
            lines.append(f"Address: {info.address}")
        return lines

    def copyright_line(self, year: Optional[int] = None) -> str:
        year = year or datetime.now(timezone.utc).year
        name = self.store.name if self.store else ""
        return f"© {year} {name}. All rights reserved."

    def toggle_menu(self, open_: Optional[bool] = None) -> None:
        self.menu_open = (not self.menu_open) if open_ is None else open_
