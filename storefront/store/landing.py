"""Store landing page: store hero plus featured products."""
import asyncio
from typing import Optional

from storefront.client import StorefrontClient
from storefront.errors import StorefrontError
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.models import Product, Store

logger = get_logger(__name__)


class StorePageViewModel:
    def __init__(self, client: StorefrontClient, domain: str):
        self.client = client
        self.domain = domain
        self.store: Optional[Store] = None
        self.featured_products: list[Product] = []
        self.loading = False

    async def load(self) -> Optional[Store]:
        """Fetch store and featured products together; both or neither are kept."""
        self.loading = True
        try:
            store, products = await asyncio.gather(
                self.client.get_store(self.domain),
                self.client.list_products(self.domain, featured=True),
            )
        except StorefrontError as e:
            logger.error(
                f"Failed to fetch store data for {sanitize_string_for_logging(self.domain)}: {e}"
            )
            return None
        finally:
            self.loading = False

        self.store = store
        self.featured_products = products
        return store

    @property
    def not_found(self) -> bool:
        return not self.loading and self.store is None
