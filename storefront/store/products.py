"""Product listing and product detail view-models."""
from typing import Optional

from storefront.client import StorefrontClient
from storefront.config import DEFAULT_ITEM_CURRENCY
from storefront.errors import StorefrontError
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.models import Product, SubProduct
from storefront.money import format_money

logger = get_logger(__name__)


def matches_search(product: Product, search: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = search.lower()
    return needle in product.title.lower() or needle in product.description.lower()


def price_preview(product: Product, currency: str = DEFAULT_ITEM_CURRENCY) -> Optional[tuple[str, str]]:
    """(first variant name, formatted price) shown on product cards, or None."""
    if not product.sub_products:
        return None
    first = product.sub_products[0]
    return first.name, format_money(first.price, currency)


def more_options_label(product: Product) -> Optional[str]:
    extra = len(product.sub_products) - 1
    return f"+{extra} more options" if extra > 0 else None


class ProductListViewModel:
    """All products of a store, filtered by the search box."""

    def __init__(self, client: StorefrontClient, domain: str):
        self.client = client
        self.domain = domain
        self.products: list[Product] = []
        self.search = ""
        self.loading = False

    async def load(self) -> list[Product]:
        self.loading = True
        try:
            self.products = await self.client.list_products(self.domain)
        except StorefrontError as e:
            logger.error(
                f"Failed to fetch products for {sanitize_string_for_logging(self.domain)}: {e}"
            )
        finally:
            self.loading = False
        return self.products

    @property
    def filtered_products(self) -> list[Product]:
        return [p for p in self.products if matches_search(p, self.search)]

    def product_href(self, product: Product) -> str:
        return f"/store/{self.domain}/products/{product.id}"


class ProductDetailViewModel:
    """Single product with variant selection."""

    def __init__(self, client: StorefrontClient, domain: str, product_id: str):
        self.client = client
        self.domain = domain
        self.product_id = product_id
        self.product: Optional[Product] = None
        self.selected_variant: Optional[SubProduct] = None
        self.loading = False

    async def load(self) -> Optional[Product]:
        self.loading = True
        try:
            self.product = await self.client.get_product(self.domain, self.product_id)
        except StorefrontError as e:
            logger.error(f"Failed to fetch product {sanitize_id_for_logging(self.product_id)}: {e}")
            return None
        finally:
            self.loading = False

        variants = self.product.sub_products
        self.selected_variant = variants[0] if variants else None
        return self.product

    @property
    def not_found(self) -> bool:
        return not self.loading and self.product is None

    def select_variant(self, name: str) -> bool:
        if self.product is None:
            return False
        variant = next((v for v in self.product.sub_products if v.name == name), None)
        if variant is None:
            return False
        self.selected_variant = variant
        return True

    @property
    def can_add_to_cart(self) -> bool:
        return self.selected_variant is not None and self.selected_variant.in_stock

    @property
    def show_guide(self) -> bool:
        return bool(self.product and self.product.guide_enabled and self.product.guide)
