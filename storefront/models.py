"""Storefront Models - Pydantic schemas for every backend payload.

The backend speaks camelCase with Mongo-style `_id` keys; fields are declared
snake_case and bound to the wire names through aliases. Unknown keys are
ignored so backend additions never break the client.
"""
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from storefront.money import multiply, round_money


def _money_before(v):
    # JSON floats go through str() so 10.1 stays 10.1
    if isinstance(v, float):
        return Decimal(str(v))
    return v


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ==================== CATALOG ====================

class SubProduct(_WireModel):
    """Purchasable variant of a product (e.g. a package tier)."""
    name: str
    price: Decimal = Decimal("0")
    original_price: Optional[Decimal] = Field(default=None, alias="originalPrice")
    in_stock: bool = Field(default=False, alias="inStock")

    @field_validator("price", "original_price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _money_before(v)

    @property
    def is_discounted(self) -> bool:
        """True when an original price higher than the current one should be struck through."""
        return self.original_price is not None and self.original_price > self.price


class Product(_WireModel):
    """Catalog product."""
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    title: str
    description: str = ""
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    region: str = ""
    category: str = ""
    instant_delivery: bool = Field(default=False, alias="instantDelivery")
    featured: bool = False
    sub_products: list[SubProduct] = Field(default_factory=list, alias="subProducts")
    important_note: Optional[str] = Field(default=None, alias="importantNote")
    guide: Optional[str] = None
    guide_enabled: bool = Field(default=False, alias="guideEnabled")

    @property
    def category_label(self) -> str:
        return self.category.replace("_", " ")


# ==================== STORE ====================

class StoreTheme(_WireModel):
    primary_color: Optional[str] = Field(default=None, alias="primaryColor")
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")


class BusinessInfo(_WireModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class Store(_WireModel):
    """Tenant store metadata."""
    name: str
    description: str = ""
    logo: Optional[str] = None
    banner: Optional[str] = None
    theme: StoreTheme = Field(default_factory=StoreTheme)
    business_info: Optional[BusinessInfo] = Field(default=None, alias="businessInfo")


# ==================== CART ====================

class CartProduct(_WireModel):
    """Product reference embedded in a cart line."""
    title: str
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class CartItem(_WireModel):
    """Single cart line. `price` is the unit price captured when the item was added."""
    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    product: CartProduct
    sub_product_name: str = Field(default="", alias="subProductName")
    price: Decimal
    quantity: int

    @field_validator("price", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _money_before(v)

    @property
    def line_total(self) -> Decimal:
        return round_money(multiply(self.price, self.quantity))


class Cart(_WireModel):
    """Cart snapshot exactly as the server reported it.

    `total` is never recomputed client-side; it may legitimately differ from
    the sum of line totals.
    """
    items: list[CartItem] = Field(default_factory=list)
    total: Decimal = Decimal("0")

    @field_validator("total", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _money_before(v)

    @property
    def item_count(self) -> int:
        """Total units across all lines."""
        return sum(item.quantity for item in self.items)

    def get_item(self, item_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == item_id), None)


class CheckoutSession(_WireModel):
    """Payment session created by the backend."""
    payment_id: str = Field(alias="paymentId")
    bkash_url: str = Field(alias="bkashURL")


# ==================== CONTACT ====================

class ContactMessage(_WireModel):
    name: str
    email: str
    subject: str
    message: str
