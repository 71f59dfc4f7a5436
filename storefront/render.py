"""Plain-text rendering of view-model state, used by the command line."""
from storefront.cart.service import CartViewModel
from storefront.config import DEFAULT_ITEM_CURRENCY
from storefront.models import Product
from storefront.money import format_money
from storefront.notifications import Notification
from storefront.store.contact import ContactViewModel
from storefront.store.landing import StorePageViewModel
from storefront.store.layout import StoreLayoutViewModel
from storefront.store.products import (
    ProductDetailViewModel,
    ProductListViewModel,
    more_options_label,
    price_preview,
)

STORE_NOT_FOUND = (
    "Store Not Found\n"
    "The store you're looking for doesn't exist or has been suspended."
)
PRODUCT_NOT_FOUND = (
    "Product Not Found\n"
    "The product you're looking for doesn't exist or has been removed."
)
NO_PRODUCTS = "No Products Found\nWe couldn't find any products matching your search."
EMPTY_CART = (
    "Your cart is empty\n"
    "Looks like you haven't added any items to your cart yet."
)


def render_notification(notification: Notification) -> str:
    return f"[{notification.title}] {notification.description}"


def _badges(product: Product, instant_label: str = "Instant") -> str:
    badges = []
    if product.instant_delivery:
        badges.append(instant_label)
    if product.featured:
        badges.append("Featured")
    return f" [{', '.join(badges)}]" if badges else ""


def render_product_card(product: Product) -> list[str]:
    lines = [f"{product.title}{_badges(product)}", f"  {product.region} • {product.category_label}"]
    preview = price_preview(product)
    if preview:
        lines.append(f"  {preview[0]}: {preview[1]}")
    more = more_options_label(product)
    if more:
        lines.append(f"  {more}")
    return lines


def render_layout(vm: StoreLayoutViewModel) -> str:
    if vm.loading:
        return "Loading..."
    if vm.not_found:
        return STORE_NOT_FOUND
    store = vm.store
    badge = f" ({vm.cart_badge})" if vm.cart_badge else ""
    lines = [
        store.name,
        " | ".join(link.label for link in vm.nav_links) + f" | Cart{badge}",
        "",
        "About Us",
        store.description,
    ]
    contact = vm.contact_lines
    if contact:
        lines += ["", "Contact Info", *contact]
    lines += ["", vm.copyright_line()]
    return "\n".join(lines)


def render_store_page(vm: StorePageViewModel) -> str:
    if vm.loading:
        return "Loading..."
    if vm.not_found:
        return STORE_NOT_FOUND
    lines = [vm.store.name, vm.store.description, "", "Featured Products"]
    for product in vm.featured_products:
        lines += render_product_card(product)
    return "\n".join(lines)


def render_product_list(vm: ProductListViewModel) -> str:
    if vm.loading:
        return "Loading..."
    products = vm.filtered_products
    if not products:
        return NO_PRODUCTS
    lines = []
    for product in products:
        lines += render_product_card(product)
    return "\n".join(lines)


def render_product_detail(vm: ProductDetailViewModel) -> str:
    if vm.loading:
        return "Loading..."
    if vm.not_found:
        return PRODUCT_NOT_FOUND
    product = vm.product
    lines = [
        f"{product.title}{_badges(product, 'Instant Delivery')}",
        f"{product.region} • {product.category_label}",
        "",
        product.description,
        "",
        "Select Package",
    ]
    for variant in product.sub_products:
        marker = "*" if vm.selected_variant and vm.selected_variant.name == variant.name else " "
        stock = "In Stock" if variant.in_stock else "Out of Stock"
        price = format_money(variant.price, DEFAULT_ITEM_CURRENCY)
        if variant.is_discounted:
            price += f" (was {format_money(variant.original_price, DEFAULT_ITEM_CURRENCY)})"
        lines.append(f" {marker} {variant.name} - {stock} - {price}")
    if product.important_note:
        lines += ["", f"Note: {product.important_note}"]
    lines += ["", "Add to Cart" if vm.can_add_to_cart else "Add to Cart (unavailable)"]
    if vm.show_guide:
        lines += ["", "Usage Guide", product.guide]
    return "\n".join(lines)


def render_cart(vm: CartViewModel) -> str:
    if vm.loading:
        return "Loading..."
    if vm.is_empty:
        return EMPTY_CART
    lines = ["Shopping Cart", ""]
    for item in vm.items:
        lines.append(f"{item.product.title} ({item.sub_product_name})  [{item.id}]")
        lines.append(
            f"  {vm.format_line_total(item)}  ({vm.format_unit_price(item)} each)  x{item.quantity}"
        )
    lines += [
        "",
        "Order Summary",
        f"Subtotal        {vm.format_subtotal()}",
        f"Processing Fee  {vm.format_processing_fee()}",
        f"Total           {vm.format_total()}",
    ]
    return "\n".join(lines)


def render_contact(vm: ContactViewModel) -> str:
    if vm.loading:
        return "Loading..."
    if vm.not_found:
        return STORE_NOT_FOUND
    lines = ["Contact Us"]
    if vm.error:
        lines.append(f"Error: {vm.error}")
    info = vm.store.business_info
    if info:
        for label, value in (("Email", info.email), ("Phone", info.phone), ("Address", info.address)):
            if value:
                lines.append(f"{label}: {value}")
    return "\n".join(lines)
