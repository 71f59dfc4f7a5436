"""
Storefront command line.

Usage:
    python -m storefront store DOMAIN
    python -m storefront products DOMAIN [--search TEXT]
    python -m storefront product DOMAIN PRODUCT_ID
    python -m storefront cart
    python -m storefront set-quantity ITEM_ID QUANTITY
    python -m storefront increment ITEM_ID | decrement ITEM_ID
    python -m storefront remove ITEM_ID
    python -m storefront checkout [--open]
    python -m storefront contact DOMAIN --name N --email E --subject S --message M

The backend URL comes from STOREFRONT_API_URL; the cart session is passed
with --cookie NAME=VALUE.
"""
import argparse
import asyncio
import sys
import webbrowser
from typing import Optional, Sequence

from storefront.cart import CartViewModel
from storefront.client import StorefrontClient
from storefront.config import Settings
from storefront.logging import get_logger
from storefront.navigation import Navigator
from storefront.notifications import Notifier
from storefront.render import (
    render_cart,
    render_contact,
    render_layout,
    render_notification,
    render_product_detail,
    render_product_list,
    render_store_page,
)
from storefront.store import (
    ContactViewModel,
    ProductDetailViewModel,
    ProductListViewModel,
    StoreLayoutViewModel,
    StorePageViewModel,
)

logger = get_logger(__name__)


def _parse_cookies(values: Optional[Sequence[str]]) -> dict[str, str]:
    cookies = {}
    for value in values or []:
        name, sep, cookie = value.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"Invalid cookie {value!r}, expected NAME=VALUE")
        cookies[name.strip()] = cookie.strip()
    return cookies


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="Storefront client")
    parser.add_argument("--api-url", help="Backend base URL (default: STOREFRONT_API_URL)")
    parser.add_argument("--cookie", action="append", metavar="NAME=VALUE", help="Session cookie")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("store", help="Show store landing page")
    p.add_argument("domain")

    p = sub.add_parser("layout", help="Show store header and footer")
    p.add_argument("domain")

    p = sub.add_parser("products", help="List store products")
    p.add_argument("domain")
    p.add_argument("--search", default="")

    p = sub.add_parser("product", help="Show product detail")
    p.add_argument("domain")
    p.add_argument("product_id")
    p.add_argument("--variant", help="Variant to select")

    sub.add_parser("cart", help="Show cart")

    p = sub.add_parser("set-quantity", help="Set cart item quantity")
    p.add_argument("item_id")
    p.add_argument("quantity")

    for name in ("increment", "decrement", "remove"):
        p = sub.add_parser(name, help=f"{name.capitalize()} cart item")
        p.add_argument("item_id")

    p = sub.add_parser("checkout", help="Start payment")
    p.add_argument("--open", action="store_true", help="Open the payment page in a browser")

    p = sub.add_parser("contact", help="Send a message to the store")
    p.add_argument("domain")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--subject", required=True)
    p.add_argument("--message", required=True)

    return parser


async def _run_cart_command(args, client: StorefrontClient, notifier: Notifier, settings: Settings) -> int:
    navigator = Navigator(opener=webbrowser.open if getattr(args, "open", False) else None)
    vm = CartViewModel(
        client,
        notifier=notifier,
        navigator=navigator,
        item_currency=settings.item_currency,
        summary_currency=settings.summary_currency,
    )
    await vm.fetch_cart()

    ok = True
    if args.command == "set-quantity":
        ok = await vm.set_quantity_from_input(args.item_id, args.quantity)
    elif args.command == "increment":
        ok = await vm.increment(args.item_id)
    elif args.command == "decrement":
        ok = await vm.decrement(args.item_id)
    elif args.command == "remove":
        ok = await vm.remove_item(args.item_id)
    elif args.command == "checkout":
        session = await vm.checkout()
        if session is None:
            return 1
        print(f"Payment {session.payment_id}: {session.bkash_url}")
        return 0

    print(render_cart(vm))
    return 0 if ok else 1


async def run(args) -> int:
    settings = Settings.from_env()
    notifier = Notifier()
    notifier.subscribe(lambda n: print(render_notification(n), file=sys.stderr))

    async with StorefrontClient(args.api_url, cookies=_parse_cookies(args.cookie)) as client:
        if args.command == "store":
            vm = StorePageViewModel(client, args.domain)
            await vm.load()
            print(render_store_page(vm))
            return 1 if vm.not_found else 0

        if args.command == "layout":
            vm = StoreLayoutViewModel(client, args.domain)
            await vm.load()
            print(render_layout(vm))
            return 1 if vm.not_found else 0

        if args.command == "products":
            vm = ProductListViewModel(client, args.domain)
            await vm.load()
            vm.search = args.search
            print(render_product_list(vm))
            return 0

        if args.command == "product":
            vm = ProductDetailViewModel(client, args.domain, args.product_id)
            await vm.load()
            if args.variant and not vm.select_variant(args.variant):
                logger.warning("Unknown variant %r", args.variant)
            print(render_product_detail(vm))
            return 1 if vm.not_found else 0

        if args.command == "contact":
            vm = ContactViewModel(client, args.domain, notifier=notifier)
            await vm.load()
            if vm.not_found:
                print(render_contact(vm))
                return 1
            ok = await vm.submit(args.name, args.email, args.subject, args.message)
            print(render_contact(vm))
            return 0 if ok else 1

        return await _run_cart_command(args, client, notifier, settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return asyncio.run(run(args))
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
