from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from storefront.cart.commands import install_cart
from storefront.cart.host import Document, Element, Window
from storefront.constants import CART_COUNT_ID, CART_ROOT_ID
from storefront.db.sqlite import SqliteBackend


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront-cart", description="Manage the local cart")
    parser.add_argument("--db", default=None, help="SQLite file holding the cart (default: CART_DB_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="print the cart")

    p = sub.add_parser("add", help="add a product given as JSON")
    p.add_argument("product")

    p = sub.add_parser("add-fields", help="add a product from separate fields")
    p.add_argument("--id", required=True)
    p.add_argument("--title", default="")
    p.add_argument("--price", default="0")
    p.add_argument("--thumbnail", default="")

    for name in ("increment", "decrement", "remove"):
        p = sub.add_parser(name)
        p.add_argument("id")

    sub.add_parser("clear", help="empty the cart")
    sub.add_parser("checkout", help="simulated checkout")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    root = Element(CART_ROOT_ID)
    count = Element(CART_COUNT_ID)
    window = Window(Document(root, count), storage=SqliteBackend(args.db), alert=print)
    cart = install_cart(window)

    if args.command == "add":
        cart.add(args.product)
    elif args.command == "add-fields":
        dataset = {"id": args.id, "title": args.title, "price": args.price, "thumbnail": args.thumbnail}
        cart.add_from_element(Element("add-button", dataset=dataset))
    elif args.command == "increment":
        cart.increment(args.id)
    elif args.command == "decrement":
        cart.decrement(args.id)
    elif args.command == "remove":
        cart.remove(args.id)
    elif args.command == "clear":
        cart.clear()
    elif args.command == "checkout":
        cart.checkout()
        return 0

    print(root.inner_html.strip())
    print(f"Items: {count.text_content}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
