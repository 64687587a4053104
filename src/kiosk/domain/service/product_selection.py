"""Domain service: resolving and filtering catalog products.

Both functions are pure: they work on a snapshot of catalog entries
already fetched by a repository and never touch storage themselves.
"""

from __future__ import annotations

from collections.abc import Iterable

from kiosk.domain.model.product import Product, ProductSellingStatus


def select_products(
    catalog_entries: Iterable[Product],
    product_numbers: Iterable[str],
) -> list[Product]:
    """Resolve requested product numbers to catalog products.

    Rules:
    - Each distinct requested number yields at most one product, the
      first one met while scanning *catalog_entries* (the catalog may
      hold several entries with the same number).
    - Repeating a number in the request does not repeat the product.
    - Numbers with no catalog entry are left out; that is not an error.
    - The result follows catalog order, not request order.
    """
    wanted = set(product_numbers)
    selected: list[Product] = []
    for product in catalog_entries:
        if product.product_number in wanted:
            selected.append(product)
            wanted.discard(product.product_number)
    return selected


def filter_by_selling_status(
    products: Iterable[Product],
    statuses: Iterable[ProductSellingStatus],
) -> list[Product]:
    """Keep products whose selling status is one of *statuses*, in storage order."""
    allowed = frozenset(statuses)
    return [product for product in products if product.selling_status in allowed]
