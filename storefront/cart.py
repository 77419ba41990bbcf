"""
Shopping carts and the customers who hold them.

A cart keeps references to items that stay owned by their departments. It
never copies an item, so cart totals always reflect the item's current price.
"""

import logging
from typing import Optional

from storefront.models import CartLine, Item

logger = logging.getLogger("cart")


class ShoppingCart:
    """Ordered collection of item references."""

    def __init__(self):
        self._entries: list[Item] = []

    def add(self, item: Optional[Item]) -> None:
        """
        Append an item reference.

        ``None`` is ignored, so the result of a failed department lookup can be
        passed straight in. Adding the same item twice counts it twice.
        """
        if item is None:
            logger.debug("Ignoring empty item reference")
            return
        self._entries.append(item)

    def total(self) -> float:
        """Sum of effective prices, recomputed on every call."""
        return sum((item.effective_price() for item in self._entries), 0.0)

    def lines(self) -> list[CartLine]:
        """Cart contents as ``(name, effective_price)`` lines in insertion order."""
        return [
            CartLine(name=item.name, effective_price=item.effective_price())
            for item in self._entries
        ]

    def items(self) -> list[Item]:
        """Copy of the item references held by the cart."""
        return list(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)


class Customer:
    """
    A shopper with exactly one cart.

    The cart is created with the customer and is never replaced.
    """

    def __init__(self, name: str):
        self.name = name
        self._cart = ShoppingCart()

    @property
    def cart(self) -> ShoppingCart:
        return self._cart

    def add_to_cart(self, item: Optional[Item]) -> None:
        self._cart.add(item)

    def __repr__(self) -> str:
        return f"Customer(name={self.name!r}, cart_items={len(self._cart)})"
