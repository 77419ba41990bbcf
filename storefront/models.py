"""
Catalog value objects.

Items are the priced entries that departments own and carts reference.
The remaining models are read-only projections used for listings and receipts.

Design decisions:
- Using Pydantic for validation (a negative base price is rejected)
- Items are frozen: name, base price and policy are fixed at construction
- The effective price is derived on every read, never stored
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.pricing import PricingPolicy


class Item(BaseModel):
    """
    A named, priced catalog entry.

    The department that created the item owns it. Carts keep references to the
    very same object, so the price a cart reports always follows the item.
    """

    name: str = Field(..., description="Item display name")
    base_price: float = Field(..., ge=0, description="Price before the pricing policy")
    policy: Optional[PricingPolicy] = Field(
        default=None,
        description="Pricing policy; no policy means the base price is charged",
    )

    model_config = ConfigDict(frozen=True)

    def effective_price(self) -> float:
        """Price after the bound policy is applied."""
        if self.policy is None:
            return self.base_price
        return self.policy.apply(self.base_price)


class ListingEntry(BaseModel):
    """One row of a department listing."""
    index: int
    name: str
    effective_price: float


class CartLine(BaseModel):
    """One line of a cart or receipt."""
    name: str
    effective_price: float


class Receipt(BaseModel):
    """
    Result of a checkout.

    Lines are in the order the items were added to the cart; duplicates
    appear once per add.
    """
    store_name: str
    customer_name: str
    lines: list[CartLine] = Field(default_factory=list)
    total: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def item_count(self) -> int:
        return len(self.lines)
