"""
Pricing policies for catalog items.

A pricing policy maps an item's base price to the price a customer pays.
Items hold a reference to a policy; the cart and the store only ever ask the
item for its effective price, so no caller needs to know which policy is bound.

Design decisions:
- Policies are frozen Pydantic models, so parameters are validated once at
  construction and can never drift afterwards
- Out-of-range parameters are rejected, never clamped
- Each variant carries a ``kind`` tag so catalogs can be loaded from JSON
- One policy instance may be shared by any number of items
"""

from abc import abstractmethod
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PricingPolicy(BaseModel):
    """
    Base class for all pricing policies.

    Subclasses implement ``apply``. It must be pure and must never return a
    negative price for a non-negative base price.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def apply(self, base_price: float) -> float:
        """Return the final price for ``base_price``."""


class NoAdjustment(PricingPolicy):
    """Regular pricing: the base price is charged as-is."""

    kind: Literal["none"] = "none"

    def apply(self, base_price: float) -> float:
        return base_price


class PercentageDiscount(PricingPolicy):
    """
    Percentage off the base price.

    ``fraction`` is the share taken off, e.g. 0.10 for 10% off. A fraction of
    1 or more would make items free or negatively priced and is rejected.
    """

    kind: Literal["percentage"] = "percentage"
    fraction: float = Field(..., ge=0, lt=1, description="Share of the base price taken off")

    def apply(self, base_price: float) -> float:
        return base_price * (1 - self.fraction)


class FixedAmountOff(PricingPolicy):
    """Flat amount off the base price, floored at zero."""

    kind: Literal["fixed"] = "fixed"
    amount: float = Field(..., ge=0, description="Amount subtracted from the base price")

    def apply(self, base_price: float) -> float:
        return max(base_price - self.amount, 0.0)


# Used where policies are parsed from data (see storefront.seed)
AnyPricingPolicy = Annotated[
    Union[NoAdjustment, PercentageDiscount, FixedAmountOff],
    Field(discriminator="kind"),
]
