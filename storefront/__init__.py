"""
Single-process retail catalog.

A store owns departments, departments own priced items, customers collect
item references in a cart, and checkout totals the cart using each item's
pricing policy.
"""

from storefront.pricing import (
    PricingPolicy,
    NoAdjustment,
    PercentageDiscount,
    FixedAmountOff,
)
from storefront.models import Item, ListingEntry, CartLine, Receipt
from storefront.department import Department, DepartmentFactory, DepartmentListing
from storefront.cart import ShoppingCart, Customer
from storefront.store import (
    Store,
    StoreNotInitializedError,
    init_store,
    get_store,
    is_store_initialized,
)

__all__ = [
    "PricingPolicy",
    "NoAdjustment",
    "PercentageDiscount",
    "FixedAmountOff",
    "Item",
    "ListingEntry",
    "CartLine",
    "Receipt",
    "Department",
    "DepartmentFactory",
    "DepartmentListing",
    "ShoppingCart",
    "Customer",
    "Store",
    "StoreNotInitializedError",
    "init_store",
    "get_store",
    "is_store_initialized",
]
