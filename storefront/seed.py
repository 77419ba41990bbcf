"""
Catalog seed data: what the store stocks and who shops there.

A seed describes a store's departments, the items in them, the pricing
policies those items use and the customers who fill carts. It can be written
as JSON and loaded with ``load_seed``; ``DEFAULT_SEED`` is the built-in
catalog used by the demo.

Design decisions:
- Policies are declared once by name and shared by every item that names
  them, so ten discounted items hold one policy instance
- Cart entries point at items by department name and index, the same way a
  shopper picks from a department listing
- Seeds are validated with Pydantic before anything is built
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from storefront.cart import Customer
from storefront.department import Department, DepartmentFactory
from storefront.models import Item
from storefront.pricing import AnyPricingPolicy, PricingPolicy
from storefront.store import Store

logger = logging.getLogger("seed")


class SeedError(ValueError):
    """A seed refers to a policy or department it does not define."""


class ItemSeed(BaseModel):
    name: str
    base_price: float
    policy: Optional[str] = Field(default=None, description="Name of a policy in CatalogSeed.policies")


class DepartmentSeed(BaseModel):
    name: str
    items: list[ItemSeed] = Field(default_factory=list)


class CartEntrySeed(BaseModel):
    """An item picked from a department listing by position."""
    department: str
    index: int


class CustomerSeed(BaseModel):
    name: str
    cart: list[CartEntrySeed] = Field(default_factory=list)


class CatalogSeed(BaseModel):
    """Everything needed to stock a store and seat its customers."""
    store_name: str = "Online Store"
    policies: dict[str, AnyPricingPolicy] = Field(default_factory=dict)
    departments: list[DepartmentSeed] = Field(default_factory=list)
    customers: list[CustomerSeed] = Field(default_factory=list)


DEFAULT_SEED = CatalogSeed.model_validate({
    "store_name": "Online Store",
    "policies": {
        "regular": {"kind": "none"},
        "discount": {"kind": "percentage", "fraction": 0.10},
    },
    "departments": [
        {
            "name": "Books",
            "items": [
                {"name": "C plus plus Basics", "base_price": 40.0, "policy": "regular"},
                {"name": "Data Structures Book", "base_price": 50.0, "policy": "regular"},
            ],
        },
        {
            "name": "Music",
            "items": [
                {"name": "Greatest Hits Album", "base_price": 30.0, "policy": "discount"},
            ],
        },
    ],
    "customers": [
        {
            "name": "Alice",
            "cart": [
                {"department": "Books", "index": 0},
                {"department": "Books", "index": 1},
                {"department": "Music", "index": 0},
            ],
        },
    ],
})


def load_seed(path: Path) -> CatalogSeed:
    """
    Load a catalog seed from a JSON file.

    Raises:
        FileNotFoundError: if ``path`` does not exist
        OSError: if ``path`` cannot be read, e.g. it is a directory
        pydantic.ValidationError: if the file is not UTF-8 JSON describing a
            valid seed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog seed not found: {path}")
    logger.info(f"Loading catalog seed from {path}")
    return CatalogSeed.model_validate_json(path.read_bytes())


def _resolve_policy(seed: CatalogSeed, name: Optional[str]) -> Optional[PricingPolicy]:
    if name is None:
        return None
    try:
        return seed.policies[name]
    except KeyError:
        raise SeedError(f"Unknown pricing policy: {name}") from None


def build_catalog(
    store: Store,
    seed: CatalogSeed,
    factory: Optional[DepartmentFactory] = None,
) -> list[Department]:
    """
    Create the seed's departments and items and register them with ``store``.

    Every department is fully stocked before any is registered, so a bad
    item or policy leaves the store untouched. Returns the departments in
    seed order.
    """
    factory = factory or DepartmentFactory()
    departments = []
    for department_seed in seed.departments:
        department = factory.create(department_seed.name)
        for item_seed in department_seed.items:
            department.add_item(
                item_seed.name,
                item_seed.base_price,
                _resolve_policy(seed, item_seed.policy),
            )
        departments.append(department)

    for department in departments:
        store.add_department(department)

    logger.info(f"Stocked {len(departments)} departments in {store.name}")
    return departments


def _pick_items(store: Store, customer_seed: CustomerSeed) -> list[Optional[Item]]:
    picks = []
    for entry in customer_seed.cart:
        department = store.find_department(entry.department)
        if department is None:
            raise SeedError(f"Unknown department: {entry.department}")
        item = department.item_at(entry.index)
        if item is None:
            logger.warning(
                f"No item at index {entry.index} in {department.name}; "
                f"nothing added for {customer_seed.name}"
            )
        picks.append(item)
    return picks


def seat_customers(store: Store, seed: CatalogSeed) -> list[Customer]:
    """
    Register the seed's customers with ``store`` and fill their carts.

    All cart entries are resolved before the first customer enters, so an
    unknown department leaves the store untouched. An index outside a
    department's range picks nothing; the cart ignores it.
    """
    picks_by_customer = [
        (customer_seed, _pick_items(store, customer_seed))
        for customer_seed in seed.customers
    ]

    customers = []
    for customer_seed, picks in picks_by_customer:
        customer = Customer(customer_seed.name)
        store.add_customer(customer)
        for item in picks:
            customer.add_to_cart(item)
        customers.append(customer)
    return customers
