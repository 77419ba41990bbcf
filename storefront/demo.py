"""
Console walkthrough of the store.

Stocks the store from a catalog seed, prints each department listing, lets
the seed's customers walk in and fill their carts, then checks every customer
out and prints the receipts.
"""

import logging
from typing import Callable, Optional

from storefront.department import DepartmentFactory
from storefront.event_bus import Event
from storefront.events import EventTypes
from storefront.models import Receipt
from storefront.seed import DEFAULT_SEED, CatalogSeed, build_catalog, seat_customers
from storefront.store import Store, init_store
from storefront.templates import render_customer_entered, render_listing, render_receipt

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr with the store's log format."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def run_store_demo(
    seed: Optional[CatalogSeed] = None,
    store: Optional[Store] = None,
    out: Callable[[str], None] = print,
) -> list[Receipt]:
    """
    Run the walkthrough and return one receipt per customer.

    Args:
        seed: Catalog to stock; defaults to ``DEFAULT_SEED``
        store: Store to use; defaults to the process-wide store, initialized
               with the seed's store name if nobody has done so yet
        out: Where console lines go
    """
    seed = seed or DEFAULT_SEED
    store = store or init_store(seed.store_name)

    departments = build_catalog(store, seed, DepartmentFactory())
    for department in departments:
        out(render_listing(department.list_items()))
        out("")

    def announce(event: Event) -> None:
        out(render_customer_entered(**event.payload))

    store.event_bus.subscribe(EventTypes.CUSTOMER_ENTERED, announce)
    try:
        customers = seat_customers(store, seed)
    finally:
        store.event_bus.unsubscribe(EventTypes.CUSTOMER_ENTERED, announce)

    receipts = []
    for customer in customers:
        receipt = store.checkout(customer)
        out(render_receipt(receipt))
        receipts.append(receipt)
    return receipts
