"""
The store: registry of departments and customers, and checkout.

A ``Store`` is an ordinary object so it can be built and tested in isolation
and handed to whatever needs it. The process-wide store is managed by
``init_store`` / ``get_store``:

- Uninitialized until ``init_store`` is first called
- Initialized from then on; later ``init_store`` calls return the existing
  store and ignore the name they were given
- There is no teardown; the store lives until the process exits
"""

import logging
from typing import Optional

from storefront.cart import Customer
from storefront.department import Department
from storefront.event_bus import EventBus, get_event_bus
from storefront.events import checkout_completed, customer_entered, department_added
from storefront.models import Receipt

logger = logging.getLogger("store")


class StoreNotInitializedError(RuntimeError):
    """Raised when the process-wide store is requested before ``init_store``."""


class Store:
    """
    Owns departments and tracks which customers are present.

    Departments live as long as the store. Customers are only tracked: whoever
    created a customer keeps managing it.
    """

    def __init__(self, name: str, event_bus: Optional[EventBus] = None):
        self.name = name
        self.event_bus = event_bus or get_event_bus()
        self._departments: list[Department] = []
        self._customers: list[Customer] = []

    # =========================================================================
    # Departments
    # =========================================================================

    def add_department(self, department: Department) -> None:
        self._departments.append(department)
        logger.info(f"Department {department.name} added to {self.name}")
        self.event_bus.publish(department_added(
            store_name=self.name,
            department_name=department.name,
            item_count=department.item_count,
        ))

    def departments(self) -> list[Department]:
        """Departments in the order they were added."""
        return list(self._departments)

    def find_department(self, name: str) -> Optional[Department]:
        """First department called ``name``, or None."""
        for department in self._departments:
            if department.name == name:
                return department
        return None

    # =========================================================================
    # Customers
    # =========================================================================

    def add_customer(self, customer: Customer) -> None:
        """Register a customer as present and announce it."""
        self._customers.append(customer)
        logger.info(f"{customer.name} entered store {self.name}")
        self.event_bus.publish(customer_entered(
            store_name=self.name,
            customer_name=customer.name,
        ))

    def customers(self) -> list[Customer]:
        """Customers in the order they entered."""
        return list(self._customers)

    # =========================================================================
    # Checkout
    # =========================================================================

    def checkout(self, customer: Customer) -> Receipt:
        """
        Report a customer's cart contents and total.

        Read-only: the cart is left as it is and no stock is taken from any
        department. The receipt is returned and also published as a
        CheckoutCompleted event.
        """
        cart = customer.cart
        receipt = Receipt(
            store_name=self.name,
            customer_name=customer.name,
            lines=cart.lines(),
            total=cart.total(),
        )
        logger.info(
            f"Checkout for {customer.name}: "
            f"{receipt.item_count} items, total {receipt.total:.2f}"
        )
        self.event_bus.publish(checkout_completed(receipt))
        return receipt

    def __repr__(self) -> str:
        return (
            f"Store(name={self.name!r}, departments={len(self._departments)}, "
            f"customers={len(self._customers)})"
        )


# Process-wide store; see init_store
_process_store: Optional[Store] = None


def init_store(name: str, event_bus: Optional[EventBus] = None) -> Store:
    """
    Initialize the process-wide store and return it.

    Only the first call creates the store. Later calls return it unchanged,
    even when they pass a different name.
    """
    global _process_store
    if _process_store is None:
        _process_store = Store(name, event_bus=event_bus)
        logger.info(f"Store {name} initialized")
    elif name != _process_store.name:
        logger.warning(
            f"Store already initialized as {_process_store.name}; ignoring name {name}"
        )
    return _process_store


def get_store() -> Store:
    """
    Return the process-wide store.

    Raises:
        StoreNotInitializedError: if ``init_store`` has not been called yet
    """
    if _process_store is None:
        raise StoreNotInitializedError("init_store() must be called before get_store()")
    return _process_store


def is_store_initialized() -> bool:
    return _process_store is not None
