"""
Store event definitions.

Events are named in the past tense and carry everything a subscriber needs,
so nobody has to reach back into the store to make sense of them.
"""

from storefront.event_bus import Event
from storefront.models import Receipt

STORE_SOURCE = "store"


class EventTypes:
    """Constants for event type names."""
    DEPARTMENT_ADDED = "DepartmentAdded"
    CUSTOMER_ENTERED = "CustomerEntered"
    CHECKOUT_COMPLETED = "CheckoutCompleted"


def department_added(
    store_name: str,
    department_name: str,
    item_count: int,
    source: str = STORE_SOURCE,
) -> Event:
    """Create a DepartmentAdded event."""
    return Event(
        event_type=EventTypes.DEPARTMENT_ADDED,
        source=source,
        payload={
            "store_name": store_name,
            "department_name": department_name,
            "item_count": item_count,
        },
    )


def customer_entered(
    store_name: str,
    customer_name: str,
    source: str = STORE_SOURCE,
) -> Event:
    """
    Create a CustomerEntered event.

    Published when a customer is registered as present in the store.
    """
    return Event(
        event_type=EventTypes.CUSTOMER_ENTERED,
        source=source,
        payload={
            "store_name": store_name,
            "customer_name": customer_name,
        },
    )


def checkout_completed(receipt: Receipt, source: str = STORE_SOURCE) -> Event:
    """
    Create a CheckoutCompleted event.

    The payload is the receipt itself, dumped to plain values.
    """
    return Event(
        event_type=EventTypes.CHECKOUT_COMPLETED,
        source=source,
        payload=receipt.model_dump(),
    )
