"""
Shared pytest fixtures for the storefront tests.

Every test gets its own event bus and store, and the process-wide store is
put back to Uninitialized so tests never see each other's state.
"""

import pytest

import storefront.store as store_module
from storefront.cart import Customer
from storefront.department import Department
from storefront.event_bus import EventBus, reset_event_bus
from storefront.pricing import NoAdjustment, PercentageDiscount
from storefront.store import Store


@pytest.fixture(autouse=True)
def uninitialized_process_store(monkeypatch):
    """Start each test with no process-wide store and a fresh default bus."""
    monkeypatch.setattr(store_module, "_process_store", None)
    reset_event_bus()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def store(event_bus: EventBus) -> Store:
    """Fresh store, not registered as the process-wide one."""
    return Store("Online Store", event_bus=event_bus)


# =============================================================================
# Pricing Fixtures
# =============================================================================

@pytest.fixture
def regular() -> NoAdjustment:
    return NoAdjustment()


@pytest.fixture
def ten_percent_off() -> PercentageDiscount:
    return PercentageDiscount(fraction=0.10)


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def books(regular: NoAdjustment) -> Department:
    """Books department with two regularly priced items (40.00, 50.00)."""
    department = Department("Books")
    department.add_item("C plus plus Basics", 40.0, regular)
    department.add_item("Data Structures Book", 50.0, regular)
    return department


@pytest.fixture
def music(ten_percent_off: PercentageDiscount) -> Department:
    """Music department with one 30.00 album at 10% off."""
    department = Department("Music")
    department.add_item("Greatest Hits Album", 30.0, ten_percent_off)
    return department


@pytest.fixture
def alice() -> Customer:
    return Customer("Alice")
