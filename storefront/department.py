"""
Departments and the factory that creates them.

A department owns an ordered, append-only list of items. Positions never
change once an item is added, so an index handed out in a listing stays valid
for the lifetime of the department.
"""

import logging
from typing import Iterator, Optional

from storefront.models import Item, ListingEntry
from storefront.pricing import PricingPolicy

logger = logging.getLogger("department")


class DepartmentListing:
    """
    Read-only view of a department's items as ``ListingEntry`` rows.

    The item sequence is captured when the listing is created. Iterating is
    lazy and can be repeated; each pass recomputes effective prices.
    """

    def __init__(self, department_name: str, items: tuple[Item, ...]):
        self.department_name = department_name
        self._items = items

    def __iter__(self) -> Iterator[ListingEntry]:
        for index, item in enumerate(self._items):
            yield ListingEntry(
                index=index,
                name=item.name,
                effective_price=item.effective_price(),
            )

    def __len__(self) -> int:
        return len(self._items)


class Department:
    """
    A named group of catalog items.

    Example:
        books = Department("Books")
        basics = books.add_item("C plus plus Basics", 40.0)
        assert books.item_at(0) is basics
        assert books.item_at(1) is None
    """

    def __init__(self, name: str):
        self.name = name
        self._items: list[Item] = []

    def add_item(
        self,
        name: str,
        base_price: float,
        policy: Optional[PricingPolicy] = None,
    ) -> Item:
        """
        Create an item, append it to this department and return it.

        Raises:
            pydantic.ValidationError: if ``base_price`` is negative
        """
        item = Item(name=name, base_price=base_price, policy=policy)
        self._items.append(item)
        logger.debug(f"Added '{name}' to {self.name} at index {len(self._items) - 1}")
        return item

    def list_items(self) -> DepartmentListing:
        """Listing of ``(index, name, effective_price)`` rows in insertion order."""
        return DepartmentListing(self.name, tuple(self._items))

    def item_at(self, index: int) -> Optional[Item]:
        """
        Look up an item by position.

        Returns None for any index outside ``[0, item_count)``. Negative
        indices do not wrap around.
        """
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    @property
    def item_count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Department(name={self.name!r}, items={len(self._items)})"


class DepartmentFactory:
    """
    Creates departments.

    Call sites ask the factory rather than the class so the kind of
    department built can be changed in one place.
    """

    def __init__(self, department_cls: type[Department] = Department):
        self.department_cls = department_cls

    def create(self, name: str) -> Department:
        return self.department_cls(name)
