"""
Console text for listings, arrivals and receipts.

Templates are plain strings with {variable} placeholders. Only the data they
show (names, prices, totals and their order) matters; the wording can change
freely.
"""

from dataclasses import dataclass
from typing import Iterable

from storefront.department import DepartmentListing
from storefront.models import Receipt


@dataclass
class TextTemplate:
    """A block of text: a header, one line per row and a footer."""
    header: str
    row: str
    footer: str = ""

    def render(self, rows: Iterable[dict], **kwargs) -> str:
        lines = [self.header.format(**kwargs)]
        lines.extend(self.row.format(**row) for row in rows)
        if self.footer:
            lines.append(self.footer.format(**kwargs))
        return "\n".join(lines)


LISTING_TEMPLATE = TextTemplate(
    header="Items in {department_name} department",
    row="{index} {name} price {effective_price:.2f}",
)

RECEIPT_TEMPLATE = TextTemplate(
    header="Checkout for {customer_name}",
    row="{name} price {effective_price:.2f}",
    footer="Total {total:.2f}",
)

CUSTOMER_ENTERED_TEMPLATE = "{customer_name} entered store {store_name}"


def render_listing(listing: DepartmentListing) -> str:
    """Render a department listing, one ``index name price`` row per item."""
    return LISTING_TEMPLATE.render(
        (entry.model_dump() for entry in listing),
        department_name=listing.department_name,
    )


def render_receipt(receipt: Receipt) -> str:
    """Render a receipt: customer header, the cart lines, then the grand total."""
    return RECEIPT_TEMPLATE.render(
        (line.model_dump() for line in receipt.lines),
        customer_name=receipt.customer_name,
        total=receipt.total,
    )


def render_customer_entered(customer_name: str, store_name: str) -> str:
    return CUSTOMER_ENTERED_TEMPLATE.format(
        customer_name=customer_name,
        store_name=store_name,
    )
