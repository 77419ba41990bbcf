"""
Tests for console text rendering.
"""

from storefront.department import Department
from storefront.models import CartLine, Receipt
from storefront.templates import (
    TextTemplate,
    render_customer_entered,
    render_listing,
    render_receipt,
)


class TestTextTemplate:
    """Tests for TextTemplate."""

    def test_render_with_footer(self):
        template = TextTemplate(header="Hi {who}", row="- {x}", footer="Bye {who}")

        text = template.render([{"x": 1}, {"x": 2}], who="Alice")

        assert text == "Hi Alice\n- 1\n- 2\nBye Alice"

    def test_render_without_rows(self):
        assert TextTemplate(header="Empty", row="{x}").render([]) == "Empty"


class TestRendering:
    """Tests for the store's text output."""

    def test_listing(self, books: Department):
        assert render_listing(books.list_items()) == (
            "Items in Books department\n"
            "0 C plus plus Basics price 40.00\n"
            "1 Data Structures Book price 50.00"
        )

    def test_listing_shows_discounted_price(self, music: Department):
        assert "0 Greatest Hits Album price 27.00" in render_listing(music.list_items())

    def test_customer_entered(self):
        assert render_customer_entered("Alice", "Online Store") == "Alice entered store Online Store"

    def test_receipt(self):
        receipt = Receipt(
            store_name="Online Store",
            customer_name="Alice",
            lines=[
                CartLine(name="C plus plus Basics", effective_price=40.0),
                CartLine(name="Greatest Hits Album", effective_price=27.0),
            ],
            total=67.0,
        )

        lines = render_receipt(receipt).splitlines()

        assert lines[0] == "Checkout for Alice"
        assert lines[1:3] == [
            "C plus plus Basics price 40.00",
            "Greatest Hits Album price 27.00",
        ]
        assert lines[-1] == "Total 67.00"
