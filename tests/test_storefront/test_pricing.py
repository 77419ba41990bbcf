"""
Tests for pricing policies.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from storefront.pricing import (
    AnyPricingPolicy,
    FixedAmountOff,
    NoAdjustment,
    PercentageDiscount,
    PricingPolicy,
)


class TestNoAdjustment:
    """Tests for regular pricing."""

    @pytest.mark.parametrize("base_price", [0.0, 0.01, 30.0, 1999.99])
    def test_returns_base_price(self, base_price):
        assert NoAdjustment().apply(base_price) == base_price


class TestPercentageDiscount:
    """Tests for percentage discounts."""

    def test_ten_percent_off_thirty(self):
        """Test the 10% off 30.00 scenario."""
        assert PercentageDiscount(fraction=0.10).apply(30.0) == pytest.approx(27.0)

    def test_zero_fraction_is_no_discount(self):
        assert PercentageDiscount(fraction=0.0).apply(45.5) == 45.5

    def test_repeated_calls_do_not_drift(self):
        policy = PercentageDiscount(fraction=0.25)
        prices = {policy.apply(80.0) for _ in range(100)}
        assert prices == {60.0}

    @pytest.mark.parametrize("fraction", [-0.01, -1.0, 1.0, 1.5])
    def test_out_of_range_fraction_rejected(self, fraction):
        with pytest.raises(ValidationError):
            PercentageDiscount(fraction=fraction)

    def test_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            PercentageDiscount(fraction=1.0)

    def test_fraction_is_fixed_after_construction(self):
        policy = PercentageDiscount(fraction=0.10)
        with pytest.raises(ValidationError):
            policy.fraction = 0.5
        assert policy.fraction == 0.10


class TestFixedAmountOff:
    """Tests for flat discounts."""

    def test_subtracts_amount(self):
        assert FixedAmountOff(amount=5.0).apply(30.0) == 25.0

    def test_never_negative(self):
        assert FixedAmountOff(amount=50.0).apply(30.0) == 0.0

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            FixedAmountOff(amount=-1.0)


class TestPolicyBase:
    """Tests for the shared policy interface."""

    def test_base_class_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            PricingPolicy()

    def test_policies_parse_by_kind(self):
        adapter = TypeAdapter(AnyPricingPolicy)

        assert isinstance(adapter.validate_python({"kind": "none"}), NoAdjustment)
        discount = adapter.validate_python({"kind": "percentage", "fraction": 0.2})
        assert isinstance(discount, PercentageDiscount)
        assert discount.fraction == 0.2
        assert isinstance(adapter.validate_python({"kind": "fixed", "amount": 3}), FixedAmountOff)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(AnyPricingPolicy).validate_python({"kind": "tiered"})
