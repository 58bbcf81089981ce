"""Unit tests for the Product aggregate and its parts."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from catalog.domain.exceptions import InsufficientStockError, ValidationError
from catalog.domain.model.product import Discount, Product, ProductDetails
from catalog.domain.model.value_objects import Money, Quantity

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def _details(**overrides) -> ProductDetails:
    fields = dict(
        name="Widget",
        organization_id=1,
        price=Money.of("15.00"),
        quantity_in_stock=10,
    )
    fields.update(overrides)
    return ProductDetails(**fields)


class TestProductDetails:

    def test_name_is_stripped(self):
        assert _details(name="  Widget  ").name == "Widget"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _details(name="   ")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _details(quantity_in_stock=-1)

    def test_zero_stock_allowed(self):
        assert _details(quantity_in_stock=0).quantity_in_stock == 0

    def test_tags_deduplicated(self):
        details = _details(tags=["red", "red", "blue"])
        assert details.tags == frozenset({"red", "blue"})

    def test_blank_tag_rejected(self):
        with pytest.raises(ValidationError, match="Tags"):
            _details(tags=["ok", " "])

    def test_blank_spec_key_rejected(self):
        with pytest.raises(ValidationError, match="Spec names"):
            _details(specs={"": "x"})

    def test_non_string_spec_value_rejected(self):
        with pytest.raises(ValidationError, match="string value"):
            _details(specs={"weight": 5})

    def test_specs_are_copied(self):
        specs = {"color": "red"}
        details = _details(specs=specs)
        specs["color"] = "blue"
        assert details.specs == {"color": "red"}

    def test_equal_by_value(self):
        assert _details(tags={"a"}, specs={"k": "v"}) == _details(tags=["a"], specs={"k": "v"})


class TestDiscount:

    def test_active_inside_window(self):
        d = Discount(Decimal("0.9"), NOW - timedelta(hours=1), NOW + timedelta(hours=1))
        assert d.is_active(NOW)

    def test_active_from_start_instant(self):
        d = Discount(Decimal("0.9"), NOW, NOW + timedelta(hours=1))
        assert d.is_active(NOW)

    def test_inactive_at_end_instant(self):
        d = Discount(Decimal("0.9"), NOW - timedelta(hours=1), NOW)
        assert not d.is_active(NOW)

    def test_inactive_before_start(self):
        d = Discount(Decimal("0.9"), NOW + timedelta(minutes=1))
        assert not d.is_active(NOW)

    def test_open_ended(self):
        d = Discount(Decimal("0.9"), NOW - timedelta(days=365))
        assert d.is_active(NOW + timedelta(days=365))

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError, match="end after it starts"):
            Discount(Decimal("0.9"), NOW, NOW - timedelta(seconds=1))

    def test_negative_modifier_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Discount(Decimal("-0.1"), NOW)

    def test_naive_times_rejected(self):
        with pytest.raises(ValidationError, match="timezone-aware"):
            Discount(Decimal("0.9"), datetime(2026, 10, 17, 12, 0))
        with pytest.raises(ValidationError, match="timezone-aware"):
            Discount(Decimal("0.9"), NOW, datetime(2026, 10, 18))


class TestProductStock:

    def test_reserve_reduces_stock(self):
        p = Product(id=1, details=_details(quantity_in_stock=10))
        p.reserve(Quantity(3))
        assert p.quantity_in_stock == 7

    def test_reserve_all_stock(self):
        p = Product(id=1, details=_details(quantity_in_stock=10))
        p.reserve(Quantity(10))
        assert p.quantity_in_stock == 0

    def test_reserve_more_than_stock_rejected(self):
        p = Product(id=1, details=_details(quantity_in_stock=10))
        with pytest.raises(InsufficientStockError) as exc_info:
            p.reserve(Quantity(11))
        assert exc_info.value.available == 10
        assert exc_info.value.requested == 11
        assert p.quantity_in_stock == 10

    def test_restock_has_no_upper_bound(self):
        p = Product(id=1, details=_details(quantity_in_stock=10))
        p.restock(Quantity(1_000_000))
        assert p.quantity_in_stock == 1_000_010

    def test_stock_never_negative_over_a_sequence(self):
        p = Product(id=1, details=_details(quantity_in_stock=5))
        for qty in [2, 4, 3, 1, 1, 2]:
            try:
                p.reserve(Quantity(qty))
            except InsufficientStockError:
                p.restock(Quantity(qty))
            assert p.quantity_in_stock >= 0


class TestProductApplyDetails:

    def test_replaces_tags_and_specs_wholesale(self):
        p = Product(id=1, details=_details(tags={"a", "b"}, specs={"x": "1", "y": "2"}))
        p.apply_details(_details(tags={"c"}, specs={"z": "3"}))
        assert p.details.tags == frozenset({"c"})
        assert p.details.specs == {"z": "3"}

    def test_keeps_discounts(self):
        discount = Discount(Decimal("0.5"), NOW)
        p = Product(id=1, details=_details(), discounts=[discount])
        p.apply_details(_details(name="Renamed"))
        assert p.discounts == [discount]
        assert p.name == "Renamed"
