"""Unit tests for domain value objects."""

import pytest

from agripos.domain.exceptions import InvalidQuantity, MissingRequiredField, ValidationError
from agripos.domain.model.value_objects import ContactDetails, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(15000)
        assert m.amount == 15000
        assert m.currency == "VND"

    def test_of_factory_from_string(self):
        assert Money.of("120000").amount == 120000

    def test_of_factory_from_whole_float(self):
        assert Money.of(12000.0).amount == 12000

    def test_of_factory_blank_is_zero(self):
        assert Money.of(None) == Money.zero()
        assert Money.of("  ") == Money.zero()

    def test_fractional_dong_rejected(self):
        with pytest.raises(ValidationError, match="whole đồng"):
            Money.of("10.5")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    @pytest.mark.parametrize("raw", ["Infinity", "-inf", "NaN", float("inf")])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Money(1.5)

    def test_addition(self):
        assert Money(10000) + Money(5500) == Money(15500)

    def test_multiplication_by_int(self):
        assert Money(7500) * 3 == Money(22500)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(100) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(10, "VND") + Money(5, "USD")

    def test_str_formatting(self):
        assert str(Money(1250000)) == "1.250.000 ₫"
        assert str(Money(0)) == "0 ₫"

    def test_comparison_operators(self):
        assert Money(5) < Money(10)
        assert Money(10) > Money(5)
        assert Money(10) >= Money(10)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_positive(self):
        assert Quantity(3).value == 3

    @pytest.mark.parametrize("value", [0, -1])
    def test_below_one_rejected(self, value):
        with pytest.raises(InvalidQuantity, match="at least 1"):
            Quantity(value)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantity, match="must be an integer"):
            Quantity(2.0)

    def test_add_delta(self):
        assert Quantity(2) + 1 == Quantity(3)

    def test_add_delta_to_zero_rejected(self):
        with pytest.raises(InvalidQuantity):
            Quantity(1) + -1


# ── ContactDetails ───────────────────────────────────────────────────────────


class TestContactDetails:

    def test_entered_trims_everything(self):
        c = ContactDetails.entered(" 0900000001 ", " Nguyen A ", " Tien Lien ", " Thon 3 ", " ngo 5 ")
        assert c == ContactDetails(
            name="Nguyen A",
            phone="0900000001",
            commune="Tien Lien",
            village="Thon 3",
            address_detail="ngo 5",
        )

    def test_phone_keeps_inner_formatting(self):
        c = ContactDetails.entered("0900 000 001", "A")
        assert c.phone == "0900 000 001"

    def test_missing_phone(self):
        with pytest.raises(MissingRequiredField, match="phone") as exc_info:
            ContactDetails.entered("   ", "Nguyen A")
        assert exc_info.value.field == "phone"

    def test_missing_name(self):
        with pytest.raises(MissingRequiredField, match="name"):
            ContactDetails.entered("0900000001", None)

    def test_optional_fields_default_blank(self):
        c = ContactDetails.entered("0900000001", "A", None, None, None)
        assert (c.commune, c.village, c.address_detail) == ("", "", "")
