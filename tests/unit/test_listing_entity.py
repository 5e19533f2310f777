"""Unit tests for the Listing entity and the shared input checks."""
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from src.application.errors import InvalidRequestError
from src.application.validation import (
    is_blank,
    parse_category,
    parse_price,
    parse_uuid,
    require_fields,
)
from src.domain.entities.listing import UPDATABLE_FIELDS, Listing, ListingDraft
from src.domain.enums.listing_category import ListingCategory


def _make_draft(**overrides) -> ListingDraft:  # type: ignore[no-untyped-def]
    defaults = dict(
        title="Desk",
        price=Decimal("50"),
        category=ListingCategory.HOME_GOODS,
        seller_email="a@x.com",
    )
    defaults.update(overrides)
    return ListingDraft(**defaults)  # type: ignore[arg-type]


class TestListing:
    def test_from_draft_copies_fields(self) -> None:
        listing = Listing.from_draft(_make_draft(location="Leeds"))
        assert listing.title == "Desk"
        assert listing.location == "Leeds"
        assert listing.seller_email == "a@x.com"
        assert listing.created_at == listing.updated_at

    def test_from_draft_assigns_a_fresh_id(self) -> None:
        draft = _make_draft()
        assert Listing.from_draft(draft).id != Listing.from_draft(draft).id

    def test_storage_owned_columns_are_not_updatable(self) -> None:
        assert UPDATABLE_FIELDS.isdisjoint({"id", "seller_email", "created_at", "updated_at"})


class TestValidation:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values(self, value: object) -> None:
        assert is_blank(value) is True

    @pytest.mark.parametrize("value", [0, Decimal("0"), "x", False])
    def test_present_values(self, value: object) -> None:
        assert is_blank(value) is False

    def test_require_fields_names_every_required_field(self) -> None:
        with pytest.raises(InvalidRequestError) as exc_info:
            require_fields({"a": "x"}, ("a", "b", "c"))
        assert exc_info.value.message == "Missing required fields (a, b, c)."

    def test_require_fields_accepts_complete_input(self) -> None:
        require_fields({"a": "x", "b": 0}, ("a", "b"))

    def test_parse_price(self) -> None:
        assert parse_price("12.50") == Decimal("12.50")
        assert parse_price(0) == Decimal("0")

    def test_parse_price_accepts_the_column_bounds(self) -> None:
        assert parse_price("9999999999.99") == Decimal("9999999999.99")
        assert parse_price("50.000") == Decimal("50.000")

    @pytest.mark.parametrize("value", ["49.999", "0.001", "10000000000", "1e11"])
    def test_parse_price_rejects_values_the_column_would_round_or_overflow(
        self, value: str
    ) -> None:
        with pytest.raises(InvalidRequestError, match="price"):
            parse_price(value)

    @pytest.mark.parametrize("value", ["-0.01", "abc", "NaN", "Infinity"])
    def test_parse_price_rejects(self, value: str) -> None:
        with pytest.raises(InvalidRequestError):
            parse_price(value)

    def test_parse_category(self) -> None:
        assert parse_category("vehicles") is ListingCategory.VEHICLES

    def test_parse_category_lists_allowed_values(self) -> None:
        with pytest.raises(InvalidRequestError, match="home-goods"):
            parse_category("boats")

    def test_parse_uuid(self) -> None:
        value = uuid4()
        assert parse_uuid(str(value)) == value
        assert parse_uuid(value) is value
        assert parse_uuid("nope") is None
        assert parse_uuid(None) is None
        assert isinstance(parse_uuid(f" {value} "), UUID)
