"""Input checks shared by the listing and message use cases."""
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from src.application.errors import InvalidRequestError
from src.domain.enums.listing_category import ListingCategory


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(values: dict[str, Any], required: tuple[str, ...]) -> None:
    """Raise InvalidRequestError naming every required field if any is missing or blank."""
    if any(is_blank(values.get(name)) for name in required):
        raise InvalidRequestError(f"Missing required fields ({', '.join(required)}).")


def parse_uuid(value: str | UUID | None) -> UUID | None:
    """Return the UUID, or None when the value cannot identify any row."""
    if isinstance(value, UUID):
        return value
    if value is None:
        return None
    try:
        return UUID(str(value).strip())
    except ValueError:
        return None


PRICE_MAX_INTEGER_DIGITS = 10
PRICE_MAX_DECIMAL_PLACES = 2


def parse_price(value: Any) -> Decimal:
    """Parse a price that fits the NUMERIC(12, 2) column without rounding."""
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidRequestError("price must be a number.")
    if not price.is_finite() or price < 0:
        raise InvalidRequestError("price must be a non-negative number.")
    if price.normalize().as_tuple().exponent < -PRICE_MAX_DECIMAL_PLACES:
        raise InvalidRequestError(
            f"price must have at most {PRICE_MAX_DECIMAL_PLACES} decimal places."
        )
    if price != 0 and price.adjusted() >= PRICE_MAX_INTEGER_DIGITS:
        raise InvalidRequestError(
            f"price must be less than 10^{PRICE_MAX_INTEGER_DIGITS}."
        )
    return price


def parse_category(value: Any) -> ListingCategory:
    try:
        return ListingCategory(str(value).strip())
    except ValueError:
        raise InvalidRequestError(
            f"category must be one of: {', '.join(ListingCategory.values())}."
        )


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
